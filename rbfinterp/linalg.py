"""Implements construction and solution of the dense linear system defining RBF interpolation weights"""

# pylint: disable=not-an-iterable
import numpy as np
from numba import njit, prange

from .kernels import Kernel, kernel_function, euclidean_distance
from .errors import DimensionMismatch, SingularMatrix
from .const import SINGULAR_PIVOT_THRESHOLD


@njit(nogil=True, parallel=True)
def fill_kernel_matrix(points, kernel, epsilon, smoothing):
    """Calculate a matrix of pairwise kernel values between `points` with `smoothing` added to its diagonal. Each
    element is calculated independently, so the result does not depend on the number of threads."""
    n_points = len(points)
    diag_value = kernel_function(kernel, 0.0, epsilon) + smoothing
    matrix = np.empty((n_points, n_points), dtype=np.float64)
    for i in prange(n_points):
        for j in range(n_points):
            if i == j:
                matrix[i, j] = diag_value
            else:
                matrix[i, j] = kernel_function(kernel, euclidean_distance(points[i], points[j]), epsilon)
    return matrix


def build_kernel_matrix(points, kernel, epsilon, smoothing=0):
    """Build the kernel (Gram) matrix of the interpolation system.

    `A[i, j] = phi(||p_i - p_j||)` for `i != j` and `A[i, i] = phi(0) + smoothing`. The matrix is symmetric since
    distances between points are.

    Parameters
    ----------
    points : 2d np.ndarray with shape (n_points, n_dims)
        Training points.
    kernel : str or Kernel
        Radial basis function.
    epsilon : float
        Shape parameter of the kernel.
    smoothing : float, optional, defaults to 0
        Regularization added to the matrix diagonal. 0 results in exact interpolation.

    Returns
    -------
    matrix : 2d np.ndarray with shape (n_points, n_points)
        Kernel matrix.
    """
    points = np.ascontiguousarray(points, dtype=np.float64)
    if points.ndim != 2:
        raise DimensionMismatch("points must have shape (n_points, n_dims)")
    kernel = Kernel.from_name(kernel)
    return fill_kernel_matrix(points, int(kernel), float(epsilon), float(smoothing))


@njit(nogil=True)
def gauss_solve(augmented, threshold):
    """Solve a linear system given by an `augmented` matrix with shape (n, n + 1) inplace by Gaussian elimination with
    partial pivoting.

    Returns the solution and -1 on success. If a pivot magnitude falls below `threshold`, returns an unfinished
    solution and the index of the elimination column being processed."""
    n = augmented.shape[0]
    solution = np.zeros(n, dtype=np.float64)

    # Forward elimination
    for col in range(n):
        # Select the row with the largest absolute value in the current column, the first one wins in case of ties
        pivot_row = col
        for row in range(col + 1, n):
            if abs(augmented[row, col]) > abs(augmented[pivot_row, col]):
                pivot_row = row
        if pivot_row != col:
            for j in range(n + 1):
                augmented[col, j], augmented[pivot_row, j] = augmented[pivot_row, j], augmented[col, j]

        pivot = augmented[col, col]
        if abs(pivot) < threshold:
            return solution, col

        for row in range(col + 1, n):
            factor = augmented[row, col] / pivot
            for j in range(col, n + 1):
                augmented[row, j] -= factor * augmented[col, j]

    # Back substitution
    for i in range(n - 1, -1, -1):
        res = augmented[i, n]
        for j in range(i + 1, n):
            res -= augmented[i, j] * solution[j]
        solution[i] = res / augmented[i, i]
    return solution, -1


def solve_linear_system(matrix, rhs, threshold=SINGULAR_PIVOT_THRESHOLD):
    """Solve `matrix @ x = rhs` by Gaussian elimination with partial pivoting.

    Elimination is performed on a newly allocated augmented matrix, so neither `matrix` nor `rhs` are changed. The
    order of floating point operations is fixed, thus the solution is reproducible bit-for-bit for the same inputs.

    Parameters
    ----------
    matrix : 2d array-like with shape (n, n)
        Square matrix of the system.
    rhs : 1d array-like with shape (n,)
        Right-hand side of the system.
    threshold : float, optional, defaults to 1e-12
        Minimum pivot magnitude. Smaller pivots mean that the matrix is singular or nearly singular.

    Returns
    -------
    solution : 1d np.ndarray with shape (n,)
        Solution of the system.

    Raises
    ------
    DimensionMismatch
        If `matrix` is not square or its size does not match the length of `rhs`.
    SingularMatrix
        If a pivot magnitude falls below `threshold` during elimination.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    rhs = np.asarray(rhs, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionMismatch(f"matrix must be square, got shape {matrix.shape}")
    if rhs.shape != (len(matrix),):
        raise DimensionMismatch(f"rhs must have shape ({len(matrix)},), got {rhs.shape}")

    n = len(matrix)
    augmented = np.empty((n, n + 1), dtype=np.float64)
    augmented[:, :n] = matrix
    augmented[:, n] = rhs
    solution, failed_col = gauss_solve(augmented, float(threshold))
    if failed_col >= 0:
        raise SingularMatrix(failed_col, threshold)
    return solution
