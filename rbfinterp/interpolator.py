"""Implements an RBF interpolator of scattered data in arbitrary dimension.

An interpolant is a weighted sum of radial basis functions centered at training points:
    f(x) = sum_i w_i * phi(||x - p_i||),
where weights `w` are determined once upon interpolator instantiation by solving a dense linear system
    (A + smoothing * I) @ w = values,  A[i, j] = phi(||p_i - p_j||).

An interpolator is immutable: it copies all the passed data and never changes its state after creation. Fitting to new
data requires creating a new instance.
"""

import math
import warnings
from textwrap import dedent

import numpy as np
from numba import njit

from .config import config
from .epsilon import estimate_epsilon
from .errors import EmptyTrainingSet, DimensionMismatch
from .kernels import Kernel, kernel_function, euclidean_distance
from .linalg import build_kernel_matrix, solve_linear_system
from .utils import get_first_defined, freeze, parse_points, parse_point, parse_values


@njit(nogil=True)
def interpolate(queries, points, weights, kernel, epsilon):
    """Evaluate an interpolant defined by `points`, their `weights`, `kernel` code and shape parameter `epsilon` at
    each of `queries`. Summation order is fixed for the result to be reproducible."""
    res = np.empty(len(queries), dtype=np.float64)
    for q in range(len(queries)):
        val = 0.0
        for i in range(len(points)):
            val += weights[i] * kernel_function(kernel, euclidean_distance(queries[q], points[i]), epsilon)
        res[q] = val
    return res


def _parse_smoothing(smoothing):
    """Check that `smoothing` is a non-negative finite number and cast it to `float`."""
    smoothing = float(smoothing)
    if not math.isfinite(smoothing) or smoothing < 0:
        raise ValueError(f"smoothing must be a non-negative finite number, got {smoothing}")
    return smoothing


def _is_auto_epsilon(epsilon):
    """Check whether `epsilon` requests automatic estimation of the shape parameter."""
    if epsilon is None:
        return True
    if isinstance(epsilon, str):
        if epsilon.lower() != "auto":
            raise ValueError(f"epsilon must be a positive number, None or 'auto', got {epsilon}")
        return True
    return False


def _parse_epsilon(epsilon):
    """Check that an explicitly passed `epsilon` is a positive finite number and cast it to `float`."""
    epsilon = float(epsilon)
    if not math.isfinite(epsilon) or epsilon <= 0:
        raise ValueError(f"epsilon must be a positive finite number, got {epsilon}")
    return epsilon


class RBFInterpolator:
    """Construct a radial basis function (RBF) interpolator.

    The interpolator is fitted upon instantiation:
    1. Training points and values are copied and validated.
    2. If `epsilon` is not given, it is estimated as the mean pairwise distance between the first 100 training points.
    3. A kernel matrix of pairwise kernel values between training points is built and `smoothing` is added to its
       diagonal.
    4. The system is solved for interpolation weights by Gaussian elimination with partial pivoting.

    Instantiation either succeeds and returns a fitted interpolator, or raises an error: no partially fitted instance
    is ever created.

    Examples
    --------
    Fit an interpolator and evaluate it at a single point and at several points at once:
    >>> interpolator = RBFInterpolator([[0, 0], [1, 0], [0, 1], [1, 1]], [0, 1, 1, 2], kernel="thin_plate")
    >>> value = interpolator.evaluate([0.5, 0.25])
    >>> values = interpolator.evaluate_many([[0, 0], [0.5, 0.5]])

    Parameters
    ----------
    points : 2d array-like with shape (n_points, n_dims)
        Training points. A 1d array-like of scalars is treated as `n_points` points in a 1d space.
    values : 1d array-like with shape (n_points,)
        Function values at training points.
    kernel : str or Kernel, optional
        Radial basis function. See :mod:`~kernels` for available options. Defaults to `config["default_kernel"]`.
    smoothing : float, optional
        Non-negative regularization added to the kernel matrix diagonal. If 0, the interpolant exactly fits the data.
        Positive values make the interpolant more robust to noise and duplicate points. Defaults to
        `config["default_smoothing"]`.
    epsilon : positive float, None or "auto", optional, defaults to None
        Shape parameter of the kernel. Estimated from training points if `None` or "auto".

    Attributes
    ----------
    points : 2d np.ndarray with shape (n_points, n_dims)
        Read-only copy of training points.
    values : 1d np.ndarray with shape (n_points,)
        Read-only copy of training values.
    weights : 1d np.ndarray with shape (n_points,)
        Read-only interpolation weights.
    kernel : Kernel
        Radial basis function.
    epsilon : float
        Resolved shape parameter.
    smoothing : float
        Regularization parameter.

    Raises
    ------
    EmptyTrainingSet
        If no training points are given.
    DimensionMismatch
        If training points have different number of coordinates or the number of values does not match the number of
        points.
    InvalidKernel
        If the kernel is unknown.
    SingularMatrix
        If the kernel matrix is singular or nearly singular, e.g. due to duplicate points with zero `smoothing`.
    ValueError
        If data is not finite, `smoothing` is negative or explicit `epsilon` is not positive.
    """
    def __init__(self, points, values, kernel=None, smoothing=None, epsilon=None):
        points = parse_points(points)
        if len(points) == 0:
            raise EmptyTrainingSet("At least one training point is required")
        values = parse_values(values, len(points))
        if not (np.isfinite(points).all() and np.isfinite(values).all()):
            raise ValueError("Training points and values must be finite")

        smoothing = _parse_smoothing(get_first_defined(smoothing, config["default_smoothing"]))
        kernel = Kernel.from_name(get_first_defined(kernel, config["default_kernel"]))
        if _is_auto_epsilon(epsilon):
            epsilon = estimate_epsilon(points)
        else:
            epsilon = _parse_epsilon(epsilon)
            if not kernel.uses_epsilon and config["warn_unused_epsilon"]:
                warnings.warn(f"epsilon is ignored by {kernel.kernel_name} kernel", RuntimeWarning)

        matrix = build_kernel_matrix(points, kernel, epsilon, smoothing)
        weights = solve_linear_system(matrix, values)
        self._set_state(points, values, weights, kernel, epsilon, smoothing)

    def _set_state(self, points, values, weights, kernel, epsilon, smoothing):
        """Set the fitted state of the interpolator and make its arrays read-only."""
        self._points = freeze(points)
        self._values = freeze(values)
        self._weights = freeze(weights)
        self._kernel = kernel
        self._epsilon = epsilon
        self._smoothing = smoothing

    @property
    def points(self):
        """2d np.ndarray with shape (n_points, n_dims): Training points."""
        return self._points

    @property
    def values(self):
        """1d np.ndarray with shape (n_points,): Function values at training points."""
        return self._values

    @property
    def weights(self):
        """1d np.ndarray with shape (n_points,): Interpolation weights."""
        return self._weights

    @property
    def kernel(self):
        """Kernel: Radial basis function."""
        return self._kernel

    @property
    def epsilon(self):
        """float: Resolved shape parameter of the kernel."""
        return self._epsilon

    @property
    def smoothing(self):
        """float: Regularization added to the kernel matrix diagonal."""
        return self._smoothing

    @property
    def n_points(self):
        """int: The number of training points."""
        return len(self._points)

    @property
    def ndim(self):
        """int: The number of coordinates of each point."""
        return self._points.shape[1]

    def __str__(self):
        """Print interpolator parameters and information about its training data."""
        msg = f"""
        Kernel:                    {self.kernel.kernel_name}
        Shape parameter (epsilon): {self.epsilon:.6g}
        Smoothing:                 {self.smoothing:.6g}
        Number of points:          {self.n_points}
        Number of dimensions:      {self.ndim}
        Values range:              [{self.values.min():.6g}, {self.values.max():.6g}]
        """
        msg = dedent(msg).strip()

        min_coords = self.points.min(axis=0)
        max_coords = self.points.max(axis=0)
        for i, (min_coord, max_coord) in enumerate(zip(min_coords, max_coords)):
            msg += f"\n{f'Coordinate {i} range:':<27}[{min_coord:.6g}, {max_coord:.6g}]"
        return msg

    def info(self):
        """Print interpolator parameters and information about its training data."""
        print(self)

    def _interpolate(self, queries):
        """Evaluate the interpolant at `queries`. `queries` are guaranteed to be 2-dimensional with shape
        (n_queries, n_dims)."""
        return interpolate(queries, self._points, self._weights, int(self._kernel), self._epsilon)

    def evaluate(self, point):
        """Evaluate the interpolant at a single point.

        Parameters
        ----------
        point : 1d array-like with shape (n_dims,)
            Coordinates to evaluate the interpolant at. A scalar is accepted for a 1d interpolator.

        Returns
        -------
        value : float
            Interpolation result.

        Raises
        ------
        DimensionMismatch
            If the number of coordinates of `point` differs from that of training points.
        """
        point = parse_point(point, self.ndim)
        return float(self._interpolate(point.reshape(1, -1))[0])

    def evaluate_many(self, points):
        """Evaluate the interpolant at each of passed points.

        All points are validated before evaluation: if any of them has an unexpected number of coordinates, an error
        is raised and no results are returned. Otherwise each point is evaluated independently of the others and
        results are identical to those of `evaluate` called for each point separately.

        Parameters
        ----------
        points : 2d array-like with shape (n_queries, n_dims)
            Points to evaluate the interpolant at. A 1d array-like of scalars is accepted for a 1d interpolator.

        Returns
        -------
        values : 1d np.ndarray with shape (n_queries,)
            Interpolation results in the order of `points`.

        Raises
        ------
        DimensionMismatch
            If some point has a number of coordinates different from that of training points. The error message
            contains the index of the first such point.
        """
        return self._interpolate(parse_points(points, ndim=self.ndim))

    def __call__(self, points):
        """Evaluate the interpolant at passed `points`.

        Parameters
        ----------
        points : 1d array-like with shape (n_dims,) or 2d array-like with shape (n_queries, n_dims)
            Coordinates to evaluate the interpolant at.

        Returns
        -------
        values : float or 1d np.ndarray with shape (n_queries,)
            Interpolation results. A scalar is returned for a single point.
        """
        if np.ndim(points) <= 1:
            return self.evaluate(points)
        return self.evaluate_many(points)

    # Persistence

    def to_dict(self):
        """Return a `dict` with copies of all the data required to restore the interpolator without solving the
        interpolation system again."""
        return {
            "kernel": self.kernel.kernel_name,
            "epsilon": self.epsilon,
            "smoothing": self.smoothing,
            "points": self.points.copy(),
            "values": self.values.copy(),
            "weights": self.weights.copy(),
        }

    @classmethod
    def from_dict(cls, state):
        """Restore an interpolator from a `dict` returned by `to_dict`. Interpolation weights are taken as is and the
        system is not solved again, so the restored interpolator returns exactly the same results.

        Raises
        ------
        EmptyTrainingSet
            If no training points are given.
        DimensionMismatch
            If the numbers of points, values and weights differ.
        InvalidKernel
            If the kernel is unknown.
        ValueError
            If data or `epsilon` is not finite, `epsilon` is negative or `smoothing` is invalid.
        """
        points = parse_points(state["points"])
        if len(points) == 0:
            raise EmptyTrainingSet("At least one training point is required")
        values = parse_values(state["values"], len(points))
        weights = np.array(state["weights"], dtype=np.float64, ndmin=1)
        if weights.shape != (len(points),):
            raise DimensionMismatch(f"weights must have shape ({len(points)},), got {weights.shape}")
        if not (np.isfinite(points).all() and np.isfinite(values).all() and np.isfinite(weights).all()):
            raise ValueError("Training points, values and weights must be finite")
        kernel = Kernel.from_name(state["kernel"])
        epsilon = float(state["epsilon"])
        if not math.isfinite(epsilon) or epsilon < 0:
            raise ValueError(f"epsilon must be a non-negative finite number, got {epsilon}")
        smoothing = _parse_smoothing(state["smoothing"])

        interpolator = cls.__new__(cls)
        interpolator._set_state(points, values, weights, kernel, epsilon, smoothing)  # pylint: disable=protected-access
        return interpolator

    def dump(self, path):
        """Save the interpolator to an `.npz` archive at `path`. `.npz` extension is appended to `path` if missing.
        Restore the interpolator with `RBFInterpolator.from_file`."""
        state = self.to_dict()
        state["kernel"] = np.array(state["kernel"])
        np.savez(path, **state)

    @classmethod
    def from_file(cls, path):
        """Load an interpolator saved by `dump` from the `.npz` archive at `path`."""
        with np.load(path, allow_pickle=False) as archive:
            state = {key: archive[key] for key in archive.files}
        state["kernel"] = str(state["kernel"])
        return cls.from_dict(state)

    def __getstate__(self):
        """Create pickling state of the interpolator."""
        return self.to_dict()

    def __setstate__(self, state):
        """Restore the interpolator from its pickling state."""
        restored = self.from_dict(state)
        self.__dict__.update(restored.__dict__)


def fit(points, values, kernel=None, smoothing=None, epsilon="auto"):
    """Fit an RBF interpolator to `values` at `points`. See `RBFInterpolator` for details on arguments and raised
    errors."""
    return RBFInterpolator(points, values, kernel=kernel, smoothing=smoothing, epsilon=epsilon)


def evaluate(model, point):
    """Evaluate a fitted `model` at a single `point`."""
    return model.evaluate(point)


def evaluate_many(model, points):
    """Evaluate a fitted `model` at each of `points`."""
    return model.evaluate_many(points)


def rbf(points, values, query, kernel="gaussian", smoothing=0.01, epsilon=None):
    """Fit an RBF interpolator to `values` at `points` and evaluate it at each point of `query`. See `RBFInterpolator`
    for details on arguments and raised errors.

    Unlike `fit`, the defaults do not depend on `config`: a slightly smoothed gaussian kernel is used unless another
    `kernel` or `smoothing` is passed.

    Returns
    -------
    values : 1d np.ndarray with shape (n_queries,)
        Interpolation results in the order of `query`.
    """
    return RBFInterpolator(points, values, kernel=kernel, smoothing=smoothing, epsilon=epsilon).evaluate_many(query)
