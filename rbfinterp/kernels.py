"""Implements radial basis functions used by RBF interpolators.

Each kernel maps a non-negative euclidean distance `r` between two points and a shape parameter `epsilon` to a real
value. The following kernels are available:

| Name                   | Formula                  | Depends on epsilon |
|------------------------|--------------------------|--------------------|
| `thin_plate`           | r^2 * ln(r), 0 at r = 0  | No                 |
| `multiquadric`         | sqrt(1 + (epsilon r)^2)  | Yes                |
| `inverse_multiquadric` | 1 / sqrt(1 + (eps r)^2)  | Yes                |
| `gaussian`             | exp(-(epsilon r)^2)      | Yes                |
| `linear`               | r                        | No                 |
| `squared`              | r^2                      | No                 |
| `quintic`              | r^5                      | No                 |

Kernels are represented by members of the `Kernel` enum. Their formulas are implemented in a single jitted
`kernel_function` so that they can be efficiently evaluated inside compiled loops of matrix assembly and interpolation.
"""

import math
from enum import IntEnum

import numpy as np
from numba import njit

from .errors import InvalidKernel


class Kernel(IntEnum):
    """Radial basis function kernel.

    A member can be called directly to evaluate the kernel at given distances:
    >>> Kernel.GAUSSIAN([0, 1], epsilon=2)
    array([1.        , 0.01831564])
    """
    THIN_PLATE = 0
    MULTIQUADRIC = 1
    INVERSE_MULTIQUADRIC = 2
    GAUSSIAN = 3
    LINEAR = 4
    SQUARED = 5
    QUINTIC = 6

    @property
    def kernel_name(self):
        """str: Lowercase name of the kernel, e.g. `thin_plate`."""
        return self.name.lower()

    @property
    def uses_epsilon(self):
        """bool: Whether the kernel depends on the shape parameter."""
        return self in {Kernel.MULTIQUADRIC, Kernel.INVERSE_MULTIQUADRIC, Kernel.GAUSSIAN}

    @classmethod
    def from_name(cls, name):
        """Get a kernel by its name.

        Names are case-insensitive, dashes and spaces are treated as underscores. `inverse` is accepted as an alias
        for `inverse_multiquadric`.

        Parameters
        ----------
        name : str or Kernel
            Kernel name. `Kernel` instances are returned unchanged.

        Returns
        -------
        kernel : Kernel
            The requested kernel.

        Raises
        ------
        InvalidKernel
            If the kernel name is unknown.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidKernel(f"Kernel name must be str, got {type(name).__name__}")
        normalized_name = name.strip().lower().replace("-", "_").replace(" ", "_")
        normalized_name = KERNEL_ALIASES.get(normalized_name, normalized_name)
        try:
            return cls[normalized_name.upper()]
        except KeyError:
            raise InvalidKernel(f"Unknown kernel {name}. Available options are: "
                                f"{', '.join(available_kernels())}") from None

    def __call__(self, r, epsilon=1.0):
        """Evaluate the kernel at given distances.

        Parameters
        ----------
        r : float or array-like of floats
            Non-negative distances to evaluate the kernel at.
        epsilon : float, optional, defaults to 1
            Shape parameter. Ignored by kernels that do not depend on it.

        Returns
        -------
        values : float or np.ndarray
            Kernel values. Have the same shape as `r`.
        """
        r = np.array(r, dtype=np.float64)
        res = apply_kernel(int(self), r.ravel(), float(epsilon)).reshape(r.shape)
        return res.item() if r.ndim == 0 else res


KERNEL_ALIASES = {
    "inverse": "inverse_multiquadric",
}


def available_kernels():
    """Return names of all available kernels."""
    return [kernel.kernel_name for kernel in Kernel]


@njit(nogil=True)
def euclidean_distance(x, y):
    """Calculate euclidean distance between two points with the same number of coordinates."""
    res = 0.0
    for i in range(len(x)):
        diff = x[i] - y[i]
        res += diff * diff
    return math.sqrt(res)


@njit(nogil=True)
def kernel_function(kernel, r, epsilon):
    """Evaluate a kernel with code `kernel` at distance `r` for a given shape parameter `epsilon`."""
    if kernel == Kernel.THIN_PLATE:
        if r == 0:
            return 0.0  # r^2 * ln(r) tends to 0 as r approaches 0
        return r * r * math.log(r)
    if kernel == Kernel.MULTIQUADRIC:
        return math.sqrt(1 + (epsilon * r) ** 2)
    if kernel == Kernel.INVERSE_MULTIQUADRIC:
        return 1 / math.sqrt(1 + (epsilon * r) ** 2)
    if kernel == Kernel.GAUSSIAN:
        return math.exp(-(epsilon * r) ** 2)
    if kernel == Kernel.LINEAR:
        return r
    if kernel == Kernel.SQUARED:
        return r * r
    if kernel == Kernel.QUINTIC:
        return r ** 5
    raise ValueError("Unknown kernel code")


@njit(nogil=True)
def apply_kernel(kernel, distances, epsilon):
    """Evaluate a kernel with code `kernel` at each of 1d `distances`."""
    res = np.empty(len(distances), dtype=np.float64)
    for i, r in enumerate(distances):
        res[i] = kernel_function(kernel, r, epsilon)
    return res
