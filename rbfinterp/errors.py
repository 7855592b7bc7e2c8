"""Exceptions raised during fitting and evaluation of RBF interpolators"""

import numpy as np


class RBFError(Exception):
    """Base exception for all interpolation errors."""


class EmptyTrainingSet(RBFError, ValueError):
    """Raised when an interpolator is fitted to an empty set of points."""


class DimensionMismatch(RBFError, ValueError):
    """Raised when the number of points and values differ or when a point has an unexpected number of coordinates."""


class InvalidKernel(RBFError, ValueError):
    """Raised when an unknown kernel name is requested."""


class SingularMatrix(RBFError, np.linalg.LinAlgError):
    """Raised when the kernel matrix is singular or nearly singular.

    Parameters
    ----------
    column : int
        Elimination column whose pivot magnitude fell below the threshold.
    threshold : float
        Minimum allowed pivot magnitude.
    """

    def __init__(self, column, threshold):
        self.column = column
        self.threshold = threshold
        super().__init__(f"Matrix is singular or nearly singular: pivot magnitude in column {column} is below "
                         f"{threshold}. Remove duplicate points or increase smoothing.")

    def __reduce__(self):
        return type(self), (self.column, self.threshold)
