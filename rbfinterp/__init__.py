"""Radial basis function interpolation of scattered data in arbitrary dimension"""

from .config import config
from .errors import RBFError, EmptyTrainingSet, DimensionMismatch, InvalidKernel, SingularMatrix
from .kernels import Kernel, available_kernels
from .epsilon import estimate_epsilon
from .linalg import build_kernel_matrix, solve_linear_system
from .interpolator import RBFInterpolator, fit, evaluate, evaluate_many, rbf


__version__ = "1.0.0"
