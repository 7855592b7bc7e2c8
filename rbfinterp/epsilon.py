"""Implements estimation of the default shape parameter of RBF kernels"""

import numpy as np
from scipy.spatial.distance import pdist

from .const import EPSILON_SAMPLE_SIZE, DEFAULT_EPSILON


def estimate_epsilon(points, sample_size=EPSILON_SAMPLE_SIZE):
    """Estimate the default shape parameter as the mean pairwise euclidean distance between training points.

    Only the first `sample_size` points are considered. The prefix is used instead of a random subset for the estimate
    to be deterministic, but it may be biased if the leading points are not representative of the whole set, e.g. for
    spatially sorted inputs.

    Parameters
    ----------
    points : 2d array-like with shape (n_points, n_dims)
        Training points. A 1d array is treated as points in a 1d space.
    sample_size : int, optional, defaults to 100
        The number of leading points to calculate pairwise distances for.

    Returns
    -------
    epsilon : float
        Mean distance over all unordered pairs of the leading points or 1 if less than two points are given.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim == 1:
        points = points.reshape(-1, 1)
    sample = points[:sample_size]
    if len(sample) < 2:
        return DEFAULT_EPSILON
    return float(pdist(sample).mean())
