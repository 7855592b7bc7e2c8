"""Miscellaneous general utility functions"""

import numpy as np

from ..errors import DimensionMismatch


def to_list(obj):
    """Cast an object to a list. Almost identical to `list(obj)` for 1-D objects, except for `str`, which won't be
    split into separate letters but transformed into a list of a single element."""
    if isinstance(obj, (list, tuple, set, np.ndarray)):
        return list(obj)
    return [obj]


def get_first_defined(*args):
    """Return the first non-`None` argument. Return `None` if no `args` are passed or all of them are `None`s."""
    return next((arg for arg in args if arg is not None), None)


def freeze(arr):
    """Mark an array as read-only and return it."""
    arr.flags.writeable = False
    return arr


def parse_points(points, ndim=None):
    """Transform passed `points` to a new 2d array with shape (n_points, n_dims) and check that all of them have the
    same number of coordinates.

    A 1d array of scalars is treated as a sequence of points in a 1d space. The result is always a copy, so later
    changes of `points` do not affect it.

    Parameters
    ----------
    points : array-like
        Points to parse. Either a 2d array or a sequence of 1d array-likes.
    ndim : int, optional
        Expected number of coordinates of each point. If not given, all points must have the same number of
        coordinates as the first one.

    Returns
    -------
    points : 2d np.ndarray of floats with shape (n_points, n_dims)
        Parsed points. If `points` are empty, `n_dims` equals `ndim` or 0 if `ndim` is not given.

    Raises
    ------
    DimensionMismatch
        If some point has a number of coordinates different from `ndim` or from the first point.
    """
    if isinstance(points, np.ndarray) and points.ndim == 2:
        if ndim is not None and len(points) and points.shape[1] != ndim:
            raise DimensionMismatch(f"Point 0 has {points.shape[1]} coordinates, but {ndim} were expected")
        points = np.array(points, dtype=np.float64, order="C")
        return points if len(points) else np.empty((0, get_first_defined(ndim, 0)), dtype=np.float64)

    rows = [np.array(point, dtype=np.float64, ndmin=1) for point in points]
    if not rows:
        return np.empty((0, get_first_defined(ndim, 0)), dtype=np.float64)
    if ndim is None:
        ndim = rows[0].size if rows[0].ndim == 1 else None
    for i, row in enumerate(rows):
        if row.ndim != 1:
            raise DimensionMismatch(f"Point {i} must be a 1d array-like of coordinates, got shape {row.shape}")
        if len(row) != ndim:
            raise DimensionMismatch(f"Point {i} has {len(row)} coordinates, but {ndim} were expected")
    return np.stack(rows)


def parse_point(point, ndim):
    """Transform a single `point` to a new 1d array and check that it has exactly `ndim` coordinates. A scalar is
    accepted if `ndim` is 1."""
    point = np.array(point, dtype=np.float64, ndmin=1)
    if point.ndim != 1 or len(point) != ndim:
        raise DimensionMismatch(f"Point must have shape ({ndim},), got {point.shape}")
    return point


def parse_values(values, n_points):
    """Transform passed `values` to a new 1d array of floats and check that its length equals `n_points`."""
    values = np.array(values, dtype=np.float64, ndmin=1)
    if values.ndim != 1:
        raise DimensionMismatch(f"values must be a 1d array-like, got shape {values.shape}")
    if len(values) != n_points:
        raise DimensionMismatch(f"The number of values ({len(values)}) must match the number of points ({n_points})")
    return values
