"""Test parsing of points and values"""

import pytest
import numpy as np

from rbfinterp import DimensionMismatch
from rbfinterp.utils import parse_points, parse_point, parse_values, to_list


@pytest.mark.parametrize("points, ndim, expected_shape", [
    [[[0, 0], [1, 2], [3, 4]], None, (3, 2)],
    [np.ones((5, 3), dtype=np.int32), None, (5, 3)],
    [np.ones((5, 3)), 3, (5, 3)],
    [[0, 1, 2, 3], None, (4, 1)],  # scalars are treated as 1d points
    [np.arange(4), 1, (4, 1)],
    [[(0, 1), np.array([2, 3])], 2, (2, 2)],  # mixed point types
    [[], None, (0, 0)],
    [[], 3, (0, 3)],
    [np.empty((0, 2)), 2, (0, 2)],
])
def test_parse_points(points, ndim, expected_shape):
    """Check the shape and dtype of parsed points."""
    res = parse_points(points, ndim=ndim)
    assert res.shape == expected_shape
    assert res.dtype == np.float64


def test_parse_points_copy():
    """Check that parsed points never share memory with the input."""
    points = np.ones((3, 2))
    res = parse_points(points)
    res[0, 0] = 10
    assert points[0, 0] == 1


@pytest.mark.parametrize("points, ndim, index", [
    [[[0, 0], [1, 2, 3]], None, 1],
    [[[0, 0], [1, 2], [3]], None, 2],
    [[[0, 0], [1, 2]], 3, 0],
    [np.ones((2, 3)), 2, 0],
    [[0.5, 0.5], 2, 0],  # a single point is not a sequence of points
    [[[[0, 0]]], None, 0],
])
def test_parse_points_mismatch(points, ndim, index):
    """Check that the first point with an unexpected number of coordinates is reported."""
    with pytest.raises(DimensionMismatch, match=f"Point {index}"):
        parse_points(points, ndim=ndim)


@pytest.mark.parametrize("point, ndim", [[[1, 2], 2], [(1, 2, 3), 3], [5, 1], [np.array([0.5]), 1]])
def test_parse_point(point, ndim):
    """Check parsing of a single point."""
    assert parse_point(point, ndim).shape == (ndim,)


@pytest.mark.parametrize("point, ndim", [[[1, 2], 3], [5, 2], [[[1, 2]], 2]])
def test_parse_point_mismatch(point, ndim):
    """Check that a single point of wrong shape raises `DimensionMismatch`."""
    with pytest.raises(DimensionMismatch):
        parse_point(point, ndim)


def test_parse_values():
    """Check parsing of values and validation of their shape."""
    assert parse_values([1, 2, 3], 3).dtype == np.float64
    with pytest.raises(DimensionMismatch):
        parse_values([1, 2], 3)
    with pytest.raises(DimensionMismatch):
        parse_values([[1], [2]], 2)


@pytest.mark.parametrize("test_input, expected", [
    ["thin_plate", ["thin_plate"]],
    [1, [1]],
    [("linear", "quintic"), ["linear", "quintic"]],
    [[10, 100], [10, 100]],
    [np.array([1, 2]), [1, 2]],
])
def test_to_list(test_input, expected):
    """Compare `to_list` result with the expected one."""
    assert to_list(test_input) == expected
