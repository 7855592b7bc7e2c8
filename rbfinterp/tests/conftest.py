"""Training data shared by interpolator tests"""

import pytest
import numpy as np


@pytest.fixture
def square_data():
    """Return vertices of the unit square and values of x + y at them."""
    points = np.array([[0, 0], [1, 0], [0, 1], [1, 1]], dtype=np.float64)
    values = np.array([0, 1, 1, 2], dtype=np.float64)
    return points, values


@pytest.fixture
def line_data():
    """Return 1d points from 0 to 4 and values of 2 * x at them."""
    points = np.arange(5, dtype=np.float64).reshape(-1, 1)
    values = 2 * points[:, 0]
    return points, values


@pytest.fixture
def random_data():
    """Return 50 random 3d points and values of a smooth function at them."""
    rng = np.random.default_rng(42)
    points = rng.uniform(-1, 1, size=(50, 3))
    values = np.sin(points[:, 0]) + np.cos(2 * points[:, 1]) * points[:, 2]
    return points, values
