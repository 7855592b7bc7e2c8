"""Test radial basis functions"""

import math

import pytest
import numpy as np

from rbfinterp import Kernel, InvalidKernel, available_kernels
from rbfinterp.kernels import euclidean_distance


@pytest.mark.parametrize("kernel, r, epsilon, expected", [
    [Kernel.THIN_PLATE, 0, 1, 0],  # removable singularity at zero
    [Kernel.THIN_PLATE, 1, 1, 0],
    [Kernel.THIN_PLATE, math.e, 5, math.e ** 2],  # epsilon is ignored
    [Kernel.THIN_PLATE, 0.5, 1, 0.25 * math.log(0.5)],
    [Kernel.MULTIQUADRIC, 0, 3, 1],
    [Kernel.MULTIQUADRIC, 2, 1.5, math.sqrt(10)],
    [Kernel.INVERSE_MULTIQUADRIC, 0, 3, 1],
    [Kernel.INVERSE_MULTIQUADRIC, 2, 1.5, 1 / math.sqrt(10)],
    [Kernel.GAUSSIAN, 0, 2, 1],
    [Kernel.GAUSSIAN, 1, 2, math.exp(-4)],
    [Kernel.LINEAR, 2.5, 10, 2.5],
    [Kernel.SQUARED, 3, 10, 9],
    [Kernel.QUINTIC, 2, 10, 32],
])
def test_kernel_values(kernel, r, epsilon, expected):
    """Compare kernel values with those calculated by their formulas."""
    res = kernel(r, epsilon=epsilon)
    assert isinstance(res, float)
    assert np.isclose(res, expected, rtol=1e-12, atol=1e-15)


def test_thin_plate_is_finite_at_zero():
    """Check that thin plate kernel does not return nan for zero distance."""
    assert Kernel.THIN_PLATE(0) == 0
    assert np.isfinite(Kernel.THIN_PLATE(np.zeros(3))).all()


@pytest.mark.parametrize("kernel", list(Kernel))
def test_array_input(kernel):
    """Check that a kernel preserves the shape of array input and matches scalar evaluation."""
    r = np.array([[0, 0.5], [1, 2.5]])
    res = kernel(r, epsilon=0.7)
    assert res.shape == r.shape
    assert np.allclose(res, [[kernel(val, epsilon=0.7) for val in row] for row in r])


@pytest.mark.parametrize("kernel", list(Kernel))
def test_epsilon_dependence(kernel):
    """Check that `uses_epsilon` matches the actual dependence of kernel values on the shape parameter."""
    r = np.linspace(0.1, 3, 10)
    depends = not np.allclose(kernel(r, epsilon=0.5), kernel(r, epsilon=2))
    assert depends == kernel.uses_epsilon


@pytest.mark.parametrize("name, expected", [
    ["thin_plate", Kernel.THIN_PLATE],
    ["thin-plate", Kernel.THIN_PLATE],
    ["Thin_Plate", Kernel.THIN_PLATE],
    ["thin plate", Kernel.THIN_PLATE],
    ["multiquadric", Kernel.MULTIQUADRIC],
    ["inverse_multiquadric", Kernel.INVERSE_MULTIQUADRIC],
    ["inverse-multiquadric", Kernel.INVERSE_MULTIQUADRIC],
    ["INVERSE", Kernel.INVERSE_MULTIQUADRIC],
    ["gaussian", Kernel.GAUSSIAN],
    ["linear", Kernel.LINEAR],
    ["squared", Kernel.SQUARED],
    ["quintic", Kernel.QUINTIC],
    [Kernel.GAUSSIAN, Kernel.GAUSSIAN],
])
def test_from_name(name, expected):
    """Check kernel lookup by name."""
    assert Kernel.from_name(name) is expected


@pytest.mark.parametrize("name", ["cubic", "", "thinplate", "gauss", 3, None])
def test_unknown_kernel(name):
    """Check that unknown kernel names raise `InvalidKernel`, which is also a `ValueError`."""
    with pytest.raises(InvalidKernel):
        Kernel.from_name(name)
    with pytest.raises(ValueError):
        Kernel.from_name(name)


def test_available_kernels():
    """Check that all kernels are listed and can be looked up by their names."""
    names = available_kernels()
    assert len(names) == 7
    assert [Kernel.from_name(name) for name in names] == list(Kernel)


@pytest.mark.parametrize("x, y, expected", [
    [[0, 0], [3, 4], 5],
    [[1], [-2], 3],
    [[1, 2, 3, 4], [1, 2, 3, 4], 0],
    [[1, 1, 1], [0, 0, 0], math.sqrt(3)],
])
def test_euclidean_distance(x, y, expected):
    """Check euclidean distance calculation and its symmetry."""
    x = np.array(x, dtype=np.float64)
    y = np.array(y, dtype=np.float64)
    assert np.isclose(euclidean_distance(x, y), expected)
    assert euclidean_distance(x, y) == euclidean_distance(y, x)
