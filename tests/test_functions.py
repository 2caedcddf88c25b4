"""
Tests for time functions
"""
import pytest
import numpy as np
from pywall.core.functions import Func1, Const, Polynomial, Sin, Exp, Tabulated

def test_func1_requires_implementation():
    with pytest.raises(TypeError):
        Func1()

def test_const():
    f = Const(2.5)
    assert f(0.0) == 2.5
    assert f(1e3) == 2.5

def test_polynomial():
    f = Polynomial([1.0, -2.0, 0.5])
    assert f(2.0) == pytest.approx(1.0 - 4.0 + 2.0)
    with pytest.raises(ValueError):
        Polynomial([])

def test_sin_and_exp():
    assert Sin(omega=2.0, amplitude=3.0, phase=0.1)(0.5) == pytest.approx(3.0 * np.sin(1.1))
    assert Exp(rate=-1.0, amplitude=2.0)(1.0) == pytest.approx(2.0 * np.exp(-1.0))

def test_composition():
    f = 2.0 * Sin(omega=1.0) + 1.0
    assert f(np.pi / 2) == pytest.approx(3.0)
    g = Const(2.0) * Polynomial([0.0, 1.0])
    assert g(4.0) == pytest.approx(8.0)
    with pytest.raises(TypeError):
        Const(1.0) + 'a'

class TestTabulated:
    """Tests for tabulated functions"""

    def test_linear(self):
        f = Tabulated([0.0, 1.0, 3.0], [0.0, 2.0, 0.0])
        assert f(0.5) == pytest.approx(1.0)
        assert f(2.0) == pytest.approx(1.0)

    def test_held_outside_range(self):
        for method in ('linear', 'cubic'):
            f = Tabulated([0.0, 1.0, 2.0], [1.0, 4.0, 9.0], method=method)
            assert f(-5.0) == pytest.approx(1.0)
            assert f(10.0) == pytest.approx(9.0)

    def test_cubic_passes_through_points(self):
        t = np.linspace(0.0, 1.0, 6)
        f = Tabulated(t, t**2, method='cubic')
        for ti in t:
            assert f(ti) == pytest.approx(ti**2)

    @pytest.mark.parametrize("times, values, method", [
        ([0.0], [1.0], 'linear'),
        ([0.0, 1.0], [1.0], 'linear'),
        ([1.0, 0.0], [1.0, 2.0], 'linear'),
        ([0.0, 1.0], [1.0, 2.0], 'quadratic'),
    ])
    def test_invalid(self, times, values, method):
        with pytest.raises(ValueError):
            Tabulated(times, values, method=method)
