"""
Scalar functions of time used to drive wall velocity and heat flux.
"""
from abc import ABC, abstractmethod
from typing import Sequence, Union
import numpy as np
from scipy.interpolate import CubicSpline

class Func1(ABC):
    """
    Base class for functions of one variable, f(t) -> float.

    Functions can be combined with ``+`` and ``*`` (with scalars or other
    functions). Any plain callable taking ``t`` may be used in place of a
    Func1 wherever a time function is accepted.
    """
    @abstractmethod
    def eval(self, t: float) -> float:
        """Evaluate the function at time t"""
        pass

    def __call__(self, t: float) -> float:
        return self.eval(t)

    def __add__(self, other: Union["Func1", float]) -> "Func1":
        return Sum(self, _as_func(other))

    __radd__ = __add__

    def __mul__(self, other: Union["Func1", float]) -> "Func1":
        return Product(self, _as_func(other))

    __rmul__ = __mul__

def _as_func(f) -> Func1:
    if isinstance(f, Func1):
        return f
    if isinstance(f, (int, float)):
        return Const(f)
    raise TypeError(f"Cannot combine Func1 with {type(f).__name__}")

class Const(Func1):
    """f(t) = c"""
    def __init__(self, c: float):
        self.c = float(c)

    def eval(self, t: float) -> float:
        return self.c

class Polynomial(Func1):
    """f(t) = c[0] + c[1]*t + c[2]*t**2 + ..."""
    def __init__(self, coeffs: Sequence[float]):
        self.coeffs = np.asarray(coeffs, dtype=float)
        if self.coeffs.size == 0:
            raise ValueError("Polynomial requires at least one coefficient")

    def eval(self, t: float) -> float:
        return float(np.polynomial.polynomial.polyval(t, self.coeffs))

class Sin(Func1):
    """f(t) = amplitude * sin(omega*t + phase)"""
    def __init__(self, omega: float, amplitude: float = 1.0, phase: float = 0.0):
        self.omega = omega
        self.amplitude = amplitude
        self.phase = phase

    def eval(self, t: float) -> float:
        return self.amplitude * np.sin(self.omega * t + self.phase)

class Exp(Func1):
    """f(t) = amplitude * exp(rate*t)"""
    def __init__(self, rate: float, amplitude: float = 1.0):
        self.rate = rate
        self.amplitude = amplitude

    def eval(self, t: float) -> float:
        return self.amplitude * np.exp(self.rate * t)

class Tabulated(Func1):
    """
    Function interpolated from a table of (time, value) pairs.

    Outside the tabulated range the end values are held constant.

    Args:
        times: Strictly increasing sample times
        values: Function values at each sample time
        method: 'linear' or 'cubic'
    """
    def __init__(self, times: Sequence[float], values: Sequence[float],
                 method: str = 'linear'):
        self.times = np.asarray(times, dtype=float)
        self.values = np.asarray(values, dtype=float)
        if self.times.shape != self.values.shape or self.times.ndim != 1:
            raise ValueError("times and values must be 1-D arrays of equal length")
        if len(self.times) < 2:
            raise ValueError("Tabulated function requires at least two points")
        if np.any(np.diff(self.times) <= 0):
            raise ValueError("times must be strictly increasing")

        self.method = method
        if method == 'linear':
            self._spline = None
        elif method == 'cubic':
            self._spline = CubicSpline(self.times, self.values)
        else:
            raise ValueError(f"Unknown interpolation method: {method}")

    def eval(self, t: float) -> float:
        if self._spline is None:
            return float(np.interp(t, self.times, self.values))
        t = min(max(t, self.times[0]), self.times[-1])
        return float(self._spline(t))

class Sum(Func1):
    """f(t) = f1(t) + f2(t)"""
    def __init__(self, f1: Func1, f2: Func1):
        self.f1 = f1
        self.f2 = f2

    def eval(self, t: float) -> float:
        return self.f1(t) + self.f2(t)

class Product(Func1):
    """f(t) = f1(t) * f2(t)"""
    def __init__(self, f1: Func1, f2: Func1):
        self.f1 = f1
        self.f2 = f2

    def eval(self, t: float) -> float:
        return self.f1(t) * self.f2(t)
