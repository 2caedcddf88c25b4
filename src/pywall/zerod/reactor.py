"""
Reactor-like control volumes that a wall can be installed between.

The wall only reads pressure, temperature and volume from its neighbours;
anything exposing those three attributes can be used, including
``cantera.Reactor`` wrappers and simple test doubles.
"""
from typing import Protocol, runtime_checkable
import cantera as ct

@runtime_checkable
class ReactorLike(Protocol):
    """State of a control volume as seen by a wall"""
    @property
    def pressure(self) -> float:
        """Pressure [Pa]"""
        ...

    @property
    def temperature(self) -> float:
        """Temperature [K]"""
        ...

    @property
    def volume(self) -> float:
        """Volume [m^3]"""
        ...

class Reservoir:
    """
    Control volume with fixed state.

    The state can still be changed explicitly with ``set_state``.
    """
    def __init__(self, pressure: float = ct.one_atm, temperature: float = 300.0,
                 volume: float = 1.0):
        self.pressure = pressure
        self.temperature = temperature
        self.volume = volume

    def set_state(self, pressure: float, temperature: float) -> None:
        self.pressure = pressure
        self.temperature = temperature

    def __repr__(self) -> str:
        return (f"Reservoir(P={self.pressure:.6g} Pa, T={self.temperature:.6g} K, "
                f"V={self.volume:.6g} m^3)")

class SolutionReactor:
    """
    Reactor backed by a Cantera phase object.

    Pressure and temperature are read from the phase on every access, so the
    wall sees whatever state the outer integrator last set on ``solution``.
    """
    def __init__(self, solution: ct.Solution, volume: float = 1.0):
        self.solution = solution
        self.volume = volume

    @property
    def pressure(self) -> float:
        return self.solution.P

    @property
    def temperature(self) -> float:
        return self.solution.T

    def __repr__(self) -> str:
        return (f"SolutionReactor({self.solution.name!r}, P={self.pressure:.6g} Pa, "
                f"T={self.temperature:.6g} K, V={self.volume:.6g} m^3)")
