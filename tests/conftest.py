"""
PyTest configuration and fixtures
"""
import pytest
import numpy as np
from pywall import Reservoir, Wall

class FakeSurface:
    """Surface phase double that stores coverages without normalizing"""
    def __init__(self, coverages):
        self._cov = np.array(coverages, dtype=float)

    @property
    def n_species(self):
        return len(self._cov)

    @property
    def coverages(self):
        return self._cov.copy()

    def set_unnormalized_coverages(self, values):
        self._cov = np.array(values, dtype=float)

class FakeKinetics:
    """Kinetics double with per-reaction multipliers"""
    def __init__(self, n_reactions=3, surface=None):
        self.multipliers = np.ones(n_reactions)
        self._surface = surface

    @property
    def n_reactions(self):
        return len(self.multipliers)

    @property
    def surface_phase(self):
        return self._surface

    def multiplier(self, i):
        return self.multipliers[i]

    def set_multiplier(self, value, i):
        self.multipliers[i] = value

    def reaction_equation(self, i):
        return f"A{i} + PT(S) <=> B{i}(S)"

@pytest.fixture
def reservoirs():
    """Return a high-pressure, hot reservoir and a low-pressure, cold one."""
    high = Reservoir(pressure=2.0e5, temperature=800.0, volume=1.0)
    low = Reservoir(pressure=1.0e5, temperature=300.0, volume=2.0)
    return high, low

@pytest.fixture
def installed_wall(reservoirs):
    """Return a wall installed between the two reservoirs."""
    wall = Wall()
    wall.install(*reservoirs)
    return wall

@pytest.fixture
def surface_kinetics():
    """Return kinetics doubles for the left and right faces."""
    left = FakeKinetics(3, FakeSurface([0.7, 0.2, 0.1]))
    right = FakeKinetics(2, FakeSurface([0.5, 0.5]))
    return left, right

@pytest.fixture
def pt_surface():
    """Return a Cantera Interface for platinum surface chemistry."""
    import cantera as ct
    return ct.Interface('ptcombust.yaml', 'Pt_surf')
