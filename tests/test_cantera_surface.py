"""
Tests for walls carrying Cantera surface chemistry
"""
import pytest
import numpy as np
from pywall import Wall, WallConfig, InterfaceKinetics, Kinetics, SurfacePhase

@pytest.fixture
def pt_kinetics(pt_surface):
    return InterfaceKinetics(pt_surface)

def test_adapter_satisfies_protocols(pt_kinetics):
    assert isinstance(pt_kinetics, Kinetics)
    assert isinstance(pt_kinetics, SurfacePhase)
    assert pt_kinetics.surface_phase is pt_kinetics

def test_set_kinetics_sizes_cache(pt_surface, pt_kinetics):
    wall = Wall()
    wall.set_kinetics(pt_kinetics, None)
    cov = wall.get_coverages(0)
    assert len(cov) == pt_surface.n_species
    np.testing.assert_allclose(cov, pt_surface.coverages)

def test_sync_updates_interface(pt_surface, pt_kinetics):
    wall = Wall()
    wall.set_kinetics(None, pt_kinetics)
    n = pt_surface.n_species
    cov = np.full(n, 1.0 / n)
    wall.set_coverages(1, cov)
    wall.sync_coverages(1)
    np.testing.assert_allclose(pt_surface.coverages, cov)

def test_sensitivity_on_interface(pt_surface, pt_kinetics):
    wall = Wall(WallConfig(name='catalyst'))
    wall.set_kinetics(pt_kinetics, None)
    wall.add_sensitivity_reaction(0, 1)
    assert wall.sensitivity_param_id(0, 0) == f"catalyst:left:0: {pt_surface.reaction(1).equation}"

    before = pt_surface.multiplier(1)
    wall.set_sensitivity_parameters(0, [1.5])
    assert pt_surface.multiplier(1) == pytest.approx(1.5)
    wall.reset_sensitivity_parameters(0)
    assert pt_surface.multiplier(1) == pytest.approx(before)
