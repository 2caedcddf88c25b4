"""
Tests for base components
"""
import pytest
from pywall.core.base import NetworkComponent, ConnectorComponent
from pywall.zerod.wall import WallBase

def test_network_component_requires_implementation():
    """Test that NetworkComponent cannot be instantiated without implementation."""
    with pytest.raises(TypeError):
        NetworkComponent()

def test_network_component_configuration():
    """Test component configuration handling."""
    class TestComponent(NetworkComponent):
        def initialize(self):
            pass

    config = {'test': 'value'}
    component = TestComponent(config)
    assert component._config == config
    assert not component.is_initialized()

def test_wall_base_requires_coupling_law():
    """WallBase leaves vdot and Q abstract."""
    with pytest.raises(TypeError):
        WallBase()
    assert issubclass(WallBase, ConnectorComponent)
