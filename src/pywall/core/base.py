"""
Base classes and interfaces for PyWall components.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

class NetworkComponent(ABC):
    """
    Base class for all PyWall components providing common functionality
    and enforcing interface requirements.
    """
    def __init__(self, config: Optional[Any] = None):
        self._config = config
        self._initialized = False

    @abstractmethod
    def initialize(self) -> None:
        """Initialize the component with current configuration."""
        self._initialized = True

    def is_initialized(self) -> bool:
        """Check if component has been initialized."""
        return self._initialized

class ConnectorComponent(NetworkComponent):
    """Base class for components that join two reactors."""
    @abstractmethod
    def install(self, left, right) -> bool:
        """Bind the reactors on either side of the connector."""
        pass

    @abstractmethod
    def ready(self) -> bool:
        """True if the connector is correctly configured and ready to use."""
        pass
