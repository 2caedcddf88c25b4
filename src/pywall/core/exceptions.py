"""
Exception hierarchy for PyWall.
"""

class PyWallError(Exception):
    """Base class for all errors raised by PyWall."""
    pass

class WallConfigurationError(PyWallError, ValueError):
    """
    Raised when a wall parameter is set to a value outside its domain.
    The wall keeps its previous value.
    """
    def __init__(self, setter: str, message: str):
        self.setter = setter
        super().__init__(f"{setter}: {message}")

class InvalidSideError(PyWallError, ValueError):
    """Raised when a side selector is neither left (0) nor right (1)."""
    pass

class WallInstallError(PyWallError, RuntimeError):
    """Raised when a wall is installed incorrectly or used before installation."""
    pass

class SurfaceStateError(PyWallError, RuntimeError):
    """Raised for coverage operations on a side without a usable surface phase."""
    pass

class SensitivityIndexError(PyWallError, IndexError):
    """Raised when a sensitivity parameter number is out of range."""
    pass

class SensitivityStateError(PyWallError, RuntimeError):
    """Raised when sensitivity parameters are registered or perturbed out of order."""
    pass
