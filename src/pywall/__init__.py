"""
PyWall: Python implementation of reactor-network walls
"""
from importlib.metadata import version

__version__ = version("pywall")

from .core.config import WallConfig
from .core.exceptions import (
    PyWallError,
    WallConfigurationError,
    InvalidSideError,
    WallInstallError,
    SurfaceStateError,
    SensitivityIndexError,
    SensitivityStateError
)
from .core.functions import Func1, Const, Polynomial, Sin, Exp, Tabulated
from .zerod.reactor import ReactorLike, Reservoir, SolutionReactor
from .zerod.surface import Side, Kinetics, SurfacePhase, InterfaceKinetics
from .zerod.wall import WallBase, Wall, PistonWall, FunctionWall
from .utils.log_config import setup_logging
