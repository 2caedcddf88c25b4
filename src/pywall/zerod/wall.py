"""
Walls coupling two reactors in a zero-dimensional reactor network.

A wall separates two reactors (or reservoirs). It may move, changing the
volumes of the reactors on either side, and it may conduct or radiate heat
between them. Each face of the wall may also carry surface chemistry.

Sign conventions:
    vdot(t) > 0 adds volume to the left reactor and removes it from the right.
    Q(t) > 0 is a heat flow from the left reactor to the right one.

The wall does not own the reactors, kinetics managers, surface phases or
time functions it is given. They must outlive the wall.
"""
import itertools
import logging
from abc import abstractmethod
from typing import Callable, Optional, Sequence, Tuple
import numpy as np
import cantera as ct

from ..core.base import ConnectorComponent
from ..core.config import WallConfig
from ..core.exceptions import (
    SensitivityIndexError, WallConfigurationError, WallInstallError
)
from .reactor import ReactorLike
from .surface import Kinetics, Side, SurfacePhase, WallSurface

logger = logging.getLogger(__name__)

_wall_counter = itertools.count()

TimeFunction = Callable[[float], float]

class WallBase(ConnectorComponent):
    """
    State and bookkeeping shared by all wall variants.

    Subclasses provide the coupling law through ``vdot`` and ``Q`` and may
    tighten ``ready``.
    """
    def __init__(self, config: Optional[WallConfig] = None):
        super().__init__(config or WallConfig())
        self.name = self._config.name or f"wall_{next(_wall_counter)}"

        # Adjacent reactors
        self._left: Optional[ReactorLike] = None
        self._right: Optional[ReactorLike] = None

        # Physical parameters
        self._area = 0.0
        self._k = 0.0  # Expansion rate coefficient
        self._rrth = 0.0  # Reciprocal thermal resistance (U)
        self._emiss = 0.0

        # Optional time functions
        self._vf: Optional[TimeFunction] = None
        self._qf: Optional[TimeFunction] = None

        self._surfaces = (WallSurface(Side.LEFT), WallSurface(Side.RIGHT))

        self.initialize()

    def initialize(self) -> None:
        """Apply the configuration given at construction"""
        self.set_options(self._config)
        self._initialized = True

    def set_options(self, config: WallConfig) -> None:
        """
        Set wall parameters from a configuration.

        All values are checked before any is applied, so an invalid
        configuration leaves the wall unchanged.
        """
        self._check_area(config.area, 'set_options')
        self._check_emissivity(config.emissivity, 'set_options')

        self._area = config.area
        self._rrth = config.heat_transfer_coeff
        self._emiss = config.emissivity
        self._k = config.expansion_rate_coeff
        self._vf = config.velocity
        self._qf = config.heat_flux
        self._config = config

    @staticmethod
    def _check_area(a: float, setter: str) -> None:
        if not a >= 0.0:
            raise WallConfigurationError(setter, f"area must be non-negative, got {a}")

    @staticmethod
    def _check_emissivity(epsilon: float, setter: str) -> None:
        if not 0.0 <= epsilon <= 1.0:
            raise WallConfigurationError(
                setter, f"emissivity must be between 0.0 and 1.0, got {epsilon}")

    # ------------------------------------------------------------------
    # Parameters

    def set_area(self, a: float) -> None:
        """Set the area [m^2]"""
        self._check_area(a, 'set_area')
        self._area = a

    def get_area(self) -> float:
        """Get the area [m^2]"""
        return self._area

    def area(self) -> float:
        """Area [m^2]"""
        return self._area

    def set_thermal_resistance(self, Rth: float) -> None:
        """Set the thermal resistance [m^2*K/W]"""
        if not Rth > 0.0:
            raise WallConfigurationError(
                'set_thermal_resistance', f"thermal resistance must be positive, got {Rth}")
        self._rrth = 1.0 / Rth

    def get_thermal_resistance(self) -> float:
        """Get the thermal resistance [m^2*K/W]; infinite for an insulating wall"""
        return 1.0 / self._rrth if self._rrth != 0.0 else np.inf

    def set_heat_transfer_coeff(self, U: float) -> None:
        """Set the overall heat transfer coefficient [W/m^2/K]"""
        self._rrth = U

    def get_heat_transfer_coeff(self) -> float:
        """Get the overall heat transfer coefficient [W/m^2/K]"""
        return self._rrth

    def set_emissivity(self, epsilon: float) -> None:
        """Set the emissivity, between 0 and 1"""
        self._check_emissivity(epsilon, 'set_emissivity')
        self._emiss = epsilon

    def get_emissivity(self) -> float:
        """Get the emissivity"""
        return self._emiss

    def set_expansion_rate_coeff(self, k: float) -> None:
        """Set the expansion rate coefficient [m/s/Pa]"""
        self._k = k

    def get_expansion_rate_coeff(self) -> float:
        """Get the expansion rate coefficient [m/s/Pa]"""
        return self._k

    def set_velocity(self, f: Optional[TimeFunction] = None) -> None:
        """Set the wall velocity function v(t) [m/s]; None removes it"""
        self._vf = f

    def set_heat_flux(self, q: Optional[TimeFunction] = None) -> None:
        """Set the imposed heat flux function q0(t) [W/m^2]; None removes it"""
        self._qf = q

    # ------------------------------------------------------------------
    # Installation

    def install(self, left: ReactorLike, right: ReactorLike) -> bool:
        """
        Install the wall between two reactors or reservoirs.

        Args:
            left: Reactor on the left of the wall
            right: Reactor on the right of the wall

        Returns:
            bool: True if the wall is now ready to use
        """
        if left is None or right is None:
            raise WallInstallError(f"{self.name}: both reactors must be given")
        if left is right:
            raise WallInstallError(f"{self.name}: cannot install a wall between a reactor and itself")
        if self._left is not None or self._right is not None:
            raise WallInstallError(f"{self.name}: wall is already installed")

        self._left = left
        self._right = right
        logger.debug("Installed %s between %r and %r", self.name, left, right)
        return self.ready()

    def ready(self) -> bool:
        """True if the wall is correctly configured and ready to use"""
        return self._left is not None and self._right is not None

    @property
    def left(self) -> Optional[ReactorLike]:
        """Reactor or reservoir to the left of the wall"""
        return self._left

    @property
    def right(self) -> Optional[ReactorLike]:
        """Reactor or reservoir to the right of the wall"""
        return self._right

    def _require_installed(self) -> Tuple[ReactorLike, ReactorLike]:
        if self._left is None or self._right is None:
            raise WallInstallError(f"{self.name}: wall must be installed before use")
        return self._left, self._right

    # ------------------------------------------------------------------
    # Coupling

    @abstractmethod
    def vdot(self, t: float) -> float:
        """
        Rate of volume change [m^3/s].

        Positive values increase the volume of the reactor on the left and
        decrease the volume of the reactor on the right.
        """
        pass

    @abstractmethod
    def Q(self, t: float) -> float:
        """Heat flow rate through the wall [W]; positive from left to right"""
        pass

    # ------------------------------------------------------------------
    # Surface chemistry

    def _side(self, side) -> WallSurface:
        return self._surfaces[Side.coerce(side)]

    def set_kinetics(self, left: Optional[Kinetics], right: Optional[Kinetics]) -> None:
        """
        Specify the heterogeneous reaction mechanisms for each side of the wall.

        Either side may be None. Binding a side seeds its coverage cache from
        the surface phase and clears its sensitivity registry.
        """
        # Both sides are checked before either is rebound
        for surf, kin in zip(self._surfaces, (left, right)):
            surf.check_kinetics(kin)
        for surf, kin in zip(self._surfaces, (left, right)):
            surf.bind(kin)
            logger.debug("%s: %s side bound to %r (%d surface species)",
                         self.name, surf.side.label, kin, surf.n_species)

    def kinetics(self, side) -> Optional[Kinetics]:
        return self._side(side).kinetics

    def surface(self, side) -> Optional[SurfacePhase]:
        """Surface phase object for the left (0) or right (1) face"""
        return self._side(side).surface

    def set_coverages(self, side, cov: Sequence[float]) -> None:
        """Set the cached surface coverages on one side to the values in cov"""
        self._side(side).set_coverages(cov)

    def get_coverages(self, side, out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Get the cached surface coverages on one side.

        Args:
            side: 0 (left) or 1 (right)
            out: Optional buffer to write the coverages into

        Returns:
            np.ndarray: ``out`` if given, otherwise a new array
        """
        surf = self._side(side)
        surf.require_surface()
        if out is None:
            return surf.coverages.copy()
        out[:] = surf.coverages
        return out

    def sync_coverages(self, side) -> None:
        """Set the coverages in the surface phase object to the values for this wall surface"""
        self._side(side).sync()

    # ------------------------------------------------------------------
    # Sensitivity parameters

    def n_sens_params(self, side) -> int:
        return self._side(side).n_params()

    def add_sensitivity_reaction(self, side, rxn: int) -> None:
        """Register the rate multiplier of reaction rxn as a sensitivity parameter"""
        surf = self._side(side)
        kin = surf.require_kinetics()
        if not 0 <= rxn < kin.n_reactions:
            raise SensitivityIndexError(
                f"{self.name}: reaction number {rxn} out of range "
                f"(mechanism has {kin.n_reactions})")
        p = surf.n_params()
        name = f"{self.name}:{surf.side.label}:{p}: {kin.reaction_equation(rxn)}"
        surf.register(rxn, name)
        logger.debug("Added sensitivity parameter %s", name)

    def sensitivity_param_id(self, side, p: int) -> str:
        return self._side(side).param_id(p)

    def set_sensitivity_parameters(self, side, params: Sequence[float]) -> None:
        """
        Apply perturbed rate multipliers to the registered reactions.

        ``params[i]`` replaces the multiplier of the i-th registered reaction.
        The multipliers in effect before the first call are saved and are
        restored by ``reset_sensitivity_parameters``.
        """
        surf = self._side(side)
        surf.perturb(params)
        logger.debug("%s: applied %d sensitivity parameters on %s side",
                     self.name, surf.n_params(), surf.side.label)

    def reset_sensitivity_parameters(self, side) -> None:
        surf = self._side(side)
        surf.restore()
        logger.debug("%s: restored %d rate multipliers on %s side",
                     self.name, surf.n_params(), surf.side.label)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, area={self._area:.6g} m^2)"

class Wall(WallBase):
    """
    Flexible wall that conducts and radiates heat.

    The volume rate responds linearly to the pressure difference and may be
    supplemented by a prescribed velocity:

        vdot = k*A*(P_left - P_right) + A*v(t)

    The heat flow combines conduction, grey-body radiation and an imposed
    flux:

        Q = A*U*(T_left - T_right) + eps*sigma*A*(T_left^4 - T_right^4) + A*q0(t)
    """
    def vdot(self, t: float) -> float:
        left, right = self._require_installed()
        rate = self._k * self._area * (left.pressure - right.pressure)
        if self._vf is not None:
            rate += self._area * self._vf(t)
        return rate

    def Q(self, t: float) -> float:
        left, right = self._require_installed()
        TL = left.temperature
        TR = right.temperature
        q = self._area * self._rrth * (TL - TR)
        if self._emiss > 0.0:
            q += self._emiss * self._area * ct.stefan_boltzmann * (TL**4 - TR**4)
        if self._qf is not None:
            q += self._area * self._qf(t)
        return q

class PistonWall(Wall):
    """
    Wall moving with a prescribed velocity regardless of the pressure difference.

        vdot = A*v(t)

    Heat transfer follows ``Wall``. The wall is only ready once a velocity
    function has been set.
    """
    def vdot(self, t: float) -> float:
        self._require_installed()
        if self._vf is None:
            return 0.0
        return self._area * self._vf(t)

    def ready(self) -> bool:
        return super().ready() and self._vf is not None

CouplingFunction = Callable[[float, ReactorLike, ReactorLike], float]

class FunctionWall(WallBase):
    """
    Wall whose coupling terms are computed by user-supplied functions.

    Args:
        vdot_fn: f(t, left, right) -> volume rate [m^3/s]
        q_fn: f(t, left, right) -> heat flow rate [W]
        config: Optional wall configuration

    A missing function contributes zero. The area and other parameters are
    stored but not used by the coupling law.
    """
    def __init__(self, vdot_fn: Optional[CouplingFunction] = None,
                 q_fn: Optional[CouplingFunction] = None,
                 config: Optional[WallConfig] = None):
        self._vdot_fn = vdot_fn
        self._q_fn = q_fn
        super().__init__(config)

    def set_vdot_function(self, f: Optional[CouplingFunction]) -> None:
        self._vdot_fn = f

    def set_heat_function(self, f: Optional[CouplingFunction]) -> None:
        self._q_fn = f

    def vdot(self, t: float) -> float:
        left, right = self._require_installed()
        if self._vdot_fn is None:
            return 0.0
        return self._vdot_fn(t, left, right)

    def Q(self, t: float) -> float:
        left, right = self._require_installed()
        if self._q_fn is None:
            return 0.0
        return self._q_fn(t, left, right)

    def ready(self) -> bool:
        return super().ready() and (self._vdot_fn is not None or self._q_fn is not None)
