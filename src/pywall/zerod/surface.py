"""
Surface chemistry on the faces of a wall.

Each face (side) of a wall may carry a heterogeneous kinetics mechanism and
the surface phase it acts on. The wall keeps its own copy of the surface
coverages and a registry of reactions whose rate multipliers are exposed as
sensitivity parameters; both are bundled per side in ``WallSurface``.
"""
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Protocol, Sequence, runtime_checkable
import numpy as np
import cantera as ct

from ..core.exceptions import (
    InvalidSideError, SurfaceStateError, SensitivityIndexError, SensitivityStateError
)

logger = logging.getLogger(__name__)

class Side(IntEnum):
    """Face of a wall"""
    LEFT = 0
    RIGHT = 1

    @classmethod
    def coerce(cls, side) -> "Side":
        """Convert 0/1 (or a Side) to a Side, rejecting anything else"""
        if isinstance(side, bool) or not isinstance(side, (int, np.integer)):
            raise InvalidSideError(f"Side must be 0 (left) or 1 (right), got {side!r}")
        try:
            return cls(int(side))
        except ValueError:
            raise InvalidSideError(
                f"Side must be 0 (left) or 1 (right), got {side!r}") from None

    @property
    def label(self) -> str:
        return self.name.lower()

@runtime_checkable
class SurfacePhase(Protocol):
    """Authoritative coverage state for one face"""
    @property
    def n_species(self) -> int:
        ...

    @property
    def coverages(self) -> np.ndarray:
        ...

    def set_unnormalized_coverages(self, values: Sequence[float]) -> None:
        ...

@runtime_checkable
class Kinetics(Protocol):
    """Heterogeneous reaction mechanism with overridable rate multipliers"""
    @property
    def n_reactions(self) -> int:
        ...

    @property
    def surface_phase(self) -> Optional[SurfacePhase]:
        ...

    def multiplier(self, i: int) -> float:
        ...

    def set_multiplier(self, value: float, i: int) -> None:
        ...

    def reaction_equation(self, i: int) -> str:
        ...

class InterfaceKinetics:
    """
    Adapter exposing a ``cantera.Interface`` as both Kinetics and SurfacePhase.

    Cantera's Interface object is at once the surface phase and the kinetics
    manager for reactions on that surface.
    """
    def __init__(self, interface: ct.Interface):
        self.interface = interface

    @property
    def n_reactions(self) -> int:
        return self.interface.n_reactions

    @property
    def surface_phase(self) -> "InterfaceKinetics":
        return self

    def multiplier(self, i: int) -> float:
        return self.interface.multiplier(i)

    def set_multiplier(self, value: float, i: int) -> None:
        self.interface.set_multiplier(value, i)

    def reaction_equation(self, i: int) -> str:
        return self.interface.reaction(i).equation

    @property
    def n_species(self) -> int:
        return self.interface.n_species

    @property
    def coverages(self) -> np.ndarray:
        return self.interface.coverages

    def set_unnormalized_coverages(self, values: Sequence[float]) -> None:
        self.interface.set_unnormalized_coverages(values)

@dataclass
class WallSurface:
    """
    Per-side surface chemistry state of a wall.

    The three sensitivity registries (indices, names, saved multipliers) are
    only ever modified together and always have equal length.
    """
    side: Side
    kinetics: Optional[Kinetics] = None
    surface: Optional[SurfacePhase] = None
    n_species: int = 0
    coverages: np.ndarray = field(default_factory=lambda: np.zeros(0))
    sens_indices: List[int] = field(default_factory=list)
    sens_names: List[str] = field(default_factory=list)
    saved_multipliers: List[float] = field(default_factory=list)
    perturbed: bool = False

    def check_kinetics(self, kinetics: Optional[Kinetics]) -> Optional[SurfacePhase]:
        """Return the surface phase of kinetics, rejecting non-surface mechanisms"""
        if kinetics is None:
            return None
        surface = kinetics.surface_phase
        if surface is None:
            raise SurfaceStateError(
                f"Kinetics on {self.side.label} side does not represent "
                "a surface kinetics mechanism")
        return surface

    def bind(self, kinetics: Optional[Kinetics]) -> None:
        """Bind a kinetics mechanism (or None) and seed the coverage cache"""
        surface = self.check_kinetics(kinetics)

        self.kinetics = kinetics
        self.surface = surface
        if surface is None:
            self.n_species = 0
            self.coverages = np.zeros(0)
        else:
            self.n_species = surface.n_species
            self.coverages = np.array(surface.coverages, dtype=float)

        # Registered reaction indices refer to the previous mechanism
        self.sens_indices.clear()
        self.sens_names.clear()
        self.saved_multipliers.clear()
        self.perturbed = False

    def require_surface(self) -> SurfacePhase:
        if self.surface is None:
            raise SurfaceStateError(f"No surface phase on {self.side.label} side")
        return self.surface

    def require_kinetics(self) -> Kinetics:
        if self.kinetics is None:
            raise SensitivityStateError(f"No kinetics on {self.side.label} side")
        return self.kinetics

    def set_coverages(self, values: Sequence[float]) -> None:
        self.require_surface()
        values = np.asarray(values, dtype=float)
        if values.shape != (self.n_species,):
            raise SurfaceStateError(
                f"Expected {self.n_species} coverages on {self.side.label} side, "
                f"got array of shape {values.shape}")
        self.coverages[:] = values

    def sync(self) -> None:
        """Push the cached coverages into the surface phase"""
        self.require_surface().set_unnormalized_coverages(self.coverages)

    def n_params(self) -> int:
        return len(self.sens_indices)

    def register(self, rxn: int, name: str) -> None:
        if self.perturbed:
            raise SensitivityStateError(
                f"Cannot register reactions on {self.side.label} side while "
                "sensitivity parameters are applied")
        self.sens_indices.append(rxn)
        self.sens_names.append(name)
        self.saved_multipliers.append(1.0)

    def param_id(self, p: int) -> str:
        if not 0 <= p < self.n_params():
            raise SensitivityIndexError(
                f"Sensitivity parameter {p} out of range on {self.side.label} side "
                f"(have {self.n_params()})")
        return self.sens_names[p]

    def perturb(self, params: Sequence[float]) -> None:
        """Save current multipliers (unless already perturbed) and apply params"""
        kin = self.require_kinetics()
        if len(params) < self.n_params():
            raise SensitivityStateError(
                f"Expected {self.n_params()} sensitivity parameters on "
                f"{self.side.label} side, got {len(params)}")

        values = np.asarray(params[:self.n_params()], dtype=float)
        if not self.perturbed:
            for i, rxn in enumerate(self.sens_indices):
                self.saved_multipliers[i] = kin.multiplier(rxn)
            self.perturbed = True
        for i, rxn in enumerate(self.sens_indices):
            kin.set_multiplier(values[i], rxn)

    def restore(self) -> None:
        """Restore the multipliers saved by the last perturbation"""
        kin = self.require_kinetics()
        if not self.perturbed:
            raise SensitivityStateError(
                f"No sensitivity perturbation pending on {self.side.label} side")
        for i, rxn in enumerate(self.sens_indices):
            kin.set_multiplier(self.saved_multipliers[i], rxn)
        self.perturbed = False
