from dataclasses import dataclass
from typing import Callable, Optional

@dataclass
class WallConfig:
    """Configuration for a wall"""
    name: Optional[str] = None
    area: float = 0.0  # [m^2]
    heat_transfer_coeff: float = 0.0  # [W/m^2/K]
    emissivity: float = 0.0  # [-], 0 <= eps <= 1
    expansion_rate_coeff: float = 0.0  # [m/s/Pa]
    velocity: Optional[Callable[[float], float]] = None  # [m/s]
    heat_flux: Optional[Callable[[float], float]] = None  # [W/m^2]
