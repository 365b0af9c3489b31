"""Calculation core: conversions, physics, input normalization and sampling."""

from .calculator import CalculatorState, calculate
from .config import PHYSICS_CFG, RENDER_CFG, PhysicsCfg, RenderCfg
from .errors import (
    BelowSurface,
    InvalidAltitude,
    NegativeValue,
    NotANumber,
    OrbitCalcError,
    ValidationError,
)
from .model import InputMode, OrbitalDetailPoint, OrbitalResult, Unit
from .normalize import convert_between_modes, normalize, switch_input_mode
from .physics import circular_orbit_profile, compute_orbital_properties
from .sampling import nearest_point, sample_orbit

__all__ = [
    "BelowSurface",
    "CalculatorState",
    "InputMode",
    "InvalidAltitude",
    "NegativeValue",
    "NotANumber",
    "OrbitCalcError",
    "OrbitalDetailPoint",
    "OrbitalResult",
    "PHYSICS_CFG",
    "PhysicsCfg",
    "RENDER_CFG",
    "RenderCfg",
    "Unit",
    "ValidationError",
    "calculate",
    "circular_orbit_profile",
    "compute_orbital_properties",
    "convert_between_modes",
    "nearest_point",
    "normalize",
    "sample_orbit",
    "switch_input_mode",
]
