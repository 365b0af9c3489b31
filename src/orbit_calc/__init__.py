"""Circular orbit calculator for Earth.

Computes orbital velocity and period from an altitude above the surface or a
distance from Earth's center, and samples the orbit for visualization.
"""

from .core import (
    CalculatorState,
    InputMode,
    OrbitalDetailPoint,
    OrbitalResult,
    Unit,
    ValidationError,
    calculate,
    compute_orbital_properties,
    nearest_point,
    normalize,
    sample_orbit,
)

__all__ = [
    "CalculatorState",
    "InputMode",
    "OrbitalDetailPoint",
    "OrbitalResult",
    "Unit",
    "ValidationError",
    "calculate",
    "compute_orbital_properties",
    "nearest_point",
    "normalize",
    "sample_orbit",
]

__version__ = "1.0.0"
