"""Data models for orbital calculations."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from .config import PHYSICS_CFG
from .conversions import ms_to_kms


class Unit(StrEnum):
    KM = "km"
    MI = "mi"


class InputMode(StrEnum):
    ALTITUDE = "altitude"
    DISTANCE_FROM_CENTER = "distanceFromCenter"


@dataclass(frozen=True)
class OrbitalResult:
    """Circular orbit parameters for one altitude."""

    altitude_km: float
    velocity_ms: float
    period_s: float
    earth_radius_km: float = PHYSICS_CFG.earth_radius_km

    @property
    def radius_km(self) -> float:
        return self.earth_radius_km + self.altitude_km

    @property
    def velocity_kms(self) -> float:
        return ms_to_kms(self.velocity_ms)


@dataclass(frozen=True)
class OrbitalDetailPoint:
    """Sample on the rendered orbit path with its physical quantities."""

    index: int
    angle_rad: float
    x_km: float
    y_km: float
    elapsed_s: float
    velocity_ms: float
    altitude_km: float

    @property
    def angle_deg(self) -> float:
        return math.degrees(self.angle_rad)

    @property
    def position(self) -> tuple[float, float]:
        return self.x_km, self.y_km


__all__ = ["InputMode", "OrbitalDetailPoint", "OrbitalResult", "Unit"]
