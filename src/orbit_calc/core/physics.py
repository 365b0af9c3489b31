"""Circular orbit mechanics around a spherical Earth."""
from __future__ import annotations

import logging
import math

import numpy as np

from .config import PHYSICS_CFG, PhysicsCfg
from .conversions import km_to_m
from .errors import InvalidAltitude
from .model import OrbitalResult

logger = logging.getLogger(__name__)


def orbital_radius(altitude_km: float, cfg: PhysicsCfg = PHYSICS_CFG) -> float:
    """Distance from Earth's center in meters for ``altitude_km``."""

    return cfg.earth_radius + km_to_m(altitude_km)


def circular_velocity(r: float, cfg: PhysicsCfg = PHYSICS_CFG) -> float:
    """Speed of a circular orbit of radius ``r`` (m), in m/s."""

    return math.sqrt(cfg.mu / r)


def orbital_period(r: float, cfg: PhysicsCfg = PHYSICS_CFG) -> float:
    """Period of a circular orbit of radius ``r`` (m), in seconds."""

    # r * sqrt(r / mu) instead of sqrt(r**3 / mu): r**3 overflows far earlier.
    return 2.0 * math.pi * r * math.sqrt(r / cfg.mu)


def compute_orbital_properties(
    altitude_km: float, cfg: PhysicsCfg = PHYSICS_CFG
) -> OrbitalResult:
    """Return velocity and period of a circular orbit at ``altitude_km``.

    Raises :class:`InvalidAltitude` when the orbital radius would not be
    positive, i.e. the altitude lies at or below minus Earth's radius, or
    when the altitude is so large that velocity or period are not
    representable as finite positive floats.
    """

    if not math.isfinite(altitude_km):
        raise InvalidAltitude(altitude_km, "is not a finite number")
    r = orbital_radius(altitude_km, cfg)
    if not math.isfinite(r):
        raise InvalidAltitude(altitude_km, "is too large to compute an orbit")
    if r <= 0.0:
        raise InvalidAltitude(altitude_km)

    velocity = circular_velocity(r, cfg)
    period = orbital_period(r, cfg)
    if not (0.0 < velocity < math.inf and 0.0 < period < math.inf):
        raise InvalidAltitude(altitude_km, "is too large to compute an orbit")

    result = OrbitalResult(
        altitude_km=float(altitude_km),
        velocity_ms=velocity,
        period_s=period,
        earth_radius_km=cfg.earth_radius_km,
    )
    logger.debug(
        "altitude=%.3f km -> v=%.3f m/s, T=%.1f s",
        result.altitude_km,
        result.velocity_ms,
        result.period_s,
    )
    return result


def circular_orbit_profile(
    altitudes_km: np.ndarray, cfg: PhysicsCfg = PHYSICS_CFG
) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised velocity (m/s) and period (s) for an array of altitudes."""

    altitudes_km = np.asarray(altitudes_km, dtype=float)
    r = cfg.earth_radius + altitudes_km * 1000.0
    if np.any(r <= 0.0):
        raise InvalidAltitude(float(altitudes_km[r <= 0.0][0]))
    if not np.all(np.isfinite(r)):
        raise InvalidAltitude(
            float(altitudes_km[~np.isfinite(r)][0]), "is too large to compute an orbit"
        )
    v = np.sqrt(cfg.mu / r)
    T = 2.0 * np.pi * r * np.sqrt(r / cfg.mu)
    if not np.all(np.isfinite(T)):
        raise InvalidAltitude(
            float(altitudes_km[~np.isfinite(T)][0]), "is too large to compute an orbit"
        )
    return v, T


__all__ = [
    "PHYSICS_CFG",
    "PhysicsCfg",
    "circular_orbit_profile",
    "circular_velocity",
    "compute_orbital_properties",
    "orbital_period",
    "orbital_radius",
]
