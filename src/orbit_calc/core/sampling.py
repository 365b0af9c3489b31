"""Sample points along a circular orbit for plotting and hover lookup."""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .config import PHYSICS_CFG, PhysicsCfg
from .model import OrbitalDetailPoint, OrbitalResult


def sample_orbit(
    result: OrbitalResult,
    sample_count: int | None = None,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> tuple[OrbitalDetailPoint, ...]:
    """Return ``sample_count`` points evenly spaced by angle over one revolution.

    ``sample_count`` defaults to ``cfg.default_sample_count``. The first
    point sits on the +x axis at ``t = 0`` and the points advance
    counter-clockwise. Elapsed time is proportional to the angle, so the
    spacing is also even in time. The closing point at 360 degrees is not
    repeated.
    """

    if sample_count is None:
        sample_count = cfg.default_sample_count
    if sample_count < 0:
        raise ValueError("sample_count must not be negative")
    if sample_count == 0:
        return ()

    radius = result.radius_km
    angles = np.linspace(0.0, 2.0 * np.pi, sample_count, endpoint=False)
    xs = radius * np.cos(angles)
    ys = radius * np.sin(angles)
    elapsed = result.period_s * np.arange(sample_count) / sample_count

    return tuple(
        OrbitalDetailPoint(
            index=i,
            angle_rad=float(angles[i]),
            x_km=float(xs[i]),
            y_km=float(ys[i]),
            elapsed_s=float(elapsed[i]),
            velocity_ms=result.velocity_ms,
            altitude_km=result.altitude_km,
        )
        for i in range(sample_count)
    )


def nearest_point(
    points: Sequence[OrbitalDetailPoint],
    cursor: tuple[float, float],
    max_distance: float | None = None,
) -> OrbitalDetailPoint | None:
    """Closest point to ``cursor`` in the world plane, or ``None``.

    ``None`` is also returned when the closest point is further away than
    ``max_distance``.
    """

    if not points:
        return None
    cx, cy = cursor
    closest: OrbitalDetailPoint | None = None
    closest_distance = math.inf
    for point in points:
        distance = math.hypot(point.x_km - cx, point.y_km - cy)
        if distance < closest_distance:
            closest_distance = distance
            closest = point
    if max_distance is not None and closest_distance > max_distance:
        return None
    return closest


__all__ = ["nearest_point", "sample_orbit"]
