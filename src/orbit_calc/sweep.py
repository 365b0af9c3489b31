"""Altitude sweep: velocity and period over a range of circular orbits."""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .core.config import PHYSICS_CFG, PhysicsCfg
from .core.logging_utils import TableWriter
from .core.physics import circular_orbit_profile

logger = logging.getLogger(__name__)

SWEEP_HEADER = ["altitude_km", "velocity_km_s", "period_min"]

# Reference orbits marked on the plot
REFERENCE_ORBITS: tuple[tuple[str, float], ...] = (
    ("ISS", 420.0),
    ("GPS", 20_200.0),
    ("GEO", 35_786.0),
)


def run_sweep(
    min_altitude_km: float | None = None,
    max_altitude_km: float | None = None,
    points: int | None = None,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return altitudes (km), velocities (m/s) and periods (s)."""

    lo = cfg.sweep_min_altitude_km if min_altitude_km is None else min_altitude_km
    hi = cfg.sweep_max_altitude_km if max_altitude_km is None else max_altitude_km
    n = cfg.sweep_points if points is None else points
    if n < 2:
        raise ValueError("a sweep needs at least two points")
    if lo < 0.0 or hi <= lo:
        raise ValueError("altitude range must satisfy 0 <= min < max")

    altitudes = np.linspace(lo, hi, n)
    v, T = circular_orbit_profile(altitudes, cfg)
    logger.debug("Swept %d altitudes from %.1f to %.1f km", n, lo, hi)
    return altitudes, v, T


def save_csv(path: Path, altitudes: np.ndarray, v: np.ndarray, T: np.ndarray) -> Path:
    with TableWriter(path, SWEEP_HEADER) as writer:
        for h, vi, Ti in zip(altitudes, v, T):
            writer.write_row([float(h), float(vi) / 1000.0, float(Ti) / 60.0])
    return Path(path)


def plot_profile(path: Path, altitudes: np.ndarray, v: np.ndarray, T: np.ndarray) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_v, ax_t) = plt.subplots(2, 1, figsize=(8, 7), sharex=True)
    ax_v.plot(altitudes, v / 1000.0, color="#6bc5c0", lw=1.8)
    ax_v.set_ylabel("Velocity [km/s]")
    ax_v.set_title("Circular orbit velocity and period vs altitude")
    ax_v.grid(True, alpha=0.3)

    ax_t.plot(altitudes, T / 3600.0, color="#ffa94d", lw=1.8)
    ax_t.set_xlabel("Altitude [km]")
    ax_t.set_ylabel("Period [h]")
    ax_t.grid(True, alpha=0.3)

    for name, altitude in REFERENCE_ORBITS:
        if altitudes[0] <= altitude <= altitudes[-1]:
            for ax in (ax_v, ax_t):
                ax.axvline(altitude, color="#4a86f7", alpha=0.4, ls="--")
            ax_t.annotate(
                name,
                (altitude, ax_t.get_ylim()[1]),
                textcoords="offset points",
                xytext=(4, -14),
                fontsize=8,
                color="#4a86f7",
            )

    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info("Saved sweep figure to %s", path)
    return path


__all__ = ["REFERENCE_ORBITS", "SWEEP_HEADER", "plot_profile", "run_sweep", "save_csv"]
