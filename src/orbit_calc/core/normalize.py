"""Turn user input into a canonical altitude in kilometers."""
from __future__ import annotations

import logging
import math

from .config import PHYSICS_CFG, PhysicsCfg
from .conversions import km_to_mi, mi_to_km
from .errors import BelowSurface, NegativeValue, NotANumber
from .model import InputMode, Unit

logger = logging.getLogger(__name__)


def parse_value(raw_value: str) -> float:
    """Parse ``raw_value`` as a finite, non-negative number."""

    try:
        value = float(raw_value.strip())
    except (AttributeError, ValueError):
        raise NotANumber(raw_value) from None
    if not math.isfinite(value):
        raise NotANumber(raw_value)
    if value < 0.0:
        raise NegativeValue(value)
    return value


def to_kilometers(value: float, unit: Unit) -> float:
    if unit is Unit.MI:
        return mi_to_km(value)
    return value


def from_kilometers(value_km: float, unit: Unit) -> float:
    if unit is Unit.MI:
        return km_to_mi(value_km)
    return value_km


def normalize(
    raw_value: str,
    unit: Unit,
    mode: InputMode,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> float:
    """Return the altitude in km described by ``raw_value`` in ``unit``/``mode``."""

    unit = Unit(unit)
    mode = InputMode(mode)
    value_km = to_kilometers(parse_value(raw_value), unit)
    if mode is InputMode.ALTITUDE:
        return value_km

    if value_km < cfg.earth_radius_km:
        logger.debug("distance %.3f km is below the surface", value_km)
        raise BelowSurface(value_km, cfg.earth_radius_km)
    return value_km - cfg.earth_radius_km


def convert_between_modes(
    value: float,
    unit: Unit,
    from_mode: InputMode,
    to_mode: InputMode,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> float:
    """Express ``value`` (in ``unit``) under ``to_mode``, keeping the unit.

    Converting a distance below the surface to an altitude clamps at 0.
    """

    unit = Unit(unit)
    from_mode = InputMode(from_mode)
    to_mode = InputMode(to_mode)
    if from_mode is to_mode:
        return value

    value_km = to_kilometers(value, unit)
    if to_mode is InputMode.DISTANCE_FROM_CENTER:
        converted_km = value_km + cfg.earth_radius_km
    else:
        converted_km = max(0.0, value_km - cfg.earth_radius_km)
    return from_kilometers(converted_km, unit)


def switch_input_mode(
    raw_value: str,
    unit: Unit,
    from_mode: InputMode,
    to_mode: InputMode,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> str:
    """Text variant of :func:`convert_between_modes` for the input field.

    Text that does not parse as a number is returned unchanged.
    """

    if InputMode(from_mode) is InputMode(to_mode):
        return raw_value
    try:
        value = float(raw_value.strip())
    except (AttributeError, ValueError):
        return raw_value
    if not math.isfinite(value):
        return raw_value
    converted = convert_between_modes(value, unit, from_mode, to_mode, cfg)
    return f"{converted:.1f}"


__all__ = [
    "convert_between_modes",
    "from_kilometers",
    "normalize",
    "parse_value",
    "switch_input_mode",
    "to_kilometers",
]
