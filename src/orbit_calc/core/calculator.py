"""Calculator state that recomputes its result whenever an input changes."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import PHYSICS_CFG, PhysicsCfg
from .errors import ValidationError
from .formatting import FormattedResult, format_result
from .model import InputMode, OrbitalDetailPoint, OrbitalResult, Unit
from .normalize import normalize, switch_input_mode
from .physics import compute_orbital_properties
from .sampling import sample_orbit

logger = logging.getLogger(__name__)

_PLACEHOLDERS: dict[tuple[InputMode, Unit], str] = {
    (InputMode.ALTITUDE, Unit.KM): "e.g., 400 (LEO)",
    (InputMode.ALTITUDE, Unit.MI): "e.g., 249 (LEO)",
    (InputMode.DISTANCE_FROM_CENTER, Unit.KM): "e.g., 6771 (LEO)",
    (InputMode.DISTANCE_FROM_CENTER, Unit.MI): "e.g., 4208 (LEO)",
}


def calculate(
    raw_value: str,
    unit: Unit,
    mode: InputMode,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> OrbitalResult:
    """Validate the input and compute the circular orbit it describes."""

    return compute_orbital_properties(normalize(raw_value, unit, mode, cfg), cfg)


@dataclass
class CalculatorState:
    """Current input and the result derived from it.

    ``result`` and ``error`` are replaced together on every recalculation, so
    at most one of them is set.
    """

    raw_value: str = "400"
    unit: Unit = Unit.KM
    mode: InputMode = InputMode.ALTITUDE
    sample_count: int = PHYSICS_CFG.default_sample_count
    cfg: PhysicsCfg = field(default=PHYSICS_CFG, repr=False)
    result: OrbitalResult | None = field(default=None, init=False)
    error: str | None = field(default=None, init=False)
    _points: tuple[OrbitalDetailPoint, ...] = field(
        default=(), init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.unit = Unit(self.unit)
        self.mode = InputMode(self.mode)
        self.recalculate()

    def recalculate(self) -> None:
        try:
            result = calculate(self.raw_value, self.unit, self.mode, self.cfg)
        except ValidationError as exc:
            logger.debug("rejected input %r: %s", self.raw_value, exc)
            self.result = None
            self.error = str(exc)
            self._points = ()
            return
        self.result = result
        self.error = None
        self._points = sample_orbit(result, self.sample_count, self.cfg)

    def set_value(self, raw_value: str) -> None:
        self.raw_value = raw_value
        self.recalculate()

    def set_unit(self, unit: Unit) -> None:
        self.unit = Unit(unit)
        self.recalculate()

    def set_mode(self, mode: InputMode) -> None:
        mode = InputMode(mode)
        if mode is self.mode:
            return
        self.raw_value = switch_input_mode(
            self.raw_value, self.unit, self.mode, mode, self.cfg
        )
        self.mode = mode
        self.recalculate()

    def toggle_unit(self) -> None:
        self.set_unit(Unit.MI if self.unit is Unit.KM else Unit.KM)

    @property
    def points(self) -> tuple[OrbitalDetailPoint, ...]:
        return self._points

    @property
    def formatted(self) -> FormattedResult | None:
        if self.result is None:
            return None
        return format_result(self.result)

    @property
    def placeholder(self) -> str:
        return _PLACEHOLDERS[(self.mode, self.unit)]

    @property
    def input_label(self) -> str:
        if self.mode is InputMode.ALTITUDE:
            return "Altitude Above Surface"
        return "Distance from Center"


__all__ = ["CalculatorState", "calculate"]
