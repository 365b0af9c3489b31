"""Exceptions raised by the calculation core.

All of them are recoverable by correcting the input; ``str(exc)`` is the
message shown to the user.
"""
from __future__ import annotations


class OrbitCalcError(ValueError):
    """Base class for every error raised by :mod:`orbit_calc`."""


class ValidationError(OrbitCalcError):
    """Input could not be turned into a valid altitude."""


class NotANumber(ValidationError):
    def __init__(self, raw_value: str) -> None:
        super().__init__("Please enter a valid number for altitude.")
        self.raw_value = raw_value


class NegativeValue(ValidationError):
    def __init__(self, value: float) -> None:
        super().__init__("Altitude must be a non-negative value.")
        self.value = value


class BelowSurface(ValidationError):
    def __init__(self, distance_km: float, required_min_km: float) -> None:
        super().__init__(
            "Distance from center cannot be less than Earth's radius "
            f"({required_min_km:g} km)."
        )
        self.distance_km = distance_km
        self.required_min_km = required_min_km


class InvalidAltitude(ValidationError):
    def __init__(
        self, altitude_km: float, reason: str = "gives a non-positive orbital radius"
    ) -> None:
        super().__init__(f"Altitude {altitude_km:g} km {reason}.")
        self.altitude_km = altitude_km


__all__ = [
    "BelowSurface",
    "InvalidAltitude",
    "NegativeValue",
    "NotANumber",
    "OrbitCalcError",
    "ValidationError",
]
