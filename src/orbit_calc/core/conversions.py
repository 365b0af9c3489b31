"""Unit conversions between meters, kilometers and miles.

No rounding is applied here; formatting is done at display time.
"""
from __future__ import annotations

METERS_PER_MILE = 1609.344
METERS_PER_KILOMETER = 1000.0


def m_to_mi(meters: float) -> float:
    return meters / METERS_PER_MILE


def mi_to_m(miles: float) -> float:
    return miles * METERS_PER_MILE


def km_to_m(kilometers: float) -> float:
    return kilometers * METERS_PER_KILOMETER


def m_to_km(meters: float) -> float:
    return meters / METERS_PER_KILOMETER


def ms_to_kms(meters_per_second: float) -> float:
    return meters_per_second / METERS_PER_KILOMETER


def kms_to_ms(kilometers_per_second: float) -> float:
    return kilometers_per_second * METERS_PER_KILOMETER


def km_to_mi(kilometers: float) -> float:
    return m_to_mi(km_to_m(kilometers))


def mi_to_km(miles: float) -> float:
    return m_to_km(mi_to_m(miles))


__all__ = [
    "METERS_PER_KILOMETER",
    "METERS_PER_MILE",
    "km_to_m",
    "km_to_mi",
    "kms_to_ms",
    "m_to_km",
    "m_to_mi",
    "mi_to_km",
    "mi_to_m",
    "ms_to_kms",
]
