"""Display formatting for orbital results."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .conversions import km_to_mi, m_to_mi, ms_to_kms
from .model import OrbitalDetailPoint, OrbitalResult


def format_period(seconds: float) -> str:
    """Format ``seconds`` as ``HH:MM:SS`` or ``Nd HH:MM:SS`` past one day."""

    if not math.isfinite(seconds) or seconds < 0:
        return "N/A"

    # Round half up before splitting so 59.6 s never shows as ":60".
    total = int(math.floor(seconds + 0.5))
    days, total = divmod(total, 86_400)
    hours, total = divmod(total, 3600)
    minutes, secs = divmod(total, 60)

    text = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    if days > 0:
        return f"{days}d {text} (H:M:S)"
    return f"{text} (HH:MM:SS)"


@dataclass(frozen=True)
class FormattedResult:
    altitude_km: str
    altitude_mi: str
    velocity_ms: str
    velocity_kms: str
    velocity_mis: str
    period_s: str
    period_formatted: str


def format_result(result: OrbitalResult) -> FormattedResult:
    return FormattedResult(
        altitude_km=f"{result.altitude_km:.1f}",
        altitude_mi=f"{km_to_mi(result.altitude_km):.1f}",
        velocity_ms=f"{result.velocity_ms:.2f}",
        velocity_kms=f"{ms_to_kms(result.velocity_ms):.3f}",
        velocity_mis=f"{m_to_mi(result.velocity_ms):.3f}",
        period_s=f"{result.period_s:.0f}",
        period_formatted=format_period(result.period_s),
    )


def result_lines(result: OrbitalResult) -> list[str]:
    formatted = format_result(result)
    return [
        f"Altitude:         {formatted.altitude_km} km / {formatted.altitude_mi} mi",
        f"Orbital velocity: {formatted.velocity_kms} km/s / {formatted.velocity_mis} mi/s"
        f" ({formatted.velocity_ms} m/s)",
        f"Orbital period:   {formatted.period_formatted} ({formatted.period_s} s)",
    ]


def detail_lines(point: OrbitalDetailPoint) -> list[str]:
    return [
        f"Angle:    {point.angle_deg:.1f} deg",
        f"Elapsed:  {format_period(point.elapsed_s)}",
        f"Velocity: {ms_to_kms(point.velocity_ms):.3f} km/s",
        f"Position: ({point.x_km:,.0f}, {point.y_km:,.0f}) km",
    ]


__all__ = [
    "FormattedResult",
    "detail_lines",
    "format_period",
    "format_result",
    "result_lines",
]
