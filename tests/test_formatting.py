import pytest

from orbit_calc.core.formatting import detail_lines, format_period, format_result, result_lines
from orbit_calc.core.physics import compute_orbital_properties
from orbit_calc.core.sampling import sample_orbit


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0, "00:00:00 (HH:MM:SS)"),
        (5553.0, "01:32:33 (HH:MM:SS)"),
        (59.6, "00:01:00 (HH:MM:SS)"),
        (86_399.4, "23:59:59 (HH:MM:SS)"),
        (90_061.0, "1d 01:01:01 (H:M:S)"),
        (float("nan"), "N/A"),
        (-1.0, "N/A"),
    ],
)
def test_format_period(seconds, expected):
    assert format_period(seconds) == expected


def test_format_result_leo():
    formatted = format_result(compute_orbital_properties(400.0))
    assert formatted.altitude_km == "400.0"
    assert formatted.altitude_mi == "248.5"
    assert formatted.velocity_kms.startswith("7.6")
    assert len(formatted.velocity_ms.split(".")[1]) == 2
    assert formatted.period_s.isdigit()
    assert formatted.period_formatted.endswith("(HH:MM:SS)")


def test_result_keeps_full_precision():
    result = compute_orbital_properties(400.0)
    assert result.period_s != round(result.period_s)


def test_text_lines():
    result = compute_orbital_properties(400.0)
    lines = result_lines(result)
    assert len(lines) == 3
    assert "km/s" in lines[1]
    point = sample_orbit(result, 4)[1]
    details = detail_lines(point)
    assert details[0] == "Angle:    90.0 deg"
