import math

import numpy as np
import pytest

from orbit_calc.core.config import PhysicsCfg
from orbit_calc.core.errors import InvalidAltitude, ValidationError
from orbit_calc.core.physics import circular_orbit_profile, compute_orbital_properties


def test_leo_matches_known_values():
    result = compute_orbital_properties(400.0)
    assert result.altitude_km == 400.0
    assert result.velocity_kms == pytest.approx(7.669, rel=0.01)
    assert result.period_s == pytest.approx(5553.0, rel=0.01)
    assert result.radius_km == pytest.approx(6771.0)


def test_geostationary_period_is_a_sidereal_day():
    result = compute_orbital_properties(35_786.0)
    assert result.period_s == pytest.approx(86_164.0, rel=0.01)


def test_surface_orbit_is_valid():
    result = compute_orbital_properties(0.0)
    assert result.velocity_ms > 7_000.0
    assert result.period_s > 0.0


def test_velocity_decreases_and_period_increases_with_altitude():
    altitudes = [0.0, 1.0, 200.0, 400.0, 2_000.0, 20_200.0, 35_786.0, 384_400.0]
    results = [compute_orbital_properties(a) for a in altitudes]
    for lower, higher in zip(results, results[1:]):
        assert lower.velocity_ms > higher.velocity_ms > 0.0
        assert 0.0 < lower.period_s < higher.period_s


def test_circular_orbit_relation():
    result = compute_orbital_properties(1_000.0)
    circumference_m = 2.0 * math.pi * result.radius_km * 1000.0
    assert result.velocity_ms * result.period_s == pytest.approx(circumference_m)


@pytest.mark.parametrize("altitude", [-6371.0, -7000.0, float("nan"), float("inf")])
def test_non_positive_radius_is_rejected(altitude):
    with pytest.raises(InvalidAltitude):
        compute_orbital_properties(altitude)


def test_invalid_altitude_is_a_validation_error():
    with pytest.raises(ValidationError):
        compute_orbital_properties(-10_000.0)


def test_custom_body_config():
    cfg = PhysicsCfg(mu=4.9048695e12, earth_radius=1_737_400.0)
    result = compute_orbital_properties(100.0, cfg)
    assert result.earth_radius_km == pytest.approx(1737.4)
    assert result.velocity_kms == pytest.approx(1.633, rel=0.01)


def test_profile_matches_scalar_engine():
    altitudes = np.array([200.0, 400.0, 35_786.0])
    v, T = circular_orbit_profile(altitudes)
    for h, vi, Ti in zip(altitudes, v, T):
        result = compute_orbital_properties(float(h))
        assert vi == pytest.approx(result.velocity_ms)
        assert Ti == pytest.approx(result.period_s)


def test_profile_rejects_radius_below_center():
    with pytest.raises(InvalidAltitude):
        circular_orbit_profile(np.array([100.0, -8_000.0]))


def test_huge_finite_altitude_does_not_overflow():
    result = compute_orbital_properties(1e200)
    assert 0.0 < result.velocity_ms < math.inf
    assert 0.0 < result.period_s < math.inf


@pytest.mark.parametrize("altitude", [1e300, 1e306, 1.7e308])
def test_unrepresentable_orbit_is_rejected(altitude):
    with pytest.raises(InvalidAltitude, match="too large"):
        compute_orbital_properties(altitude)


def test_profile_handles_huge_altitudes():
    v, T = circular_orbit_profile(np.array([400.0, 1e200]))
    assert np.all(np.isfinite(T))
    assert np.all(v > 0.0)
    with pytest.raises(InvalidAltitude):
        circular_orbit_profile(np.array([400.0, 1e306]))
    with pytest.raises(InvalidAltitude):
        circular_orbit_profile(np.array([400.0, 1e300]))


def test_result_defaults_follow_config():
    from orbit_calc.core.config import PHYSICS_CFG
    from orbit_calc.core.model import OrbitalResult

    result = OrbitalResult(altitude_km=400.0, velocity_ms=7672.5, period_s=5545.0)
    assert result.earth_radius_km == PHYSICS_CFG.earth_radius_km
    assert result.velocity_kms == pytest.approx(7.6725)
