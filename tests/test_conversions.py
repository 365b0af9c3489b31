import pytest

from orbit_calc.core.conversions import (
    km_to_m,
    km_to_mi,
    kms_to_ms,
    m_to_km,
    m_to_mi,
    mi_to_km,
    mi_to_m,
    ms_to_kms,
)


def test_known_values():
    assert mi_to_m(1.0) == pytest.approx(1609.344)
    assert m_to_km(1500.0) == pytest.approx(1.5)
    assert km_to_m(6371.0) == pytest.approx(6_371_000.0)
    assert ms_to_kms(7669.0) == pytest.approx(7.669)
    assert km_to_mi(400.0) == pytest.approx(248.548, rel=1e-5)


@pytest.mark.parametrize("x", [0.0, 1e-6, 1.0, 249.0, 6371.0, 35_786.0, 1e12])
def test_round_trips(x):
    assert km_to_mi(mi_to_km(x)) == pytest.approx(x, rel=1e-9, abs=0.0)
    assert ms_to_kms(kms_to_ms(x)) == pytest.approx(x, rel=1e-9, abs=0.0)
    assert m_to_mi(mi_to_m(x)) == pytest.approx(x, rel=1e-9, abs=0.0)
    assert m_to_km(km_to_m(x)) == pytest.approx(x, rel=1e-9, abs=0.0)


def test_conversions_do_not_round():
    assert km_to_mi(1.0) != round(km_to_mi(1.0), 3)
