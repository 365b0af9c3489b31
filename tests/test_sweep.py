import csv

import numpy as np
import pytest

from orbit_calc.sweep import SWEEP_HEADER, plot_profile, run_sweep, save_csv


def test_run_sweep_shapes_and_trends():
    altitudes, v, T = run_sweep(200.0, 1000.0, 5)
    assert altitudes.tolist() == [200.0, 400.0, 600.0, 800.0, 1000.0]
    assert v.shape == T.shape == (5,)
    assert np.all(np.diff(v) < 0)
    assert np.all(np.diff(T) > 0)


@pytest.mark.parametrize(
    "lo, hi, n",
    [(100.0, 100.0, 5), (500.0, 100.0, 5), (-1.0, 100.0, 5), (0.0, 100.0, 1)],
)
def test_run_sweep_rejects_bad_ranges(lo, hi, n):
    with pytest.raises(ValueError):
        run_sweep(lo, hi, n)


def test_save_csv(tmp_path):
    altitudes, v, T = run_sweep(400.0, 35_786.0, 3)
    path = save_csv(tmp_path / "out" / "sweep.csv", altitudes, v, T)
    with path.open(newline="") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == SWEEP_HEADER
    assert len(rows) == 4
    assert float(rows[1][0]) == 400.0
    assert float(rows[1][1]) == pytest.approx(7.67, rel=0.01)
    assert float(rows[3][2]) == pytest.approx(86_164.0 / 60.0, rel=0.01)


def test_plot_profile(tmp_path):
    altitudes, v, T = run_sweep(200.0, 40_000.0, 20)
    path = plot_profile(tmp_path / "profile.png", altitudes, v, T)
    assert path.exists()
    assert path.stat().st_size > 0
