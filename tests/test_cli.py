import logging

import pytest

from orbit_calc.cli import build_parser, main


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    package_logger = logging.getLogger("orbit_calc")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()


def test_calc_prints_results(capsys):
    assert main(["calc", "400"]) == 0
    out = capsys.readouterr().out
    assert "400.0 km / 248.5 mi" in out
    assert "km/s" in out
    assert "(HH:MM:SS)" in out


def test_calc_with_samples(capsys):
    assert main(["calc", "6771", "--mode", "distanceFromCenter", "--samples", "4"]) == 0
    out = capsys.readouterr().out
    assert "400.0 km" in out
    assert "90.0" in out


@pytest.mark.parametrize(
    "argv, message",
    [
        (["calc", "abc"], "valid number"),
        (["calc", "-5"], "non-negative"),
        (["calc", "1000", "--mode", "distanceFromCenter"], "Earth's radius"),
    ],
)
def test_calc_errors(capsys, argv, message):
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert message in captured.err
    assert captured.out == ""


def test_sweep_exports(tmp_path, capsys):
    csv_path = tmp_path / "sweep.csv"
    code = main(["sweep", "--min", "200", "--max", "1000", "--points", "3", "--csv", str(csv_path)])
    assert code == 0
    assert csv_path.exists()
    assert "Velocity (km/s)" in capsys.readouterr().out


def test_sweep_bad_range(capsys):
    assert main(["sweep", "--min", "500", "--max", "100"]) == 2
    assert "Error" in capsys.readouterr().err


def test_parser_defaults():
    args = build_parser().parse_args(["gui"])
    assert args.value == "400"
    assert args.unit == "km"
    assert args.mode == "altitude"


def test_calc_rejects_unrepresentable_altitude(capsys):
    assert main(["calc", "1e306"]) == 2
    assert "too large" in capsys.readouterr().err
