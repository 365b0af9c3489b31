"""Command line entry point for the orbit calculator."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .core.calculator import calculate
from .core.config import PHYSICS_CFG
from .core.errors import ValidationError
from .core.formatting import format_period, result_lines
from .core.logging_utils import setup_logging
from .core.model import InputMode, Unit
from .core.sampling import sample_orbit

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orbit-calc",
        description="Circular orbit velocity and period around Earth.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")
    sub = parser.add_subparsers(dest="command")

    calc = sub.add_parser("calc", help="Compute one circular orbit.")
    calc.add_argument("value", help="Altitude or distance from center.")
    calc.add_argument("--unit", choices=[u.value for u in Unit], default=Unit.KM.value)
    calc.add_argument("--mode", choices=[m.value for m in InputMode], default=InputMode.ALTITUDE.value)
    calc.add_argument(
        "--samples",
        type=int,
        default=0,
        help="Also print this many evenly spaced points along the orbit.",
    )

    sweep = sub.add_parser("sweep", help="Tabulate velocity and period over an altitude range.")
    sweep.add_argument("--min", dest="min_km", type=float, default=PHYSICS_CFG.sweep_min_altitude_km)
    sweep.add_argument("--max", dest="max_km", type=float, default=PHYSICS_CFG.sweep_max_altitude_km)
    sweep.add_argument("--points", type=int, default=PHYSICS_CFG.sweep_points)
    sweep.add_argument("--csv", type=Path, default=None, help="Write the table to this CSV file.")
    sweep.add_argument("--plot", type=Path, default=None, help="Save a figure to this PNG file.")

    gui = sub.add_parser("gui", help="Open the interactive window (default).")
    gui.add_argument("--value", default="400")
    gui.add_argument("--unit", choices=[u.value for u in Unit], default=Unit.KM.value)
    gui.add_argument("--mode", choices=[m.value for m in InputMode], default=InputMode.ALTITUDE.value)
    return parser


def cmd_calc(args: argparse.Namespace) -> int:
    try:
        result = calculate(args.value, Unit(args.unit), InputMode(args.mode))
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    for line in result_lines(result):
        print(line)
    if args.samples > 0:
        print()
        print(f"{'#':>4} | {'Angle (deg)':>11} | {'x (km)':>11} | {'y (km)':>11} | {'Elapsed':>21}")
        print("-" * 70)
        for point in sample_orbit(result, args.samples):
            print(
                f"{point.index:4d} | {point.angle_deg:11.1f} | {point.x_km:11.1f} | "
                f"{point.y_km:11.1f} | {format_period(point.elapsed_s):>21}"
            )
    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    from . import sweep

    try:
        altitudes, v, T = sweep.run_sweep(args.min_km, args.max_km, args.points)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"{'Altitude (km)':>14} | {'Velocity (km/s)':>16} | {'Period (min)':>12}")
    print("-" * 50)
    for h, vi, Ti in zip(altitudes, v, T):
        print(f"{h:14.1f} | {vi / 1000:16.3f} | {Ti / 60:12.2f}")
    if args.csv is not None:
        sweep.save_csv(args.csv, altitudes, v, T)
    if args.plot is not None:
        sweep.plot_profile(args.plot, altitudes, v, T)
    return 0


def cmd_gui(args: argparse.Namespace) -> int:
    from .app import run_app

    run_app(args.value, Unit(args.unit), InputMode(args.mode))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    if args.command is None:
        argv = list(sys.argv[1:] if argv is None else argv)
        args = parser.parse_args([*argv, "gui"])
    handlers = {"calc": cmd_calc, "sweep": cmd_sweep, "gui": cmd_gui}
    logger.debug("Running %s", args.command)
    return handlers[args.command](args)


__all__ = ["build_parser", "main"]
