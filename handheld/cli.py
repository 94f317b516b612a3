"""Command-line entry point: ``handheld`` / ``python -m handheld``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from handheld.config import ConfigError, RunConfig, load_config
from handheld.runner import RunnerError, format_report, run_days
from handheld.solvers.base import SolverError


def _positive_int(value: str) -> int:
    try:
        day = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from None
    if day <= 0:
        raise argparse.ArgumentTypeError(f"day must be positive: {value}")
    return day


def _setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handheld",
        description="Run puzzle solvers over their input files and print both answers.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="run config YAML (inputs_dir, days)",
    )
    parser.add_argument(
        "--inputs-dir",
        type=Path,
        default=None,
        help="directory of puzzle inputs named by day (overrides config)",
    )
    parser.add_argument(
        "--day",
        dest="days",
        type=_positive_int,
        action="append",
        default=None,
        help="day to run; repeat for several (default: all registered)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="increase log verbosity (-v, -vv)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config is not None else RunConfig()
        config = config.with_overrides(
            inputs_dir=args.inputs_dir,
            days=tuple(args.days) if args.days else None,
        )
        reports = run_days(config)
    except (ConfigError, RunnerError, SolverError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for report in reports:
        print(format_report(report))
        print()
    return 0
