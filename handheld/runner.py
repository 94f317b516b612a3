"""
Runner — feeds puzzle input files to registered solvers.

For each selected day, in ascending order:

  1. read ``<inputs_dir>/<day>``        → PuzzleInput
  2. solvers.get(day)                   → Solver
  3. part1(), part2()                   → DayReport

Any failure stops the run: a missing input raises RunnerError, a failing
solver raises SolverError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import handheld.solvers as solvers
from handheld.config import RunConfig
from handheld.solvers.base import PuzzleInput

logger = logging.getLogger(__name__)


class RunnerError(Exception):
    """Raised when the runner cannot set up a day (unknown day, missing input)."""


@dataclass(frozen=True)
class DayReport:
    """Both answers for one puzzle day."""

    day: int
    part1: str
    part2: str


def input_path(config: RunConfig, day: int) -> Path:
    return config.inputs_dir / str(day)


def run_day(config: RunConfig, day: int) -> DayReport:
    """Solve both parts of a single day."""
    try:
        solver = solvers.get(day)
    except KeyError as exc:
        raise RunnerError(f"no solver registered for day {day}") from exc

    path = input_path(config, day)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RunnerError(f"day {day}: input file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise RunnerError(f"day {day}: cannot read input {path}: {exc}") from exc

    puzzle = PuzzleInput(text=text)
    logger.info("day %d: solving %s", day, path)
    return DayReport(day=day, part1=solver.part1(puzzle), part2=solver.part2(puzzle))


def run_days(config: RunConfig) -> list[DayReport]:
    """Solve every day selected by *config* in ascending order."""
    days = sorted(config.days) if config.days is not None else solvers.list_days()
    return [run_day(config, day) for day in days]


def format_report(report: DayReport) -> str:
    """Render ``dayNN-part1<TAB>answer`` and ``dayNN-part2<TAB>answer`` lines."""
    return (
        f"day{report.day:02d}-part1\t{report.part1}\n"
        f"day{report.day:02d}-part2\t{report.part2}"
    )
