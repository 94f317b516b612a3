"""
Solver protocol and shared types.

Every puzzle solver answers two parts over the same raw input. Solver is a
@runtime_checkable Protocol so the runner can dispatch over heterogeneous
solvers, and tests can inject a stub without registering it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class SolverError(Exception):
    """Raised when a solver cannot produce an answer.

    Attributes:
        day: Puzzle day of the failing solver.
        detail: Human-readable description of the failure.
    """

    def __init__(self, day: int, detail: str) -> None:
        super().__init__(f"[day {day}] {detail}")
        self.day = day
        self.detail = detail


@dataclass(frozen=True)
class PuzzleInput:
    """Raw puzzle input text, passed unchanged to both parts."""

    text: str


@runtime_checkable
class Solver(Protocol):
    """Two-part puzzle solver. Answers are returned as strings."""

    def part1(self, puzzle: PuzzleInput) -> str:
        ...

    def part2(self, puzzle: PuzzleInput) -> str:
        ...
