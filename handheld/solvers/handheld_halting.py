"""
Day 8: the handheld console boot code.

Part 1 reports the accumulator just before any instruction runs a second
time. Part 2 repairs the boot code by toggling one NOP or JMP and reports
the accumulator once it terminates.
"""

from __future__ import annotations

from handheld.console.loop_detector import terminates_with_accumulator
from handheld.console.parser import parse_program
from handheld.console.repair import NoRepairFoundError, repair_program
from handheld.solvers.base import PuzzleInput, SolverError
from handheld.solvers.registry import register

DAY = 8


class HandheldHaltingSolver:
    def part1(self, puzzle: PuzzleInput) -> str:
        program = parse_program(puzzle.text)
        accumulator = terminates_with_accumulator(program)
        if accumulator is None:
            raise SolverError(DAY, "boot code terminates without looping")
        return str(accumulator)

    def part2(self, puzzle: PuzzleInput) -> str:
        program = parse_program(puzzle.text)
        try:
            result = repair_program(program)
        except NoRepairFoundError as exc:
            raise SolverError(DAY, str(exc)) from exc
        return str(result.accumulator)


register(DAY, HandheldHaltingSolver)
