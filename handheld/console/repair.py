"""
Repair search: find the single NOP↔JMP toggle that lets a looping program
terminate.

Candidates are tried in ascending index order, each exactly once, and the
first one whose run falls off the end of the program wins. Each trial runs
on a copy of the program with one instruction toggled, so the caller's
Program is never changed and there is nothing to revert between trials.

A run only counts as repaired when the program counter ends at or past the
last instruction; jumping to a negative counter stops the process but is not
a clean exit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .instruction import Program
from .loop_detector import run_detecting_loops

logger = logging.getLogger(__name__)


class NoRepairFoundError(Exception):
    """Raised when no single toggle makes the program terminate.

    Attributes:
        candidates_tried: Number of NOP/JMP toggles that were run.
    """

    def __init__(self, candidates_tried: int) -> None:
        super().__init__(
            f"no single NOP/JMP toggle makes the program terminate "
            f"({candidates_tried} candidates tried)"
        )
        self.candidates_tried = candidates_tried


@dataclass(frozen=True)
class RepairResult:
    """
    Outcome of a successful repair search.

    Attributes:
        index: Program counter of the toggled instruction.
        accumulator: Accumulator when the repaired program terminated.
        program: The repaired program.
    """

    index: int
    accumulator: int
    program: Program


def iter_toggle_candidates(program: Program) -> Iterator[int]:
    """Yield indices of NOP and JMP instructions in ascending order."""
    for i, instruction in enumerate(program):
        if instruction.is_togglable:
            yield i


def with_toggle(program: Program, index: int) -> Program:
    """Return a copy of *program* with the instruction at *index* toggled."""
    return program[:index] + (program[index].toggle(),) + program[index + 1:]


def repair_program(program: Program) -> RepairResult:
    """
    Return the lowest-index toggle that makes *program* terminate.

    Raises NoRepairFoundError if no candidate works, including when the
    program holds no NOP or JMP instructions at all.
    """
    tried = 0
    for index in iter_toggle_candidates(program):
        tried += 1
        candidate = with_toggle(program, index)
        process, _ = run_detecting_loops(candidate)
        logger.debug(
            "toggle %d (%s -> %s): pc=%d acc=%d",
            index,
            program[index],
            candidate[index],
            process.pc,
            process.acc,
        )
        if process.is_terminated:
            logger.info("repaired by toggling index %d, acc=%d", index, process.acc)
            return RepairResult(index=index, accumulator=process.acc, program=candidate)
    raise NoRepairFoundError(tried)


def repair_accumulator(program: Program) -> int:
    """Return only the accumulator of the repaired program."""
    return repair_program(program).accumulator
