"""
Infinite-loop detection.

LoopGuard remembers every program counter it has been shown. The first time
a counter comes round again it refuses to continue, so the repeated
instruction never executes a second time and the accumulator it records is
the value at the second arrival.
"""

from __future__ import annotations

import logging
from typing import Optional

from .instruction import Program
from .process import Process
from .types import ExecutionOutcome, Halted

logger = logging.getLogger(__name__)


class LoopGuard:
    """
    Guard for Process.run_with_guard that stops on the first repeated counter.

    Attributes:
        visited: Program counters seen so far.
        loop_accumulator: Accumulator when the repeat was seen, or None.
    """

    def __init__(self) -> None:
        self.visited: set[int] = set()
        self.loop_accumulator: Optional[int] = None

    def __call__(self, process: Process) -> bool:
        if process.pc in self.visited:
            self.loop_accumulator = process.acc
            logger.debug("loop detected at pc=%d with acc=%d", process.pc, process.acc)
            return False
        self.visited.add(process.pc)
        return True


def run_detecting_loops(program: Program) -> tuple[Process, ExecutionOutcome]:
    """
    Run *program* from counter 0 under a fresh LoopGuard.

    Returns the finished Process together with the outcome: ``Terminated``
    if the program fell off the end, ``Halted`` at the repeated counter
    otherwise.
    """
    process = Process(program)
    outcome = process.run_with_guard(LoopGuard())
    return process, outcome


def terminates_with_accumulator(program: Program) -> Optional[int]:
    """
    Return the accumulator at the moment a counter repeats.

    Returns None when the program runs to completion without looping; the
    caller must then use the terminal accumulator instead.
    """
    _, outcome = run_detecting_loops(program)
    if isinstance(outcome, Halted):
        return outcome.accumulator
    return None
