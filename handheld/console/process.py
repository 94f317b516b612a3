"""
Execution state and run-loop for the handheld console.

A Process holds the program counter, the accumulator and a read-only view of
the Program. step() dispatches the current instruction to a handler that
advances the counter and, for ACC, the accumulator. run_with_guard() drives
step() with a caller-supplied predicate that is consulted *before* each step,
so the guard sees every program counter including the first.

A program counter outside ``[0, len(program))`` is not an error: it means
the program has terminated.
"""

from __future__ import annotations

from collections.abc import Callable

from .instruction import Instruction, Program
from .types import ExecutionOutcome, Halted, OpCode, RunState, Terminated

Guard = Callable[["Process"], bool]
_OpHandler = Callable[["Process", Instruction], None]


class Process:
    """
    One execution attempt over a Program.

    Create a fresh Process per run; a Process is not reset or reused.

    Attributes:
        program: The instructions being executed. Never modified.
        pc: Index of the next instruction to execute. May be negative or
            past the end.
        acc: The accumulator.
    """

    def __init__(self, program: Program, pc: int = 0, acc: int = 0) -> None:
        self.program = program
        self.pc = pc
        self.acc = acc

    def __repr__(self) -> str:
        return f"Process(pc={self.pc}, acc={self.acc}, len={len(self.program)})"

    @property
    def is_terminated(self) -> bool:
        """True once the program counter has advanced past the last instruction."""
        return self.pc >= len(self.program)

    def current_instruction(self) -> Instruction | None:
        if 0 <= self.pc < len(self.program):
            return self.program[self.pc]
        return None

    def step(self) -> RunState:
        """
        Execute the instruction at the program counter.

        Returns STOPPED without touching any state if the counter is out of
        range.
        """
        instruction = self.current_instruction()
        if instruction is None:
            return RunState.STOPPED
        _DISPATCH[instruction.opcode](self, instruction)
        return RunState.RUNNING

    def run_with_guard(self, guard: Guard) -> ExecutionOutcome:
        """
        Step until the guard refuses or the program counter leaves the program.

        *guard* is called with this process before every step. When it returns
        False the loop exits immediately, leaving the process exactly as the
        guard saw it, and the result is ``Halted``. Otherwise the outcome is
        ``Terminated``.
        """
        while True:
            if not guard(self):
                return Halted(accumulator=self.acc, program_counter=self.pc)
            if not self.step().is_running:
                return Terminated(accumulator=self.acc)

    def run(self) -> ExecutionOutcome:
        """Run without a guard. Only returns for programs that terminate."""
        return self.run_with_guard(lambda _: True)


def _exec_nop(process: Process, instruction: Instruction) -> None:
    process.pc += 1


def _exec_acc(process: Process, instruction: Instruction) -> None:
    process.acc += instruction.operand
    process.pc += 1


def _exec_jmp(process: Process, instruction: Instruction) -> None:
    process.pc += instruction.operand


_DISPATCH: dict[OpCode, _OpHandler] = {
    OpCode.NOP: _exec_nop,
    OpCode.ACC: _exec_acc,
    OpCode.JMP: _exec_jmp,
}
