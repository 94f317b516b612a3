"""
Console instructions.

An Instruction is an opcode plus a signed operand. For NOP and JMP the operand
is an offset added to the program counter (JMP only acts on it); for ACC it is
the delta added to the accumulator. Instructions are frozen: toggle() returns
a new instance rather than changing the instruction in place.
"""

from __future__ import annotations

from dataclasses import dataclass

from .registry import get_registry
from .types import OpCode


@dataclass(frozen=True)
class Instruction:
    """
    A single console instruction.

    Attributes:
        opcode: Which of the three operations to perform.
        operand: Signed offset (NOP, JMP) or accumulator delta (ACC).
    """

    opcode: OpCode
    operand: int

    def __str__(self) -> str:
        return f"{get_registry().mnemonic_for(self.opcode)} {self.operand:+d}"

    @property
    def is_togglable(self) -> bool:
        return get_registry().is_togglable(self.opcode)

    def toggle(self) -> Instruction:
        """
        Swap NOP and JMP, keeping the operand.

        ACC has no toggle partner and is returned unchanged, so
        ``x.toggle().toggle() == x`` holds for every instruction.
        """
        partner = get_registry().toggle_partner(self.opcode)
        if partner is None:
            return self
        return Instruction(opcode=partner, operand=self.operand)


# Programs are addressed with 0-based program counters.
Program = tuple[Instruction, ...]


def nop(offset: int = 0) -> Instruction:
    return Instruction(opcode=OpCode.NOP, operand=offset)


def acc(delta: int) -> Instruction:
    return Instruction(opcode=OpCode.ACC, operand=delta)


def jmp(offset: int) -> Instruction:
    return Instruction(opcode=OpCode.JMP, operand=offset)
