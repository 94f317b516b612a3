"""
Core type definitions for the handheld console.

Enums are the canonical vocabulary; dataclasses are the runtime objects.
OpcodeEntry is loaded from the YAML opcode table and is frozen after
startup — never written to at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# ── Enums ──────────────────────────────────────────────────────────────────────


class OpCode(str, Enum):
    """The three operations understood by the console."""

    NOP = "NOP"  # advance by 1, operand ignored
    ACC = "ACC"  # add operand to accumulator, advance by 1
    JMP = "JMP"  # advance by operand


class RunState(str, Enum):
    """Result of a single execution step."""

    RUNNING = "RUNNING"
    STOPPED = "STOPPED"

    @property
    def is_running(self) -> bool:
        return self is RunState.RUNNING


# ── Registry entry type (frozen, loaded from YAML) ────────────────────────────


@dataclass(frozen=True)
class OpcodeEntry:
    opcode: OpCode
    mnemonic: str
    toggles_to: Optional[OpCode]
    description: str = ""


# ── Execution outcomes ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Terminated:
    """The program counter left the program: a clean exit."""

    accumulator: int


@dataclass(frozen=True)
class Halted:
    """
    A guard stopped the run before the instruction at ``program_counter``
    executed.

    Attributes:
        accumulator: Accumulator value when the guard refused to continue.
        program_counter: The counter the guard was shown when it refused.
    """

    accumulator: int
    program_counter: int


ExecutionOutcome = Union[Terminated, Halted]
