"""
Handheld console: a three-opcode machine with loop detection and repair.

A Program is parsed from text, executed by a Process under a guard, checked
for infinite loops by LoopGuard, and repaired by toggling a single NOP or JMP
until it terminates.
"""

from .instruction import Instruction, Program, acc, jmp, nop
from .loop_detector import LoopGuard, run_detecting_loops, terminates_with_accumulator
from .parser import (
    MalformedOperandError,
    ParseError,
    UnknownMnemonicError,
    parse_instruction,
    parse_program,
)
from .process import Process
from .registry import OpcodeRegistry, get_registry
from .repair import (
    NoRepairFoundError,
    RepairResult,
    iter_toggle_candidates,
    repair_accumulator,
    repair_program,
)
from .types import ExecutionOutcome, Halted, OpCode, RunState, Terminated

__all__ = [
    # Instructions
    "OpCode",
    "Instruction",
    "Program",
    "nop",
    "acc",
    "jmp",
    # Parsing
    "parse_instruction",
    "parse_program",
    "ParseError",
    "UnknownMnemonicError",
    "MalformedOperandError",
    # Execution
    "Process",
    "RunState",
    "ExecutionOutcome",
    "Terminated",
    "Halted",
    # Loop detection
    "LoopGuard",
    "run_detecting_loops",
    "terminates_with_accumulator",
    # Repair
    "repair_program",
    "repair_accumulator",
    "iter_toggle_candidates",
    "RepairResult",
    "NoRepairFoundError",
    # Registry
    "OpcodeRegistry",
    "get_registry",
]
