"""
Text → Instruction conversion.

Each line of console source is ``<mnemonic> <signed-integer>``, where the
mnemonic comes from the opcode registry and the sign is mandatory
(``+0``, ``-3``). parse_instruction raises a ParseError subclass naming what
was wrong; parse_program either drops bad lines (the default) or re-raises
with the offending line number.
"""

from __future__ import annotations

import logging
import re

from .instruction import Instruction, Program
from .registry import get_registry

logger = logging.getLogger(__name__)

_OPERAND_RE = re.compile(r"[+-][0-9]+")


class ParseError(ValueError):
    """Raised when a line of text is not a valid instruction."""


class UnknownMnemonicError(ParseError):
    """The first token is not a mnemonic in the opcode table."""


class MalformedOperandError(ParseError):
    """The mnemonic is known but the operand is missing, unsigned or not an integer."""


def parse_instruction(line: str) -> Instruction:
    """
    Parse one line of console source.

    Surrounding whitespace is ignored; the mnemonic and operand must be
    separated by a single space.
    """
    tokens = line.strip().split(" ")
    opcode = get_registry().lookup_mnemonic(tokens[0])
    if opcode is None:
        raise UnknownMnemonicError(f"unknown mnemonic {tokens[0]!r} in {line.strip()!r}")
    if len(tokens) != 2:
        raise MalformedOperandError(
            f"expected '<mnemonic> <signed-integer>', got {line.strip()!r}"
        )
    operand = tokens[1]
    if not _OPERAND_RE.fullmatch(operand):
        raise MalformedOperandError(
            f"operand must be a signed integer like +0 or -3, got {operand!r}"
        )
    return Instruction(opcode=opcode, operand=int(operand))


def parse_program(text: str, strict: bool = False) -> Program:
    """
    Parse console source into a Program.

    Blank lines are skipped. Lines that fail to parse are dropped unless
    *strict* is set, in which case the ParseError is re-raised with the
    1-based line number prepended.
    """
    instructions: list[Instruction] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            instructions.append(parse_instruction(line))
        except ParseError as exc:
            if strict:
                raise type(exc)(f"line {lineno}: {exc}") from exc
            logger.debug("skipping line %d: %s", lineno, exc)
    return tuple(instructions)
