"""
Opcode registry: loads the mnemonic table from YAML at startup, validates
it, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to
the registry after startup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml

from .types import OpCode, OpcodeEntry

_DATA_DIR = Path(__file__).parent / "data"


class OpcodeRegistry:
    """
    Immutable registry of the console's opcode table.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self.opcodes: dict[OpCode, OpcodeEntry] = {}
        self.mnemonics: dict[str, OpCode] = {}
        self._load_errors: list[str] = []

        self._load_opcodes()
        self._validate_cross_references()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        with open(path) as f:
            return yaml.safe_load(f)

    def _load_opcodes(self) -> None:
        data = self._load_yaml("opcodes.yaml")
        for entry in data["opcodes"]:
            op = OpCode(entry["opcode"])
            toggles_to = entry.get("toggles_to")
            mnemonic = entry["mnemonic"]
            if op in self.opcodes:
                self._load_errors.append(f"opcode {op.value} is defined more than once")
            if mnemonic in self.mnemonics:
                self._load_errors.append(f"mnemonic {mnemonic!r} is defined more than once")
            self.opcodes[op] = OpcodeEntry(
                opcode=op,
                mnemonic=mnemonic,
                toggles_to=OpCode(toggles_to) if toggles_to else None,
                description=entry.get("description", "").strip(),
            )
            self.mnemonics[mnemonic] = op

    # ── Cross-reference validation ─────────────────────────────────────────────

    def _validate_cross_references(self) -> None:
        """
        Raises ValueError listing all problems found if the table is
        incomplete or its toggle pairs are inconsistent.
        """
        errors: list[str] = list(self._load_errors)

        for op in OpCode:
            if op not in self.opcodes:
                errors.append(f"opcode {op.value} has no entry in opcodes")

        # Toggling twice must give back the original opcode
        for op, entry in self.opcodes.items():
            partner = entry.toggles_to
            if partner is None:
                continue
            if partner == op:
                errors.append(f"opcode {op.value} toggles to itself")
            elif partner not in self.opcodes:
                errors.append(f"opcode {op.value} toggles to undefined {partner.value}")
            elif self.opcodes[partner].toggles_to != op:
                errors.append(
                    f"toggle pair is not symmetric: {op.value} -> {partner.value} "
                    f"-> {self.opcodes[partner].toggles_to}"
                )

        # Accumulate instructions are never repair candidates
        acc = self.opcodes.get(OpCode.ACC)
        if acc is not None and acc.toggles_to is not None:
            errors.append("opcode ACC must not toggle")

        if errors:
            raise ValueError(
                "Opcode registry validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def lookup_mnemonic(self, mnemonic: str) -> Optional[OpCode]:
        """Return the OpCode for *mnemonic*, or None if it is not defined."""
        return self.mnemonics.get(mnemonic)

    def mnemonic_for(self, opcode: OpCode) -> str:
        return self.opcodes[opcode].mnemonic

    def toggle_partner(self, opcode: OpCode) -> Optional[OpCode]:
        """Return the opcode a repair toggle swaps *opcode* to, or None."""
        return self.opcodes[opcode].toggles_to

    def is_togglable(self, opcode: OpCode) -> bool:
        return self.opcodes[opcode].toggles_to is not None


# ── Module-level singleton ─────────────────────────────────────────────────────

_registry: OpcodeRegistry = OpcodeRegistry()


def get_registry() -> OpcodeRegistry:
    """Return the module-level registry singleton."""
    return _registry
