"""
Tests for the opcode registry.

Covers:
  - The YAML table loads without error
  - Every OpCode has an entry and a mnemonic
  - Toggle pairs are symmetric and ACC never toggles
  - Corrupted data raises at load time (not silently at query time)
"""

import shutil
from pathlib import Path

import pytest
import yaml

import handheld.console.registry as registry_module
from handheld.console import OpCode, get_registry
from handheld.console.registry import OpcodeRegistry

_DATA_DIR = Path(registry_module.__file__).parent / "data"


@pytest.fixture(scope="module")
def registry():
    return get_registry()


def _write_corrupted(tmp_path: Path, mutate) -> Path:
    data_dir = tmp_path / "data"
    shutil.copytree(_DATA_DIR, data_dir)
    path = data_dir / "opcodes.yaml"
    data = yaml.safe_load(path.read_text())
    mutate(data["opcodes"])
    path.write_text(yaml.safe_dump(data))
    return data_dir


def _entry(entries: list, mnemonic: str) -> dict:
    return next(e for e in entries if e["mnemonic"] == mnemonic)


# ── Registry loads ─────────────────────────────────────────────────────────────


class TestRegistryLoads:
    def test_singleton_is_stable(self, registry):
        assert get_registry() is registry

    def test_every_opcode_has_entry(self, registry):
        for op in OpCode:
            assert op in registry.opcodes

    def test_mnemonics(self, registry):
        assert registry.lookup_mnemonic("nop") == OpCode.NOP
        assert registry.lookup_mnemonic("acc") == OpCode.ACC
        assert registry.lookup_mnemonic("jmp") == OpCode.JMP

    def test_unknown_mnemonic_is_none(self, registry):
        assert registry.lookup_mnemonic("hlt") is None

    def test_mnemonic_for_round_trips(self, registry):
        for op in OpCode:
            assert registry.lookup_mnemonic(registry.mnemonic_for(op)) == op

    def test_descriptions_are_stripped(self, registry):
        for entry in registry.opcodes.values():
            assert entry.description
            assert entry.description == entry.description.strip()

    def test_custom_data_dir(self, tmp_path):
        data_dir = tmp_path / "data"
        shutil.copytree(_DATA_DIR, data_dir)
        assert OpcodeRegistry(data_dir).lookup_mnemonic("jmp") == OpCode.JMP


# ── Toggle table ───────────────────────────────────────────────────────────────


class TestToggles:
    def test_nop_and_jmp_are_partners(self, registry):
        assert registry.toggle_partner(OpCode.NOP) == OpCode.JMP
        assert registry.toggle_partner(OpCode.JMP) == OpCode.NOP

    def test_acc_has_no_partner(self, registry):
        assert registry.toggle_partner(OpCode.ACC) is None
        assert not registry.is_togglable(OpCode.ACC)

    def test_partners_are_symmetric(self, registry):
        for op in OpCode:
            partner = registry.toggle_partner(op)
            if partner is not None:
                assert registry.toggle_partner(partner) == op


# ── Validation at load time ────────────────────────────────────────────────────


class TestValidation:
    def test_missing_opcode_raises(self, tmp_path):
        def drop_jmp(entries):
            entries.remove(_entry(entries, "jmp"))
            _entry(entries, "nop")["toggles_to"] = None

        with pytest.raises(ValueError, match="opcode JMP has no entry"):
            OpcodeRegistry(_write_corrupted(tmp_path, drop_jmp))

    def test_asymmetric_toggle_raises(self, tmp_path):
        def break_pair(entries):
            _entry(entries, "jmp")["toggles_to"] = None

        with pytest.raises(ValueError, match="not symmetric"):
            OpcodeRegistry(_write_corrupted(tmp_path, break_pair))

    def test_acc_toggle_raises(self, tmp_path):
        def toggle_acc(entries):
            _entry(entries, "acc")["toggles_to"] = "ACC"

        with pytest.raises(ValueError, match="ACC must not toggle"):
            OpcodeRegistry(_write_corrupted(tmp_path, toggle_acc))

    def test_duplicate_mnemonic_raises(self, tmp_path):
        def duplicate(entries):
            _entry(entries, "jmp")["mnemonic"] = "nop"

        with pytest.raises(ValueError, match="mnemonic 'nop' is defined more than once"):
            OpcodeRegistry(_write_corrupted(tmp_path, duplicate))

    def test_all_problems_are_reported(self, tmp_path):
        def break_everything(entries):
            _entry(entries, "acc")["toggles_to"] = "ACC"
            _entry(entries, "jmp")["toggles_to"] = None

        with pytest.raises(ValueError) as excinfo:
            OpcodeRegistry(_write_corrupted(tmp_path, break_everything))
        message = str(excinfo.value)
        assert "toggles to itself" in message
        assert "not symmetric" in message

    def test_unknown_opcode_name_raises(self, tmp_path):
        def bad_opcode(entries):
            _entry(entries, "nop")["opcode"] = "HALT"

        with pytest.raises(ValueError):
            OpcodeRegistry(_write_corrupted(tmp_path, bad_opcode))

    def test_missing_file_raises(self, tmp_path):
        data_dir = tmp_path / "data"
        shutil.copytree(_DATA_DIR, data_dir)
        (data_dir / "opcodes.yaml").unlink()
        with pytest.raises(FileNotFoundError):
            OpcodeRegistry(data_dir)
