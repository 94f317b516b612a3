"""Tests for handheld.solvers.registry — register / get / list_days."""

from __future__ import annotations

import pytest

import handheld.solvers as solvers
from handheld.solvers import registry
from handheld.solvers.base import PuzzleInput, Solver, SolverError
from handheld.solvers.handheld_halting import HandheldHaltingSolver


class _EchoSolver:
    def part1(self, puzzle: PuzzleInput) -> str:
        return puzzle.text.upper()

    def part2(self, puzzle: PuzzleInput) -> str:
        return puzzle.text[::-1]


@pytest.fixture
def isolated_registry(monkeypatch):
    monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))
    return registry


class TestBuiltins:
    def test_day_8_is_registered(self):
        assert 8 in solvers.list_days()

    def test_get_returns_fresh_instances(self):
        first = solvers.get(8)
        assert isinstance(first, HandheldHaltingSolver)
        assert first is not solvers.get(8)

    def test_unknown_day_raises(self):
        with pytest.raises(KeyError, match="No solver registered for day 99"):
            solvers.get(99)


class TestRegister:
    def test_register_and_get(self, isolated_registry):
        isolated_registry.register(3, _EchoSolver)
        solver = isolated_registry.get(3)
        assert isinstance(solver, Solver)
        assert solver.part1(PuzzleInput("ab")) == "AB"
        assert solver.part2(PuzzleInput("ab")) == "ba"

    def test_list_days_is_sorted(self, isolated_registry):
        isolated_registry.register(12, _EchoSolver)
        isolated_registry.register(1, _EchoSolver)
        days = isolated_registry.list_days()
        assert days == sorted(days)
        assert {1, 8, 12} <= set(days)

    def test_register_replaces(self, isolated_registry):
        isolated_registry.register(8, _EchoSolver)
        assert isinstance(isolated_registry.get(8), _EchoSolver)


class TestSolverError:
    def test_message_carries_day(self):
        error = SolverError(4, "broken")
        assert str(error) == "[day 4] broken"
        assert (error.day, error.detail) == (4, "broken")

    def test_object_without_parts_is_not_a_solver(self):
        assert not isinstance(object(), Solver)
