"""
Day-keyed solver registry.

Each solver module calls ``register(DAY, SolverClass)`` when it is imported;
``handheld.solvers`` imports every built-in solver module, so importing the
package is enough to populate the table. The runner asks for days by number
and gets a new solver each time.
"""

from __future__ import annotations

from collections.abc import Callable

from handheld.solvers.base import Solver

_REGISTRY: dict[int, Callable[[], Solver]] = {}


def register(day: int, factory: Callable[[], Solver]) -> None:
    # Re-registering a day replaces its factory.
    _REGISTRY[day] = factory


def get(day: int) -> Solver:
    """Build a solver for *day*; KeyError if the day has none."""
    try:
        factory = _REGISTRY[day]
    except KeyError:
        raise KeyError(f"No solver registered for day {day}") from None
    return factory()


def list_days() -> list[int]:
    """Registered days, ascending (the runner's default run order)."""
    return sorted(_REGISTRY)
