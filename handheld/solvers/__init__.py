# Import solver modules to trigger self-registration.
import handheld.solvers.handheld_halting  # noqa: F401
from handheld.solvers.base import PuzzleInput, Solver, SolverError
from handheld.solvers.registry import get, list_days, register

__all__ = ["PuzzleInput", "Solver", "SolverError", "get", "list_days", "register"]
