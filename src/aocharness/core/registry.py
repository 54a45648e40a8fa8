"""Solution registry — static lookup from day number to solution.

Solutions are registered once at startup (see
:func:`aocharness.solutions.register_all_solutions`) and looked up by day
when the CLI runs.
"""

from __future__ import annotations

import logging

from aocharness.core.solution import Solution
from aocharness.exceptions import DuplicateDayError, UnknownDayError

logger = logging.getLogger(__name__)


class SolutionRegistry:
    """Registry of available solutions, keyed by day."""

    def __init__(self) -> None:
        self._solutions: dict[int, Solution] = {}

    def register(self, solution: Solution) -> None:
        """Register a solution instance under its day."""
        if solution.day in self._solutions:
            raise DuplicateDayError(solution.day)
        self._solutions[solution.day] = solution
        logger.debug("Registered solution: day %d (%s)", solution.day, solution.display_name)

    def get(self, day: int) -> Solution:
        """Look up the solution for *day*.

        Raises
        ------
        UnknownDayError
            No solution is registered for *day*.
        """
        solution = self._solutions.get(day)
        if solution is None:
            raise UnknownDayError(day, self.days())
        return solution

    def days(self) -> list[int]:
        """Return the registered days in ascending order."""
        return sorted(self._solutions)

    def __contains__(self, day: object) -> bool:
        return day in self._solutions

    def __len__(self) -> int:
        return len(self._solutions)


# Module-level registry singleton
_registry: SolutionRegistry | None = None


def get_solution_registry() -> SolutionRegistry:
    """Return the global registry, populated with every built-in solution."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        from aocharness.solutions import register_all_solutions  # noqa: PLC0415

        _registry = register_all_solutions(SolutionRegistry())
    return _registry


def reset_registry() -> None:
    """Force re-population on the next :func:`get_solution_registry` call."""
    global _registry  # noqa: PLW0603
    _registry = None
