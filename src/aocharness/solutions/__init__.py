"""Built-in solutions.

Making a solution available to the ``aoc`` command takes two steps:
subclass :class:`~aocharness.core.solution.Solution` in a ``dayNN`` module
here, then add the class to :data:`SOLUTIONS`.
"""

from __future__ import annotations

from aocharness.core.registry import SolutionRegistry
from aocharness.core.solution import Solution
from aocharness.solutions.day00 import Day00

SOLUTIONS: tuple[type[Solution], ...] = (
    Day00,
)


def register_all_solutions(registry: SolutionRegistry) -> SolutionRegistry:
    """Instantiate and register every built-in solution."""
    for solution_cls in SOLUTIONS:
        registry.register(solution_cls())
    return registry


__all__ = ["SOLUTIONS", "register_all_solutions", "Day00"]
