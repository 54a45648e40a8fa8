"""A handler for output events while a solution runs.

The runner never prints.  It calls these methods in order::

    solution_name
    parse_start, parse_end, [timing]
    part_start, (part_output, [timing]) | part_not_implemented     x2

If parsing fails, the runner stops after ``parse_start`` and no part
events are sent, so handlers need no error handling of their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from aocharness.core.solution import SolutionPart
from aocharness.core.timing import TimingSample


class OutputHandler(ABC):
    """Abstract receiver of run events."""

    @abstractmethod
    def solution_name(self, name: str) -> None:
        """Called once with the solution's name before anything runs."""

    def parse_start(self) -> None:
        """Called when parsing is starting."""

    def parse_end(self) -> None:
        """Called when parsing has finished."""

    @abstractmethod
    def part_start(self, part: SolutionPart) -> None:
        """Called when a part is starting."""

    @abstractmethod
    def part_output(self, part: SolutionPart, output: Any) -> None:
        """Called with the answer produced for a part."""

    @abstractmethod
    def part_not_implemented(self, part: SolutionPart) -> None:
        """Called instead of :meth:`part_output` for a missing part."""

    @abstractmethod
    def timing(self, sample: TimingSample) -> None:
        """Called with a timing sample that passed the threshold."""
