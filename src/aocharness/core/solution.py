"""Abstract base solution — every day's solution inherits from this.

A solution declares the day it answers and a display name, then
implements up to three steps:

* :meth:`Solution.parse` turns the raw input text into whatever structure
  both parts share.  The default returns the text unchanged.
* :meth:`Solution.part_one` is required.
* :meth:`Solution.part_two` is optional; solutions that do not override it
  are reported as "not implemented" for part two.

Parsing may raise :class:`~aocharness.exceptions.ParseError`.  The part
methods are expected to be total over any successfully parsed input.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any


class SolutionPart(enum.Enum):
    """Identifies one of the two sub-answers of a day."""

    PART_ONE = 1
    PART_TWO = 2

    @property
    def default_name(self) -> str:
        return f"Part {self.value}"


class Solution(ABC):
    """Abstract base class for a day's solution.

    Attributes
    ----------
    day:
        The day number this solution answers.
    name:
        Human-readable title, printed before the answers.
    """

    day: int = -1
    name: str = ""

    def parse(self, text: str) -> Any:
        """Parse the raw input text.  Returns *text* unchanged by default."""
        return text

    @abstractmethod
    def part_one(self, parsed: Any) -> Any:
        """Solve part one from the parsed input."""

    def part_two(self, parsed: Any) -> Any:
        """Solve part two from the parsed input."""
        raise NotImplementedError(f"{type(self).__name__} does not implement part two")

    def implements(self, part: SolutionPart) -> bool:
        """Whether this solution provides an answer for *part*."""
        if part is SolutionPart.PART_ONE:
            return True
        return type(self).part_two is not Solution.part_two

    def solve(self, part: SolutionPart, parsed: Any) -> Any:
        """Dispatch to :meth:`part_one` or :meth:`part_two`."""
        if part is SolutionPart.PART_ONE:
            return self.part_one(parsed)
        return self.part_two(parsed)

    @property
    def display_name(self) -> str:
        return self.name or f"Day {self.day}"
