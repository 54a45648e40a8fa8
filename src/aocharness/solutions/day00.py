"""Day 0: an example solution.

Parses lines of unsigned integers, then answers with their count for part
one and their sum for part two.
"""

from __future__ import annotations

from aocharness.core.solution import Solution
from aocharness.exceptions import EmptyInputError, InvalidIntegerError
from aocharness.util.parse import parse_int, parse_lines


def _parse_unsigned(line: str) -> int:
    value = parse_int(line)
    if value < 0:
        raise InvalidIntegerError(line)
    return value


class Day00(Solution):
    """Count and sum a list of numbers."""

    day = 0
    name = "Day 0: Example Solution"

    def parse(self, text: str) -> list[int]:
        # trailing whitespace is ignored
        numbers = list(parse_lines(text.rstrip(), _parse_unsigned))
        if not numbers:
            raise EmptyInputError()
        return numbers

    def part_one(self, parsed: list[int]) -> int:
        return len(parsed)

    def part_two(self, parsed: list[int]) -> int:
        return sum(parsed)
