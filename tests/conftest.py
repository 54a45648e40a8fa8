"""Shared test fixtures for aocharness.

Provides stub solutions, a recording output handler and an isolated
working directory with an ``inputs/`` folder so individual test modules
stay focused.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from aocharness.core.registry import SolutionRegistry
from aocharness.core.solution import Solution, SolutionPart
from aocharness.core.timing import TimingSample
from aocharness.exceptions import EmptyInputError
from aocharness.output.handler import OutputHandler

# ---------------------------------------------------------------------------
# Stub solutions
# ---------------------------------------------------------------------------


class StubSolution(Solution):
    """Returns fixed answers and records how often each step ran."""

    day = 1
    name = "Day 1: Stub"

    def __init__(self) -> None:
        self.calls: list[str] = []

    def parse(self, text: str) -> str:
        self.calls.append("parse")
        if not text.strip():
            raise EmptyInputError()
        return text.strip()

    def part_one(self, parsed: str) -> str:
        self.calls.append("part_one")
        return "A"

    def part_two(self, parsed: str) -> str:
        self.calls.append("part_two")
        return "B"


class PartOneOnlySolution(Solution):
    """A solution that has not implemented part two yet."""

    day = 2
    name = "Day 2: Half Done"

    def part_one(self, parsed: str) -> int:
        return len(parsed)


class FailingPartTwoSolution(Solution):
    """Answers part one, then blows up in part two."""

    day = 3
    name = "Day 3: Broken"

    def part_one(self, parsed: str) -> str:
        return "first"

    def part_two(self, parsed: str) -> str:
        raise RuntimeError("part two exploded")


# ---------------------------------------------------------------------------
# Recording handler
# ---------------------------------------------------------------------------


class RecordingHandler(OutputHandler):
    """Collects every event as a ``(name, payload)`` tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def solution_name(self, name: str) -> None:
        self.events.append(("solution_name", name))

    def parse_start(self) -> None:
        self.events.append(("parse_start", None))

    def parse_end(self) -> None:
        self.events.append(("parse_end", None))

    def part_start(self, part: SolutionPart) -> None:
        self.events.append(("part_start", part))

    def part_output(self, part: SolutionPart, output: Any) -> None:
        self.events.append(("part_output", (part, output)))

    def part_not_implemented(self, part: SolutionPart) -> None:
        self.events.append(("part_not_implemented", part))

    def timing(self, sample: TimingSample) -> None:
        self.events.append(("timing", sample))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def stub_solution() -> StubSolution:
    return StubSolution()


@pytest.fixture()
def recording_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture()
def stub_registry(stub_solution: StubSolution) -> SolutionRegistry:
    """Registry holding the stub (day 1), a part-one-only (day 2) and a failing (day 3) solution."""
    registry = SolutionRegistry()
    registry.register(stub_solution)
    registry.register(PartOneOnlySolution())
    registry.register(FailingPartTwoSolution())
    return registry


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory containing ``inputs/``."""
    (tmp_path / "inputs").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path
