"""Tests for the ``aoc`` command line."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from aocharness import exit_codes
from aocharness.cli import app
from aocharness.core.registry import SolutionRegistry

runner = CliRunner()


@pytest.fixture()
def patched_registry(stub_registry: SolutionRegistry):
    """Route the CLI's registry lookup to the stub registry."""
    with patch("aocharness.cli.get_solution_registry", return_value=stub_registry):
        yield stub_registry


def _write_input(workdir: Path, day: int, text: str) -> Path:
    path = workdir / "inputs" / f"day{day:02d}.txt"
    path.write_text(text, encoding="utf-8")
    return path


class TestHelp:
    def test_help_exits_zero(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == exit_codes.SUCCESS
        assert "--input" in result.output
        assert "--timed" in result.output


class TestRun:
    def test_prints_both_parts_in_order(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        _write_input(workdir, 1, "trivial\n")
        result = runner.invoke(app, ["1"])
        assert result.exit_code == exit_codes.SUCCESS, result.output
        lines = result.stdout.splitlines()
        assert "A" in lines
        assert "B" in lines
        assert lines.index("A") < lines.index("B")
        assert lines[0] == "= Day 1: Stub ="

    def test_explicit_input(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        other = workdir / "custom.txt"
        other.write_text("custom\n", encoding="utf-8")
        result = runner.invoke(app, ["1", "--input", str(other)])
        assert result.exit_code == exit_codes.SUCCESS, result.output

    def test_part_two_not_implemented(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        _write_input(workdir, 2, "abc")
        result = runner.invoke(app, ["2"])
        assert result.exit_code == exit_codes.SUCCESS, result.output
        assert "3" in result.stdout.splitlines()
        assert "Part 2 not implemented" in result.stdout

    def test_builtin_example_solution(self, workdir: Path) -> None:
        _write_input(workdir, 0, "10\n20\n30\n40\n")
        result = runner.invoke(app, ["0"])
        assert result.exit_code == exit_codes.SUCCESS, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == "= Day 0: Example Solution ="
        assert lines.index("4") < lines.index("100")


class TestErrors:
    def test_missing_default_input(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        result = runner.invoke(app, ["7"])
        assert result.exit_code == exit_codes.MISSING_DEFAULT_INPUT
        assert str(Path("inputs/day07.txt")) in result.output
        assert "--input" in result.output

    def test_explicit_input_missing_skips_registry(self, workdir: Path) -> None:
        lookup = MagicMock()
        with patch("aocharness.cli.get_solution_registry", lookup):
            result = runner.invoke(app, ["1", "--input", "does/not/exist.txt"])
        assert result.exit_code == exit_codes.INPUT_NOT_FOUND
        assert str(Path("does/not/exist.txt")) in result.output
        lookup.assert_not_called()

    def test_explicit_input_under_a_file_is_not_found(self, workdir: Path) -> None:
        (workdir / "custom.txt").write_text("data", encoding="utf-8")
        lookup = MagicMock()
        with patch("aocharness.cli.get_solution_registry", lookup):
            result = runner.invoke(app, ["0", "--input", "custom.txt/day.txt"])
        assert result.exit_code == exit_codes.INPUT_NOT_FOUND, result.output
        assert "solution failure" not in result.output
        lookup.assert_not_called()

    def test_unknown_day(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        _write_input(workdir, 9, "data")
        result = runner.invoke(app, ["9"])
        assert result.exit_code == exit_codes.UNKNOWN_DAY
        assert "day 9" in result.output

    def test_parse_failure(
        self, workdir: Path, patched_registry: SolutionRegistry
    ) -> None:
        _write_input(workdir, 1, "\n")
        result = runner.invoke(app, ["1"])
        assert result.exit_code == exit_codes.PARSE_FAILURE
        assert "input was empty" in result.output
        assert "= Day 1: Stub =" in result.output
        assert "-- Part 1 --" not in result.output

    def test_solution_failure_keeps_part_one(
        self, workdir: Path, patched_registry: SolutionRegistry
    ) -> None:
        _write_input(workdir, 3, "x")
        result = runner.invoke(app, ["3"])
        assert result.exit_code == exit_codes.SOLUTION_ERROR
        assert "first" in result.output
        assert "part two exploded" in result.output

    def test_negative_day_is_usage_error(self, workdir: Path) -> None:
        result = runner.invoke(app, ["-3"])
        assert result.exit_code == exit_codes.USAGE_ERROR

    def test_non_integer_day_is_usage_error(self, workdir: Path) -> None:
        result = runner.invoke(app, ["one"])
        assert result.exit_code == exit_codes.USAGE_ERROR


class TestTiming:
    def test_no_timing_without_flag(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        _write_input(workdir, 1, "data")
        result = runner.invoke(app, ["1"])
        assert result.exit_code == exit_codes.SUCCESS
        assert "Input parsed in" not in result.output
        assert "Part 1:" not in result.output
        assert "Part 2:" not in result.output

    def test_timed_prints_every_step(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        _write_input(workdir, 1, "data")
        clock = [0.0, 0.001, 1.0, 1.002, 2.0, 2.003]
        with patch("aocharness.core.timing.perf_counter", side_effect=clock):
            result = runner.invoke(app, ["1", "--timed"])
        assert result.exit_code == exit_codes.SUCCESS, result.output
        lines = result.stdout.splitlines()
        assert "Input parsed in 1.000 ms" in lines
        assert "Part 1: 2.000 ms" in lines
        assert "Part 2: 3.000 ms" in lines
        assert lines.index("A") < lines.index("Part 1: 2.000 ms") < lines.index("B")

    def test_threshold_suppresses_fast_steps(self, workdir: Path, patched_registry: SolutionRegistry) -> None:
        _write_input(workdir, 1, "data")
        clock = [0.0, 0.005, 1.0, 1.005, 2.0, 2.005]
        with patch("aocharness.core.timing.perf_counter", side_effect=clock):
            result = runner.invoke(app, ["1", "--timed", "--min-timing-ms", "100"])
        assert result.exit_code == exit_codes.SUCCESS, result.output
        lines = result.stdout.splitlines()
        assert "A" in lines
        assert "B" in lines
        assert not any(line.startswith(("Input parsed in", "Part 1:", "Part 2:")) for line in lines)

    def test_negative_threshold_is_usage_error(self, workdir: Path) -> None:
        result = runner.invoke(app, ["1", "--timed", "--min-timing-ms", "-5"])
        assert result.exit_code == exit_codes.USAGE_ERROR
