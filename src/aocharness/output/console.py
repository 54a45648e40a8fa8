"""Rich console output for the ``aoc`` command.

Answers and timing lines go to stdout; errors go to stderr.  Answers are
printed as plain text so solution output is never interpreted as Rich
markup or wrapped.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from aocharness.core.solution import SolutionPart
from aocharness.core.timing import PARSE_LABEL, TimingSample, format_duration
from aocharness.output.handler import OutputHandler

# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

AOC_THEME = Theme(
    {
        "aoc.name": "bold cyan",
        "aoc.part": "bold magenta",
        "aoc.answer": "bold white",
        "aoc.timing": "dim",
        "aoc.missing": "yellow",
        "aoc.error": "bold red",
        "aoc.hint": "dim italic",
    }
)


class ConsoleOutputHandler(OutputHandler):
    """Prints run events to the terminal.

    Parameters
    ----------
    console:
        Console for answers and timing lines (stdout by default).
    error_console:
        Console for error messages (stderr by default).
    """

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or Console(theme=AOC_THEME, highlight=False)
        self.error_console = error_console or Console(theme=AOC_THEME, highlight=False, stderr=True)

    # ------------------------------------------------------------------
    # Run events
    # ------------------------------------------------------------------

    def solution_name(self, name: str) -> None:
        self.console.print(Text(f"= {name} =", style="aoc.name"), soft_wrap=True)

    def part_start(self, part: SolutionPart) -> None:
        self.console.print(Text(f"-- {part.default_name} --", style="aoc.part"), soft_wrap=True)

    def part_output(self, part: SolutionPart, output: Any) -> None:
        self.console.print(Text(str(output), style="aoc.answer"), soft_wrap=True)

    def part_not_implemented(self, part: SolutionPart) -> None:
        self.console.print(
            Text(f"{part.default_name} not implemented", style="aoc.missing"),
            soft_wrap=True,
        )

    def timing(self, sample: TimingSample) -> None:
        duration = format_duration(sample.duration)
        if sample.label == PARSE_LABEL:
            line = f"Input parsed in {duration}"
        else:
            line = f"{sample.label}: {duration}"
        self.console.print(Text(line, style="aoc.timing"), soft_wrap=True)

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def print_error(self, message: str, kind: str = "error") -> None:
        """Render an error on stderr, prefixed with its kind."""
        text = Text()
        text.append("error", style="aoc.error")
        text.append(f" ({kind}): ", style="aoc.error")
        text.append(message)
        self.error_console.print(text, soft_wrap=True)
