"""aoc CLI — Typer-based entry point.

Usage
-----
aoc DAY                      run the day against ``inputs/dayNN.txt``
aoc DAY --input FILE         run the day against another file
aoc DAY --timed              also print how long parsing and each part took
aoc DAY --timed --min-timing-ms 50
                             only print timings of at least 50 ms
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from aocharness import exit_codes
from aocharness.config.settings import get_settings
from aocharness.core.registry import get_solution_registry
from aocharness.core.resolver import resolve_input
from aocharness.core.runner import run_solution
from aocharness.exceptions import HarnessError
from aocharness.output.console import ConsoleOutputHandler

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="aoc",
    help="Run a day's puzzle solution against its input file.",
    add_completion=False,
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


@app.command()
def run(
    day: int = typer.Argument(..., min=0, help="The day's solution to run (e.g. 1, 2, etc.)."),
    input_file: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        metavar="FILE",
        help="Use this input file instead of inputs/dayNN.txt.",
    ),
    timed: bool = typer.Option(False, "--timed", "-t", help="Measure the time of parsing and running parts."),
    min_timing_ms: Optional[int] = typer.Option(
        None,
        "--min-timing-ms",
        min=0,
        metavar="NUMBER",
        help="Minimum duration (in milliseconds) required to print timing. 0 = always print.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Run the solution for DAY and print both parts."""
    _setup_logging(verbose)
    settings = get_settings()
    handler = ConsoleOutputHandler()

    if min_timing_ms is None:
        min_timing_ms = settings.min_timing_ms

    try:
        resolved = resolve_input(day, input_file, settings.inputs_dir)
        solution = get_solution_registry().get(day)
        run_solution(
            solution,
            resolved.text,
            handler,
            timed=timed,
            min_timing=min_timing_ms / 1000,
        )
    except HarnessError as exc:
        logger.debug("Run failed for day %d: %s", day, exc, exc_info=True)
        handler.print_error(str(exc), exc.kind)
        raise typer.Exit(exc.exit_code) from exc
    except Exception as exc:
        logger.error("Solution for day %d raised an unexpected error", day, exc_info=True)
        handler.print_error(f"{type(exc).__name__}: {exc}", "solution failure")
        raise typer.Exit(exit_codes.SOLUTION_ERROR) from exc


def main() -> int:
    """Entry point for the ``aoc`` console script."""
    app()
    return exit_codes.SUCCESS
