"""Solution runner — drives one solution through parse and both parts.

Each answer is sent to the output handler as soon as it is computed.  If a
later step raises, earlier answers have already been emitted and stay
emitted; the exception propagates to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from aocharness.core.solution import Solution, SolutionPart
from aocharness.core.timing import PARSE_LABEL, TimingSample, measure
from aocharness.output.handler import OutputHandler

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RunReport:
    """What a single run produced."""

    name: str
    outputs: dict[SolutionPart, Any] = field(default_factory=dict)
    not_implemented: list[SolutionPart] = field(default_factory=list)
    timings: list[TimingSample] = field(default_factory=list)


def run_solution(
    solution: Solution,
    text: str,
    handler: OutputHandler,
    timed: bool = False,
    min_timing: float = 0.0,
) -> RunReport:
    """Parse *text* with *solution* and solve both parts.

    Parameters
    ----------
    solution:
        The solution to run.
    text:
        The full input text.
    handler:
        Receiver for name, answer and timing events.
    timed:
        Measure parsing and each part.
    min_timing:
        Minimum duration in seconds for a timing sample to be reported.

    Raises
    ------
    ParseError
        Parsing failed; no part was run.
    """
    report = RunReport(name=solution.display_name)
    pending: list[TimingSample] = []

    def call(label: str, fn: Callable[[], T]) -> T:
        if timed:
            return measure(label, min_timing, fn, pending.append)
        return fn()

    def flush() -> None:
        # timing lines follow the event they measured
        for sample in pending:
            report.timings.append(sample)
            handler.timing(sample)
        pending.clear()

    handler.solution_name(report.name)

    handler.parse_start()
    parsed = call(PARSE_LABEL, lambda: solution.parse(text))
    handler.parse_end()
    flush()
    logger.debug("Parsed input for %s", report.name)

    for part in SolutionPart:
        handler.part_start(part)
        if not solution.implements(part):
            report.not_implemented.append(part)
            handler.part_not_implemented(part)
            continue
        output = call(part.default_name, lambda p=part: solution.solve(p, parsed))
        report.outputs[part] = output
        handler.part_output(part, output)
        flush()

    return report
