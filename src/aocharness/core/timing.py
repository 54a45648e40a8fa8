"""Timing wrapper — measure a call and report it past a threshold.

:func:`measure` is the single seam: it always returns the wrapped call's
result, and hands a :class:`TimingSample` to the reporter only when the
measured duration reaches the minimum threshold.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

PARSE_LABEL = "Parse"


@dataclass(frozen=True)
class TimingSample:
    """One measured call: a label and its wall-clock duration in seconds."""

    label: str
    duration: float


def measure_time(fn: Callable[[], T]) -> tuple[T, float]:
    """Call *fn* once and return ``(result, elapsed_seconds)``."""
    t0 = perf_counter()
    result = fn()
    return result, perf_counter() - t0


def measure(
    label: str,
    min_threshold: float,
    fn: Callable[[], T],
    report: Callable[[TimingSample], None],
) -> T:
    """Run *fn*, reporting its duration if it is at least *min_threshold* seconds.

    The result of *fn* is returned whether or not a sample was reported.
    Exceptions from *fn* propagate and nothing is reported.
    """
    result, duration = measure_time(fn)
    logger.debug("%s took %.9fs (threshold %.6fs)", label, duration, min_threshold)
    if duration >= min_threshold:
        report(TimingSample(label=label, duration=duration))
    return result


def format_duration(seconds: float) -> str:
    """Format a duration with three decimals in µs, ms or s.

    Under one millisecond uses microseconds, under one second milliseconds,
    otherwise seconds.
    """
    nanoseconds = round(seconds * 1_000_000_000)
    if nanoseconds < 1_000_000:
        return f"{nanoseconds / 1_000:.3f} µs"
    if nanoseconds < 1_000_000_000:
        return f"{nanoseconds / 1_000_000:.3f} ms"
    return f"{nanoseconds / 1_000_000_000:.3f} s"
