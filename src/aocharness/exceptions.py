"""Exception hierarchy for the harness.

Every failure the CLI reports derives from :class:`HarnessError`, which
carries the process exit code for its kind.  The CLI catches the base class
once and maps it uniformly.

Hierarchy
---------
* :class:`ResolverError`: the input file could not be located or read
* :class:`RegistryError`: no solution (or a conflicting one) for a day
* :class:`ParseError`: a solution rejected its input
"""

from __future__ import annotations

from pathlib import Path

from aocharness import exit_codes


class HarnessError(Exception):
    """Base for all user-facing harness failures."""

    exit_code: int = exit_codes.SOLUTION_ERROR
    kind: str = "error"


# ---------------------------------------------------------------------------
# Input resolution
# ---------------------------------------------------------------------------


class ResolverError(HarnessError):
    """Base for failures locating or reading an input file."""


class InputNotFoundError(ResolverError):
    """An explicitly requested input file does not exist."""

    exit_code = exit_codes.INPUT_NOT_FOUND
    kind = "input not found"

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"could not read input file at: {path}")


class MissingDefaultInputError(ResolverError):
    """No input was given and the day's default input file is absent."""

    exit_code = exit_codes.MISSING_DEFAULT_INPUT
    kind = "missing default input"

    def __init__(self, expected_path: Path) -> None:
        self.expected_path = expected_path
        super().__init__(
            f"default input file missing: {expected_path}\n\n"
            "please create the file or provide the --input argument"
        )


class InputReadError(ResolverError):
    """The input path exists but could not be read as text."""

    exit_code = exit_codes.INPUT_UNREADABLE
    kind = "unreadable input"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not read input file at: {path} ({reason})")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class RegistryError(HarnessError):
    """Base for solution lookup and registration failures."""


class UnknownDayError(RegistryError):
    """No solution is registered for the requested day."""

    exit_code = exit_codes.UNKNOWN_DAY
    kind = "unknown day"

    def __init__(self, day: int, supported_days: list[int] | None = None) -> None:
        self.day = day
        self.supported_days = list(supported_days or [])
        message = f"solution for day {day} not yet implemented"
        if self.supported_days:
            message += f" (available days: {', '.join(str(d) for d in self.supported_days)})"
        super().__init__(message)


class DuplicateDayError(RegistryError):
    """Two solutions were registered for the same day."""

    kind = "duplicate day"

    def __init__(self, day: int) -> None:
        self.day = day
        super().__init__(f"a solution for day {day} is already registered")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class ParseError(HarnessError):
    """Base for errors raised while parsing a day's input."""

    exit_code = exit_codes.PARSE_FAILURE
    kind = "parse failure"


class EmptyInputError(ParseError):
    """The input received was empty."""

    def __init__(self) -> None:
        super().__init__("input was empty")


class EmptyLineError(ParseError):
    """The input contains an unexpected empty line."""

    def __init__(self) -> None:
        super().__init__("line was empty")


class LineLengthError(ParseError):
    """A line's length differs from the expected length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"incorrect line length: expected {expected}, got {actual}")


class InvalidCharacterError(ParseError):
    """An unexpected character was encountered."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"invalid character: {character!r}")


class InvalidIntegerError(ParseError):
    """A string could not be converted to an integer."""

    def __init__(self, string: str) -> None:
        self.string = string
        super().__init__(f"failed to parse string into integer: {string!r}")


class InvalidLineError(ParseError):
    """Wraps the parse error raised for a specific line.

    ``line`` is one-based: the first line of the input is line 1.
    """

    def __init__(self, line: int, source: ParseError) -> None:
        self.line = line
        self.source = source
        super().__init__(f"failure parsing line {line}: {source}")

    @classmethod
    def from_index(cls, index: int, source: ParseError) -> InvalidLineError:
        """Build from a zero-based line index."""
        return cls(index + 1, source)
