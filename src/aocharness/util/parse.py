"""Input parsing helpers for solutions.

Line and grid parsers wrap any :class:`~aocharness.exceptions.ParseError`
raised by the per-item callback in an
:class:`~aocharness.exceptions.InvalidLineError` carrying the one-based
line number, so errors point at the offending line of the input file.

The ``*_with_offset`` variants exist for inputs split into sections: pass
the number of lines preceding the section so line numbers stay relative to
the whole input (see :func:`split_sections`).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

import numpy as np

from aocharness.exceptions import (
    EmptyInputError,
    EmptyLineError,
    InvalidIntegerError,
    InvalidLineError,
    LineLengthError,
    ParseError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Position = tuple[int, int]
"""Grid position ``(x, y)``: origin top-left, x along columns, y along rows."""

_INTEGER = re.compile(r"[+-]?[0-9]+")


def split_lines(text: str) -> list[str]:
    """Split *text* on line feeds only, dropping a trailing carriage return per line.

    A final line terminator does not produce an empty last line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_int(string: str) -> int:
    """Convert *string* to an int, raising :class:`InvalidIntegerError`.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and other digit scripts are rejected.
    """
    if not _INTEGER.fullmatch(string):
        raise InvalidIntegerError(string)
    return int(string)


def parse_lines_with_offset(
    text: str,
    offset: int,
    parser: Callable[[str], T],
) -> Iterator[T]:
    """Lazily parse each line of *text* with *parser*.

    Raises
    ------
    InvalidLineError
        *parser* raised a :class:`ParseError`; the reported line number is
        the one-based line within *text* plus *offset*.
    """
    for index, line in enumerate(split_lines(text)):
        try:
            yield parser(line)
        except ParseError as exc:
            raise InvalidLineError.from_index(index + offset, exc) from exc


def parse_lines(text: str, parser: Callable[[str], T]) -> Iterator[T]:
    """:func:`parse_lines_with_offset` with an offset of 0."""
    return parse_lines_with_offset(text, 0, parser)


def parse_grid_with_offset(
    text: str,
    offset: int,
    parser: Callable[[Position, str], Any],
    dtype: Any = None,
) -> np.ndarray:
    """Parse a rectangular character grid into a 2-D array.

    *parser* is called row by row with each cell's ``(x, y)`` position and
    character; the returned values fill an array of shape ``(rows, cols)``.

    Raises
    ------
    EmptyInputError
        *text* has no lines.
    InvalidLineError
        A line is empty, differs in length from the first line, or *parser*
        raised a :class:`ParseError` for one of its characters.
    """
    lines = split_lines(text)
    if not lines:
        raise EmptyInputError()

    cols = len(lines[0])
    values: list[Any] = []

    for y, line in enumerate(lines):
        if not line:
            raise InvalidLineError.from_index(y + offset, EmptyLineError())
        if len(line) != cols:
            raise InvalidLineError.from_index(y + offset, LineLengthError(cols, len(line)))
        for x, character in enumerate(line):
            try:
                values.append(parser((x, y), character))
            except ParseError as exc:
                raise InvalidLineError.from_index(y + offset, exc) from exc

    grid = np.array(values, dtype=dtype).reshape(len(lines), cols)
    logger.debug("Parsed %dx%d grid", grid.shape[0], grid.shape[1])
    return grid


def parse_grid(
    text: str,
    parser: Callable[[Position, str], Any],
    dtype: Any = None,
) -> np.ndarray:
    """:func:`parse_grid_with_offset` with an offset of 0."""
    return parse_grid_with_offset(text, 0, parser, dtype=dtype)


def split_sections(text: str) -> list[tuple[int, str]]:
    """Split *text* on blank lines into ``(offset, section)`` pairs.

    ``offset`` is the number of lines preceding the section in *text*,
    ready to pass to the ``*_with_offset`` parsers.  Runs of blank lines
    produce no empty sections.
    """
    sections: list[tuple[int, str]] = []
    current: list[str] = []
    start = 0
    for index, line in enumerate(split_lines(text)):
        if line.strip():
            if not current:
                start = index
            current.append(line)
        elif current:
            sections.append((start, "\n".join(current)))
            current = []
    if current:
        sections.append((start, "\n".join(current)))
    return sections
