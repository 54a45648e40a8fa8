"""Input resolver: maps a day (and optional override) to input text.

The default input for day *N* lives at ``inputs/dayNN.txt`` relative to the
working directory.  Files are read whole: a read either returns the full
text or raises, never a partial result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from aocharness.exceptions import InputNotFoundError, InputReadError, MissingDefaultInputError

logger = logging.getLogger(__name__)

DEFAULT_INPUTS_DIR = Path("inputs")


@dataclass(frozen=True)
class ResolvedInput:
    """The file an input was read from and its full text."""

    path: Path
    text: str


def default_input_path(day: int, inputs_dir: Path = DEFAULT_INPUTS_DIR) -> Path:
    """Return the default input path for *day* (``dayNN.txt``, zero-padded)."""
    return inputs_dir / f"day{day:02d}.txt"


# A path component that is a regular file means the path does not exist.
_NOT_FOUND = (FileNotFoundError, NotADirectoryError)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except _NOT_FOUND:
        raise
    except IsADirectoryError as exc:
        raise InputReadError(path, "is a directory") from exc
    except PermissionError as exc:
        raise InputReadError(path, "permission denied") from exc
    except UnicodeDecodeError as exc:
        raise InputReadError(path, "not valid UTF-8 text") from exc
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc


def resolve_input(
    day: int,
    explicit_path: Path | None = None,
    inputs_dir: Path = DEFAULT_INPUTS_DIR,
) -> ResolvedInput:
    """Locate and read the input for *day*.

    Parameters
    ----------
    day:
        The day whose default input should be used.
    explicit_path:
        A file given on the command line.  When set, the default location is
        never consulted.
    inputs_dir:
        Directory holding the default input files.

    Raises
    ------
    InputNotFoundError
        *explicit_path* was given and does not exist.
    MissingDefaultInputError
        No *explicit_path* was given and the default file does not exist.
    InputReadError
        The file exists but is not readable text.
    """
    if explicit_path is not None:
        path = explicit_path
        try:
            text = _read_text(path)
        except _NOT_FOUND as exc:
            raise InputNotFoundError(path) from exc
    else:
        path = default_input_path(day, inputs_dir)
        try:
            text = _read_text(path)
        except _NOT_FOUND as exc:
            raise MissingDefaultInputError(path) from exc

    logger.debug("Read input for day %d from %s (%d bytes)", day, path, len(text))
    return ResolvedInput(path=path, text=text)
