"""Output handlers — receivers of run events."""

from __future__ import annotations

from aocharness.output.console import ConsoleOutputHandler
from aocharness.output.handler import OutputHandler

__all__ = ["ConsoleOutputHandler", "OutputHandler"]
