"""Harness core: input resolution, solution registry, timing and the runner.

These pieces know nothing about the terminal; output flows through an
:class:`~aocharness.output.handler.OutputHandler`.
"""

from __future__ import annotations
