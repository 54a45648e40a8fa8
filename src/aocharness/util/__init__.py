"""Helpers shared by solution implementations."""

from __future__ import annotations
