"""Environment-driven harness settings.

Values are loaded from environment variables (prefix ``AOC_``) or a
``.env`` file in the working directory.  Nothing is required: every field
has a default, and command-line options take precedence.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Top-level harness settings."""

    model_config = SettingsConfigDict(
        env_prefix="AOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    inputs_dir: Path = Path("inputs")
    """Directory holding the default ``dayNN.txt`` input files."""
    min_timing_ms: int = Field(default=0, ge=0)
    """Default for ``--min-timing-ms`` (0 = always print timing)."""


# Module-level singleton, import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
