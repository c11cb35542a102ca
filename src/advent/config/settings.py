"""Environment-driven settings.

Values are loaded from environment variables (prefix ``ADVENT_``) or a
``.env`` file in the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Top-level harness settings."""

    model_config = SettingsConfigDict(
        env_prefix="ADVENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    inputs_dir: Path = Path("inputs")
    """Root of the puzzle inputs tree (``<inputs_dir>/<year>/dayNN.txt``)."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    element_error_policy: Literal["drop", "fail"] = "drop"
    """Default handling of unparseable list elements in ``Input.decode_many``."""


# Module-level singleton; import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
