# Process-wide configuration.
# Created: 2026-10-19
#
# Settings are read once at startup (environment, then CLI overrides) and are
# treated as immutable for the lifetime of the process.

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """dirbrowse configuration.

    Every field can be set through a ``DIRBROWSE_``-prefixed environment
    variable, e.g. ``DIRBROWSE_PORT=9000``.
    """

    model_config = SettingsConfigDict(env_prefix="DIRBROWSE_", frozen=True)

    addr: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    dir: Path = Path(".")
    log_level: str = "INFO"

    @field_validator("dir")
    @classmethod
    def _dir_must_exist(cls, value: Path) -> Path:
        if not value.expanduser().is_dir():
            raise ValueError(f"{value} is not a directory")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def served_root(self) -> str:
        """Absolute, normalized path of the served directory."""
        return os.path.abspath(self.dir.expanduser())


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings loaded from the environment."""
    return Settings()
