"""Core configuration.

- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- The timezone list itself is never read from here: it lives in the
  `.tz.rc` file located by `core.locator`.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_FILENAME = ".tz.rc"


class AppSettings(BaseSettings):
    """Central application settings.

    Every field can be set with a `TZCLOCK_` prefixed environment variable
    or in a `.env` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="TZCLOCK_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    config_filename: str = Field(
        default=DEFAULT_CONFIG_FILENAME,
        min_length=1,
        description="Name of the zone list file inside the home directory.",
    )
    local_zone: str | None = Field(
        default=None,
        description="IANA zone for the 'Local time' row (defaults to the system zone).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("config_filename")
    @classmethod
    def _bare_filename(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("config_filename must be a file name, not a path")
        return value

    @field_validator("local_zone")
    @classmethod
    def _empty_zone_is_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level
