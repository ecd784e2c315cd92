# tempscope/config.py
"""
Global configuration for tempscope.

Usage (preferred):
    from tempscope import config as cfg
    s = cfg.settings
    print(s.attempts_per_root)

Override via env vars (prefix TEMPSCOPE_, case-insensitive), e.g.:
  TEMPSCOPE_DEFAULT_PREFIX=build_
  TEMPSCOPE_ATTEMPTS_PER_ROOT=20
  TEMPSCOPE_MAX_PATH_LENGTH=1024
  TEMPSCOPE_LOG_LEVEL=debug
"""
from __future__ import annotations

import os
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["debug", "info", "warning", "error", "critical"]

# MAX_PATH on Windows, PATH_MAX on Linux
WINDOWS_MAX_PATH = 260
POSIX_MAX_PATH = 4096


def _default_max_path_length() -> int:
    return WINDOWS_MAX_PATH if os.name == "nt" else POSIX_MAX_PATH


class Settings(BaseSettings):
    # ---- Naming ----
    default_prefix: str = "tmp"
    name_length: int = Field(default=8, ge=1)

    # ---- Search ----
    # Random names tried per candidate root before moving to the next one
    attempts_per_root: int = Field(default=100, ge=1)

    # Candidates whose full path would not fit are skipped, not truncated
    max_path_length: int = Field(default_factory=_default_max_path_length, ge=1)
    max_name_length: int = Field(default=255, ge=1)

    # Logging
    log_level: LogLevel = "info"

    model_config = SettingsConfigDict(
        env_prefix="TEMPSCOPE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> LogLevel:
        vv = str(v).lower().strip()
        return vv if vv in {"debug", "info", "warning", "error", "critical"} else "info"  # type: ignore[return-value]

    @field_validator("default_prefix", mode="before")
    @classmethod
    def _validate_default_prefix(cls, v: str | None) -> str:
        """
        None -> "tmp". Empty string is a legal prefix and is kept as-is.
        """
        if v is None:
            return "tmp"
        return str(v)


# Single global instance
settings = Settings()
