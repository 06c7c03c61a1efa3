"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so that an application embedding result_monad can tune
its logging without code changes:

    RESULT_MONAD_LOG_LEVEL=DEBUG
    RESULT_MONAD_JSON_LOGS=true
    RESULT_MONAD_LOG_CAPTURED_EXCEPTIONS=false

Settings are read once and cached; call get_settings.cache_clear() after
changing the environment (tests do this between cases).
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResultMonadSettings(BaseSettings):
    """
    Library settings.

    Load order (highest priority first):
      1. Environment variables prefixed RESULT_MONAD_
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULT_MONAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="structlog filtering level")
    json_logs: bool = Field(default=False, description="Render JSON lines instead of console output")
    log_captured_exceptions: bool = Field(
        default=True,
        description="Emit then.exception_captured when a chained step raises",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the logging module does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> ResultMonadSettings:
    """Return the process-wide settings, loading them on first use."""
    return ResultMonadSettings()
