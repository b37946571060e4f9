"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file). The configured language must have a built-in lexicon.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.parity.lexicons import get_lexicon

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    language: str = Field(default="en", alias="PARITY_LANGUAGE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("language")
    @classmethod
    def validate_language(cls, value: str) -> str:
        """Validate that a built-in lexicon exists for the language and normalize its code."""

        get_lexicon(value)
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(**overrides: str) -> Settings:
    """Load and validate settings from environment variables.

    Keyword overrides (e.g. `language="es"`) take precedence over the environment.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
