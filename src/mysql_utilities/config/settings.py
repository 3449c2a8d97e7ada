"""
Configuration management for mysql_utilities.

This module provides environment-based configuration using Pydantic BaseSettings.
Only the query layer is configured here; connection credentials belong to
whoever opens the connection.
"""

import os
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("MYSQL_UTILITIES_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Settings for the query-construction layer.

    Environment variables are loaded with the MYSQL_UTILITIES_ prefix.
    For example, MYSQL_UTILITIES_SLOW_THRESHOLD_MS=500 lowers the slow-query
    threshold. LOG_LEVEL is read without prefix.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    slow_threshold_ms: int = Field(
        default=2000,
        ge=0,
        description="Statements taking at least this long emit a 'slow' event (0 disables)",
    )
    identifier_quote: str = Field(
        default="`",
        description="Quoting character for identifiers that are not bare-safe",
    )

    log_to_file: bool = Field(default=False, description="Also write logs to a file")
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    @field_validator("identifier_quote")
    @classmethod
    def _single_character_quote(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("identifier_quote must be a single character")
        return value

    model_config = SettingsConfigDict(
        env_prefix="MYSQL_UTILITIES_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
