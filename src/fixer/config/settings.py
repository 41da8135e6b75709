# src/fixer/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables, optionally through a .env file.

Files that USE this module:
- fixer.application.rates_service (builds the default client from settings)
- fixer.app (logging settings for the command-line converter)

Files that this module USES:
- fixer.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level name lookup for LOG_LEVEL
from functools import lru_cache  # Load settings once, on first use
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fixer.shared.validators import (
    validate_access_key,  # Validate access key format
    validate_base_url,  # Validate base URL scheme and host
)


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Rates API ---
    access_key: str = Field(default="", alias="FIXER_ACCESS_KEY")
    # Empty values fall back to the client defaults
    base_url: str = Field(default="", alias="FIXER_BASE_URL")
    user_agent: str = Field(default="", alias="FIXER_USER_AGENT")

    # --- HTTP Settings ---
    timeout_seconds: float = Field(default=20.0, alias="FIXER_TIMEOUT_SECONDS", gt=0, le=300)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FIXER_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("access_key")
    @classmethod
    def validate_access_key(cls, v: str) -> str:
        """Validate access key format."""
        v = v.strip()
        if not validate_access_key(v):
            raise ValueError("Invalid FIXER_ACCESS_KEY format")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        v = v.strip()
        if v and not validate_base_url(v):
            raise ValueError("FIXER_BASE_URL must be an http(s) URL with a host")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the logging level name; names logging does not know fall back to INFO."""
        level = logging.getLevelName(v.strip().upper())
        if not isinstance(level, int):
            return "INFO"
        # WARN -> WARNING, FATAL -> CRITICAL
        return logging.getLevelName(level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings on first use; get_settings.cache_clear() forces a reload."""
    return Settings()
