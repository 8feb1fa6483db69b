# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance, or passed
    explicitly to `create_app()` (tests build their own instances).
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the HTTP server"
    )

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the HTTP server to"
    )

    NODE_ENV: str = Field(
        default="development",
        min_length=1,
        description="Environment name (production hides error details)"
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    LOG_DIR: str = Field(
        default="logs",
        description="Directory for error.log and combined.log"
    )

    # Request entries are logged at INFO, so quieter levels are not offered
    LOG_LEVEL: Literal["DEBUG", "INFO"] | None = Field(
        default=None,
        description="Override log level (defaults to INFO in production, DEBUG otherwise)"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept level names in any case ("info" -> "INFO")."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.NODE_ENV == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.NODE_ENV == "development"

    @property
    def log_level(self) -> int:
        """
        Resolve the numeric log level.

        LOG_LEVEL wins when set; otherwise production logs at INFO and
        every other environment at DEBUG.
        """
        if self.LOG_LEVEL:
            return logging.DEBUG if self.LOG_LEVEL == "DEBUG" else logging.INFO
        return logging.INFO if self.is_production else logging.DEBUG

    @property
    def error_log_path(self) -> Path:
        return Path(self.LOG_DIR) / "error.log"

    @property
    def combined_log_path(self) -> Path:
        return Path(self.LOG_DIR) / "combined.log"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
settings = get_settings()
