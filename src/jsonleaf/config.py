"""
jsonleaf Configuration Module.

Handles library settings loaded from the environment.
Uses pydantic-settings for validation and type safety.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main library settings."""

    model_config = SettingsConfigDict(
        env_prefix="JSONLEAF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Construction limits
    max_pattern_length: int = Field(
        default=1000,
        ge=1,
        description="Longest regex source accepted for the pattern constraint",
    )

    # Error reporting
    error_location_separator: str = Field(
        default=".",
        description="Joiner used when relocating leaf errors under a parent location",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
