"""Application configuration.

Settings are read from ORDERING_-prefixed environment variables and an
optional .env file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime settings for the ordering components."""

    model_config = SettingsConfigDict(
        env_prefix="ORDERING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Placeholder amount charged per order, in whole currency units
    order_amount: int = Field(default=10, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case stdlib level name."""
        normalized = v.strip().upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    return Settings()
