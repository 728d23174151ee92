"""
Application settings.

Values come from environment variables prefixed ``HOURLY_WEATHER_`` or from
a ``.env`` file in the working directory, e.g.::

    HOURLY_WEATHER_DATA_FILE=data/visby.csv
    HOURLY_WEATHER_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HOURLY_WEATHER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "hourly-weather"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    data_file: Path = Field(default=Path("data/observations.csv"))
    readings_per_day: int = Field(default=24, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once."""
    return Settings()
