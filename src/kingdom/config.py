"""Lightweight configuration for the kingdom tools."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Minimal application settings, read from ``KINGDOM_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="KINGDOM_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    template: str = Field(
        default="default",
        min_length=1,
        description="Kingdom preset used by the demo (default, magic, military)",
    )
    log_level: LogLevel = Field(default="INFO", description="Root logging level")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
