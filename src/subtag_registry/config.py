"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed SUBTAG_REGISTRY_
  - Fall back to .env file
  - Validate types and constraints at startup

Only AppSettings is a BaseSettings instance. RegistrySettings is a plain
BaseModel populated via env_nested_delimiter="__", so the env var
SUBTAG_REGISTRY_REGISTRY__CACHE_PATH maps to registry.cache_path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from subtag_registry.adapters.registry_source import CACHE_PATH, REGISTRY_URL

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class RegistrySettings(BaseModel):
    """Where the raw registry text comes from and where it is cached."""

    url: str = Field(default=REGISTRY_URL, description="Registry download URL")
    cache_path: Path = Field(default=CACHE_PATH, description="Local cache file path")


class AppSettings(BaseSettings):
    """
    Root application settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SUBTAG_REGISTRY_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    registry: RegistrySettings = Field(default_factory=lambda: RegistrySettings())

    http_timeout_seconds: int = Field(default=60, ge=1)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the logging module does not know."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
