"""
Configuration for i18nstore.

It defines strongly-typed settings using Pydantic v2 BaseSettings.
Values can be overridden via I18N_* environment variables or a .env file
in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables (.env supported)."""

    # Load from .env; ignore unknown variables to keep flexibility
    model_config = SettingsConfigDict(env_prefix="I18N_", env_file=".env", extra="ignore")

    # -------------------------------------------------------------------------
    # Lookup behaviour
    # -------------------------------------------------------------------------
    # Locale consulted when the requested one has no value
    DEFAULT_LOCALE: str = "en"
    # Placeholder returned by t() for strings when nothing is found
    NOT_FOUND_TEXT: str = "Content not found"

    # -------------------------------------------------------------------------
    # Shared store
    # -------------------------------------------------------------------------
    # JSON/YAML document backing get_store(); None gives an empty store
    TRANSLATIONS_FILE: Path | None = None

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance (singleton-like)."""
    return Settings()
