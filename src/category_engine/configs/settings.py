"""Centralized settings management for the category engine."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine settings powered by pydantic-settings.

    Loads configuration from environment variables and an optional .env file
    in the current working directory.
    """

    # -------------------------------------------------------------------------
    # PATHS
    # -------------------------------------------------------------------------
    # BASE_DIR points to the category_engine package
    BASE_DIR: Path = Path(__file__).resolve().parents[1]

    TAXONOMY_DATA_PATH: Path = BASE_DIR / "assets" / "category_taxonomy.json"
    NAVIGATION_CONFIG_PATH: Path = BASE_DIR / "configs" / "navigation.yaml"

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------
    HOME_CATEGORY_LIMIT: int = Field(default=8, ge=1)

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Allow extra fields in .env but ignore them in the model
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached engine settings.

    Returns
    -------
    Settings
        The singleton settings instance.
    """
    return Settings()
