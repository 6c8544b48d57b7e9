"""Settings and file-backed configuration."""

from category_engine.configs.config import Config
from category_engine.configs.settings import Settings, get_settings

__all__ = ["Config", "Settings", "get_settings"]
