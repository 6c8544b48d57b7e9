import yaml
from functools import lru_cache
from pathlib import Path

from category_engine.configs.settings import get_settings


class Config:
    """
    File-backed configuration for the category engine.
    """

    # This points to category_engine/configs/
    CONFIG_DIR = Path(__file__).parent.resolve()

    @classmethod
    @lru_cache
    def load_navigation_config(cls) -> dict:
        """Loads the YAML configuration for header navigation."""
        path = get_settings().NAVIGATION_CONFIG_PATH
        if not path.exists():
            raise FileNotFoundError(f"Missing config at {path}")

        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def get_taxonomy_path(cls) -> Path:
        """Returns the absolute path to the canonical taxonomy JSON."""
        return get_settings().TAXONOMY_DATA_PATH

    @classmethod
    def get_overflow_config(cls) -> dict:
        """Returns the overflow ("More") menu definition."""
        overflow = cls.load_navigation_config().get("overflow") or {}
        return {
            "slug": overflow.get("slug", "more"),
            "name": overflow.get("name", "More"),
            "members": list(overflow.get("members") or []),
        }
