"""
Unit tests for the config and settings modules.

Tests for path resolution, settings defaults and navigation config loading.
"""

from pathlib import Path

from category_engine.configs.config import Config
from category_engine.configs.settings import Settings, get_settings


class TestConfigPaths:
    """Tests for Config path attributes."""

    def test_config_dir_exists(self):
        """CONFIG_DIR should exist."""
        assert isinstance(Config.CONFIG_DIR, Path)
        assert Config.CONFIG_DIR.exists()

    def test_navigation_yaml_in_config_dir(self):
        """The navigation YAML should ship beside the config module."""
        assert (Config.CONFIG_DIR / "navigation.yaml").exists()


class TestGetTaxonomyPath:
    """Tests for get_taxonomy_path method."""

    def test_path_is_absolute(self):
        """Returned path should be absolute."""
        assert Config.get_taxonomy_path().is_absolute()

    def test_path_exists(self):
        """Taxonomy file should exist."""
        assert Config.get_taxonomy_path().exists()

    def test_path_is_json(self):
        """Taxonomy file should be a JSON file."""
        assert Config.get_taxonomy_path().suffix == ".json"


class TestNavigationConfig:
    """Tests for the YAML navigation config."""

    def test_load_navigation_config(self):
        """The YAML config should load into a dict."""
        config = Config.load_navigation_config()
        assert isinstance(config, dict)
        assert "overflow" in config

    def test_load_cached(self):
        """Loading twice should return the cached dict."""
        assert Config.load_navigation_config() is Config.load_navigation_config()

    def test_overflow_config(self):
        """The overflow definition should list the More menu members."""
        overflow = Config.get_overflow_config()
        assert overflow["slug"] == "more"
        assert overflow["name"] == "More"
        assert overflow["members"] == ["business-economy", "sports", "crime-justice"]


class TestSettings:
    """Tests for pydantic-settings defaults and overrides."""

    def test_defaults(self):
        """Settings should have sensible defaults."""
        settings = Settings()
        assert settings.HOME_CATEGORY_LIMIT == 8
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.TAXONOMY_DATA_PATH.name == "category_taxonomy.json"

    def test_env_override(self, monkeypatch):
        """Environment variables should override defaults."""
        monkeypatch.setenv("HOME_CATEGORY_LIMIT", "4")
        monkeypatch.setenv("LOG_JSON", "true")
        settings = Settings()
        assert settings.HOME_CATEGORY_LIMIT == 4
        assert settings.LOG_JSON is True

    def test_get_settings_cached(self):
        """get_settings should return a singleton."""
        assert get_settings() is get_settings()
