"""
Unit tests for the slugs module.

Tests for slug resolution, legacy mapping and canonical path helpers.
"""

import pytest

from category_engine.normalization.slugs import (
    SlugResolution,
    get_category_path,
    get_fallback_category_display_name,
    get_top_level_category_slug,
    resolve_category_slug,
    to_slug_like,
)


class TestResolveCategorySlug:
    """Tests for resolve_category_slug."""

    def test_canonical_slug(self):
        """Canonical slugs should resolve to themselves."""
        assert resolve_category_slug("tech") == SlugResolution("tech", False)

    def test_canonical_slug_case_insensitive(self):
        """Comparison should ignore case."""
        assert resolve_category_slug("Middle-East") == SlugResolution("middle-east", False)

    def test_legacy_slug(self):
        """Legacy slugs should map to their canonical target."""
        assert resolve_category_slug("ai") == SlugResolution("tech", True)
        assert resolve_category_slug("WORLD") == SlugResolution("global", True)

    def test_unknown_slug_passthrough(self):
        """Unknown slugs should pass through lower-cased."""
        assert resolve_category_slug("Podcasts") == SlugResolution("podcasts", False)

    def test_non_string_input(self):
        """Non-string input should resolve to an empty slug."""
        assert resolve_category_slug(None) == SlugResolution("", False)
        assert resolve_category_slug(42) == SlugResolution("", False)

    @pytest.mark.parametrize(
        "value", ["tech", "ai", "World", "podcasts", "Some Thing", "", "south-asia"]
    )
    def test_idempotent(self, value):
        """Resolving a resolved slug should not change it."""
        first = resolve_category_slug(value)
        second = resolve_category_slug(first.slug)
        assert second.slug == first.slug
        assert second.is_legacy is False

    def test_legacy_closure(self, taxonomy):
        """Every legacy slug should resolve to its target and the target to itself."""
        for old_slug, target in taxonomy.legacy_slugs.items():
            assert resolve_category_slug(old_slug) == SlugResolution(target, True)
            assert resolve_category_slug(target) == SlugResolution(target, False)

    def test_injected_taxonomy(self, mini_taxonomy):
        """Resolution should use the supplied taxonomy."""
        assert resolve_category_slug("headlines", mini_taxonomy) == SlugResolution("news", True)
        assert resolve_category_slug("tech", mini_taxonomy) == SlugResolution("tech", False)
        assert resolve_category_slug("ai", mini_taxonomy) == SlugResolution("ai", False)


class TestToSlugLike:
    """Tests for to_slug_like."""

    def test_hyphenates_whitespace(self):
        """Whitespace runs should become single hyphens."""
        assert to_slug_like("  Middle   East ") == "middle-east"

    def test_blank(self):
        """Blank input should give an empty slug."""
        assert to_slug_like("   ") == ""


class TestCanonicalHelpers:
    """Tests for display name, path and top-level helpers."""

    def test_display_name(self):
        """Known slugs should use the canonical name."""
        assert get_fallback_category_display_name("crime-justice") == "Crime & Justice"

    def test_display_name_unknown(self):
        """Unknown slugs should display as themselves."""
        assert get_fallback_category_display_name("podcasts") == "podcasts"

    def test_category_path(self):
        """Paths should run root to node."""
        assert get_category_path("india") == ["global", "south-asia", "india"]

    def test_category_path_legacy_and_unknown(self):
        """Legacy slugs resolve first; unknown slugs give a single step."""
        assert get_category_path("ai") == ["tech"]
        assert get_category_path("podcasts") == ["podcasts"]
        assert get_category_path(None) == []

    def test_top_level_slug(self):
        """Top-level lookup should follow legacy mapping and the canonical path."""
        assert get_top_level_category_slug("pakistan") == "global"
        assert get_top_level_category_slug("memes") == "culture"
        assert get_top_level_category_slug("tech") == "tech"
        assert get_top_level_category_slug("podcasts") == "podcasts"
