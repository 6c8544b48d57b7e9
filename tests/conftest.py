"""
Shared pytest fixtures for the category engine test suite.

Provides the canonical taxonomy, a small injectable taxonomy and factory
fixtures for backend category records.
"""

import itertools
from typing import Optional

import pytest

from category_engine.schemas.taxonomy import Taxonomy, get_taxonomy

MINI_TAXONOMY_DATA = {
    "version": "test",
    "categories": [
        {
            "slug": "news",
            "name": "News",
            "children": [
                {"slug": "local", "name": "Local"},
                {"slug": "national", "name": "National"},
            ],
        },
        {"slug": "arts", "name": "Arts"},
    ],
    "legacy_slugs": {"headlines": "news"},
}


@pytest.fixture
def taxonomy() -> Taxonomy:
    """Return the canonical taxonomy."""
    return get_taxonomy()


@pytest.fixture
def mini_taxonomy() -> Taxonomy:
    """
    Return a small substitute taxonomy.

    news (local, national), arts; legacy "headlines" -> "news".
    """
    return Taxonomy.from_dict(MINI_TAXONOMY_DATA)


@pytest.fixture
def make_record():
    """
    Return a function that creates backend category record dicts.

    Example:
        record = make_record("bangladesh", "Bangladesh", parent_slug="south-asia")
    """

    ids = itertools.count(1)

    def _make_record(
        slug: Optional[str],
        name: Optional[str] = None,
        parent_slug: Optional[str] = None,
        **kwargs,
    ) -> dict:
        record = {
            "id": kwargs.pop("id", next(ids)),
            "slug": slug,
            "name": name if name is not None else (slug or "").title(),
            "parent_slug": parent_slug,
        }
        record.update(kwargs)
        return record

    return _make_record


@pytest.fixture
def live_records(make_record):
    """A flat backend payload covering roots, children and a live-only category."""
    return [
        make_record("sports", "Sports"),
        make_record("global", "Global"),
        make_record("cricket", "Cricket", parent_slug="sports"),
        make_record("trending", "Trending"),
        make_record("podcasts", "Podcasts"),
        make_record("south-asia", "South Asia", parent_slug="global"),
        make_record("bangladesh", "Bangladesh", parent_slug="south-asia"),
        make_record("europe", "Europe", parent_slug="global"),
    ]
