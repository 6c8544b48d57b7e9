"""
Homepage category strip selection.

Picks the top-level categories shown on the homepage, in canonical root
order, topped up with live-only categories alphabetically, and truncated to
a small limit. Without live data the strip is synthesized from the canonical
roots with negative ids.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from category_engine.configs.settings import get_settings
from category_engine.schemas.category import (
    Category,
    ExternalCategoryRecord,
    coerce_model,
)
from category_engine.schemas.taxonomy import Taxonomy, get_taxonomy

logger = logging.getLogger(__name__)

DEFAULT_HOME_CATEGORY_LIMIT = 8


def get_home_category_order(taxonomy: Optional[Taxonomy] = None) -> Tuple[str, ...]:
    """Canonical root slugs, in display order."""
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    return taxonomy.root_slugs


def _effective_limit(limit: Any) -> int:
    if limit is None:
        limit = get_settings().HOME_CATEGORY_LIMIT
    if isinstance(limit, bool) or not isinstance(limit, int):
        limit = DEFAULT_HOME_CATEGORY_LIMIT
    return max(1, limit)


def _canonical_strip(taxonomy: Taxonomy, limit: int) -> List[Category]:
    return [
        Category(id=-(index + 1), name=taxonomy.get_name(slug) or slug, slug=slug)
        for index, slug in enumerate(taxonomy.root_slugs[:limit])
    ]


def _live_top_level(categories: List[Any]) -> Dict[str, ExternalCategoryRecord]:
    """Active, parentless records keyed by slug (first occurrence wins)."""
    by_slug: Dict[str, ExternalCategoryRecord] = {}
    for raw in categories:
        record = coerce_model(raw, ExternalCategoryRecord)
        if record is None or not record.slug:
            continue
        if record.parent_slug:
            continue
        if record.is_active is False:
            continue
        by_slug.setdefault(record.slug, record)
    return by_slug


def _to_category(record: ExternalCategoryRecord, name: str) -> Category:
    return Category(
        id=record.id,
        name=name,
        slug=record.slug,
        description=record.description,
        color=record.color,
        is_active=record.is_active,
        parent_slug=None,
    )


def build_home_categories(
    categories: Any = None,
    limit: Optional[int] = None,
    taxonomy: Optional[Taxonomy] = None,
) -> List[Category]:
    """
    Select the top-level categories for the homepage strip.

    Args:
        categories: Live category records (dicts, ExternalCategoryRecord or
            Category). None or empty input yields the canonical strip.
        limit: Maximum entries (at least 1). Defaults to the
            ``HOME_CATEGORY_LIMIT`` setting.
        taxonomy: Taxonomy for ordering and names (defaults to the canonical one).

    Returns:
        Ordered list of Category entries, all with ``parent_slug=None``.

    Example:
        >>> [c.slug for c in build_home_categories(None, 3)]
        ['trending', 'global', 'politics']
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    limit = _effective_limit(limit)

    if not isinstance(categories, (list, tuple)) or not categories:
        return _canonical_strip(taxonomy, limit)

    by_slug = _live_top_level(list(categories))
    if not by_slug:
        logger.debug("No usable top-level categories, using canonical strip")
        return _canonical_strip(taxonomy, limit)

    ordered: List[Category] = []
    for slug in taxonomy.root_slugs:
        record = by_slug.pop(slug, None)
        if record is not None:
            ordered.append(_to_category(record, record.name or taxonomy.get_name(slug) or slug))

    leftovers = sorted(
        by_slug.values(),
        key=lambda r: ((r.name or r.slug).casefold(), r.name or r.slug, r.slug),
    )
    ordered.extend(_to_category(record, record.name or record.slug) for record in leftovers)

    return ordered[:limit]


def get_fallback_home_categories(taxonomy: Optional[Taxonomy] = None) -> List[Category]:
    """The canonical strip at the default limit."""
    return build_home_categories(None, DEFAULT_HOME_CATEGORY_LIMIT, taxonomy)
