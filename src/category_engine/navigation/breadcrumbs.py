"""
Breadcrumbs and child listings for a category page.

Live backend records are preferred; the canonical taxonomy fills in when the
backend returns nothing or leaves out names.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from category_engine.navigation.tree import iter_records
from category_engine.normalization.slugs import get_category_path, resolve_category_slug
from category_engine.schemas.category import ExternalCategoryRecord
from category_engine.schemas.taxonomy import Taxonomy, get_taxonomy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlatCategory:
    """A live category with its effective parent."""

    slug: str
    name: str
    parent_slug: Optional[str]
    category: ExternalCategoryRecord


@dataclass(frozen=True)
class Breadcrumb:
    slug: str
    name: str


def flatten_category_tree(
    records: Any,
    taxonomy: Optional[Taxonomy] = None,
) -> List[FlatCategory]:
    """
    Flatten live records into FlatCategory entries (first occurrence wins).

    Non-list input yields an empty list.
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    if not isinstance(records, (list, tuple)):
        return []

    seen = set()
    flat: List[FlatCategory] = []
    for record, parent_slug in iter_records(records):
        if record.slug in seen:
            continue
        seen.add(record.slug)
        flat.append(
            FlatCategory(
                slug=record.slug,
                name=record.name or taxonomy.get_name(record.slug) or record.slug,
                parent_slug=parent_slug,
                category=record,
            )
        )
    return flat


def build_breadcrumbs(
    slug: Any,
    records: Any = None,
    taxonomy: Optional[Taxonomy] = None,
) -> List[Breadcrumb]:
    """
    Root-to-category breadcrumb trail for a (possibly legacy) slug.

    Follows ``parent_slug`` links through the live records, stopping at the
    first slug already visited. Without live records the canonical path is
    used.
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    resolved = resolve_category_slug(slug, taxonomy).slug
    if not resolved:
        return []

    flat = flatten_category_tree(records, taxonomy)
    if not flat:
        return [
            Breadcrumb(slug=s, name=taxonomy.get_name(s) or s)
            for s in get_category_path(resolved, taxonomy)
        ]

    by_slug: Dict[str, FlatCategory] = {entry.slug: entry for entry in flat}
    trail: List[Breadcrumb] = []
    visited = set()
    cursor: Optional[str] = resolved
    while cursor and cursor not in visited:
        visited.add(cursor)
        entry = by_slug.get(cursor)
        name = entry.name if entry else (taxonomy.get_name(cursor) or cursor)
        trail.append(Breadcrumb(slug=cursor, name=name))
        cursor = entry.parent_slug if entry else None

    if cursor:
        logger.debug(f"Breadcrumb trail for {resolved!r} loops at {cursor!r}")

    trail.reverse()
    return trail


def list_child_categories(
    slug: Any,
    records: Any = None,
    taxonomy: Optional[Taxonomy] = None,
) -> List[Breadcrumb]:
    """
    Direct children of a (possibly legacy) slug.

    Live children are sorted case-insensitively by name; without live records
    the canonical children are returned in canonical order.
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    resolved = resolve_category_slug(slug, taxonomy).slug
    if not resolved:
        return []

    flat = flatten_category_tree(records, taxonomy)
    if not flat:
        return [
            Breadcrumb(slug=s, name=taxonomy.get_name(s) or s)
            for s in taxonomy.sibling_order(resolved)
        ]

    children = [
        Breadcrumb(slug=entry.slug, name=entry.name)
        for entry in flat
        if entry.parent_slug == resolved and entry.slug != resolved
    ]
    return sorted(children, key=lambda c: (c.name.casefold(), c.name, c.slug))
