"""
Category metadata resolution for a single content item.

Maps a possibly partial category reference (slug, name, parent slug, in any
combination) to a fully populated CategoryMeta. Resolution is an ordered list
of strategies; the first one that returns a slug wins:

1. slug         - run the slug through the slug resolver
2. name         - exact canonical name match, else a slugified name
3. parent_slug  - degrade the item to its parent's identity
4. default      - DEFAULT_CATEGORY_SLUG

Every step is a table lookup; nothing here walks the tree.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from category_engine.normalization.slugs import (
    SlugResolution,
    resolve_category_slug,
    to_slug_like,
)
from category_engine.schemas.category import CategoryReference, coerce_model
from category_engine.schemas.taxonomy import (
    DEFAULT_CATEGORY_SLUG,
    Taxonomy,
    get_taxonomy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryMeta:
    """Fully resolved category of a content item."""

    slug: str
    name: str
    top_level_slug: str
    top_level_name: str
    is_legacy: bool = False


ResolutionStrategy = Callable[[CategoryReference, Taxonomy], Optional[SlugResolution]]


# =============================================================================
# STRATEGIES
# =============================================================================


def resolve_from_slug(
    ref: CategoryReference, taxonomy: Taxonomy
) -> Optional[SlugResolution]:
    if not ref.slug:
        return None
    return resolve_category_slug(ref.slug, taxonomy)


def resolve_from_name(
    ref: CategoryReference, taxonomy: Taxonomy
) -> Optional[SlugResolution]:
    if not ref.name:
        return None

    canonical = taxonomy.slug_for_name(ref.name)
    if canonical:
        return SlugResolution(canonical)

    approximated = to_slug_like(ref.name)
    if not approximated:
        return None
    return resolve_category_slug(approximated, taxonomy)


def resolve_from_parent(
    ref: CategoryReference, taxonomy: Taxonomy
) -> Optional[SlugResolution]:
    # Only the parent is known: the item takes its parent's identity
    if not ref.parent_slug:
        return None
    return resolve_category_slug(ref.parent_slug, taxonomy)


def resolve_from_default(
    ref: CategoryReference, taxonomy: Taxonomy
) -> Optional[SlugResolution]:
    return SlugResolution(DEFAULT_CATEGORY_SLUG)


RESOLUTION_STRATEGIES: Tuple[ResolutionStrategy, ...] = (
    resolve_from_slug,
    resolve_from_name,
    resolve_from_parent,
    resolve_from_default,
)


# =============================================================================
# RESOLVER
# =============================================================================


def _working_slug(ref: CategoryReference, taxonomy: Taxonomy) -> SlugResolution:
    for strategy in RESOLUTION_STRATEGIES:
        resolution = strategy(ref, taxonomy)
        if resolution is not None and resolution.slug:
            return resolution
    return SlugResolution(DEFAULT_CATEGORY_SLUG)


def resolve_category_meta(
    ref: Any = None,
    taxonomy: Optional[Taxonomy] = None,
) -> CategoryMeta:
    """
    Resolve the category of a content item.

    Args:
        ref: CategoryReference, a mapping with any of ``slug``, ``name`` and
            ``parent_slug``, or None. Unusable input is treated as empty.
        taxonomy: Taxonomy to resolve against (defaults to the canonical one).

    Returns:
        CategoryMeta. Canonical names win once a slug is identified; unknown
        slugs keep the supplied name hint (or the slug itself) and act as
        their own top level.

    Example:
        >>> resolve_category_meta({"slug": "ai"})
        CategoryMeta(slug='tech', name='Tech', top_level_slug='tech', top_level_name='Tech', is_legacy=True)
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    reference = coerce_model(ref, CategoryReference) or CategoryReference()

    resolution = _working_slug(reference, taxonomy)
    slug = resolution.slug

    descriptor = taxonomy.get_descriptor(slug)
    if descriptor is not None:
        top_level_slug = descriptor.top_level_slug
        name = descriptor.name
    else:
        logger.debug(
            f"Unrecognized category slug {slug!r}, passing through",
            extra={"operation": "resolve_category_meta", "slug": slug},
        )
        top_level_slug = slug
        name = reference.name or slug

    top_level_name = (
        taxonomy.get_name(top_level_slug)
        or taxonomy.get_name(DEFAULT_CATEGORY_SLUG)
        or DEFAULT_CATEGORY_SLUG
    )

    return CategoryMeta(
        slug=slug,
        name=name,
        top_level_slug=top_level_slug,
        top_level_name=top_level_name,
        is_legacy=resolution.is_legacy,
    )


def resolve_item_category_meta(
    item: Any,
    taxonomy: Optional[Taxonomy] = None,
) -> CategoryMeta:
    """
    Resolve the category of an article-like mapping.

    Uses ``item["category"]`` when it carries a slug or a name, then a bare
    ``item["category_name"]``, then the default category.
    """
    if not isinstance(item, Mapping):
        return resolve_category_meta(None, taxonomy)

    category = coerce_model(item.get("category"), CategoryReference)
    if category is not None and (category.slug or category.name):
        return resolve_category_meta(category, taxonomy)

    category_name = item.get("category_name")
    if isinstance(category_name, str) and category_name.strip():
        return resolve_category_meta({"name": category_name}, taxonomy)

    return resolve_category_meta(None, taxonomy)
