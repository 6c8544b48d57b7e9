"""
Slug resolution against the canonical taxonomy.

A slug is either canonical, a known legacy alias of a canonical slug, or
unknown. Unknown slugs pass through (lower-cased); deciding whether they are
acceptable is up to the caller.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional

from category_engine.schemas.taxonomy import Taxonomy, get_taxonomy

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SlugResolution:
    """Result of resolving a slug."""

    slug: str
    is_legacy: bool = False


def resolve_category_slug(
    value: Any,
    taxonomy: Optional[Taxonomy] = None,
) -> SlugResolution:
    """
    Resolve a raw slug to its canonical form.

    Args:
        value: Raw slug. Non-string input resolves to an empty slug.
        taxonomy: Taxonomy to resolve against (defaults to the canonical one).

    Returns:
        SlugResolution with ``is_legacy`` set when the legacy map was used.

    Example:
        >>> resolve_category_slug("AI")
        SlugResolution(slug='tech', is_legacy=True)
        >>> resolve_category_slug("tech")
        SlugResolution(slug='tech', is_legacy=False)
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    candidate = value.lower() if isinstance(value, str) else ""

    if candidate in taxonomy.lookup:
        return SlugResolution(candidate)

    target = taxonomy.legacy_slugs.get(candidate)
    if target is not None:
        logger.debug(f"Mapped legacy slug {candidate!r} -> {target!r}")
        return SlugResolution(target, is_legacy=True)

    return SlugResolution(candidate)


def to_slug_like(value: str) -> str:
    """Approximate a slug from a display name ("Middle East" -> "middle-east")."""
    return _WHITESPACE_RE.sub("-", value.strip().lower())


def get_fallback_category_display_name(
    slug: str,
    taxonomy: Optional[Taxonomy] = None,
) -> str:
    """Canonical display name for a slug, or the slug itself when unknown."""
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    return taxonomy.get_name(slug) or slug


def get_category_path(
    slug: Any,
    taxonomy: Optional[Taxonomy] = None,
) -> List[str]:
    """
    Canonical root-to-node slug path for a (possibly legacy) slug.

    Unknown slugs yield a single-element path; empty input yields [].
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    resolved = resolve_category_slug(slug, taxonomy).slug
    if not resolved:
        return []
    descriptor = taxonomy.get_descriptor(resolved)
    return list(descriptor.path) if descriptor else [resolved]


def get_top_level_category_slug(
    slug: Any,
    taxonomy: Optional[Taxonomy] = None,
) -> str:
    """Root slug of a (possibly legacy) slug; unknown slugs return themselves."""
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    resolved = resolve_category_slug(slug, taxonomy).slug
    descriptor = taxonomy.get_descriptor(resolved)
    return descriptor.top_level_slug if descriptor else resolved
