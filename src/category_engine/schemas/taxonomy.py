# category_engine/schemas/taxonomy.py
"""
Builds and provides access to the canonical category taxonomy.

Provides:
- TopicNode / TopicDescriptor data types
- Loading and caching of the taxonomy asset
- A Taxonomy index with slug lookup, sibling order, name lookup
  and the legacy slug map
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from category_engine.configs.config import Config

logger = logging.getLogger(__name__)

ROOT_ORDER_KEY = "__root__"
DEFAULT_CATEGORY_SLUG = "trending"

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class TaxonomyDataError(ValueError):
    """Raised when the canonical taxonomy data breaks one of its invariants."""


# =============================================================================
# DATA TYPES
# =============================================================================


@dataclass(frozen=True)
class TopicNode:
    """A node of the hand-authored canonical tree."""

    slug: str
    name: str
    children: Tuple["TopicNode", ...] = ()


@dataclass(frozen=True)
class TopicDescriptor:
    """
    Flattened view of a TopicNode.

    ``path`` holds the slugs from the root down to this node, inclusive,
    so ``path[0]`` is always a root slug and ``len(path) == depth + 1``.
    """

    slug: str
    name: str
    parent_slug: Optional[str]
    path: Tuple[str, ...]
    node: TopicNode

    @property
    def depth(self) -> int:
        return len(self.path) - 1

    @property
    def top_level_slug(self) -> str:
        return self.path[0]


# =============================================================================
# ASSET VALIDATION MODELS
# =============================================================================


class TopicNodeModel(BaseModel):
    """Shape of one category entry in the taxonomy asset."""

    model_config = ConfigDict(extra="ignore")

    slug: str = Field(min_length=1, pattern=SLUG_PATTERN)
    name: str = Field(min_length=1)
    children: List["TopicNodeModel"] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    def to_node(self) -> TopicNode:
        return TopicNode(
            slug=self.slug,
            name=self.name,
            children=tuple(child.to_node() for child in self.children),
        )


class TaxonomyFileModel(BaseModel):
    """Shape of the whole taxonomy asset."""

    model_config = ConfigDict(extra="ignore")

    version: Optional[str] = None
    categories: List[TopicNodeModel] = Field(min_length=1)
    legacy_slugs: Dict[str, str] = Field(default_factory=dict)


# =============================================================================
# TAXONOMY INDEX
# =============================================================================


class Taxonomy:
    """
    Read-only index over a canonical category tree.

    Built once by a depth-first walk of the tree. Holds:
    - descriptors: every node with its parent and root-to-node path
    - lookup: slug -> TopicDescriptor
    - sibling order per parent slug (roots under ROOT_ORDER_KEY)
    - lower-cased display name -> slug (first occurrence wins)
    - legacy slug -> canonical slug
    """

    def __init__(
        self,
        tree: Sequence[TopicNode],
        legacy_slugs: Optional[Mapping[str, str]] = None,
        version: Optional[str] = None,
    ):
        self._tree: Tuple[TopicNode, ...] = tuple(tree)
        self.version = version

        descriptors: List[TopicDescriptor] = []
        lookup: Dict[str, TopicDescriptor] = {}
        order: Dict[str, Tuple[str, ...]] = {}
        name_to_slug: Dict[str, str] = {}

        def walk(
            nodes: Sequence[TopicNode],
            parent: Optional[TopicDescriptor],
        ) -> None:
            order[parent.slug if parent else ROOT_ORDER_KEY] = tuple(
                node.slug for node in nodes
            )
            for node in nodes:
                if node.slug in lookup:
                    raise TaxonomyDataError(f"Duplicate category slug: {node.slug!r}")
                path = (parent.path if parent else ()) + (node.slug,)
                descriptor = TopicDescriptor(
                    slug=node.slug,
                    name=node.name,
                    parent_slug=parent.slug if parent else None,
                    path=path,
                    node=node,
                )
                descriptors.append(descriptor)
                lookup[node.slug] = descriptor
                name_to_slug.setdefault(node.name.strip().lower(), node.slug)
                if node.children:
                    walk(node.children, descriptor)

        walk(self._tree, None)

        legacy: Dict[str, str] = {}
        for old_slug, target in (legacy_slugs or {}).items():
            key = old_slug.strip().lower()
            if key in lookup:
                raise TaxonomyDataError(
                    f"Legacy slug {old_slug!r} shadows a canonical slug"
                )
            if target not in lookup:
                raise TaxonomyDataError(
                    f"Legacy slug {old_slug!r} maps to unknown slug {target!r}"
                )
            legacy[key] = target

        self._descriptors = tuple(descriptors)
        self._lookup = MappingProxyType(lookup)
        self._order = MappingProxyType(order)
        self._name_to_slug = MappingProxyType(name_to_slug)
        self._legacy = MappingProxyType(legacy)

        logger.debug(
            f"Built taxonomy index: {len(descriptors)} nodes, "
            f"{len(self._tree)} roots, {len(legacy)} legacy slugs"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Taxonomy":
        """
        Build a Taxonomy from the asset's dict shape.

        Raises:
            TaxonomyDataError: if the data is malformed or breaks an invariant.
        """
        try:
            parsed = TaxonomyFileModel.model_validate(data)
        except ValidationError as e:
            raise TaxonomyDataError(f"Invalid taxonomy data: {e}") from e

        return cls(
            [model.to_node() for model in parsed.categories],
            parsed.legacy_slugs,
            version=parsed.version,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def tree(self) -> Tuple[TopicNode, ...]:
        return self._tree

    @property
    def descriptors(self) -> Tuple[TopicDescriptor, ...]:
        return self._descriptors

    @property
    def lookup(self) -> Mapping[str, TopicDescriptor]:
        return self._lookup

    @property
    def legacy_slugs(self) -> Mapping[str, str]:
        return self._legacy

    @property
    def root_slugs(self) -> Tuple[str, ...]:
        return self._order[ROOT_ORDER_KEY]

    def get_descriptor(self, slug: Optional[str]) -> Optional[TopicDescriptor]:
        if not slug:
            return None
        return self._lookup.get(slug)

    def get_name(self, slug: Optional[str]) -> Optional[str]:
        """Canonical display name for a slug, or None when unknown."""
        descriptor = self.get_descriptor(slug)
        return descriptor.name if descriptor else None

    def slug_for_name(self, name: Optional[str]) -> Optional[str]:
        """Exact, case-insensitive display name lookup."""
        if not name:
            return None
        return self._name_to_slug.get(name.strip().lower())

    def sibling_order(self, parent_key: str = ROOT_ORDER_KEY) -> Tuple[str, ...]:
        """Canonical child order under a parent slug (empty when unknown)."""
        return self._order.get(parent_key, ())

    def is_root(self, slug: Optional[str]) -> bool:
        descriptor = self.get_descriptor(slug)
        return descriptor is not None and descriptor.parent_slug is None

    def __contains__(self, slug: object) -> bool:
        return isinstance(slug, str) and slug in self._lookup


# =============================================================================
# LOADING
# =============================================================================


@lru_cache
def load_taxonomy() -> dict:
    """
    Load and cache the raw canonical taxonomy asset.
    """
    with open(Config.get_taxonomy_path(), "r", encoding="utf-8") as f:
        return json.load(f)


@lru_cache
def get_taxonomy() -> Taxonomy:
    """
    Return the process-wide canonical Taxonomy, built on first use.
    """
    return Taxonomy.from_dict(load_taxonomy())
