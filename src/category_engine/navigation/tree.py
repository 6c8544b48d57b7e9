"""
Navigation tree building from backend category records.

The backend list may be flat (children point at ``parent_slug``), nested
(``children`` lists), a mix of both, partially malformed or missing
entirely. The builder never raises:

- no usable records      -> the canonical tree
- record without a slug  -> dropped
- record without a name  -> canonical name, else the slug
- duplicate slug         -> first occurrence wins
- unknown parent / cycle -> node becomes a root

Siblings are then ordered by the canonical order of their parent, with
unrecognized slugs after recognized ones, alphabetically.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from category_engine.configs.config import Config
from category_engine.schemas.category import ExternalCategoryRecord, coerce_model
from category_engine.schemas.taxonomy import (
    ROOT_ORDER_KEY,
    Taxonomy,
    TopicNode,
    get_taxonomy,
)

logger = logging.getLogger(__name__)


@dataclass
class NavNode:
    """A navigation menu entry."""

    slug: str
    name: str
    children: List["NavNode"] = field(default_factory=list)

    def copy(self) -> "NavNode":
        """Deep copy of this branch."""
        return NavNode(
            slug=self.slug,
            name=self.name,
            children=[child.copy() for child in self.children],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "name": self.name,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class FlatRecord:
    """A backend record reduced to what the tree needs."""

    slug: str
    name: str
    parent_slug: Optional[str] = None


# =============================================================================
# HELPERS
# =============================================================================


def walk_nav_tree(nodes: Sequence[NavNode]) -> Iterator[NavNode]:
    """Yield every node of a forest in pre-order."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _topic_to_nav(node: TopicNode) -> NavNode:
    return NavNode(
        slug=node.slug,
        name=node.name,
        children=[_topic_to_nav(child) for child in node.children],
    )


def get_fallback_nav_tree(taxonomy: Optional[Taxonomy] = None) -> List[NavNode]:
    """Fresh copy of the canonical tree as NavNodes."""
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    return [_topic_to_nav(node) for node in taxonomy.tree]


def iter_records(
    records: Sequence[Any],
) -> Iterator[Tuple[ExternalCategoryRecord, Optional[str]]]:
    """
    Walk (possibly nested) backend records in pre-order.

    Yields each valid record with its effective parent slug: the record's own
    ``parent_slug`` wins over the parent it is nested under. Records without
    a slug are dropped together with their nested children.
    """
    # (raw record, inherited parent slug), popped in pre-order
    stack: List[Tuple[Any, Optional[str]]] = [(raw, None) for raw in reversed(records)]
    while stack:
        raw, inherited = stack.pop()
        record = coerce_model(raw, ExternalCategoryRecord)
        if record is None:
            continue

        if not record.slug:
            logger.debug("Dropping category record without a slug")
            continue

        yield record, record.parent_slug or inherited
        if record.children:
            stack.extend((child, record.slug) for child in reversed(record.children))


def flatten_records(
    records: Sequence[Any],
    taxonomy: Optional[Taxonomy] = None,
) -> List[FlatRecord]:
    """Flatten backend records, filling missing names from the taxonomy."""
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    return [
        FlatRecord(
            slug=record.slug,
            name=record.name or taxonomy.get_name(record.slug) or record.slug,
            parent_slug=parent_slug,
        )
        for record, parent_slug in iter_records(records)
    ]


# =============================================================================
# ORDERING
# =============================================================================


def _sort_key(node: NavNode, order: Dict[str, int]) -> Tuple[int, int, str, str, str]:
    """
    Total order over siblings.

    Recognized slugs first, by canonical index; then the rest by
    case-insensitive name, with name and slug as tie-breakers.
    """
    index = order.get(node.slug)
    if index is not None:
        return (0, index, "", "", "")
    return (1, 0, node.name.casefold(), node.name, node.slug)


def sort_nav_nodes(
    nodes: List[NavNode],
    parent_key: str = ROOT_ORDER_KEY,
    taxonomy: Optional[Taxonomy] = None,
) -> List[NavNode]:
    """
    Sort a forest in place, level by level, and return it.

    Each level uses the canonical sibling order of its parent slug
    (``parent_key`` for the top level).
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()

    pending: List[Tuple[List[NavNode], str]] = [(nodes, parent_key)]
    while pending:
        siblings, key = pending.pop()
        order = {slug: i for i, slug in enumerate(taxonomy.sibling_order(key))}
        siblings.sort(key=lambda node: _sort_key(node, order))
        for node in siblings:
            if node.children:
                pending.append((node.children, node.slug))

    return nodes


# =============================================================================
# BUILDER
# =============================================================================


def _resolve_parents(
    flat: Sequence[FlatRecord],
) -> Tuple[Dict[str, FlatRecord], Dict[str, Optional[str]]]:
    """
    Pick one record per slug and decide each slug's effective parent.

    A parent is kept only if it is itself a record and attaching to it does
    not close a cycle; otherwise the slug becomes a root (None).
    """
    first_seen: Dict[str, FlatRecord] = {}
    for item in flat:
        if item.slug in first_seen:
            logger.debug(f"Ignoring duplicate category record {item.slug!r}")
            continue
        first_seen[item.slug] = item

    effective: Dict[str, Optional[str]] = {}
    for slug, item in first_seen.items():
        parent = item.parent_slug
        if parent is None:
            effective[slug] = None
            continue
        if parent not in first_seen:
            logger.debug(
                f"Promoting {slug!r} to root: parent {parent!r} not in input",
                extra={"operation": "build_nav_tree", "slug": slug},
            )
            effective[slug] = None
            continue

        # Follow the chain upwards; decided links win over declared ones
        cursor: Optional[str] = parent
        visited = set()
        while cursor is not None and cursor != slug and cursor not in visited:
            visited.add(cursor)
            if cursor in effective:
                cursor = effective[cursor]
            else:
                cursor = first_seen[cursor].parent_slug
                if cursor not in first_seen:
                    cursor = None

        if cursor == slug:
            logger.debug(
                f"Promoting {slug!r} to root: parent chain loops back",
                extra={"operation": "build_nav_tree", "slug": slug},
            )
            effective[slug] = None
        else:
            effective[slug] = parent

    return first_seen, effective


def build_nav_tree(
    records: Any,
    taxonomy: Optional[Taxonomy] = None,
) -> List[NavNode]:
    """
    Build an ordered navigation forest from backend category records.

    Args:
        records: List of category records (dicts or ExternalCategoryRecord),
            flat or nested. None, empty and non-list input yield the
            canonical tree.
        taxonomy: Taxonomy for names and ordering (defaults to the canonical one).

    Returns:
        List of root NavNodes; every slug appears at most once in the forest.
    """
    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()

    if not isinstance(records, (list, tuple)) or not records:
        logger.debug("No category records supplied, using canonical navigation")
        return get_fallback_nav_tree(taxonomy)

    flat = flatten_records(records, taxonomy)
    if not flat:
        logger.debug("No usable category records, using canonical navigation")
        return get_fallback_nav_tree(taxonomy)

    first_seen, effective = _resolve_parents(flat)
    nodes = {slug: NavNode(slug=item.slug, name=item.name) for slug, item in first_seen.items()}

    roots: List[NavNode] = []
    for slug, parent in effective.items():
        if parent is None:
            roots.append(nodes[slug])
        else:
            nodes[parent].children.append(nodes[slug])

    return sort_nav_nodes(roots, ROOT_ORDER_KEY, taxonomy)


def group_overflow_nav(
    nodes: Sequence[NavNode],
    overflow: Optional[Dict[str, Any]] = None,
) -> List[NavNode]:
    """
    Fold configured top-level entries into a trailing "More" node.

    Args:
        nodes: Ordered root NavNodes.
        overflow: Dict with ``slug``, ``name`` and ``members``; defaults to
            the navigation config.

    Returns:
        New list of copied nodes; unchanged order when no member is present.
    """
    overflow = overflow if overflow is not None else Config.get_overflow_config()
    members = set(overflow.get("members") or [])

    primary: List[NavNode] = []
    folded: List[NavNode] = []
    for node in nodes:
        (folded if node.slug in members else primary).append(node.copy())

    if folded:
        primary.append(
            NavNode(
                slug=overflow.get("slug", "more"),
                name=overflow.get("name", "More"),
                children=folded,
            )
        )
    return primary
