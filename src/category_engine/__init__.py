"""
Category taxonomy resolution engine.

This package contains:
- schemas: canonical taxonomy index and backend category models
- normalization: slug resolution and per-item category metadata
- navigation: navigation tree, homepage strip and breadcrumbs
- configs / monitoring: settings and logging setup
"""

from category_engine.navigation.breadcrumbs import (
    Breadcrumb,
    FlatCategory,
    build_breadcrumbs,
    flatten_category_tree,
    list_child_categories,
)
from category_engine.navigation.home import (
    DEFAULT_HOME_CATEGORY_LIMIT,
    build_home_categories,
    get_fallback_home_categories,
    get_home_category_order,
)
from category_engine.navigation.tree import (
    NavNode,
    build_nav_tree,
    get_fallback_nav_tree,
    group_overflow_nav,
    sort_nav_nodes,
)
from category_engine.normalization.meta import (
    CategoryMeta,
    resolve_category_meta,
    resolve_item_category_meta,
)
from category_engine.normalization.slugs import (
    SlugResolution,
    get_category_path,
    get_fallback_category_display_name,
    get_top_level_category_slug,
    resolve_category_slug,
)
from category_engine.schemas.category import (
    Category,
    CategoryReference,
    ExternalCategoryRecord,
)
from category_engine.schemas.taxonomy import (
    DEFAULT_CATEGORY_SLUG,
    Taxonomy,
    TaxonomyDataError,
    TopicDescriptor,
    TopicNode,
    get_taxonomy,
)

__all__ = [
    "Breadcrumb",
    "Category",
    "CategoryMeta",
    "CategoryReference",
    "DEFAULT_CATEGORY_SLUG",
    "DEFAULT_HOME_CATEGORY_LIMIT",
    "ExternalCategoryRecord",
    "FlatCategory",
    "NavNode",
    "SlugResolution",
    "Taxonomy",
    "TaxonomyDataError",
    "TopicDescriptor",
    "TopicNode",
    "build_breadcrumbs",
    "build_home_categories",
    "build_nav_tree",
    "flatten_category_tree",
    "get_category_path",
    "get_fallback_category_display_name",
    "get_fallback_home_categories",
    "get_fallback_nav_tree",
    "get_home_category_order",
    "get_taxonomy",
    "get_top_level_category_slug",
    "group_overflow_nav",
    "list_child_categories",
    "resolve_category_meta",
    "resolve_category_slug",
    "resolve_item_category_meta",
    "sort_nav_nodes",
]
