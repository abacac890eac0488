"""
ClashLens services.

Catalog loading, classification, arena value resolution, projection and
search. Nothing here depends on the web layer.
"""

from clashlens.services.arena_resolver import (
    arena_column,
    coerce_count,
    resolve_arena,
    value_for,
)
from clashlens.services.catalog_loader import (
    CatalogLoader,
    fetch_catalog_text,
    parse_catalog,
    validate_schema,
)
from clashlens.services.catalog_search import (
    CatalogFacets,
    SearchQuery,
    catalog_facets,
    describe_card,
    search_catalog,
)
from clashlens.services.classifier import (
    DEFAULT_CHEAP_SPELLS,
    DEFAULT_MEMBER_ORDER,
    DEFAULT_TOXIC_TROOPS,
    classify,
    default_assignment,
    reset_to_default,
    seed_assignment,
)
from clashlens.services.explorer import ExplorerSession, SearchHit
from clashlens.services.projection import (
    ProjectionEngine,
    build_arena_projection,
    build_story_projections,
    group_means,
    index_catalog,
    project,
)

__all__ = [
    "CatalogFacets",
    "CatalogLoader",
    "DEFAULT_CHEAP_SPELLS",
    "DEFAULT_MEMBER_ORDER",
    "DEFAULT_TOXIC_TROOPS",
    "ExplorerSession",
    "ProjectionEngine",
    "SearchHit",
    "SearchQuery",
    "arena_column",
    "build_arena_projection",
    "build_story_projections",
    "catalog_facets",
    "classify",
    "coerce_count",
    "default_assignment",
    "describe_card",
    "fetch_catalog_text",
    "group_means",
    "index_catalog",
    "parse_catalog",
    "project",
    "reset_to_default",
    "resolve_arena",
    "search_catalog",
    "seed_assignment",
    "validate_schema",
    "value_for",
]
