"""
Catalog API endpoints.

Static metadata (arenas, groups), filter facets and stateless search.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from clashlens.api.dependencies import get_catalog
from clashlens.api.schemas import (
    ArenaResponse,
    CardResponse,
    GroupResponse,
    arena_response,
    card_response,
    group_response,
)
from clashlens.config import settings
from clashlens.models.arena import ARENAS
from clashlens.models.card import CardRecord
from clashlens.models.groups import ASSIGNABLE_GROUPS, GROUP_INFO
from clashlens.services.catalog_search import SearchQuery, catalog_facets, search_catalog

router = APIRouter(tags=["catalog"])


class FacetsResponse(BaseModel):
    """Distinct values available for each filter."""

    costs: list[int] = Field(default_factory=list)
    rarities: list[str] = Field(default_factory=list)
    card_types: list[str] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Search results, truncated to `limit` for display."""

    total: int
    limit: int
    results: list[CardResponse] = Field(default_factory=list)


@router.get("/arenas", response_model=list[ArenaResponse])
async def list_arenas() -> list[ArenaResponse]:
    """Arenas in canonical order."""
    return [arena_response(a) for a in ARENAS]


@router.get("/groups", response_model=list[GroupResponse])
async def list_groups() -> list[GroupResponse]:
    """Assignable groups with their legend labels and colors."""
    return [group_response(GROUP_INFO[g]) for g in ASSIGNABLE_GROUPS]


@router.get("/catalog/facets", response_model=FacetsResponse)
async def get_facets(
    catalog: Annotated[tuple[CardRecord, ...], Depends(get_catalog)],
) -> FacetsResponse:
    """Filter drop-down values (elixir costs, rarities, card types)."""
    facets = catalog_facets(catalog)
    return FacetsResponse(
        costs=facets.costs,
        rarities=facets.rarities,
        card_types=facets.card_types,
    )


@router.get("/catalog/search", response_model=SearchResponse)
async def search(
    catalog: Annotated[tuple[CardRecord, ...], Depends(get_catalog)],
    text: str | None = None,
    cost: Annotated[int | None, Query(ge=0)] = None,
    rarity: str | None = None,
    card_type: str | None = None,
    arena: str | None = None,
    limit: Annotated[int | None, Query(ge=1, le=1000)] = None,
) -> SearchResponse:
    """
    Search the catalog.

    All filters are ANDed. With `arena`, only cards with wins in that arena
    are returned, highest first. An unknown arena matches nothing.
    """
    query = SearchQuery(text=text, cost=cost, rarity=rarity, card_type=card_type, arena=arena)
    results = search_catalog(catalog, query)
    cap = limit or settings.search_result_limit

    return SearchResponse(
        total=len(results),
        limit=cap,
        results=[card_response(r) for r in results[:cap]],
    )
