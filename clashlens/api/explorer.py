"""
Explorer API endpoints.

Interactive exploration: choose an arena, search/filter the catalog, and
move cards between the two comparison groups. Every mutation returns the
recomputed explorer state.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from clashlens.api.dependencies import get_explorer
from clashlens.api.schemas import (
    ArenaProjectionResponse,
    ArenaResponse,
    CardResponse,
    arena_response,
    card_response,
    projection_response,
)
from clashlens.config import settings
from clashlens.models.failure import UnknownGroupError
from clashlens.models.groups import ASSIGNABLE_GROUPS, GroupKey
from clashlens.services.catalog_search import SearchQuery
from clashlens.services.explorer import ExplorerSession

router = APIRouter(prefix="/explorer", tags=["explorer"])


class QueryModel(BaseModel):
    """Search filters for the explorer (the selected arena always applies)."""

    text: str | None = None
    cost: int | None = Field(default=None, ge=0)
    rarity: str | None = None
    card_type: str | None = None


class ArenaSelectRequest(BaseModel):
    """Request model for switching the charted arena."""

    arena: str = Field(
        ...,
        description="Arena display name or column key",
        examples=["Legendary Arena", "count_4"],
    )


class AssignRequest(BaseModel):
    """Request model for adding a card to a group."""

    name: str = Field(..., min_length=1, examples=["Zap"])


class SearchHitResponse(BaseModel):
    """A search result with its win count in the selected arena and current group."""

    card: CardResponse
    value: int | float
    group: str


class ExplorerStateResponse(BaseModel):
    """Full explorer state after the last recompute."""

    arena: ArenaResponse
    query: QueryModel
    groups: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Members per group, sorted by name",
    )
    chart: ArenaProjectionResponse
    total_results: int = 0
    results: list[SearchHitResponse] = Field(
        default_factory=list,
        description="Search results, truncated to the display limit",
    )


def _parse_group(group: str) -> GroupKey:
    try:
        key = GroupKey(group)
    except ValueError as e:
        raise UnknownGroupError(group) from e
    if key not in ASSIGNABLE_GROUPS:
        raise UnknownGroupError(group)
    return key


def _state_response(session: ExplorerSession) -> ExplorerStateResponse:
    query = session.query
    results = session.results
    return ExplorerStateResponse(
        arena=arena_response(session.arena),
        query=QueryModel(
            text=query.text,
            cost=query.cost,
            rarity=query.rarity,
            card_type=query.card_type,
        ),
        groups={g.value: session.assignment.members(g) for g in ASSIGNABLE_GROUPS},
        chart=projection_response(session.chart),
        total_results=len(results),
        results=[
            SearchHitResponse(card=card_response(hit.record), value=hit.value, group=hit.group.value)
            for hit in results[: settings.search_result_limit]
        ],
    )


Explorer = Annotated[ExplorerSession, Depends(get_explorer)]


@router.get("", response_model=ExplorerStateResponse)
async def get_explorer_state(session: Explorer) -> ExplorerStateResponse:
    """Current explorer state."""
    return _state_response(session)


@router.put("/arena", response_model=ExplorerStateResponse)
async def select_arena(request: ArenaSelectRequest, session: Explorer) -> ExplorerStateResponse:
    """Switch the charted arena. Unknown arenas return 404."""
    session.select_arena(request.arena)
    return _state_response(session)


@router.put("/query", response_model=ExplorerStateResponse)
async def set_query(request: QueryModel, session: Explorer) -> ExplorerStateResponse:
    """Replace the search filters."""
    session.set_query(
        SearchQuery(
            text=request.text,
            cost=request.cost,
            rarity=request.rarity,
            card_type=request.card_type,
        )
    )
    return _state_response(session)


@router.post("/groups/reset", response_model=ExplorerStateResponse)
async def reset_groups(session: Explorer) -> ExplorerStateResponse:
    """Restore the default group membership."""
    session.reset_to_default()
    return _state_response(session)


@router.post("/groups/clear", response_model=ExplorerStateResponse)
async def clear_groups(session: Explorer) -> ExplorerStateResponse:
    """Empty both groups."""
    session.clear_all()
    return _state_response(session)


@router.post("/groups/{group}/cards", response_model=ExplorerStateResponse)
async def add_card(group: str, request: AssignRequest, session: Explorer) -> ExplorerStateResponse:
    """
    Add a card to a group.

    The card is removed from the other group first. Adding a card that is
    already in the group is a no-op.
    """
    session.assign(request.name, _parse_group(group))
    return _state_response(session)


@router.delete("/groups/{group}/cards/{name}", response_model=ExplorerStateResponse)
async def remove_card(group: str, name: str, session: Explorer) -> ExplorerStateResponse:
    """Remove a card from a group (no-op if it is not a member)."""
    session.unassign(name, _parse_group(group))
    return _state_response(session)
