"""
Story API endpoints.

Per-arena comparison of the default groups, one chart per arena.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from clashlens.api.dependencies import get_story
from clashlens.api.schemas import ArenaProjectionResponse, projection_response
from clashlens.models.failure import ArenaNotFoundError
from clashlens.models.projection import ArenaProjection
from clashlens.services.arena_resolver import resolve_arena

router = APIRouter(prefix="/story", tags=["story"])


@router.get("", response_model=dict[str, ArenaProjectionResponse])
async def get_story_charts(
    story: Annotated[dict[str, ArenaProjection], Depends(get_story)],
) -> dict[str, ArenaProjectionResponse]:
    """All story charts, keyed by arena display name in arena order."""
    return {name: projection_response(p) for name, p in story.items()}


@router.get("/{arena}", response_model=ArenaProjectionResponse)
async def get_story_chart(
    arena: str,
    story: Annotated[dict[str, ArenaProjection], Depends(get_story)],
) -> ArenaProjectionResponse:
    """
    Story chart for one arena.

    `arena` may be a display name ("Spooky Town") or column key ("count_0").
    """
    descriptor = resolve_arena(arena)
    if descriptor is None:
        raise ArenaNotFoundError(arena)
    return projection_response(story[descriptor.display_name])
