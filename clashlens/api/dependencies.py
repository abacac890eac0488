"""
Shared API dependencies.

The application owns one AppState: the catalog loader plus the lazily
created explorer session and story projections. It is attached to
`app.state` rather than held in a module global so tests can override it.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from clashlens.config import settings
from clashlens.models.card import CardRecord
from clashlens.models.projection import ArenaProjection
from clashlens.services.catalog_loader import CatalogLoader
from clashlens.services.explorer import ExplorerSession
from clashlens.services.projection import build_story_projections


@dataclass
class AppState:
    """Process-wide state owned by the application."""

    loader: CatalogLoader
    explorer: ExplorerSession | None = None
    story: dict[str, ArenaProjection] | None = None


def build_app_state() -> AppState:
    """AppState for the configured catalog source."""
    return AppState(
        loader=CatalogLoader(
            settings.catalog_source,
            timeout=settings.catalog_fetch_timeout,
        )
    )


def get_app_state(request: Request) -> AppState:
    """
    Dependency that provides the application state.

    Created on first use when the lifespan handler has not run
    (e.g., under an ASGI test transport).
    """
    state: AppState | None = getattr(request.app.state, "clashlens", None)
    if state is None:
        state = build_app_state()
        request.app.state.clashlens = state
    return state


async def get_catalog(
    state: Annotated[AppState, Depends(get_app_state)],
) -> tuple[CardRecord, ...]:
    """
    Dependency that provides the loaded catalog.

    Raises:
        LoadError: If the catalog cannot be loaded (rendered as HTTP 503)
    """
    return await state.loader.load()


async def get_story(
    state: Annotated[AppState, Depends(get_app_state)],
    catalog: Annotated[tuple[CardRecord, ...], Depends(get_catalog)],
) -> dict[str, ArenaProjection]:
    """Dependency that provides the story projections, built once per catalog."""
    if state.story is None:
        state.story = build_story_projections(catalog)
    return state.story


async def get_explorer(
    state: Annotated[AppState, Depends(get_app_state)],
    catalog: Annotated[tuple[CardRecord, ...], Depends(get_catalog)],
) -> ExplorerSession:
    """Dependency that provides the explorer session, created on first use."""
    if state.explorer is None:
        state.explorer = ExplorerSession(catalog, default_arena=settings.default_arena)
    return state.explorer
