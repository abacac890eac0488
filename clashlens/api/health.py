"""
Health check endpoints.

Provides liveness and readiness probes. Readiness requires a loaded catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from clashlens.api.dependencies import AppState, get_app_state
from clashlens.models.failure import LoadError

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    catalog: str | None = None
    cards: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check the catalog.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    state: Annotated[AppState, Depends(get_app_state)],
) -> HealthResponse:
    """
    Readiness probe.

    Waits for the catalog load (starting it if needed). Returns 503 if the
    catalog could not be loaded.
    """
    try:
        catalog = await state.loader.load()
    except LoadError:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", catalog="unavailable")
    return HealthResponse(status="ready", catalog="loaded", cards=len(catalog))
