from clashlens.api.catalog import router as catalog_router
from clashlens.api.explorer import router as explorer_router
from clashlens.api.health import router as health_router
from clashlens.api.story import router as story_router

__all__ = [
    "catalog_router",
    "explorer_router",
    "health_router",
    "story_router",
]
