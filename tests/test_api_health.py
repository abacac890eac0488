"""Tests for health check endpoints."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from clashlens.api.dependencies import AppState, get_app_state
from clashlens.main import app
from clashlens.services.catalog_loader import CatalogLoader


@pytest.fixture
async def broken_client(tmp_path: Path) -> AsyncGenerator[AsyncClient, None]:
    """Client whose catalog source does not exist."""
    state = AppState(loader=CatalogLoader(str(tmp_path / "missing.csv")))
    app.dependency_overrides[get_app_state] = lambda: state

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness probe returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    async def test_health_no_catalog_check(self, broken_client: AsyncClient) -> None:
        """Liveness does not depend on the catalog."""
        response = await broken_client.get("/health")

        assert response.status_code == 200
        assert response.json()["catalog"] is None


class TestReadyEndpoint:
    async def test_ready_when_catalog_loads(self, client: AsyncClient) -> None:
        """Readiness probe reports the loaded catalog size."""
        response = await client.get("/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["catalog"] == "loaded"
        assert data["cards"] == 9

    async def test_not_ready_when_catalog_fails(self, broken_client: AsyncClient) -> None:
        """Readiness probe returns 503 when the catalog cannot be loaded."""
        response = await broken_client.get("/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["catalog"] == "unavailable"

    async def test_catalog_endpoints_return_failure_envelope(
        self, broken_client: AsyncClient
    ) -> None:
        """A failed load surfaces as a 503 known-failure envelope, not a 500."""
        response = await broken_client.get("/story")

        assert response.status_code == 503
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "service_unavailable"
        assert data["failure"]["message"] == "The card catalog could not be loaded."
