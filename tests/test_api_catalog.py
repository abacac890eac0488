"""Tests for catalog metadata and search endpoints."""

from httpx import AsyncClient


class TestMetadataEndpoints:
    async def test_list_arenas(self, client: AsyncClient) -> None:
        """Arenas come back in canonical order."""
        response = await client.get("/arenas")

        assert response.status_code == 200
        data = response.json()
        assert [a["column_key"] for a in data] == [f"count_{i}" for i in range(5)]
        assert data[0]["display_name"] == "Spooky Town"
        assert data[-1]["display_name"] == "Legendary Arena"

    async def test_list_groups(self, client: AsyncClient) -> None:
        """Only assignable groups are listed, with legend metadata."""
        response = await client.get("/groups")

        assert response.status_code == 200
        data = response.json()
        assert [g["key"] for g in data] == ["toxic_troop", "cheap_spell"]
        assert data[0]["mean_label"] == "Toxic troop mean"
        assert data[1]["color"] == "#1f77b4"

    async def test_facets(self, client: AsyncClient) -> None:
        response = await client.get("/catalog/facets")

        assert response.status_code == 200
        data = response.json()
        assert data["costs"] == [2, 3, 4, 5, 7]
        assert data["card_types"] == ["building", "spell", "troop"]


class TestSearchEndpoint:
    async def test_search_by_text(self, client: AsyncClient) -> None:
        response = await client.get("/catalog/search", params={"text": "zap"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        card = data["results"][0]
        assert card["name"] == "Zap"
        assert card["description"] == "spell · Common · 2 elixir"
        assert card["arena_values"]["count_4"] == 90
        assert isinstance(card["arena_values"]["count_4"], int)
        assert card["overall_count"] == 350

    async def test_search_by_arena_sorts_by_wins(self, client: AsyncClient) -> None:
        response = await client.get(
            "/catalog/search", params={"arena": "Spooky Town", "card_type": "spell"}
        )

        data = response.json()
        assert [c["name"] for c in data["results"]] == ["Fireball", "Zap"]

    async def test_limit_truncates_but_reports_total(self, client: AsyncClient) -> None:
        response = await client.get("/catalog/search", params={"limit": 2})

        data = response.json()
        assert data["total"] == 9
        assert data["limit"] == 2
        assert len(data["results"]) == 2

    async def test_unknown_arena_returns_no_results(self, client: AsyncClient) -> None:
        response = await client.get("/catalog/search", params={"arena": "Bone Pit"})

        assert response.status_code == 200
        assert response.json()["total"] == 0

    async def test_negative_cost_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/catalog/search", params={"cost": -1})

        assert response.status_code == 422
