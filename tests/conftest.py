from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from clashlens.api.dependencies import AppState, get_app_state
from clashlens.main import app
from clashlens.models.card import CardRecord
from clashlens.services.catalog_loader import CatalogLoader

CARD_LIST_HEADER = (
    "card_name,card_type,elixir,rarity,count_0,count_1,count_2,count_3,count_4,overall_count"
)


def make_card(
    name: str,
    card_type: str = "troop",
    cost: int = 3,
    rarity: str = "Common",
    counts: tuple[int, ...] = (0, 0, 0, 0, 0),
) -> CardRecord:
    """Build a CardRecord with count_0..count_4 taken from `counts`."""
    values = {f"count_{i}": v for i, v in enumerate(counts)}
    return CardRecord(
        name=name,
        card_type=card_type,
        cost=cost,
        rarity=rarity,
        arena_values=values,
        overall_count=sum(counts),
    )


@pytest.fixture
def sample_catalog() -> list[CardRecord]:
    """Small catalog covering both default groups and some unclassified cards."""
    return [
        make_card("Skeleton Army", "troop", 3, "Epic", (120, 100, 0, 80, 60)),
        make_card("Wizard", "troop", 5, "Rare", (90, 0, 0, 40, 30)),
        make_card("Valkyrie", "troop", 4, "Rare", (150, 140, 130, 120, 110)),
        make_card("Mega Knight", "troop", 7, "Legendary", (0, 0, 0, 200, 180)),
        make_card("The Log", "spell", 2, "Legendary", (0, 0, 0, 0, 250)),
        make_card("Zap", "spell", 2, "Common", (50, 60, 70, 80, 90)),
        make_card("Hog Rider", "troop", 4, "Rare", (300, 280, 260, 240, 220)),
        make_card("Fireball", "spell", 4, "Rare", (100, 100, 100, 100, 100)),
        make_card("Tesla", "building", 4, "Common", (40, 0, 20, 0, 10)),
    ]


@pytest.fixture
def catalog_csv() -> str:
    return "\n".join(
        [
            CARD_LIST_HEADER,
            "Skeleton Army,troop,3,Epic,120,100,0,80,60,360",
            "Wizard,troop,5,Rare,90,0,0,40,30,160",
            "Valkyrie,troop,4,Rare,150,140,130,120,110,650",
            "Mega Knight,troop,7,Legendary,0,0,0,200,180,380",
            "The Log,spell,2,Legendary,0,0,0,0,250,250",
            "Zap,spell,2,Common,50,60,70,80,90,350",
            "Hog Rider,troop,4,Rare,300,280,260,240,220,1300",
            "Fireball,spell,4,Rare,100,100,100,100,100,500",
            "Tesla,building,4,Common,40,0,20,0,10,70",
        ]
    )


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_csv: str) -> Path:
    path = tmp_path / "CardList.csv"
    path.write_text(catalog_csv, encoding="utf-8")
    return path


@pytest.fixture
def app_state(catalog_file: Path) -> AppState:
    return AppState(loader=CatalogLoader(str(catalog_file)))


@pytest.fixture
async def client(app_state: AppState) -> AsyncGenerator[AsyncClient, None]:
    """Async test client whose catalog comes from `catalog_file`."""
    app.dependency_overrides[get_app_state] = lambda: app_state

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
