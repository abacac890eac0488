"""
Catalog search service.

Compound filtering over the card catalog for the explorer view.

Supports queries like:
- "zap" -> text="zap" (name, type or rarity contains "zap")
- "3-elixir epics" -> cost=3, rarity="Epic"
- "spells seen in Legendary Arena" -> card_type="spell", arena="Legendary Arena"
"""

from collections.abc import Iterable
from dataclasses import dataclass

from clashlens.models.card import CardRecord
from clashlens.services.arena_resolver import value_for


@dataclass(frozen=True)
class SearchQuery:
    """
    Filters for `search_catalog`. Unset (None/blank) filters are ignored.

    Attributes:
        text: Case-insensitive substring of name, type or rarity
        cost: Exact elixir cost
        rarity: Exact rarity (e.g., "Epic")
        card_type: Exact card type (e.g., "spell")
        arena: Arena display name or column key; keeps only cards with wins
            there and ranks results by those wins
    """

    text: str | None = None
    cost: int | None = None
    rarity: str | None = None
    card_type: str | None = None
    arena: str | None = None


@dataclass(frozen=True)
class CatalogFacets:
    """Distinct filter values present in the catalog."""

    costs: list[int]
    rarities: list[str]
    card_types: list[str]


def _matches_text(record: CardRecord, term: str) -> bool:
    return (
        term in record.name.lower()
        or term in record.card_type.lower()
        or term in record.rarity.lower()
    )


def search_catalog(catalog: Iterable[CardRecord], query: SearchQuery) -> list[CardRecord]:
    """
    Filter the catalog with every provided criterion ANDed together.

    Args:
        catalog: Catalog records in load order
        query: Filters to apply

    Returns:
        Matching records. With `query.arena` set, sorted by that arena's
        wins (highest first, ties keep catalog order); otherwise in catalog
        order. The result is not truncated.
    """
    term = (query.text or "").strip().lower()

    results: list[CardRecord] = []
    for record in catalog:
        if query.arena and value_for(record, query.arena) <= 0:
            continue
        if term and not _matches_text(record, term):
            continue
        if query.cost is not None and record.cost != query.cost:
            continue
        if query.rarity and record.rarity != query.rarity:
            continue
        if query.card_type and record.card_type != query.card_type:
            continue
        results.append(record)

    if query.arena:
        arena = query.arena
        results.sort(key=lambda r: value_for(r, arena), reverse=True)

    return results


def catalog_facets(catalog: Iterable[CardRecord]) -> CatalogFacets:
    """
    Distinct values for the filter drop-downs.

    Costs are sorted numerically, rarities and types alphabetically;
    blank values are left out.
    """
    records = list(catalog)
    return CatalogFacets(
        costs=sorted({r.cost for r in records}),
        rarities=sorted({r.rarity for r in records if r.rarity}),
        card_types=sorted({r.card_type for r in records if r.card_type}),
    )


def describe_card(record: CardRecord) -> str:
    """One-line meta description, e.g. "spell · Common · 2 elixir"."""
    parts = [p for p in (record.card_type, record.rarity) if p]
    parts.append(f"{record.cost} elixir")
    return " · ".join(parts)
