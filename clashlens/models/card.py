from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    One row of the card catalog.

    Attributes:
        name: Card name, unique within the catalog (case-insensitive for lookups)
        card_type: troop / spell / building
        cost: Elixir cost
        rarity: Common / Rare / Epic / Legendary
        arena_values: Win count per arena column key (e.g., {"count_0": 120})
        overall_count: Total wins across all arenas

    Records are built once by the catalog loader and never mutated.
    Group membership lives in GroupAssignment, not here.
    """

    name: str
    card_type: str = ""
    cost: int = 0
    rarity: str = ""
    arena_values: Mapping[str, Any] = field(default_factory=dict)
    overall_count: int = 0

    def __post_init__(self) -> None:
        """Freeze arena_values behind a read-only view of a private copy."""
        if not isinstance(self.arena_values, MappingProxyType):
            object.__setattr__(self, "arena_values", MappingProxyType(dict(self.arena_values)))
