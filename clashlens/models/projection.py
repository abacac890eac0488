from dataclasses import dataclass, field

from clashlens.models.arena import ArenaDescriptor
from clashlens.models.groups import GroupKey


@dataclass(frozen=True, slots=True)
class ProjectionRecord:
    """
    One chart data point.

    Attributes:
        name: Card name as spelled in the catalog
        group: Group the card belongs to
        value: Win count in the projected arena (always > 0)
        arena: Display name of the projected arena
        card_type: Card type, for tooltips
        cost: Elixir cost, for tooltips
        rarity: Rarity, for tooltips
    """

    name: str
    group: GroupKey
    value: int | float
    arena: str = ""
    card_type: str = ""
    cost: int = 0
    rarity: str = ""


@dataclass
class ArenaProjection:
    """
    Chart-ready data for one arena.

    `means` holds one entry per assignable group; None means the group had
    no qualifying member, so no mean line should be drawn.
    """

    arena: ArenaDescriptor
    records: list[ProjectionRecord] = field(default_factory=list)
    means: dict[GroupKey, float | None] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.records
