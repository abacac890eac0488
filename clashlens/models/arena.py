from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArenaDescriptor:
    """
    Static metadata for one arena.

    Attributes:
        index: Ordinal position, defines canonical arena ordering
        column_key: Catalog column holding the arena's win counts (e.g., "count_0")
        display_name: Human label, interchangeable with column_key for lookups
    """

    index: int
    column_key: str
    display_name: str


# The column_key <-> display_name binding is load-bearing: callers reference
# arenas by either form.
ARENAS: tuple[ArenaDescriptor, ...] = (
    ArenaDescriptor(index=0, column_key="count_0", display_name="Spooky Town"),
    ArenaDescriptor(index=1, column_key="count_1", display_name="Rascal's Hideout"),
    ArenaDescriptor(index=2, column_key="count_2", display_name="Serenity Peak"),
    ArenaDescriptor(index=3, column_key="count_3", display_name="Miner's Mine"),
    ArenaDescriptor(index=4, column_key="count_4", display_name="Legendary Arena"),
)

ARENA_COLUMN_PREFIX = "count_"

ARENA_COLUMNS: tuple[str, ...] = tuple(a.column_key for a in ARENAS)
