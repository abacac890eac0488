"""
Arena value resolver.

Maps an arena reference (display name or column key) to a card's win count.
Never raises: every miss resolves to 0.
"""

import math
from typing import Any

from clashlens.models.arena import ARENA_COLUMN_PREFIX, ARENAS, ArenaDescriptor
from clashlens.models.card import CardRecord

_BY_KEY: dict[str, ArenaDescriptor] = {a.column_key: a for a in ARENAS}
_BY_NAME: dict[str, ArenaDescriptor] = {a.display_name: a for a in ARENAS}


def resolve_arena(arena_ref: str | None) -> ArenaDescriptor | None:
    """
    Find the arena for a display name or column key.

    Returns:
        The matching ArenaDescriptor, or None if nothing matches.
    """
    if not arena_ref:
        return None
    return _BY_KEY.get(arena_ref) or _BY_NAME.get(arena_ref)


def arena_column(arena_ref: str | None) -> str | None:
    """
    Column key to read for an arena reference.

    References that look like a column key ("count_*") are used as-is, even
    when no predefined arena has that key; anything else is looked up by
    display name.
    """
    if not arena_ref:
        return None
    if arena_ref.startswith(ARENA_COLUMN_PREFIX):
        return arena_ref
    arena = _BY_NAME.get(arena_ref)
    return arena.column_key if arena else None


def coerce_count(value: Any) -> int | float:
    """
    Lenient numeric coercion for stored win counts.

    Finite numbers pass through unchanged; anything else is parsed as a
    float. NaN, infinities, blanks and unparseable text all become 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0

    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return 0
    return parsed if math.isfinite(parsed) else 0


def value_for(record: CardRecord | None, arena_ref: str | None) -> int | float:
    """
    Win count of `record` in the referenced arena.

    Args:
        record: Catalog record; None short-circuits to 0
        arena_ref: Arena display name ("Spooky Town") or column key ("count_0")

    Returns:
        The coerced win count, or 0 for any miss.
    """
    if record is None:
        return 0

    column = arena_column(arena_ref)
    if column is None:
        return 0

    return coerce_count(record.arena_values.get(column))
