"""
Aggregation / projection engine.

Turns catalog + group membership + arena into chart-ready records and
per-group mean lines. `project` and `group_means` are pure functions of
their inputs; ProjectionEngine memoizes them for repeated calls with an
unchanged arena and membership.
"""

import logging
from collections.abc import Iterable, Sequence
from statistics import fmean

from clashlens.models.arena import ARENAS, ArenaDescriptor
from clashlens.models.card import CardRecord
from clashlens.models.groups import (
    ASSIGNABLE_GROUPS,
    GroupAssignment,
    GroupKey,
    MembershipSnapshot,
    normalize_name,
)
from clashlens.models.projection import ArenaProjection, ProjectionRecord
from clashlens.services.arena_resolver import resolve_arena, value_for
from clashlens.services.classifier import DEFAULT_MEMBER_ORDER, default_assignment

logger = logging.getLogger(__name__)


def index_catalog(catalog: Iterable[CardRecord]) -> dict[str, CardRecord]:
    """Normalized name -> record (first occurrence wins)."""
    index: dict[str, CardRecord] = {}
    for record in catalog:
        index.setdefault(normalize_name(record.name), record)
    return index


def project(
    catalog: Iterable[CardRecord] | dict[str, CardRecord],
    assignment: GroupAssignment,
    arena_ref: str,
    member_order: Sequence[str] | None = None,
    sort: bool = True,
) -> list[ProjectionRecord]:
    """
    Build the projection for one arena.

    Args:
        catalog: Catalog records, or an index from `index_catalog`
        assignment: Current group membership
        arena_ref: Arena display name or column key
        member_order: Canonical order to walk members in. Defaults to the
            assignment's own order (group order, then insertion order).
        sort: Sort descending by value (stable, ties keep member order)

    Returns:
        One record per assigned card present in the catalog with a positive
        value in the arena. Cards with value <= 0 are treated as unavailable
        in that arena and left out.
    """
    index = catalog if isinstance(catalog, dict) else index_catalog(catalog)
    arena = resolve_arena(arena_ref)
    arena_name = arena.display_name if arena else arena_ref

    names = assignment.ordered_members() if member_order is None else member_order

    records: list[ProjectionRecord] = []
    for name in names:
        group = assignment.group_of(name)
        if group is GroupKey.UNCLASSIFIED:
            continue

        record = index.get(normalize_name(name))
        if record is None:
            # Membership may reference cards the catalog does not have
            continue

        value = value_for(record, arena_ref)
        if value <= 0:
            continue

        records.append(
            ProjectionRecord(
                name=record.name,
                group=group,
                value=value,
                arena=arena_name,
                card_type=record.card_type,
                cost=record.cost,
                rarity=record.rarity,
            )
        )

    if sort:
        records.sort(key=lambda r: r.value, reverse=True)

    return records


def group_means(
    records: Iterable[ProjectionRecord],
    groups: Sequence[GroupKey] = ASSIGNABLE_GROUPS,
) -> dict[GroupKey, float | None]:
    """
    Arithmetic mean of projected values per group.

    A group with no qualifying records maps to None (no mean line to draw).
    """
    values: dict[GroupKey, list[float]] = {g: [] for g in groups}
    for record in records:
        if record.group in values:
            values[record.group].append(record.value)
    return {g: (fmean(v) if v else None) for g, v in values.items()}


def build_arena_projection(
    catalog: Iterable[CardRecord] | dict[str, CardRecord],
    assignment: GroupAssignment,
    arena: ArenaDescriptor,
    member_order: Sequence[str] | None = None,
) -> ArenaProjection:
    """Records plus group means for one arena."""
    records = project(catalog, assignment, arena.column_key, member_order)
    return ArenaProjection(arena=arena, records=records, means=group_means(records))


def build_story_projections(catalog: Iterable[CardRecord]) -> dict[str, ArenaProjection]:
    """
    Story view data: the default groups projected into every arena.

    Returns:
        Arena display name -> ArenaProjection, in canonical arena order.
    """
    index = index_catalog(catalog)
    assignment = default_assignment()
    return {
        arena.display_name: build_arena_projection(
            index, assignment, arena, DEFAULT_MEMBER_ORDER
        )
        for arena in ARENAS
    }


ProjectionKey = tuple[str, MembershipSnapshot, tuple[str, ...] | None]

# Oldest entries are evicted first
_MAX_CACHE_ENTRIES = 256


class ProjectionEngine:
    """
    Memoizing projection builder bound to one catalog.

    Cache entries are keyed by (arena column, membership snapshot, member
    order), so any classification change produces a new key and a full
    recompute; unchanged inputs are served from the cache.
    """

    def __init__(self, catalog: Iterable[CardRecord]) -> None:
        self._index = index_catalog(catalog)
        self._cache: dict[ProjectionKey, ArenaProjection] = {}

    def arena_projection(
        self,
        assignment: GroupAssignment,
        arena_ref: str,
        member_order: Sequence[str] | None = None,
    ) -> ArenaProjection | None:
        """
        Projection for one arena, or None if `arena_ref` names no arena.
        """
        arena = resolve_arena(arena_ref)
        if arena is None:
            return None

        order = tuple(member_order) if member_order is not None else None
        # The snapshot is order-independent; the walk order decides ties
        order_key = order if order is not None else tuple(assignment.ordered_members())
        key: ProjectionKey = (arena.column_key, assignment.snapshot(), order_key)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        projection = build_arena_projection(self._index, assignment, arena, order)
        if len(self._cache) >= _MAX_CACHE_ENTRIES:
            self._cache.pop(next(iter(self._cache)))
        self._cache[key] = projection
        logger.debug(
            "Projected %d cards for %s (%d cached)",
            len(projection.records),
            arena.display_name,
            len(self._cache),
        )
        return projection

    def clear_cache(self) -> None:
        self._cache.clear()
