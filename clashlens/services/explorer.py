"""
Explorer session controller.

Owns the mutable explorer state (group membership, selected arena, current
search query) for one loaded catalog. Every state-changing action is
followed by an explicit `recompute()`; the projection and search engines
stay pure functions of their inputs.

INVARIANTS:
- All mutations go through this object and are serialized by its lock
- `chart` and `results` always reflect the state after the last mutation
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from threading import Lock

from clashlens.models.arena import ARENAS, ArenaDescriptor
from clashlens.models.card import CardRecord
from clashlens.models.failure import ArenaNotFoundError
from clashlens.models.groups import GroupAssignment, GroupKey
from clashlens.models.projection import ArenaProjection
from clashlens.services.arena_resolver import resolve_arena, value_for
from clashlens.services.catalog_search import SearchQuery, describe_card, search_catalog
from clashlens.services.classifier import reset_to_default, seed_assignment
from clashlens.services.projection import ProjectionEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchHit:
    """A search result annotated with its value and current group."""

    record: CardRecord
    value: int | float
    group: GroupKey
    description: str


class ExplorerSession:
    """
    Interactive explorer state for one catalog.

    Seeded from the default classification; the selected arena defaults to
    `default_arena`, or the last arena when that is not a known arena.
    """

    def __init__(
        self,
        catalog: Sequence[CardRecord],
        default_arena: str | None = None,
    ) -> None:
        self.catalog = tuple(catalog)
        self.assignment: GroupAssignment = seed_assignment(self.catalog)
        self.arena: ArenaDescriptor = resolve_arena(default_arena) or ARENAS[-1]
        self.query = SearchQuery()
        self.chart: ArenaProjection = ArenaProjection(arena=self.arena)
        self.results: list[SearchHit] = []

        self._engine = ProjectionEngine(self.catalog)
        self._lock = Lock()
        self.recompute()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def select_arena(self, arena_ref: str) -> None:
        """
        Switch the charted arena.

        Raises:
            ArenaNotFoundError: If `arena_ref` names no arena
        """
        arena = resolve_arena(arena_ref)
        if arena is None:
            raise ArenaNotFoundError(arena_ref)
        with self._lock:
            self.arena = arena
            logger.debug("Explorer arena -> %s", arena.display_name)
            self._recompute()

    def set_query(self, query: SearchQuery) -> None:
        with self._lock:
            self.query = query
            self._recompute()

    def assign(self, name: str, group: GroupKey) -> None:
        with self._lock:
            self.assignment.assign(name, group)
            logger.debug("Assigned %s -> %s", name, group.value)
            self._recompute()

    def unassign(self, name: str, group: GroupKey) -> None:
        with self._lock:
            self.assignment.unassign(name, group)
            logger.debug("Removed %s from %s", name, group.value)
            self._recompute()

    def reset_to_default(self) -> None:
        with self._lock:
            reset_to_default(self.assignment, self.catalog)
            self._recompute()

    def clear_all(self) -> None:
        with self._lock:
            self.assignment.clear_all()
            self._recompute()

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    def recompute(self) -> None:
        """Rebuild chart data and search results from the current state."""
        with self._lock:
            self._recompute()

    def _recompute(self) -> None:
        projection = self._engine.arena_projection(self.assignment, self.arena.column_key)
        self.chart = projection or ArenaProjection(arena=self.arena)

        # The selected arena always applies to explorer search results
        query = replace(self.query, arena=self.arena.column_key)
        self.results = [
            SearchHit(
                record=record,
                value=value_for(record, self.arena.column_key),
                group=self.assignment.group_of(record.name),
                description=describe_card(record),
            )
            for record in search_catalog(self.catalog, query)
        ]
