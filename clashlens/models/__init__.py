from clashlens.models.arena import ARENA_COLUMN_PREFIX, ARENA_COLUMNS, ARENAS, ArenaDescriptor
from clashlens.models.card import CardRecord
from clashlens.models.failure import (
    ApiResponse,
    ArenaNotFoundError,
    FailureDetail,
    FailureKind,
    KnownError,
    LoadError,
    OutcomeType,
    UnknownGroupError,
)
from clashlens.models.groups import (
    ASSIGNABLE_GROUPS,
    GROUP_INFO,
    GroupAssignment,
    GroupInfo,
    GroupKey,
    normalize_name,
)
from clashlens.models.projection import ArenaProjection, ProjectionRecord

__all__ = [
    "ARENAS",
    "ARENA_COLUMNS",
    "ARENA_COLUMN_PREFIX",
    "ASSIGNABLE_GROUPS",
    "ApiResponse",
    "ArenaDescriptor",
    "ArenaNotFoundError",
    "ArenaProjection",
    "CardRecord",
    "FailureDetail",
    "FailureKind",
    "GROUP_INFO",
    "GroupAssignment",
    "GroupInfo",
    "GroupKey",
    "KnownError",
    "LoadError",
    "OutcomeType",
    "ProjectionRecord",
    "UnknownGroupError",
    "normalize_name",
]
