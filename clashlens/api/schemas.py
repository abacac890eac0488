"""
Response models shared by the story, catalog and explorer endpoints.
"""

from pydantic import BaseModel, Field

from clashlens.models.arena import ArenaDescriptor
from clashlens.models.card import CardRecord
from clashlens.models.groups import GroupInfo
from clashlens.models.projection import ArenaProjection, ProjectionRecord
from clashlens.services.arena_resolver import coerce_count
from clashlens.services.catalog_search import describe_card


class ArenaResponse(BaseModel):
    """Static arena metadata."""

    index: int
    column_key: str
    display_name: str


class GroupResponse(BaseModel):
    """Presentation metadata for an assignable group."""

    key: str
    label: str
    mean_label: str
    color: str


class ProjectionRecordResponse(BaseModel):
    """One chart bar."""

    name: str
    group: str
    value: int | float
    arena: str = ""
    card_type: str = ""
    cost: int = 0
    rarity: str = ""


class ArenaProjectionResponse(BaseModel):
    """Chart data for one arena: bars (tallest first) and group means."""

    arena: ArenaResponse
    records: list[ProjectionRecordResponse] = Field(default_factory=list)
    means: dict[str, float | None] = Field(
        default_factory=dict,
        description="Mean per group; null when the group has no bars in this arena",
    )
    empty: bool = True


class CardResponse(BaseModel):
    """A catalog card."""

    name: str
    card_type: str
    cost: int
    rarity: str
    arena_values: dict[str, int | float] = Field(default_factory=dict)
    overall_count: int = 0
    description: str = ""


def arena_response(arena: ArenaDescriptor) -> ArenaResponse:
    return ArenaResponse(
        index=arena.index,
        column_key=arena.column_key,
        display_name=arena.display_name,
    )


def group_response(info: GroupInfo) -> GroupResponse:
    return GroupResponse(
        key=info.key.value,
        label=info.label,
        mean_label=info.mean_label,
        color=info.color,
    )


def _record_response(record: ProjectionRecord) -> ProjectionRecordResponse:
    return ProjectionRecordResponse(
        name=record.name,
        group=record.group.value,
        value=record.value,
        arena=record.arena,
        card_type=record.card_type,
        cost=record.cost,
        rarity=record.rarity,
    )


def projection_response(projection: ArenaProjection) -> ArenaProjectionResponse:
    return ArenaProjectionResponse(
        arena=arena_response(projection.arena),
        records=[_record_response(r) for r in projection.records],
        means={group.value: mean for group, mean in projection.means.items()},
        empty=projection.is_empty,
    )


def card_response(record: CardRecord) -> CardResponse:
    return CardResponse(
        name=record.name,
        card_type=record.card_type,
        cost=record.cost,
        rarity=record.rarity,
        arena_values={k: coerce_count(v) for k, v in record.arena_values.items()},
        overall_count=record.overall_count,
        description=describe_card(record),
    )
