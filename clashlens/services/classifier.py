"""
Default card classification.

The static membership tables seed the two comparison groups. `classify`
is only used for seeding; once a GroupAssignment exists, its state is the
source of truth.
"""

from collections.abc import Iterable

from clashlens.models.card import CardRecord
from clashlens.models.groups import GroupAssignment, GroupKey, normalize_name

DEFAULT_TOXIC_TROOPS: tuple[str, ...] = (
    "Skeleton Army",
    "Wizard",
    "Valkyrie",
    "Mega Knight",
)

DEFAULT_CHEAP_SPELLS: tuple[str, ...] = (
    "The Log",
    "Zap",
)

# Canonical member order for story charts (x-axis order before sorting)
DEFAULT_MEMBER_ORDER: tuple[str, ...] = DEFAULT_TOXIC_TROOPS + DEFAULT_CHEAP_SPELLS

_DEFAULT_TABLE: dict[str, GroupKey] = {
    **{normalize_name(n): GroupKey.TOXIC_TROOP for n in DEFAULT_TOXIC_TROOPS},
    **{normalize_name(n): GroupKey.CHEAP_SPELL for n in DEFAULT_CHEAP_SPELLS},
}


def classify(name: str | None) -> GroupKey:
    """
    Default group for a card name (case-insensitive).

    Returns:
        TOXIC_TROOP, CHEAP_SPELL, or UNCLASSIFIED for anything else.
    """
    return _DEFAULT_TABLE.get(normalize_name(name), GroupKey.UNCLASSIFIED)


def reset_to_default(assignment: GroupAssignment, catalog: Iterable[CardRecord]) -> None:
    """Clear `assignment` and reseed it by classifying every catalog card."""
    assignment.clear_all()
    for record in catalog:
        group = classify(record.name)
        if group is not GroupKey.UNCLASSIFIED:
            assignment.assign(record.name, group)


def seed_assignment(catalog: Iterable[CardRecord]) -> GroupAssignment:
    """New assignment seeded from the default tables."""
    assignment = GroupAssignment()
    reset_to_default(assignment, catalog)
    return assignment


def default_assignment() -> GroupAssignment:
    """
    Assignment holding every default member, whether or not it is in a catalog.

    Used by the story view, where members missing from the catalog are
    simply skipped at projection time.
    """
    return GroupAssignment.from_members(
        {
            GroupKey.TOXIC_TROOP: DEFAULT_TOXIC_TROOPS,
            GroupKey.CHEAP_SPELL: DEFAULT_CHEAP_SPELLS,
        }
    )
