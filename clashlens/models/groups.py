"""
Group membership state.

GroupAssignment is the only mutable state in the core. It partitions a
subset of card names into the assignable groups; a name is in at most one
group at any time. It is an owned object passed to whoever needs it, never
a module-level singleton.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class GroupKey(str, Enum):
    """Classification buckets for comparing subsets of cards."""

    TOXIC_TROOP = "toxic_troop"
    CHEAP_SPELL = "cheap_spell"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True, slots=True)
class GroupInfo:
    """Presentation metadata for an assignable group."""

    key: GroupKey
    label: str
    mean_label: str
    color: str


# Canonical group order. Also the legend order.
ASSIGNABLE_GROUPS: tuple[GroupKey, ...] = (GroupKey.TOXIC_TROOP, GroupKey.CHEAP_SPELL)

GROUP_INFO: dict[GroupKey, GroupInfo] = {
    GroupKey.TOXIC_TROOP: GroupInfo(
        key=GroupKey.TOXIC_TROOP,
        label="Toxic troop",
        mean_label="Toxic troop mean",
        color="#d62728",
    ),
    GroupKey.CHEAP_SPELL: GroupInfo(
        key=GroupKey.CHEAP_SPELL,
        label="Cheap spell",
        mean_label="Cheap spell mean",
        color="#1f77b4",
    ),
}


def normalize_name(name: str | None) -> str:
    """Canonical lookup key for a card name."""
    return (name or "").strip().casefold()


MembershipSnapshot = tuple[tuple[str, tuple[str, ...]], ...]


class GroupAssignment:
    """
    Mutable card -> group membership.

    Keys are normalized on insert and on lookup, so "zap", "Zap" and " ZAP "
    all refer to the same member. The first spelling seen is kept for display.
    """

    def __init__(self) -> None:
        # group -> {normalized name: display name}, insertion ordered
        self._members: dict[GroupKey, dict[str, str]] = {g: {} for g in ASSIGNABLE_GROUPS}

    def assign(self, name: str, group: GroupKey) -> None:
        """
        Move `name` into `group`, removing it from every other group first.

        Assigning a name to the group it is already in leaves state unchanged.
        Assigning to UNCLASSIFIED removes the name from every group.
        """
        key = normalize_name(name)
        if not key:
            return

        if group is GroupKey.UNCLASSIFIED:
            for members in self._members.values():
                members.pop(key, None)
            return

        target = self._members[group]
        if key in target:
            return

        for other, members in self._members.items():
            if other is not group:
                members.pop(key, None)
        target[key] = name.strip()

    def unassign(self, name: str, group: GroupKey) -> None:
        """Remove `name` from `group` if present."""
        members = self._members.get(group)
        if members is not None:
            members.pop(normalize_name(name), None)

    def clear_all(self) -> None:
        """Empty every group."""
        for members in self._members.values():
            members.clear()

    def group_of(self, name: str | None) -> GroupKey:
        """Current group for `name`, or UNCLASSIFIED."""
        key = normalize_name(name)
        for group, members in self._members.items():
            if key in members:
                return group
        return GroupKey.UNCLASSIFIED

    def members(self, group: GroupKey) -> list[str]:
        """Display names in `group`, sorted alphabetically."""
        return sorted(self._members.get(group, {}).values())

    def ordered_members(self) -> list[str]:
        """All assigned display names: group order first, then insertion order."""
        return [name for members in self._members.values() for name in members.values()]

    def snapshot(self) -> MembershipSnapshot:
        """Hashable, order-independent view of membership (for memoization)."""
        return tuple(
            (group.value, tuple(sorted(members))) for group, members in self._members.items()
        )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.group_of(name) is not GroupKey.UNCLASSIFIED

    def __len__(self) -> int:
        return sum(len(m) for m in self._members.values())

    @classmethod
    def from_members(cls, members: dict[GroupKey, Iterable[str]]) -> "GroupAssignment":
        """Build an assignment from explicit member lists, applied in group order."""
        assignment = cls()
        for group in ASSIGNABLE_GROUPS:
            for name in members.get(group, ()):
                assignment.assign(name, group)
        return assignment
