"""Tests for default classification and group membership state."""

import pytest

from clashlens.models.card import CardRecord
from clashlens.models.groups import GroupAssignment, GroupKey
from clashlens.services.classifier import (
    DEFAULT_CHEAP_SPELLS,
    DEFAULT_MEMBER_ORDER,
    DEFAULT_TOXIC_TROOPS,
    classify,
    default_assignment,
    reset_to_default,
    seed_assignment,
)


class TestClassify:
    @pytest.mark.parametrize("name", DEFAULT_TOXIC_TROOPS)
    def test_toxic_troops(self, name: str) -> None:
        assert classify(name) is GroupKey.TOXIC_TROOP

    @pytest.mark.parametrize("name", DEFAULT_CHEAP_SPELLS)
    def test_cheap_spells(self, name: str) -> None:
        assert classify(name) is GroupKey.CHEAP_SPELL

    def test_case_insensitive(self) -> None:
        assert classify("skeleton army") is GroupKey.TOXIC_TROOP
        assert classify("  THE LOG ") is GroupKey.CHEAP_SPELL

    @pytest.mark.parametrize("name", ["Hog Rider", "", None])
    def test_everything_else_is_unclassified(self, name: str | None) -> None:
        assert classify(name) is GroupKey.UNCLASSIFIED

    def test_member_order_is_toxic_then_cheap(self) -> None:
        assert DEFAULT_MEMBER_ORDER == (
            "Skeleton Army",
            "Wizard",
            "Valkyrie",
            "Mega Knight",
            "The Log",
            "Zap",
        )


class TestAssign:
    def test_assign_places_name_in_exactly_one_group(self) -> None:
        assignment = GroupAssignment()

        assignment.assign("Zap", GroupKey.CHEAP_SPELL)

        assert assignment.group_of("Zap") is GroupKey.CHEAP_SPELL
        assert assignment.members(GroupKey.CHEAP_SPELL) == ["Zap"]
        assert assignment.members(GroupKey.TOXIC_TROOP) == []

    def test_reassign_moves_between_groups(self) -> None:
        """assign(A) then assign(B) leaves the name only in B."""
        assignment = GroupAssignment()

        assignment.assign("Zap", GroupKey.CHEAP_SPELL)
        assignment.assign("Zap", GroupKey.TOXIC_TROOP)

        assert assignment.group_of("Zap") is GroupKey.TOXIC_TROOP
        assert assignment.members(GroupKey.CHEAP_SPELL) == []
        assert assignment.members(GroupKey.TOXIC_TROOP) == ["Zap"]
        assert len(assignment) == 1

    def test_assign_is_idempotent(self) -> None:
        assignment = GroupAssignment()
        assignment.assign("Zap", GroupKey.CHEAP_SPELL)
        before = assignment.snapshot()

        assignment.assign("Zap", GroupKey.CHEAP_SPELL)

        assert assignment.snapshot() == before
        assert len(assignment) == 1

    def test_names_are_case_insensitive(self) -> None:
        assignment = GroupAssignment()

        assignment.assign("Zap", GroupKey.CHEAP_SPELL)
        assignment.assign("ZAP", GroupKey.TOXIC_TROOP)

        assert assignment.group_of("zap") is GroupKey.TOXIC_TROOP
        assert len(assignment) == 1

    def test_first_spelling_is_kept(self) -> None:
        assignment = GroupAssignment()

        assignment.assign("The Log", GroupKey.CHEAP_SPELL)
        assignment.assign("the log", GroupKey.CHEAP_SPELL)

        assert assignment.members(GroupKey.CHEAP_SPELL) == ["The Log"]

    def test_assign_unclassified_removes_everywhere(self) -> None:
        assignment = GroupAssignment()
        assignment.assign("Zap", GroupKey.CHEAP_SPELL)

        assignment.assign("Zap", GroupKey.UNCLASSIFIED)

        assert "Zap" not in assignment

    def test_blank_name_is_ignored(self) -> None:
        assignment = GroupAssignment()

        assignment.assign("   ", GroupKey.CHEAP_SPELL)

        assert len(assignment) == 0


class TestUnassign:
    def test_removes_member(self) -> None:
        assignment = GroupAssignment()
        assignment.assign("Wizard", GroupKey.TOXIC_TROOP)

        assignment.unassign("wizard", GroupKey.TOXIC_TROOP)

        assert assignment.group_of("Wizard") is GroupKey.UNCLASSIFIED

    def test_wrong_group_is_noop(self) -> None:
        assignment = GroupAssignment()
        assignment.assign("Wizard", GroupKey.TOXIC_TROOP)

        assignment.unassign("Wizard", GroupKey.CHEAP_SPELL)

        assert assignment.group_of("Wizard") is GroupKey.TOXIC_TROOP

    def test_absent_name_is_noop(self) -> None:
        assignment = GroupAssignment()

        assignment.unassign("Nobody", GroupKey.TOXIC_TROOP)

        assert len(assignment) == 0


class TestResetAndClear:
    def test_reset_reproduces_default_groups(self, sample_catalog: list[CardRecord]) -> None:
        assignment = GroupAssignment()
        assignment.assign("Hog Rider", GroupKey.TOXIC_TROOP)
        assignment.assign("Zap", GroupKey.TOXIC_TROOP)

        reset_to_default(assignment, sample_catalog)

        for record in sample_catalog:
            assert assignment.group_of(record.name) is classify(record.name)

    def test_reset_only_seeds_cards_in_catalog(self) -> None:
        catalog = [CardRecord(name="Zap"), CardRecord(name="Hog Rider")]

        assignment = seed_assignment(catalog)

        assert assignment.members(GroupKey.CHEAP_SPELL) == ["Zap"]
        assert assignment.members(GroupKey.TOXIC_TROOP) == []

    def test_clear_all_empties_groups(self, sample_catalog: list[CardRecord]) -> None:
        assignment = seed_assignment(sample_catalog)

        assignment.clear_all()

        assert len(assignment) == 0
        assert assignment.members(GroupKey.TOXIC_TROOP) == []
        assert assignment.members(GroupKey.CHEAP_SPELL) == []

    def test_default_assignment_holds_every_default_member(self) -> None:
        assignment = default_assignment()

        assert assignment.ordered_members() == list(DEFAULT_MEMBER_ORDER)


class TestSnapshot:
    def test_snapshot_ignores_insertion_order(self) -> None:
        a = GroupAssignment.from_members({GroupKey.TOXIC_TROOP: ["Wizard", "Valkyrie"]})
        b = GroupAssignment.from_members({GroupKey.TOXIC_TROOP: ["Valkyrie", "Wizard"]})

        assert a.snapshot() == b.snapshot()

    def test_snapshot_changes_on_mutation(self) -> None:
        assignment = GroupAssignment()
        before = assignment.snapshot()

        assignment.assign("Zap", GroupKey.CHEAP_SPELL)

        assert assignment.snapshot() != before
