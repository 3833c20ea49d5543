# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the pure layer: mutations, view filter, permissions, seed data and
the navigation table. No HTTP, no shared state.
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from groups_service.models.domain import (
    ALL_STATUSES,
    GROUP_STATUSES,
    Group,
    GroupDraft,
    Member,
    MemberDraft,
)
from groups_service.models.navigation import DASHBOARD_NAVS, find_nav
from groups_service.services import permissions
from groups_service.services.mutations import (
    add_member,
    create_group,
    delete_group,
    delete_member,
    find_group,
    find_member,
    new_id,
    update_group,
    update_rating,
)
from groups_service.services.seed import seed_groups
from groups_service.services.view_filter import (
    NO_GROUPS_MESSAGE,
    NO_MATCHES_MESSAGE,
    empty_state_message,
    filter_groups,
    toggle_status_filter,
)

CREATOR = Member(id="u1", name="Casey Creator", email="casey@example.com", role="admin")
DRAFT = GroupDraft(name="QA Team", description="Testers", status="pending", rating=2.5)


@pytest.fixture
def seed():
    return seed_groups()


def _group(group_id, name, status, members=()):
    return Group(
        id=group_id,
        name=name,
        status=status,
        members=members,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


# ============================================
# Entity Model
# ============================================
class TestEntityModel:
    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError):
            _group("x", "Bad", "deleted")

    def test_invalid_role_rejected(self):
        with pytest.raises(ValidationError):
            Member(id="x", name="Bad", email="bad@example.com", role="owner")

    def test_groups_are_frozen(self, seed):
        with pytest.raises(ValidationError):
            seed[0].rating = 1.0

    def test_draft_defaults(self):
        draft = GroupDraft(name="Solo")
        assert draft.status == "active"
        assert draft.rating == 0.0
        assert MemberDraft(name="N", email="n@x.com").role == "member"


# ============================================
# Create
# ============================================
class TestCreateGroup:
    def test_create_on_empty_collection(self):
        result = create_group((), DRAFT, CREATOR)
        assert result.applied is True
        assert len(result.groups) == 1
        group = result.groups[0]
        assert group.members == (CREATOR.model_copy(update={"role": "leader"}),)

    def test_creator_role_forced_to_leader(self):
        plain = Member(id="u2", name="Pat", email="pat@example.com", role="member")
        group = create_group((), DRAFT, plain).groups[0]
        assert group.members[0].role == "leader"
        assert group.members[0].id == "u2"

    def test_copies_draft_fields(self):
        group = create_group((), DRAFT, CREATOR).groups[0]
        assert group.name == "QA Team"
        assert group.description == "Testers"
        assert group.status == "pending"
        assert group.rating == 2.5

    def test_sets_created_at(self):
        before = datetime.now(timezone.utc)
        group = create_group((), DRAFT, CREATOR).groups[0]
        assert group.created_at >= before

    def test_explicit_created_at(self):
        stamp = datetime(2025, 3, 1, tzinfo=timezone.utc)
        assert create_group((), DRAFT, CREATOR, created_at=stamp).groups[0].created_at == stamp

    def test_appends_and_keeps_input(self, seed):
        result = create_group(seed, DRAFT, CREATOR)
        assert len(seed) == 5
        assert len(result.groups) == 6
        assert result.groups[:5] == seed
        assert result.groups[-1].id == result.target_id

    def test_rapid_creations_get_distinct_ids(self):
        groups = ()
        for _ in range(50):
            groups = create_group(groups, DRAFT, CREATOR).groups
        assert len({g.id for g in groups}) == 50

    def test_id_redrawn_on_collision(self):
        first = uuid.UUID("11111111-1111-1111-1111-111111111111")
        second = uuid.UUID("22222222-2222-2222-2222-222222222222")
        taken = (_group("g111111111111", "Existing", "active"),)
        with patch("groups_service.services.mutations.uuid.uuid4", side_effect=[first, second]):
            result = create_group(taken, DRAFT, CREATOR)
        assert result.target_id == "g222222222222"

    def test_new_id_avoids_taken(self):
        assert new_id("m", ["m1", "m2"]) not in {"m1", "m2"}


# ============================================
# Update / Delete group
# ============================================
class TestUpdateGroup:
    def test_replaces_matching_group(self, seed):
        updated = seed[0].model_copy(update={"name": "Growth Team", "status": "archived"})
        result = update_group(seed, updated)
        assert result.applied is True
        assert find_group(result.groups, "1").name == "Growth Team"
        assert find_group(result.groups, "1").status == "archived"

    def test_keeps_created_at(self, seed):
        updated = seed[0].model_copy(update={"created_at": datetime(2030, 1, 1, tzinfo=timezone.utc)})
        result = update_group(seed, updated)
        assert find_group(result.groups, "1").created_at == seed[0].created_at

    def test_missing_id_is_noop(self, seed):
        stranger = _group("nope", "Stranger", "active")
        result = update_group(seed, stranger)
        assert result.applied is False
        assert result.groups is seed

    def test_preserves_order(self, seed):
        updated = seed[2].model_copy(update={"name": "Renamed"})
        result = update_group(seed, updated)
        assert [g.id for g in result.groups] == ["1", "2", "3", "4", "5"]


class TestDeleteGroup:
    def test_removes_group_and_members(self, seed):
        result = delete_group(seed, "3")
        assert result.applied is True
        assert [g.id for g in result.groups] == ["1", "2", "4", "5"]
        member_ids = {m.id for g in result.groups for m in g.members}
        assert not {"m6", "m7", "m8"} & member_ids

    def test_missing_id_is_noop(self, seed):
        result = delete_group(seed, "99")
        assert result.applied is False
        assert result.groups == seed


# ============================================
# Rating
# ============================================
class TestUpdateRating:
    def test_only_rating_changes(self, seed):
        result = update_rating(seed, "3", 1.5)
        before, after = seed[2], find_group(result.groups, "3")
        assert after.rating == 1.5
        assert after.model_dump(exclude={"rating"}) == before.model_dump(exclude={"rating"})

    def test_other_groups_untouched(self, seed):
        result = update_rating(seed, "3", 1.5)
        for old, new in zip(seed, result.groups):
            if old.id != "3":
                assert new is old

    def test_no_bounds_check(self, seed):
        result = update_rating(seed, "1", 42.0)
        assert find_group(result.groups, "1").rating == 42.0

    def test_missing_group_is_noop(self, seed):
        result = update_rating(seed, "99", 1.0)
        assert result.applied is False
        assert result.groups is seed


# ============================================
# Members
# ============================================
class TestAddMember:
    def test_new_hire_appended_to_group_two(self, seed):
        draft = MemberDraft(name="New Hire", email="nh@x.com", role="member")
        result = add_member(seed, "2", draft)
        members = find_group(result.groups, "2").members
        assert len(members) == 3
        new_hire = members[2]
        assert new_hire.name == "New Hire"
        assert new_hire.email == "nh@x.com"
        assert new_hire.role == "member"
        assert new_hire.id not in {"m4", "m5"}
        assert result.target_id == new_hire.id

    def test_no_duplicate_email_check(self, seed):
        draft = MemberDraft(name="Mike Again", email="mike@example.com")
        result = add_member(seed, "2", draft)
        emails = [m.email for m in find_group(result.groups, "2").members]
        assert emails.count("mike@example.com") == 2

    def test_member_ids_unique_within_group(self, seed):
        groups = seed
        for i in range(20):
            groups = add_member(groups, "1", MemberDraft(name=f"P{i}", email=f"p{i}@x.com")).groups
        ids = [m.id for m in find_group(groups, "1").members]
        assert len(ids) == len(set(ids))

    def test_missing_group_is_noop(self, seed):
        result = add_member(seed, "99", MemberDraft(name="X", email="x@x.com"))
        assert result.applied is False
        assert result.groups is seed


class TestDeleteMember:
    def test_delete_twice_second_is_noop(self, seed):
        first = delete_member(seed, "1", "m1")
        second = delete_member(first.groups, "1", "m1")
        assert first.applied is True
        assert second.applied is False
        assert second.groups is first.groups
        assert [m.id for m in find_group(second.groups, "1").members] == ["m2", "m3"]

    def test_sole_leader_can_be_removed(self, seed):
        result = delete_member(seed, "2", "m4")
        roles = [m.role for m in find_group(result.groups, "2").members]
        assert "leader" not in roles

    def test_last_member_can_be_removed(self, seed):
        groups = delete_member(seed, "2", "m4").groups
        groups = delete_member(groups, "2", "m5").groups
        assert find_group(groups, "2").members == ()

    def test_missing_group_is_noop(self, seed):
        assert delete_member(seed, "99", "m1").groups is seed

    def test_member_of_other_group_is_noop(self, seed):
        result = delete_member(seed, "1", "m4")
        assert result.applied is False
        assert result.groups is seed


class TestFindMember:
    def test_found(self, seed):
        assert find_member(seed[1], "m5").name == "Mike Brown"

    def test_member_of_other_group(self, seed):
        assert find_member(seed[1], "m1") is None


# ============================================
# View Filter
# ============================================
class TestFilterGroups:
    def test_identity_with_defaults(self, seed):
        assert filter_groups(seed, "", ALL_STATUSES) == list(seed)
        assert filter_groups(seed) == list(seed)

    def test_team_and_active(self):
        groups = (
            _group("a", "Marketing Team", "active"),
            _group("b", "Design Team", "inactive"),
        )
        assert [g.name for g in filter_groups(groups, "team", {"active"})] == ["Marketing Team"]

    def test_case_insensitive(self, seed):
        assert [g.id for g in filter_groups(seed, "DEVELOPMENT")] == ["2"]

    def test_status_only(self, seed):
        assert [g.id for g in filter_groups(seed, "", {"archived", "pending"})] == ["4", "5"]

    def test_empty_status_set_hides_all(self, seed):
        assert filter_groups(seed, "", set()) == []

    def test_restartable(self, seed):
        assert filter_groups(seed, "team") == filter_groups(seed, "team")


class TestToggleStatusFilter:
    @pytest.mark.parametrize("status", GROUP_STATUSES)
    def test_toggle_twice_is_identity(self, status):
        assert toggle_status_filter(toggle_status_filter(ALL_STATUSES, status), status) == ALL_STATUSES

    def test_removes_present(self):
        assert toggle_status_filter(ALL_STATUSES, "active") == {"inactive", "archived", "pending"}

    def test_adds_absent(self):
        assert toggle_status_filter({"active"}, "pending") == {"active", "pending"}


class TestEmptyStateMessage:
    def test_no_filters(self):
        assert empty_state_message("", ALL_STATUSES) == NO_GROUPS_MESSAGE

    def test_search_active(self):
        assert empty_state_message("zzz", ALL_STATUSES) == NO_MATCHES_MESSAGE

    def test_status_hidden(self):
        assert empty_state_message("", {"active"}) == NO_MATCHES_MESSAGE


# ============================================
# Permissions
# ============================================
class TestPermissions:
    def test_admin_manages_any_group(self, seed):
        assert permissions.can_manage_group(CREATOR, seed[3])

    def test_leader_manages_own_group(self, seed):
        john = seed[0].members[0]
        assert permissions.can_manage_group(john, seed[0])

    def test_leader_of_other_group_denied(self, seed):
        john = seed[0].members[0]
        assert not permissions.can_manage_group(john, seed[1])

    def test_plain_member_denied(self, seed):
        jane = seed[0].members[1]
        assert not permissions.can_manage_group(jane, seed[0])

    def test_anyone_can_create_and_rate(self, seed):
        jane = seed[0].members[1]
        assert permissions.can_create_group(jane)
        assert permissions.can_rate_group(jane)


# ============================================
# Seed & Navigation
# ============================================
class TestSeed:
    def test_five_groups_thirteen_members(self, seed):
        assert [g.id for g in seed] == ["1", "2", "3", "4", "5"]
        assert sum(len(g.members) for g in seed) == 13

    def test_each_group_led_by_first_member(self, seed):
        for group in seed:
            assert group.members[0].role == "leader"

    def test_fresh_copy_each_call(self):
        assert seed_groups() == seed_groups()
        assert seed_groups() is not seed_groups()


class TestNavigation:
    def test_order(self):
        assert [n.name for n in DASHBOARD_NAVS] == [
            "dashboard", "profile", "calendar", "collaborators", "groups", "images", "settings",
        ]

    def test_dashboard_is_root(self):
        assert DASHBOARD_NAVS[0].link == ""
        assert DASHBOARD_NAVS[0].icon == "Home"

    def test_find(self):
        assert find_nav("groups").icon == "GitBranch"
        assert find_nav("missing") is None
