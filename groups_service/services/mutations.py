# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Group/member state transitions — pure computation, no side effects.

Every function takes the whole collection and returns a MutationResult whose
``groups`` is the new collection. A missing target leaves the collection
untouched and reports ``applied=False``.
"""

import uuid
from datetime import datetime, timezone
from typing import Iterable, NamedTuple, Optional

from groups_service.models.domain import Group, GroupDraft, Member, MemberDraft

Groups = tuple[Group, ...]


class MutationResult(NamedTuple):
    groups: Groups
    applied: bool
    target_id: Optional[str] = None


def new_id(prefix: str, taken: Iterable[str]) -> str:
    """Draw a random id that is not in ``taken``."""
    taken_ids = set(taken)
    while True:
        candidate = f"{prefix}{uuid.uuid4().hex[:12]}"
        if candidate not in taken_ids:
            return candidate


def find_group(groups: Groups, group_id: str) -> Optional[Group]:
    return next((g for g in groups if g.id == group_id), None)


def find_member(group: Group, member_id: str) -> Optional[Member]:
    return next((m for m in group.members if m.id == member_id), None)


def _replace_group(groups: Groups, group_id: str, change) -> MutationResult:
    """Apply ``change`` to the matching group; other groups are kept as-is."""
    if find_group(groups, group_id) is None:
        return MutationResult(groups, False, group_id)
    return MutationResult(
        tuple(change(g) if g.id == group_id else g for g in groups),
        True,
        group_id,
    )


# ── Groups ──

def create_group(
    groups: Groups,
    draft: GroupDraft,
    creator: Member,
    created_at: Optional[datetime] = None,
) -> MutationResult:
    """Append a new group whose only member is the creator, as leader."""
    group = Group(
        id=new_id("g", (g.id for g in groups)),
        name=draft.name,
        description=draft.description,
        status=draft.status,
        rating=draft.rating,
        image=draft.image,
        members=(creator.model_copy(update={"role": "leader"}),),
        created_at=created_at or datetime.now(timezone.utc),
    )
    return MutationResult(groups + (group,), True, group.id)


def update_group(groups: Groups, updated: Group) -> MutationResult:
    """Replace the group with the same id, keeping its original created_at."""
    return _replace_group(
        groups,
        updated.id,
        lambda g: updated.model_copy(update={"created_at": g.created_at}),
    )


def delete_group(groups: Groups, group_id: str) -> MutationResult:
    remaining = tuple(g for g in groups if g.id != group_id)
    if len(remaining) == len(groups):
        return MutationResult(groups, False, group_id)
    return MutationResult(remaining, True, group_id)


def update_rating(groups: Groups, group_id: str, rating: float) -> MutationResult:
    """Overwrite the rating. Bounds are the caller's concern."""
    return _replace_group(
        groups, group_id, lambda g: g.model_copy(update={"rating": rating})
    )


# ── Members ──

def add_member(groups: Groups, group_id: str, draft: MemberDraft) -> MutationResult:
    """Append a member with an id that is fresh within the group."""
    group = find_group(groups, group_id)
    if group is None:
        return MutationResult(groups, False, group_id)

    member = Member(
        id=new_id("m", (m.id for m in group.members)),
        name=draft.name,
        email=draft.email,
        role=draft.role,
        avatar=draft.avatar,
    )
    result = _replace_group(
        groups,
        group_id,
        lambda g: g.model_copy(update={"members": g.members + (member,)}),
    )
    return result._replace(target_id=member.id)


def delete_member(groups: Groups, group_id: str, member_id: str) -> MutationResult:
    """Remove a member. The last member or sole leader may be removed."""
    group = find_group(groups, group_id)
    if group is None or find_member(group, member_id) is None:
        return MutationResult(groups, False, member_id)

    result = _replace_group(
        groups,
        group_id,
        lambda g: g.model_copy(
            update={"members": tuple(m for m in g.members if m.id != member_id)}
        ),
    )
    return result._replace(target_id=member_id)
