# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Role checks — pure predicates, no I/O.

Admins manage every group; leaders manage the groups they lead.
"""

from groups_service.models.domain import ROLE_RANK, Group, Member
from groups_service.services.mutations import find_member


def is_group_leader(user: Member, group: Group) -> bool:
    member = find_member(group, user.id)
    return member is not None and member.role == "leader"


def can_manage_group(user: Member, group: Group) -> bool:
    """Edit, delete, and add or remove members."""
    if ROLE_RANK.get(user.role, 0) >= ROLE_RANK["admin"]:
        return True
    return is_group_leader(user, group)


def can_create_group(user: Member) -> bool:
    return user.role in ROLE_RANK


def can_rate_group(user: Member) -> bool:
    return user.role in ROLE_RANK
