# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.

Entities are frozen: every change produces a new value, and a collection of
groups is always a tuple that is replaced as a whole.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

GROUP_STATUSES: tuple[str, ...] = ("active", "inactive", "archived", "pending")
MEMBER_ROLES: tuple[str, ...] = ("admin", "leader", "member")
ALL_STATUSES: frozenset[str] = frozenset(GROUP_STATUSES)

# Convention for permission checks only, never for sorting.
ROLE_RANK: dict[str, int] = {"admin": 3, "leader": 2, "member": 1}

STATUS_PATTERN = "^(active|inactive|archived|pending)$"
ROLE_PATTERN = "^(admin|leader|member)$"


class Member(BaseModel):
    """A person belonging to exactly one group."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique within the owning group")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., max_length=255, description="Contact email")
    role: str = Field(..., pattern=ROLE_PATTERN, description="admin, leader or member")
    avatar: Optional[str] = Field(default=None, description="Avatar image reference")


class Group(BaseModel):
    """A named collection of members with a status and a rating."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    status: str = Field(..., pattern=STATUS_PATTERN)
    rating: float = 0.0
    image: Optional[str] = None
    members: tuple[Member, ...] = ()
    created_at: datetime


class GroupDraft(BaseModel):
    """Everything a caller supplies to create a group."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    status: str = Field(default="active", pattern=STATUS_PATTERN)
    rating: float = 0.0
    image: Optional[str] = None


class MemberDraft(BaseModel):
    """A member before an id has been assigned."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255)
    role: str = Field(default="member", pattern=ROLE_PATTERN)
    avatar: Optional[str] = None
