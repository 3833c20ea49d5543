# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from groups_service.models.domain import ROLE_PATTERN, STATUS_PATTERN


# ── Group Schemas ──

class GroupCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Group name")
    description: str = Field(default="", max_length=2000)
    status: str = Field(default="active", pattern=STATUS_PATTERN)
    rating: float = Field(default=0.0, ge=0, le=5, description="Score between 0 and 5")
    image: Optional[str] = None


class GroupUpdateRequest(BaseModel):
    """Partial update model for PATCH /api/v1/groups/{group_id}."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    status: Optional[str] = Field(default=None, pattern=STATUS_PATTERN)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    image: Optional[str] = None

    @field_validator("name", "description", "status", "rating", mode="before")
    @classmethod
    def reject_null(cls, v):
        # Omit a field to leave it unchanged; only image may be cleared.
        if v is None:
            raise ValueError("may not be null")
        return v


class RatingUpdateRequest(BaseModel):
    rating: float = Field(..., ge=0, le=5, description="Score between 0 and 5")


class MemberResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    avatar: Optional[str] = None


class GroupResponse(BaseModel):
    id: str
    name: str
    description: str
    status: str
    rating: float
    image: Optional[str] = None
    members: list[MemberResponse]
    created_at: datetime


class VisibleGroupsResponse(BaseModel):
    groups: list[GroupResponse]
    total: int
    version: int
    filters: dict
    empty_message: Optional[str] = None


# ── Member Schemas ──

class MemberCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    role: str = Field(default="member", pattern=ROLE_PATTERN)
    avatar: Optional[str] = None


# ── Filter Schemas ──

class SearchUpdateRequest(BaseModel):
    search: str = Field(default="", max_length=255)


class FilterStateResponse(BaseModel):
    search: str
    statuses: list[str]
