# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Group and member endpoints.
Thin HTTP layer — delegates ALL logic to GroupService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from groups_service.core.dependencies import get_current_user, get_group_service
from groups_service.models.domain import GROUP_STATUSES, GroupDraft, Member, MemberDraft
from groups_service.schemas.groups import (
    GroupCreateRequest,
    GroupResponse,
    GroupUpdateRequest,
    MemberCreateRequest,
    MemberResponse,
    RatingUpdateRequest,
    VisibleGroupsResponse,
)
from groups_service.services.group_service import GroupService

router = APIRouter(prefix="/api/v1", tags=["Groups"])


def _raise_for(e: Exception):
    if isinstance(e, KeyError):
        raise HTTPException(status_code=404, detail=e.args[0])
    if isinstance(e, PermissionError):
        raise HTTPException(status_code=403, detail=str(e))
    raise HTTPException(status_code=400, detail=str(e))


# ── Queries ──

@router.get("/groups", response_model=list[GroupResponse])
def list_groups(
    search: str = Query(default="", max_length=255, description="Case-insensitive name filter"),
    status: Optional[list[str]] = Query(default=None, description="Statuses to include"),
    service: GroupService = Depends(get_group_service),
):
    """List groups matching a name search and a set of statuses."""
    if status is not None:
        unknown = [s for s in status if s not in GROUP_STATUSES]
        if unknown:
            raise HTTPException(status_code=422, detail=f"Unknown status: {', '.join(unknown)}")
    return service.list_groups(search=search, statuses=status)


@router.get("/groups/visible", response_model=VisibleGroupsResponse)
def visible_groups(service: GroupService = Depends(get_group_service)):
    """Groups filtered by the session's current search and status filters."""
    return service.visible_groups()


@router.get("/groups/{group_id}", response_model=GroupResponse)
def get_group(group_id: str, service: GroupService = Depends(get_group_service)):
    try:
        return service.get_group(group_id)
    except KeyError as e:
        _raise_for(e)


# ── Group commands ──

@router.post("/groups", status_code=201, response_model=GroupResponse)
def create_group(
    payload: GroupCreateRequest,
    service: GroupService = Depends(get_group_service),
    user: Member = Depends(get_current_user),
):
    """Create a group; the caller becomes its leader."""
    try:
        return service.create_group(GroupDraft(**payload.model_dump()), user)
    except PermissionError as e:
        _raise_for(e)


@router.patch("/groups/{group_id}", response_model=GroupResponse)
def update_group(
    group_id: str,
    payload: GroupUpdateRequest,
    service: GroupService = Depends(get_group_service),
    user: Member = Depends(get_current_user),
):
    """Partially update a group's details."""
    try:
        return service.update_group(group_id, payload.model_dump(exclude_unset=True), user)
    except (KeyError, PermissionError, ValueError) as e:
        _raise_for(e)


@router.delete("/groups/{group_id}")
def delete_group(
    group_id: str,
    service: GroupService = Depends(get_group_service),
    user: Member = Depends(get_current_user),
):
    """Delete a group together with its members."""
    try:
        return service.delete_group(group_id, user)
    except (KeyError, PermissionError) as e:
        _raise_for(e)


@router.put("/groups/{group_id}/rating", response_model=GroupResponse)
def update_rating(
    group_id: str,
    payload: RatingUpdateRequest,
    service: GroupService = Depends(get_group_service),
    user: Member = Depends(get_current_user),
):
    try:
        return service.update_rating(group_id, payload.rating, user)
    except (KeyError, PermissionError) as e:
        _raise_for(e)


# ── Member commands ──

@router.post("/groups/{group_id}/members", status_code=201, response_model=MemberResponse)
def add_member(
    group_id: str,
    payload: MemberCreateRequest,
    service: GroupService = Depends(get_group_service),
    user: Member = Depends(get_current_user),
):
    """Add a member to a group."""
    try:
        return service.add_member(group_id, MemberDraft(**payload.model_dump()), user)
    except (KeyError, PermissionError) as e:
        _raise_for(e)


@router.delete("/groups/{group_id}/members/{member_id}")
def delete_member(
    group_id: str,
    member_id: str,
    service: GroupService = Depends(get_group_service),
    user: Member = Depends(get_current_user),
):
    """Remove a member from a group."""
    try:
        return service.delete_member(group_id, member_id, user)
    except (KeyError, PermissionError, ValueError) as e:
        _raise_for(e)
