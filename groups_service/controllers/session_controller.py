# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Session view filters, current user, history and stats endpoints.
Thin HTTP layer — delegates ALL logic to GroupService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from groups_service.core.dependencies import get_current_user, get_group_service
from groups_service.models.domain import STATUS_PATTERN, Member
from groups_service.schemas.groups import FilterStateResponse, MemberResponse, SearchUpdateRequest
from groups_service.services.group_service import GroupService

router = APIRouter(prefix="/api/v1", tags=["Session"])


# ── Filters ──

@router.get("/filters", response_model=FilterStateResponse)
def get_filters(service: GroupService = Depends(get_group_service)):
    return service.get_filters()


@router.put("/filters/search", response_model=FilterStateResponse)
def set_search(
    payload: SearchUpdateRequest,
    service: GroupService = Depends(get_group_service),
):
    """Set the session's search text."""
    return service.set_search(payload.search)


@router.post("/filters/status/{status}/toggle", response_model=FilterStateResponse)
def toggle_status(
    status: str = Path(..., pattern=STATUS_PATTERN),
    service: GroupService = Depends(get_group_service),
):
    """Show or hide groups with the given status."""
    return service.toggle_status(status)


# ── Current user ──

@router.get("/session/user", response_model=MemberResponse)
def current_user(user: Member = Depends(get_current_user)):
    return user


# ── History & Stats ──

@router.get("/history")
def get_history(
    group_id: Optional[str] = None,
    event_type: Optional[str] = None,
    limit: int = Query(default=None, ge=1, description="Max results"),
    service: GroupService = Depends(get_group_service),
):
    """Audit log of group and member changes."""
    return service.list_history(group_id=group_id, event_type=event_type, limit=limit)


@router.get("/stats")
def get_stats(service: GroupService = Depends(get_group_service)):
    """Aggregated statistics over the current collection."""
    return service.get_stats()
