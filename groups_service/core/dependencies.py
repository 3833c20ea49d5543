# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories, services and the caller.
"""

from typing import Optional

from fastapi import Header

from groups_service.core.config import settings
from groups_service.models.domain import ROLE_PATTERN, Member
from groups_service.repositories.group_repository import GroupRepository
from groups_service.repositories.history_repository import HistoryRepository
from groups_service.services.group_service import GroupService

# ── Singleton repository instances (in-memory stores) ──
_group_repo = GroupRepository()
_history_repo = HistoryRepository()

# ── Service instances (with injected dependencies) ──
_group_service = GroupService(
    group_repo=_group_repo,
    history_repo=_history_repo,
)


# ── FastAPI dependency functions ──
def get_group_service() -> GroupService:
    return _group_service


def get_group_repo() -> GroupRepository:
    return _group_repo


def get_history_repo() -> HistoryRepository:
    return _history_repo


def session_user() -> Member:
    """The configured user of this session."""
    return Member(
        id=settings.SESSION_USER_ID,
        name=settings.SESSION_USER_NAME,
        email=settings.SESSION_USER_EMAIL,
        role=settings.SESSION_USER_ROLE,
    )


def get_current_user(
    x_user_id: Optional[str] = Header(default=None, min_length=1),
    x_user_name: Optional[str] = Header(default=None, min_length=1),
    x_user_email: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None, pattern=ROLE_PATTERN),
) -> Member:
    """Resolve the caller from X-User-* headers, else the session user."""
    if x_user_id is None:
        return session_user()
    return Member(
        id=x_user_id,
        name=x_user_name or x_user_id,
        email=x_user_email or "",
        role=x_user_role or "member",
    )
