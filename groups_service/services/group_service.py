# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Group management — owns the session collection.
Runs each pure state transition under one lock, swaps the result into the
repository, and coordinates permissions, history, metrics and logging.
"""

import threading
from typing import Any, Iterable, Optional

from groups_service.core.config import settings
from groups_service.core.logging import get_logger
from groups_service.metrics.prometheus import (
    ACTIVE_GROUPS,
    GROUP_MUTATIONS,
    GROUPS_CREATED,
    TOTAL_MEMBERS,
)
from groups_service.models.domain import (
    ALL_STATUSES,
    GROUP_STATUSES,
    Group,
    GroupDraft,
    Member,
    MemberDraft,
)
from groups_service.repositories.group_repository import GroupRepository
from groups_service.repositories.history_repository import HistoryRepository
from groups_service.services import mutations, permissions
from groups_service.services.seed import seed_groups
from groups_service.services.view_filter import (
    empty_state_message,
    filter_groups,
    toggle_status_filter,
)

logger = get_logger(__name__)


class GroupService:
    """Business logic for the groups screen."""

    def __init__(
        self,
        group_repo: GroupRepository,
        history_repo: HistoryRepository,
    ) -> None:
        self._groups = group_repo
        self._history = history_repo
        self._lock = threading.RLock()

    # ── Internal ──

    def _require_group(self, group_id: str) -> Group:
        group = self._groups.get_by_id(group_id)
        if group is None:
            raise KeyError(f"No group found with id '{group_id}'")
        return group

    def _authorize(self, allowed: bool, user: Member, action: str) -> None:
        if settings.ENFORCE_PERMISSIONS and not allowed:
            logger.warning("Permission denied: user=%s, role=%s, action=%s", user.id, user.role, action)
            raise PermissionError(f"User '{user.id}' ({user.role}) may not {action}")

    def _commit(
        self,
        operation: str,
        result: mutations.MutationResult,
        group_id: str,
        user: Member,
        details: dict[str, Any],
    ) -> int:
        """Store an applied result, or raise KeyError for a no-op."""
        if not result.applied:
            GROUP_MUTATIONS.labels(operation=operation, outcome="not_found").inc()
            logger.warning(
                "Mutation skipped: op=%s, target=%s", operation, result.target_id,
                extra={"group_id": group_id},
            )
            raise KeyError(f"'{result.target_id}' not found for {operation}")

        version = self._groups.replace(result.groups)
        GROUP_MUTATIONS.labels(operation=operation, outcome="applied").inc()
        ACTIVE_GROUPS.set(self._groups.count())
        TOTAL_MEMBERS.set(self._groups.count_members())
        self._history.record_event(operation, group_id, user.id, details)
        logger.info(
            "Mutation applied: op=%s, version=%d", operation, version,
            extra={"group_id": group_id},
        )
        return version

    # ── Group commands ──

    def create_group(self, draft: GroupDraft, user: Member) -> Group:
        """Create a group led by ``user``."""
        with self._lock:
            self._authorize(permissions.can_create_group(user), user, "create groups")
            result = mutations.create_group(self._groups.get_all(), draft, user)
            group_id = result.target_id
            self._commit("group_created", result, group_id, user, {"name": draft.name, "status": draft.status})
            GROUPS_CREATED.inc()
            return self._groups.get_by_id(group_id)

    def update_group(self, group_id: str, changes: dict[str, Any], user: Member) -> Group:
        """Apply a partial update. id, members and created_at cannot change."""
        with self._lock:
            group = self._require_group(group_id)
            self._authorize(permissions.can_manage_group(user, group), user, "edit this group")
            allowed = {k: v for k, v in changes.items() if k in ("name", "description", "status", "rating", "image")}
            updated = Group.model_validate({**group.model_dump(), **allowed})
            result = mutations.update_group(self._groups.get_all(), updated)
            self._commit("group_updated", result, group_id, user, {"fields": sorted(allowed)})
            return self._groups.get_by_id(group_id)

    def delete_group(self, group_id: str, user: Member) -> dict[str, str]:
        with self._lock:
            group = self._require_group(group_id)
            self._authorize(permissions.can_manage_group(user, group), user, "delete this group")
            result = mutations.delete_group(self._groups.get_all(), group_id)
            self._commit(
                "group_deleted", result, group_id, user,
                {"name": group.name, "members_removed": len(group.members)},
            )
            return {"status": "deleted", "group_id": group_id}

    def update_rating(self, group_id: str, rating: float, user: Member) -> Group:
        with self._lock:
            group = self._require_group(group_id)
            self._authorize(permissions.can_rate_group(user), user, "rate groups")
            result = mutations.update_rating(self._groups.get_all(), group_id, rating)
            self._commit("rating_updated", result, group_id, user, {"old": group.rating, "new": rating})
            return self._groups.get_by_id(group_id)

    # ── Member commands ──

    def add_member(self, group_id: str, draft: MemberDraft, user: Member) -> Member:
        with self._lock:
            group = self._require_group(group_id)
            self._authorize(permissions.can_manage_group(user, group), user, "add members to this group")
            result = mutations.add_member(self._groups.get_all(), group_id, draft)
            self._commit("member_added", result, group_id, user, {"member_id": result.target_id, "role": draft.role})
            return mutations.find_member(self._groups.get_by_id(group_id), result.target_id)

    def delete_member(self, group_id: str, member_id: str, user: Member) -> dict[str, str]:
        with self._lock:
            group = self._require_group(group_id)
            self._authorize(permissions.can_manage_group(user, group), user, "remove members from this group")
            member = mutations.find_member(group, member_id)
            if settings.REQUIRE_GROUP_LEADER and member is not None and member.role == "leader":
                leaders = [m for m in group.members if m.role == "leader"]
                if len(leaders) == 1:
                    raise ValueError("Cannot remove the only leader of a group")
            result = mutations.delete_member(self._groups.get_all(), group_id, member_id)
            self._commit("member_removed", result, group_id, user, {"member_id": member_id})
            return {"status": "removed", "group_id": group_id, "member_id": member_id}

    # ── Queries ──

    def get_group(self, group_id: str) -> Group:
        return self._require_group(group_id)

    def list_groups(
        self,
        search: str = "",
        statuses: Optional[Iterable[str]] = None,
    ) -> list[Group]:
        selected = ALL_STATUSES if statuses is None else statuses
        return filter_groups(self._groups.get_all(), search, selected)

    def visible_groups(self) -> dict[str, Any]:
        """The list as the session currently sees it."""
        with self._lock:
            search, statuses = self._groups.search, self._groups.statuses
            groups = filter_groups(self._groups.get_all(), search, statuses)
            return {
                "groups": groups,
                "total": len(groups),
                "version": self._groups.version,
                "filters": self.get_filters(),
                "empty_message": None if groups else empty_state_message(search, statuses),
            }

    # ── View filters ──

    def get_filters(self) -> dict[str, Any]:
        statuses = self._groups.statuses
        return {
            "search": self._groups.search,
            "statuses": [s for s in GROUP_STATUSES if s in statuses],
        }

    def set_search(self, search: str) -> dict[str, Any]:
        with self._lock:
            self._groups.search = search
            return self.get_filters()

    def toggle_status(self, status: str) -> dict[str, Any]:
        with self._lock:
            self._groups.statuses = toggle_status_filter(self._groups.statuses, status)
            logger.info("Status filter toggled: status=%s", status)
            return self.get_filters()

    # ── Seed ──

    def seed_defaults(self) -> None:
        """Load the seed collection so the screen is usable immediately."""
        with self._lock:
            self._groups.replace(seed_groups())
            ACTIVE_GROUPS.set(self._groups.count())
            TOTAL_MEMBERS.set(self._groups.count_members())
        logger.info("Seeded %d default groups", self._groups.count())

    # ── Stats helpers ──

    def list_history(
        self,
        group_id: Optional[str] = None,
        event_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        return self._history.get_all(group_id=group_id, event_type=event_type, limit=limit)

    def get_stats(self) -> dict[str, Any]:
        """Aggregated statistics over the session collection."""
        groups = self._groups.get_all()
        by_status: dict[str, int] = {s: 0 for s in GROUP_STATUSES}
        for g in groups:
            by_status[g.status] += 1
        average_rating = round(sum(g.rating for g in groups) / len(groups), 2) if groups else 0.0
        return {
            "total_groups": len(groups),
            "total_members": self._groups.count_members(),
            "groups_by_status": by_status,
            "average_rating": average_rating,
            "total_history_events": self._history.count(),
            "event_types": self._history.count_by_type(),
            "version": self._groups.version,
        }
