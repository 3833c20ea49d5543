# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Session state for the groups screen.
Holds the current group collection and the active view filters.
NO business rules here — the collection is only ever swapped as a whole.
"""

from typing import Optional

from groups_service.models.domain import ALL_STATUSES, Group


class GroupRepository:
    """In-memory session store (single owner)."""

    def __init__(self) -> None:
        self._groups: tuple[Group, ...] = ()
        self._version: int = 0
        self._search: str = ""
        self._statuses: frozenset[str] = ALL_STATUSES

    # ── Read ──

    def get_all(self) -> tuple[Group, ...]:
        return self._groups

    def get_by_id(self, group_id: str) -> Optional[Group]:
        return next((g for g in self._groups if g.id == group_id), None)

    def count(self) -> int:
        return len(self._groups)

    def count_members(self) -> int:
        return sum(len(g.members) for g in self._groups)

    @property
    def version(self) -> int:
        return self._version

    # ── Write ──

    def replace(self, groups: tuple[Group, ...]) -> int:
        """Swap in a new collection value and return the new version."""
        self._groups = tuple(groups)
        self._version += 1
        return self._version

    # ── View filters ──

    @property
    def search(self) -> str:
        return self._search

    @search.setter
    def search(self, value: str) -> None:
        self._search = value

    @property
    def statuses(self) -> frozenset[str]:
        return self._statuses

    @statuses.setter
    def statuses(self, value: frozenset[str]) -> None:
        self._statuses = frozenset(value)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._groups = ()
        self._version = 0
        self._search = ""
        self._statuses = ALL_STATUSES
