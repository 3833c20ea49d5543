# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Visible-list derivation — pure functions of (groups, search, statuses).
"""

from typing import Iterable

from groups_service.models.domain import ALL_STATUSES, GROUP_STATUSES, Group

NO_MATCHES_MESSAGE = "No groups found matching your filters."
NO_GROUPS_MESSAGE = "No groups available. Create your first group!"


def filter_groups(
    groups: Iterable[Group],
    search: str = "",
    statuses: Iterable[str] = ALL_STATUSES,
) -> list[Group]:
    """
    Keep groups whose name contains ``search`` (case-insensitive) and whose
    status is selected. Input order is preserved.
    """
    needle = search.lower()
    selected = frozenset(statuses)
    return [g for g in groups if needle in g.name.lower() and g.status in selected]


def toggle_status_filter(statuses: Iterable[str], status: str) -> frozenset[str]:
    """Remove ``status`` if selected, add it otherwise."""
    return frozenset(statuses) ^ {status}


def is_filtering(search: str, statuses: Iterable[str]) -> bool:
    return bool(search) or len(frozenset(statuses)) < len(GROUP_STATUSES)


def empty_state_message(search: str, statuses: Iterable[str]) -> str:
    """Text shown when the visible list is empty."""
    return NO_MATCHES_MESSAGE if is_filtering(search, statuses) else NO_GROUPS_MESSAGE
