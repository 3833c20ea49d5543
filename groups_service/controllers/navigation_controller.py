# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Dashboard navigation table (read-only).
"""

from fastapi import APIRouter, HTTPException

from groups_service.models.navigation import DASHBOARD_NAVS, NavItem, find_nav

router = APIRouter(prefix="/api/v1", tags=["Navigation"])


@router.get("/navigation", response_model=list[NavItem])
def list_navigation():
    """Menu entries in display order."""
    return list(DASHBOARD_NAVS)


@router.get("/navigation/{name}", response_model=NavItem)
def get_navigation(name: str):
    item = find_nav(name)
    if item is None:
        raise HTTPException(status_code=404, detail=f"No navigation entry named '{name}'")
    return item
