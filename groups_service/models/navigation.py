# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Dashboard navigation table — static menu data, read-only at runtime.
"""

from pydantic import BaseModel, ConfigDict


class NavItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    link: str


DASHBOARD_NAVS: tuple[NavItem, ...] = (
    NavItem(name="dashboard", icon="Home", link=""),
    NavItem(name="profile", icon="UserIcon", link="profile"),
    NavItem(name="calendar", icon="Calendar", link="calendar"),
    NavItem(name="collaborators", icon="Users2", link="collaborators"),
    NavItem(name="groups", icon="GitBranch", link="groups"),
    NavItem(name="images", icon="Images", link="images"),
    NavItem(name="settings", icon="Settings2", link="settings"),
)


def find_nav(name: str) -> NavItem | None:
    """Look up a menu entry by section name."""
    return next((n for n in DASHBOARD_NAVS if n.name == name), None)
