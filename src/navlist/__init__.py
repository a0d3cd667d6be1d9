"""navlist - hierarchical, role-filtered navigation menus."""

from navlist.core import (
    DEFAULT_STATE,
    Domain,
    HierarchicalMenuItem,
    MenuItemRecord,
    MenuState,
    NavigationData,
    OrganizedNavigation,
    Role,
    StructuralSubtype,
    build_hierarchy,
    can_access,
    filter_by_role,
    find_by_id,
    flatten,
    organize,
)
from navlist.store import NavigationStore

__all__ = [
    "DEFAULT_STATE",
    "Domain",
    "HierarchicalMenuItem",
    "MenuItemRecord",
    "MenuState",
    "NavigationData",
    "NavigationStore",
    "OrganizedNavigation",
    "Role",
    "StructuralSubtype",
    "build_hierarchy",
    "can_access",
    "filter_by_role",
    "find_by_id",
    "flatten",
    "organize",
]
