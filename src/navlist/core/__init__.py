"""Pure navigation transforms: hierarchy, organization, access, traversal."""

from navlist.core.access import can_access, filter_by_role
from navlist.core.hierarchy import build_hierarchy, to_slug
from navlist.core.organizer import organize
from navlist.core.tree import find_by_id, flatten
from navlist.core.types import (
    DEFAULT_STATE,
    Domain,
    HierarchicalMenuItem,
    MenuItemRecord,
    MenuState,
    NavigationData,
    OrganizedNavigation,
    Role,
    StructuralSubtype,
)

__all__ = [
    "DEFAULT_STATE",
    "Domain",
    "HierarchicalMenuItem",
    "MenuItemRecord",
    "MenuState",
    "NavigationData",
    "OrganizedNavigation",
    "Role",
    "StructuralSubtype",
    "build_hierarchy",
    "can_access",
    "filter_by_role",
    "find_by_id",
    "flatten",
    "organize",
    "to_slug",
]
