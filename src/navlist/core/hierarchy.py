"""Menu hierarchy builder.

Turns a flat list of parent-referencing menu item records into a forest
of HierarchicalMenuItem trees with siblings ordered by sort key.
"""

import logging
import re
from collections.abc import Sequence

from navlist.core.types import HierarchicalMenuItem, MenuItemRecord

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def to_slug(value: str) -> str:
    """Convert display text to a URL-friendly slug.

    Example: "  My  Settings " -> "my-settings"
    """
    return _WHITESPACE_RE.sub("-", value.strip().lower())


def build_hierarchy(items: Sequence[MenuItemRecord]) -> list[HierarchicalMenuItem]:
    """Build menu trees from flat records.

    Records whose parent id is missing from ``items`` are placed at root
    level. Records whose parent chain leads back to themselves are placed
    at root level as well, so the result is always a forest.

    Args:
        items: Flat menu item records

    Returns:
        Root items sorted by sort key, each with sorted children
    """
    nodes = [_to_node(item) for item in items]
    index = {node.id: node for node in nodes}
    parents: dict[str, str] = {}
    roots: list[HierarchicalMenuItem] = []

    for node in nodes:
        parent_id = node.parent_id
        parent = index.get(parent_id) if parent_id else None

        if parent is None:
            if parent_id:
                logger.warning(
                    f"Menu item {node.id!r} references missing parent {parent_id!r}, "
                    "placing at root"
                )
            roots.append(node)
            continue

        if _creates_cycle(node.id, parent.id, parents):
            logger.warning(
                f"Menu item {node.id!r} is part of a parent cycle, placing at root"
            )
            roots.append(node)
            continue

        parents[node.id] = parent.id
        parent.children.append(node)

    _sort_siblings(roots)
    return roots


def _to_node(item: MenuItemRecord) -> HierarchicalMenuItem:
    return HierarchicalMenuItem(
        id=item.id,
        menu_item_text=item.menu_item_text,
        sort_id=item.sort_id,
        parent_id=item.parent_id,
        role=item.role,
        extra=dict(item.extra),
        children=[],
        route_url=to_slug(item.menu_item_text),
    )


def _creates_cycle(node_id: str, parent_id: str, parents: dict[str, str]) -> bool:
    """Check whether linking node_id under parent_id would close a cycle.

    Only links made so far are followed, so the walk always terminates.
    Each check costs the depth of the parent chain, so building a single
    chain given root first is quadratic in its length.
    """
    current: str | None = parent_id
    while current is not None:
        if current == node_id:
            return True
        current = parents.get(current)
    return False


def _sort_siblings(items: list[HierarchicalMenuItem]) -> None:
    """Stable-sort items and all descendant child lists by sort key."""
    pending = [items]
    while pending:
        siblings = pending.pop()
        siblings.sort(key=lambda item: item.sort_id)
        pending.extend(item.children for item in siblings if item.children)
