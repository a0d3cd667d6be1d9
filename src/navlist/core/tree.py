"""Traversal helpers for menu trees.

Traversals use an explicit stack, so tree depth is not bounded by the
interpreter's recursion limit.
"""

from collections.abc import Sequence

from navlist.core.types import HierarchicalMenuItem


def flatten(items: Sequence[HierarchicalMenuItem]) -> list[HierarchicalMenuItem]:
    """Flatten menu trees in depth-first pre-order.

    Args:
        items: Root items

    Returns:
        New list with every item, each parent before its children
    """
    flattened: list[HierarchicalMenuItem] = []
    stack = list(reversed(items))
    while stack:
        item = stack.pop()
        flattened.append(item)
        stack.extend(reversed(item.children))
    return flattened


def find_by_id(
    items: Sequence[HierarchicalMenuItem],
    item_id: str,
) -> HierarchicalMenuItem | None:
    """Find the first item with ``item_id`` in depth-first pre-order.

    Args:
        items: Root items
        item_id: Menu item identifier

    Returns:
        Matching item, or None if not found
    """
    stack = list(reversed(items))
    while stack:
        item = stack.pop()
        if item.id == item_id:
            return item
        stack.extend(reversed(item.children))
    return None
