"""Role-based visibility filtering for menu trees."""

from collections.abc import Sequence
from dataclasses import replace

from navlist.core.types import HierarchicalMenuItem, Role


def can_access(item_role: Role | None, role: Role) -> bool:
    """Check whether a requester with ``role`` may see an item.

    Items without a required role are visible to everyone.

    | requester | visible item roles       |
    |-----------|--------------------------|
    | admin     | all                      |
    | publisher | all except admin         |
    | regular   | regular, none            |
    | none      | none                     |
    """
    effective = item_role if item_role is not None else Role.NONE
    return effective.rank <= role.rank


def filter_by_role(
    items: Sequence[HierarchicalMenuItem],
    role: Role,
) -> list[HierarchicalMenuItem]:
    """Prune menu trees to the items visible for ``role``.

    Each item is checked against its own required role; children of a
    removed item are removed with it. Input items are never modified:
    surviving items are shallow copies with filtered children.

    Args:
        items: Menu trees to filter
        role: Requester role

    Returns:
        Filtered copies of the visible trees
    """
    filtered: list[HierarchicalMenuItem] = []
    pending = [(items, filtered)]
    while pending:
        source, target = pending.pop()
        for item in source:
            if not can_access(item.role, role):
                continue
            kept = replace(item, children=[])
            target.append(kept)
            pending.append((item.children, kept.children))
    return filtered
