"""Navigation organizer.

Builds the canonical organized view consumed by every query: the same
subtype and state keys as the incoming data, with each flat item list
replaced by its menu trees.
"""

import logging

from navlist.core.hierarchy import build_hierarchy
from navlist.core.types import (
    HierarchicalMenuItem,
    NavigationData,
    OrganizedNavigation,
    StructuralSubtype,
)

logger = logging.getLogger(__name__)


def organize(data: NavigationData) -> OrganizedNavigation:
    """Organize navigation data into hierarchical menus.

    Subtypes and states absent from ``data`` stay absent. Key order
    follows the input.

    Args:
        data: Flat navigation data

    Returns:
        OrganizedNavigation with the same domain
    """
    subtypes: dict[StructuralSubtype, dict[str, list[HierarchicalMenuItem]]] = {}
    for subtype, states in data.structural_subtypes.items():
        subtypes[subtype] = {
            state: build_hierarchy(items) for state, items in states.items()
        }

    logger.debug(f"Organized {data.domain} navigation with {len(subtypes)} subtypes")
    return OrganizedNavigation(domain=data.domain, structural_subtypes=subtypes)
