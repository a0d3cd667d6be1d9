"""Navigation store.

Holds the current navigation data and requester role, keeps the organized
menu trees up to date, and answers queries over them either as plain
return values or as observables that re-emit after every relevant write.
"""

import logging
from collections.abc import Sequence

from navlist.config import Config
from navlist.core.access import filter_by_role
from navlist.core.organizer import organize
from navlist.core.tree import find_by_id, flatten
from navlist.core.types import (
    DEFAULT_STATE,
    Domain,
    HierarchicalMenuItem,
    NavigationData,
    OrganizedNavigation,
    Role,
    StructuralSubtype,
)
from navlist.reactive import BehaviorSubject, Computed, Observable, combine

logger = logging.getLogger(__name__)


class NavigationStore:
    """In-memory navigation state with derived, queryable views.

    Writes replace state wholesale and notify subscribers synchronously.
    Queries never raise for missing subtypes, states or items; they
    return an empty list or None instead.
    """

    def __init__(
        self,
        *,
        role: Role | str = Role.NONE,
        default_state: str = DEFAULT_STATE,
    ) -> None:
        """Initialize an empty store.

        Args:
            role: Initial requester role
            default_state: State used when a query doesn't name one
        """
        self._default_state = default_state
        self._navigation_data: BehaviorSubject[NavigationData | None] = BehaviorSubject(
            None,
        )
        self._role: BehaviorSubject[Role] = BehaviorSubject(Role(role))
        self._organized = self._navigation_data.map(_organize_optional)

    @classmethod
    def from_config(cls, config: Config) -> "NavigationStore":
        """Create a store with the configured initial role and default state."""
        return cls(
            role=config.access.default_role,
            default_state=config.navigation.default_state,
        )

    @property
    def navigation_data(self) -> Observable[NavigationData | None]:
        """Raw navigation data as last set."""
        return self._navigation_data

    @property
    def role(self) -> Observable[Role]:
        """Current requester role."""
        return self._role

    @property
    def organized_navigation(self) -> Observable[OrganizedNavigation | None]:
        """Organized menu trees, None until navigation data is set."""
        return self._organized

    @property
    def default_state(self) -> str:
        return self._default_state

    def set_navigation_data(self, data: NavigationData | None) -> None:
        """Replace the navigation data. Passing None clears it."""
        if data is None:
            logger.debug("Clearing navigation data")
        else:
            logger.debug(
                f"Setting {data.domain} navigation data "
                f"({len(data.structural_subtypes)} subtypes)"
            )
        self._navigation_data.set(data)

    def set_role_state(self, role: Role | str) -> None:
        """Replace the requester role.

        Raises:
            ValueError: If ``role`` is not a known role
        """
        new_role = Role(role)
        logger.debug(f"Setting role to {new_role}")
        self._role.set(new_role)

    # Pull queries

    def by_state(
        self,
        subtype: StructuralSubtype | str,
        state: str | None = None,
    ) -> list[HierarchicalMenuItem]:
        """Get menu trees for a subtype and state.

        Args:
            subtype: Structural subtype
            state: State label (default: the store's default state)

        Returns:
            Root items, empty if data, subtype or state is absent
        """
        return _select(self._organized.value, subtype, self._state(state))

    def filtered_by_state(
        self,
        subtype: StructuralSubtype | str,
        state: str | None = None,
    ) -> list[HierarchicalMenuItem]:
        """Get menu trees for a subtype and state, filtered by current role."""
        return filter_by_role(self.by_state(subtype, state), self._role.value)

    def find_by_id(self, item_id: str) -> HierarchicalMenuItem | None:
        """Find an item across all subtypes and states.

        Buckets are searched in subtype order, then state order, as the
        keys appear in the navigation data. The first match wins.
        """
        return _find_anywhere(self._organized.value, item_id)

    def current_domain(self) -> Domain | None:
        data = self._navigation_data.value
        return data.domain if data is not None else None

    def current_role(self) -> Role:
        return self._role.value

    def available_subtypes(self) -> list[StructuralSubtype]:
        return _subtypes(self._organized.value)

    def available_states(self, subtype: StructuralSubtype | str) -> list[str]:
        return _states(self._organized.value, subtype)

    def flatten(
        self,
        items: Sequence[HierarchicalMenuItem],
    ) -> list[HierarchicalMenuItem]:
        """Flatten menu trees in depth-first pre-order."""
        return flatten(items)

    # Push queries

    def watch_by_state(
        self,
        subtype: StructuralSubtype | str,
        state: str | None = None,
    ) -> Computed[list[HierarchicalMenuItem]]:
        """Observe menu trees for a subtype and state."""
        resolved_state = self._state(state)
        return self._organized.map(lambda nav: _select(nav, subtype, resolved_state))

    def watch_filtered_by_state(
        self,
        subtype: StructuralSubtype | str,
        state: str | None = None,
    ) -> Computed[list[HierarchicalMenuItem]]:
        """Observe role-filtered menu trees.

        Re-emits when either the navigation data or the role changes.
        """
        resolved_state = self._state(state)
        return combine(
            [self._organized, self._role],
            lambda nav, role: filter_by_role(_select(nav, subtype, resolved_state), role),
        )

    def watch_item(self, item_id: str) -> Computed[HierarchicalMenuItem | None]:
        return self._organized.map(lambda nav: _find_anywhere(nav, item_id))

    def watch_domain(self) -> Computed[Domain | None]:
        return self._navigation_data.map(
            lambda data: data.domain if data is not None else None,
        )

    def watch_subtypes(self) -> Computed[list[StructuralSubtype]]:
        return self._organized.map(_subtypes)

    def watch_states(self, subtype: StructuralSubtype | str) -> Computed[list[str]]:
        return self._organized.map(lambda nav: _states(nav, subtype))

    def _state(self, state: str | None) -> str:
        return state if state is not None else self._default_state


def _organize_optional(data: NavigationData | None) -> OrganizedNavigation | None:
    return organize(data) if data is not None else None


def _as_subtype(value: StructuralSubtype | str) -> StructuralSubtype | None:
    """Convert to a StructuralSubtype, None for unknown values."""
    try:
        return StructuralSubtype(value)
    except ValueError:
        return None


def _select(
    nav: OrganizedNavigation | None,
    subtype: StructuralSubtype | str,
    state: str,
) -> list[HierarchicalMenuItem]:
    if nav is None:
        return []
    key = _as_subtype(subtype)
    if key is None:
        return []
    states = nav.structural_subtypes.get(key)
    if states is None:
        return []
    return list(states.get(state, []))


def _find_anywhere(
    nav: OrganizedNavigation | None,
    item_id: str,
) -> HierarchicalMenuItem | None:
    if nav is None:
        return None
    for states in nav.structural_subtypes.values():
        for items in states.values():
            found = find_by_id(items, item_id)
            if found is not None:
                return found
    return None


def _subtypes(nav: OrganizedNavigation | None) -> list[StructuralSubtype]:
    if nav is None:
        return []
    return list(nav.structural_subtypes)


def _states(nav: OrganizedNavigation | None, subtype: StructuralSubtype | str) -> list[str]:
    if nav is None:
        return []
    key = _as_subtype(subtype)
    if key is None:
        return []
    return list(nav.structural_subtypes.get(key, {}))
