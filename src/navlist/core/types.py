"""Core type definitions.

Flat menu item records as supplied by the host shell, the hierarchical
items built from them, and the aggregates keyed by structural subtype
and display state.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, NotRequired, TypedDict


class Domain(StrEnum):
    """Top-level tenant a navigation data set belongs to."""

    ADMIN = "ADMIN"
    WORKSHOP = "WORKSHOP"


class StructuralSubtype(StrEnum):
    """Placement category of a menu."""

    HEADER = "HEADER"
    NAV = "NAV"
    FOOTER = "FOOTER"


class MenuState(StrEnum):
    """Conventional display states. State keys are open strings."""

    FULL = "FULL"
    RELAXED = "RELAXED"
    COMPACT = "COMPACT"


DEFAULT_STATE = MenuState.FULL.value


class Role(StrEnum):
    """Access tier, ordered none < regular < publisher < admin."""

    NONE = "none"
    REGULAR = "regular"
    PUBLISHER = "publisher"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_ORDER.index(self)


_ROLE_ORDER = (Role.NONE, Role.REGULAR, Role.PUBLISHER, Role.ADMIN)

# Wire keys owned by the record; every other key is passed through.
_RECORD_KEYS = frozenset({"_id", "menuItemText", "parentId", "sortId", "role"})


class MenuItemDict(TypedDict):
    """Wire representation of a hierarchical menu item."""

    _id: str
    menuItemText: str
    parentId: str | None
    sortId: int
    role: str | None
    children: list["MenuItemDict"]
    routeUrl: NotRequired[str]


@dataclass
class MenuItemRecord:
    """Flat menu item as received from the shell."""

    id: str
    menu_item_text: str
    sort_id: int = 0
    parent_id: str | None = None
    role: Role | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: object, where: str = "item") -> "MenuItemRecord":
        """Parse a wire menu item.

        Args:
            data: Raw item mapping
            where: Location used in error messages

        Returns:
            MenuItemRecord instance

        Raises:
            ValueError: If the item is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"{where} must be a dictionary")

        item_id = data.get("_id")
        if not isinstance(item_id, str):
            raise ValueError(f"{where}._id must be a string")

        text = data.get("menuItemText")
        if not isinstance(text, str):
            raise ValueError(f"{where}.menuItemText must be a string")

        sort_id = data.get("sortId", 0)
        if not isinstance(sort_id, int) or isinstance(sort_id, bool):
            raise ValueError(f"{where}.sortId must be an integer")

        parent_id = data.get("parentId")
        if parent_id is not None and not isinstance(parent_id, str):
            raise ValueError(f"{where}.parentId must be a string")

        return cls(
            id=item_id,
            menu_item_text=text,
            sort_id=sort_id,
            parent_id=parent_id or None,
            role=_parse_role(data.get("role"), f"{where}.role"),
            extra={k: v for k, v in data.items() if k not in _RECORD_KEYS},
        )


@dataclass
class HierarchicalMenuItem(MenuItemRecord):
    """Menu item with its owned, ordered children."""

    children: list["HierarchicalMenuItem"] = field(default_factory=list)
    route_url: str = ""

    def to_dict(self) -> MenuItemDict:
        """Convert to dictionary for JSON serialization."""
        result = self._node_dict()
        pending = [(self, result)]
        while pending:
            item, item_dict = pending.pop()
            for child in item.children:
                child_dict = child._node_dict()
                item_dict["children"].append(child_dict)
                pending.append((child, child_dict))
        return result

    def _node_dict(self) -> MenuItemDict:
        """Own fields with an empty children list."""
        result: MenuItemDict = {
            **self.extra,  # type: ignore[typeddict-item]
            "_id": self.id,
            "menuItemText": self.menu_item_text,
            "parentId": self.parent_id,
            "sortId": self.sort_id,
            "role": self.role.value if self.role is not None else None,
            "children": [],
        }
        if self.route_url:
            result["routeUrl"] = self.route_url
        return result


@dataclass
class NavigationData:
    """Navigation data received from the shell.

    Flat item lists keyed by structural subtype, then by state label.
    """

    domain: Domain
    structural_subtypes: dict[StructuralSubtype, dict[str, list[MenuItemRecord]]] = (
        field(default_factory=dict)
    )

    @classmethod
    def from_dict(cls, data: object) -> "NavigationData":
        """Parse the wire shape used by the shell.

        Expects ``{"domain": ..., "structuralSubtypes": {SUBTYPE: {"states":
        {STATE: [item, ...]}}}}``.

        Args:
            data: Raw navigation mapping

        Returns:
            NavigationData instance

        Raises:
            ValueError: If the data is malformed
        """
        if not isinstance(data, dict):
            raise ValueError("Navigation data must be a dictionary")

        domain_raw = data.get("domain")
        try:
            domain = Domain(domain_raw)
        except ValueError:
            raise ValueError(f"domain must be one of {_choices(Domain)}") from None

        subtypes_raw = data.get("structuralSubtypes", {})
        if not isinstance(subtypes_raw, dict):
            raise ValueError("structuralSubtypes must be a dictionary")

        subtypes: dict[StructuralSubtype, dict[str, list[MenuItemRecord]]] = {}
        for subtype_key, subtype_data in subtypes_raw.items():
            where = f"structuralSubtypes.{subtype_key}"
            try:
                subtype = StructuralSubtype(subtype_key)
            except ValueError:
                raise ValueError(
                    f"{where} is not one of {_choices(StructuralSubtype)}"
                ) from None
            if subtype_data is None:
                continue
            subtypes[subtype] = cls._parse_states(subtype_data, where)

        return cls(domain=domain, structural_subtypes=subtypes)

    @classmethod
    def _parse_states(cls, data: object, where: str) -> dict[str, list[MenuItemRecord]]:
        if not isinstance(data, dict):
            raise ValueError(f"{where} must be a dictionary")

        states_raw = data.get("states")
        if not isinstance(states_raw, dict):
            raise ValueError(f"{where}.states must be a dictionary")
        if not states_raw:
            raise ValueError(f"{where}.states must not be empty")

        states: dict[str, list[MenuItemRecord]] = {}
        for state, items in states_raw.items():
            state_where = f"{where}.states.{state}"
            if not isinstance(items, list):
                raise ValueError(f"{state_where} must be a list")
            states[state] = [
                MenuItemRecord.from_dict(item, f"{state_where}[{i}]")
                for i, item in enumerate(items)
            ]
        return states


@dataclass
class OrganizedNavigation:
    """Navigation trees keyed by structural subtype, then by state label."""

    domain: Domain
    structural_subtypes: dict[
        StructuralSubtype, dict[str, list[HierarchicalMenuItem]]
    ] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "domain": self.domain.value,
            "structuralSubtypes": {
                subtype.value: {
                    "states": {
                        state: [item.to_dict() for item in items]
                        for state, items in states.items()
                    },
                }
                for subtype, states in self.structural_subtypes.items()
            },
        }


def _parse_role(value: object, where: str) -> Role | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{where} must be a string")
    try:
        return Role(value)
    except ValueError:
        raise ValueError(f"{where} must be one of {_choices(Role)}") from None


def _choices(enum_cls: type[StrEnum]) -> str:
    return ", ".join(member.value for member in enum_cls)
