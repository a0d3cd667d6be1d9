"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest
from navlist.core.types import MenuItemRecord, NavigationData, Role


def record(
    item_id: str,
    text: str | None = None,
    *,
    parent_id: str | None = None,
    sort_id: int = 0,
    role: Role | None = None,
) -> MenuItemRecord:
    """Create a MenuItemRecord with sensible defaults."""
    return MenuItemRecord(
        id=item_id,
        menu_item_text=text if text is not None else f"Item {item_id}",
        parent_id=parent_id,
        sort_id=sort_id,
        role=role,
    )


@pytest.fixture
def navigation_dict() -> dict[str, Any]:
    """Wire-format navigation data with a header and a nav menu."""
    return {
        "domain": "ADMIN",
        "structuralSubtypes": {
            "HEADER": {
                "states": {
                    "FULL": [
                        {
                            "_id": "1",
                            "menuItemText": "Home",
                            "parentId": None,
                            "sortId": 1,
                            "role": "none",
                        },
                        {
                            "_id": "2",
                            "menuItemText": "Settings",
                            "parentId": "1",
                            "sortId": 1,
                            "role": "admin",
                        },
                    ],
                },
            },
            "NAV": {
                "states": {
                    "FULL": [
                        {"_id": "10", "menuItemText": "Dashboard", "sortId": 2},
                        {
                            "_id": "11",
                            "menuItemText": "Publishing Tools",
                            "sortId": 1,
                            "role": "publisher",
                            "icon": "pen",
                        },
                        {
                            "_id": "12",
                            "menuItemText": "Drafts",
                            "parentId": "11",
                            "sortId": 1,
                            "role": "regular",
                        },
                    ],
                    "COMPACT": [
                        {"_id": "10", "menuItemText": "Dashboard", "sortId": 1},
                    ],
                },
            },
        },
    }


@pytest.fixture
def navigation_data(navigation_dict: dict[str, Any]) -> NavigationData:
    """Parsed navigation data."""
    return NavigationData.from_dict(navigation_dict)


@pytest.fixture
def navigation_file(tmp_path: Path, navigation_dict: dict[str, Any]) -> Path:
    """Navigation data written to a JSON file."""
    path = tmp_path / "navigation.json"
    path.write_text(json.dumps(navigation_dict))
    return path
