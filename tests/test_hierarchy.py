"""Tests for the menu hierarchy builder."""

import logging

import pytest
from navlist.core.hierarchy import build_hierarchy, to_slug
from navlist.core.tree import flatten
from navlist.core.types import MenuItemRecord, Role

from tests.conftest import record


class TestToSlug:
    """Tests for to_slug()."""

    def test__simple_text__lowercases(self) -> None:
        """Lowercase single words."""
        assert to_slug("Home") == "home"

    def test__whitespace_runs__collapse_to_single_hyphen(self) -> None:
        """Collapse internal whitespace runs into one hyphen."""
        assert to_slug("My   Account\tSettings") == "my-account-settings"

    def test__surrounding_whitespace__trimmed(self) -> None:
        """Trim leading and trailing whitespace."""
        assert to_slug("  Getting Started  ") == "getting-started"


class TestBuildHierarchy:
    """Tests for build_hierarchy()."""

    def test__empty_list__returns_empty_forest(self) -> None:
        """Return no roots for no records."""
        assert build_hierarchy([]) == []

    def test__nested_records__links_children(self) -> None:
        """Attach records to their parents."""
        roots = build_hierarchy(
            [
                record("1", "Home"),
                record("2", "Settings", parent_id="1"),
                record("3", "Profile", parent_id="2"),
            ],
        )

        assert [root.id for root in roots] == ["1"]
        assert [child.id for child in roots[0].children] == ["2"]
        assert [child.id for child in roots[0].children[0].children] == ["3"]

    def test__child_before_parent__still_linked(self) -> None:
        """Link children that appear before their parent in the input."""
        roots = build_hierarchy(
            [record("2", parent_id="1"), record("1")],
        )

        assert [root.id for root in roots] == ["1"]
        assert roots[0].children[0].id == "2"

    def test__covers_every_record_once(self) -> None:
        """Produce exactly one node per record."""
        records = [
            record("a", sort_id=2),
            record("b", parent_id="a", sort_id=1),
            record("c", parent_id="a", sort_id=0),
            record("d", sort_id=1),
            record("e", parent_id="d"),
            record("f", parent_id="e"),
        ]

        ids = [item.id for item in flatten(build_hierarchy(records))]

        assert sorted(ids) == ["a", "b", "c", "d", "e", "f"]
        assert len(ids) == len(records)

    def test__dangling_parent__placed_at_root(self) -> None:
        """Treat records with an unknown parent as roots."""
        roots = build_hierarchy(
            [record("1", sort_id=1), record("2", parent_id="missing", sort_id=2)],
        )

        assert [root.id for root in roots] == ["1", "2"]
        assert roots[0].children == []

    def test__dangling_parent__logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Log a warning for missing parents."""
        with caplog.at_level(logging.WARNING, logger="navlist.core.hierarchy"):
            build_hierarchy([record("2", parent_id="missing")])

        assert "missing parent 'missing'" in caplog.text

    def test__empty_parent_id__treated_as_root(self) -> None:
        """Treat an empty parent id like no parent."""
        item = MenuItemRecord(id="1", menu_item_text="Home", parent_id="")

        roots = build_hierarchy([item])

        assert [root.id for root in roots] == ["1"]

    def test__roots_sorted_by_sort_id(self) -> None:
        """Order roots by ascending sort key."""
        roots = build_hierarchy(
            [record("c", sort_id=3), record("a", sort_id=1), record("b", sort_id=2)],
        )

        assert [root.id for root in roots] == ["a", "b", "c"]

    def test__children_sorted_recursively(self) -> None:
        """Order children at every depth by sort key."""
        roots = build_hierarchy(
            [
                record("root"),
                record("b", parent_id="root", sort_id=2),
                record("a", parent_id="root", sort_id=1),
                record("b2", parent_id="b", sort_id=5),
                record("b1", parent_id="b", sort_id=-1),
            ],
        )

        children = roots[0].children
        assert [child.id for child in children] == ["a", "b"]
        assert [child.id for child in children[1].children] == ["b1", "b2"]

    def test__equal_sort_ids__keep_input_order(self) -> None:
        """Break sort key ties by input order."""
        roots = build_hierarchy(
            [
                record("x", sort_id=1),
                record("y", sort_id=0),
                record("z", sort_id=1),
                record("w", sort_id=1),
            ],
        )

        assert [root.id for root in roots] == ["y", "x", "z", "w"]

    def test__builds_route_url_from_text(self) -> None:
        """Derive the route slug from the display text."""
        roots = build_hierarchy([record("1", "User Settings")])

        assert roots[0].route_url == "user-settings"

    def test__copies_record_fields(self) -> None:
        """Carry role and passthrough fields onto nodes."""
        item = MenuItemRecord(
            id="1",
            menu_item_text="Admin",
            role=Role.ADMIN,
            extra={"icon": "shield"},
        )

        node = build_hierarchy([item])[0]

        assert node.role == Role.ADMIN
        assert node.extra == {"icon": "shield"}
        assert node.extra is not item.extra

    def test__does_not_mutate_input(self) -> None:
        """Leave input records unchanged."""
        records = [record("2", parent_id="1", sort_id=2), record("1", sort_id=1)]

        build_hierarchy(records)

        assert [item.id for item in records] == ["2", "1"]
        assert not hasattr(records[0], "children")


class TestBuildHierarchyCycles:
    """Tests for parent cycles."""

    def test__self_parent__placed_at_root(self) -> None:
        """Place a record that names itself as parent at root level."""
        roots = build_hierarchy([record("1", parent_id="1")])

        assert [root.id for root in roots] == ["1"]
        assert roots[0].children == []

    def test__two_node_cycle__breaks_cycle(self) -> None:
        """Break a two-record cycle and keep both records."""
        roots = build_hierarchy(
            [record("a", parent_id="b"), record("b", parent_id="a")],
        )

        assert [root.id for root in roots] == ["b"]
        assert [child.id for child in roots[0].children] == ["a"]
        assert len(flatten(roots)) == 2

    def test__longer_cycle__every_record_kept_once(self) -> None:
        """Keep every record of a longer cycle exactly once."""
        roots = build_hierarchy(
            [
                record("a", parent_id="c"),
                record("b", parent_id="a"),
                record("c", parent_id="b"),
                record("d", parent_id="b"),
            ],
        )

        ids = [item.id for item in flatten(roots)]
        assert sorted(ids) == ["a", "b", "c", "d"]
        assert [root.id for root in roots] == ["c"]

    def test__cycle__logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Log a warning when breaking a cycle."""
        with caplog.at_level(logging.WARNING, logger="navlist.core.hierarchy"):
            build_hierarchy([record("1", parent_id="1")])

        assert "parent cycle" in caplog.text
