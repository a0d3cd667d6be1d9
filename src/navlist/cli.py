"""CLI interface for navlist.

Command-line tool for inspecting navigation data files through the
navigation store: organized trees, role filtering and item lookup.
"""

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from navlist.config import Config
from navlist.core.types import DEFAULT_STATE, HierarchicalMenuItem, Role, StructuralSubtype
from navlist.loader import load_navigation_data
from navlist.store import NavigationStore

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover navlist.toml)",
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
_data_file_argument = click.argument(
    "data_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    required=False,
)


@click.group()
def cli() -> None:
    """navlist - hierarchical, role-filtered navigation menus."""


@cli.command()
@_data_file_argument
@click.option(
    "--subtype",
    "-t",
    type=click.Choice([subtype.value for subtype in StructuralSubtype]),
    required=True,
    help="Structural subtype to show",
)
@click.option(
    "--state",
    "-s",
    default=None,
    help=f"Menu state (default: from config or {DEFAULT_STATE})",
)
@click.option(
    "--role",
    "-r",
    type=click.Choice([role.value for role in Role]),
    default=None,
    help="Requester role (overrides config, default: none)",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of an outline")
@_config_option
@_verbose_option
def show(
    data_file: Path | None,
    subtype: str,
    state: str | None,
    role: str | None,
    as_json: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Show the menu trees visible to a role."""
    try:
        store = _load_store(
            config_path,
            data_file,
            verbose=verbose,
            default_state=state,
            default_role=Role(role) if role is not None else None,
        )
        items = store.filtered_by_state(subtype)
    except (OSError, ValueError) as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([item.to_dict() for item in items], indent=2))
        return

    if not items:
        click.echo(f"No visible items in {subtype}/{store.default_state}")
        return
    for line in _outline(items):
        click.echo(line)


@cli.command()
@click.argument("item_id")
@_data_file_argument
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a summary")
@_config_option
@_verbose_option
def find(
    item_id: str,
    data_file: Path | None,
    as_json: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Find a menu item by ID across all subtypes and states."""
    try:
        store = _load_store(config_path, data_file, verbose=verbose)
    except (OSError, ValueError) as e:
        _fail(str(e))

    item = store.find_by_id(item_id)
    if item is None:
        _fail(f"Menu item not found: {item_id}")

    if as_json:
        click.echo(json.dumps(item.to_dict(), indent=2))
        return

    click.echo(f"ID: {item.id}")
    click.echo(f"Text: {item.menu_item_text}")
    click.echo(f"Route: {item.route_url}")
    click.echo(f"Role: {item.role or Role.NONE}")
    click.echo(f"Children: {len(item.children)}")


@cli.command()
@_data_file_argument
@_config_option
@_verbose_option
def info(data_file: Path | None, config_path: Path | None, verbose: bool) -> None:
    """Show the domain, subtypes and states of a navigation file."""
    try:
        store = _load_store(config_path, data_file, verbose=verbose)
    except (OSError, ValueError) as e:
        _fail(str(e))

    click.echo(f"Domain: {store.current_domain()}")
    for subtype in store.available_subtypes():
        states = store.available_states(subtype)
        counts = ", ".join(
            f"{state} ({len(store.flatten(store.by_state(subtype, state)))} items)"
            for state in states
        )
        click.echo(f"{subtype}: {counts}")


def _load_store(
    config_path: Path | None,
    data_file: Path | None,
    *,
    verbose: bool,
    default_state: str | None = None,
    default_role: Role | None = None,
) -> NavigationStore:
    """Load config and navigation data into a new store.

    Raises:
        FileNotFoundError: If the config file or data file doesn't exist
        ValueError: If no data file is configured or any input is invalid
    """
    config = Config.load(config_path).with_overrides(
        data_file=data_file,
        default_state=default_state,
        default_role=default_role,
        verbose=verbose,
    )
    config.logging.apply()

    path = config.navigation.data_file
    if path is None:
        raise ValueError("data file required (via DATA_FILE or navigation.data_file)")

    store = NavigationStore.from_config(config)
    store.set_navigation_data(load_navigation_data(path))
    return store


def _outline(items: list[HierarchicalMenuItem]) -> list[str]:
    lines: list[str] = []
    pending = [(item, 0) for item in reversed(items)]
    while pending:
        item, depth = pending.pop()
        role = f" [{item.role}]" if item.role is not None else ""
        lines.append(f"{'  ' * depth}- {item.menu_item_text} ({item.route_url}){role}")
        pending.extend((child, depth + 1) for child in reversed(item.children))
    return lines


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
