"""Command-line interface for relgraph."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from relgraph import __version__
from relgraph.config import (
    ProjectConfig,
    find_project_root,
    load_config,
    save_config,
    set_config_value,
)
from relgraph.exceptions import ConfigError, LoaderError
from relgraph.ui.console import Console

console = Console()
logger = logging.getLogger("relgraph.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _get_project_root(path: str | None = None) -> Path | None:
    """Resolve the project root, or None when there is no project."""
    if path:
        root = Path(path).resolve()
        if not root.exists():
            console.error(f"Path does not exist: {path}")
            sys.exit(1)
        return root
    return find_project_root()


def _load_project(path: str | None) -> tuple[Path | None, ProjectConfig]:
    root = _get_project_root(path)
    if root is None:
        return None, ProjectConfig()
    try:
        return root, load_config(root)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)


def _load_query(data: str | None, path: str | None):
    """Build the graph from the relationship file and wrap it in a query."""
    from relgraph.graph.builder import GraphBuilder
    from relgraph.graph.query import GraphQuery

    root, config = _load_project(path)
    if data:
        data_file = Path(data)
    elif root is not None and config.data_file:
        data_file = config.resolve_data_file(root)
    else:
        console.error(
            "No relationship file given. Pass --data, or run 'relgraph init <file>' first."
        )
        sys.exit(1)

    builder = GraphBuilder(config.loader)
    try:
        store = builder.build_from_file(data_file)
    except LoaderError as e:
        console.error(str(e))
        sys.exit(1)
    logger.debug("Loaded %s: %s", data_file, builder.get_stats())
    return GraphQuery(store, config.relationships)


data_option = click.option(
    "--data", "-d", default=None, help="Relationship file (defaults to the configured data_file)."
)
path_option = click.option("--path", "-p", default=None, help="Path to the project root.")


@click.group()
@click.version_option(version=__version__, prog_name="relgraph")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """relgraph - answer family relationship questions over a labeled graph."""
    level = "WARNING"
    root = find_project_root()
    if verbose:
        level = "DEBUG"
    elif root is not None:
        try:
            level = load_config(root).log_level
        except ConfigError:
            level = "WARNING"
    _configure_logging(level)


@main.command()
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False))
@path_option
def init(data_file: str, path: str | None):
    """Create a relgraph project that points at DATA_FILE."""
    root = Path(path or ".").resolve()
    if not root.exists():
        console.error(f"Path does not exist: {root}")
        sys.exit(1)

    console.banner()
    try:
        config = load_config(root)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)
    config.name = root.name
    config.root_path = str(root)
    data_path = Path(data_file).resolve()
    try:
        config.data_file = str(data_path.relative_to(root))
    except ValueError:
        config.data_file = str(data_path)
    save_config(root, config)
    console.success(f"Configuration saved (data file: {config.data_file})")


@main.command()
@data_option
@path_option
def status(data: str | None, path: str | None):
    """Show relationship graph statistics."""
    query = _load_query(data, path)
    stats = query.store.get_stats()
    stats["orphans"] = len(query.orphans())
    console.show_stats(stats)


@main.command()
@data_option
@path_option
def dump(data: str | None, path: str | None):
    """List every person with their outgoing relationships."""
    query = _load_query(data, path)
    console.show_dump(query.store.dump())


@main.command()
@click.argument("name")
@data_option
@path_option
def show(name: str, data: str | None, path: str | None):
    """Show one person and their outgoing relationships."""
    query = _load_query(data, path)
    node = query.get_node(name)
    if node is None:
        console.error(f"{name} not found.")
        return
    console.show_node(node)


@main.command()
@data_option
@path_option
def orphans(data: str | None, path: str | None):
    """List people with no recorded parent."""
    query = _load_query(data, path)
    console.show_orphans(query.orphans())


@main.command()
@click.argument("name")
@data_option
@path_option
def siblings(name: str, data: str | None, path: str | None):
    """List the siblings of NAME."""
    query = _load_query(data, path)
    console.show_siblings(query.siblings(name))


@main.command()
@click.argument("name")
@data_option
@path_option
def descendants(name: str, data: str | None, path: str | None):
    """List every descendant of NAME by generation."""
    query = _load_query(data, path)
    console.show_descendants(query.descendants(name))


@main.command()
@click.argument("name1")
@click.argument("name2")
@data_option
@path_option
def bingo(name1: str, name2: str, data: str | None, path: str | None):
    """Show the shortest chain of relationships from NAME1 to NAME2."""
    query = _load_query(data, path)
    console.show_path(query.shortest_path(name1, name2))


@main.command()
@click.argument("name")
@click.argument("number", type=click.IntRange(min=0))
@click.argument("removed", type=click.IntRange(min=0))
@data_option
@path_option
def cousins(name: str, number: int, removed: int, data: str | None, path: str | None):
    """List the NUMBER-th cousins of NAME, REMOVED times removed.

    Examples:

        relgraph cousins Alice 1 0     (first cousins)

        relgraph cousins Alice 0 1     (aunts, uncles, nieces and nephews)
    """
    query = _load_query(data, path)
    console.show_cousins(query.cousins(name, number, removed))


# =========================================================================
# Config Management
# =========================================================================

@main.command("config")
@click.argument("action", type=click.Choice(["set", "get", "show"]))
@click.argument("key", required=False)
@click.argument("value", required=False)
@path_option
def config_cmd(action: str, key: str | None, value: str | None, path: str | None):
    """Manage relgraph configuration."""
    root = _get_project_root(path)
    if root is None:
        console.error("No relgraph project found. Run 'relgraph init <file>' first.")
        sys.exit(1)
    root, config = _load_project(str(root))

    if action == "show":
        console.console.print_json(json.dumps(config.model_dump(), indent=2))
    elif action == "get":
        if not key:
            console.error("Usage: relgraph config get <key>")
            sys.exit(1)
        data = config.model_dump()
        for part in key.split("."):
            if isinstance(data, dict) and part in data:
                data = data[part]
            else:
                console.error(f"Unknown key: {key}")
                sys.exit(1)
        console.console.print(f"{key} = {data}")
    elif action == "set":
        if not key or value is None:
            console.error("Usage: relgraph config set <key> <value>")
            sys.exit(1)
        try:
            # Try to parse as JSON for non-string values
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            config = set_config_value(config, key, parsed_value)
            save_config(root, config)
            console.success(f"Set {key} = {parsed_value}")
        except KeyError:
            console.error(f"Unknown config key: {key}")
            sys.exit(1)
        except ValidationError as e:
            console.error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
            sys.exit(1)


if __name__ == "__main__":
    main()
