"""
ConfigKeeper command-line interface.

Commands operate on a saved config file. The file carries each entry's
name, value, default and type, which is enough to rebuild a registry for
inspection and editing; locations are not stored, so entries are grouped
under their type name.
"""

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from configkeeper import __version__
from configkeeper.core.config import persistence
from configkeeper.core.config.coercion import EntryType
from configkeeper.core.config.locations import LocationNode
from configkeeper.core.config.manager import ConfigManager
from configkeeper.core.config.registry import EntryDescriptor
from configkeeper.core.errors import ConfigKeeperError
from configkeeper.core.utils.logger import setup_logging

from .exit_codes import CliExit
from .settings import edit_config_interactive

app = typer.Typer(
    name="configkeeper",
    help="⚙️  ConfigKeeper - inspect and edit saved configuration files",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

FileArgument = typer.Argument(..., help="Path to a saved config file")


@app.callback()
def callback(
    log_level: str = typer.Option(
        os.getenv("CONFIGKEEPER_LOG_LEVEL", "WARNING"),
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """⚙️  ConfigKeeper - inspect and edit saved configuration files"""
    try:
        setup_logging(level=log_level)
    except ValueError as e:
        raise CliExit.config_error(f"❌ {e}")


def _records(path: Path) -> list[persistence.StoredRecord]:
    try:
        return persistence.read_records(path)
    except ConfigKeeperError as e:
        raise CliExit.config_error(f"❌ {e.message}")


def _descriptor_for(record: persistence.StoredRecord) -> EntryDescriptor:
    try:
        entry_type = EntryType.from_name(record.type)
    except ConfigKeeperError:
        entry_type = EntryType.TEXT
    return EntryDescriptor(
        name=record.name,
        type=entry_type,
        default=record.default,
        location=entry_type.name.lower(),
    )


def _manager_from_file(path: Path) -> ConfigManager:
    manager = ConfigManager(config_path=path)
    for record in _records(path):
        if record.name not in manager.registry:
            manager.register(_descriptor_for(record))
    try:
        manager.initialize()
    except ConfigKeeperError as e:
        raise CliExit.config_error(f"❌ {e.message}")
    return manager


def _add_branch(tree: Tree, node: LocationNode, manager: ConfigManager) -> None:
    for descriptor in node.entries:
        tree.add(f"[cyan]{descriptor.name}[/cyan] = {manager.registry.format_value(descriptor.name)}")
    for child in node.children:
        _add_branch(tree.add(f"📁 {child.label}"), child, manager)


@app.command()
def version():
    """Show the installed version."""
    console.print(f"configkeeper {__version__}")


@app.command()
def show(path: Path = FileArgument):
    """List every stored entry."""
    records = _records(path)
    if not records:
        console.print("[yellow]No entries stored.[/yellow]")
        return

    table = Table(title=str(path.name))
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Default", style="magenta")
    table.add_column("Type", style="yellow")
    for record in records:
        table.add_row(record.name, record.value, record.default, record.type)
    console.print(table)


@app.command()
def get(path: Path = FileArgument, name: str = typer.Argument(..., help="Entry name")):
    """Print one stored value."""
    for record in _records(path):
        if record.name == name:
            console.print(record.value, markup=False, highlight=False)
            return
    raise CliExit.config_error(f"❌ No entry named {name!r} in {path}")


@app.command("set")
def set_value(
    path: Path = FileArgument,
    name: str = typer.Argument(..., help="Entry name"),
    value: str = typer.Argument(..., help="New value in string form"),
):
    """Change one value through the change pipeline and save the file."""
    manager = _manager_from_file(path)
    if name not in manager.registry:
        raise CliExit.config_error(f"❌ No entry named {name!r} in {path}")
    try:
        outcome = manager.propose_change(name, value)
    except ConfigKeeperError as e:
        raise CliExit.config_error(f"❌ {e.message}")
    if outcome.denied:
        raise CliExit.error(f"❌ Change denied: {outcome.reason}")
    try:
        manager.save()
    except ConfigKeeperError as e:
        raise CliExit.error(f"❌ {e.message}")
    console.print(f"[green]✅ {name}: {outcome.old_value} → {outcome.new_value}[/green]")


@app.command()
def tree(path: Path = FileArgument):
    """Show entries as a location tree."""
    manager = _manager_from_file(path)
    index = manager.location_index()
    root = Tree(f"⚙️  {index.label}")
    _add_branch(root, index, manager)
    console.print(root)


@app.command()
def edit(path: Path = FileArgument):
    """Edit entries interactively and save on exit."""
    manager = _manager_from_file(path)
    try:
        changed = edit_config_interactive(manager)
    except KeyboardInterrupt:
        raise CliExit.user_cancel()
    if changed:
        try:
            manager.save()
        except ConfigKeeperError as e:
            raise CliExit.error(f"❌ {e.message}")
        console.print(f"[green]✅ Saved {path}[/green]")
    else:
        console.print("[dim]No changes made.[/dim]")


if __name__ == "__main__":
    app()
