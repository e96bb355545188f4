from __future__ import annotations

from typing import Callable, Iterable, List

import questionary
from rich import print as rich_print

from configkeeper.core.config.locations import LocationNode
from configkeeper.core.config.manager import ConfigManager
from configkeeper.core.config.registry import EntryDescriptor
from configkeeper.core.utils.translation import translate

from .ui import BACK_CHOICE_KEY, EntryRow, edit_entries, prompt_for

ENTRIES_CHOICE_KEY = "__entries__"


def entry_rows(manager: ConfigManager, descriptors: Iterable[EntryDescriptor]) -> List[EntryRow]:
    """One row per entry, reading from the registry and submitting through the pipeline."""
    rows: List[EntryRow] = []
    for order, descriptor in enumerate(descriptors):
        name = descriptor.name
        hint = None
        if descriptor.description_key:
            hint = translate(
                manager.translator, f"config.{descriptor.description_key}", descriptor.description_key
            )
        rows.append(
            EntryRow(
                order=order,
                descriptor=descriptor,
                label=translate(manager.translator, f"config.{descriptor.name_key}", descriptor.name_key),
                read=lambda name=name: manager.get_value(name),
                submit=lambda value, name=name: manager.propose_change(name, value),
                prompt=prompt_for(descriptor, manager.constraints, manager.translator),
                hint=hint,
            )
        )
    return rows


def edit_location(manager: ConfigManager, node: LocationNode, mark_dirty: Callable[[], None]) -> None:
    """Browse ``node``: descend into child locations or edit its entries."""
    while True:
        choices = [
            questionary.Choice(title=f"📁 {child.label}", value=child.key)
            for child in node.children
        ]
        if node.entries:
            choices.insert(0, questionary.Choice(title=f"⚙️  {node.label} settings", value=ENTRIES_CHOICE_KEY))
        choices.append(questionary.Choice(title="🔙 Back", value=BACK_CHOICE_KEY))

        selected = questionary.select(node.label, choices=choices).ask()
        if selected in (None, BACK_CHOICE_KEY):
            return
        if selected == ENTRIES_CHOICE_KEY:
            edit_entries(
                node.label,
                entry_rows(manager, manager.list_visible_entries_at(node.path)),
                mark_dirty=mark_dirty,
            )
            continue
        child = next((c for c in node.children if c.key == selected), None)
        if child is not None:
            edit_location(manager, child, mark_dirty)


def edit_config_interactive(manager: ConfigManager) -> bool:
    """Interactive editor over the location tree. Returns True if a change was applied."""
    dirty = {"value": False}

    def mark_dirty() -> None:
        dirty["value"] = True

    rich_print("\n[bold cyan]🔧 Configuration Editor[/bold cyan]")
    edit_location(manager, manager.location_index(), mark_dirty)
    return dirty["value"]
