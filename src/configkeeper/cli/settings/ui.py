"""
Terminal prompts for config entries.

An :class:`EntryRow` binds one descriptor to a prompt and to the change
pipeline. :func:`edit_entries` lists rows with their live values, asks for
a new value and submits it as a change proposal; the row titles are
re-read on every pass, so a denied change shows the value that stayed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

import questionary
from rich import print as rich_print

from configkeeper.core.config.coercion import EntryType, format_value
from configkeeper.core.config.constraints import ConstraintRegistry, IntegerBounds
from configkeeper.core.config.pipeline import ChangeOutcome
from configkeeper.core.config.registry import EntryDescriptor
from configkeeper.core.errors import ConfigKeeperError
from configkeeper.core.utils.translation import Translator, translate

BACK_CHOICE_KEY = "__back__"
MAX_TITLE_VALUE = 40

Prompt = Callable[["EntryRow"], Optional[Any]]


def describe_value(value: Any) -> str:
    """Short display form of a live value for menu titles."""
    if value is None:
        return "(unset)"
    if isinstance(value, bool):
        return "on" if value else "off"
    text = format_value(value).replace("\n", " ")
    if len(text) > MAX_TITLE_VALUE:
        return f"{text[: MAX_TITLE_VALUE - 1]}…"
    return text


@dataclass
class EntryRow:
    order: int
    descriptor: EntryDescriptor
    label: str
    read: Callable[[], Any]
    submit: Callable[[Any], ChangeOutcome]
    prompt: Prompt
    hint: Optional[str] = None

    @property
    def name(self) -> str:
        return self.descriptor.name

    def title(self) -> str:
        return f"{self.label}: {describe_value(self.read())}"


def _answer(question: questionary.Question) -> Optional[Any]:
    # Ctrl+C inside a prompt cancels that edit only.
    try:
        return question.ask()
    except KeyboardInterrupt:
        return None


def _show_hint(row: EntryRow) -> None:
    if row.hint:
        rich_print(f"[dim]{row.hint}[/dim]")


def count_prompt(bounds: IntegerBounds) -> Prompt:
    """Whole-number prompt that only accepts values inside ``bounds``."""

    def check(text: str) -> Union[bool, str]:
        try:
            value = int(text.strip())
        except ValueError:
            return "Enter a whole number"
        if not bounds.contains(value):
            return f"Enter a value between {bounds.min} and {bounds.max}"
        return True

    def prompt(row: EntryRow) -> Optional[int]:
        _show_hint(row)
        answer = _answer(
            questionary.text(f"{row.label}:", default=format_value(row.read()), validate=check)
        )
        if answer is None:
            return None
        verdict = check(answer)
        if verdict is not True:
            rich_print(f"[red]{verdict}. No change made.[/red]")
            return None
        return int(answer.strip())

    return prompt


def flag_prompt(row: EntryRow) -> Optional[bool]:
    _show_hint(row)
    return _answer(questionary.confirm(f"{row.label}?", default=bool(row.read())))


def text_prompt(row: EntryRow) -> Optional[str]:
    _show_hint(row)
    return _answer(questionary.text(f"{row.label}:", default=format_value(row.read())))


def choice_prompt(options: Sequence[str], titles: Callable[[str], str]) -> Prompt:
    """Select among the registered options; ``titles`` maps an option to its label."""

    def prompt(row: EntryRow) -> Optional[str]:
        _show_hint(row)
        current = row.read()
        return _answer(
            questionary.select(
                f"{row.label}:",
                choices=[questionary.Choice(title=titles(option), value=option) for option in options],
                default=current if current in options else None,
            )
        )

    return prompt


def no_options_prompt(row: EntryRow) -> None:
    rich_print(f"[yellow]No options registered for {row.label}.[/yellow]")
    return None


def prompt_for(
    descriptor: EntryDescriptor,
    constraints: ConstraintRegistry,
    translator: Optional[Translator] = None,
) -> Prompt:
    """Pick the prompt for an entry's type, using its advisory constraints."""
    if descriptor.type is EntryType.FLAG:
        return flag_prompt
    if descriptor.type is EntryType.COUNT:
        return count_prompt(constraints.get_integer_bounds(descriptor.name))
    if descriptor.type is EntryType.CHOICE:
        options = constraints.get_options(descriptor.name)
        if not options:
            return no_options_prompt
        return choice_prompt(
            options,
            lambda option: translate(translator, f"{descriptor.name}.{option}", option),
        )
    return text_prompt


def edit_entries(
    title: str,
    rows: Sequence[EntryRow],
    mark_dirty: Optional[Callable[[], None]] = None,
) -> None:
    """Menu over ``rows`` until the user backs out.

    ``mark_dirty`` runs only for changes the pipeline applied.
    """
    by_name = {row.name: row for row in rows}
    while True:
        choices = [
            questionary.Choice(title=row.title(), value=row.name)
            for row in sorted(rows, key=lambda row: row.order)
        ]
        choices.append(questionary.Choice(title="🔙 Back", value=BACK_CHOICE_KEY))

        picked = questionary.select(title, choices=choices).ask()
        if picked in (None, BACK_CHOICE_KEY):
            return
        row = by_name.get(picked)
        if row is None:
            continue

        value = row.prompt(row)
        if value is None:
            continue
        try:
            outcome = row.submit(value)
        except ConfigKeeperError as e:
            rich_print(f"[red]❌ {e.message}[/red]")
            continue
        if outcome.denied:
            rich_print(f"[red]Change denied: {outcome.reason}[/red]")
        elif outcome.applied and mark_dirty is not None:
            mark_dirty()
