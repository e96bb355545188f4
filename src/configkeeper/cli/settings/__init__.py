from .ui import (
    BACK_CHOICE_KEY,
    EntryRow,
    count_prompt,
    describe_value,
    edit_entries,
    prompt_for,
)
from .generate import edit_config_interactive, edit_location, entry_rows

__all__ = [
    "BACK_CHOICE_KEY",
    "EntryRow",
    "count_prompt",
    "describe_value",
    "edit_config_interactive",
    "edit_entries",
    "edit_location",
    "entry_rows",
    "prompt_for",
]
