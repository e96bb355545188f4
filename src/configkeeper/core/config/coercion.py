"""Value parsing and formatting for the four config entry types."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from configkeeper.core.errors import ParseFailure

# Characters XML 1.0 cannot carry, escaped or not.
_XML_ILLEGAL = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class EntryType(str, Enum):
    """Entry types; the value is the type name written to the config file."""

    CHOICE = "choose"
    FLAG = "check"
    COUNT = "count"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "EntryType":
        lowered = name.strip().lower()
        for member in cls:
            if member.value == lowered or member.name.lower() == lowered:
                return member
        raise ParseFailure(f"Unknown entry type: {name!r}", {"type": name})


def _parse_flag(raw: str) -> bool:
    # Anything other than "true" is False.
    return raw.strip().lower() == "true"


def _parse_count(raw: str, name: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ParseFailure(
            f"Expected an integer for {name}, got {raw!r}.",
            {"name": name, "value": raw},
        ) from e


def _parse_text(raw: str, name: str) -> str:
    bad = _XML_ILLEGAL.search(raw)
    if bad:
        raise ParseFailure(
            f"Value for {name} contains a character the config file cannot store: {bad.group()!r}.",
            {"name": name, "value": raw},
        )
    return raw


def parse_value(raw: Any, entry_type: EntryType, name: str = "") -> Any:
    """Parse the string form of a value according to ``entry_type``.

    Values that already have the target Python type pass through, so
    programmatic callers may hand in ``True`` or ``80`` directly.
    """
    if raw is None:
        raise ParseFailure(f"Missing value for {name or entry_type.value}.", {"name": name})
    if entry_type is EntryType.FLAG:
        if isinstance(raw, bool):
            return raw
        return _parse_flag(str(raw))
    if entry_type is EntryType.COUNT:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        return _parse_count(str(raw), name)
    return _parse_text(str(raw), name)


def format_value(value: Any) -> str:
    """String form of a stored value, as written to the file and to events."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
