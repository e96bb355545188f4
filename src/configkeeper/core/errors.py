"""
Error types raised by the configuration registry.

Every error carries a human-readable ``message`` and an optional ``context``
dict with the entry name, file path or raw value that caused it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ConfigKeeperError(Exception):
    """Base exception for registry, codec and pipeline errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class DuplicateEntry(ConfigKeeperError):
    """An entry with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Config entry already registered: {name}", {"name": name})
        self.name = name


class UnknownEntry(ConfigKeeperError, KeyError):
    """Lookup of a name that was never registered."""

    def __init__(self, name: str):
        super().__init__(f"Config entry not registered: {name}", {"name": name})
        self.name = name


class ParseFailure(ConfigKeeperError, ValueError):
    """A stored file or a raw value could not be parsed."""


class IOFailure(ConfigKeeperError):
    """A config file could not be read or written."""


class ChangeDenied(ConfigKeeperError):
    """Raised only when a caller escalates a vetoed change."""

    def __init__(self, name: str, reason: str):
        super().__init__(reason, {"name": name})
        self.name = name
        self.reason = reason
