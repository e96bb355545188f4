"""
Translation lookup for config labels.

Keys follow the ``config.`` naming used by the settings editor:
``config.<name_key>``, ``config.<description_key>``,
``config.location.<segment>`` and ``<entry>.<option>`` for choice labels.
Without a translator, keys are shown verbatim.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Union

from configkeeper.core.errors import IOFailure


class Translator(Protocol):
    def tr(self, key: str) -> str: ...  # noqa: E704

    def has(self, key: str) -> bool: ...  # noqa: E704


class DictTranslator:
    """Translator backed by a plain mapping; missing keys come back unchanged."""

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._mapping: Dict[str, str] = dict(mapping or {})

    def tr(self, key: str) -> str:
        return self._mapping.get(key, key)

    def has(self, key: str) -> bool:
        return key in self._mapping

    def keys(self):
        return self._mapping.keys()


def translate(translator: Optional[Translator], key: str, fallback: Optional[str] = None) -> str:
    """Translate ``key``; without a translator or a translation, return ``fallback`` (default: the key)."""
    if translator is None or not translator.has(key):
        return key if fallback is None else fallback
    return translator.tr(key)


def location_key(segment: str) -> str:
    return f"config.location.{segment}"


def parse_properties(text: str) -> Dict[str, str]:
    """Parse ``key=value`` / ``key: value`` lines; ``#`` and ``!`` start comments."""
    entries: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line[0] in "#!":
            continue
        separators = [i for i in (line.find("="), line.find(":")) if i >= 0]
        if not separators:
            entries[line] = ""
            continue
        cut = min(separators)
        entries[line[:cut].strip()] = line[cut + 1 :].strip()
    return entries


def load_properties(path: Union[str, Path]) -> DictTranslator:
    """Load a properties file into a :class:`DictTranslator`."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise IOFailure(f"Cannot read translation file: {path}", {"path": str(path)}) from e
    return DictTranslator(parse_properties(text))
