"""Config entry descriptors and the value store that owns their live values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from configkeeper.core.errors import DuplicateEntry, UnknownEntry
from configkeeper.core.utils.paths import ensure_app_data_dir

from .coercion import EntryType, format_value, parse_value

_UNSET = object()


@dataclass(frozen=True)
class EntryDescriptor:
    """Static metadata describing one config entry."""

    name: str
    type: EntryType
    default: str
    location: str = ""
    visible: bool = True
    description_key: str = ""
    name_key: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Config entry name must not be empty")
        if not isinstance(self.type, EntryType):
            object.__setattr__(self, "type", EntryType.from_name(str(self.type)))
        if not self.name_key:
            object.__setattr__(self, "name_key", self.name)

    @property
    def location_segments(self) -> List[str]:
        return [segment for segment in self.location.split(".") if segment]

    def parse(self, raw: Any) -> Any:
        return parse_value(raw, self.type, self.name)


class ConfigRegistry:
    """
    Value store keyed by entry name.

    Descriptors are kept in registration order. An entry is *unset* until
    defaults are loaded or a stored value is applied; after that, values
    change only through :class:`~configkeeper.core.config.pipeline.ChangePipeline`.
    """

    def __init__(self) -> None:
        self._descriptors: Dict[str, EntryDescriptor] = {}
        self._values: Dict[str, Any] = {}

    def register(self, descriptor: EntryDescriptor) -> EntryDescriptor:
        if descriptor.name in self._descriptors:
            raise DuplicateEntry(descriptor.name)
        self._descriptors[descriptor.name] = descriptor
        return descriptor

    def register_many(self, descriptors: Iterable[EntryDescriptor]) -> None:
        for descriptor in descriptors:
            self.register(descriptor)

    def load_defaults(self, on_default: Optional[Callable[[str], None]] = None) -> List[str]:
        """Give every unset entry its parsed default.

        ``on_default`` is called with each defaulted name (the pipeline
        passes its notify phase here). Returns the names that were defaulted.
        """
        defaulted: List[str] = []
        for descriptor in self._descriptors.values():
            if self.is_set(descriptor.name):
                continue
            self._values[descriptor.name] = descriptor.parse(descriptor.default)
            defaulted.append(descriptor.name)
            if on_default is not None:
                on_default(descriptor.name)
        ensure_app_data_dir()
        return defaulted

    def get(self, name: str) -> Any:
        if name not in self._descriptors:
            raise UnknownEntry(name)
        return self._values.get(name)

    def _set(self, name: str, value: Any) -> None:
        if name not in self._descriptors:
            raise UnknownEntry(name)
        self._values[name] = value

    def format_value(self, name: str) -> str:
        return format_value(self.get(name))

    def descriptor(self, name: str) -> EntryDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownEntry(name) from None

    def descriptors(self) -> List[EntryDescriptor]:
        return list(self._descriptors.values())

    def names(self) -> List[str]:
        return list(self._descriptors)

    def has(self, name: str) -> bool:
        return name in self._descriptors

    def is_set(self, name: str) -> bool:
        return self._values.get(name, _UNSET) is not _UNSET

    def values(self) -> Dict[str, Any]:
        """Snapshot of every set value, in registration order."""
        return {name: self._values[name] for name in self._descriptors if name in self._values}

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[EntryDescriptor]:
        return iter(self.descriptors())
