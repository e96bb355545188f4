"""Location tree derived from the visible entries' dot-separated locations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from configkeeper.core.utils.translation import Translator, location_key, translate

from .registry import EntryDescriptor

ROOT_KEY = "config"
ROOT_LABEL = "Settings"


@dataclass
class LocationNode:
    key: str
    label: str
    parent: Optional["LocationNode"] = field(default=None, repr=False, compare=False)
    children: List["LocationNode"] = field(default_factory=list)
    entries: List[EntryDescriptor] = field(default_factory=list)

    def child(self, label: str) -> Optional["LocationNode"]:
        lowered = label.lower()
        for node in self.children:
            if node.label.lower() == lowered:
                return node
        return None

    def add_child(self, key: str, label: str) -> "LocationNode":
        node = LocationNode(key=key, label=label, parent=self)
        self.children.append(node)
        return node

    @property
    def path(self) -> str:
        """Dot-joined labels from below the root down to this node."""
        labels: List[str] = []
        node: Optional[LocationNode] = self
        while node is not None and node.parent is not None:
            labels.append(node.label)
            node = node.parent
        return ".".join(reversed(labels))

    def find(self, path: str) -> Optional["LocationNode"]:
        node: Optional[LocationNode] = self
        for label in (part for part in path.split(".") if part):
            node = node.child(label) if node is not None else None
        return node

    def walk(self) -> Iterator["LocationNode"]:
        yield self
        for node in self.children:
            yield from node.walk()


def translated_location(descriptor: EntryDescriptor, translator: Optional[Translator] = None) -> str:
    return ".".join(
        translate(translator, location_key(segment), segment)
        for segment in descriptor.location_segments
    )


def build_location_index(
    descriptors: Iterable[EntryDescriptor], translator: Optional[Translator] = None
) -> LocationNode:
    """Build the location tree for the visible descriptors.

    Siblings are matched case-insensitively by their translated label and
    kept in discovery order.
    """
    root = LocationNode(key=ROOT_KEY, label=translate(translator, location_key(ROOT_KEY), ROOT_LABEL))
    for descriptor in descriptors:
        if not descriptor.visible:
            continue
        node = root
        for segment in descriptor.location_segments:
            label = translate(translator, location_key(segment), segment)
            node = node.child(label) or node.add_child(segment, label)
        node.entries.append(descriptor)
    return root


def entries_at(
    descriptors: Iterable[EntryDescriptor], path: str, translator: Optional[Translator] = None
) -> List[EntryDescriptor]:
    """Visible descriptors whose translated location equals ``path``."""
    wanted = ".".join(part for part in path.split(".") if part).lower()
    return [
        descriptor
        for descriptor in descriptors
        if descriptor.visible and translated_location(descriptor, translator).lower() == wanted
    ]
