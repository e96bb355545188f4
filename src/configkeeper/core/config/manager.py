"""
Process-wide configuration manager.

``ConfigManager`` bundles the registry, constraints, event bus and change
pipeline behind the small API presentation layers bind against. Create one
at startup, ``initialize()`` it after registering entries, and pass it to
the components that need it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from configkeeper.core.utils.events import EventBus
from configkeeper.core.utils.logger import log_info
from configkeeper.core.utils.paths import get_default_config_path
from configkeeper.core.utils.translation import Translator

from . import persistence
from .constraints import ConstraintRegistry
from .locations import LocationNode, build_location_index, entries_at
from .pipeline import ChangeOutcome, ChangePipeline, Listener, VetoHandler
from .registry import ConfigRegistry, EntryDescriptor


class ConfigManager:
    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        translator: Optional[Translator] = None,
        bus: Optional[EventBus] = None,
    ):
        self.config_path = Path(config_path) if config_path else get_default_config_path()
        self.translator = translator
        self.registry = ConfigRegistry()
        self.constraints = ConstraintRegistry()
        self.pipeline = ChangePipeline(self.registry, bus)
        self.initialized = False

    @property
    def bus(self) -> EventBus:
        return self.pipeline.bus

    # -- lifecycle -----------------------------------------------------------

    def register(self, *descriptors: EntryDescriptor) -> None:
        self.registry.register_many(descriptors)

    def initialize(self, path: Optional[Union[str, Path]] = None) -> Optional[persistence.LoadReport]:
        """Load defaults, then overlay the config file if it exists."""
        if path is not None:
            self.config_path = Path(path)
        self.pipeline.load_defaults()
        report = None
        if self.config_path.exists():
            report = persistence.load(self.registry, self.pipeline, self.config_path)
        self.initialized = True
        log_info("manager", "Configuration initialized", context=str(self.config_path))
        return report

    def shutdown(self, save: bool = True) -> None:
        if save and self.initialized:
            self.save()
        self.pipeline.clear_listeners()
        self.initialized = False

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        return persistence.save(self.registry, path or self.config_path)

    def load(self, path: Optional[Union[str, Path]] = None) -> persistence.LoadReport:
        return persistence.load(self.registry, self.pipeline, path or self.config_path)

    # -- toolkit-agnostic API --------------------------------------------------

    def get_value(self, name: str) -> Any:
        return self.registry.get(name)

    def propose_change(self, name: str, new_value: Any) -> ChangeOutcome:
        return self.pipeline.propose_change(name, new_value)

    def subscribe(self, name: str, callback: Listener) -> Listener:
        return self.pipeline.subscribe(name, callback)

    def add_veto_handler(self, handler: VetoHandler) -> VetoHandler:
        return self.pipeline.add_veto_handler(handler)

    def location_index(self) -> LocationNode:
        return build_location_index(self.registry.descriptors(), self.translator)

    def list_visible_entries_at(self, path: str) -> List[EntryDescriptor]:
        return entries_at(self.registry.descriptors(), path, self.translator)

    def descriptors(self) -> Iterable[EntryDescriptor]:
        return self.registry.descriptors()


_manager: Optional[ConfigManager] = None


def get_manager() -> ConfigManager:
    """Return the shared manager, creating an empty one on first use."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def set_manager(manager: ConfigManager) -> None:
    global _manager
    _manager = manager


def reset_manager_for_tests() -> None:
    global _manager
    _manager = None
