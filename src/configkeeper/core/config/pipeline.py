"""
Change pipeline for config entries.

Every mutation runs ask → apply → notify:

1. veto handlers see a :class:`ChangeRequest` in registration order; the
   first one that returns a reason string denies the change and the rest
   are skipped;
2. the registry value is replaced;
3. listeners registered for the entry run (no payload; they re-read the
   value), then a :class:`ConfigEntryChanged` event goes to the bus.

Stored and default values skip the ask phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from configkeeper.core.errors import ChangeDenied
from configkeeper.core.utils.events import ConfigEntryChanged, EventBus
from configkeeper.core.utils.logger import log_debug, log_warning

from .coercion import format_value
from .registry import ConfigRegistry

Listener = Callable[[], None]


class ChangeState(str, Enum):
    PROPOSED = "proposed"
    VALIDATED = "validated"
    APPLIED = "applied"
    NOTIFIED = "notified"
    DENIED = "denied"


@dataclass(frozen=True)
class ChangeRequest:
    """What veto handlers are asked about; values are in string form."""

    name: str
    old_value: str
    new_value: str


VetoHandler = Callable[[ChangeRequest], Optional[str]]


@dataclass(frozen=True)
class ChangeOutcome:
    name: str
    state: ChangeState
    old_value: str
    new_value: str
    reason: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.state is ChangeState.NOTIFIED

    @property
    def denied(self) -> bool:
        return self.state is ChangeState.DENIED

    @property
    def current_value(self) -> str:
        """The value a caller should display after the attempt."""
        return self.old_value if self.denied else self.new_value

    def raise_for_denial(self) -> None:
        if self.denied:
            raise ChangeDenied(self.name, self.reason or "Config change denied")


class ChangePipeline:
    def __init__(self, registry: ConfigRegistry, bus: Optional[EventBus] = None):
        self.registry = registry
        self.bus = bus if bus is not None else EventBus()
        self._veto_handlers: List[VetoHandler] = []
        self._listeners: Dict[str, List[Listener]] = {}

    # -- handlers and listeners ------------------------------------------

    def add_veto_handler(self, handler: VetoHandler) -> VetoHandler:
        if not callable(handler):
            raise ValueError("veto handler must be callable")
        self._veto_handlers.append(handler)
        return handler

    def remove_veto_handler(self, handler: VetoHandler) -> None:
        if handler in self._veto_handlers:
            self._veto_handlers.remove(handler)

    def subscribe(self, name: str, callback: Listener) -> Listener:
        if not callable(callback):
            raise ValueError("listener must be callable")
        self._listeners.setdefault(name, []).append(callback)
        return callback

    def unsubscribe(self, name: str, callback: Listener) -> None:
        callbacks = self._listeners.get(name)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)
            if not callbacks:
                del self._listeners[name]

    def listener_count(self, name: str) -> int:
        return len(self._listeners.get(name, ()))

    def clear_listeners(self) -> None:
        self._listeners.clear()
        self._veto_handlers.clear()

    # -- phases ------------------------------------------------------------

    def ask(self, request: ChangeRequest) -> Optional[str]:
        """Run veto handlers in order; return the first denial reason."""
        for handler in list(self._veto_handlers):
            reason = handler(request)
            if reason is not None:
                return str(reason)
        return None

    def notify(self, name: str) -> None:
        for callback in list(self._listeners.get(name, ())):
            callback()
        self.bus.publish(ConfigEntryChanged(name, self.registry.format_value(name)))

    def notify_all(self) -> None:
        """Re-run the notify phase for every set entry, in registration order."""
        for name in self.registry.names():
            if self.registry.is_set(name):
                self.notify(name)

    def apply_trusted(self, name: str, value: Any) -> None:
        """Apply and notify without asking; used for stored and default values."""
        descriptor = self.registry.descriptor(name)
        self.registry._set(name, descriptor.parse(value))
        self.notify(name)

    def load_defaults(self) -> List[str]:
        return self.registry.load_defaults(self.notify)

    # -- entry point ---------------------------------------------------------

    def propose(self, name: str, old_value: str, new_value: Any) -> ChangeOutcome:
        """Run the full protocol for a change from ``old_value`` to ``new_value``.

        Raises ``UnknownEntry`` for unregistered names and ``ParseFailure``
        when ``new_value`` does not parse for the entry's type; the store is
        left untouched in both cases.
        """
        descriptor = self.registry.descriptor(name)
        parsed = descriptor.parse(new_value)
        request = ChangeRequest(name, old_value, format_value(parsed))

        reason = self.ask(request)
        if reason is not None:
            log_warning(
                "pipeline",
                reason,
                context=f"Config change denied: {name} {request.old_value!r} -> {request.new_value!r}",
            )
            return ChangeOutcome(
                name, ChangeState.DENIED, request.old_value, request.new_value, reason
            )

        self.registry._set(name, parsed)
        self.notify(name)
        log_debug("pipeline", f"{name} changed", context=f"{request.old_value!r} -> {request.new_value!r}")
        return ChangeOutcome(name, ChangeState.NOTIFIED, request.old_value, request.new_value)

    def propose_change(self, name: str, new_value: Any) -> ChangeOutcome:
        return self.propose(name, self.registry.format_value(name), new_value)
