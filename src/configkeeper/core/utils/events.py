"""In-process publish/subscribe bus used to broadcast config change events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

Handler = Callable[[Any], None]


@dataclass(frozen=True)
class ConfigEntryChanged:
    """Published once per applied change, after the entry's listeners ran."""

    name: str
    value: str


class EventBus:
    """
    Synchronous event bus.

    Handlers subscribe to an event class and also receive events of its
    subclasses. Delivery happens inline in subscription order.
    """

    def __init__(self) -> None:
        self._handlers: Dict[type, List[Handler]] = {}

    def subscribe(self, event_type: Type[Any], handler: Handler) -> Handler:
        if not callable(handler):
            raise ValueError("handler must be callable")
        self._handlers.setdefault(event_type, []).append(handler)
        return handler

    def unsubscribe(self, event_type: Type[Any], handler: Handler) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._handlers[event_type]

    def publish(self, event: Any) -> int:
        """Deliver ``event`` and return the number of handlers called."""
        delivered = 0
        for event_type in type(event).__mro__:
            for handler in list(self._handlers.get(event_type, ())):
                handler(event)
                delivered += 1
        return delivered

    def clear(self) -> None:
        self._handlers.clear()
