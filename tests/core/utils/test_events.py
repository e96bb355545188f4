from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from configkeeper.core.utils.events import ConfigEntryChanged, EventBus


@dataclass(frozen=True)
class VolumeChanged(ConfigEntryChanged):
    pass


def test_publish_delivers_in_subscription_order():
    bus = EventBus()
    calls = []
    bus.subscribe(ConfigEntryChanged, lambda e: calls.append(("a", e.name)))
    bus.subscribe(ConfigEntryChanged, lambda e: calls.append(("b", e.name)))

    delivered = bus.publish(ConfigEntryChanged("volume", "80"))

    assert delivered == 2
    assert calls == [("a", "volume"), ("b", "volume")]


def test_subscribers_to_base_class_receive_subclass_events():
    bus = EventBus()
    base_handler = MagicMock()
    sub_handler = MagicMock()
    bus.subscribe(ConfigEntryChanged, base_handler)
    bus.subscribe(VolumeChanged, sub_handler)

    bus.publish(VolumeChanged("volume", "1"))
    bus.publish(ConfigEntryChanged("muted", "true"))

    assert base_handler.call_count == 2
    sub_handler.assert_called_once()


def test_unsubscribe_and_clear():
    bus = EventBus()
    handler = MagicMock()
    bus.subscribe(ConfigEntryChanged, handler)
    bus.unsubscribe(ConfigEntryChanged, handler)
    assert bus.publish(ConfigEntryChanged("x", "")) == 0

    bus.subscribe(ConfigEntryChanged, handler)
    bus.clear()
    assert bus.publish(ConfigEntryChanged("x", "")) == 0
    handler.assert_not_called()


def test_subscribe_requires_callable():
    with pytest.raises(ValueError):
        EventBus().subscribe(ConfigEntryChanged, "not callable")
