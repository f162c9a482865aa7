"""Tests for SignalBus and the inventory events."""
from __future__ import annotations

from typing import Any

from survival_craft import (
    Actor,
    Craft,
    IntentRejected,
    InventoryChanged,
    Item,
    SignalBus,
    default_book,
    project,
)


def _view() -> Any:
    return project(Actor.create("tester"), default_book())


class TestSignalBus:
    def test_publish_waits_for_flush(self) -> None:
        bus = SignalBus()
        received: list[InventoryChanged] = []
        bus.subscribe(InventoryChanged, received.append)
        event = InventoryChanged(_view())
        bus.publish(event)
        assert received == []
        assert bus.pending() == 1
        assert bus.flush() == 1
        assert received == [event]
        assert bus.pending() == 0

    def test_routes_by_event_type(self) -> None:
        bus = SignalBus()
        changed: list[InventoryChanged] = []
        rejected: list[IntentRejected] = []
        bus.subscribe(InventoryChanged, changed.append)
        bus.subscribe(IntentRejected, rejected.append)
        bus.publish(IntentRejected(Craft(Item.FIRE)))
        bus.flush()
        assert changed == []
        assert [event.intent for event in rejected] == [Craft(Item.FIRE)]

    def test_delivery_in_publish_order(self) -> None:
        bus = SignalBus()
        received: list[Any] = []
        bus.subscribe(InventoryChanged, received.append)
        bus.subscribe(IntentRejected, received.append)
        first = IntentRejected(Craft(Item.FIRE))
        second = InventoryChanged(_view())
        bus.publish(first)
        bus.publish(second)
        bus.flush()
        assert received == [first, second]

    def test_unsubscribe(self) -> None:
        bus = SignalBus()
        received: list[Any] = []
        bus.subscribe(IntentRejected, received.append)
        bus.unsubscribe(IntentRejected, received.append)
        bus.unsubscribe(InventoryChanged, received.append)
        bus.publish(IntentRejected(Craft(Item.FIRE)))
        bus.flush()
        assert received == []

    def test_publish_during_flush_deferred(self) -> None:
        bus = SignalBus()
        received: list[Any] = []
        follow_up = InventoryChanged(_view())

        def relay(event: IntentRejected) -> None:
            received.append(event)
            bus.publish(follow_up)

        bus.subscribe(IntentRejected, relay)
        bus.subscribe(InventoryChanged, received.append)
        rejected = IntentRejected(Craft(Item.FIRE))
        bus.publish(rejected)
        bus.flush()
        assert received == [rejected]
        bus.flush()
        assert received == [rejected, follow_up]
