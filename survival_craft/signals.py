"""Typed inventory events and the bus that delivers them to UI subscribers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from survival_craft.projection import InventoryView


@dataclass(frozen=True)
class InventoryChanged:
    """An intent was accepted; *view* is the inventory right after it."""

    view: InventoryView


@dataclass(frozen=True)
class IntentRejected:
    intent: Any


_Handler = Callable[[Any], None]


class SignalBus:
    """Queues events until :meth:`flush` delivers them in publish order.

    Subscribers register per event class, the same way intents are routed by
    type, and are called with the event object.  Events published while
    flushing are delivered on the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type[Any], list[_Handler]] = {}
        self._queue: list[Any] = []

    def subscribe(self, event_type: type[Any], handler: _Handler) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Any], handler: _Handler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Any) -> None:
        self._queue.append(event)

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver queued events. Returns how many were delivered."""
        delivered, self._queue = self._queue, []
        for event in delivered:
            for handler in list(self._subscribers.get(type(event), ())):
                handler(event)
        return len(delivered)
