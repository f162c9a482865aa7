"""Session: glue between intents, the player's inventory and the UI view."""
from __future__ import annotations

import logging
from typing import Any, Callable

from survival_craft.actor import Actor
from survival_craft.config import InventoryConfig
from survival_craft.handlers import register_handlers
from survival_craft.intents import Harvest
from survival_craft.projection import InventoryView, project
from survival_craft.queue import IntentQueue
from survival_craft.recipe import CraftingBook
from survival_craft.signals import IntentRejected, InventoryChanged, SignalBus
from survival_craft.types import Harvestable

logger = logging.getLogger(__name__)


class Session:
    """Holds the recipe book, the player and the intent plumbing.

    Call :meth:`step` once per simulation step.  After every accepted intent a
    fresh :class:`InventoryView` is published as :class:`InventoryChanged`;
    rejected intents publish :class:`IntentRejected`.
    """

    def __init__(
        self,
        book: CraftingBook,
        config: InventoryConfig | None = None,
        bus: SignalBus | None = None,
        on_harvest: Callable[[Harvest, Harvestable], None] | None = None,
    ) -> None:
        self.book = book
        self.player = Actor.create("player", config)
        self.queue = IntentQueue()
        self.bus = bus if bus is not None else SignalBus()
        register_handlers(self.queue, book, on_harvest=on_harvest)

    def submit(self, intent: Any) -> None:
        """Queue an intent for the next step."""
        self.queue.enqueue(intent)

    def view(self) -> InventoryView:
        return project(self.player, self.book)

    def step(self) -> list[tuple[Any, bool]]:
        """Process every queued intent and deliver the resulting signals."""
        results = self.queue.drain(self.player, on_result=self._publish)
        self.bus.flush()
        return results

    def _publish(self, intent: Any, accepted: bool) -> None:
        if accepted:
            logger.debug("Accepted %r", intent)
            self.bus.publish(InventoryChanged(self.view()))
        else:
            self.bus.publish(IntentRejected(intent))
