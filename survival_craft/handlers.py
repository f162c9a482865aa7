"""Intent handlers: validation and execution logic."""
from __future__ import annotations

import logging
from typing import Callable

from survival_craft.actor import Actor
from survival_craft.crafting import resolve_craft
from survival_craft.errors import CraftError, ItemMissingError, RecipeNotFoundError
from survival_craft.intents import Craft, Equip, Harvest, PickUp, Unequip
from survival_craft.inventory import InventoryHelper
from survival_craft.queue import IntentQueue
from survival_craft.recipe import CraftingBook
from survival_craft.types import Harvestable, Item, ItemAndCount, ToolItem, as_harvest

logger = logging.getLogger(__name__)


def register_handlers(
    queue: IntentQueue,
    book: CraftingBook,
    on_harvest: Callable[[Harvest, Harvestable], None] | None = None,
) -> None:
    """Wire up handlers for every intent type on the queue.

    ``on_harvest(intent, harvestable)`` fires after a successful harvest so the
    world can replace the target with ``harvestable.drops``.
    """

    def handle_craft(intent: Craft, actor: Actor) -> bool:
        try:
            resolve_craft(intent.item, actor.inventory, book)
        except RecipeNotFoundError as exc:
            logger.warning("%s: %s", actor.name, exc)
            return False
        except CraftError as exc:
            logger.info("%s: %s", actor.name, exc)
            return False
        return True

    def handle_equip(intent: Equip, actor: Actor) -> bool:
        if not isinstance(intent.item, ToolItem):
            logger.info("%s: %r is not a tool", actor.name, intent.item)
            return False
        held = actor.hands.item()
        if held == intent.item:
            return False

        # Take the new tool out first so its slot can hold the old one.
        staged = InventoryHelper.clone(actor.inventory)
        try:
            InventoryHelper.remove(staged, ItemAndCount(intent.item, 1))
        except ItemMissingError as exc:
            logger.info("%s: %s", actor.name, exc)
            return False
        if held is not None:
            if InventoryHelper.add(staged, ItemAndCount(held, 1)) is not None:
                logger.info("%s: no available slot for %r", actor.name, held)
                return False

        actor.inventory.slots[:] = staged.slots
        actor.hands.tool = intent.item.tool
        return True

    def handle_unequip(intent: Unequip, actor: Actor) -> bool:
        held = actor.hands.item()
        if held is None:
            return False
        if InventoryHelper.add(actor.inventory, ItemAndCount(held, 1)) is not None:
            logger.info("%s: no available slot for %r", actor.name, held)
            return False
        actor.hands.tool = None
        return True

    def handle_pickup(intent: PickUp, actor: Actor) -> bool:
        if not intent.in_range or intent.item == Item.NONE or intent.count < 1:
            return False
        stack = ItemAndCount(intent.item, intent.count)
        # All or nothing: a partial stack stays on the ground.
        if not InventoryHelper.can_add(actor.inventory, stack):
            logger.info("%s: no available slot for item: %s", actor.name, stack)
            return False
        InventoryHelper.add(actor.inventory, stack)
        return True

    def handle_harvest(intent: Harvest, actor: Actor) -> bool:
        harvest = as_harvest(intent.target)
        if harvest is None or not intent.in_range:
            return False
        if harvest.tool_required is not None and actor.hands.tool != harvest.tool_required:
            logger.info(
                "%s: %s needed to harvest %s",
                actor.name, harvest.tool_required.value, intent.target.value,
            )
            return False
        stack = ItemAndCount(harvest.item, 1)
        if not InventoryHelper.can_add(actor.inventory, stack):
            logger.info("%s: no available slot for item: %s", actor.name, stack)
            return False
        InventoryHelper.add(actor.inventory, stack)
        if on_harvest is not None:
            on_harvest(intent, harvest)
        return True

    queue.handle(Craft, handle_craft)
    queue.handle(Equip, handle_equip)
    queue.handle(Unequip, handle_unequip)
    queue.handle(PickUp, handle_pickup)
    queue.handle(Harvest, handle_harvest)
