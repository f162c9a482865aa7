"""Read-only view of an actor's inventory for the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass

from survival_craft.actor import Actor
from survival_craft.crafting import craftable_outputs
from survival_craft.recipe import CraftingBook
from survival_craft.types import ItemAndCount, ItemType, ToolItem


@dataclass(frozen=True)
class InventoryView:
    """Snapshot of what the UI shows.

    Attributes:
        slots: Slot contents in index order, empty slots included.
        equipped: The tool in hand, or None.
        craftable: Products the inventory can craft right now, in book order.
    """

    slots: tuple[ItemAndCount, ...]
    equipped: ToolItem | None
    craftable: tuple[ItemType, ...]

    def items(self) -> list[ItemAndCount]:
        return [slot for slot in self.slots if not slot.is_empty()]


def project(actor: Actor, book: CraftingBook) -> InventoryView:
    """Compute the view from current state. Pure; never mutates *actor*."""
    return InventoryView(
        slots=tuple(actor.inventory.slots),
        equipped=actor.hands.item(),
        craftable=tuple(craftable_outputs(actor.inventory, book)),
    )
