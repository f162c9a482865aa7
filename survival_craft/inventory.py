"""Inventory component and helper functions."""
from __future__ import annotations

from dataclasses import dataclass, field

from survival_craft.config import INVENTORY_ITEM_SIZE, INVENTORY_SIZE, InventoryConfig
from survival_craft.errors import ItemMissingError, MissingReason
from survival_craft.types import EMPTY_SLOT, ItemAndCount, ItemType, Overflow


@dataclass
class Inventory:
    """Fixed-size slot inventory owned by a single actor.

    Attributes:
        slots: Exactly ``capacity`` slots in index order. Shorter lists are
            padded with empty slots.
        capacity: Number of slots.
        stack_limit: Maximum count held by any one slot.
    """

    slots: list[ItemAndCount] = field(default_factory=list)
    capacity: int = INVENTORY_SIZE
    stack_limit: int = INVENTORY_ITEM_SIZE

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.stack_limit < 1:
            raise ValueError(f"stack_limit must be >= 1, got {self.stack_limit}")
        if len(self.slots) > self.capacity:
            raise ValueError(
                f"{len(self.slots)} slots given but capacity is {self.capacity}"
            )
        for slot in self.slots:
            if slot.count > self.stack_limit:
                raise ValueError(
                    f"slot {slot} exceeds stack_limit {self.stack_limit}"
                )
        normalized = [slot.normalized() for slot in self.slots]
        normalized.extend([EMPTY_SLOT] * (self.capacity - len(normalized)))
        self.slots = normalized

    @classmethod
    def from_config(cls, config: InventoryConfig) -> Inventory:
        """Create an empty inventory sized by *config*."""
        return cls(capacity=config.capacity, stack_limit=config.stack_limit)


class InventoryHelper:
    """Pure functions for inventory manipulation."""

    @staticmethod
    def add(inv: Inventory, item_and_count: ItemAndCount) -> Overflow | None:
        """Add as much as fits. Returns the unplaced remainder, or None.

        Slots already holding the item are topped up first, then empty slots
        are filled, both in index order. Whatever fit stays in the inventory
        even when an Overflow is returned.
        """
        if item_and_count.is_empty():
            return None
        item = item_and_count.item
        remaining = item_and_count.count

        for i, slot in enumerate(inv.slots):
            if slot.is_empty() or slot.item != item:
                continue
            addable = min(remaining, inv.stack_limit - slot.count)
            if addable > 0:
                inv.slots[i] = ItemAndCount(item, slot.count + addable)
                remaining -= addable
            if remaining == 0:
                return None

        for i, slot in enumerate(inv.slots):
            if not slot.is_empty():
                continue
            addable = min(remaining, inv.stack_limit)
            inv.slots[i] = ItemAndCount(item, addable)
            remaining -= addable
            if remaining == 0:
                return None

        return Overflow(remaining)

    @staticmethod
    def can_add(inv: Inventory, item_and_count: ItemAndCount) -> bool:
        """Check if the whole amount would fit. Never mutates *inv*."""
        return InventoryHelper.add(InventoryHelper.clone(inv), item_and_count) is None

    @staticmethod
    def remove(inv: Inventory, item_and_count: ItemAndCount) -> None:
        """Remove the amount from the first slot holding enough of the item.

        Amounts are never gathered from several slots. Raises
        ItemMissingError, with reason INSUFFICIENT if some slot held the item
        but none held enough, NOT_PRESENT otherwise.
        """
        if item_and_count.count == 0:
            return
        item = item_and_count.item
        wanted = item_and_count.count
        seen = False

        for i, slot in enumerate(inv.slots):
            if slot.is_empty() or slot.item != item:
                continue
            seen = True
            if slot.count > wanted:
                inv.slots[i] = ItemAndCount(item, slot.count - wanted)
                return
            if slot.count == wanted:
                inv.slots[i] = EMPTY_SLOT
                return

        reason = MissingReason.INSUFFICIENT if seen else MissingReason.NOT_PRESENT
        raise ItemMissingError(item, wanted, reason)

    @staticmethod
    def can_remove(inv: Inventory, item_and_count: ItemAndCount) -> bool:
        """Check if a remove would succeed. Never mutates *inv*."""
        try:
            InventoryHelper.remove(InventoryHelper.clone(inv), item_and_count)
        except ItemMissingError:
            return False
        return True

    @staticmethod
    def clone(inv: Inventory) -> Inventory:
        return Inventory(
            slots=list(inv.slots),
            capacity=inv.capacity,
            stack_limit=inv.stack_limit,
        )

    @staticmethod
    def count(inv: Inventory, item: ItemType) -> int:
        """Get the total quantity of *item* across all slots."""
        return sum(
            slot.count
            for slot in inv.slots
            if not slot.is_empty() and slot.item == item
        )

    @staticmethod
    def total(inv: Inventory) -> int:
        """Get total quantity across all item types."""
        return sum(slot.count for slot in inv.slots if not slot.is_empty())

    @staticmethod
    def has(inv: Inventory, item: ItemType, amount: int = 1) -> bool:
        """Check if at least *amount* of *item* exists across all slots."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        return InventoryHelper.count(inv, item) >= amount

    @staticmethod
    def items(inv: Inventory) -> list[ItemAndCount]:
        """Get the non-empty slots in index order."""
        return [slot for slot in inv.slots if not slot.is_empty()]

    @staticmethod
    def free_slots(inv: Inventory) -> int:
        return sum(1 for slot in inv.slots if slot.is_empty())
