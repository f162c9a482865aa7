"""Exception hierarchy for inventory and crafting failures."""
from __future__ import annotations

from enum import Enum

from survival_craft.types import ItemType, item_name


class MissingReason(Enum):
    NOT_PRESENT = "not_present"
    INSUFFICIENT = "insufficient"


class InventoryError(Exception):
    """Base class for recoverable inventory and crafting failures."""


class ItemMissingError(InventoryError):
    """Raised when a removal cannot be satisfied from any single slot."""

    def __init__(self, item: ItemType, requested: int, reason: MissingReason) -> None:
        self.item = item
        self.requested = requested
        self.reason = reason
        if reason is MissingReason.INSUFFICIENT:
            message = f"Not enough items in inventory: {item_name(item)}"
        else:
            message = f"Item not in inventory: {item_name(item)}"
        super().__init__(message)


class CraftError(InventoryError):
    """Base class for crafting failures. No state changes when raised."""

    def __init__(self, item: ItemType, message: str) -> None:
        self.item = item
        super().__init__(message)


class RecipeNotFoundError(CraftError):
    def __init__(self, item: ItemType) -> None:
        super().__init__(item, f"No recipe produces {item_name(item)}")


class IngredientsMissingError(CraftError):
    """Raised when the inventory lacks an ingredient for the recipe."""

    def __init__(self, item: ItemType, missing: ItemMissingError) -> None:
        self.missing = missing
        super().__init__(item, f"Cannot craft {item_name(item)}: {missing}")


class NoOutputSpaceError(CraftError):
    def __init__(self, item: ItemType) -> None:
        super().__init__(item, f"No room for crafted {item_name(item)}")


class RecipeBookError(ValueError):
    """Raised when recipe configuration is malformed or ambiguous."""
