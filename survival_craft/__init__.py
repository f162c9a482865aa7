"""survival-craft — Slot inventory and recipe crafting for a survival game."""
from survival_craft.actor import Actor, Hands
from survival_craft.config import InventoryConfig, default_book, load_book
from survival_craft.crafting import (
    can_craft,
    craftable_outputs,
    ingredients_available,
    resolve_craft,
)
from survival_craft.errors import (
    CraftError,
    IngredientsMissingError,
    InventoryError,
    ItemMissingError,
    MissingReason,
    NoOutputSpaceError,
    RecipeBookError,
    RecipeNotFoundError,
)
from survival_craft.handlers import register_handlers
from survival_craft.intents import Craft, Equip, Harvest, PickUp, Unequip, interaction_for
from survival_craft.inventory import Inventory, InventoryHelper
from survival_craft.projection import InventoryView, project
from survival_craft.queue import IntentQueue
from survival_craft.recipe import CraftingBook, CraftingRecipe
from survival_craft.session import Session
from survival_craft.signals import IntentRejected, InventoryChanged, SignalBus
from survival_craft.types import (
    EMPTY_SLOT,
    Item,
    ItemAndCount,
    ItemObject,
    Overflow,
    Placeable,
    Tool,
    ToolItem,
)

__all__ = [
    "EMPTY_SLOT",
    "Actor",
    "Craft",
    "CraftError",
    "CraftingBook",
    "CraftingRecipe",
    "Equip",
    "Hands",
    "Harvest",
    "IngredientsMissingError",
    "IntentQueue",
    "IntentRejected",
    "Inventory",
    "InventoryChanged",
    "InventoryConfig",
    "InventoryError",
    "InventoryHelper",
    "InventoryView",
    "Item",
    "ItemAndCount",
    "ItemMissingError",
    "ItemObject",
    "MissingReason",
    "NoOutputSpaceError",
    "Overflow",
    "PickUp",
    "Placeable",
    "RecipeBookError",
    "RecipeNotFoundError",
    "Session",
    "SignalBus",
    "Tool",
    "ToolItem",
    "Unequip",
    "can_craft",
    "craftable_outputs",
    "default_book",
    "ingredients_available",
    "interaction_for",
    "load_book",
    "project",
    "register_handlers",
    "resolve_craft",
]
