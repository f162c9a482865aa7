"""Crafting resolver: feasibility checks and atomic craft transactions."""
from __future__ import annotations

import logging

from survival_craft.errors import (
    CraftError,
    IngredientsMissingError,
    ItemMissingError,
    NoOutputSpaceError,
)
from survival_craft.inventory import Inventory, InventoryHelper
from survival_craft.recipe import CraftingBook, CraftingRecipe
from survival_craft.types import ItemAndCount, ItemType

logger = logging.getLogger(__name__)


def _take_ingredients(staged: Inventory, recipe: CraftingRecipe) -> None:
    # Sequential removal on one copy, so ingredients sharing a slot are
    # counted against each other.
    for ingredient in recipe.needed:
        try:
            InventoryHelper.remove(staged, ingredient)
        except ItemMissingError as exc:
            raise IngredientsMissingError(recipe.produces, exc) from exc


def _stage(inventory: Inventory, recipe: CraftingRecipe) -> Inventory:
    """Run the whole craft against a copy of *inventory* and return the copy."""
    staged = InventoryHelper.clone(inventory)
    _take_ingredients(staged, recipe)
    if InventoryHelper.add(staged, ItemAndCount(recipe.produces, 1)) is not None:
        raise NoOutputSpaceError(recipe.produces)
    return staged


def ingredients_available(inventory: Inventory, recipe: CraftingRecipe) -> bool:
    """Check if every ingredient can be taken. Never mutates *inventory*."""
    try:
        _take_ingredients(InventoryHelper.clone(inventory), recipe)
    except IngredientsMissingError:
        return False
    return True


def can_craft(inventory: Inventory, recipe: CraftingRecipe) -> bool:
    """Check ingredients and room for the product. Never mutates *inventory*."""
    try:
        _stage(inventory, recipe)
    except CraftError:
        return False
    return True


def resolve_craft(
    requested: ItemType,
    inventory: Inventory,
    book: CraftingBook,
) -> CraftingRecipe:
    """Craft one unit of *requested* and return the recipe used.

    All ingredients are consumed and the product added, or nothing changes.
    Room for the product is checked after the ingredients are taken, so a
    slot emptied by the craft can hold it; a full inventory whose ingredients
    free a slot can still craft.

    Raises:
        RecipeNotFoundError: No recipe in *book* produces *requested*.
        IngredientsMissingError: An ingredient cannot be taken.
        NoOutputSpaceError: The product would not fit.
    """
    recipe = book.get(requested)
    staged = _stage(inventory, recipe)
    inventory.slots[:] = staged.slots
    logger.debug("Crafted %s", ItemAndCount(recipe.produces, 1))
    return recipe


def craftable_outputs(inventory: Inventory, book: CraftingBook) -> list[ItemType]:
    """Return the products *inventory* can currently craft, in book order."""
    return [recipe.produces for recipe in book if can_craft(inventory, recipe)]
