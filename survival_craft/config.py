"""Inventory configuration and recipe book loading."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from survival_craft.errors import RecipeBookError
from survival_craft.recipe import CraftingBook

logger = logging.getLogger(__name__)

INVENTORY_SIZE = 5
INVENTORY_ITEM_SIZE = 5

DEFAULT_RECIPES: list[dict[str, Any]] = [
    {
        "needed": [
            {"item": "twig", "count": 1},
            {"item": "flint", "count": 1},
        ],
        "produces": "tool:axe",
    },
]


@dataclass(frozen=True)
class InventoryConfig:
    """Immutable sizing for actor inventories.

    Attributes:
        capacity: Number of slots.
        stack_limit: Maximum count per slot.
    """

    capacity: int = INVENTORY_SIZE
    stack_limit: int = INVENTORY_ITEM_SIZE

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.stack_limit < 1:
            raise ValueError(f"stack_limit must be >= 1, got {self.stack_limit}")


def default_book() -> CraftingBook:
    return CraftingBook.from_records(DEFAULT_RECIPES)


def load_book(path: str | Path) -> CraftingBook:
    """Load a recipe book from a JSON file.

    Raises RecipeBookError if the file cannot be read, is not valid JSON, or
    describes an invalid book.
    """
    path = Path(path)
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RecipeBookError(f"Cannot load recipes from {path}: {exc}") from exc
    book = CraftingBook.from_records(records)
    logger.info("Loaded %d recipes from %s", len(book), path)
    return book
