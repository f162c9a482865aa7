"""CraftingRecipe dataclass and the read-only CraftingBook."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from survival_craft.errors import RecipeBookError, RecipeNotFoundError
from survival_craft.types import Item, ItemAndCount, ItemType, item_name, parse_item


@dataclass(frozen=True)
class CraftingRecipe:
    """Immutable crafting recipe definition.

    Attributes:
        needed: Ingredients consumed, in the order they are taken.
        produces: Item created, one unit per craft.
    """

    needed: tuple[ItemAndCount, ...]
    produces: ItemType

    def __post_init__(self) -> None:
        if not self.needed:
            raise ValueError("Recipe needs at least one ingredient")
        if self.produces == Item.NONE:
            raise ValueError("Recipe must produce a real item")
        for ingredient in self.needed:
            if ingredient.is_empty():
                raise ValueError(f"Empty ingredient {ingredient!r}")


class CraftingBook:
    """Ordered, read-only collection of recipes keyed by produced item."""

    def __init__(self, recipes: Iterable[CraftingRecipe] = ()) -> None:
        self._recipes: tuple[CraftingRecipe, ...] = tuple(recipes)
        self._by_output: dict[ItemType, CraftingRecipe] = {}
        for recipe in self._recipes:
            if recipe.produces in self._by_output:
                raise RecipeBookError(
                    f"Duplicate recipe for {item_name(recipe.produces)}"
                )
            self._by_output[recipe.produces] = recipe

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[CraftingRecipe]:
        return iter(self._recipes)

    def get(self, produces: ItemType) -> CraftingRecipe:
        """Look up a recipe. Raises RecipeNotFoundError if none produces it."""
        recipe = self._by_output.get(produces)
        if recipe is None:
            raise RecipeNotFoundError(produces)
        return recipe

    def has(self, produces: ItemType) -> bool:
        return produces in self._by_output

    def outputs(self) -> list[ItemType]:
        """Return every producible item in book order."""
        return [recipe.produces for recipe in self._recipes]

    @classmethod
    def from_records(cls, records: Any) -> CraftingBook:
        """Build a book from ``[{"needed": [...], "produces": name}, ...]``.

        Raises RecipeBookError on malformed records or duplicate products.
        """
        if not isinstance(records, list):
            raise RecipeBookError(
                f"Expected a list of recipes, got {type(records).__name__}"
            )
        recipes: list[CraftingRecipe] = []
        for index, record in enumerate(records):
            try:
                needed = tuple(
                    ItemAndCount(parse_item(entry["item"]), _parse_count(entry["count"]))
                    for entry in record["needed"]
                )
                recipes.append(
                    CraftingRecipe(needed=needed, produces=parse_item(record["produces"]))
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise RecipeBookError(f"Invalid recipe #{index}: {exc!r}") from exc
        return cls(recipes)

    def to_records(self) -> list[dict[str, Any]]:
        """Serialize to the record form accepted by :meth:`from_records`."""
        return [
            {
                "needed": [
                    {"item": item_name(entry.item), "count": entry.count}
                    for entry in recipe.needed
                ],
                "produces": item_name(recipe.produces),
            }
            for recipe in self._recipes
        ]


def _parse_count(value: Any) -> int:
    # bool is an int subclass; JSON true must not load as 1.
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"count must be an integer, got {value!r}")
    return value
