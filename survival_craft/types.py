"""Core value types for items, world objects and stacks."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Tool(Enum):
    AXE = "axe"


class Item(Enum):
    """Plain item kinds. ``NONE`` marks an empty slot."""

    NONE = "none"
    FLINT = "flint"
    TWIG = "twig"
    GRASS = "grass"
    WOOD = "wood"
    FIRE = "fire"


@dataclass(frozen=True)
class ToolItem:
    """An item that wraps a tool kind, e.g. ``ToolItem(Tool.AXE)``."""

    tool: Tool

    def __repr__(self) -> str:
        return f"ToolItem({self.tool.name})"


ItemType = Union[Item, ToolItem]

_TOOL_PREFIX = "tool:"


def item_name(item: ItemType) -> str:
    """Stable string form used by config files (``"flint"``, ``"tool:axe"``)."""
    if isinstance(item, ToolItem):
        return f"{_TOOL_PREFIX}{item.tool.value}"
    return item.value


def parse_item(name: str) -> ItemType:
    """Inverse of :func:`item_name`. Raises ValueError for unknown names."""
    if not isinstance(name, str):
        raise ValueError(f"item name must be a string, got {name!r}")
    if name.startswith(_TOOL_PREFIX):
        return ToolItem(Tool(name[len(_TOOL_PREFIX) :]))
    return Item(name)


@dataclass(frozen=True)
class ItemAndCount:
    """An item kind paired with a non-negative quantity.

    Attributes:
        item: The item kind.
        count: Quantity; zero means the pair counts as empty whatever ``item`` is.
    """

    item: ItemType = Item.NONE
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")

    def is_empty(self) -> bool:
        return self.count == 0 or self.item == Item.NONE

    def normalized(self) -> ItemAndCount:
        """Return the canonical form: empty pairs collapse to ``(NONE, 0)``."""
        if self.is_empty():
            return EMPTY_SLOT
        return self

    def __str__(self) -> str:
        return f"{self.count}x {item_name(self.item)}"


EMPTY_SLOT = ItemAndCount()


@dataclass(frozen=True)
class Overflow:
    """The part of an add request that did not fit."""

    remaining: int


class Placeable(Enum):
    """World objects that are not simple items on the ground."""

    TREE = "tree"
    STUMP = "stump"
    SAPLING = "sapling"
    DEAD_SAPLING = "dead_sapling"
    GRASS = "grass"
    PLUCKED_GRASS = "plucked_grass"
    GROWING_TREE = "growing_tree"
    CAMP_FIRE = "camp_fire"


@dataclass(frozen=True)
class ItemObject:
    """An item lying in the world."""

    item: ItemType


WorldObject = Union[ItemObject, Placeable]


@dataclass(frozen=True)
class Harvestable:
    """What harvesting a world object yields.

    Attributes:
        item: Item given to the harvester.
        tool_required: Tool that must be in hand, or None.
        drops: Object left behind in the world, or None.
    """

    item: ItemType
    tool_required: Tool | None = None
    drops: WorldObject | None = None


_HARVEST_TABLE: dict[Placeable, Harvestable] = {
    Placeable.SAPLING: Harvestable(Item.TWIG, drops=Placeable.DEAD_SAPLING),
    Placeable.GRASS: Harvestable(Item.GRASS, drops=Placeable.PLUCKED_GRASS),
    Placeable.TREE: Harvestable(
        Item.WOOD, tool_required=Tool.AXE, drops=Placeable.STUMP
    ),
}


def as_harvest(obj: WorldObject) -> Harvestable | None:
    if isinstance(obj, Placeable):
        return _HARVEST_TABLE.get(obj)
    return None


def as_pickup(obj: WorldObject) -> ItemType | None:
    """Return the item picked up from *obj*, or None if it cannot be picked up."""
    if as_harvest(obj) is not None:
        return None
    if isinstance(obj, ItemObject) and obj.item != Item.NONE:
        return obj.item
    return None
