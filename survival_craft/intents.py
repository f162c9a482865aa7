"""Intent dataclasses raised by the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from survival_craft.types import ItemType, WorldObject, as_harvest, as_pickup


@dataclass(frozen=True)
class Craft:
    """Request to craft one unit of an item."""
    item: ItemType


@dataclass(frozen=True)
class Equip:
    """Request to move a tool from the inventory into the hands."""
    item: ItemType


@dataclass(frozen=True)
class Unequip:
    """Request to put the held tool back into the inventory."""


@dataclass(frozen=True)
class PickUp:
    """Request to store *count* of an item found in the world."""
    item: ItemType
    count: int = 1
    in_range: bool = True


@dataclass(frozen=True)
class Harvest:
    """Request to harvest a world object such as a tree or sapling."""
    target: WorldObject
    in_range: bool = True


Intent = Union[Craft, Equip, Unequip, PickUp, Harvest]


def interaction_for(obj: WorldObject, in_range: bool = True) -> PickUp | Harvest | None:
    """Map a clicked world object to the intent it triggers, if any."""
    if as_harvest(obj) is not None:
        return Harvest(obj, in_range=in_range)
    item = as_pickup(obj)
    if item is not None:
        return PickUp(item, in_range=in_range)
    return None
