"""Tests for item value types and world-object tables."""
from __future__ import annotations

import pytest
from survival_craft import EMPTY_SLOT, Item, ItemAndCount, ItemObject, Placeable, Tool, ToolItem
from survival_craft.types import as_harvest, as_pickup, item_name, parse_item


class TestItemEquality:
    def test_tool_items_compare_structurally(self) -> None:
        assert ToolItem(Tool.AXE) == ToolItem(Tool.AXE)
        assert hash(ToolItem(Tool.AXE)) == hash(ToolItem(Tool.AXE))

    def test_tool_item_differs_from_plain_items(self) -> None:
        assert ToolItem(Tool.AXE) != Item.WOOD


class TestItemNames:
    def test_plain_name(self) -> None:
        assert item_name(Item.FLINT) == "flint"

    def test_tool_name(self) -> None:
        assert item_name(ToolItem(Tool.AXE)) == "tool:axe"

    def test_parse_tool(self) -> None:
        assert parse_item("tool:axe") == ToolItem(Tool.AXE)

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_item("diamond")

    def test_parse_unknown_tool_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_item("tool:hammer")


class TestItemAndCount:
    def test_default_is_empty(self) -> None:
        assert ItemAndCount() == EMPTY_SLOT
        assert EMPTY_SLOT.is_empty() is True

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="count must be >= 0"):
            ItemAndCount(Item.FLINT, -1)

    def test_zero_count_with_stale_item_is_empty(self) -> None:
        stale = ItemAndCount(Item.FLINT, 0)
        assert stale.is_empty() is True
        assert stale.normalized() == EMPTY_SLOT

    def test_normalized_keeps_real_stack(self) -> None:
        stack = ItemAndCount(Item.TWIG, 3)
        assert stack.normalized() is stack

    def test_str(self) -> None:
        assert str(ItemAndCount(ToolItem(Tool.AXE), 1)) == "1x tool:axe"


class TestWorldObjects:
    def test_tree_needs_axe(self) -> None:
        harvest = as_harvest(Placeable.TREE)
        assert harvest is not None
        assert harvest.item == Item.WOOD
        assert harvest.tool_required == Tool.AXE
        assert harvest.drops == Placeable.STUMP

    def test_sapling_needs_no_tool(self) -> None:
        harvest = as_harvest(Placeable.SAPLING)
        assert harvest is not None
        assert harvest.item == Item.TWIG
        assert harvest.tool_required is None

    def test_stump_not_harvestable(self) -> None:
        assert as_harvest(Placeable.STUMP) is None

    def test_item_on_ground_is_pickup(self) -> None:
        assert as_pickup(ItemObject(Item.FLINT)) == Item.FLINT

    def test_harvestable_is_not_pickup(self) -> None:
        assert as_pickup(Placeable.GRASS) is None

    def test_empty_item_object_is_not_pickup(self) -> None:
        assert as_pickup(ItemObject(Item.NONE)) is None
