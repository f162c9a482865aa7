"""Actor components: the owner of an inventory and a tool hand."""
from __future__ import annotations

from dataclasses import dataclass, field

from survival_craft.config import InventoryConfig
from survival_craft.inventory import Inventory
from survival_craft.types import Tool, ToolItem


@dataclass
class Hands:
    """The tool currently held, if any. A held tool is not in the inventory."""

    tool: Tool | None = None

    def item(self) -> ToolItem | None:
        if self.tool is None:
            return None
        return ToolItem(self.tool)


@dataclass
class Actor:
    name: str
    inventory: Inventory = field(default_factory=Inventory)
    hands: Hands = field(default_factory=Hands)

    @classmethod
    def create(cls, name: str, config: InventoryConfig | None = None) -> Actor:
        """Create an actor with an empty inventory sized by *config*."""
        if config is None:
            config = InventoryConfig()
        return cls(name=name, inventory=Inventory.from_config(config))
