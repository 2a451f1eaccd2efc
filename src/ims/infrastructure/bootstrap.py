"""Composition root: wires the inventory, handlers and settings together.

This is the only place in the codebase that knows about *all* layers.
A Workspace lives for exactly one run of the console; its Inventory is
discarded when the process exits.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.application.add_item import AddItemHandler
from ims.application.low_stock import LowStockHandler
from ims.application.remove_item import RemoveItemHandler
from ims.application.search_item import SearchItemHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.application.sort_items import SortItemsHandler
from ims.application.update_item import UpdateItemHandler
from ims.domain.model.inventory import Inventory
from ims.infrastructure.config import Settings, get_settings


@dataclass
class Workspace:
    """One Inventory plus the handlers that operate on it."""

    settings: Settings
    inventory: Inventory = field(default_factory=Inventory)

    def __post_init__(self) -> None:
        self.add_item = AddItemHandler(self.inventory)
        self.update_item = UpdateItemHandler(self.inventory)
        self.remove_item = RemoveItemHandler(self.inventory)
        self.search_item = SearchItemHandler(self.inventory)
        self.show_inventory = ShowInventoryHandler(self.inventory)
        self.sort_items = SortItemsHandler(self.inventory)
        self.low_stock = LowStockHandler(
            self.inventory, threshold=self.settings.low_stock_threshold
        )


def build_workspace(settings: Settings | None = None) -> Workspace:
    return Workspace(settings=settings or get_settings())
