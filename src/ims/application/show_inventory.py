"""Application service: Show Inventory use case (query).

Lists every item, or only the items of one category, in inventory order.
"""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.model.inventory import Inventory
from ims.domain.model.value_objects import Category


class ShowInventoryHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, category: str | Category | None = None) -> list[ItemDTO]:
        if category is None:
            items = self._inventory.list_all()
        else:
            items = self._inventory.filter_by_category(category)
        return [ItemDTO.from_item(item) for item in items]
