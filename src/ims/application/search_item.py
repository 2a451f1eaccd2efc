"""Application service: Search Item use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.model.inventory import Inventory


class SearchItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, item_id: str) -> ItemDTO:
        return ItemDTO.from_item(self._inventory.find_by_id(item_id))
