"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from ims.application.dto import ItemDTO
from ims.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, item_id: str) -> ItemDTO:
        """Remove an item and return what it looked like."""
        item = self._inventory.remove(item_id)
        logger.info("Removed item %s", item.id)
        return ItemDTO.from_item(item)
