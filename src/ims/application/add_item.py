"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from ims.application.dto import ItemDTO, ItemSpec
from ims.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, spec: ItemSpec) -> ItemDTO:
        """Add a new item to the inventory.

        Raises InvalidFieldError or DuplicateIdError; the inventory is
        untouched in either case.
        """
        item = self._inventory.create(
            item_id=spec.id,
            name=spec.name,
            quantity=spec.quantity,
            price=spec.price,
            category=spec.category,
        )
        logger.info("Added item %s (%s)", item.id, item.category.value)
        return ItemDTO.from_item(item)
