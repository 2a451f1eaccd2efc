"""Application service: Update Item use case.

Only quantity and price can change after an item is created.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.application.dto import ItemDTO
from ims.domain.model.inventory import Inventory
from ims.domain.model.value_objects import UpdatableField

logger = logging.getLogger(__name__)


class UpdateItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        item_id: str,
        field: str | UpdatableField,
        new_value: int | Decimal,
    ) -> ItemDTO:
        item = self._inventory.update(item_id, field, new_value)
        logger.info("Updated %s of item %s", UpdatableField.parse(field).value, item.id)
        return ItemDTO.from_item(item)
