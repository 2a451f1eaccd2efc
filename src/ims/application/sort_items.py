"""Application service: Sort Items use case (query).

Sorts a snapshot of the inventory; the inventory's own order is never
changed.
"""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.exceptions import ValidationError
from ims.domain.model.inventory import Inventory
from ims.domain.service.sorter import SortKey, SortOrder, sort_snapshot

MIN_ITEMS_TO_SORT = 2


class SortItemsHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        key: SortKey | str,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> list[ItemDTO]:
        if len(self._inventory) < MIN_ITEMS_TO_SORT:
            raise ValidationError(
                "Not enough items to sort! Please ensure you have more than 1 item"
            )
        ordered = sort_snapshot(self._inventory.snapshot(), key, order)
        return [ItemDTO.from_item(item) for item in ordered]
