"""Application service: Low Stock use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.model.inventory import DEFAULT_LOW_STOCK_THRESHOLD, Inventory


class LowStockHandler:

    def __init__(
        self,
        inventory: Inventory,
        threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._inventory = inventory
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def handle(self, threshold: int | None = None) -> list[ItemDTO]:
        """Items at or below *threshold* (the configured default if omitted)."""
        limit = self._threshold if threshold is None else threshold
        return [ItemDTO.from_item(item) for item in self._inventory.filter_low_stock(limit)]
