"""Item entity: one inventory entry.

The Item is a plain data holder. It performs no validation of its own:
the Inventory validates every value before constructing or mutating one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from ims.domain.model.value_objects import Category


@dataclass
class Item:
    """A stock-keeping record.

    ``id``, ``name`` and ``category`` are fixed for the item's lifetime;
    ``quantity`` and ``price`` change only through the mutators below.
    """

    id: str
    name: str
    quantity: int
    price: Decimal
    category: Category

    def set_quantity(self, quantity: int) -> None:
        self.quantity = quantity

    def set_price(self, price: Decimal) -> None:
        self.price = price

    def copy(self) -> Item:
        """Return a detached copy, safe to hand out as a snapshot."""
        return replace(self)
