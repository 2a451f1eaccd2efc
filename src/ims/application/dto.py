"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  The CLI never holds a
reference to a live Item, so a later removal cannot leave it dangling.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.model.item import Item
from ims.domain.model.value_objects import format_price


@dataclass(frozen=True)
class ItemSpec:
    """Input: the field values for a new item, already parsed."""

    id: str
    name: str
    quantity: int
    price: Decimal
    category: str


@dataclass(frozen=True)
class ItemDTO:
    """Output: a single item as displayed to the user."""

    id: str
    name: str
    category: str
    quantity: int
    price: str  # formatted, e.g. "19.99"

    @staticmethod
    def from_item(item: Item) -> ItemDTO:
        return ItemDTO(
            id=item.id,
            name=item.name,
            category=item.category.value,
            quantity=item.quantity,
            price=format_price(item.price),
        )
