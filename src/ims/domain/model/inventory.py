"""Inventory aggregate: the ordered, owning collection of Items.

The Inventory is the only place Items are created, mutated or destroyed.
Invariants:
- every Item ID is unique (compared after normalization to upper-case)
- insertion order is preserved by every operation
- a failed operation leaves the Inventory exactly as it was
"""

from __future__ import annotations

from decimal import Decimal

from ims.domain.exceptions import DuplicateIdError, InvalidFieldError, ItemNotFoundError
from ims.domain.model.item import Item
from ims.domain.model.value_objects import Category, UpdatableField
from ims.domain.validation import (
    MAX_PRICE_INTEGER_DIGITS,
    normalize_id,
    validate_id,
    validate_price,
    validate_quantity,
)

DEFAULT_LOW_STOCK_THRESHOLD = 5


class Inventory:
    """Aggregate root for the in-memory stock list."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    # --- Commands -------------------------------------------------------------

    def create(
        self,
        item_id: str,
        name: str,
        quantity: int,
        price: Decimal,
        category: str | Category,
    ) -> Item:
        """Validate and append a new Item.

        The ID is checked first (malformed, then duplicate), then the
        remaining fields.  Nothing is appended unless every check passes.
        """
        canonical_id = self._canonical_id(item_id)
        if self._index_of(canonical_id) is not None:
            raise DuplicateIdError(canonical_id)

        _check_quantity(quantity)
        _check_price(price)
        parsed_category = Category.parse(category)

        item = Item(
            id=canonical_id,
            name=name,
            quantity=quantity,
            price=Decimal(price),
            category=parsed_category,
        )
        self._items.append(item)
        return item

    def update(
        self,
        item_id: str,
        field: str | UpdatableField,
        new_value: int | Decimal,
    ) -> Item:
        """Change the quantity or price of an existing Item in place."""
        target = UpdatableField.parse(field)
        item = self.find_by_id(item_id)

        if target is UpdatableField.QUANTITY:
            _check_quantity(new_value)  # type: ignore[arg-type]
            item.set_quantity(new_value)  # type: ignore[arg-type]
        else:
            _check_price(new_value)  # type: ignore[arg-type]
            item.set_price(Decimal(new_value))
        return item

    def remove(self, item_id: str) -> Item:
        """Delete an Item, keeping the relative order of the others."""
        canonical_id = self._lookup_id(item_id)
        index = self._index_of(canonical_id)
        if index is None:
            raise ItemNotFoundError(canonical_id)
        item = self._items.pop(index)
        return item

    # --- Queries --------------------------------------------------------------

    def find_by_id(self, item_id: str) -> Item:
        """Exact lookup on the normalized ID."""
        canonical_id = self._lookup_id(item_id)
        index = self._index_of(canonical_id)
        if index is None:
            raise ItemNotFoundError(canonical_id)
        return self._items[index]

    def filter_by_category(self, category: str | Category) -> list[Item]:
        """Items in *category*, in inventory order.

        An unknown category simply matches nothing.
        """
        wanted = Category.lookup(category)
        if wanted is None:
            return []
        return [item for item in self._items if item.category is wanted]

    def filter_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> list[Item]:
        """Items whose quantity is at or below *threshold*, in inventory order."""
        return [item for item in self._items if item.quantity <= threshold]

    def list_all(self) -> list[Item]:
        return list(self._items)

    def snapshot(self) -> tuple[Item, ...]:
        """Detached copies of every Item; mutating them does not affect the Inventory."""
        return tuple(item.copy() for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        if not isinstance(item_id, str):
            return False
        return self._index_of(normalize_id(item_id)) is not None

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, canonical_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == canonical_id:
                return index
        return None

    @staticmethod
    def _canonical_id(item_id: str) -> str:
        if not isinstance(item_id, str):
            raise InvalidFieldError("id", f"Invalid ID {item_id!r}")
        canonical_id = normalize_id(item_id)
        if not validate_id(canonical_id):
            raise InvalidFieldError(
                "id",
                f"Invalid ID {item_id!r}, please enter a valid ID "
                "(alphanumeric characters only)",
            )
        return canonical_id

    @staticmethod
    def _lookup_id(item_id: str) -> str:
        # Lookups never fail on format: a malformed ID just isn't there.
        if not isinstance(item_id, str):
            raise ItemNotFoundError(repr(item_id))
        return normalize_id(item_id)


def _check_quantity(quantity: int) -> None:
    if not validate_quantity(quantity):
        raise InvalidFieldError(
            "quantity", f"Invalid quantity {quantity!r}, please enter a non-negative whole number"
        )


def _check_price(price: Decimal) -> None:
    if not validate_price(price):
        raise InvalidFieldError(
            "price",
            f"Invalid price {price!r}, please enter a positive value "
            f"(only up to {MAX_PRICE_INTEGER_DIGITS} digits)",
        )
