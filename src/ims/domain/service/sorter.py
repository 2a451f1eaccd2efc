"""Domain service: stable ordering of inventory snapshots.

Sorting never touches the Inventory itself.  Callers pass a snapshot
(``Inventory.snapshot()``) or any other iterable of Items and get back a
new list.  Python's ``sorted`` is stable in both directions, so items with
equal keys keep their original relative order whether the sort is
ascending or descending.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from ims.domain.exceptions import InvalidFieldError
from ims.domain.model.item import Item


class SortKey(Enum):
    PRICE = "price"
    QUANTITY = "quantity"


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def sort_snapshot(
    items: Iterable[Item],
    key: SortKey | str,
    order: SortOrder | str = SortOrder.ASCENDING,
) -> list[Item]:
    """Return *items* ordered by *key*; ties keep their input order."""
    sort_key = _coerce(SortKey, key, "sort key")
    sort_order = _coerce(SortOrder, order, "sort order")

    snapshot = list(items)
    if sort_key is SortKey.PRICE:
        return sorted(
            snapshot,
            key=lambda item: item.price,
            reverse=sort_order is SortOrder.DESCENDING,
        )
    return sorted(
        snapshot,
        key=lambda item: item.quantity,
        reverse=sort_order is SortOrder.DESCENDING,
    )


def _coerce(enum_type, value, label: str):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise InvalidFieldError(label, f"Invalid {label} {value!r} (expected {choices})") from None
