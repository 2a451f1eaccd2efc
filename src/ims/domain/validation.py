"""Field validators.

Every validator is a pure predicate: it returns a bool, never raises and
never touches state.  Callers decide what to do with a ``False`` (the
Inventory raises InvalidFieldError, the menu re-prompts).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ims.domain.model.value_objects import Category, round_price

MAX_PRICE_INTEGER_DIGITS = 10


def normalize_id(item_id: str) -> str:
    """Canonical form of an item ID: surrounding whitespace removed, upper-case."""
    return item_id.strip().upper()


def normalize_category(category: str) -> str:
    return category.strip().lower()


def validate_id(item_id: str) -> bool:
    """Non-empty and made of ASCII letters and digits only."""
    if not isinstance(item_id, str) or not item_id:
        return False
    return item_id.isascii() and item_id.isalnum()


def validate_quantity(quantity: int) -> bool:
    """Quantities are non-negative integers; zero means out of stock."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return False
    return quantity >= 0


def validate_price(price: Decimal) -> bool:
    """Strictly positive, with at most ten digits before the decimal point.

    The digit count is taken after rounding to cents, so ``9999999999.995``
    (which displays as ``10000000000.00``) is rejected.
    """
    if isinstance(price, bool) or not isinstance(price, (Decimal, int)):
        return False
    price = Decimal(price)
    if not price.is_finite() or price <= 0:
        return False
    try:
        whole_part = int(round_price(price))
    except InvalidOperation:
        return False
    return len(str(whole_part)) <= MAX_PRICE_INTEGER_DIGITS


def validate_category(category: str | Category) -> bool:
    """Case-insensitive membership in the fixed category set."""
    return Category.lookup(category) is not None
