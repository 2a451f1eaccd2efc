"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from ims.domain.exceptions import InvalidFieldError

CENTS = Decimal("0.01")


class Category(Enum):
    """The fixed set of inventory categories.

    Values are stored lower-case; lookups are case-insensitive.
    """

    CLOTHING = "clothing"
    ELECTRONICS = "electronics"
    ENTERTAINMENT = "entertainment"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def lookup(cls, text: str | Category) -> Category | None:
        """Return the matching category, or None when *text* names none."""
        if isinstance(text, Category):
            return text
        if not isinstance(text, str):
            return None
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    @classmethod
    def parse(cls, text: str | Category) -> Category:
        category = cls.lookup(text)
        if category is None:
            choices = ", ".join(c.value for c in cls)
            raise InvalidFieldError(
                "category",
                f"Invalid category {text!r}, please enter one of the following: {choices}",
            )
        return category


class UpdatableField(Enum):
    """Fields that may change after an item has been created."""

    QUANTITY = "quantity"
    PRICE = "price"

    @classmethod
    def parse(cls, field: str | UpdatableField) -> UpdatableField:
        if isinstance(field, UpdatableField):
            return field
        try:
            return cls(str(field).strip().lower())
        except ValueError:
            raise InvalidFieldError(
                str(field), f"Field {field!r} cannot be updated (only quantity or price)"
            ) from None


def round_price(price: Decimal) -> Decimal:
    """Round a price to cents, half-up, the way it is displayed."""
    return Decimal(price).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_price(price: Decimal) -> str:
    return f"{round_price(price):.2f}"
