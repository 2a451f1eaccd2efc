"""Raw text → semantic values for the console.

Parse failures are the CLI layer's concern: they raise click.BadParameter
and never reach the domain.  Range rules (positive price, non-negative
quantity, ...) are checked afterwards by the domain validators.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click


def parse_quantity(raw: str) -> int:
    """Parse a whole number made of digits only (no sign, no spaces inside)."""
    text = raw.strip()
    if not text or not (text.isascii() and text.isdigit()):
        raise click.BadParameter("Invalid input, please enter a valid number.")
    return int(text)


def parse_price(raw: str) -> Decimal:
    """Parse a plain decimal such as ``19.99``, ``5`` or ``.5``.

    Signs, exponents and thousands separators are rejected.
    """
    text = raw.strip()
    whole, dot, fraction = text.partition(".")
    digits = whole + fraction
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise click.BadParameter(
            "Invalid price, please enter a positive value (only up to 10 digits)."
        )
    try:
        return Decimal(text)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price {raw!r}.") from None


def parse_choice(raw: str, options: range | list[int]) -> int:
    """Parse a numbered menu choice that must be one of *options*."""
    text = raw.strip()
    if text.isascii() and text.isdigit() and int(text) in options:
        return int(text)
    allowed = " or ".join(str(option) for option in options)
    raise click.BadParameter(f"Invalid choice! Please enter {allowed}.")
