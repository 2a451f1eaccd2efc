"""Text rendering of item DTOs for the console."""

from __future__ import annotations

from collections.abc import Iterable

from ims.application.dto import ItemDTO

LINE_WIDTH = 65


def banner(title: str) -> str:
    """Three-line title block with the title centred between rules."""
    rule = "=" * LINE_WIDTH
    centred = f"{title:>{(LINE_WIDTH + len(title)) // 2}}"
    return f"{rule}\n{centred}\n{rule}"


def table_header() -> str:
    columns = (
        f"{'CATEGORY':<15}{'ID':<10}{'NAME':<20}{'QUANTITY':>10}{'PRICE':>10}"
    )
    return f"{columns}\n{'-' * LINE_WIDTH}"


def table_row(item: ItemDTO) -> str:
    return (
        f"{item.category:<15}{item.id:<10}{item.name:<20}"
        f"{item.quantity:>10}{item.price:>10}"
    )


def render_table(items: Iterable[ItemDTO]) -> str:
    lines = [table_header()]
    lines.extend(table_row(item) for item in items)
    return "\n".join(lines)


def render_item(item: ItemDTO) -> str:
    """Vertical detail view of one item."""
    return "\n".join(
        [
            f"Category: {item.category}",
            f"ID: {item.id}",
            f"Item Name: {item.name}",
            f"Price: {item.price}",
            f"Quantity: {item.quantity}",
        ]
    )
