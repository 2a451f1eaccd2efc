"""Interactive menu loop.

Each menu action collects raw text, parses and pre-validates it, then calls
the matching application handler.  Typing ``C`` at any field prompt cancels
the current action.  Invalid input is re-prompted a bounded number of times
before the action is abandoned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from typing import TypeVar

import click

from ims.application.dto import ItemDTO, ItemSpec
from ims.domain.exceptions import DomainException, ItemNotFoundError
from ims.domain.model.value_objects import Category, UpdatableField
from ims.domain.service.sorter import SortKey, SortOrder
from ims.domain.validation import (
    normalize_category,
    normalize_id,
    validate_category,
    validate_id,
    validate_price,
    validate_quantity,
)
from ims.infrastructure.bootstrap import Workspace
from ims.infrastructure.cli.input_parsing import parse_choice, parse_price, parse_quantity
from ims.infrastructure.cli.rendering import banner, render_item, render_table

T = TypeVar("T")

CANCEL_KEY = "c"

MENU_OPTIONS = (
    "Add Item",
    "Update Item",
    "Remove Item",
    "Display Items by Category",
    "Display All Items",
    "Search Item",
    "Sort Items",
    "Display Low Stock Items",
    "Exit",
)
EXIT_CHOICE = len(MENU_OPTIONS)

# Menu order of the category view, not the enum's declaration order.
CATEGORY_CHOICES = {
    1: Category.CLOTHING,
    2: Category.ELECTRONICS,
    3: Category.ENTERTAINMENT,
}

logger = logging.getLogger(__name__)


class ActionCancelled(Exception):
    """The user abandoned the current action."""


class InventoryMenu:

    def __init__(self, workspace: Workspace) -> None:
        self._ws = workspace
        self._max_attempts = workspace.settings.max_input_attempts
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_item,
            2: self.update_item,
            3: self.remove_item,
            4: self.show_by_category,
            5: self.show_all,
            6: self.search_item,
            7: self.sort_items,
            8: self.show_low_stock,
        }

    # --- Main loop ------------------------------------------------------------

    def run(self) -> None:
        while True:
            click.echo(banner("MENU"))
            for number, label in enumerate(MENU_OPTIONS, start=1):
                click.echo(f"{number} - {label}")
            choice = click.prompt(
                "\n> Please make a choice\n[CHOICE]",
                type=click.IntRange(1, EXIT_CHOICE),
            )
            if choice == EXIT_CHOICE:
                click.echo("Exiting...")
                return
            try:
                self._actions[choice]()
            except ActionCancelled as exc:
                message = str(exc) or "Action cancelled, going back to menu..."
                click.echo(f"\n> {message}\n")

    # --- Actions --------------------------------------------------------------

    def add_item(self) -> None:
        click.echo(banner("ADDING ITEM"))
        click.echo("> Input 'C' to cancel anytime.\n")

        category = self._ask_until_valid("[Category]", self._convert_category)
        item_id = self._ask_until_valid("[ID]", self._convert_new_id)
        name = self._ask("[Item Name]")
        price = self._ask_until_valid("[Price]", self._convert_price)
        quantity = self._ask_until_valid("[Quantity]", self._convert_quantity)

        try:
            item = self._ws.add_item.handle(
                ItemSpec(id=item_id, name=name, quantity=quantity, price=price, category=category)
            )
        except DomainException as exc:
            click.echo(f"\n> Error: {exc}")
            return

        click.echo("\n> Item added successfully!")
        click.echo(render_item(item))

    def update_item(self) -> None:
        click.echo(banner("UPDATE ITEM"))
        if self._ws.inventory.is_empty:
            click.echo("> No items to update in inventory! Please add some items first.")
            return

        while True:
            click.echo("> Input 'C' to cancel anytime.")
            item = self._ask_until_valid("[ID]", self._convert_existing_id)
            click.echo("\n> Item found, updating the following item...\n")
            click.echo(render_item(item))

            click.echo("\n1 - Update Quantity\n2 - Update Price")
            choice = self._ask_until_valid("[Choice]", lambda raw: parse_choice(raw, [1, 2]))
            if choice == 1:
                field = UpdatableField.QUANTITY
                value: int | Decimal = self._ask_until_valid("[Quantity]", self._convert_quantity)
            else:
                field = UpdatableField.PRICE
                value = self._ask_until_valid("[Price]", self._convert_price)

            try:
                updated = self._ws.update_item.handle(item.id, field, value)
            except DomainException as exc:
                click.echo(f"> {field.value.capitalize()} update failed: {exc}")
            else:
                click.echo(f"\n> {field.value.capitalize()} updated successfully.")
                click.echo(render_item(updated))

            if not click.confirm("\n> Update another item?", default=False):
                break
        click.echo("> Exiting update item process.")

    def remove_item(self) -> None:
        click.echo(banner("REMOVE ITEM"))
        if self._ws.inventory.is_empty:
            click.echo("> No items to remove in inventory! Please add some items first.")
            return

        while True:
            item_id = normalize_id(self._ask("> Enter ID to remove"))
            try:
                item = self._ws.search_item.handle(item_id)
            except ItemNotFoundError as exc:
                click.echo(f"> {exc}.")
            else:
                click.echo("\n> Item found:")
                click.echo(render_item(item))
                if click.confirm("\n> Confirm to delete item?", default=False):
                    self._ws.remove_item.handle(item.id)
                    click.echo("\n> Item removed successfully.")
                else:
                    click.echo("\n> Item removal cancelled.")

            if self._ws.inventory.is_empty or not click.confirm(
                "\n> Remove another item?", default=False
            ):
                return

    def show_by_category(self) -> None:
        click.echo(banner("ITEMS BY CATEGORY"))
        if self._ws.inventory.is_empty:
            click.echo("> No items to display in inventory! Please add some items first.")
            return

        while True:
            click.echo("> Select category:")
            for number, category in CATEGORY_CHOICES.items():
                click.echo(f"{number} - {category.label}")
            choice = self._ask_until_valid(
                "[CHOICE]", lambda raw: parse_choice(raw, list(CATEGORY_CHOICES))
            )
            category = CATEGORY_CHOICES[choice]
            items = self._ws.show_inventory.handle(category)

            click.echo(banner("ITEMS BY CATEGORY"))
            click.echo(render_table(items))
            if not items:
                click.echo(f"> No items found in the {category.label} category.")

            if not click.confirm("\n> View another category?", default=False):
                return

    def show_all(self) -> None:
        click.echo(banner("INVENTORY"))
        items = self._ws.show_inventory.handle()
        if not items:
            click.echo("> No items to display in inventory! Please add some items first.")
            return
        click.echo(render_table(items))

    def search_item(self) -> None:
        click.echo(banner("SEARCH ITEM"))
        if self._ws.inventory.is_empty:
            click.echo("> No items to search in inventory! Please add some items first.")
            return

        while True:
            item_id = normalize_id(self._ask("> Enter ID to search"))
            try:
                item = self._ws.search_item.handle(item_id)
            except ItemNotFoundError as exc:
                click.echo(f"> {exc}.")
            else:
                click.echo("> Item found!\n")
                click.echo(render_item(item))

            if not click.confirm("\n> Search another item?", default=False):
                return

    def sort_items(self) -> None:
        click.echo(banner("SORTED ITEMS"))
        while True:
            if len(self._ws.inventory) < 2:
                click.echo("> Not enough items to sort! Please ensure you have more than 1 item.")
                return

            click.echo("> How would you like to sort the items?\n1 - Price\n2 - Quantity")
            key_choice = self._ask_until_valid("[CHOICE]", lambda raw: parse_choice(raw, [1, 2]))
            click.echo("\n> Sort in which order?\n1 - Ascending\n2 - Descending")
            order_choice = self._ask_until_valid("[CHOICE]", lambda raw: parse_choice(raw, [1, 2]))

            key = SortKey.PRICE if key_choice == 1 else SortKey.QUANTITY
            order = SortOrder.ASCENDING if order_choice == 1 else SortOrder.DESCENDING
            try:
                items = self._ws.sort_items.handle(key, order)
            except DomainException as exc:
                click.echo(f"> {exc}.")
                return

            click.echo(banner("SORTED ITEMS"))
            click.echo(render_table(items))

            if not click.confirm("> Would you like to sort again?", default=False):
                return

    def show_low_stock(self) -> None:
        click.echo(banner("MONITORING LOW STOCK"))
        if self._ws.inventory.is_empty:
            click.echo("> No items to display in inventory! Please add some items first.")
            return

        items = self._ws.low_stock.handle()
        click.echo(render_table(items))
        if not items:
            click.echo("\n> No items are currently low in stock.")

    # --- Prompt helpers -------------------------------------------------------

    def _ask(self, label: str) -> str:
        raw = click.prompt(label, default="", show_default=False)
        if raw.strip().lower() == CANCEL_KEY:
            raise ActionCancelled()
        return raw.strip()

    def _ask_until_valid(self, label: str, convert: Callable[[str], T]) -> T:
        """Prompt until *convert* accepts the answer, at most ``max_attempts`` times."""
        for _ in range(self._max_attempts):
            raw = self._ask(label)
            try:
                return convert(raw)
            except (click.BadParameter, DomainException) as exc:
                click.echo(f"\n> {exc}\n")
        logger.info("Giving up on %s after %d invalid attempts", label, self._max_attempts)
        raise ActionCancelled("Too many invalid attempts, going back to menu...")

    # --- Converters: raw text -> validated value -----------------------------

    @staticmethod
    def _convert_category(raw: str) -> str:
        if not validate_category(raw):
            raise click.BadParameter(
                "Invalid category, please enter one of the following: "
                "clothing, entertainment, electronics."
            )
        return normalize_category(raw)

    def _convert_new_id(self, raw: str) -> str:
        item_id = normalize_id(raw)
        if not validate_id(item_id):
            raise click.BadParameter(
                "Invalid ID, please enter a valid ID (alphanumeric characters only)."
            )
        if item_id in self._ws.inventory:
            raise click.BadParameter(
                f"Error: An item with ID '{item_id}' already exists in the inventory."
            )
        return item_id

    def _convert_existing_id(self, raw: str) -> ItemDTO:
        item_id = normalize_id(raw)
        if not validate_id(item_id):
            raise click.BadParameter("Invalid ID.")
        return self._ws.search_item.handle(item_id)

    @staticmethod
    def _convert_price(raw: str) -> Decimal:
        price = parse_price(raw)
        if not validate_price(price):
            raise click.BadParameter(
                "Invalid price, please enter a positive value (only up to 10 digits)."
            )
        return price

    @staticmethod
    def _convert_quantity(raw: str) -> int:
        quantity = parse_quantity(raw)
        if not validate_quantity(quantity):
            raise click.BadParameter("Invalid quantity, please enter a non-negative value.")
        return quantity
