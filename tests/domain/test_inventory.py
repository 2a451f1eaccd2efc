"""Unit tests for the Inventory aggregate."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import DuplicateIdError, InvalidFieldError, ItemNotFoundError
from ims.domain.model.inventory import Inventory
from ims.domain.model.item import Item
from ims.domain.model.value_objects import Category, UpdatableField
from tests.builders import make_inventory


def _ids(items) -> list[str]:
    return [item.id for item in items]


class TestInventoryCreate:

    def test_create_then_find(self):
        inv = Inventory()
        inv.create("A1", "Shirt", 10, Decimal("19.99"), "clothing")
        assert inv.find_by_id("A1") == Item(
            id="A1", name="Shirt", quantity=10,
            price=Decimal("19.99"), category=Category.CLOTHING,
        )

    def test_id_is_upper_cased(self):
        inv = Inventory()
        item = inv.create(" a1 ", "Shirt", 10, Decimal("19.99"), "clothing")
        assert item.id == "A1"

    def test_category_is_normalized(self):
        inv = Inventory()
        item = inv.create("A1", "Shirt", 10, Decimal("19.99"), "CLOTHING")
        assert item.category is Category.CLOTHING

    def test_preserves_insertion_order(self):
        inv = make_inventory()
        assert _ids(inv.list_all()) == ["A1", "B2", "C3", "D4"]

    def test_every_created_id_is_found(self):
        inv = make_inventory()
        for item_id in ["A1", "B2", "C3", "D4"]:
            assert inv.find_by_id(item_id).id == item_id

    def test_zero_quantity_allowed(self):
        inv = Inventory()
        item = inv.create("Z0", "Sold out", 0, Decimal("1.00"), "electronics")
        assert item.quantity == 0

    def test_duplicate_id_rejected_case_insensitively(self):
        inv = make_inventory()
        before = inv.snapshot()
        with pytest.raises(DuplicateIdError, match="already exists") as exc_info:
            inv.create("a1", "Other shirt", 1, Decimal("5.00"), "clothing")
        assert exc_info.value.item_id == "A1"
        assert inv.snapshot() == before

    @pytest.mark.parametrize(
        "item_id, quantity, price, category, field",
        [
            ("A-1", 1, Decimal("1"), "clothing", "id"),
            ("", 1, Decimal("1"), "clothing", "id"),
            ("X1", -1, Decimal("1"), "clothing", "quantity"),
            ("X1", 1, Decimal("0"), "clothing", "price"),
            ("X1", 1, Decimal("10000000000"), "clothing", "price"),
            ("X1", 1, Decimal("1"), "food", "category"),
        ],
    )
    def test_invalid_fields_rejected(self, item_id, quantity, price, category, field):
        inv = make_inventory()
        before = inv.snapshot()
        with pytest.raises(InvalidFieldError) as exc_info:
            inv.create(item_id, "Thing", quantity, price, category)
        assert exc_info.value.field == field
        assert inv.snapshot() == before

    def test_non_string_id_rejected(self):
        with pytest.raises(InvalidFieldError):
            Inventory().create(7, "Thing", 1, Decimal("1"), "clothing")  # type: ignore[arg-type]


class TestInventoryFind:

    def test_lookup_is_case_insensitive(self):
        inv = make_inventory()
        assert inv.find_by_id("b2").name == "Headphones"

    def test_no_partial_match(self):
        inv = make_inventory()
        with pytest.raises(ItemNotFoundError, match="not found"):
            inv.find_by_id("A")

    def test_find_returns_live_item(self):
        inv = make_inventory()
        inv.find_by_id("A1").set_quantity(1)
        assert inv.find_by_id("A1").quantity == 1

    def test_contains(self):
        inv = make_inventory()
        assert "c3" in inv
        assert "ZZ" not in inv
        assert 3 not in inv


class TestInventoryUpdate:

    def test_update_quantity_changes_only_quantity(self):
        inv = make_inventory()
        original = inv.find_by_id("A1").copy()
        inv.update("a1", UpdatableField.QUANTITY, 3)
        updated = inv.find_by_id("A1")
        assert updated.quantity == 3
        assert (updated.id, updated.name, updated.price, updated.category) == (
            original.id, original.name, original.price, original.category,
        )

    def test_update_price_changes_only_price(self):
        inv = make_inventory()
        original = inv.find_by_id("B2").copy()
        inv.update("B2", "price", Decimal("49.00"))
        updated = inv.find_by_id("B2")
        assert updated.price == Decimal("49.00")
        assert (updated.id, updated.name, updated.quantity, updated.category) == (
            original.id, original.name, original.quantity, original.category,
        )

    def test_update_preserves_order(self):
        inv = make_inventory()
        inv.update("C3", "quantity", 1)
        assert _ids(inv.list_all()) == ["A1", "B2", "C3", "D4"]

    def test_update_unknown_id(self):
        inv = make_inventory()
        with pytest.raises(ItemNotFoundError):
            inv.update("ZZ", "quantity", 1)

    def test_update_invalid_value_leaves_item_unchanged(self):
        inv = make_inventory()
        with pytest.raises(InvalidFieldError, match="Invalid price"):
            inv.update("A1", "price", Decimal("-1"))
        assert inv.find_by_id("A1").price == Decimal("19.99")

    def test_update_other_field_rejected(self):
        inv = make_inventory()
        with pytest.raises(InvalidFieldError, match="cannot be updated"):
            inv.update("A1", "name", "Blouse")  # type: ignore[arg-type]


class TestInventoryRemove:

    def test_remove_then_find_fails(self):
        inv = make_inventory()
        removed = inv.remove("b2")
        assert removed.id == "B2"
        with pytest.raises(ItemNotFoundError):
            inv.find_by_id("B2")

    def test_remove_preserves_relative_order(self):
        inv = make_inventory()
        inv.remove("B2")
        assert _ids(inv.list_all()) == ["A1", "C3", "D4"]

    def test_remove_unknown_leaves_inventory_unchanged(self):
        inv = make_inventory()
        before = inv.snapshot()
        with pytest.raises(ItemNotFoundError):
            inv.remove("ZZ")
        assert inv.snapshot() == before

    def test_removed_id_can_be_reused(self):
        inv = make_inventory()
        inv.remove("A1")
        inv.create("A1", "Scarf", 2, Decimal("9.00"), "clothing")
        assert _ids(inv.list_all()) == ["B2", "C3", "D4", "A1"]


class TestInventoryQueries:

    def test_filter_by_category_case_insensitive_in_store_order(self):
        inv = make_inventory()
        assert _ids(inv.filter_by_category("CLOTHING")) == ["A1", "D4"]

    def test_filter_by_unknown_category_is_empty(self):
        inv = make_inventory()
        assert inv.filter_by_category("food") == []

    def test_categories_partition_the_inventory(self):
        inv = make_inventory()
        union = [item for category in Category for item in inv.filter_by_category(category)]
        assert sorted(_ids(union)) == sorted(_ids(inv.list_all()))

    def test_low_stock_default_threshold(self):
        inv = make_inventory()
        assert _ids(inv.filter_low_stock()) == ["B2", "D4"]

    def test_low_stock_custom_threshold(self):
        inv = make_inventory()
        assert _ids(inv.filter_low_stock(10)) == ["A1", "B2", "D4"]

    def test_low_stock_after_update(self):
        inv = make_inventory([("A1", "Shirt", 10, "19.99", "clothing")])
        inv.update("A1", "quantity", 3)
        low = inv.filter_low_stock(5)
        assert len(low) == 1
        assert low[0].id == "A1"
        assert low[0].quantity == 3

    def test_snapshot_is_detached(self):
        inv = make_inventory()
        snap = inv.snapshot()
        snap[0].set_quantity(999)
        assert inv.find_by_id("A1").quantity == 10

    def test_empty_inventory(self):
        inv = Inventory()
        assert inv.is_empty
        assert len(inv) == 0
        assert inv.list_all() == []
        assert inv.filter_low_stock() == []
