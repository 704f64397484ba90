"""
Tests for ShoppingCart
"""

from decimal import Decimal

import pytest

from dessert_shop.cart import CartSummary, LineItem, ShoppingCart
from dessert_shop.errors import InvalidQuantityError, OutOfStockError


class TestLineItem:
    """Tests for LineItem dataclass."""

    def test_create_line_item(self, waffle):
        """Test creating a line item stamps added_at."""
        item = LineItem(dessert=waffle, quantity=2)

        assert item.dessert_id == "waffle-berries"
        assert item.quantity == 2
        assert item.added_at is not None
        assert item.line_total == Decimal("13.00")

    def test_line_item_is_immutable(self, waffle):
        """Test line items cannot be mutated from outside."""
        item = LineItem(dessert=waffle, quantity=1)

        with pytest.raises(AttributeError):
            item.quantity = 5

    def test_to_dict(self, waffle):
        """Test serialization to dict."""
        data = LineItem(dessert=waffle, quantity=3).to_dict()

        assert data["dessert_id"] == "waffle-berries"
        assert data["quantity"] == 3
        assert data["unit_price"] == 6.5
        assert data["line_total"] == 19.5
        assert "added_at" in data

    @pytest.mark.parametrize("quantity", [0, -3, 1.5, True])
    def test_rejects_invalid_quantity(self, waffle, quantity):
        """Test a line item can never hold quantity below 1."""
        with pytest.raises(InvalidQuantityError):
            LineItem(dessert=waffle, quantity=quantity)


class TestAddItem:
    """Tests for ShoppingCart.add_item."""

    def test_add_new_item(self, cart, waffle):
        """Test adding a dessert creates one line item."""
        cart.add_item(waffle)

        assert cart.has_item("waffle-berries")
        assert cart.get_item("waffle-berries").quantity == 1
        assert cart.get_item_count() == 1
        assert not cart.is_empty

    def test_add_same_item_twice_merges(self, cart, waffle):
        """Test re-adding a dessert increases quantity instead of duplicating."""
        cart.add_item(waffle, 2)
        cart.add_item(waffle, 3)

        assert cart.size == 1
        assert len(cart.get_items()) == 1
        assert cart.get_item("waffle-berries").quantity == 5

    def test_re_add_keeps_original_timestamp(self, cart, waffle):
        """Test quantity bumps keep the first-add timestamp."""
        cart.add_item(waffle)
        added_at = cart.get_item("waffle-berries").added_at
        cart.add_item(waffle)

        assert cart.get_item("waffle-berries").added_at == added_at

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True, None])
    def test_invalid_quantity(self, cart, recorder, waffle, quantity):
        """Test non-positive or non-integer quantities are rejected untouched."""
        with pytest.raises(InvalidQuantityError):
            cart.add_item(waffle, quantity)

        assert cart.is_empty
        assert recorder.events == []

    def test_out_of_stock(self, cart, recorder, sold_out):
        """Test unavailable desserts cannot be added."""
        with pytest.raises(OutOfStockError) as exc_info:
            cart.add_item(sold_out)

        assert exc_info.value.dessert_id == "cake-sold-out"
        assert exc_info.value.code == "OUT_OF_STOCK"
        assert cart.is_empty
        assert recorder.events == []

    def test_invalid_quantity_checked_before_stock(self, cart, sold_out):
        """Test quantity validation runs first."""
        with pytest.raises(InvalidQuantityError):
            cart.add_item(sold_out, 0)


class TestRemoveAndUpdate:
    """Tests for removal and quantity updates."""

    def test_remove_item(self, cart, waffle):
        """Test removing a present dessert."""
        cart.add_item(waffle)
        cart.remove_item("waffle-berries")

        assert not cart.has_item("waffle-berries")
        assert cart.is_empty

    def test_remove_absent_item_is_silent(self, cart, recorder):
        """Test removing an unknown id does nothing and emits nothing."""
        cart.remove_item("nope")

        assert recorder.events == []

    def test_update_quantity(self, cart, waffle):
        """Test setting a new quantity."""
        cart.add_item(waffle)
        cart.update_quantity("waffle-berries", 7)

        assert cart.get_item("waffle-berries").quantity == 7

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_update_to_non_positive_removes(self, cart, waffle, quantity):
        """Test zero or negative quantity removes the line item."""
        cart.add_item(waffle, 4)
        cart.update_quantity("waffle-berries", quantity)

        assert not cart.has_item("waffle-berries")

    def test_update_absent_item_is_noop(self, cart, recorder):
        """Test updating an unknown id does nothing."""
        cart.update_quantity("nope", 3)

        assert cart.is_empty
        assert recorder.events == []

    def test_update_rejects_non_integer(self, cart, waffle):
        """Test non-integer quantities are rejected."""
        cart.add_item(waffle)

        with pytest.raises(InvalidQuantityError):
            cart.update_quantity("waffle-berries", 2.5)
        assert cart.get_item("waffle-berries").quantity == 1

    def test_increment_and_decrement(self, cart, waffle):
        """Test +1 / -1 shorthands."""
        cart.add_item(waffle)
        cart.increment_item("waffle-berries")
        cart.increment_item("waffle-berries")
        cart.decrement_item("waffle-berries")

        assert cart.get_item("waffle-berries").quantity == 2

    def test_decrement_last_unit_removes(self, cart, waffle):
        """Test decrementing quantity 1 removes the line item."""
        cart.add_item(waffle)
        cart.decrement_item("waffle-berries")

        assert cart.has_item("waffle-berries") is False
        assert cart.get_item("waffle-berries") is None

    def test_increment_absent_is_noop(self, cart, recorder):
        """Test increment/decrement of an unknown id do nothing."""
        cart.increment_item("nope")
        cart.decrement_item("nope")

        assert cart.is_empty
        assert recorder.events == []


class TestOrdering:
    """Tests for get_items ordering."""

    def test_insertion_order_stable_under_updates(self, cart, waffle, macaron, baklava):
        """Test quantity updates don't reorder items."""
        cart.add_item(waffle)
        cart.add_item(macaron)
        cart.add_item(baklava)
        cart.add_item(waffle, 2)
        cart.update_quantity("macaron-mix", 5)

        assert [item.dessert_id for item in cart.get_items()] == [
            "waffle-berries", "macaron-mix", "baklava",
        ]

    def test_readd_after_remove_goes_last(self, cart, waffle, macaron):
        """Test a removed and re-added dessert moves to the end."""
        cart.add_item(waffle)
        cart.add_item(macaron)
        cart.remove_item("waffle-berries")
        cart.add_item(waffle)

        assert [item.dessert_id for item in cart] == ["macaron-mix", "waffle-berries"]

    def test_get_items_is_snapshot(self, cart, waffle, macaron):
        """Test the returned sequence is not affected by later mutations."""
        cart.add_item(waffle)
        items = cart.get_items()
        cart.add_item(macaron)
        cart.add_item(waffle, 4)

        assert len(items) == 1
        assert items[0].quantity == 1


class TestTotals:
    """Tests for totals and summary."""

    def test_empty_cart_totals(self, cart):
        """Test an empty cart totals zero."""
        assert cart.get_total() == Decimal("0")
        assert cart.get_item_count() == 0

    def test_total_and_count(self, cart, waffle, macaron):
        """Test total is sum of price * quantity and count sums quantities."""
        cart.add_item(waffle, 2)
        cart.add_item(macaron)

        assert cart.get_total() == Decimal("21.00")
        assert cart.get_item_count() == 3
        assert cart.size == 2

    def test_count_and_total_match_items(self, cart, waffle, macaron, baklava):
        """Test derived values always agree with get_items after a mixed sequence."""
        cart.add_item(waffle, 3)
        cart.add_item(macaron)
        cart.increment_item("macaron-mix")
        cart.add_item(baklava, 4)
        cart.decrement_item("waffle-berries")
        cart.remove_item("baklava")
        cart.add_item(baklava)

        items = cart.get_items()
        assert cart.get_item_count() == sum(item.quantity for item in items)
        expected = sum(item.dessert.price * item.quantity for item in items)
        assert cart.get_total() == expected.quantize(Decimal("0.01"))

    def test_summary(self, cart, waffle, macaron):
        """Test summary is computed consistently."""
        cart.add_item(waffle, 2)
        cart.add_item(macaron)

        summary = cart.get_summary()

        assert isinstance(summary, CartSummary)
        assert summary.item_count == 3
        assert summary.subtotal == Decimal("21.00")
        assert summary.tax == Decimal("2.10")
        assert summary.total == Decimal("23.10")
        assert [item.dessert_id for item in summary.items] == ["waffle-berries", "macaron-mix"]
        assert summary.to_dict()["total"] == 23.10

    def test_empty_summary(self, cart):
        """Test summary of an empty cart."""
        summary = cart.get_summary()

        assert summary.is_empty
        assert summary.total == Decimal("0.00")
        assert summary.to_dict()["items"] == []

    @pytest.mark.parametrize("tax_rate", ["abc", "-0.5", "nan", "1.5"])
    def test_invalid_tax_rate_rejected(self, tax_rate):
        """Test an explicit tax rate gets the same checks as the environment."""
        with pytest.raises(ValueError):
            ShoppingCart(tax_rate=tax_rate)

    def test_tax_rate_from_settings(self, monkeypatch, waffle):
        """Test the default tax rate comes from configuration."""
        monkeypatch.setenv("SHOP_TAX_RATE", "0.20")
        cart = ShoppingCart()
        cart.add_item(waffle, 2)

        assert cart.get_summary().tax == Decimal("2.60")


class TestClear:
    """Tests for ShoppingCart.clear."""

    def test_clear(self, cart, waffle, macaron):
        """Test clear empties the cart."""
        cart.add_item(waffle, 2)
        cart.add_item(macaron)
        cart.clear()

        assert cart.is_empty
        assert cart.get_item_count() == 0
        assert len(cart) == 0

    def test_container_protocol(self, cart, waffle):
        """Test len / in / iteration."""
        cart.add_item(waffle, 2)

        assert "waffle-berries" in cart
        assert "macaron-mix" not in cart
        assert len(cart) == 1
        assert [item.quantity for item in cart] == [2]
