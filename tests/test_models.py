"""
Tests for Pydantic snapshot models
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.models import CartSnapshot, ItemSnapshot
from storefront.orders import Order


class TestItemSnapshot:
    """Tests for item snapshots."""

    def test_plain_item(self, book):
        snapshot = book.to_snapshot()

        assert snapshot.item_id == 1
        assert snapshot.kind == "item"
        assert snapshot.price == Decimal("10")
        assert snapshot.warranty_months is None

    def test_electronics_item(self, phone):
        snapshot = phone.to_snapshot()

        assert snapshot.kind == "electronics"
        assert snapshot.warranty_months == 12

    def test_snapshot_is_a_copy(self, book):
        snapshot = book.to_snapshot()
        book.update_stock(-1)

        assert snapshot.stock == 5

    def test_negative_stock_invalid(self):
        with pytest.raises(ValidationError):
            ItemSnapshot(item_id=1, name="X", price=Decimal("1"), stock=-1)

    def test_unknown_kind_invalid(self):
        with pytest.raises(ValidationError):
            ItemSnapshot(item_id=1, kind="furniture", name="X", price=Decimal("1"), stock=0)


class TestCartSnapshot:
    """Tests for cart and order snapshots."""

    def test_empty_cart(self, cart):
        snapshot = cart.to_snapshot()

        assert snapshot.item_count == 0
        assert snapshot.total == 0
        assert snapshot.has_drift is False

    def test_cart_with_items(self, cart, book, phone):
        cart += book
        cart += phone

        snapshot = cart.to_snapshot()

        assert [i.item_id for i in snapshot.items] == [1, 2]
        assert snapshot.total == Decimal("510")
        assert snapshot.items_total == Decimal("510")

    def test_order_snapshot(self, cart, book):
        cart += book
        snapshot = Order(3, cart, "2025-09-30").to_snapshot()

        assert snapshot.order_id == 3
        assert snapshot.cart.total == Decimal("10")
        assert snapshot.model_dump()["cart"]["items"][0]["name"] == "Book"

    def test_manual_snapshot(self):
        snapshot = CartSnapshot(total=Decimal("5"), items_total=Decimal("4"))

        assert snapshot.items == []
        assert snapshot.has_drift is True
