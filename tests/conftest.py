"""Pytest configuration and fixtures"""
import os
import pytest

# Keep test output deterministic regardless of the caller's shell
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("STOREFRONT_CURRENCY", "USD")

from storefront.cart import ShoppingCart
from storefront.catalog import ElectronicsItem, Item, ItemList


@pytest.fixture
def book():
    """Plain item in stock"""
    return Item(1, "Book", 10.0, 5)


@pytest.fixture
def pen():
    """Plain item with no stock"""
    return Item(3, "Pen", 2.0, 0)


@pytest.fixture
def phone():
    """Electronics item with a 12-month warranty"""
    return ElectronicsItem(2, "Phone", 500.0, 3, 12)


@pytest.fixture
def cart():
    """Empty shopping cart"""
    return ShoppingCart()


@pytest.fixture
def inventory():
    """Empty item list"""
    return ItemList()
