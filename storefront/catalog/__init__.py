"""Catalog package: item variants and the generic item list."""
from .models import Discountable, Item, ElectronicsItem
from .inventory import ItemList

__all__ = [
    "Discountable",
    "Item",
    "ElectronicsItem",
    "ItemList",
]
