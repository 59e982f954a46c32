"""
storefront - in-memory catalog and cart model

This package contains:
- catalog: item variants (Item, ElectronicsItem) and the generic ItemList
- cart: ShoppingCart with stock-checked insertion and cart-wide discounts
- orders: Order records referencing a cart
- models: Pydantic snapshot schemas
- services.money: Decimal helpers

Note: Imports are lazy so that `import storefront` stays cheap and
submodules can import each other without cycles.
"""

__version__ = "0.1.0"

__all__ = [
    "Discountable",
    "Item",
    "ElectronicsItem",
    "ItemList",
    "ShoppingCart",
    "Order",
]


def __getattr__(name):
    """Lazy attribute access for the public classes."""
    if name in ("Discountable", "Item", "ElectronicsItem", "ItemList"):
        from storefront import catalog
        return getattr(catalog, name)
    elif name == "ShoppingCart":
        from storefront.cart import ShoppingCart
        return ShoppingCart
    elif name == "Order":
        from storefront.orders import Order
        return Order
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
