"""
Pydantic Models - Snapshot schemas for reporting

Read-only structured views of catalog items, carts and orders. Snapshots are
copies: changing one never touches the live object it was taken from.
"""

from decimal import Decimal
from typing import Optional, List, Literal

from pydantic import BaseModel, Field


# ============================================================
# Catalog
# ============================================================

class ItemSnapshot(BaseModel):
    """State of a single catalog item."""
    item_id: int = Field(description="Unique item identifier")
    kind: Literal["item", "electronics"] = Field(default="item", description="Item variant")
    name: str
    price: Decimal = Field(description="Current price after any discounts")
    stock: int = Field(ge=0, description="Units available")
    warranty_months: Optional[int] = Field(
        default=None,
        description="Warranty length, electronics only"
    )


# ============================================================
# Cart / Order
# ============================================================

class CartSnapshot(BaseModel):
    """
    State of a shopping cart.

    ``total`` is the cart's running total. ``items_total`` is the sum of the
    items' current prices; the two differ when a price was changed outside
    the cart after insertion.
    """
    items: List[ItemSnapshot] = Field(default_factory=list)
    total: Decimal
    items_total: Decimal

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def has_drift(self) -> bool:
        return self.total != self.items_total


class OrderSnapshot(BaseModel):
    """Order header plus the referenced cart."""
    order_id: int
    date: str
    cart: CartSnapshot
