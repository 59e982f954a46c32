"""Shopping cart with an incrementally tracked total."""
from decimal import Decimal
from typing import Tuple, Union

from storefront import config, errors
from storefront.catalog.inventory import ItemList
from storefront.catalog.models import Item
from storefront.logging import get_logger
from storefront.models import CartSnapshot
from storefront.services.money import to_decimal, add, subtract, format_money, percent_label

logger = get_logger(__name__)


class ShoppingCart:
    """
    Cart of item references plus a running total.

    The total is updated only by ``add_product`` and ``apply_cart_discount``.
    It is never re-derived from the items, so a price changed elsewhere after
    insertion leaves ``calculate_total()`` stale (see ``items_total()``).

    Usage:
        cart = ShoppingCart()
        cart += book
        cart.apply_cart_discount(0.1)
        cart.print_contents()
    """

    def __init__(self):
        self._items: ItemList[Item] = ItemList()
        self._total = Decimal("0")

    @property
    def items(self) -> Tuple[Item, ...]:
        """Read-only view; use ``add_product`` to put items in the cart."""
        return self._items.data

    def add_product(self, item: Item) -> bool:
        """
        Add one unit of ``item`` if it is in stock.

        Takes the item's current price into the total and removes one unit
        from its stock through ``item.update_stock``, so variant behaviour
        (e.g. the electronics handling fee) runs as usual.

        Returns:
            True if added, False if rejected as out of stock
        """
        if item.stock <= 0:
            logger.warning(errors.NOTICE_OUT_OF_STOCK.format(item_id=item.item_id))
            return False

        self._items.add(item)
        self._total = add(self._total, item.price)
        item.update_stock(-1)
        logger.info(
            errors.NOTICE_ITEM_ADDED.format(
                item_id=item.item_id,
                price=format_money(item.price, config.DISPLAY_CURRENCY),
            )
        )
        return True

    def __iadd__(self, item: Item) -> "ShoppingCart":
        self.add_product(item)
        return self

    def calculate_total(self) -> Decimal:
        """Running total as tracked, not recomputed."""
        return self._total

    def items_total(self) -> Decimal:
        """Sum of the current prices of the items in the cart."""
        return sum((item.price for item in self._items), Decimal("0"))

    def apply_cart_discount(self, rate: Union[float, Decimal]) -> Decimal:
        """
        Discount every item in the cart by ``rate``.

        Each item's price is reduced in place, so a second call compounds on
        the first. The amount removed from each item is taken off the total.

        Returns:
            Total amount subtracted
        """
        removed = Decimal("0")
        for item in self._items:
            delta = item.apply_discount(rate)
            self._total = subtract(self._total, delta)
            removed = add(removed, delta)
        logger.info(errors.NOTICE_CART_DISCOUNT.format(percent=percent_label(to_decimal(rate))))
        return removed

    def describe(self) -> str:
        lines = ["Shopping Cart Contents:"]
        if len(self._items):
            lines.append(self._items.describe())
        lines.append(f"Total: {format_money(self._total, config.DISPLAY_CURRENCY)}")
        return "\n".join(lines)

    def print_contents(self) -> None:
        print(self.describe())

    def to_snapshot(self) -> CartSnapshot:
        return CartSnapshot(
            items=[item.to_snapshot() for item in self._items],
            total=self._total,
            items_total=self.items_total(),
        )

    def __len__(self) -> int:
        return len(self._items)
