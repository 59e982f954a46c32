"""
Storefront Demo

Walks through the whole model: stock updates, equality, cart insertion with
an out-of-stock rejection, a cart-wide discount, an order dump and inventory
list lookups.

Usage:
    storefront-demo
    python -m storefront.demo --discount 0.25 --date 2025-10-01 --log-level DEBUG
"""
import argparse
from decimal import Decimal, InvalidOperation

from storefront.cart import ShoppingCart
from storefront.catalog import ElectronicsItem, Item, ItemList
from storefront.logging import get_logger, set_log_level
from storefront.orders import Order

logger = get_logger(__name__)


def run_scenario(discount_rate=Decimal("0.1"), order_date: str = "2025-09-30") -> Order:
    """Run the demo flow and return the resulting order."""
    book = Item(1, "Book", 10.0, 5)
    pen = Item(3, "Pen", 2.0, 0)
    phone = ElectronicsItem(2, "Phone", 500.0, 3, 12)

    # Base and overridden stock updates
    book.update_stock(-1)
    phone.update_stock(-1)

    # Same ID, different details
    reprint = Item(1, "Book (reprint)", 12.0, 0)
    if book == reprint:
        print("Products with same ID are equal.")
    else:
        print("Products comparison failed.")

    cart = ShoppingCart()
    cart += book
    cart += phone
    cart += pen  # out of stock
    cart.print_contents()

    cart.apply_cart_discount(discount_rate)
    cart.print_contents()

    order = Order(1, cart, order_date)
    order.print_details()

    inventory: ItemList[Item] = ItemList()
    inventory.add(book)
    inventory.add(phone)
    found = inventory.find(2)
    if found is not None:
        print("Found item in inventory:")
        found.print()
    inventory.remove(phone)
    print("Inventory after remove:")
    inventory.print()

    return order


def _discount_rate(value: str) -> Decimal:
    """argparse type for --discount: any finite decimal fraction."""
    try:
        rate = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid discount rate: {value!r}") from None
    if not rate.is_finite():
        raise argparse.ArgumentTypeError(f"invalid discount rate: {value!r}")
    return rate


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the storefront catalog/cart demo")
    parser.add_argument(
        "--discount",
        type=_discount_rate,
        default=Decimal("0.1"),
        help="Cart-wide discount as a fraction (default: 0.1)"
    )
    parser.add_argument("--date", default="2025-09-30", help="Order date (default: 2025-09-30)")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run")
    args = parser.parse_args(argv)

    if args.log_level:
        set_log_level(args.log_level)

    order = run_scenario(args.discount, args.date)
    logger.debug(f"Demo finished, order {order.order_id} total {order.cart.calculate_total()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
