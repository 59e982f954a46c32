"""Order record referencing a shopping cart."""
from storefront.cart.models import ShoppingCart
from storefront.models import OrderSnapshot


class Order:
    """Identifier and date attached to a cart, for reporting only."""

    def __init__(self, order_id: int, cart: ShoppingCart, date: str):
        self._order_id = order_id
        self._cart = cart
        self._date = date

    @property
    def order_id(self) -> int:
        return self._order_id

    @property
    def date(self) -> str:
        return self._date

    @property
    def cart(self) -> ShoppingCart:
        return self._cart

    def describe(self) -> str:
        return f"Order ID: {self._order_id}, Date: {self._date}\n{self._cart.describe()}"

    def print_details(self) -> None:
        print(self.describe())

    def to_snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            order_id=self._order_id,
            date=self._date,
            cart=self._cart.to_snapshot(),
        )
