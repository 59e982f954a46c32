"""Catalog item models with Decimal-based pricing."""
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Union

from storefront import config, errors
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.models import ItemSnapshot
from storefront.services.money import multiply, subtract, format_money

logger = get_logger(__name__)


def _parse_price(value) -> Decimal:
    """Strict price conversion: unlike to_decimal, bad input raises ValueError."""
    if isinstance(value, bool):
        raise ValueError(errors.ERROR_INVALID_PRICE)
    try:
        price = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        raise ValueError(errors.ERROR_INVALID_PRICE) from None
    if not price.is_finite():
        raise ValueError(errors.ERROR_INVALID_PRICE)
    return price


class Discountable(ABC):
    """Anything whose price can be reduced by a fractional rate."""

    @abstractmethod
    def apply_discount(self, rate: Union[float, Decimal]) -> Decimal:
        """
        Reduce the current price by ``price * rate``.

        The rate is not range-checked. Repeated calls compound because each
        one discounts the price left by the previous call.

        Returns:
            The amount subtracted from the price
        """


class Item(Discountable):
    """
    Sellable catalog entry.

    Identity is the integer id: two items compare equal when their ids match,
    whatever their name, price or stock.
    """

    kind = "item"

    def __init__(self, item_id: int, name: str, price, stock: int):
        price = _parse_price(price)
        if price < 0:
            raise ValueError(errors.ERROR_NEGATIVE_PRICE)
        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            raise ValueError(errors.ERROR_NEGATIVE_STOCK)

        self._item_id = item_id
        self._name = name
        self._price = price
        self._stock = stock
        logger.debug(
            f"Created {self.kind} {item_id} ({sanitize_string_for_logging(name)}) "
            f"price={price} stock={stock}"
        )

    @property
    def item_id(self) -> int:
        return self._item_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stock(self) -> int:
        return self._stock

    def set_price(self, price) -> None:
        """Overwrite the price. The cart's running total is not updated."""
        self._price = _parse_price(price)

    def update_stock(self, delta: int) -> None:
        """Add ``delta`` to stock, clamping the result at zero."""
        old = self._stock
        self._stock = max(old + delta, 0)
        if old + delta < 0:
            logger.debug(errors.NOTICE_STOCK_CLAMPED.format(item_id=self._item_id, delta=delta))
        else:
            logger.debug(
                errors.NOTICE_STOCK_UPDATED.format(
                    item_id=self._item_id, delta=delta, old=old, new=self._stock
                )
            )

    def apply_discount(self, rate: Union[float, Decimal]) -> Decimal:
        discount = multiply(self._price, rate)
        self._price = subtract(self._price, discount)
        return discount

    def describe(self) -> str:
        """One-line summary of id, name, price and stock."""
        return (
            f"Product ID: {self._item_id}, Name: {self._name}, "
            f"Price: {format_money(self._price, config.DISPLAY_CURRENCY)}, Stock: {self._stock}"
        )

    def print(self) -> None:
        print(self.describe())

    def to_snapshot(self) -> ItemSnapshot:
        return ItemSnapshot(
            item_id=self._item_id,
            kind=self.kind,
            name=self._name,
            price=self._price,
            stock=self._stock,
        )

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self._item_id == other._item_id

    def __hash__(self):
        return hash(self._item_id)

    def __repr__(self):
        return f"{type(self).__name__}(item_id={self._item_id!r}, name={self._name!r})"


class ElectronicsItem(Item):
    """Item with a warranty; removing stock announces a handling fee."""

    kind = "electronics"

    def __init__(self, item_id: int, name: str, price, stock: int, warranty_months: int):
        super().__init__(item_id, name, price, stock)
        self._warranty_months = warranty_months

    @property
    def warranty_months(self) -> int:
        return self._warranty_months

    def update_stock(self, delta: int) -> None:
        super().update_stock(delta)
        if delta < 0:
            logger.info(errors.NOTICE_HANDLING_FEE.format(item_id=self.item_id))

    def describe(self) -> str:
        return f"{super().describe()}\nWarranty: {self._warranty_months} months"

    def to_snapshot(self) -> ItemSnapshot:
        snapshot = super().to_snapshot()
        snapshot.warranty_months = self._warranty_months
        return snapshot
