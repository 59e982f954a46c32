"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. No rounding is
applied to stored prices; rounding happens only when formatting for display.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Display precision (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "VND": "₫",
}


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def subtract(a: Number, b: Number) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, ...)

    Returns:
        Formatted string, e.g. "$9.00" or "9.00 VND" for unknown placement
    """
    rounded = to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    formatted = f"{rounded:,.2f}"

    # Symbol placement
    if currency in ("USD", "EUR", "GBP"):
        return f"{symbol}{formatted}"
    return f"{formatted} {symbol}"


def percent_label(rate: Number) -> str:
    """Render a fractional rate as a percentage string: 0.1 -> "10", 0.125 -> "12.5"."""
    value = multiply(rate, 100).normalize()
    # normalize() turns 10 into 1E+1
    if value.is_finite() and value == value.to_integral_value():
        try:
            value = value.quantize(Decimal("1"))
        except InvalidOperation:
            # more digits than the context precision; keep exponent form
            pass
    return str(value)
