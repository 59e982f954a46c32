"""
Tests for money helpers
"""

from decimal import Decimal

from storefront.services.money import (
    add,
    format_money,
    multiply,
    percent_label,
    subtract,
    to_decimal,
)


class TestToDecimal:
    """Tests for to_decimal."""

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_none_and_garbage(self):
        assert to_decimal(None) == Decimal("0")
        assert to_decimal("not-a-number") == Decimal("0")

    def test_decimal_passthrough(self):
        value = Decimal("1.25")
        assert to_decimal(value) is value


class TestArithmetic:
    """Tests for arithmetic helpers."""

    def test_operations(self):
        assert add("1.10", 2.2) == Decimal("3.3")
        assert subtract(10, "0.5") == Decimal("9.5")
        assert multiply("500", 0.1) == Decimal("50")


class TestFormatting:
    """Tests for display helpers."""

    def test_format_usd(self):
        assert format_money(Decimal("1234.5")) == "$1,234.50"

    def test_format_unknown_currency(self):
        assert format_money(9, "PLN") == "9.00 PLN"

    def test_percent_label(self):
        assert percent_label(Decimal("0.1")) == "10"
        assert percent_label(0.125) == "12.5"
        assert percent_label(0) == "0"

    def test_percent_label_beyond_precision(self):
        """Rates too large to quantize keep their exponent form."""
        assert percent_label(Decimal("1E+30")) == "1E+32"
