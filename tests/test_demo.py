"""
Tests for the demo scenario
"""

import logging
from decimal import Decimal

import pytest

from storefront.demo import main, run_scenario


class TestDemo:
    """End-to-end run of the demo flow."""

    def test_run_scenario(self, capsys, caplog):
        with caplog.at_level(logging.INFO, logger="storefront"):
            order = run_scenario()

        out = capsys.readouterr().out

        assert order.cart.calculate_total() == Decimal("459")
        assert len(order.cart) == 2
        assert "Products with same ID are equal." in out
        assert "Order ID: 1, Date: 2025-09-30" in out
        assert "Found item in inventory:" in out
        assert out.rstrip().endswith("Stock: 3")
        assert "Product ID 3 is out of stock" in caplog.text
        assert "Discount of 10% applied to cart." in caplog.text

    def test_main_with_options(self, capsys):
        assert main(["--discount", "0.5", "--date", "2025-10-01"]) == 0

        out = capsys.readouterr().out
        assert "Order ID: 1, Date: 2025-10-01" in out
        assert "Total: $255.00" in out

    def test_main_rejects_bad_discount(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--discount", "ten"])

        assert exc_info.value.code == 2
        assert "invalid discount rate" in capsys.readouterr().err

    def test_main_rejects_nan_discount(self):
        with pytest.raises(SystemExit):
            main(["--discount", "NaN"])
