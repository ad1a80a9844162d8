"""Tests for output formatting."""

import locale

import pytest

from homeprice.config import CURRENCY_SYMBOL
from homeprice.formatting import format_currency, format_prediction_line


class TestFormatCurrency:
    """Tests for format_currency()."""

    @pytest.mark.parametrize("amount,expected", [
        (276.98, "£276.98"),
        (0.0, "£0.00"),
        (1234.5, "£1,234.50"),
        (2.005, "£2.00"),
        (-12.3, "-£12.30"),
    ])
    def test_pound_amounts(self, amount, expected):
        assert format_currency(amount, "£") == expected

    def test_other_symbol(self):
        assert format_currency(5.0, "$") == "$5.00"

    def test_default_symbol_from_config(self):
        assert format_currency(5.0) == f"{CURRENCY_SYMBOL}5.00"

    def test_process_locale_ignored(self):
        saved = locale.setlocale(locale.LC_ALL)
        try:
            locale.setlocale(locale.LC_ALL, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert format_currency(1234.5) == f"{CURRENCY_SYMBOL}1,234.50"
        finally:
            locale.setlocale(locale.LC_ALL, saved)


class TestFormatPredictionLine:
    """Tests for format_prediction_line()."""

    def test_scales_size_and_price(self):
        line = format_prediction_line(4, 2.5, 2.7698, "£")
        assert line == "//4 Predicted price for size: 2500 sq ft= £276.98k"

    def test_fractional_size(self):
        line = format_prediction_line(9, 1.25, 1.0, "£")
        assert line == "//9 Predicted price for size: 1250 sq ft= £100.00k"
