"""Unit tests for currency and percent formatting."""

import pytest

from fincalc.sdk.formatting import format_currency, format_percent


class TestFormatCurrency:
    """Tests for format_currency()."""

    @pytest.mark.parametrize("amount,expected", [
        (1800, "$1,800"),
        (0, "$0"),
        (999.49, "$999"),
        (1234.5, "$1,235"),
        (2.5, "$3"),
        (1234567.89, "$1,234,568"),
        (-1234.5, "-$1,235"),
        (-0.4, "$0"),
    ])
    def test_whole_dollars(self, amount, expected):
        assert format_currency(amount) == expected


class TestFormatPercent:
    """Tests for format_percent()."""

    def test_one_decimal_default(self):
        assert format_percent(12.5) == "12.5%"

    def test_custom_decimals(self):
        assert format_percent(33.333, 0) == "33%"
        assert format_percent(7, 2) == "7.00%"
