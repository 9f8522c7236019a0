"""Tests for amount parsing and formatting."""

from decimal import Decimal

import pytest

from enuves.utils.amount_parser import (
    format_brl,
    parse_amount,
    parse_comma_decimal,
    parse_dot_decimal,
)


def test_parse_dot_decimal():
    assert parse_dot_decimal("-619.13") == Decimal("-619.13")
    assert parse_dot_decimal(" 42 ") == Decimal("42")


def test_parse_dot_decimal_invalid():
    with pytest.raises(ValueError, match="Could not parse amount"):
        parse_dot_decimal("12a")


def test_parse_comma_decimal_with_currency_and_thousands():
    """Test the Brazilian form used by tabular statements."""
    assert parse_comma_decimal("R$ -1.234,56") == Decimal("-1234.56")
    assert parse_comma_decimal("R$ 1.000.000,00") == Decimal("1000000.00")


def test_parse_comma_decimal_invalid():
    with pytest.raises(ValueError):
        parse_comma_decimal("R$ ,")


class TestParseAmount:
    """Tests for user-typed amounts."""

    def test_accepts_both_decimal_marks(self):
        assert parse_amount("1234.56") == Decimal("1234.56")
        assert parse_amount("1.234,56") == Decimal("1234.56")

    def test_strips_currency_marker(self):
        assert parse_amount("R$10.50") == Decimal("10.50")

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_is_rejected(self, text):
        with pytest.raises(ValueError, match="Empty amount"):
            parse_amount(text)


def test_format_brl():
    assert format_brl(Decimal("1234.56")) == "1.234,56"
    assert format_brl(Decimal("0.5")) == "0,50"
    assert format_brl(Decimal("1000000")) == "1.000.000,00"


def test_format_brl_rounds_half_up():
    assert format_brl(Decimal("2.345")) == "2,35"


def test_format_brl_accepts_plain_zero():
    """Test that an empty sum (the int 0) still formats."""
    assert format_brl(0) == "0,00"
    assert format_brl(sum([], 0)) == "0,00"
