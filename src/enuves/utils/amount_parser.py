"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

CENTS = Decimal("0.01")


def parse_dot_decimal(amount_str: str) -> Decimal:
    """Parse a dot-decimal amount such as "-619.13" or "42".

    Args:
        amount_str: Amount string with an optional leading minus

    Returns:
        Signed Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    try:
        return Decimal(amount_str.strip())
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")


def parse_comma_decimal(amount_str: str) -> Decimal:
    """Parse a Brazilian-formatted amount such as "R$ -1.234,56".

    Thousands dots are removed, the decimal comma becomes a dot, and
    whitespace and the currency marker are dropped.

    Raises:
        ValueError: If amount string cannot be parsed
    """
    cleaned = amount_str.replace("R$", "").replace(".", "").replace(",", ".", 1)
    cleaned = re.sub(r"\s", "", cleaned)
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-typed amount in either "1234.56" or "1.234,56" form.

    Raises:
        ValueError: If amount string is empty or cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")
    if "," in amount_str:
        return parse_comma_decimal(amount_str)
    return parse_dot_decimal(amount_str.replace("R$", ""))


def format_brl(amount: Decimal) -> str:
    """Format an amount with two decimals, dot thousands and a decimal comma.

    >>> format_brl(Decimal("1234.56"))
    '1.234,56'
    """
    quantized = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    us_style = f"{quantized:,.2f}"
    return us_style.translate(str.maketrans({",": ".", ".": ","}))
