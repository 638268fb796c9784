from __future__ import annotations

from decimal import Decimal

from wallet_amount.utils.numeric_tools import quantize_places


def to_plain_str(value: Decimal) -> str:
    """Returns $value as a plain decimal string without exponent notation or trailing zeros.

    Examples:
        >>> to_plain_str(Decimal("0.361888087406829731000"))
        '0.361888087406829731'
        >>> to_plain_str(Decimal("25000000000000000000000"))
        '25000000000000000000000'
        >>> to_plain_str(Decimal("1.5E+5"))
        '150000'
    """
    return _strip_fraction_zeros(f"{value:f}")


def format_grouped(value: Decimal, decimals: int, rounding: str) -> str:
    """Formats $value with thousands separators and exactly $decimals fractional digits.

    Args:
        value: Value to format.
        decimals: Number of fractional digits to show (padded with zeros when needed).
        rounding: `decimal` rounding constant applied when digits are dropped.

    Returns:
        String like '1,800.0000'.
    """
    # Raise: negative digit counts make no sense for display
    if decimals < 0:
        raise ValueError(f"$decimals must be >= 0, but provided value is: {decimals}")

    rounded = quantize_places(value, decimals, rounding)
    return f"{rounded:,.{decimals}f}"


def format_grouped_full(value: Decimal) -> str:
    """Formats $value with thousands separators and all of its significant fractional digits.

    Nothing is truncated; only trailing zeros are dropped.
    """
    if value.is_zero():
        return "0"
    return _strip_fraction_zeros(f"{value:,f}")


def _strip_fraction_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")
