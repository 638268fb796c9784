from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

from bidict import bidict

from wallet_amount.utils.decimal_format import format_grouped

# ISO 4217 codes mapped to their narrow en-US symbols ("$100" rather than "US$100").
# Only symbols that identify exactly one code are listed, so the table can be inverted.
NARROW_SYMBOLS: bidict[str, str] = bidict(
    {
        "USD": "$",
        "EUR": "€",
        "GBP": "£",
        "JPY": "¥",
        "INR": "₹",
        "KRW": "₩",
        "NGN": "₦",
        "PHP": "₱",
        "ILS": "₪",
        "VND": "₫",
        "UAH": "₴",
        "TRY": "₺",
        "RUB": "₽",
        "THB": "฿",
        "PLN": "zł",
        "BRL": "R$",
        "ZAR": "R",
    }
)

# Recognized fiat codes whose narrow symbol is shared with another code or is the code itself
_OTHER_FIAT_CODES = frozenset(
    {
        "AUD",
        "CAD",
        "CHF",
        "CNY",
        "CZK",
        "DKK",
        "HKD",
        "HUF",
        "MXN",
        "NOK",
        "NZD",
        "SEK",
        "SGD",
    }
)

FIAT_CODES = frozenset(NARROW_SYMBOLS.keys()) | _OTHER_FIAT_CODES


def is_fiat_code(code: str) -> bool:
    """Return True if $code is a recognized ISO 4217 fiat currency code."""
    return code.upper().strip() in FIAT_CODES


def narrow_symbol(code: str) -> str | None:
    """Return the narrow symbol for $code, or None when the code has no unambiguous symbol."""
    return NARROW_SYMBOLS.get(code.upper().strip())


def code_for_symbol(symbol: str) -> str | None:
    """Return the ISO code that uses $symbol as its narrow symbol, or None."""
    return NARROW_SYMBOLS.inverse.get(symbol)


def format_currency_narrow(code: str, value: Decimal, decimals: int = 2, rounding: str = ROUND_HALF_UP) -> str:
    """Formats $value as an en-US currency string using the narrow symbol of $code.

    The sign is placed in front of the symbol ('-£5.00'). Codes without an unambiguous
    narrow symbol are rendered with the code followed by a space ('CHF 12.50').

    Args:
        code: ISO 4217 currency code.
        value: Value in whole currency units.
        decimals: Number of fractional digits.
        rounding: `decimal` rounding constant. Defaults to half-up like a locale formatter.

    Returns:
        Formatted currency string.
    """
    body = format_grouped(value, decimals, rounding)
    sign = ""
    if body.startswith("-"):
        sign, body = "-", body[1:]

    symbol = narrow_symbol(code)
    if symbol is None:
        return f"{sign}{code.upper().strip()} {body}"
    return f"{sign}{symbol}{body}"
