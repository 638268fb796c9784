from __future__ import annotations

from decimal import Decimal, ROUND_DOWN

from wallet_amount.utils.fiat_symbols import code_for_symbol, format_currency_narrow, is_fiat_code, narrow_symbol


def test_is_fiat_code():
    assert is_fiat_code("GBP")
    assert is_fiat_code("chf")
    assert not is_fiat_code("ETH")
    assert not is_fiat_code("DAI")


def test_symbol_lookup_both_ways():
    assert narrow_symbol("usd") == "$"
    assert narrow_symbol("CHF") is None
    assert code_for_symbol("£") == "GBP"
    assert code_for_symbol("R$") == "BRL"
    assert code_for_symbol("US$") is None


def test_format_currency_narrow():
    assert format_currency_narrow("GBP", Decimal("1250.4026")) == "£1,250.40"
    assert format_currency_narrow("USD", Decimal("100")) == "$100.00"
    assert format_currency_narrow("EUR", Decimal("-5")) == "-€5.00"
    assert format_currency_narrow("CHF", Decimal("12.5")) == "CHF 12.50"
    assert format_currency_narrow("JPY", Decimal("1500.7"), 0) == "¥1,501"
    assert format_currency_narrow("EUR", Decimal("2649.01698"), 2, ROUND_DOWN) == "€2,649.01"
