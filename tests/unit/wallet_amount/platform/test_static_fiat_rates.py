from __future__ import annotations

from decimal import Decimal

import pytest

from wallet_amount.platform.rates.static_fiat_rates import StaticFiatRates


def test_get_rate():
    rates = StaticFiatRates({"gbp": 0.788352, "EUR": "0.92"})
    assert rates.get_rate("GBP") == Decimal("0.788352")
    assert rates.get_rate("eur") == Decimal("0.92")
    assert rates.get_rate("USD") == Decimal(1)
    assert "GBP" in rates
    assert "JPY" not in rates


def test_unknown_code_raises_key_error():
    with pytest.raises(KeyError):
        StaticFiatRates().get_rate("JPY")


@pytest.mark.parametrize("rate", [0, "-1", "abc"])
def test_invalid_rates_are_rejected(rate):
    with pytest.raises(ValueError):
        StaticFiatRates({"GBP": rate})
