from __future__ import annotations

import pytest

from wallet_amount.domain.monetary.currency import Currency, CurrencyType
from wallet_amount.domain.monetary.currency_registry import DAI, DEFAULT_CURRENCY, ETH, GBP, H1, JPY, USDT, YLD


def test_predefined_currencies_are_registered():
    assert Currency.from_str("eth") is ETH
    assert Currency.from_str(" GBP ") is GBP
    assert Currency.is_registered("DAI")
    assert not Currency.is_registered("BAT")


def test_unknown_symbol_raises():
    with pytest.raises(ValueError):
        Currency.from_str("BAT")
    with pytest.raises(TypeError):
        Currency.from_str(18)


def test_display_decimals_defaults():
    assert ETH.display_decimals == 4
    assert GBP.display_decimals == 2
    assert DAI.display_decimals == 2
    assert USDT.display_decimals == 4
    assert JPY.display_decimals == 0


def test_fiat_flags():
    assert GBP.is_fiat
    assert not ETH.is_fiat
    assert not H1.fiat_convertible
    assert ETH.fiat_convertible


def test_default_currency():
    assert DEFAULT_CURRENCY is YLD
    assert YLD.decimals == 18


@pytest.mark.parametrize(
    "kwargs",
    [
        {"symbol": "", "decimals": 2, "name": "Empty"},
        {"symbol": "XYZ", "decimals": -1, "name": "Negative"},
        {"symbol": "XYZ", "decimals": 2.5, "name": "Float"},
        {"symbol": "XYZ", "decimals": True, "name": "Bool"},
        {"symbol": "XYZ", "decimals": 37, "name": "Too precise"},
        {"symbol": "XYZ", "decimals": 2, "name": " "},
        {"symbol": "XYZ", "decimals": 2, "name": "Bad display", "display_decimals": -2},
    ],
)
def test_invalid_currency_parameters(kwargs: dict):
    with pytest.raises(ValueError):
        Currency(**kwargs)


def test_currency_type_must_be_enum():
    with pytest.raises(TypeError):
        Currency("XYZ", 2, "Xyz", "FIAT")


def test_register_does_not_overwrite_by_default():
    with pytest.raises(ValueError):
        Currency.register(Currency("ETH", 18, "Other Ether"))
    with pytest.raises(TypeError):
        Currency.register("ETH")


def test_equality_and_str():
    assert Currency("eth", 18, "Ethereum copy") == ETH
    assert hash(Currency("ETH", 18, "Ethereum copy")) == hash(ETH)
    assert ETH != "ETH"
    assert str(ETH) == "ETH"
    assert repr(GBP) == "Currency('GBP', 2, 'British Pound', CurrencyType.FIAT)"
    assert GBP.currency_type is CurrencyType.FIAT
