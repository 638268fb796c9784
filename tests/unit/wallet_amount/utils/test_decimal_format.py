from __future__ import annotations

from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP

import pytest

from wallet_amount.utils.decimal_format import format_grouped, format_grouped_full, to_plain_str
from wallet_amount.utils.numeric_tools import as_decimal, quantize_places, shift


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("0.361888087406829731000"), "0.361888087406829731"),
        (Decimal("25000000000000000000000"), "25000000000000000000000"),
        (Decimal("1.5E+5"), "150000"),
        (Decimal("0E-18"), "0"),
        (Decimal("-12.50"), "-12.5"),
    ],
)
def test_to_plain_str(value: Decimal, expected: str):
    assert to_plain_str(value) == expected


def test_format_grouped():
    assert format_grouped(Decimal("1800"), 4, ROUND_DOWN) == "1,800.0000"
    assert format_grouped(Decimal("1586.096851597843"), 2, ROUND_DOWN) == "1,586.09"
    assert format_grouped(Decimal("1586.096851597843"), 2, ROUND_HALF_UP) == "1,586.10"
    assert format_grouped(Decimal("2252.963065"), 0, ROUND_DOWN) == "2,252"


def test_format_grouped_has_no_negative_zero():
    assert format_grouped(Decimal("-0.00001"), 4, ROUND_DOWN) == "0.0000"


def test_format_grouped_rejects_negative_decimals():
    with pytest.raises(ValueError):
        format_grouped(Decimal("1"), -1, ROUND_DOWN)


def test_format_grouped_full():
    assert format_grouped_full(Decimal("36188808740682973100.361888087406829731")) == "36,188,808,740,682,973,100.361888087406829731"
    assert format_grouped_full(Decimal("150000.000000")) == "150,000"
    assert format_grouped_full(Decimal("0E-18")) == "0"


def test_as_decimal():
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal(" 12 ") == Decimal("12")
    for invalid in ["abc", "NaN", "-Infinity", True]:
        with pytest.raises(ValueError):
            as_decimal(invalid)


def test_shift_is_exact_for_large_values():
    assert shift(Decimal("361888087406829731"), -18) == Decimal("0.361888087406829731")
    assert to_plain_str(shift(Decimal("36188808740682973100.361888087406829731"), 18)) == "36188808740682973100361888087406829731"


def test_quantize_places():
    assert quantize_places(Decimal("180.36625"), 2, ROUND_DOWN) == Decimal("180.36")
    assert quantize_places(Decimal("-1.234567899"), 8, "ROUND_FLOOR") == Decimal("-1.23456790")
