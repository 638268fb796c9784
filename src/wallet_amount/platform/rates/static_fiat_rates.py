from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal

from wallet_amount.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)


class StaticFiatRates:
    """In-memory `FiatRateProvider` backed by a fixed table of USD conversion rates.

    Args:
        rates: Map from ISO code to the number of units one USD buys,
            e.g. {"GBP": "0.788352"}. USD is always 1.
    """

    __slots__ = ("_rates",)

    def __init__(self, rates: Mapping[str, DecimalLike] | None = None) -> None:
        self._rates: dict[str, Decimal] = {"USD": Decimal(1)}
        for code, rate in (rates or {}).items():
            decimal_rate = as_decimal(rate)
            # Raise: a non-positive rate would silently zero or flip fiat values
            if decimal_rate <= 0:
                raise ValueError(f"Cannot init `StaticFiatRates` because rate for $code '{code}' is not positive: {decimal_rate}")
            self._rates[code.upper().strip()] = decimal_rate

        logger.debug(f"StaticFiatRates created with {len(self._rates)} rate(s)")

    def get_rate(self, code: str) -> Decimal:
        normalized = code.upper().strip()
        if normalized not in self._rates:
            raise KeyError(f"No fiat rate for $code '{normalized}'. Available codes: {sorted(self._rates)}")
        return self._rates[normalized]

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper().strip() in self._rates

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._rates})"
