from __future__ import annotations

from decimal import Decimal
from typing import Protocol


# region Interface


class FiatRateProvider(Protocol):
    """Domain interface for looking up fiat conversion rates relative to USD."""

    def get_rate(self, code: str) -> Decimal:
        """Returns how many units of fiat $code one USD buys.

        Args:
            code: ISO 4217 code of the target fiat currency (e.g. "GBP").

        Returns:
            The conversion rate as Decimal.

        Raises:
            KeyError: If no rate is known for $code.
        """
        ...


# endregion
