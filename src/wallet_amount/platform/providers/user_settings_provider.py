from __future__ import annotations

from typing import Protocol


# region Interface


class UserSettingsProvider(Protocol):
    """Read-only view of the user preferences that affect how amounts are shown.

    Amounts never own these preferences; they are handed a provider at construction
    (or per call) so different users or tests can use different settings side by side.
    """

    @property
    def fiat_currency(self) -> str:
        """ISO code of the fiat currency the user wants values shown in (e.g. "USD")."""
        ...

    @property
    def show_balances(self) -> bool:
        """False when the user has chosen to hide balances behind a placeholder."""
        ...


# endregion
