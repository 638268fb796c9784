from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

FIAT_CURRENCY_ENV = "FIAT_CURRENCY"
SHOW_BALANCES_ENV = "SHOW_BALANCES"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class UserSettings:
    """Plain `UserSettingsProvider` holding the user's display preferences.

    Attributes:
        fiat_currency: ISO code used by `Amount.as_fiat`. Defaults to "USD".
        show_balances: When False, formatted amounts are replaced by a placeholder.
    """

    fiat_currency: str = "USD"
    show_balances: bool = True

    def __post_init__(self) -> None:
        # Raise: fiat currency must be a non-empty code
        if not isinstance(self.fiat_currency, str) or not self.fiat_currency.strip():
            raise ValueError(f"$fiat_currency must be a non-empty string, but provided value is: '{self.fiat_currency}'")
        object.__setattr__(self, "fiat_currency", self.fiat_currency.upper().strip())

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> UserSettings:
        """Build settings from environment variables, loading a `.env` file first.

        Values already present in the process environment win over the `.env` file.

        Args:
            dotenv_path: Optional explicit path of the `.env` file. When None, python-dotenv
                searches for one starting from the current directory.

        Returns:
            UserSettings built from `FIAT_CURRENCY` and `SHOW_BALANCES`.

        Raises:
            ValueError: If `SHOW_BALANCES` holds something other than a boolean word.
        """
        load_dotenv(dotenv_path=dotenv_path)

        fiat_currency = os.environ.get(FIAT_CURRENCY_ENV, "").strip() or "USD"
        show_balances = _parse_bool(os.environ.get(SHOW_BALANCES_ENV), default=True)

        settings = cls(fiat_currency=fiat_currency, show_balances=show_balances)
        logger.debug(f"Loaded {settings} from environment")
        return settings


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"${SHOW_BALANCES_ENV} must be a boolean word, but provided value is: '{raw}'")


DEFAULT_USER_SETTINGS = UserSettings()
