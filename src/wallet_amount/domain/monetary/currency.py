from __future__ import annotations

from enum import Enum
from typing import Dict


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    STABLECOIN = "STABLECOIN"


class Currency:
    """Describes a currency held in a wallet: its symbol, subunit precision and display hints.

    Attributes:
        symbol (str): Currency symbol (e.g., "ETH", "GBP").
        decimals (int): Number of decimal places between the subunit and the unit (18 for Wei).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, STABLECOIN).
        display_decimals (int): Default number of fractional digits shown to the user.
        fiat_convertible (bool): Whether the currency can report a fiat value.
    """

    MAX_DECIMALS = 36
    DEFAULT_DISPLAY_DECIMALS = 4

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}

    def __init__(
        self,
        symbol: str,
        decimals: int,
        name: str,
        currency_type: CurrencyType = CurrencyType.CRYPTO,
        display_decimals: int | None = None,
        fiat_convertible: bool = True,
    ):
        """Initialize a Currency instance.

        Args:
            symbol (str): Currency symbol (e.g., "ETH", "GBP").
            decimals (int): Number of subunit decimal places (0-36).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.
            display_decimals (int | None): Default fractional digits for display. When None,
                fiat and stablecoins use 2 and everything else uses 4.
            fiat_convertible (bool): False for assets that never carry a fiat valuation.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        # Validate inputs
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0 or decimals > self.MAX_DECIMALS:
            raise ValueError(f"$decimals must be an integer between 0 and {self.MAX_DECIMALS}, but provided value is: {decimals}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        if display_decimals is None:
            display_decimals = 2 if currency_type in (CurrencyType.FIAT, CurrencyType.STABLECOIN) else self.DEFAULT_DISPLAY_DECIMALS
        elif isinstance(display_decimals, bool) or not isinstance(display_decimals, int) or display_decimals < 0:
            raise ValueError(f"$display_decimals must be a non-negative integer, but provided value is: {display_decimals}")

        self._symbol = symbol.upper().strip()
        self._decimals = decimals
        self._name = name.strip()
        self._currency_type = currency_type
        self._display_decimals = display_decimals
        self._fiat_convertible = bool(fiat_convertible)

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @property
    def decimals(self) -> int:
        """Get the number of subunit decimal places."""
        return self._decimals

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def display_decimals(self) -> int:
        """Get the default number of fractional digits shown to the user."""
        return self._display_decimals

    @property
    def fiat_convertible(self) -> bool:
        return self._fiat_convertible

    @property
    def is_fiat(self) -> bool:
        """Check if currency is fiat.

        Returns:
            bool: True if currency is fiat.
        """
        return self._currency_type == CurrencyType.FIAT

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.symbol in cls._registry and not overwrite:
            raise ValueError(f"Currency with symbol '{currency.symbol}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.symbol] = currency

    @classmethod
    def is_registered(cls, symbol: str) -> bool:
        return isinstance(symbol, str) and symbol.upper().strip() in cls._registry

    @classmethod
    def from_str(cls, symbol: str) -> "Currency":
        """Get currency from registry by symbol.

        Args:
            symbol (str): Currency symbol to look up.

        Returns:
            Currency: The currency instance.

        Raises:
            ValueError: If currency symbol is not found in registry.
        """
        if not isinstance(symbol, str):
            raise TypeError(f"$symbol must be a string, but provided value is: {symbol}")

        symbol = symbol.upper().strip()
        if symbol not in cls._registry:
            raise ValueError(f"Currency with symbol '{symbol}' not found in registry. Available currencies: {list(cls._registry.keys())}")

        return cls._registry[symbol]

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.symbol == other.symbol

    def __hash__(self) -> int:
        """Hash based on currency symbol."""
        return hash(self.symbol)

    def __str__(self) -> str:
        """Return string representation."""
        return self.symbol

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.symbol}', {self.decimals}, '{self.name}', {self.currency_type})"
