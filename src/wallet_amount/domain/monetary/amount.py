from __future__ import annotations

import logging
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Any

from wallet_amount.domain.monetary.currency import Currency
from wallet_amount.domain.monetary.currency_registry import DEFAULT_CURRENCY
from wallet_amount.domain.monetary.display_options import DEFAULT_DISPLAY_OPTIONS, DisplayOptions, RoundingMode
from wallet_amount.platform.providers.fiat_rate_provider import FiatRateProvider
from wallet_amount.platform.providers.user_settings_provider import UserSettingsProvider
from wallet_amount.platform.settings.user_settings import DEFAULT_USER_SETTINGS
from wallet_amount.utils.decimal_format import format_grouped, format_grouped_full, to_plain_str
from wallet_amount.utils.fiat_symbols import code_for_symbol, format_currency_narrow, is_fiat_code
from wallet_amount.utils.numeric_tools import DECIMAL_CONTEXT, DIVISION_DECIMAL_PLACES, DecimalLike, as_decimal, quantize_places, shift

logger = logging.getLogger(__name__)

# Shown instead of any value while the user hides balances
HIDDEN_BALANCE_PLACEHOLDER = "— —"


class Amount:
    """Monetary amount held as an integer count of subunits (Wei, satoshi, cent) of a currency.

    Uses Python's Decimal under `DECIMAL_CONTEXT` so 18-decimal token amounts keep every digit.
    Besides the subunit amount, an Amount carries a precomputed fiat value (USD, not shifted) and
    display preferences. Arithmetic returns new instances; only `set_usd_value_from_rate`
    updates the fiat value in place.

    User settings and fiat rates are injected, never read from global state.
    """

    __slots__ = ("_amount", "_currency", "_fiat_value", "_display_options", "_settings", "_rates")

    # Digit limit for stored values; products of two such values still fit `DECIMAL_CONTEXT`
    MAX_DIGITS = 100

    # region Init

    def __init__(
        self,
        amount: DecimalLike,
        currency: Currency | str,
        fiat_value: DecimalLike = "0",
        *,
        display_options: DisplayOptions | None = None,
        settings: UserSettingsProvider | None = None,
        rates: FiatRateProvider | None = None,
    ) -> None:
        """Initialize an Amount from a subunit value.

        Args:
            amount: Subunit quantity, e.g. "361888087406829731" Wei.
            currency: `Currency` instance or a registered symbol. An unknown symbol is reported
                through the logger and replaced by `DEFAULT_CURRENCY`.
            fiat_value: Fiat (USD) value of the whole amount, in whole units.
            display_options: Display-only preferences. Defaults to `DEFAULT_DISPLAY_OPTIONS`.
            settings: User settings provider. Defaults to `DEFAULT_USER_SETTINGS`.
            rates: Fiat rate provider used by `as_fiat` for non-USD currencies.

        Raises:
            ValueError: If $amount or $fiat_value is not a finite number.
            TypeError: If $currency is neither a Currency nor a string.
        """
        try:
            decimal_amount = as_decimal(amount)
        except ValueError as e:
            raise ValueError(f"Cannot init `Amount` because $amount ({amount!r}) is not a valid number") from e

        try:
            decimal_fiat_value = as_decimal(fiat_value)
        except ValueError as e:
            raise ValueError(f"Cannot init `Amount` because $fiat_value ({fiat_value!r}) is not a valid number") from e

        # Raise: values must stay within the digits the decimal context handles exactly
        if len(decimal_amount.as_tuple().digits) > self.MAX_DIGITS:
            raise ValueError(f"$amount must have at most {self.MAX_DIGITS} digits, but provided value has {len(decimal_amount.as_tuple().digits)}")
        if len(decimal_fiat_value.as_tuple().digits) > self.MAX_DIGITS:
            raise ValueError(f"$fiat_value must have at most {self.MAX_DIGITS} digits, but provided value has {len(decimal_fiat_value.as_tuple().digits)}")

        self._amount = decimal_amount
        self._currency = self._resolve_currency(currency)
        self._fiat_value = decimal_fiat_value
        self._display_options = display_options if display_options is not None else DEFAULT_DISPLAY_OPTIONS
        self._settings = settings if settings is not None else DEFAULT_USER_SETTINGS
        self._rates = rates

    @staticmethod
    def _resolve_currency(currency: Currency | str) -> Currency:
        if isinstance(currency, Currency):
            return currency

        # Raise: only Currency instances and symbols are accepted
        if not isinstance(currency, str):
            raise TypeError(f"$currency must be a Currency instance or a symbol string, but provided value is: {currency!r}")

        if Currency.is_registered(currency):
            return Currency.from_str(currency)

        logger.error(f"Currency {currency} not found")
        return DEFAULT_CURRENCY

    @classmethod
    def from_decimal(cls, decimal_value: DecimalLike, currency: Currency | str, fiat_value: DecimalLike = "0", **kwargs: Any) -> Amount:
        """Create an Amount from a human-readable decimal value.

        The value is floored to the currency's decimals before shifting, so user input never
        turns into more subunits than it states.

        Args:
            decimal_value: Value in whole units, e.g. "0.5" ETH.
            currency: `Currency` instance or a registered symbol.
            fiat_value: Fiat (USD) value of the amount.
            **kwargs: Passed to the constructor (display_options, settings, rates).

        Returns:
            Amount: New instance holding the subunit value.
        """
        resolved = cls._resolve_currency(currency)
        return cls(cls.decimal_to_subunit(decimal_value, resolved), resolved, fiat_value, **kwargs)

    @classmethod
    def decimal_to_subunit(cls, decimal_value: DecimalLike, currency: Currency | str) -> str:
        """Converts a whole-unit value into a subunit string, flooring excess precision.

        Examples:
            >>> Amount.decimal_to_subunit("25000", "DAI")
            '25000000000000000000000'
        """
        resolved = cls._resolve_currency(currency)
        try:
            value = as_decimal(decimal_value)
        except ValueError as e:
            raise ValueError(f"Cannot convert to subunit because $decimal_value ({decimal_value!r}) is not a valid number") from e

        floored = quantize_places(value, resolved.decimals, ROUND_FLOOR)
        return to_plain_str(shift(floored, resolved.decimals))

    @classmethod
    def from_str(cls, value_str: str, **kwargs: Any) -> Amount:
        """Parse an Amount from a display string like '0.3618 ETH', '1,800 ETH' or '£180.10'.

        Args:
            value_str: String representation in whole units.
            **kwargs: Passed to the constructor (display_options, settings, rates).

        Returns:
            Amount: New instance.

        Raises:
            ValueError: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError(f"Value string with $value_str = '{value_str}' cannot be empty")

        parts = value_str.split()
        if len(parts) == 2:
            value_part, symbol = parts
        elif len(parts) == 1:
            value_part, symbol = cls._split_fiat_prefix(parts[0], value_str)
        else:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value symbol' or '<fiat symbol>value'")

        try:
            currency = Currency.from_str(symbol)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{symbol}' in string '{value_str}'") from e

        return cls.from_decimal(value_part.replace(",", ""), currency, **kwargs)

    @staticmethod
    def _split_fiat_prefix(token: str, value_str: str) -> tuple[str, str]:
        sign = ""
        if token.startswith("-"):
            sign, token = "-", token[1:]

        # Longest symbol first, so 'R$' wins over 'R'
        for length in range(len(token), 0, -1):
            code = code_for_symbol(token[:length])
            if code is not None:
                return sign + token[length:], code

        raise ValueError(f"Value string with $value_str = '{value_str}' has no known fiat symbol prefix")

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the subunit amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def fiat_value(self) -> Decimal:
        """Get the fiat (USD) value."""
        return self._fiat_value

    @property
    def display_options(self) -> DisplayOptions:
        return self._display_options

    @property
    def rounding_mode(self) -> RoundingMode:
        return self._display_options.rounding_mode

    @property
    def display_decimals(self) -> int:
        """Fractional digits used by `str(amount)`; the currency default unless overridden."""
        if self._display_options.display_decimals is None:
            return self._currency.display_decimals
        return self._display_options.display_decimals

    @property
    def settings(self) -> UserSettingsProvider:
        return self._settings

    @property
    def rates(self) -> FiatRateProvider | None:
        return self._rates

    # endregion

    # region Display preferences

    def with_display_options(self, display_options: DisplayOptions) -> Amount:
        """Return a copy of this Amount using $display_options. The receiver is unchanged."""
        return self._derive(self._amount, self._fiat_value, display_options=display_options)

    def with_display_decimals(self, display_decimals: int | None) -> Amount:
        """Return a copy showing $display_decimals fractional digits.

        Examples:
            >>> str(Amount("50030", "USDT").with_display_decimals(2))
            '0.05 USDT'
        """
        return self.with_display_options(self._display_options.with_display_decimals(display_decimals))

    def with_rounding_mode(self, rounding_mode: RoundingMode) -> Amount:
        """Return a copy that rounds displayed digits with $rounding_mode.

        Examples:
            >>> str(Amount("127298403429659153", "ETH").with_rounding_mode(RoundingMode.UP))
            '0.1273 ETH'
        """
        return self.with_display_options(self._display_options.with_rounding_mode(rounding_mode))

    def with_always_show_balances(self, always_show_balances: bool = True) -> Amount:
        return self.with_display_options(self._display_options.with_always_show_balances(always_show_balances))

    def should_show_balance(self) -> bool:
        """Return True if real values may be shown (not replaced by the placeholder)."""
        return self._display_options.always_show_balances or bool(self._settings.show_balances)

    # endregion

    # region Accessors

    def as_decimal(self) -> Decimal:
        """Return the subunit amount as Decimal."""
        return self._amount

    def as_big_int(self) -> int:
        """Return the subunit amount as int (any fractional subunit is truncated)."""
        return int(self._amount)

    def as_subunit(self) -> str:
        """Return the subunit amount as a plain string, e.g. the Wei value for a request payload."""
        return to_plain_str(self._amount)

    def as_value(self) -> str:
        """Return the whole-unit value as a plain string, e.g. for a form input.

        Digits beyond the currency's decimals (possible after a division) are dropped using
        the rounding mode.
        """
        value = quantize_places(self.down(), self._currency.decimals, self.rounding_mode.value)
        return to_plain_str(value)

    def down(self) -> Decimal:
        """Return the subunit amount shifted down by the currency's decimals, unrounded."""
        return shift(self._amount, -self._currency.decimals)

    def to_float(self) -> float:
        """Return the whole-unit value as float. Lossy for large or high-precision values."""
        return float(self.down())

    def non_zero(self) -> bool:
        """Return True if the amount is above zero. Negative amounts also return False."""
        return self._amount > 0

    def is_zero(self) -> bool:
        return self._amount.is_zero()

    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Formatting

    def local_amount(self, decimals: int | None = None) -> str:
        """Return the whole-unit value with thousands separators, e.g. '1,800.0000'.

        Fiat currencies are rendered with their narrow symbol ('£512.34').

        Args:
            decimals: Fractional digits. Defaults to `display_decimals`, which is 4 unless the
                currency or the display options say otherwise (DAI shows 2). For fiat currencies
                the default is the currency's own decimals.
        """
        if not self.should_show_balance():
            return HIDDEN_BALANCE_PLACEHOLDER

        if self._currency.is_fiat:
            fiat_decimals = decimals if decimals is not None else self._currency.decimals
            return format_currency_narrow(self._currency.symbol, self.down(), fiat_decimals, self.rounding_mode.value)

        if decimals is None:
            decimals = self.display_decimals
        return format_grouped(self.down(), decimals, self.rounding_mode.value)

    def integer_local_amount(self, include_currency: bool = False) -> str:
        if not self.should_show_balance():
            return HIDDEN_BALANCE_PLACEHOLDER

        result = format_grouped(self.down(), 0, self.rounding_mode.value)
        if include_currency:
            result = f"{result} {self._currency.symbol}"
        return result

    def as_decimal_format(self) -> str:
        """Return the value with all of the currency's decimals, e.g. '2.00000000 BTC'."""
        if not self.should_show_balance():
            return HIDDEN_BALANCE_PLACEHOLDER

        value = format_grouped(self.down(), self._currency.decimals, self.rounding_mode.value)
        return f"{value} {self._currency}"

    def full_local_amount(self) -> str:
        """Return the value without digit truncation.

        ISO fiat codes render as a fiat string without a '.00' tail ('£180'); other currencies
        render every significant digit followed by the symbol.
        """
        if not self.should_show_balance():
            return HIDDEN_BALANCE_PLACEHOLDER

        if self._currency.is_fiat or is_fiat_code(self._currency.symbol):
            formatted = format_currency_narrow(self._currency.symbol, self.down(), self._currency.decimals, self.rounding_mode.value)
            return _remove_zero_cents(formatted)

        return f"{format_grouped_full(self.down())} {self._currency.symbol}"

    def as_significant(self) -> str:
        """Like `str()`, but shows enough digits for a small amount to keep one significant digit.

        Examples:
            >>> Amount.from_decimal("0.000123", "USDT").as_significant()
            '0.0001 USDT'
            >>> Amount.from_decimal("0.0000123", "ETH").as_significant()
            '0.00001 ETH'
        """
        if not self.should_show_balance():
            return HIDDEN_BALANCE_PLACEHOLDER

        decimals = self.display_decimals
        value = self.down()
        if not value.is_zero() and abs(value) < 1:
            first_significant = -value.adjusted()
            decimals = min(max(decimals, first_significant), self._currency.decimals)

        if self._currency.is_fiat:
            return format_currency_narrow(self._currency.symbol, value, decimals, self.rounding_mode.value)
        return f"{format_grouped(value, decimals, self.rounding_mode.value)} {self._currency.symbol}"

    def to_string(self) -> str:
        """Return the display string, e.g. '0.3618 ETH' or '€100.00' for fiat currencies."""
        if not self.should_show_balance():
            return HIDDEN_BALANCE_PLACEHOLDER

        if self._currency.is_fiat:
            return self.local_amount()
        return f"{self.local_amount(self.display_decimals)} {self._currency.symbol}"

    def as_usd(self, decimals: int = 2, remove_decimals: bool = False) -> str:
        """Return the fiat value as a USD string, e.g. '$1,586.09'.

        Args:
            decimals: Fractional digits.
            remove_decimals: Drop a trailing '.00'.
        """
        if not self.should_show_balance():
            return HIDDEN_BALANCE_PLACEHOLDER

        result = f"${format_grouped(self._fiat_value, decimals, self.rounding_mode.value)}"
        if remove_decimals:
            result = _remove_zero_cents(result)
        return result

    def as_fiat(
        self,
        remove_decimals: bool = False,
        *,
        settings: UserSettingsProvider | None = None,
        rates: FiatRateProvider | None = None,
    ) -> str:
        """Return the fiat value in the user's preferred fiat currency.

        Args:
            remove_decimals: Drop a trailing '.00'.
            settings: Overrides the injected user settings for this call.
            rates: Overrides the injected rate provider for this call.

        Returns:
            Formatted value such as '£1,250.40'; an empty string for currencies that never carry
            a fiat value.

        Raises:
            ValueError: If the preferred currency is not USD and no rate is available for it.
        """
        if not self._currency.fiat_convertible:
            return ""

        settings = settings if settings is not None else self._settings
        if not (self._display_options.always_show_balances or settings.show_balances):
            return HIDDEN_BALANCE_PLACEHOLDER

        fiat_currency = (settings.fiat_currency or "USD").upper()
        if fiat_currency == "USD":
            return self.as_usd(2, remove_decimals)

        rates = rates if rates is not None else self._rates
        # Raise: conversion needs a rate provider
        if rates is None:
            raise ValueError(f"Cannot call `as_fiat` because no rate provider is set for $fiat_currency '{fiat_currency}'")
        try:
            rate = rates.get_rate(fiat_currency)
        except KeyError as e:
            raise ValueError(f"Cannot call `as_fiat` because no rate is known for $fiat_currency '{fiat_currency}'") from e

        value = DECIMAL_CONTEXT.multiply(self._fiat_value, as_decimal(rate))
        result = format_currency_narrow(fiat_currency, value, 2, ROUND_HALF_UP)
        if remove_decimals:
            result = _remove_zero_cents(result)
        return result

    def as_fiat_float(self) -> float:
        """Return the fiat value rounded to 2 decimals as float."""
        return float(quantize_places(self._fiat_value, 2, self.rounding_mode.value))

    # endregion

    # region Comparison

    def equals(self, other: Amount) -> bool:
        """Return True if $other holds exactly the same subunits of the same currency symbol."""
        if not isinstance(other, Amount):
            return False
        return self._amount == other._amount and self._currency.symbol == other._currency.symbol

    def is_less_than_value(self, value: DecimalLike) -> bool:
        """Compare the whole-unit value (not subunits) with $value."""
        return self.down() < as_decimal(value)

    def is_more_than_value(self, value: DecimalLike) -> bool:
        """Compare the whole-unit value (not subunits) with $value."""
        return self.down() > as_decimal(value)

    def is_currency(self, symbol: str) -> bool:
        return self._currency.symbol == symbol

    # endregion

    # region Arithmetic

    def multiplied_by(self, multiplier: DecimalLike) -> Amount:
        """Return a new Amount with subunits and fiat value both scaled by $multiplier."""
        factor = as_decimal(multiplier)
        return self._derive(
            DECIMAL_CONTEXT.multiply(self._amount, factor),
            DECIMAL_CONTEXT.multiply(self._fiat_value, factor),
        )

    def divided_by(self, divisor: DecimalLike) -> Amount:
        """Return a new Amount with subunits and fiat value both divided by $divisor.

        Quotients keep `DIVISION_DECIMAL_PLACES` fractional digits.

        Raises:
            ZeroDivisionError: If $divisor is zero.
        """
        value = as_decimal(divisor)
        # Raise: dividing by zero has no meaningful amount
        if value.is_zero():
            raise ZeroDivisionError("Cannot divide Amount by zero")

        return self._derive(
            _divide(self._amount, value),
            _divide(self._fiat_value, value),
        )

    def merge_amount(self, other: Amount, strict: bool = True) -> Amount:
        """Return a new Amount summing subunits and fiat values of this Amount and $other.

        Args:
            other: Amount to add.
            strict: When True, a different currency symbol raises. When False, the subunits are
                summed anyway (under this Amount's currency) and a warning is logged.

        Raises:
            ValueError: If currencies differ and $strict is True.
        """
        if not isinstance(other, Amount):
            raise TypeError(f"$other must be an Amount instance, but provided value is: {other!r}")

        if self._currency.symbol != other._currency.symbol:
            if strict:
                raise ValueError(f"Cannot merge amounts with different currencies: {self._currency} and {other._currency}")
            logger.warning(f"Merging amounts with different currencies {self._currency} and {other._currency}; result uses {self._currency}")

        return self._derive(
            DECIMAL_CONTEXT.add(self._amount, other._amount),
            DECIMAL_CONTEXT.add(self._fiat_value, other._fiat_value),
        )

    def multiply_percentage(self, percentage: DecimalLike) -> str:
        """Return the whole-unit value of $percentage of this Amount as a plain string.

        The percentage is a fraction (0.1 for 10%). The result is rounded to the currency's
        decimals with the rounding mode.

        Examples:
            >>> Amount.from_decimal("100", "ETH").multiply_percentage(0.2)
            '20'
        """
        product = DECIMAL_CONTEXT.multiply(self._amount, as_decimal(percentage))
        value = quantize_places(shift(product, -self._currency.decimals), self._currency.decimals, self.rounding_mode.value)
        return to_plain_str(value)

    def take_fee(self, fee: DecimalLike, remainder: bool = False) -> Amount:
        """Return the fee part of this Amount, or what is left after the fee when $remainder is True.

        The returned Amount has no fiat value.

        Args:
            fee: Fee as a fraction (0.1 for 10%).
            remainder: Return 1 - $fee of the amount instead.
        """
        fraction = as_decimal(fee)
        if remainder:
            fraction = DECIMAL_CONTEXT.subtract(Decimal(1), fraction)

        return Amount.from_decimal(
            self.multiply_percentage(fraction),
            self._currency,
            display_options=self._display_options,
            settings=self._settings,
            rates=self._rates,
        )

    def set_usd_value_from_rate(self, rate: DecimalLike) -> Amount:
        """Set the fiat value to the whole-unit value times $rate. No-op for a zero amount.

        This is the only operation that changes an existing Amount.

        Returns:
            Amount: This instance.
        """
        if self.is_zero():
            return self
        self._fiat_value = DECIMAL_CONTEXT.multiply(self.down(), as_decimal(rate))
        return self

    def _derive(self, amount: Decimal, fiat_value: Decimal, display_options: DisplayOptions | None = None) -> Amount:
        return Amount(
            amount,
            self._currency,
            fiat_value,
            display_options=display_options if display_options is not None else self._display_options,
            settings=self._settings,
            rates=self._rates,
        )

    # endregion

    # region Dunder methods

    def __eq__(self, other) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        """Hash based on subunit amount and currency symbol."""
        return hash((self._amount, self._currency.symbol))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.as_subunit()}', {self._currency.symbol}, fiat_value='{to_plain_str(self._fiat_value)}')"

    # endregion


def _divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    quotient = DECIMAL_CONTEXT.divide(dividend, divisor)
    if quotient == quotient.to_integral_value():
        return quotient
    return quantize_places(quotient, DIVISION_DECIMAL_PLACES, ROUND_HALF_UP)


def _remove_zero_cents(formatted: str) -> str:
    if formatted.endswith(".00"):
        return formatted[: -len(".00")]
    return formatted
