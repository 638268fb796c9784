from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation, MAX_EMAX, MIN_EMIN, ROUND_HALF_UP
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Context for all subunit arithmetic. Precision is wide enough for 18-decimal token amounts with
# 20+ integer digits, and the exponent range keeps results out of exponent notation.
DECIMAL_CONTEXT = Context(prec=200, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)

# Decimal places kept after a division (quotients are otherwise non-terminating)
DIVISION_DECIMAL_PLACES = 20


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        ValueError: If $value is not a finite number.
    """
    # Raise: bool is an int subclass, but never a meaningful amount
    if isinstance(value, bool):
        raise ValueError(f"$value must be a number, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"$value cannot be converted to Decimal, but provided value is: {value!r}") from e

    # Raise: NaN and infinities are never coerced into an amount
    if not result.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value!r}")

    return result


def shift(value: Decimal, places: int) -> Decimal:
    """Moves the decimal point of $value by $places (positive = multiply by 10**places).

    The shift is exact; no rounding happens under `DECIMAL_CONTEXT`.
    """
    return value.scaleb(places, context=DECIMAL_CONTEXT)


def quantize_places(value: Decimal, places: int, rounding: str) -> Decimal:
    """Rounds $value to $places fractional digits using $rounding (a `decimal` rounding constant)."""
    exponent = Decimal(1).scaleb(-places)
    result = value.quantize(exponent, rounding=rounding, context=DECIMAL_CONTEXT)
    # Negative zero (e.g. -0.00001 truncated) renders as plain zero
    if result.is_zero():
        result = result.copy_abs()
    return result


# Note: No 'as_float' or 'as_int' functions are provided.
# Use the Python builtin functions like `float()`, `int()` directly for efficient conversion
