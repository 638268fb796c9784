from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP
from enum import Enum


class RoundingMode(Enum):
    """Rounding policy applied when an amount is shown with fewer digits than it holds.

    Values are the matching `decimal` rounding constants, so `mode.value` can be passed
    straight to `Decimal.quantize`.

    Members:
        DOWN: Toward zero (truncate).
        UP: Away from zero.
        FLOOR: Toward negative infinity.
        CEILING: Toward positive infinity.
        HALF_UP: Nearest, ties away from zero.
        HALF_DOWN: Nearest, ties toward zero.
        HALF_EVEN: Nearest, ties to even.
    """

    DOWN = ROUND_DOWN
    UP = ROUND_UP
    FLOOR = ROUND_FLOOR
    CEILING = ROUND_CEILING
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN


@dataclass(frozen=True)
class DisplayOptions:
    """Display-only preferences of an `Amount`. They never change the stored value.

    Attributes:
        display_decimals: Fractional digits used by `str(amount)`. None means the
            currency's own default (4 for most assets).
        rounding_mode: How digits are dropped when formatting.
        always_show_balances: Show real values even when the user hides balances.
    """

    display_decimals: int | None = None
    rounding_mode: RoundingMode = RoundingMode.DOWN
    always_show_balances: bool = False

    def __post_init__(self) -> None:
        # Raise: display decimals must be a non-negative integer
        if self.display_decimals is not None and (
            isinstance(self.display_decimals, bool) or not isinstance(self.display_decimals, int) or self.display_decimals < 0
        ):
            raise ValueError(f"$display_decimals must be a non-negative integer or None, but provided value is: {self.display_decimals}")

        # Raise: rounding mode must be one of the supported policies
        if not isinstance(self.rounding_mode, RoundingMode):
            raise TypeError(f"$rounding_mode must be a RoundingMode instance, but provided value is: {self.rounding_mode}")

    def with_display_decimals(self, display_decimals: int | None) -> DisplayOptions:
        return replace(self, display_decimals=display_decimals)

    def with_rounding_mode(self, rounding_mode: RoundingMode) -> DisplayOptions:
        return replace(self, rounding_mode=rounding_mode)

    def with_always_show_balances(self, always_show_balances: bool = True) -> DisplayOptions:
        return replace(self, always_show_balances=always_show_balances)


DEFAULT_DISPLAY_OPTIONS = DisplayOptions()
