"""Enumerations for currencyengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they serialize cleanly and
compare equal to their CLDR / configuration spelling.

Python 3.13+.
"""

from decimal import (
    ROUND_DOWN,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import StrEnum


class RoundingMode(StrEnum):
    """Rounding applied when an amount is quantized to fewer fraction digits.

    All modes operate on the magnitude; the sign is kept.

    StrEnum provides automatic string conversion: str(RoundingMode.HALF_UP) == "half_up"
    """

    HALF_UP = "half_up"
    """Ties round away from zero: 1.235 -> 1.24, -1.235 -> -1.24"""

    HALF_DOWN = "half_down"
    """Ties round toward zero: 1.235 -> 1.23, 1.2351 -> 1.24"""

    UP = "up"
    """Any discarded remainder rounds away from zero: 1.231 -> 1.24"""

    DOWN = "down"
    """Truncate toward zero: 1.239 -> 1.23"""

    HALF_EVEN = "half_even"
    """Ties round to the even neighbour (banker's rounding): 1.245 -> 1.24"""

    @property
    def decimal_rounding(self) -> str:
        """The matching ``decimal`` module rounding constant."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING: dict[RoundingMode, str] = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.UP: ROUND_UP,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


class CurrencyDisplay(StrEnum):
    """How the formatter renders the currency marker.

    StrEnum provides automatic string conversion: str(CurrencyDisplay.CODE) == "code"
    """

    SYMBOL = "symbol"
    """Locale symbol: $, US$, CA$, €"""

    CODE = "code"
    """ISO 4217 code: USD"""

    NONE = "none"
    """No marker; the adjacent pattern space is dropped too"""


class NumberingSystem(StrEnum):
    """CLDR numbering systems with a decimal digit substitution table."""

    LATN = "latn"
    ARAB = "arab"
    ARABEXT = "arabext"
    BENG = "beng"
    DEVA = "deva"
    MYMR = "mymr"
    TIBT = "tibt"


__all__ = [
    "CurrencyDisplay",
    "NumberingSystem",
    "RoundingMode",
]
