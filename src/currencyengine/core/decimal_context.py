"""Decimal context and numeral grammar shared by all amount arithmetic.

Amounts use one fixed context wide enough for every supported magnitude, so
results never depend on operand size. Parsing is stricter than Decimal():
only ASCII numerals with an optional sign, point and exponent are accepted,
and only within MAX_NUMERAL_EXPONENT orders of magnitude of 1.

Python 3.13+. Zero external dependencies.
"""

import re
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)

from currencyengine.constants import DECIMAL_PRECISION, MAX_NUMERAL_EXPONENT

__all__ = [
    "AMOUNT_CONTEXT",
    "format_plain",
    "is_in_range",
    "parse_numeral",
    "quantize",
]

AMOUNT_CONTEXT = Context(
    prec=DECIMAL_PRECISION,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

# Decimal() also accepts "NaN", "Infinity", "1_000", surrounding whitespace
# and non-ASCII digits; none of those are numerals here.
_NUMERAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_in_range(value: Decimal) -> bool:
    """True for finite values whose exponent stays within MAX_NUMERAL_EXPONENT."""
    return value.is_finite() and abs(value.adjusted()) <= MAX_NUMERAL_EXPONENT


def parse_numeral(text: str) -> Decimal | None:
    """Parse a numeral string, keeping its exact scale.

    Returns:
        The Decimal value ("50.00" keeps two fraction digits), or None when
        the text is not an ASCII numeral or its magnitude is out of range
        ("9e999999").
    """
    if not _NUMERAL_PATTERN.fullmatch(text):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if is_in_range(value) else None


def quantize(value: Decimal, digits: int, rounding: str) -> Decimal:
    """Round value to exactly `digits` fraction digits.

    The working precision grows with the integer part so quantization never
    fails for large magnitudes.
    """
    exponent = Decimal(1).scaleb(-digits)
    integer_digits = max(value.adjusted() + 1, 1)
    context = Context(
        prec=max(DECIMAL_PRECISION, integer_digits + digits + 1),
        rounding=rounding,
        traps=[InvalidOperation],
    )
    return value.quantize(exponent, context=context)


def format_plain(value: Decimal) -> str:
    """Render value without exponent notation ("1E+3" -> "1000")."""
    text = format(value, "f")
    if text.startswith("-") and value.is_zero():
        return text[1:]
    return text
