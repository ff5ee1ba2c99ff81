"""Hypothesis strategies for currency amounts and formatting.

Usage:
    from tests.strategies.currency import amounts, currency_codes, formatting_locales

Event-Emitting Strategies (HypoFuzz-Optimized):
    - currency_amounts: emits currency_amount_magnitude
    - currency_by_digits: emits currency_digits
    - amounts: emits amount_sign

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from currencyengine import Amount
from currencyengine.registry import data

# Codes grouped by minor-unit digits (JPY 0, USD 2, OMR 3, CLF 4).
_CODES_BY_DIGITS: dict[int, list[str]] = {}
for _code, (_numeric, _digits) in data.CURRENCIES.items():
    _CODES_BY_DIGITS.setdefault(_digits, []).append(_code)

# Locales with curated formats: results do not depend on the installed CLDR.
FORMATTING_LOCALES: list[str] = [
    "en", "en-IN", "ar", "bg", "bn", "de", "de-AT", "de-CH", "dz", "es",
    "es-419", "fa", "fr", "hi", "it", "ja", "my", "ne", "nl", "pl", "pt",
    "pt-PT", "ru", "sr", "sr-Latn", "sv", "tr", "zh",
]


def currency_codes() -> st.SearchStrategy[str]:
    """Any built-in currency code."""
    return st.sampled_from(list(data.CURRENCIES))


def formatting_locales() -> st.SearchStrategy[str]:
    return st.sampled_from(FORMATTING_LOCALES)


@composite
def currency_by_digits(draw: st.DrawFn) -> str:
    """Currency code, balanced across fraction-digit classes.

    Events emitted:
    - currency_digits={0|2|3|4}
    """
    digits = draw(st.sampled_from(sorted(_CODES_BY_DIGITS)))
    event(f"currency_digits={digits}")
    return draw(st.sampled_from(_CODES_BY_DIGITS[digits]))


@composite
def currency_amounts(draw: st.DrawFn, places: int = 2) -> Decimal:
    """Generate realistic non-negative numbers with `places` fraction digits.

    Events emitted:
    - currency_amount_magnitude={micro|small|medium|large|huge}
    """
    category = draw(st.sampled_from(["micro", "small", "medium", "large", "huge"]))

    match category:
        case "micro":
            low, high = Decimal("0"), Decimal("0.99")
        case "small":
            low, high = Decimal("1"), Decimal("99.99")
        case "medium":
            low, high = Decimal("100"), Decimal("9999.99")
        case "large":
            low, high = Decimal("10000"), Decimal("999999.99")
        case _:  # huge
            low, high = Decimal("1000000"), Decimal("99999999999.99")

    event(f"currency_amount_magnitude={category}")
    return draw(st.decimals(min_value=low, max_value=high, places=places))


@composite
def amounts(draw: st.DrawFn, currency_code: str | None = None) -> Amount:
    """Amount already rounded to its currency's digits, either sign.

    Events emitted:
    - amount_sign={positive|negative|zero}
    """
    code = currency_code if currency_code is not None else draw(currency_by_digits())
    _, digits = data.CURRENCIES[code]
    number = draw(currency_amounts(places=digits))
    if draw(st.booleans()):
        number = -number
    amount = Amount.parse(format(number, "f"), code)
    if amount.is_zero():
        event("amount_sign=zero")
    elif amount.is_negative():
        event("amount_sign=negative")
    else:
        event("amount_sign=positive")
    return amount
