"""Hypothesis strategies for currencyengine property-based testing.

Usage:
    from tests.strategies import amounts, currency_codes, formatting_locales

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - currency_amounts, currency_by_digits, amounts
"""

from .currency import (
    FORMATTING_LOCALES,
    amounts,
    currency_amounts,
    currency_by_digits,
    currency_codes,
    formatting_locales,
)

__all__ = [
    "FORMATTING_LOCALES",
    "amounts",
    "currency_amounts",
    "currency_by_digits",
    "currency_codes",
    "formatting_locales",
]
