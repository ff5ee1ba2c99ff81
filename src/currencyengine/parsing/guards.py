"""Type guards for parse gateway results.

All parse_* functions return tuple[result, tuple[CurrencyParseError, ...]].
The guards check the result component so mypy narrows it.

Note: All guards accept None and return False, so
`if not errors and is_valid_amount(result)` reduces to `if is_valid_amount(result)`.

Python 3.13+ with TypeIs support (PEP 742).
"""

from typing import TypeIs

from currencyengine.amount import Amount, MinorAmount

__all__ = ["is_valid_amount", "is_valid_minor_amount"]


def is_valid_amount(value: Amount | None) -> TypeIs[Amount]:
    """Type guard: parsed amount is present and carries a currency.

    Example:
        >>> result, errors = parse_amount("$1,234.56", "USD", "en")
        >>> if is_valid_amount(result):
        ...     total = result.mul("1.21")
    """
    return isinstance(value, Amount) and value.currency_code != ""


def is_valid_minor_amount(value: MinorAmount | None) -> TypeIs[MinorAmount]:
    """Type guard: parsed minor amount is present and carries a currency."""
    return isinstance(value, MinorAmount) and value.currency_code != ""
