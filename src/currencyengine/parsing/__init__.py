"""Bi-directional formatting: parse locale-formatted amounts back to values.

- Functions NEVER raise for bad input; errors are returned in the tuple
- Consistent with Formatter.format(): whatever it prints, parse_amount() reads

Public API:
    Parsing Functions:
        parse_amount - Returns tuple[Amount | None, tuple[CurrencyParseError, ...]]
        parse_minor_amount - Returns tuple[MinorAmount | None, tuple[CurrencyParseError, ...]]

    Type Guards:
        is_valid_amount - TypeIs guard for Amount (not None)
        is_valid_minor_amount - TypeIs guard for MinorAmount (not None)

Example:
    >>> from currencyengine.parsing import parse_amount, is_valid_amount
    >>> result, errors = parse_amount("1.234,56\\xa0€", "EUR", "de")
    >>> if is_valid_amount(result):
    ...     print(result)
    1234.56 EUR

Python 3.13+.
"""

from .amounts import parse_amount, parse_minor_amount
from .guards import is_valid_amount, is_valid_minor_amount

__all__ = [
    # Type guards
    "is_valid_amount",
    "is_valid_minor_amount",
    # Parsing functions
    "parse_amount",
    "parse_minor_amount",
]
