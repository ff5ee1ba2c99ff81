"""Locale-aware currency formatting.

Public API:
    Formatter - formats and parses amounts for one locale
    NumberFormat - per-locale pattern, separators, grouping and digits
    resolve_number_format - locale -> NumberFormat (fast tier, then CLDR)

Python 3.13+.
"""

from .formatter import Formatter
from .number_formats import NumberFormat, resolve_number_format
from .numbering import delocalize_digits, localize_digits

__all__ = [
    "Formatter",
    "NumberFormat",
    "delocalize_digits",
    "localize_digits",
    "resolve_number_format",
]
