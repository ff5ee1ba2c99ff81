"""Currency registry: ISO 4217 data, symbols and country currencies.

Python 3.13+.
"""

from .registry import (
    CountryCurrencyProvider,
    CurrencyInfo,
    CurrencyRegistry,
    SymbolEntry,
    default_registry,
    for_country_code,
    get_currency_codes,
    get_digits,
    get_numeric_code,
    get_symbol,
    is_valid,
    register,
    register_currency,
)

__all__ = [
    "CountryCurrencyProvider",
    "CurrencyInfo",
    "CurrencyRegistry",
    "SymbolEntry",
    "default_registry",
    "for_country_code",
    "get_currency_codes",
    "get_digits",
    "get_numeric_code",
    "get_symbol",
    "is_valid",
    "register",
    "register_currency",
]
