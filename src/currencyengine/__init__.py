"""currencyengine - Currency amounts, ISO 4217 data and locale-aware formatting.

Decimal amounts that know their currency, a registry of ISO 4217 currencies
with CLDR symbols, and a formatter that renders and reads amounts the way
each locale writes them.

Public API:
    Amount - Immutable decimal amount bound to a currency code
    MinorAmount - Amount view whose number is expressed in minor units
    Formatter - Locale-aware formatting and parsing of amounts
    LocaleId - Language-script-territory identifier with CLDR parent chains
    CurrencyRegistry - Currency data with copy-on-write registration
    parse_amount - Parse display strings, errors returned in a tuple
    parse_minor_amount - Same, returning a MinorAmount

Registry functions (operate on the process-wide registry):
    is_valid, get_numeric_code, get_digits, get_symbol, get_currency_codes,
    for_country_code, register_currency, register

Exceptions:
    CurrencyError - Base exception class
    InvalidNumberError - Malformed or unusable number
    InvalidCurrencyCodeError - Empty or unknown currency code
    CurrencyMismatchError - Operands in different currencies
    RegistrationError - Custom currency registration failed
    CurrencyParseError - Returned by the parse gateway

Submodules:
    currencyengine.registry - Currency data and lookups
    currencyengine.amount - Amount and MinorAmount
    currencyengine.formatting - Formatter and per-locale number formats
    currencyengine.parsing - parse_amount gateway and type guards
    currencyengine.diagnostics - Error types, codes and diagnostic output
"""

from .amount import Amount, MinorAmount
from .core import LocaleId
from .diagnostics import (
    CurrencyAlreadyExistsError,
    CurrencyError,
    CurrencyMismatchError,
    CurrencyParseError,
    EmptyCurrencyCodeError,
    InvalidCurrencyCodeError,
    InvalidNumberError,
    RegistrationError,
)
from .enums import CurrencyDisplay, NumberingSystem, RoundingMode
from .formatting import Formatter
from .parsing import parse_amount, parse_minor_amount
from .registry import (
    CurrencyRegistry,
    for_country_code,
    get_currency_codes,
    get_digits,
    get_numeric_code,
    get_symbol,
    is_valid,
    register,
    register_currency,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencyengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Amount",
    "CurrencyAlreadyExistsError",
    "CurrencyDisplay",
    "CurrencyError",
    "CurrencyMismatchError",
    "CurrencyParseError",
    "CurrencyRegistry",
    "EmptyCurrencyCodeError",
    "Formatter",
    "InvalidCurrencyCodeError",
    "InvalidNumberError",
    "LocaleId",
    "MinorAmount",
    "NumberingSystem",
    "RegistrationError",
    "RoundingMode",
    "__version__",
    "for_country_code",
    "get_currency_codes",
    "get_digits",
    "get_numeric_code",
    "get_symbol",
    "is_valid",
    "parse_amount",
    "parse_minor_amount",
    "register",
    "register_currency",
]
