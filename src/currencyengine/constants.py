"""Shared constants for currencyengine.

Constants are grouped by domain:
- Decimal arithmetic: working precision for amount calculations
- Currency codes: code width and lookup sentinels
- Cache limits: memory bounds for locale and format caches
- Typography: characters used by CLDR currency patterns

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Decimal arithmetic
    "DECIMAL_PRECISION",
    "MAX_NUMERAL_EXPONENT",
    # Currency codes
    "CURRENCY_CODE_LENGTH",
    "NUMERIC_CODE_NOT_FOUND",
    "DIGITS_NOT_FOUND",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_FORMAT_CACHE_SIZE",
    # Typography
    "CURRENCY_SIGN",
    "NUMBER_PLACEHOLDER",
    "NBSP",
    "LRM",
    "RLM",
    "NO_GROUPING",
]

# ============================================================================
# DECIMAL ARITHMETIC
# ============================================================================

# Significant digits kept by every amount operation. Wide enough for any
# int64 minor-unit value combined with 18 fraction digits.
DECIMAL_PRECISION: int = 39

# Largest decimal exponent (in either direction) accepted for an amount.
# Keeps every sum and product of two amounts far from the context limits.
MAX_NUMERAL_EXPONENT: int = 1000

# ============================================================================
# CURRENCY CODES
# ============================================================================

# ISO 4217 alphabetic codes are exactly three characters wide.
# The compact binary encoding relies on this fixed width.
CURRENCY_CODE_LENGTH: int = 3

# Returned by numeric code lookups for empty or unknown currencies.
NUMERIC_CODE_NOT_FOUND: str = "000"

# Returned by digit lookups for empty or unknown currencies.
DIGITS_NOT_FOUND: int = 0

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of Babel Locale objects kept by get_babel_locale().
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum number of resolved number formats kept per process.
MAX_FORMAT_CACHE_SIZE: int = 256

# ============================================================================
# TYPOGRAPHY
# ============================================================================

# Currency placeholder in CLDR patterns (U+00A4 CURRENCY SIGN).
CURRENCY_SIGN: str = "\u00a4"

# Numeral placeholder in simplified currency patterns.
NUMBER_PLACEHOLDER: str = "0.00"

# Non-breaking space separating a currency marker from the numeral.
NBSP: str = "\u00a0"

# Bidirectional marks stripped when parsing.
LRM: str = "\u200e"
RLM: str = "\u200f"

# Babel reports this grouping size when a pattern has no grouping separator.
NO_GROUPING: int = 1000
