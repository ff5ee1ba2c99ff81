"""Locale utilities for converting between hyphenated ids and Babel ids.

Locale ids inside currencyengine are canonical hyphenated strings
("sr-Latn-RS"), the form used as keys by every lookup table. Babel and
CLDR use underscores ("sr_Latn_RS"). This module converts at that boundary
and caches Babel Locale objects.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from .constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "babel_locale_exists",
    "from_babel_identifier",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a hyphenated locale id to POSIX format for Babel.

    Args:
        locale_code: Locale id (e.g., "de-CH", "sr-Latn")

    Returns:
        POSIX-formatted id (e.g., "de_CH", "sr_Latn")

    Example:
        >>> normalize_locale("es-419")
        'es_419'
    """
    return locale_code.replace("-", "_")


def from_babel_identifier(identifier: str) -> str:
    """Convert a CLDR/Babel id to the hyphenated form used by lookup tables.

    The CLDR pseudo-locale "root" has no hyphenated equivalent and maps to
    the English root locale "en".

    Example:
        >>> from_babel_identifier("es_419")
        'es-419'
        >>> from_babel_identifier("root")
        'en'
    """
    if identifier == "root":
        return "en"
    return identifier.replace("_", "-")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale id (hyphenated or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def babel_locale_exists(locale_code: str) -> bool:
    """Check whether CLDR ships data for exactly this locale id.

    Unlike get_babel_locale(), no likely-subtag expansion happens here: the
    check answers "is there a data file for this id", which is what parent
    chain walking needs.
    """
    from babel import localedata  # noqa: PLC0415

    return localedata.exists(normalize_locale(locale_code))
