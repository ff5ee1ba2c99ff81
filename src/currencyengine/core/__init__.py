"""Core utilities shared by the registry, amount and formatting layers.

Exports:
    LocaleId: Language-script-territory identifier with CLDR parent chains
    as_locale: Coerce a string or LocaleId argument

Python 3.13+.
"""

from .locale_id import EMPTY_LOCALE, ENGLISH, ENGLISH_US, LocaleId, as_locale

__all__ = ["EMPTY_LOCALE", "ENGLISH", "ENGLISH_US", "LocaleId", "as_locale"]
