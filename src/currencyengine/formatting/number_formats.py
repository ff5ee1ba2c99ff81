"""Per-locale currency number formats.

A NumberFormat holds what the Formatter needs for one locale: a simplified
currency pattern ("¤0.00", "0.00 ¤;(0.00 ¤)") where "0.00" stands for
the rendered numeral, "¤" for the currency marker, "+"/"-" for the locale's
sign glyphs, plus separators, grouping sizes and the numbering system.

Tiered Loading Strategy:
    - Fast Tier: curated formats for common locales (immediate, exact)
    - Full Tier: formats derived from CLDR via Babel on first use of a
      locale the fast tier lacks; cached per locale id

Resolution walks the locale's parent chain and takes the first locale with
a format in either tier (fast tier first at each step). CLDR data read
through Babel carries no minimum grouping digits, so a full tier format
takes min_grouping from the nearest curated ancestor ("es-ES" groups like
"es"). English and English-US short-circuit to the root English format.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, replace

from babel.core import UnknownLocaleError

from currencyengine.constants import MAX_FORMAT_CACHE_SIZE, NO_GROUPING, NUMBER_PLACEHOLDER
from currencyengine.core.locale_id import ENGLISH_US, LocaleId, as_locale
from currencyengine.enums import NumberingSystem
from currencyengine.locale_utils import babel_locale_exists, get_babel_locale

__all__ = [
    "NumberFormat",
    "get_fast_tier_format",
    "load_babel_format",
    "resolve_number_format",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """Currency number format of one locale.

    Attributes:
        standard_pattern: Positive[;negative] pattern
        accounting_pattern: Accounting pattern, "" when the locale has none
        decimal_separator: Decimal separator glyph
        grouping_separator: Grouping separator glyph
        plus_sign: Plus sign glyph (may include bidi marks)
        minus_sign: Minus sign glyph (may include bidi marks)
        primary_grouping: Size of the group nearest the decimal point, 0 disables grouping
        secondary_grouping: Size of every further group
        min_grouping: Minimum digits in front of the first separator
        numbering_system: Digit glyph set
    """

    standard_pattern: str
    accounting_pattern: str = ""
    decimal_separator: str = "."
    grouping_separator: str = ","
    plus_sign: str = "+"
    minus_sign: str = "-"
    primary_grouping: int = 3
    secondary_grouping: int = 3
    min_grouping: int = 1
    numbering_system: NumberingSystem = NumberingSystem.LATN


# =============================================================================
# FAST TIER: curated formats
# =============================================================================
_NBSP = "\u00a0"
_NNBSP = "\u202f"

_FAST_TIER_FORMATS: dict[str, NumberFormat] = {
    "en": NumberFormat("¤0.00", "¤0.00;(¤0.00)"),
    "en-IN": NumberFormat("¤0.00", "¤0.00", secondary_grouping=2),
    "ar": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤",
        decimal_separator="٫",
        grouping_separator="٬",
        plus_sign="\u061c+",
        minus_sign="\u061c-",
        numbering_system=NumberingSystem.ARAB,
    ),
    "bg": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤;(0.00{_NBSP}¤)",
        decimal_separator=",",
        grouping_separator=_NBSP,
        primary_grouping=0,
        secondary_grouping=0,
    ),
    "bn": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤;(0.00{_NBSP}¤)",
        secondary_grouping=2,
        numbering_system=NumberingSystem.BENG,
    ),
    "de": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "de-AT": NumberFormat(
        f"¤{_NBSP}0.00",
        f"¤{_NBSP}0.00",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "de-CH": NumberFormat(
        f"¤{_NBSP}0.00;¤-0.00",
        f"¤{_NBSP}0.00;¤-0.00",
        grouping_separator="’",
    ),
    "dz": NumberFormat(
        "¤0.00",
        "¤0.00",
        secondary_grouping=2,
        numbering_system=NumberingSystem.TIBT,
    ),
    "es": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤",
        decimal_separator=",",
        grouping_separator=".",
        min_grouping=2,
    ),
    "es-419": NumberFormat("¤0.00", "¤0.00"),
    "fa": NumberFormat(
        "\u200e¤0.00",
        "\u200e¤0.00;\u200e(¤0.00)",
        decimal_separator="٫",
        grouping_separator="٬",
        plus_sign="\u200e+",
        minus_sign="\u200e\u2212",
        numbering_system=NumberingSystem.ARABEXT,
    ),
    "fr": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤;(0.00{_NBSP}¤)",
        decimal_separator=",",
        grouping_separator=_NNBSP,
    ),
    "hi": NumberFormat("¤0.00", "¤0.00", secondary_grouping=2),
    "it": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "ja": NumberFormat("¤0.00", "¤0.00;(¤0.00)"),
    "my": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤",
        numbering_system=NumberingSystem.MYMR,
    ),
    "ne": NumberFormat(
        f"¤{_NBSP}0.00",
        f"¤{_NBSP}0.00",
        secondary_grouping=2,
        numbering_system=NumberingSystem.DEVA,
    ),
    "nl": NumberFormat(
        f"¤{_NBSP}0.00;¤{_NBSP}-0.00",
        f"¤{_NBSP}0.00;(¤{_NBSP}0.00)",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "pl": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤;(0.00{_NBSP}¤)",
        decimal_separator=",",
        grouping_separator=_NBSP,
        min_grouping=2,
    ),
    "pt": NumberFormat(
        f"¤{_NBSP}0.00",
        f"¤{_NBSP}0.00",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "pt-PT": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤;(0.00{_NBSP}¤)",
        decimal_separator=",",
        grouping_separator=_NBSP,
        min_grouping=2,
    ),
    "ru": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤",
        decimal_separator=",",
        grouping_separator=_NBSP,
    ),
    "sr": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤;(0.00{_NBSP}¤)",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "sr-Latn": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤;(0.00{_NBSP}¤)",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "sv": NumberFormat(
        f"0.00{_NBSP}¤",
        f"0.00{_NBSP}¤",
        decimal_separator=",",
        grouping_separator=_NBSP,
        minus_sign="\u2212",
    ),
    "tr": NumberFormat(
        "¤0.00",
        "¤0.00;(¤0.00)",
        decimal_separator=",",
        grouping_separator=".",
    ),
    "zh": NumberFormat("¤0.00", "¤0.00;(¤0.00)"),
}

_ROOT_FORMAT = _FAST_TIER_FORMATS["en"]


def get_fast_tier_format(locale_id: str) -> NumberFormat | None:
    """Curated format for exactly this locale id, or None."""
    return _FAST_TIER_FORMATS.get(locale_id)


# =============================================================================
# FULL TIER: formats derived from CLDR via Babel
# =============================================================================


def _simplify_pattern(prefixes: tuple[str, str], suffixes: tuple[str, str]) -> str:
    """Rebuild a CLDR pattern around the "0.00" numeral placeholder.

    The negative half is kept only when it is not simply "-" + positive.
    """
    positive = f"{prefixes[0]}{NUMBER_PLACEHOLDER}{suffixes[0]}"
    negative = f"{prefixes[1]}{NUMBER_PLACEHOLDER}{suffixes[1]}"
    if negative == f"-{positive}":
        return positive
    return f"{positive};{negative}"


@functools.lru_cache(maxsize=MAX_FORMAT_CACHE_SIZE)
def load_babel_format(locale_id: str) -> NumberFormat | None:
    """Derive the format of exactly this locale id from CLDR.

    Returns None when CLDR has no data file for the id or when its data
    cannot be represented (unsupported numbering system, missing symbols).
    """
    if not babel_locale_exists(locale_id):
        return None

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.numbers import (  # noqa: PLC0415
        get_decimal_symbol,
        get_group_symbol,
        get_minus_sign_symbol,
        get_plus_sign_symbol,
    )

    try:
        locale = get_babel_locale(locale_id)
        system_name = locale.default_numbering_system
        if system_name not in NumberingSystem:
            logger.debug("Skipping %s: numbering system %s", locale_id, system_name)
            return None
        standard = locale.currency_formats["standard"]
        accounting = locale.currency_formats.get("accounting")
        primary, secondary = standard.grouping
        if primary >= NO_GROUPING:
            primary = secondary = 0
        result = NumberFormat(
            standard_pattern=_simplify_pattern(standard.prefix, standard.suffix),
            accounting_pattern=(
                _simplify_pattern(accounting.prefix, accounting.suffix) if accounting else ""
            ),
            decimal_separator=get_decimal_symbol(locale, numbering_system="default"),
            grouping_separator=get_group_symbol(locale, numbering_system="default"),
            plus_sign=get_plus_sign_symbol(locale, numbering_system="default"),
            minus_sign=get_minus_sign_symbol(locale, numbering_system="default"),
            primary_grouping=primary,
            secondary_grouping=secondary,
            numbering_system=NumberingSystem(system_name),
        )
    except (UnknownLocaleError, ValueError, KeyError, AttributeError) as e:
        logger.debug("Skipping CLDR currency format for %s: %s", locale_id, e)
        return None

    logger.debug("Loaded CLDR currency format for %s", locale_id)
    return result


# =============================================================================
# RESOLUTION
# =============================================================================


def _inherit_min_grouping(
    number_format: NumberFormat, ancestors: list[LocaleId]
) -> NumberFormat:
    for ancestor in ancestors:
        curated = get_fast_tier_format(str(ancestor))
        if curated is not None:
            return replace(number_format, min_grouping=curated.min_grouping)
    return number_format


@functools.lru_cache(maxsize=MAX_FORMAT_CACHE_SIZE)
def _resolve(locale: LocaleId) -> NumberFormat:
    if locale == ENGLISH_US or locale.is_empty():
        return _ROOT_FORMAT

    chain = list(locale.chain())
    for index, candidate in enumerate(chain):
        key = str(candidate)
        number_format = get_fast_tier_format(key)
        if number_format is None:
            number_format = load_babel_format(key)
            if number_format is None:
                continue
            number_format = _inherit_min_grouping(number_format, chain[index + 1 :])
        if key == "en" and locale.language != "en":
            logger.warning("No currency format for locale %s; using root English", locale)
        return number_format

    logger.warning("No currency format for locale %s; using root English", locale)
    return _ROOT_FORMAT


def resolve_number_format(locale: LocaleId | str) -> NumberFormat:
    """Resolve the currency number format for a locale.

    Thread-safe. Results are cached per locale.
    """
    return _resolve(as_locale(locale))
