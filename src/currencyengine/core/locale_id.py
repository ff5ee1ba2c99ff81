"""Locale identifiers and CLDR parent-locale resolution.

LocaleId is the language-script-territory triple used as the key for every
locale-scoped lookup (currency symbols, number formats). Parsing is lenient
on input ("SR_rs_LATN") and canonical on output ("sr-Latn-RS").

Tiered Parent Data:
    - Fast Tier: curated irregular parents (e.g. "es-AR" -> "es-419",
      "sr-Latn" -> "en"), available without touching Babel.
    - Full Tier: CLDR parentLocales via Babel, loaded lazily on the first
      lookup that misses the fast tier. Fast tier entries take priority.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass

from currencyengine.locale_utils import from_babel_identifier

__all__ = [
    "EMPTY_LOCALE",
    "ENGLISH",
    "ENGLISH_US",
    "LocaleId",
    "ParentLocaleProvider",
    "as_locale",
]

logger = logging.getLogger(__name__)

_SCRIPT_LENGTH = 4
_TERRITORY_LENGTHS = (2, 3)

# =============================================================================
# FAST TIER: irregular parents that cannot be derived by truncation
# =============================================================================
_LATIN_AMERICAN_SPANISH = (
    "AR", "BO", "BR", "BZ", "CL", "CO", "CR", "CU", "DO", "EC", "GT", "HN",
    "MX", "NI", "PA", "PE", "PR", "PY", "SV", "US", "UY", "VE",
)
_INTERNATIONAL_ENGLISH = (
    "150", "AG", "AI", "AU", "BB", "BM", "BS", "BW", "BZ", "CA", "CC", "CK",
    "CM", "CX", "CY", "DG", "DM", "ER", "FJ", "FK", "FM", "GB", "GD", "GG",
    "GH", "GI", "GM", "GY", "HK", "IE", "IL", "IM", "IN", "IO", "JE", "JM",
    "KE", "KI", "KN", "KY", "LC", "LR", "LS", "MG", "MO", "MS", "MT", "MU",
    "MV", "MW", "MY", "NA", "NF", "NG", "NR", "NU", "NZ", "PG", "PK", "PN",
    "PW", "RW", "SB", "SC", "SD", "SG", "SH", "SL", "SS", "SX", "SZ", "TC",
    "TK", "TO", "TT", "TV", "TZ", "UG", "VC", "VG", "VU", "WS", "ZA", "ZM",
    "ZW",
)
_EUROPEAN_ENGLISH = ("AT", "BE", "CH", "DE", "DK", "FI", "NL", "SE", "SI")
_EUROPEAN_PORTUGUESE = (
    "AO", "CH", "CV", "FR", "GQ", "GW", "LU", "MO", "MZ", "ST", "TL",
)

_FAST_TIER_PARENTS: dict[str, str] = {
    **{f"es-{t}": "es-419" for t in _LATIN_AMERICAN_SPANISH},
    **{f"en-{t}": "en-001" for t in _INTERNATIONAL_ENGLISH},
    **{f"en-{t}": "en-150" for t in _EUROPEAN_ENGLISH},
    **{f"pt-{t}": "pt-PT" for t in _EUROPEAN_PORTUGUESE},
    # Non-default scripts fall back to English, not to the bare language.
    "az-Arab": "en",
    "az-Cyrl": "en",
    "bs-Cyrl": "en",
    "ff-Adlm": "en",
    "ha-Arab": "en",
    "ms-Arab": "en",
    "pa-Arab": "en",
    "shi-Latn": "en",
    "sr-Latn": "en",
    "uz-Arab": "en",
    "uz-Cyrl": "en",
    "vai-Latn": "en",
    "yue-Hans": "en",
    "zh-Hant": "en",
    "zh-Hant-MO": "zh-Hant-HK",
}


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Unicode locale identifier reduced to language, script and territory.

    All three parts are optional; the empty identifier is the root sentinel
    that terminates every parent chain. Equality is structural.

    Attributes:
        language: Lowercase language subtag ("sr")
        script: Title-cased 4-letter script subtag ("Latn") or ""
        territory: Uppercase region subtag ("RS", "419") or ""
    """

    language: str = ""
    script: str = ""
    territory: str = ""

    @classmethod
    def parse(cls, identifier: str) -> LocaleId:
        """Parse a locale identifier, normalizing case and separators.

        The first segment is the language. Later segments are classified by
        length: 4 characters is a script, 2 or 3 a territory. Anything else
        (variants, extensions) is ignored.

        Example:
            >>> str(LocaleId.parse("SR_rs_LATN"))
            'sr-Latn-RS'
        """
        normalized = identifier.strip().lower().replace("_", "-")
        language = script = territory = ""
        for index, part in enumerate(normalized.split("-")):
            if index == 0:
                language = part
            elif len(part) == _SCRIPT_LENGTH:
                script = part[0].upper() + part[1:]
            elif len(part) in _TERRITORY_LENGTHS:
                territory = part.upper()
        return cls(language, script, territory)

    def __str__(self) -> str:
        return "-".join(part for part in (self.language, self.script, self.territory) if part)

    def is_empty(self) -> bool:
        """True when all three parts are empty."""
        return not (self.language or self.script or self.territory)

    def parent(self) -> LocaleId:
        """Return the next-coarser locale.

        Order:
            1. Irregular parent from the CLDR parent table ("es-AR" -> "es-419")
            2. Drop the territory ("sr-Cyrl-RS" -> "sr-Cyrl")
            3. Drop the script ("sr-Cyrl" -> "sr")
            4. English ("sr" -> "en")
            5. Empty locale ("en" -> "")
        """
        locale_id = str(self)
        if locale_id in ("", "en"):
            return EMPTY_LOCALE

        override = _parent_provider.get(locale_id)
        if override is not None:
            return LocaleId.parse(override)

        if self.territory:
            return LocaleId(self.language, self.script)
        if self.script:
            return LocaleId(self.language)
        return ENGLISH

    def chain(self) -> Iterator[LocaleId]:
        """Yield this locale and each parent, stopping before the empty locale."""
        current = self
        seen: set[LocaleId] = set()
        while not current.is_empty() and current not in seen:
            yield current
            seen.add(current)
            current = current.parent()


EMPTY_LOCALE = LocaleId()
ENGLISH = LocaleId("en")
ENGLISH_US = LocaleId("en", territory="US")


def as_locale(locale: LocaleId | str) -> LocaleId:
    """Coerce a locale argument to a LocaleId."""
    if isinstance(locale, LocaleId):
        return locale
    return LocaleId.parse(locale)


def _build_parent_map_from_cldr() -> dict[str, str]:
    """Read CLDR parentLocales through Babel.

    Returns:
        Mapping from hyphenated child id to hyphenated parent id. Entries
        whose child or parent cannot be represented are skipped.
    """
    from babel.core import get_global  # noqa: PLC0415

    result: dict[str, str] = {}
    try:
        exceptions = get_global("parent_exceptions")
    except (KeyError, ValueError, OSError) as e:
        logger.debug("CLDR parent_exceptions unavailable: %s", e)
        return result

    for child, parent in exceptions.items():
        child_id = str(LocaleId.parse(child))
        parent_id = from_babel_identifier(parent)
        if not child_id or child_id == parent_id:
            continue
        result[child_id] = parent_id

    logger.debug("Loaded %d CLDR parent locales", len(result))
    return result


class ParentLocaleProvider:
    """Irregular parent locale table with lazy CLDR completion.

    Thread-safe. The fast tier answers common lookups without Babel; the
    full tier is built once, under a lock, on the first fast-tier miss.
    """

    __slots__ = ("_full_tier", "_loaded", "_lock")

    def __init__(self) -> None:
        self._loaded: bool = False
        self._lock: threading.Lock = threading.Lock()
        self._full_tier: dict[str, str] = {}

    def ensure_loaded(self) -> None:
        """Load the CLDR tier once (double-checked locking)."""
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return  # type: ignore[unreachable]
            self._full_tier = _build_parent_map_from_cldr()
            self._loaded = True

    def get(self, locale_id: str) -> str | None:
        """Return the irregular parent of locale_id, or None."""
        parent = _FAST_TIER_PARENTS.get(locale_id)
        if parent is not None:
            return parent
        self.ensure_loaded()
        return self._full_tier.get(locale_id)


_parent_provider = ParentLocaleProvider()
