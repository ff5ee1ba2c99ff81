"""Currency registry: codes, minor-unit digits, symbols and country currencies.

The registry is read-mostly. Every write (register_currency, register)
builds a new immutable snapshot under a lock and publishes it with a single
attribute assignment, so lookups never lock and never observe a partially
applied registration.

Module-level functions delegate to a process-wide default registry.

Tiered Country Data:
    - Fast Tier: curated country -> currency table (immediate)
    - Full Tier: CLDR territory currencies via Babel (lazy-loaded on first miss)

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from currencyengine.constants import DIGITS_NOT_FOUND, NUMERIC_CODE_NOT_FOUND
from currencyengine.core.locale_id import ENGLISH, ENGLISH_US, LocaleId, as_locale
from currencyengine.diagnostics import CurrencyAlreadyExistsError, EmptyCurrencyCodeError

from . import data

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

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """Numeric code and minor-unit digits of one currency."""

    numeric_code: str
    digits: int


@dataclass(frozen=True, slots=True)
class SymbolEntry:
    """A currency symbol and the locale ids that use it.

    Locales may be given as any iterable of canonical ids ("fr", "en-CA");
    they are stored as a frozenset.
    """

    symbol: str
    locales: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.locales, frozenset):
            object.__setattr__(self, "locales", frozenset(self.locales))


@dataclass(frozen=True, slots=True)
class _Snapshot:
    currencies: Mapping[str, CurrencyInfo]
    codes: tuple[str, ...]
    symbols: Mapping[str, tuple[SymbolEntry, ...]]


def _build_country_map_from_cldr() -> dict[str, tuple[str, ...]]:
    """Read active legal tender per territory from CLDR via Babel.

    Returns:
        Mapping from ISO 3166 territory code to its active tender currencies,
        in CLDR preference order.
    """
    from babel.core import get_global  # noqa: PLC0415

    result: dict[str, tuple[str, ...]] = {}
    try:
        territory_currencies = get_global("territory_currencies")
    except (KeyError, ValueError, OSError) as e:
        logger.debug("CLDR territory_currencies unavailable: %s", e)
        return result

    for territory, entries in territory_currencies.items():
        try:
            # Entry format: (code, start_date, end_date, tender);
            # end_date None means still in use.
            active = tuple(code for code, _, end, tender in entries if end is None and tender)
        except (TypeError, ValueError):
            logger.debug("Skipping malformed CLDR currency data for %s", territory)
            continue
        if active:
            result[territory] = active

    logger.debug("Loaded CLDR currencies for %d territories", len(result))
    return result


class CountryCurrencyProvider:
    """Country -> currency lookup with lazy CLDR completion.

    Thread-safe. Uses double-checked locking for the one-time Babel scan.
    """

    __slots__ = ("_fast_tier", "_full_tier", "_loaded", "_lock")

    def __init__(self, fast_tier: Mapping[str, str] | None = None) -> None:
        self._fast_tier: Mapping[str, str] = MappingProxyType(
            dict(data.COUNTRY_CURRENCIES if fast_tier is None else fast_tier)
        )
        self._loaded: bool = False
        self._lock: threading.Lock = threading.Lock()
        self._full_tier: dict[str, tuple[str, ...]] = {}

    def ensure_loaded(self) -> None:
        """Load the CLDR tier once (thread-safe, idempotent)."""
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return  # type: ignore[unreachable]
            self._full_tier = _build_country_map_from_cldr()
            self._loaded = True

    def candidates(self, country_code: str) -> tuple[str, ...]:
        """Currencies for country_code, most preferred first."""
        code = self._fast_tier.get(country_code)
        if code is not None:
            return (code,)
        self.ensure_loaded()
        return self._full_tier.get(country_code, ())


class CurrencyRegistry:
    """Registry of known currencies.

    Lookups are exact-match: codes are case-sensitive and must be given
    exactly as registered. The empty code is a valid "no currency" sentinel
    for is_valid() but has no info, digits or numeric code.

    Thread-safe. Reads are lock-free; writes are serialized.
    """

    __slots__ = ("_countries", "_snapshot", "_write_lock")

    def __init__(
        self,
        currencies: Mapping[str, tuple[str, int]] | None = None,
        symbols: Mapping[str, Iterable[tuple[str, Iterable[str]]]] | None = None,
        countries: CountryCurrencyProvider | None = None,
    ) -> None:
        currencies = data.CURRENCIES if currencies is None else currencies
        symbols = data.SYMBOLS if symbols is None else symbols
        self._snapshot = _Snapshot(
            currencies=MappingProxyType(
                {
                    code: CurrencyInfo(numeric, digits)
                    for code, (numeric, digits) in currencies.items()
                }
            ),
            codes=tuple(currencies),
            symbols=MappingProxyType(
                {
                    code: tuple(SymbolEntry(symbol, locales) for symbol, locales in entries)
                    for code, entries in symbols.items()
                }
            ),
        )
        self._countries = countries if countries is not None else CountryCurrencyProvider()
        self._write_lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def lookup(self, currency_code: str) -> CurrencyInfo | None:
        """Return the info of currency_code, or None when unknown."""
        return self._snapshot.currencies.get(currency_code)

    def is_valid(self, currency_code: str) -> bool:
        """True for the empty code and for every registered code."""
        return currency_code == "" or currency_code in self._snapshot.currencies

    def get_numeric_code(self, currency_code: str) -> tuple[str, bool]:
        """Return (numeric code, found); ("000", False) when empty or unknown."""
        info = self.lookup(currency_code)
        if info is None:
            return NUMERIC_CODE_NOT_FOUND, False
        return info.numeric_code, True

    def get_digits(self, currency_code: str) -> tuple[int, bool]:
        """Return (fraction digits, found); (0, False) when empty or unknown."""
        info = self.lookup(currency_code)
        if info is None:
            return DIGITS_NOT_FOUND, False
        return info.digits, True

    def get_symbol(self, currency_code: str, locale: LocaleId | str) -> tuple[str, bool]:
        """Return (symbol, found) for currency_code in locale.

        Unknown and empty codes echo back with found=False. A currency
        without symbol entries uses its own code. Otherwise the locale and
        each of its parents are matched against the symbol entries in
        registration order; "en", "en-US" and the empty locale take the
        first (default) entry directly. When no entry matches anywhere in
        the chain the code itself is used.
        """
        snapshot = self._snapshot
        if currency_code not in snapshot.currencies:
            return currency_code, False
        entries = snapshot.symbols.get(currency_code)
        if not entries:
            return currency_code, True

        locale = as_locale(locale)
        if locale in (ENGLISH, ENGLISH_US) or locale.is_empty():
            return entries[0].symbol, True

        for candidate in locale.chain():
            locale_id = str(candidate)
            for entry in entries:
                if locale_id in entry.locales:
                    return entry.symbol, True
        return currency_code, True

    def get_currency_codes(self) -> tuple[str, ...]:
        """All known codes: built-ins first, then runtime additions in order."""
        return self._snapshot.codes

    def for_country_code(self, country_code: str) -> tuple[str, bool]:
        """Return (currency code, found) for an ISO 3166 country code."""
        for code in self._countries.candidates(country_code):
            if self.is_valid(code):
                return code, True
        return "", False

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_currency(
        self,
        code: str,
        numeric_code: str = "",
        digits: int = 0,
        symbols: Iterable[SymbolEntry] = (),
    ) -> None:
        """Add a new (non-ISO) currency.

        Raises:
            EmptyCurrencyCodeError: If code is empty
            CurrencyAlreadyExistsError: If code is already registered
        """
        if not code:
            raise EmptyCurrencyCodeError
        symbol_entries = tuple(symbols)
        with self._write_lock:
            snapshot = self._snapshot
            if code in snapshot.currencies:
                raise CurrencyAlreadyExistsError(code)
            new_symbols = dict(snapshot.symbols)
            if symbol_entries:
                new_symbols[code] = new_symbols.get(code, ()) + symbol_entries
            self._publish(
                snapshot,
                code,
                CurrencyInfo(numeric_code, digits),
                new_symbols,
            )

    def register(
        self,
        code: str,
        numeric_code: str = "",
        digits: int = 0,
        default_symbol: str = "",
    ) -> None:
        """Add or overwrite a currency, built-ins included.

        An empty code is ignored. A non-empty default_symbol replaces the
        whole symbol list with that symbol for every locale; an empty one
        keeps the existing symbols.
        """
        if not code:
            return
        with self._write_lock:
            snapshot = self._snapshot
            if code in snapshot.currencies:
                logger.warning("Overriding registered currency %s", code)
            new_symbols = dict(snapshot.symbols)
            if default_symbol:
                new_symbols[code] = (SymbolEntry(default_symbol, ("en",)),)
            self._publish(
                snapshot,
                code,
                CurrencyInfo(numeric_code, digits),
                new_symbols,
            )

    def _publish(
        self,
        snapshot: _Snapshot,
        code: str,
        info: CurrencyInfo,
        symbols: dict[str, tuple[SymbolEntry, ...]],
    ) -> None:
        currencies = dict(snapshot.currencies)
        is_new = code not in currencies
        currencies[code] = info
        self._snapshot = _Snapshot(
            currencies=MappingProxyType(currencies),
            codes=(*snapshot.codes, code) if is_new else snapshot.codes,
            symbols=MappingProxyType(symbols),
        )


default_registry = CurrencyRegistry()


def is_valid(currency_code: str) -> bool:
    """Check whether a currency code is valid (empty counts as valid)."""
    return default_registry.is_valid(currency_code)


def get_numeric_code(currency_code: str) -> tuple[str, bool]:
    """Numeric code for a currency code: ("000", False) when unknown."""
    return default_registry.get_numeric_code(currency_code)


def get_digits(currency_code: str) -> tuple[int, bool]:
    """Fraction digits for a currency code: (0, False) when unknown."""
    return default_registry.get_digits(currency_code)


def get_symbol(currency_code: str, locale: LocaleId | str) -> tuple[str, bool]:
    """Symbol for a currency code in a locale."""
    return default_registry.get_symbol(currency_code, locale)


def get_currency_codes() -> tuple[str, ...]:
    """All known currency codes."""
    return default_registry.get_currency_codes()


def for_country_code(country_code: str) -> tuple[str, bool]:
    """Currency code for a country code."""
    return default_registry.for_country_code(country_code)


def register_currency(
    code: str,
    numeric_code: str = "",
    digits: int = 0,
    symbols: Iterable[SymbolEntry] = (),
) -> None:
    """Register a new currency in the default registry."""
    default_registry.register_currency(code, numeric_code, digits, symbols)


def register(
    code: str,
    numeric_code: str = "",
    digits: int = 0,
    default_symbol: str = "",
) -> None:
    """Add or overwrite a currency in the default registry."""
    default_registry.register(code, numeric_code, digits, default_symbol)
