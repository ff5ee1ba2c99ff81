"""Locale Fallback Example - How Locales Resolve Formats and Symbols.

Every locale walks a parent chain until data is found:

    sr-Cyrl-RS -> sr-Cyrl -> sr
    es-AR      -> es-419 -> es
    en-AU      -> en-001 -> en

Number formats come from a curated table first and from CLDR (via Babel)
second. Locales with no data at all fall back to root English and log a
warning.

Python 3.13+.
"""

from __future__ import annotations

import logging

from currencyengine import Amount, Formatter, LocaleId, for_country_code, get_symbol

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


def example_1_parent_chains() -> None:
    """Example 1: Parent chains of a few locales."""
    print("=" * 60)
    print("Example 1: Parent Chains")
    print("=" * 60)

    for locale_id in ("sr-Cyrl-RS", "es-AR", "en-AU", "zh-TW", "pt-AO"):
        chain = " -> ".join(str(locale) for locale in LocaleId.parse(locale_id).chain())
        print(f"  {locale_id:12} {chain}")
    print()


def example_2_symbol_fallback() -> None:
    """Example 2: Symbol lookups walk the same chain."""
    print("=" * 60)
    print("Example 2: Symbol Fallback")
    print("=" * 60)

    for currency_code, locale_id in (("USD", "en-AU"), ("USD", "fr-CA"), ("AUD", "en-AU")):
        symbol, ok = get_symbol(currency_code, locale_id)
        print(f"  {currency_code} in {locale_id:6} -> {symbol!r} (ok={ok})")
    print()


def example_3_format_fallback() -> None:
    """Example 3: Curated, CLDR-derived and root English formats."""
    print("=" * 60)
    print("Example 3: Format Fallback")
    print("=" * 60)

    amount = Amount.parse("-1234.5", "EUR")
    # de-AT is curated, en-GB and fi come from CLDR, zz-ZZ has no data.
    for locale_id in ("de-AT", "en-GB", "fi", "zz-ZZ"):
        print(f"  {locale_id:6} {Formatter(locale_id).format(amount)}")
    print()


def example_4_country_currencies() -> None:
    """Example 4: Default currency of a country."""
    print("=" * 60)
    print("Example 4: Country Currencies")
    print("=" * 60)

    for country in ("DE", "JP", "KE", "AQ"):
        currency_code, ok = for_country_code(country)
        print(f"  {country} -> {currency_code or '-'} (ok={ok})")
    print()


if __name__ == "__main__":
    example_1_parent_chains()
    example_2_symbol_fallback()
    example_3_format_fallback()
    example_4_country_currencies()

    print("=" * 60)
    print("All examples completed!")
    print("=" * 60)
