#!/usr/bin/env python3
"""Cross-check the built-in currency tables against Babel CLDR data.

Compares currencyengine.registry.data with what Babel ships:

Checks:
    1. Unknown codes: built-in currencies Babel does not list.
    2. Digit mismatches: built-in fraction digits differ from
       babel.numbers.get_currency_precision().
    3. Country drift: a built-in country currency is not among the
       currencies CLDR marks as current tender for that territory.
    4. Untracked tender: currencies CLDR marks as current tender
       somewhere that the built-in table lacks. Shown only with --verbose.

Exit codes:
    0: No unknown codes (mismatches and drift are warnings).
    1: Unknown codes found, or Babel is missing.

Usage:
    verify_iso4217.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import datetime
import sys


def _unknown_codes(currencies: dict[str, tuple[str, int]], babel_codes: set[str]) -> list[str]:
    return [f"  {code}: built in, unknown to Babel" for code in currencies if code not in babel_codes]


def _digit_mismatches(currencies: dict[str, tuple[str, int]]) -> list[str]:
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    result: list[str] = []
    for code, (_, digits) in sorted(currencies.items()):
        cldr_digits = get_currency_precision(code)
        if digits != cldr_digits:
            result.append(f"  {code}: built in={digits}, CLDR={cldr_digits}")
    return result


def _country_drift(countries: dict[str, str], today: datetime.date) -> list[str]:
    """Compare built-in country currencies with CLDR tender on `today`."""
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    result: list[str] = []
    for country, code in sorted(countries.items()):
        tender = get_territory_currencies(country, start_date=today, tender=True)
        if code not in tender:
            result.append(f"  {country}: built in={code}, CLDR={', '.join(tender) or '-'}")
    return result


def _untracked_tender(currencies: dict[str, tuple[str, int]], today: datetime.date) -> list[str]:
    """Currencies in current use somewhere that have no built-in entry."""
    from babel.core import get_global  # noqa: PLC0415
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    seen: set[str] = set()
    for territory in get_global("territory_currencies"):
        seen.update(get_territory_currencies(territory, start_date=today, tender=True))
    return [f"  {code}" for code in sorted(seen - currencies.keys())]


def _print_section(header: str, lines: list[str]) -> None:
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Cross-check built-in currency data against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List current tender that has no built-in entry.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the currency data checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from currencyengine.registry.data import (  # noqa: PLC0415
        COUNTRY_CURRENCIES,
        CURRENCIES,
    )

    today = datetime.date.today()
    babel_codes = list_currencies()

    unknown = _unknown_codes(CURRENCIES, babel_codes)
    mismatches = _digit_mismatches(CURRENCIES)
    drift = _country_drift(COUNTRY_CURRENCIES, today)
    untracked = _untracked_tender(CURRENCIES, today)

    print("Currency Data Verification")
    print("=" * 50)
    print(f"Built-in currencies: {len(CURRENCIES)}")
    print(f"Built-in countries:  {len(COUNTRY_CURRENCIES)}")
    print(f"Babel currencies:    {len(babel_codes)}")
    print()

    _print_section("[ERROR] Unknown codes", unknown)
    _print_section("[WARN] Fraction digit mismatches", mismatches)
    _print_section("[WARN] Country currency drift", drift)
    if args.verbose:
        _print_section("[INFO] Untracked current tender", untracked)
    elif untracked:
        print(f"[INFO] {len(untracked)} untracked tender currency(ies). Use --verbose to list.")
        print()

    if unknown:
        print(f"[FAIL] {len(unknown)} unknown code(s).")
        print("[EXIT-CODE] 1")
        return 1

    print(f"[PASS] {len(mismatches)} mismatch(es), {len(drift)} drifted country(ies).")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
