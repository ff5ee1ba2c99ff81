"""Tests for Formatter: patterns, digits, grouping, markers and parsing.

Exact-string expectations use locales with curated formats, so results do
not depend on the installed CLDR release.
"""

import logging

import pytest

from currencyengine import Amount, CurrencyDisplay, Formatter, LocaleId, RoundingMode
from currencyengine.diagnostics import InvalidCurrencyCodeError, InvalidNumberError
from currencyengine.formatting import resolve_number_format
from currencyengine.registry import CurrencyRegistry, SymbolEntry

NBSP = "\u00a0"
LRM = "\u200e"


def fmt(number: str, code: str, locale: str, **options: object) -> str:
    return Formatter(locale, **options).format(Amount.parse(number, code))  # type: ignore[arg-type]


class TestConstruction:
    """Locale resolution and defaults."""

    def test_locale_and_number_format(self) -> None:
        formatter = Formatter("de_ch")
        assert formatter.locale == LocaleId("de", territory="CH")
        assert formatter.number_format is resolve_number_format("de-CH")
        assert formatter.number_format.grouping_separator == "’"
        assert repr(formatter) == "Formatter(locale='de-CH')"

    def test_defaults(self) -> None:
        formatter = Formatter("en")
        assert not formatter.accounting_style
        assert not formatter.add_plus_sign
        assert not formatter.no_grouping
        assert formatter.min_digits is None
        assert formatter.max_digits is None
        assert formatter.rounding_mode is RoundingMode.HALF_UP
        assert formatter.currency_display is CurrencyDisplay.SYMBOL
        assert formatter.symbol_map == {}

    def test_english_us_uses_root_format(self) -> None:
        assert Formatter("en-US").number_format is Formatter("en").number_format
        assert Formatter("").number_format is Formatter("en").number_format

    def test_script_locale_has_own_format(self) -> None:
        number_format = resolve_number_format("sr-Latn")
        assert number_format.decimal_separator == ","
        assert number_format.grouping_separator == "."

    def test_unknown_locale_falls_back_to_english(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="currencyengine.formatting.number_formats"):
            formatter = Formatter("zz-ZZ")
        assert formatter.number_format is Formatter("en").number_format
        assert "No currency format for locale zz-ZZ" in caplog.text
        assert formatter.format(Amount.parse("1234.59", "USD")) == "$1,234.59"


class TestFormat:
    """Default formatting across locales."""

    @pytest.mark.parametrize(
        ("number", "code", "locale", "expected"),
        [
            ("1234.59", "USD", "en", "$1,234.59"),
            ("1234.59", "USD", "en-US", "$1,234.59"),
            ("1234.59", "USD", "de-CH", f"${NBSP}1’234.59"),
            ("1234.59", "USD", "de", f"1.234,59{NBSP}US$"),
            ("1234.59", "EUR", "de-AT", f"€{NBSP}1.234,59"),
            ("1234.59", "EUR", "fr", f"1\u202f234,59{NBSP}€"),
            ("1234.59", "USD", "fr", f"1\u202f234,59{NBSP}$US"),
            ("1234.99", "USD", "es", f"1234,99{NBSP}US$"),
            ("12345.99", "USD", "es", f"12.345,99{NBSP}US$"),
            ("1234.59", "USD", "it", f"1.234,59{NBSP}USD"),
            ("1234567.99", "USD", "hi", "US$12,34,567.99"),
            ("1234567.89", "INR", "en-IN", "₹12,34,567.89"),
            ("1234.56", "PLN", "pl", f"1234,56{NBSP}PLN"),
            ("12345.67", "PLN", "pl", f"12{NBSP}345,67{NBSP}PLN"),
            ("12345.67", "EUR", "bg", f"12345,67{NBSP}€"),
            ("1234.59", "CHF", "de-CH", f"CHF{NBSP}1’234.59"),
            ("60", "KRW", "en", "₩60"),
            ("1234.5", "JPY", "en", "¥1,235"),
            ("1234.5", "JPY", "ja", "￥1,235"),
            ("1234.5678", "USD", "en", "$1,234.57"),
            ("0", "USD", "en", "$0.00"),
        ],
    )
    def test_format(self, number: str, code: str, locale: str, expected: str) -> None:
        assert fmt(number, code, locale) == expected

    def test_letter_symbol_is_separated_from_digits(self) -> None:
        assert fmt("1234.59", "CHF", "en") == f"CHF{NBSP}1,234.59"
        assert fmt("59", "OMR", "en", currency_display=CurrencyDisplay.CODE) == (
            f"OMR{NBSP}59.000"
        )

    def test_zero_value(self) -> None:
        assert Formatter("en").format(Amount()) == "0"

    def test_amount_is_not_modified(self) -> None:
        amount = Amount.parse("-1234.5678", "USD")
        Formatter("en").format(amount)
        assert amount.number == "-1234.5678"


class TestNativeDigits:
    """Numbering systems other than Latin."""

    @pytest.mark.parametrize(
        ("number", "locale", "expected"),
        [
            ("12345678.90", "ar", f"١٢٬٣٤٥٬٦٧٨٫٩٠{NBSP}US$"),
            ("1234.59", "fa", f"{LRM}US$۱٬۲۳۴٫۵۹"),
            ("1234567.89", "bn", f"১২,৩৪,৫৬৭.৮৯{NBSP}US$"),
            ("1234.5", "my", f"၁,၂၃၄.၅၀{NBSP}US$"),
            ("1234.5", "ne", f"US${NBSP}१,२३४.५०"),
            ("1234.5", "dz", "US$༡,༢༣༤.༥༠"),
        ],
    )
    def test_native_digits(self, number: str, locale: str, expected: str) -> None:
        assert fmt(number, "USD", locale) == expected


class TestSigns:
    """Negative, accounting and plus-sign patterns."""

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [
            ("en", "-$1,234.59"),
            ("de-CH", "$-1’234.59"),
            ("nl", f"${NBSP}-1.234,59"),
            ("sv", f"\u22121{NBSP}234,59{NBSP}$"),
            ("ar", f"\u061c-١٬٢٣٤٫٥٩{NBSP}US$"),
            ("fa", f"{LRM}\u2212{LRM}US$۱٬۲۳۴٫۵۹"),
        ],
    )
    def test_negative(self, locale: str, expected: str) -> None:
        assert fmt("-1234.59", "USD", locale) == expected

    def test_accounting(self) -> None:
        assert fmt("-1234.59", "USD", "en", accounting_style=True) == "($1,234.59)"
        assert fmt("1234.59", "USD", "en", accounting_style=True) == "$1,234.59"
        assert fmt("-1234.59", "EUR", "fr", accounting_style=True) == (
            f"(1\u202f234,59{NBSP}€)"
        )

    def test_accounting_without_locale_pattern_uses_minus(self) -> None:
        assert fmt("-1234.59", "EUR", "de", accounting_style=True) == f"-1.234,59{NBSP}€"

    def test_plus_sign(self) -> None:
        assert fmt("1234.59", "USD", "en", add_plus_sign=True) == "+$1,234.59"
        assert fmt("1234.59", "USD", "nl", add_plus_sign=True) == f"${NBSP}+1.234,59"
        assert fmt("1234.59", "USD", "de-CH", add_plus_sign=True) == "$+1’234.59"
        assert fmt("1234.59", "USD", "ar", add_plus_sign=True) == (
            f"\u061c+١٬٢٣٤٫٥٩{NBSP}US$"
        )

    def test_plus_sign_with_accounting(self) -> None:
        formatter = Formatter("en", accounting_style=True, add_plus_sign=True)
        assert formatter.format(Amount.parse("1234.59", "USD")) == "+$1,234.59"
        assert formatter.format(Amount.parse("-1234.59", "USD")) == "($1,234.59)"

    def test_plus_sign_ignored_for_negatives(self) -> None:
        assert fmt("-1", "USD", "en", add_plus_sign=True) == "-$1.00"


class TestDigitsAndGrouping:
    """min/max digits, rounding mode and grouping switches."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            ("1234.5678", "$1,234.568"),
            ("1234.50", "$1,234.5"),
            ("1234", "$1,234.0"),
        ],
    )
    def test_min_and_max_digits(self, number: str, expected: str) -> None:
        assert fmt(number, "USD", "en", min_digits=1, max_digits=3) == expected

    def test_zero_min_digits_drops_the_separator(self) -> None:
        assert fmt("1234.00", "USD", "en", min_digits=0) == "$1,234"
        assert fmt("1234.10", "USD", "en", min_digits=0) == "$1,234.1"

    def test_min_digits_above_max_are_clamped(self) -> None:
        assert fmt("1234.5", "USD", "en", min_digits=4, max_digits=2) == "$1,234.50"

    def test_zero_max_digits(self) -> None:
        assert fmt("1234.5", "USD", "en", max_digits=0) == "$1,235"

    def test_rounding_mode(self) -> None:
        assert fmt("1.239", "USD", "en", rounding_mode=RoundingMode.DOWN) == "$1.23"
        assert fmt("1.245", "USD", "en", rounding_mode=RoundingMode.HALF_EVEN) == "$1.24"

    def test_no_grouping(self) -> None:
        assert fmt("1234567.89", "USD", "en", no_grouping=True) == "$1234567.89"
        assert fmt("1234567.89", "USD", "hi", no_grouping=True) == "US$1234567.89"

    def test_options_can_change_after_construction(self) -> None:
        formatter = Formatter("en")
        amount = Amount.parse("1234.5", "USD")
        assert formatter.format(amount) == "$1,234.50"
        formatter.max_digits = 0
        formatter.no_grouping = True
        assert formatter.format(amount) == "$1235"


class TestCurrencyDisplay:
    """Symbol, code and no marker; symbol overrides."""

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [
            ("en", "1,234.59"),
            ("de", "1.234,59"),
            ("de-CH", "1’234.59"),
            ("fa", f"{LRM}۱٬۲۳۴٫۵۹"),
        ],
    )
    def test_none(self, locale: str, expected: str) -> None:
        assert fmt("1234.59", "USD", locale, currency_display=CurrencyDisplay.NONE) == expected

    def test_code(self) -> None:
        assert fmt("1234.59", "EUR", "de", currency_display=CurrencyDisplay.CODE) == (
            f"1.234,59{NBSP}EUR"
        )
        assert fmt("1234.59", "USD", "en", currency_display=CurrencyDisplay.CODE) == (
            f"USD{NBSP}1,234.59"
        )

    def test_symbol_map(self) -> None:
        assert fmt("1234.59", "USD", "de", symbol_map={"USD": "$"}) == f"1.234,59{NBSP}$"
        assert fmt("1234.59", "EUR", "en", symbol_map={"EUR": "Euro"}) == f"Euro{NBSP}1,234.59"
        # Other currencies keep their resolved symbol.
        assert fmt("1", "GBP", "en", symbol_map={"USD": "$"}) == "£1.00"

    def test_symbol_map_is_copied(self) -> None:
        overrides = {"USD": "$"}
        formatter = Formatter("de", symbol_map=overrides)
        overrides["USD"] = "Dollar"
        assert formatter.symbol_map == {"USD": "$"}

    def test_custom_currency(self, registry: CurrencyRegistry) -> None:
        registry.register("XTS", "963", 2, "TS")
        amount = Amount.parse("1", "XTS", registry=registry)
        assert Formatter("en", registry=registry).format(amount) == f"TS{NBSP}1.00"
        assert Formatter("de", registry=registry).format(amount) == f"1,00{NBSP}TS"

    def test_private_registry_round_trip(self, registry: CurrencyRegistry) -> None:
        registry.register_currency("BTC", "", 8, [SymbolEntry("\u20bf", ("en",))])
        formatter = Formatter("en", registry=registry)
        amount = Amount.parse("1.5", "BTC", registry=registry)
        text = formatter.format(amount)
        assert text == "\u20bf1.50000000"
        assert formatter.parse(text, "BTC") == amount
        one = Amount.parse("1", "BTC", registry=registry)
        assert formatter.parse("\u20bf1.00000000", "BTC") == one

    def test_private_registry_stays_private(self, registry: CurrencyRegistry) -> None:
        registry.register_currency("BTC", "", 8)
        with pytest.raises(InvalidCurrencyCodeError):
            Amount.parse("1", "BTC")
        with pytest.raises(InvalidCurrencyCodeError):
            Formatter("en").parse("1", "BTC")


class TestParse:
    """Formatter.parse() inverts format()."""

    @pytest.mark.parametrize(
        ("text", "code", "locale", "expected"),
        [
            ("$1,234.59", "USD", "en", "1234.59"),
            ("€1.234,00", "EUR", "de-AT", "1234.00"),
            (f"€{NBSP}1.234,00", "EUR", "de-AT", "1234.00"),
            (f"${NBSP}1’234.59", "USD", "de-CH", "1234.59"),
            ("$-1’234.59", "USD", "de-CH", "-1234.59"),
            (f"1\u202f234,59{NBSP}€", "EUR", "fr", "1234.59"),
            ("-$1,234.59", "USD", "en", "-1234.59"),
            ("+$1,234.59", "USD", "en", "1234.59"),
            ("USD 1,234.59", "USD", "en", "1234.59"),
            ("1234.59", "USD", "en", "1234.59"),
            (f"\u22121{NBSP}234,59{NBSP}$", "USD", "sv", "-1234.59"),
            (f"١٢٬٣٤٥٬٦٧٨٫٩٠{NBSP}US$", "USD", "ar", "12345678.90"),
            (f"\u061c-١٬٢٣٤٫٥٩{NBSP}US$", "USD", "ar", "-1234.59"),
            (f"{LRM}\u2212{LRM}US$۱٬۲۳۴٫۵۹", "USD", "fa", "-1234.59"),
            (f"১২,৩৪,৫৬৭.৮৯{NBSP}US$", "USD", "bn", "1234567.89"),
            (f"1{NBSP}234{NBSP}567,00{NBSP}PLN", "PLN", "pl", "1234567.00"),
        ],
    )
    def test_parse(self, text: str, code: str, locale: str, expected: str) -> None:
        amount = Formatter(locale).parse(text, code)
        assert amount.number == expected
        assert amount.currency_code == code

    def test_parse_accounting(self) -> None:
        formatter = Formatter("en", accounting_style=True)
        assert formatter.parse("($1,234.59)", "USD").number == "-1234.59"
        with pytest.raises(InvalidNumberError):
            Formatter("en").parse("($1,234.59)", "USD")

    def test_parse_symbol_map(self) -> None:
        formatter = Formatter("en", symbol_map={"EUR": "Euro"})
        assert formatter.parse(f"Euro{NBSP}1,234.59", "EUR").number == "1234.59"

    def test_parse_invalid_number(self) -> None:
        with pytest.raises(InvalidNumberError):
            Formatter("en").parse("abc", "USD")
        with pytest.raises(InvalidNumberError):
            Formatter("en").parse("", "USD")

    def test_parse_invalid_currency(self) -> None:
        with pytest.raises(InvalidCurrencyCodeError):
            Formatter("en").parse("1,234.59", "usd")
        with pytest.raises(InvalidCurrencyCodeError):
            Formatter("en").parse("1,234.59", "")

    @pytest.mark.parametrize(
        ("locale", "options"),
        [
            ("en", {}),
            ("en", {"accounting_style": True}),
            ("de-CH", {"add_plus_sign": True}),
            ("fr", {"accounting_style": True}),
            ("fa", {"currency_display": CurrencyDisplay.CODE}),
            ("ar", {"currency_display": CurrencyDisplay.NONE}),
        ],
    )
    def test_format_then_parse(self, locale: str, options: dict[str, object]) -> None:
        formatter = Formatter(locale, **options)  # type: ignore[arg-type]
        for number in ("1234.59", "-1234.59", "0.00", "98765432.10"):
            amount = Amount.parse(number, "USD")
            assert formatter.parse(formatter.format(amount), "USD") == amount
