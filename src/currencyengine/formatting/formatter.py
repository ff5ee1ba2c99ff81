"""Locale-aware formatting and parsing of currency amounts.

Formatter renders an Amount through its locale's NumberFormat:

    1. Pick the positive, negative or accounting pattern half
    2. Render the absolute numeral (round, trim, group, native digits)
    3. Render the currency marker (symbol, code or nothing)
    4. Substitute the pattern placeholders in one simultaneous pass

parse() inverts the same substitutions and hands the cleaned numeral to
Amount.parse(), so parse failures surface as InvalidNumberError or
InvalidCurrencyCodeError.

Thread Safety:
    format() and parse() only read the formatter. One configured Formatter
    can serve many threads as long as nobody reassigns its options
    concurrently.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable

from currencyengine.amount import Amount
from currencyengine.constants import (
    CURRENCY_SIGN,
    LRM,
    MAX_FORMAT_CACHE_SIZE,
    NBSP,
    NUMBER_PLACEHOLDER,
    RLM,
)
from currencyengine.core.locale_id import LocaleId, as_locale
from currencyengine.enums import CurrencyDisplay, RoundingMode
from currencyengine.registry import CurrencyRegistry, default_registry

from .number_formats import NumberFormat, resolve_number_format
from .numbering import delocalize_digits, localize_digits

__all__ = ["Formatter"]


@functools.lru_cache(maxsize=MAX_FORMAT_CACHE_SIZE)
def _compile_alternation(keys: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(key) for key in keys))


def _replace_all(text: str, replacements: Iterable[tuple[str, str]]) -> str:
    """Apply all replacements in a single left-to-right pass.

    Replaced text is never rescanned. When several keys match at the same
    position the earliest pair wins; empty keys are ignored.
    """
    mapping: dict[str, str] = {}
    for old, new in replacements:
        if old and old not in mapping:
            mapping[old] = new
    if not mapping:
        return text
    pattern = _compile_alternation(tuple(mapping))
    return pattern.sub(lambda match: mapping[match.group(0)], text)


class Formatter:
    """Formats and parses currency amounts for one locale.

    Options are plain attributes and may be changed after construction:

    Attributes:
        accounting_style: Use the locale's accounting pattern, e.g. "($3.00)"
            instead of "-$3.00" in "en"
        add_plus_sign: Show the plus sign in front of positive amounts
        no_grouping: Turn off grouping of integer digits
        min_digits: Minimum fraction digits; zeros past it are dropped.
            None means the currency's digits
        max_digits: Maximum fraction digits; amounts are rounded to it.
            None means the currency's digits
        rounding_mode: Rounding used when max_digits cuts digits
        currency_display: Show the symbol, the code, or nothing
        symbol_map: Per-currency symbol overrides ({"USD": "$"})

    Example:
        >>> formatter = Formatter("de-CH")
        >>> formatter.format(Amount.parse("1234.59", "USD"))
        '$\\xa01’234.59'
    """

    def __init__(
        self,
        locale: LocaleId | str,
        *,
        accounting_style: bool = False,
        add_plus_sign: bool = False,
        no_grouping: bool = False,
        min_digits: int | None = None,
        max_digits: int | None = None,
        rounding_mode: RoundingMode = RoundingMode.HALF_UP,
        currency_display: CurrencyDisplay = CurrencyDisplay.SYMBOL,
        symbol_map: dict[str, str] | None = None,
        registry: CurrencyRegistry | None = None,
    ) -> None:
        self._locale = as_locale(locale)
        self._format = resolve_number_format(self._locale)
        self._registry = registry if registry is not None else default_registry
        self.accounting_style = accounting_style
        self.add_plus_sign = add_plus_sign
        self.no_grouping = no_grouping
        self.min_digits = min_digits
        self.max_digits = max_digits
        self.rounding_mode = rounding_mode
        self.currency_display = currency_display
        self.symbol_map: dict[str, str] = dict(symbol_map) if symbol_map else {}

    @property
    def locale(self) -> LocaleId:
        return self._locale

    @property
    def number_format(self) -> NumberFormat:
        return self._format

    def __repr__(self) -> str:
        return f"Formatter(locale={str(self._locale)!r})"

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, amount: Amount) -> str:
        """Format an amount for display."""
        pattern = self._select_pattern(amount)
        if amount.is_negative():
            # The pattern supplies the minus sign.
            amount = -amount
        number = self._format_number(amount)
        marker = self._format_currency(amount.currency_code)
        if marker:
            # CLDR: letters in a currency marker never touch digits.
            if f"0{CURRENCY_SIGN}" in pattern:
                if marker[0].isalpha():
                    marker = NBSP + marker
            elif f"{CURRENCY_SIGN}0" in pattern and marker[-1].isalpha():
                marker = marker + NBSP

        replacements = [
            (NUMBER_PLACEHOLDER, number),
            ("+", self._format.plus_sign),
            ("-", self._format.minus_sign),
        ]
        if marker:
            replacements.append((CURRENCY_SIGN, marker))
        else:
            replacements += [
                (NBSP + CURRENCY_SIGN, ""),
                (CURRENCY_SIGN + NBSP, ""),
                (CURRENCY_SIGN, ""),
            ]
        return _replace_all(pattern, replacements)

    def _uses_accounting_pattern(self) -> bool:
        return self.accounting_style and bool(self._format.accounting_pattern)

    def _select_pattern(self, amount: Amount) -> str:
        if self._uses_accounting_pattern():
            patterns = self._format.accounting_pattern.split(";")
        else:
            patterns = self._format.standard_pattern.split(";")

        if amount.is_negative():
            if len(patterns) == 1:
                return "-" + patterns[0]
            return patterns[1]
        if self.add_plus_sign:
            if len(patterns) == 1 or self._uses_accounting_pattern():
                return "+" + patterns[0]
            return patterns[1].replace("-", "+", 1)
        return patterns[0]

    def _format_number(self, amount: Amount) -> str:
        digits, _ = self._registry.get_digits(amount.currency_code)
        max_digits = digits if self.max_digits is None else self.max_digits
        min_digits = digits if self.min_digits is None else self.min_digits
        min_digits = min(min_digits, max_digits)

        rounded = amount.round_to(max_digits, self.rounding_mode)
        integer, _, fraction = rounded.number.partition(".")
        integer = self._group_integer_digits(integer)
        if min_digits < max_digits:
            fraction = fraction.rstrip("0").ljust(min_digits, "0")

        numeral = f"{integer}{self._format.decimal_separator}{fraction}" if fraction else integer
        return localize_digits(numeral, self._format.numbering_system)

    def _group_integer_digits(self, digits: str) -> str:
        primary = self._format.primary_grouping
        secondary = self._format.secondary_grouping or primary
        if self.no_grouping or primary == 0:
            return digits
        if len(digits) < self._format.min_grouping + primary:
            return digits

        # Groups are cut from the right: one primary group, then secondary ones.
        groups = [digits[-primary:]]
        end = len(digits) - primary
        while end > 0:
            groups.append(digits[max(end - secondary, 0) : end])
            end -= secondary
        return self._format.grouping_separator.join(reversed(groups))

    def _format_currency(self, currency_code: str) -> str:
        match self.currency_display:
            case CurrencyDisplay.SYMBOL:
                if currency_code in self.symbol_map:
                    return self.symbol_map[currency_code]
                symbol, _ = self._registry.get_symbol(currency_code, self._locale)
                return symbol
            case CurrencyDisplay.CODE:
                return currency_code
            case _:
                return ""

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse(self, text: str, currency_code: str) -> Amount:
        """Parse a formatted amount.

        Raises:
            InvalidNumberError: If the text does not reduce to a numeral
            InvalidCurrencyCodeError: If currency_code is empty or unknown
        """
        symbol, _ = self._registry.get_symbol(currency_code, self._locale)
        replacements = [
            (self._format.decimal_separator, "."),
            (self._format.grouping_separator, ""),
            (self._format.plus_sign, "+"),
            (self._format.minus_sign, "-"),
            (self.symbol_map.get(currency_code, ""), ""),
            (symbol, ""),
            (currency_code, ""),
            (LRM, ""),
            (RLM, ""),
            (NBSP, ""),
            (" ", ""),
        ]
        if self.accounting_style:
            replacements += [("(", "-"), (")", "")]
        cleaned = _replace_all(text, replacements)
        cleaned = delocalize_digits(cleaned, self._format.numbering_system)
        return Amount.parse(cleaned, currency_code, registry=self._registry)
