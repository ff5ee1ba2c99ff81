"""Parse locale-formatted display strings back into amounts.

- parse_amount() returns tuple[Amount | None, tuple[CurrencyParseError, ...]]
- parse_minor_amount() returns tuple[MinorAmount | None, tuple[CurrencyParseError, ...]]
- Functions NEVER raise for bad input; errors are returned in the tuple

Both are thin gateways over Formatter.parse(): the formatter strips the
locale's separators, signs and currency marker and Amount.parse() validates
what is left.

Thread-safe. Formatters are built per call from cached locale formats.

Python 3.13+.
"""

from currencyengine.amount import Amount, MinorAmount
from currencyengine.core.locale_id import LocaleId, as_locale
from currencyengine.diagnostics import (
    CurrencyParseError,
    Diagnostic,
    InvalidCurrencyCodeError,
    InvalidNumberError,
)
from currencyengine.diagnostics.templates import ErrorTemplate
from currencyengine.formatting import Formatter
from currencyengine.registry import CurrencyRegistry, default_registry

__all__ = ["parse_amount", "parse_minor_amount"]


def parse_amount(
    text: str,
    currency_code: str,
    locale: LocaleId | str,
    *,
    accounting_style: bool = False,
    registry: CurrencyRegistry | None = None,
) -> tuple[Amount | None, tuple[CurrencyParseError, ...]]:
    """Parse a locale-formatted amount.

    Args:
        text: Display string (e.g., "1.234,56 €" for de)
        currency_code: Currency the text is expressed in
        locale: Locale the text was formatted for
        accounting_style: Read "(…)" as a negative amount
        registry: Registry that validates currency_code (default: the
            process-wide registry)

    Returns:
        Tuple of (result, errors):
        - result: Parsed Amount, or None if parsing failed
        - errors: Tuple of CurrencyParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_amount("€1.234,00", "EUR", "de-AT")
        >>> str(result)
        '1234.00 EUR'
        >>> errors
        ()

        >>> result, errors = parse_amount("abc", "USD", "en")
        >>> result is None, len(errors)
        (True, 1)
    """
    locale_id = as_locale(locale)
    locale_code = str(locale_id)

    if not isinstance(text, str):
        diagnostic = ErrorTemplate.parse_amount_failed(
            str(text), currency_code, locale_code, f"expected str, got {type(text).__name__}"
        )
        return (None, (_parse_error(diagnostic, str(text), locale_code, currency_code),))

    registry = default_registry if registry is None else registry
    if currency_code == "" or not registry.is_valid(currency_code):
        diagnostic = ErrorTemplate.parse_currency_code_invalid(text, currency_code, locale_code)
        return (None, (_parse_error(diagnostic, text, locale_code, currency_code),))

    formatter = Formatter(locale_id, accounting_style=accounting_style, registry=registry)
    try:
        return (formatter.parse(text, currency_code), ())
    except (InvalidNumberError, InvalidCurrencyCodeError) as e:
        diagnostic = ErrorTemplate.parse_amount_failed(text, currency_code, locale_code, str(e))
        return (None, (_parse_error(diagnostic, text, locale_code, currency_code),))


def parse_minor_amount(
    text: str,
    currency_code: str,
    locale: LocaleId | str,
    *,
    accounting_style: bool = False,
) -> tuple[MinorAmount | None, tuple[CurrencyParseError, ...]]:
    """Parse a locale-formatted amount into a MinorAmount.

    Same contract as parse_amount(); the result is viewed in minor units.
    """
    result, errors = parse_amount(
        text, currency_code, locale, accounting_style=accounting_style
    )
    if result is None:
        return (None, errors)
    return (result.to_minor(), errors)


def _parse_error(
    diagnostic: Diagnostic, input_value: str, locale_code: str, currency_code: str
) -> CurrencyParseError:
    return CurrencyParseError(
        diagnostic,
        input_value=input_value,
        locale_code=locale_code,
        currency_code=currency_code,
    )
