"""Tests for the parse_amount / parse_minor_amount gateway and type guards."""

from currencyengine import MinorAmount
from currencyengine.diagnostics import CurrencyParseError, DiagnosticCode
from currencyengine.parsing import (
    is_valid_amount,
    is_valid_minor_amount,
    parse_amount,
    parse_minor_amount,
)
from currencyengine.registry import CurrencyRegistry


class TestParseAmount:
    """parse_amount() never raises for bad input."""

    def test_success(self) -> None:
        result, errors = parse_amount("€1.234,00", "EUR", "de-AT")
        assert errors == ()
        assert is_valid_amount(result)
        assert str(result) == "1234.00 EUR"

    def test_accounting(self) -> None:
        result, errors = parse_amount("($1,234.59)", "USD", "en", accounting_style=True)
        assert errors == ()
        assert result is not None
        assert result.number == "-1234.59"

    def test_invalid_text(self) -> None:
        result, errors = parse_amount("abc", "USD", "en")
        assert result is None
        assert not is_valid_amount(result)
        assert len(errors) == 1
        error = errors[0]
        assert isinstance(error, CurrencyParseError)
        assert error.input_value == "abc"
        assert error.locale_code == "en"
        assert error.currency_code == "USD"
        assert error.diagnostic.code is DiagnosticCode.PARSE_AMOUNT_FAILED
        assert str(error) == (
            "Failed to parse amount 'abc' for locale 'en': invalid number \"abc\""
        )

    def test_invalid_currency(self) -> None:
        result, errors = parse_amount("1,234.59", "usd", "en")
        assert result is None
        assert len(errors) == 1
        assert errors[0].diagnostic.code is DiagnosticCode.PARSE_CURRENCY_CODE_INVALID
        assert str(errors[0]) == "Unknown currency code 'usd' while parsing '1,234.59'"

    def test_empty_currency(self) -> None:
        result, errors = parse_amount("1", "", "en")
        assert result is None
        assert errors[0].diagnostic.code is DiagnosticCode.PARSE_CURRENCY_CODE_INVALID

    def test_locale_is_canonicalized(self) -> None:
        _, errors = parse_amount("abc", "USD", "de_ch")
        assert errors[0].locale_code == "de-CH"

    def test_non_string_input(self) -> None:
        result, errors = parse_amount(1234, "USD", "en")  # type: ignore[arg-type]
        assert result is None
        assert errors[0].diagnostic.code is DiagnosticCode.PARSE_AMOUNT_FAILED
        assert errors[0].input_value == "1234"

    def test_private_registry(self, registry: CurrencyRegistry) -> None:
        registry.register_currency("XBT", "", 8)
        result, errors = parse_amount("XBT 0.5", "XBT", "en", registry=registry)
        assert errors == ()
        assert str(result) == "0.5 XBT"
        result, errors = parse_amount("XBT 0.5", "XBT", "en")
        assert result is None
        assert errors[0].diagnostic.code is DiagnosticCode.PARSE_CURRENCY_CODE_INVALID


class TestParseMinorAmount:
    """parse_minor_amount() returns the minor-unit view."""

    def test_success(self) -> None:
        result, errors = parse_minor_amount("$1,234.59", "USD", "en")
        assert errors == ()
        assert is_valid_minor_amount(result)
        assert result.number == "123459"

    def test_failure(self) -> None:
        result, errors = parse_minor_amount("1.234.59", "USD", "en")
        assert result is None
        assert not is_valid_minor_amount(result)
        assert len(errors) == 1


class TestGuards:
    """Guards accept None and reject untyped values."""

    def test_none(self) -> None:
        assert not is_valid_amount(None)
        assert not is_valid_minor_amount(None)

    def test_zero_value_is_not_a_parse_result(self) -> None:
        assert not is_valid_minor_amount(MinorAmount())
