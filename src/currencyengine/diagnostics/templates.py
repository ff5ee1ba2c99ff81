"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    _ISO_4217_URL = "https://www.iso.org/iso-4217-currency-codes.html"
    _CLDR_NUMBERS_URL = "https://unicode.org/reports/tr35/tr35-numbers.html"

    @staticmethod
    def invalid_number(number: str, operation: str = "") -> Diagnostic:
        """Numeral failed decimal parsing.

        Args:
            number: The rejected numeral text
            operation: Operation that rejected it

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=f'invalid number "{number}"',
            hint="Use a plain decimal numeral such as 12.50 or -3",
            operation=operation or None,
            input_value=number,
        )

    @staticmethod
    def invalid_currency_code(currency_code: str, operation: str = "") -> Diagnostic:
        """Currency code missing from the registry.

        Args:
            currency_code: The rejected code
            operation: Operation that rejected it

        Returns:
            Diagnostic for INVALID_CURRENCY_CODE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_CURRENCY_CODE,
            message=f'invalid currency code "{currency_code}"',
            hint="Codes are case-sensitive; register custom currencies before use",
            help_url=ErrorTemplate._ISO_4217_URL,
            operation=operation or None,
            currency_code=currency_code,
        )

    @staticmethod
    def currency_mismatch(a: str, b: str, operation: str = "") -> Diagnostic:
        """Binary operation on amounts of different currencies.

        Args:
            a: String form of the left operand
            b: String form of the right operand
            operation: Operation that received the operands

        Returns:
            Diagnostic for CURRENCY_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_MISMATCH,
            message=f'amounts "{a}" and "{b}" have mismatched currency codes',
            hint="Convert one amount with Amount.convert() before combining them",
            operation=operation or None,
            operands=(a, b),
        )

    @staticmethod
    def empty_currency_code() -> Diagnostic:
        """Registration attempted with an empty code."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CURRENCY_CODE,
            message="register currency error: empty currency code",
            hint="Pass a non-empty three-letter code",
            operation="register_currency",
            currency_code="",
        )

    @staticmethod
    def currency_already_exists(code: str) -> Diagnostic:
        """Registration attempted for a code that is already known.

        Args:
            code: The duplicate code

        Returns:
            Diagnostic for CURRENCY_ALREADY_EXISTS
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_ALREADY_EXISTS,
            message=f'register currency error: code "{code}" already exists',
            hint="Use register() to override a built-in currency",
            help_url=ErrorTemplate._ISO_4217_URL,
            operation="register_currency",
            currency_code=code,
        )

    @staticmethod
    def parse_amount_failed(
        text: str, currency_code: str, locale_code: str, reason: str
    ) -> Diagnostic:
        """Locale-formatted amount could not be parsed.

        Args:
            text: The formatted text
            currency_code: Currency the text was parsed against
            locale_code: Locale used for parsing
            reason: Message of the underlying failure

        Returns:
            Diagnostic for PARSE_AMOUNT_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_FAILED,
            message=f"Failed to parse amount '{text}' for locale '{locale_code}': {reason}",
            hint="Check the decimal and grouping separators used by the locale",
            help_url=ErrorTemplate._CLDR_NUMBERS_URL,
            operation="parse_amount",
            input_value=text,
            currency_code=currency_code,
            locale_code=locale_code,
        )

    @staticmethod
    def parse_currency_code_invalid(
        text: str, currency_code: str, locale_code: str
    ) -> Diagnostic:
        """Parse requested against an unknown currency code."""
        return Diagnostic(
            code=DiagnosticCode.PARSE_CURRENCY_CODE_INVALID,
            message=f"Unknown currency code '{currency_code}' while parsing '{text}'",
            hint="Codes are case-sensitive; register custom currencies before use",
            help_url=ErrorTemplate._ISO_4217_URL,
            operation="parse_amount",
            input_value=text,
            currency_code=currency_code,
            locale_code=locale_code,
        )
