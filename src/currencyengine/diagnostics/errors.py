"""Currency exception hierarchy with structured diagnostics.

Every exception carries a Diagnostic with the failing operation and the
offending values. The exception message is the diagnostic's message, so
``str(error)`` stays short and stable (e.g. ``invalid number "abc"``).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "CurrencyAlreadyExistsError",
    "CurrencyError",
    "CurrencyMismatchError",
    "CurrencyParseError",
    "EmptyCurrencyCodeError",
    "InvalidCurrencyCodeError",
    "InvalidNumberError",
    "RegistrationError",
]


class CurrencyError(Exception):
    """Base exception for all currencyengine errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


class InvalidNumberError(CurrencyError, ValueError):
    """A numeral failed decimal parsing, or a divisor was zero.

    Attributes:
        op: Operation that rejected the numeral
        number: The rejected numeral text
    """

    def __init__(self, number: str, *, op: str = "") -> None:
        self.op = op
        self.number = number
        super().__init__(ErrorTemplate.invalid_number(number, op))


class InvalidCurrencyCodeError(CurrencyError, ValueError):
    """A currency code is missing from the registry (or empty where required).

    Attributes:
        op: Operation that rejected the code
        currency_code: The rejected code
    """

    def __init__(self, currency_code: str, *, op: str = "") -> None:
        self.op = op
        self.currency_code = currency_code
        super().__init__(ErrorTemplate.invalid_currency_code(currency_code, op))


class CurrencyMismatchError(CurrencyError):
    """Two amounts with different currency codes met in a binary operation.

    Attributes:
        op: Operation that received the operands
        a: Left operand
        b: Right operand
    """

    def __init__(self, a: object, b: object, *, op: str = "") -> None:
        self.op = op
        self.a = a
        self.b = b
        super().__init__(ErrorTemplate.currency_mismatch(str(a), str(b), op))


class RegistrationError(CurrencyError):
    """Runtime currency registration was rejected."""


class EmptyCurrencyCodeError(RegistrationError, ValueError):
    """register_currency() was called with an empty code."""

    def __init__(self) -> None:
        super().__init__(ErrorTemplate.empty_currency_code())


class CurrencyAlreadyExistsError(RegistrationError):
    """register_currency() was called with a code that is already known.

    Attributes:
        code: The duplicate currency code
    """

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(ErrorTemplate.currency_already_exists(code))


class CurrencyParseError(CurrencyError):
    """A locale-formatted amount could not be parsed.

    Returned (never raised) by the parse_* gateway functions.

    Attributes:
        input_value: The text that failed to parse
        locale_code: The locale used for parsing
        currency_code: The currency the text was parsed against

    Example:
        >>> result, errors = parse_amount("abc", "USD", "en")
        >>> for error in errors:
        ...     print(f"Parse failed: {error.input_value} ({error.locale_code})")
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        currency_code: str = "",
    ) -> None:
        super().__init__(diagnostic)
        self.input_value = input_value
        self.locale_code = locale_code
        self.currency_code = currency_code
