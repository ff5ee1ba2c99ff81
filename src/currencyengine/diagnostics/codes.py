"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for currency errors.

    Categories:
        VALUE: A numeral or currency code failed validation
        ARITHMETIC: A binary operation received incompatible operands
        REGISTRY: Runtime currency registration was rejected
        PARSE: A locale-formatted amount could not be parsed
    """

    VALUE = "value"
    ARITHMETIC = "arithmetic"
    REGISTRY = "registry"
    PARSE = "parse"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Value errors (numerals, currency codes)
        2000-2999: Arithmetic errors (operand compatibility)
        3000-3999: Registry errors (runtime registration)
        4000-4999: Parsing errors (locale-formatted input)
    """

    # Value errors (1000-1999)
    INVALID_NUMBER = 1001
    INVALID_CURRENCY_CODE = 1002

    # Arithmetic errors (2000-2999)
    CURRENCY_MISMATCH = 2001

    # Registry errors (3000-3999)
    EMPTY_CURRENCY_CODE = 3001
    CURRENCY_ALREADY_EXISTS = 3002

    # Parsing errors (4000-4999)
    PARSE_AMOUNT_FAILED = 4001
    PARSE_CURRENCY_CODE_INVALID = 4002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.VALUE
            case 2:
                return ErrorCategory.ARITHMETIC
            case 3:
                return ErrorCategory.REGISTRY
            case _:
                return ErrorCategory.PARSE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries the failing operation and
    the offending values so callers never have to parse message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        operation: Name of the operation that failed (e.g. "Amount.add")
        input_value: The numeral or text that was rejected
        currency_code: Currency code involved in the failure
        locale_code: Locale used for parsing, when applicable
        operands: String forms of both operands for binary operations
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    operation: str | None = None
    input_value: str | None = None
    currency_code: str | None = None
    locale_code: str | None = None
    operands: tuple[str, str] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[CURRENCY_MISMATCH]: amounts "1 USD" and "2 EUR" have mismatched currency codes
              --> Amount.add
              = help: Convert one amount before combining them
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
