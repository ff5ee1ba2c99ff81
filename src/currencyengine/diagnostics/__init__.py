"""Error types, diagnostic codes and diagnostic output.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    CurrencyAlreadyExistsError,
    CurrencyError,
    CurrencyMismatchError,
    CurrencyParseError,
    EmptyCurrencyCodeError,
    InvalidCurrencyCodeError,
    InvalidNumberError,
    RegistrationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CurrencyAlreadyExistsError",
    "CurrencyError",
    "CurrencyMismatchError",
    "CurrencyParseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyCurrencyCodeError",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidCurrencyCodeError",
    "InvalidNumberError",
    "OutputFormat",
    "RegistrationError",
]
