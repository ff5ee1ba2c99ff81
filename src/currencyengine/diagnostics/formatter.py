"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Renders Diagnostic objects for terminals, logs or tooling.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate user-supplied values to max_content_length
        max_content_length: Maximum value length when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.invalid_currency_code("usd", "Amount.parse")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[INVALID_CURRENCY_CODE]: invalid currency code "usd"
          --> Amount.parse
          = currency: usd
          = help: Codes are case-sensitive; register custom currencies before use
          = note: see https://www.iso.org/iso-4217-currency-codes.html

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        INVALID_CURRENCY_CODE: invalid currency code "usd"
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        parts = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._maybe_sanitize(diagnostic.message)}"
        ]

        if diagnostic.operation:
            parts.append(f"  --> {diagnostic.operation}")

        if diagnostic.input_value is not None:
            parts.append(f"  = input: {self._maybe_sanitize(diagnostic.input_value)}")

        if diagnostic.currency_code:
            parts.append(f"  = currency: {diagnostic.currency_code}")

        if diagnostic.locale_code:
            parts.append(f"  = locale: {diagnostic.locale_code}")

        if diagnostic.operands:
            left, right = diagnostic.operands
            parts.append(f"  = operands: {left} / {right}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, object] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.operation:
            data["operation"] = diagnostic.operation
        if diagnostic.input_value is not None:
            data["input_value"] = self._maybe_sanitize(diagnostic.input_value)
        if diagnostic.currency_code is not None:
            data["currency_code"] = diagnostic.currency_code
        if diagnostic.locale_code:
            data["locale_code"] = diagnostic.locale_code
        if diagnostic.operands:
            data["operands"] = list(diagnostic.operands)
        if diagnostic.hint:
            data["hint"] = diagnostic.hint
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
