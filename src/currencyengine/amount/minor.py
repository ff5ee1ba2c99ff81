"""Amounts expressed in integer minor units (cents, pence, fils).

MinorAmount is a thin view over Amount: it parses and serializes integer
minor-unit counts ("10050" USD is 100.50 USD) while all arithmetic runs on
the wrapped Amount. Results are not rounded; `number` reports the minor
units of the half-up rounded amount.

Python 3.13+.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from currencyengine.constants import CURRENCY_CODE_LENGTH
from currencyengine.diagnostics import InvalidCurrencyCodeError, InvalidNumberError
from currencyengine.enums import RoundingMode

from .amount import Amount, Scalar

__all__ = ["MinorAmount"]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True, eq=False)
class MinorAmount:
    """An Amount parsed from and serialized to minor units.

    Example:
        >>> price = MinorAmount.parse("10050", "USD")
        >>> price.number, str(price)
        ('10050', '100.50 USD')
    """

    amount: Amount = field(default_factory=Amount)

    @classmethod
    def parse(cls, units: str, currency_code: str) -> MinorAmount:
        """Create from an integer numeral of minor units.

        Raises:
            InvalidNumberError: If units is not an integer numeral ("10.99")
            InvalidCurrencyCodeError: If currency_code is empty or unknown
        """
        if not _INTEGER_PATTERN.fullmatch(units):
            raise InvalidNumberError(units, op="MinorAmount.parse")
        try:
            amount = Amount.from_minor_units(int(units), currency_code)
        except InvalidCurrencyCodeError as e:
            raise InvalidCurrencyCodeError(currency_code, op="MinorAmount.parse") from e
        return cls(amount)

    def to_amount(self) -> Amount:
        return self.amount

    @property
    def currency_code(self) -> str:
        return self.amount.currency_code

    @property
    def value(self) -> Decimal:
        return self.amount.value

    @property
    def number(self) -> str:
        """Minor units as an integer numeral."""
        return str(self.minor_units())

    def minor_units(self) -> int:
        return self.amount.minor_units()

    def __str__(self) -> str:
        return str(self.amount)

    def __repr__(self) -> str:
        return f"MinorAmount({self.number!r}, {self.currency_code!r})"

    # -------------------------------------------------------------------------
    # Arithmetic (delegates to Amount)
    # -------------------------------------------------------------------------

    def add(self, other: MinorAmount) -> MinorAmount:
        return MinorAmount(self.amount.add(other.amount))

    def sub(self, other: MinorAmount) -> MinorAmount:
        return MinorAmount(self.amount.sub(other.amount))

    def mul(self, n: Scalar) -> MinorAmount:
        return MinorAmount(self.amount.mul(n))

    def div(self, n: Scalar) -> MinorAmount:
        return MinorAmount(self.amount.div(n))

    def convert(self, currency_code: str, rate: Scalar) -> MinorAmount:
        return MinorAmount(self.amount.convert(currency_code, rate))

    def round(self) -> MinorAmount:
        return MinorAmount(self.amount.round())

    def round_to(self, digits: int, mode: RoundingMode = RoundingMode.HALF_UP) -> MinorAmount:
        return MinorAmount(self.amount.round_to(digits, mode))

    def cmp(self, other: MinorAmount) -> int:
        return self.amount.cmp(other.amount)

    def equal(self, other: MinorAmount) -> bool:
        return self.amount.equal(other.amount)

    def is_positive(self) -> bool:
        return self.amount.is_positive()

    def is_negative(self) -> bool:
        return self.amount.is_negative()

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MinorAmount):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self.amount)

    def __add__(self, other: MinorAmount) -> MinorAmount:
        if not isinstance(other, MinorAmount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: MinorAmount) -> MinorAmount:
        if not isinstance(other, MinorAmount):
            return NotImplemented
        return self.sub(other)

    # -------------------------------------------------------------------------
    # Encodings
    # -------------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Compact encoding: b"USD10050"."""
        return f"{self.currency_code}{self.number}".encode()

    @classmethod
    def from_bytes(cls, data: bytes) -> MinorAmount:
        if len(data) < CURRENCY_CODE_LENGTH:
            raise InvalidCurrencyCodeError(
                data.decode("utf-8", errors="replace"), op="MinorAmount.from_bytes"
            )
        currency_code = data[:CURRENCY_CODE_LENGTH].decode("utf-8", errors="replace")
        units = data[CURRENCY_CODE_LENGTH:].decode("utf-8", errors="replace")
        return cls.parse(units, currency_code)

    def to_dict(self) -> dict[str, str]:
        """Structured encoding. The "amount" key (not "number") keeps major
        and minor payloads from being silently confused."""
        return {"amount": self.number, "currency": self.currency_code}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> MinorAmount:
        units = data.get("amount", "")
        currency_code = data.get("currency", "")
        if not isinstance(units, str):
            raise InvalidNumberError(str(units), op="MinorAmount.from_dict")
        if not isinstance(currency_code, str):
            raise InvalidCurrencyCodeError(str(currency_code), op="MinorAmount.from_dict")
        return cls.parse(units, currency_code)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> MinorAmount:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise InvalidNumberError(str(data), op="MinorAmount.from_json")
        return cls.from_dict(data)
