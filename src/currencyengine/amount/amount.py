"""Arbitrary-precision decimal amounts bound to a currency.

Amount is an immutable value: every operation returns a new Amount and
leaves its operands untouched. Numbers keep their exact scale ("50.00"
stays "50.00"); rounding to the currency's minor-unit digits happens only
through round() / round_to().

Amount() is the zero value: number 0 with no currency. It is the identity
for add() and sub() whatever the other operand's currency, so sums can
start from an untyped zero.

Encodings:
    binary:  b"USD3.45"                        (to_bytes / from_bytes)
    dict:    {"number": "3.45", "currency": "USD"}  (to_dict / from_dict, JSON)
    SQL:     "(3.45,USD)"                      (to_sql / from_sql)

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from typing import TYPE_CHECKING

from currencyengine.constants import CURRENCY_CODE_LENGTH
from currencyengine.core.decimal_context import (
    AMOUNT_CONTEXT,
    format_plain,
    is_in_range,
    parse_numeral,
    quantize,
)
from currencyengine.diagnostics import (
    CurrencyMismatchError,
    InvalidCurrencyCodeError,
    InvalidNumberError,
)
from currencyengine.enums import RoundingMode
from currencyengine.registry import CurrencyRegistry, default_registry, get_digits, is_valid

if TYPE_CHECKING:
    from .minor import MinorAmount

__all__ = ["Amount", "Scalar"]

type Scalar = str | int | Decimal
"""Multipliers, divisors and rates: numeral strings, ints or finite Decimals."""

_ZERO = Decimal(0)


def _require_currency(
    currency_code: str, op: str, registry: CurrencyRegistry | None = None
) -> None:
    registry = default_registry if registry is None else registry
    if currency_code == "" or not registry.is_valid(currency_code):
        raise InvalidCurrencyCodeError(currency_code, op=op)


def _require_numeral(text: str, op: str) -> Decimal:
    value = parse_numeral(text)
    if value is None:
        raise InvalidNumberError(text, op=op)
    return value


def _coerce_scalar(value: Scalar, op: str) -> Decimal:
    match value:
        case bool():
            raise InvalidNumberError(str(value), op=op)
        case str():
            return _require_numeral(value, op)
        case int():
            return Decimal(value)
        case Decimal() if is_in_range(value):
            return value
        case _:
            raise InvalidNumberError(str(value), op=op)


def _shift(value: Decimal, places: int) -> Decimal:
    """Multiply value by 10**places exactly (no context rounding)."""
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))  # type: ignore[operator]


@dataclass(frozen=True, slots=True, eq=False)
class Amount:
    """A decimal number in a currency.

    Construct with Amount.parse() or Amount.from_minor_units(); Amount()
    is the zero value. Direct construction validates the same way parse()
    does, minus the numeral grammar.

    Attributes:
        value: The exact decimal number
        currency_code: ISO 4217 (or registered) code, "" for the zero value

    Example:
        >>> total = Amount.parse("275.98", "EUR").mul("4")
        >>> str(total)
        '1103.92 EUR'
    """

    value: Decimal = _ZERO
    currency_code: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal) or not is_in_range(self.value):
            raise InvalidNumberError(str(self.value), op="Amount")
        # Only the zero value goes without a currency.
        if not is_valid(self.currency_code) or (
            self.currency_code == "" and not self.value.is_zero()
        ):
            raise InvalidCurrencyCodeError(self.currency_code, op="Amount")

    @classmethod
    def _new(cls, value: Decimal, currency_code: str) -> Amount:
        # Operands are already validated; skip __post_init__.
        amount = object.__new__(cls)
        object.__setattr__(amount, "value", value)
        object.__setattr__(amount, "currency_code", currency_code)
        return amount

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def parse(
        cls, number: str, currency_code: str, *, registry: CurrencyRegistry | None = None
    ) -> Amount:
        """Create an amount from a numeral string.

        The currency is checked against `registry` (default: the process-wide
        registry).

        Raises:
            InvalidNumberError: If number is not a finite decimal numeral
            InvalidCurrencyCodeError: If currency_code is empty or unknown
        """
        value = _require_numeral(number, "Amount.parse")
        _require_currency(currency_code, "Amount.parse", registry)
        return cls._new(value, currency_code)

    @classmethod
    def from_minor_units(
        cls, units: int, currency_code: str, *, registry: CurrencyRegistry | None = None
    ) -> Amount:
        """Create an amount from an integer count of minor units.

        Example:
            >>> str(Amount.from_minor_units(2099, "USD"))
            '20.99 USD'
        """
        if isinstance(units, bool) or not isinstance(units, int):
            raise InvalidNumberError(str(units), op="Amount.from_minor_units")
        registry = default_registry if registry is None else registry
        _require_currency(currency_code, "Amount.from_minor_units", registry)
        digits, _ = registry.get_digits(currency_code)
        return cls._new(_shift(Decimal(units), -digits), currency_code)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def number(self) -> str:
        """The number as a plain numeral ("3.45", never exponent notation)."""
        return format_plain(self.value)

    def __str__(self) -> str:
        return f"{self.number} {self.currency_code}"

    def __repr__(self) -> str:
        return f"Amount({self.number!r}, {self.currency_code!r})"

    def is_zero_value(self) -> bool:
        """True for the untyped zero: no currency and a zero number."""
        return self.currency_code == "" and self.value.is_zero()

    def minor_units(self) -> int:
        """The amount rounded half-up to currency digits, in minor units."""
        digits, _ = get_digits(self.currency_code)
        return int(_shift(self.round().value, digits))

    def to_minor(self) -> MinorAmount:
        """View this amount as a MinorAmount."""
        from .minor import MinorAmount  # noqa: PLC0415 - circular

        return MinorAmount(self)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _check_same_currency(self, other: Amount, op: str) -> None:
        if self.currency_code != other.currency_code:
            raise CurrencyMismatchError(self, other, op=op)

    def add(self, other: Amount) -> Amount:
        """Return self + other.

        Raises:
            CurrencyMismatchError: If the currencies differ and neither
                operand is the zero value
        """
        if other.is_zero_value():
            return self
        if self.is_zero_value():
            return other
        self._check_same_currency(other, "Amount.add")
        try:
            result = AMOUNT_CONTEXT.add(self.value, other.value)
        except DecimalException as e:
            raise InvalidNumberError(other.number, op="Amount.add") from e
        return Amount._new(result, self.currency_code)

    def sub(self, other: Amount) -> Amount:
        """Return self - other (zero value minus x is -x in x's currency)."""
        if other.is_zero_value():
            return self
        if self.is_zero_value():
            return Amount._new(other.value.copy_negate(), other.currency_code)
        self._check_same_currency(other, "Amount.sub")
        try:
            result = AMOUNT_CONTEXT.subtract(self.value, other.value)
        except DecimalException as e:
            raise InvalidNumberError(other.number, op="Amount.sub") from e
        return Amount._new(result, self.currency_code)

    def mul(self, n: Scalar) -> Amount:
        """Return self * n without rounding (20.99 * 0.20 = 4.1980)."""
        factor = _coerce_scalar(n, "Amount.mul")
        try:
            result = AMOUNT_CONTEXT.multiply(self.value, factor)
        except DecimalException as e:
            raise InvalidNumberError(str(n), op="Amount.mul") from e
        return Amount._new(result, self.currency_code)

    def div(self, n: Scalar) -> Amount:
        """Return self / n.

        Raises:
            InvalidNumberError: If n is not a numeral or is zero
        """
        divisor = _coerce_scalar(n, "Amount.div")
        if divisor.is_zero():
            raise InvalidNumberError(str(n), op="Amount.div")
        try:
            result = AMOUNT_CONTEXT.divide(self.value, divisor)
        except DecimalException as e:
            raise InvalidNumberError(str(n), op="Amount.div") from e
        return Amount._new(result, self.currency_code)

    def convert(self, currency_code: str, rate: Scalar) -> Amount:
        """Convert to another currency at the given rate, unrounded.

        Example:
            >>> str(Amount.parse("20.99", "USD").convert("EUR", "0.91"))
            '19.1009 EUR'
        """
        _require_currency(currency_code, "Amount.convert")
        factor = _coerce_scalar(rate, "Amount.convert")
        try:
            result = AMOUNT_CONTEXT.multiply(self.value, factor)
        except DecimalException as e:
            raise InvalidNumberError(str(rate), op="Amount.convert") from e
        return Amount._new(result, currency_code)

    def round(self) -> Amount:
        """Round half-up to the currency's fraction digits."""
        digits, _ = get_digits(self.currency_code)
        return self.round_to(digits, RoundingMode.HALF_UP)

    def round_to(self, digits: int, mode: RoundingMode = RoundingMode.HALF_UP) -> Amount:
        """Quantize to exactly `digits` fraction digits using `mode`.

        Trailing zeros are added when the number has fewer digits.
        """
        if digits < 0:
            msg = f"digits must be >= 0, got {digits}"
            raise ValueError(msg)
        mode = RoundingMode(mode)
        return Amount._new(
            quantize(self.value, digits, mode.decimal_rounding),
            self.currency_code,
        )

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def cmp(self, other: Amount) -> int:
        """Compare numerically: -1, 0 or 1.

        Raises:
            CurrencyMismatchError: If the currency codes differ (the zero
                value is not exempt here)
        """
        self._check_same_currency(other, "Amount.cmp")
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0

    def equal(self, other: Amount) -> bool:
        """Value equality: same currency and numerically equal (1.0 == 1.00)."""
        return self.currency_code == other.currency_code and self.value == other.value

    def is_positive(self) -> bool:
        return self.value > _ZERO

    def is_negative(self) -> bool:
        return self.value < _ZERO

    def is_zero(self) -> bool:
        return self.value.is_zero()

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash((self.value, self.currency_code))

    def __lt__(self, other: Amount) -> bool:
        return self.cmp(other) < 0

    def __le__(self, other: Amount) -> bool:
        return self.cmp(other) <= 0

    def __gt__(self, other: Amount) -> bool:
        return self.cmp(other) > 0

    def __ge__(self, other: Amount) -> bool:
        return self.cmp(other) >= 0

    def __add__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, n: Scalar) -> Amount:
        return self.mul(n)

    __rmul__ = __mul__

    def __truediv__(self, n: Scalar) -> Amount:
        return self.div(n)

    def __neg__(self) -> Amount:
        return Amount._new(self.value.copy_negate(), self.currency_code)

    def __abs__(self) -> Amount:
        return Amount._new(self.value.copy_abs(), self.currency_code)

    # -------------------------------------------------------------------------
    # Encodings
    # -------------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Compact encoding: 3-byte currency code followed by the numeral."""
        return f"{self.currency_code}{self.number}".encode()

    @classmethod
    def from_bytes(cls, data: bytes) -> Amount:
        """Decode to_bytes() output.

        Raises:
            InvalidCurrencyCodeError: If data is shorter than a currency code
                or the code is unknown
            InvalidNumberError: If the numeral is invalid
        """
        text = data.decode("utf-8", errors="replace")
        if len(data) < CURRENCY_CODE_LENGTH:
            raise InvalidCurrencyCodeError(text, op="Amount.from_bytes")
        currency_code = data[:CURRENCY_CODE_LENGTH].decode("utf-8", errors="replace")
        number = data[CURRENCY_CODE_LENGTH:].decode("utf-8", errors="replace")
        value = _require_numeral(number, "Amount.from_bytes")
        _require_currency(currency_code, "Amount.from_bytes")
        return cls._new(value, currency_code)

    def to_dict(self) -> dict[str, str]:
        """Structured encoding with the stable keys "number" and "currency"."""
        return {"number": self.number, "currency": self.currency_code}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Amount:
        """Decode to_dict() output, validating like parse()."""
        number = data.get("number", "")
        currency_code = data.get("currency", "")
        if not isinstance(number, str):
            raise InvalidNumberError(str(number), op="Amount.from_dict")
        if not isinstance(currency_code, str):
            raise InvalidCurrencyCodeError(str(currency_code), op="Amount.from_dict")
        value = _require_numeral(number, "Amount.from_dict")
        _require_currency(currency_code, "Amount.from_dict")
        return cls._new(value, currency_code)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> Amount:
        """Decode to_json() output.

        Raises:
            json.JSONDecodeError: If text is not JSON
            InvalidNumberError: If text is not a JSON object or the
                numeral is invalid
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise InvalidNumberError(str(data), op="Amount.from_json")
        return cls.from_dict(data)

    def to_sql(self) -> str:
        """Composite-type encoding: "(3.45,USD)"; the zero value is "(0,)"."""
        return f"({self.number},{self.currency_code})"

    @classmethod
    def from_sql(cls, src: str | bytes | None) -> Amount:
        """Decode a "(number,currency)" composite value.

        Empty input, and a zero number paired with a blank or space-padded
        currency column, decode to the zero value.
        """
        if src is None:
            return cls()
        text = src.decode() if isinstance(src, bytes) else src
        if not text:
            return cls()
        number, sep, currency_code = text[1:-1].partition(",")
        if not (text.startswith("(") and text.endswith(")") and sep):
            raise InvalidNumberError(text, op="Amount.from_sql")
        currency_code = currency_code.strip()
        value = _require_numeral(number, "Amount.from_sql")
        if currency_code == "" and value.is_zero():
            return cls()
        _require_currency(currency_code, "Amount.from_sql")
        return cls._new(value, currency_code)
