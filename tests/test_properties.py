"""Property-based tests for amount arithmetic and format/parse round trips."""

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from currencyengine import Amount, CurrencyDisplay, Formatter, MinorAmount
from currencyengine.registry import get_digits
from tests.strategies import amounts, currency_by_digits, formatting_locales


class TestArithmeticProperties:
    """Algebraic properties of Amount."""

    @given(amount=amounts())
    def test_zero_value_is_identity(self, amount: Amount) -> None:
        """Property: the zero value is the identity for add and sub."""
        assert Amount().add(amount) == amount
        assert amount.add(Amount()) == amount
        assert amount.sub(Amount()) == amount
        assert Amount().sub(amount) == -amount

    @given(code=currency_by_digits(), data=st.data())
    def test_add_commutes(self, code: str, data: st.DataObject) -> None:
        """Property: a + b == b + a within one currency."""
        a = data.draw(amounts(code))
        b = data.draw(amounts(code))
        assert a + b == b + a
        assert (a + b) - b == a

    @given(amount=amounts())
    def test_round_is_idempotent(self, amount: Amount) -> None:
        """Property: rounding twice equals rounding once, digit for digit."""
        once = amount.round()
        assert once.round().number == once.number

    @given(amount=amounts(), factor=st.integers(min_value=-1000, max_value=1000))
    def test_mul_by_integer_keeps_scale(self, amount: Amount, factor: int) -> None:
        """Property: integer multiples stay on the currency's minor-unit grid."""
        product = amount.mul(factor)
        assert product.round() == product

    @given(amount=amounts())
    def test_minor_units_round_trip(self, amount: Amount) -> None:
        """Property: rounded amounts survive a trip through minor units."""
        units = amount.minor_units()
        restored = Amount.from_minor_units(units, amount.currency_code)
        assert restored == amount
        assert MinorAmount.parse(str(units), amount.currency_code).amount == amount

    @given(amount=amounts())
    def test_encodings_round_trip(self, amount: Amount) -> None:
        """Property: every encoding decodes to an equal amount with the same scale."""
        for decoded in (
            Amount.from_bytes(amount.to_bytes()),
            Amount.from_json(amount.to_json()),
            Amount.from_sql(amount.to_sql()),
        ):
            assert decoded == amount
            assert decoded.number == amount.number

    @given(a=amounts(), b=amounts())
    def test_cmp_is_antisymmetric(self, a: Amount, b: Amount) -> None:
        """Property: cmp(a, b) == -cmp(b, a) for the same currency."""
        if a.currency_code != b.currency_code:
            event("currencies differ")
            assert not a.equal(b)
            return
        assert a.cmp(b) == -b.cmp(a)


class TestFormattingProperties:
    """Formatter.parse() is a left inverse of Formatter.format()."""

    @given(
        locale=formatting_locales(),
        amount=amounts(),
        accounting_style=st.booleans(),
        add_plus_sign=st.booleans(),
        display=st.sampled_from(list(CurrencyDisplay)),
    )
    def test_parse_inverts_format(
        self,
        locale: str,
        amount: Amount,
        accounting_style: bool,
        add_plus_sign: bool,
        display: CurrencyDisplay,
    ) -> None:
        formatter = Formatter(
            locale,
            accounting_style=accounting_style,
            add_plus_sign=add_plus_sign,
            currency_display=display,
        )
        event(f"locale={locale}")
        text = formatter.format(amount)
        assert formatter.parse(text, amount.currency_code) == amount

    @given(locale=formatting_locales(), amount=amounts("USD"))
    def test_fraction_digits_match_currency(self, locale: str, amount: Amount) -> None:
        """Property: default formatting shows exactly the currency's digits."""
        formatter = Formatter(locale, currency_display=CurrencyDisplay.NONE)
        text = formatter.parse(formatter.format(amount), "USD").number
        digits, _ = get_digits("USD")
        assert len(text.partition(".")[2]) == digits

    @pytest.mark.fuzz
    @given(
        locale=formatting_locales(),
        amount=amounts(),
        max_digits=st.integers(min_value=0, max_value=6),
        min_digits=st.integers(min_value=0, max_value=6),
    )
    @settings(max_examples=1500)
    def test_parse_recovers_rounded_value(
        self, locale: str, amount: Amount, max_digits: int, min_digits: int
    ) -> None:
        """Property: parse(format(a)) equals a rounded to max digits."""
        formatter = Formatter(locale, min_digits=min_digits, max_digits=max_digits)
        parsed = formatter.parse(formatter.format(amount), amount.currency_code)
        assert parsed == amount.round_to(max_digits)
