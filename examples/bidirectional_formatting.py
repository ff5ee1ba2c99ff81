"""Bi-Directional Currency Formatting Examples.

currencyengine works in both directions:
- Format: Amount -> display (Formatter.format)
- Parse: display -> Amount (Formatter.parse, parse_amount)

API Notes:
- Formatter.parse raises InvalidNumberError / InvalidCurrencyCodeError
- parse_amount returns tuple[Amount | None, tuple[CurrencyParseError, ...]]
  and never raises
- is_valid_amount narrows the Amount | None result for type checkers
"""

from currencyengine import Amount, Formatter, parse_amount
from currencyengine.parsing import is_valid_amount


def example_invoice_totals() -> None:
    """Sum invoice lines and render the total per customer locale."""
    print("\n[Example 1] Invoice Totals")
    print("-" * 60)

    lines = [Amount.parse(value, "EUR") for value in ("199.99", "1250.00", "42.5")]
    total = Amount(currency_code="EUR")
    for line in lines:
        total = total + line

    for locale in ("en", "de", "fr", "nl", "pl"):
        print(f"  {locale:4} {Formatter(locale).format(total)}")


def example_form_input() -> None:
    """Read user-entered amounts with the never-raising gateway."""
    print("\n[Example 2] Form Input")
    print("-" * 60)

    test_cases = [
        ("1.234,56\u00a0\u20ac", "EUR", "de"),
        ("$1,234.56", "USD", "en"),
        ("($99.99)", "USD", "en"),
        ("twelve", "USD", "en"),
        ("12.00", "", "en"),
    ]

    for user_input, currency_code, locale in test_cases:
        amount, errors = parse_amount(
            user_input, currency_code, locale, accounting_style=True
        )
        if errors:
            print(f"  {user_input!r:18} -> error: {errors[0]}")
            continue
        if is_valid_amount(amount):
            print(f"  {user_input!r:18} -> {amount}")


def example_native_digits() -> None:
    """Locales with native digits parse back to ASCII numbers."""
    print("\n[Example 3] Native Digits")
    print("-" * 60)

    amount = Amount.parse("1234.59", "USD")
    for locale in ("ar", "fa", "bn", "hi", "ne"):
        formatter = Formatter(locale)
        text = formatter.format(amount)
        print(f"  {locale:4} {text!r} -> {formatter.parse(text, 'USD')}")


def example_roundtrip_validation() -> None:
    """Check that what we render is read back unchanged."""
    print("\n[Example 4] Round-trip Validation")
    print("-" * 60)

    amounts = [Amount.parse(value, "USD") for value in ("0", "-5.10", "1000000.01")]
    for locale in ("en", "de-CH", "sv", "es"):
        formatter = Formatter(locale, add_plus_sign=True)
        for amount in amounts:
            text = formatter.format(amount)
            status = "OK" if formatter.parse(text, "USD") == amount else "MISMATCH"
            print(f"  {locale:6} {text!r:24} {status}")


if __name__ == "__main__":
    print("=" * 60)
    print("Bi-Directional Currency Formatting Examples")
    print("=" * 60)

    example_invoice_totals()
    example_form_input()
    example_native_digits()
    example_roundtrip_validation()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)
