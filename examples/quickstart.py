"""Quickstart example for currencyengine.

Walks through amounts, arithmetic, rounding, minor units, formatting
and the persistence encodings.

Note: Examples print results without checking every error path. In
production, catch CurrencyError around user-supplied numbers and codes.
"""

from decimal import Decimal

from currencyengine import (
    Amount,
    CurrencyDisplay,
    CurrencyMismatchError,
    Formatter,
    InvalidCurrencyCodeError,
    RoundingMode,
    get_symbol,
)

# Example 1: Creating amounts
print("=" * 50)
print("Example 1: Creating Amounts")
print("=" * 50)

price = Amount.parse("20.99", "USD")
print(price)
# Output: 20.99 USD

print(Amount.from_minor_units(2099, "USD"))
# Output: 20.99 USD

try:
    Amount.parse("20.99", "usd")
except InvalidCurrencyCodeError as e:
    print(f"Rejected: {e}")

# Example 2: Arithmetic
print("\n" + "=" * 50)
print("Example 2: Arithmetic")
print("=" * 50)

shipping = Amount.parse("4.50", "USD")
print(price + shipping)
# Output: 25.49 USD

print(price.mul("3"))
# Output: 62.97 USD

print(price.div(3))

try:
    price.add(Amount.parse("1", "EUR"))
except CurrencyMismatchError as e:
    print(f"Rejected: {e}")

# Example 3: Rounding
print("\n" + "=" * 50)
print("Example 3: Rounding")
print("=" * 50)

third = price.div(3)
print(third.round())
# Output: 7.00 USD

print(third.round_to(1, RoundingMode.DOWN))
# Output: 6.9 USD

print(Amount.parse("12.345", "JPY").round())
# Output: 12 JPY

# Example 4: Minor units
print("\n" + "=" * 50)
print("Example 4: Minor Units")
print("=" * 50)

print(price.minor_units())
# Output: 2099

minor = price.to_minor()
print(minor.number, minor)
# Output: 2099 20.99 USD

print(minor.to_amount() == price)
# Output: True

# Example 5: Currency conversion
print("\n" + "=" * 50)
print("Example 5: Conversion")
print("=" * 50)

print(price.convert("EUR", Decimal("0.92")).round())
# Output: 19.31 EUR

# Example 6: Formatting
print("\n" + "=" * 50)
print("Example 6: Formatting")
print("=" * 50)

amount = Amount.parse("1234.59", "USD")
for locale in ("en", "de-CH", "fr", "sr-Latn", "hi"):
    print(f"{locale:8} {Formatter(locale).format(amount)}")

print(Formatter("en", currency_display=CurrencyDisplay.CODE).format(amount))
print(Formatter("en", accounting_style=True).format(-amount))
# Output: ($1,234.59)

symbol, _ = get_symbol("USD", "en-AU")
print(f"USD in en-AU: {symbol}")

# Example 7: Persistence encodings
print("\n" + "=" * 50)
print("Example 7: Persistence")
print("=" * 50)

print(amount.to_json())
print(amount.to_sql())
print(amount.to_bytes())
print(Amount.from_sql(amount.to_sql()) == amount)
# Output: True

print("\n" + "=" * 50)
print("All examples completed!")
print("=" * 50)
