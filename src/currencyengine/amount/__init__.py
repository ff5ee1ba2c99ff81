"""Decimal amounts bound to a currency.

Python 3.13+.
"""

from .amount import Amount, Scalar
from .minor import MinorAmount

__all__ = ["Amount", "MinorAmount", "Scalar"]
