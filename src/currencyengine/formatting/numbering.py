"""Native digit substitution for non-Latin numbering systems.

Python 3.13+. Zero external dependencies.
"""

from currencyengine.enums import NumberingSystem

__all__ = [
    "NATIVE_DIGITS",
    "delocalize_digits",
    "localize_digits",
]

NATIVE_DIGITS: dict[NumberingSystem, str] = {
    NumberingSystem.ARAB: "٠١٢٣٤٥٦٧٨٩",
    NumberingSystem.ARABEXT: "۰۱۲۳۴۵۶۷۸۹",
    NumberingSystem.BENG: "০১২৩৪৫৬৭৮৯",
    NumberingSystem.DEVA: "०१२३४५६७८९",
    NumberingSystem.MYMR: "၀၁၂၃၄၅၆၇၈၉",
    NumberingSystem.TIBT: "༠༡༢༣༤༥༦༧༨༩",
}

_TO_NATIVE: dict[NumberingSystem, dict[int, int]] = {
    system: str.maketrans("0123456789", digits) for system, digits in NATIVE_DIGITS.items()
}
_TO_ASCII: dict[NumberingSystem, dict[int, int]] = {
    system: str.maketrans(digits, "0123456789") for system, digits in NATIVE_DIGITS.items()
}


def localize_digits(text: str, system: NumberingSystem) -> str:
    """Replace ASCII digits with the digits of `system` (Latin is unchanged)."""
    table = _TO_NATIVE.get(system)
    return text if table is None else text.translate(table)


def delocalize_digits(text: str, system: NumberingSystem) -> str:
    """Replace the native digits of `system` with ASCII digits."""
    table = _TO_ASCII.get(system)
    return text if table is None else text.translate(table)
