"""Built-in currency data.

Static tables consulted by CurrencyRegistry:
    CURRENCIES: code -> (numeric code, fraction digits), in enumeration order
    SYMBOLS: code -> ordered (symbol, locales) pairs; the first pair is the
        English default, later pairs are locale-specific overrides
    COUNTRY_CURRENCIES: ISO 3166 country -> current legal tender

Fraction digits follow CLDR's supplemental currency data (e.g. RSD and IQD
use 0), which is what formatted amounts show in practice.

Python 3.13+. Zero external dependencies.
"""
# ruff: noqa: ERA001 - Section comments in data structures are documentation, not dead code

__all__ = [
    "COUNTRY_CURRENCIES",
    "CURRENCIES",
    "G10_CURRENCIES",
    "SYMBOLS",
]

# Reserve currencies come first so enumeration starts with the most used codes.
G10_CURRENCIES: tuple[str, ...] = (
    "AUD", "CAD", "CHF", "EUR", "GBP", "JPY", "NOK", "NZD", "SEK", "USD",
)

# =============================================================================
# CURRENCIES: code -> (numeric code, fraction digits)
# =============================================================================
CURRENCIES: dict[str, tuple[str, int]] = {
    # G10
    "AUD": ("036", 2),
    "CAD": ("124", 2),
    "CHF": ("756", 2),
    "EUR": ("978", 2),
    "GBP": ("826", 2),
    "JPY": ("392", 0),
    "NOK": ("578", 2),
    "NZD": ("554", 2),
    "SEK": ("752", 2),
    "USD": ("840", 2),
    # Everything else, alphabetical
    "AED": ("784", 2),
    "AFN": ("971", 0),
    "ALL": ("008", 0),
    "AMD": ("051", 2),
    "ANG": ("532", 2),
    "AOA": ("973", 2),
    "ARS": ("032", 2),
    "AWG": ("533", 2),
    "AZN": ("944", 2),
    "BAM": ("977", 2),
    "BBD": ("052", 2),
    "BDT": ("050", 2),
    "BGN": ("975", 2),
    "BHD": ("048", 3),
    "BIF": ("108", 0),
    "BMD": ("060", 2),
    "BND": ("096", 2),
    "BOB": ("068", 2),
    "BRL": ("986", 2),
    "BSD": ("044", 2),
    "BTN": ("064", 2),
    "BWP": ("072", 2),
    "BYN": ("933", 2),
    "BZD": ("084", 2),
    "CDF": ("976", 2),
    "CLF": ("990", 4),
    "CLP": ("152", 0),
    "CNY": ("156", 2),
    "COP": ("170", 2),
    "CRC": ("188", 2),
    "CUC": ("931", 2),
    "CUP": ("192", 2),
    "CVE": ("132", 2),
    "CZK": ("203", 2),
    "DJF": ("262", 0),
    "DKK": ("208", 2),
    "DOP": ("214", 2),
    "DZD": ("012", 2),
    "EGP": ("818", 2),
    "ERN": ("232", 2),
    "ETB": ("230", 2),
    "FJD": ("242", 2),
    "FKP": ("238", 2),
    "GEL": ("981", 2),
    "GHS": ("936", 2),
    "GIP": ("292", 2),
    "GMD": ("270", 2),
    "GNF": ("324", 0),
    "GTQ": ("320", 2),
    "GYD": ("328", 2),
    "HKD": ("344", 2),
    "HNL": ("340", 2),
    "HTG": ("332", 2),
    "HUF": ("348", 2),
    "IDR": ("360", 2),
    "ILS": ("376", 2),
    "INR": ("356", 2),
    "IQD": ("368", 0),
    "IRR": ("364", 0),
    "ISK": ("352", 0),
    "JMD": ("388", 2),
    "JOD": ("400", 3),
    "KES": ("404", 2),
    "KGS": ("417", 2),
    "KHR": ("116", 2),
    "KMF": ("174", 0),
    "KPW": ("408", 0),
    "KRW": ("410", 0),
    "KWD": ("414", 3),
    "KYD": ("136", 2),
    "KZT": ("398", 2),
    "LAK": ("418", 0),
    "LBP": ("422", 0),
    "LKR": ("144", 2),
    "LRD": ("430", 2),
    "LSL": ("426", 2),
    "LYD": ("434", 3),
    "MAD": ("504", 2),
    "MDL": ("498", 2),
    "MGA": ("969", 0),
    "MKD": ("807", 2),
    "MMK": ("104", 0),
    "MNT": ("496", 2),
    "MOP": ("446", 2),
    "MRU": ("929", 2),
    "MUR": ("480", 2),
    "MVR": ("462", 2),
    "MWK": ("454", 2),
    "MXN": ("484", 2),
    "MYR": ("458", 2),
    "MZN": ("943", 2),
    "NAD": ("516", 2),
    "NGN": ("566", 2),
    "NIO": ("558", 2),
    "NPR": ("524", 2),
    "OMR": ("512", 3),
    "PAB": ("590", 2),
    "PEN": ("604", 2),
    "PGK": ("598", 2),
    "PHP": ("608", 2),
    "PKR": ("586", 2),
    "PLN": ("985", 2),
    "PYG": ("600", 0),
    "QAR": ("634", 2),
    "RON": ("946", 2),
    "RSD": ("941", 0),
    "RUB": ("643", 2),
    "RWF": ("646", 0),
    "SAR": ("682", 2),
    "SBD": ("090", 2),
    "SCR": ("690", 2),
    "SDG": ("938", 2),
    "SGD": ("702", 2),
    "SHP": ("654", 2),
    "SLE": ("925", 2),
    "SLL": ("694", 0),
    "SOS": ("706", 0),
    "SRD": ("968", 2),
    "SSP": ("728", 2),
    "STN": ("930", 2),
    "SVC": ("222", 2),
    "SYP": ("760", 0),
    "SZL": ("748", 2),
    "THB": ("764", 2),
    "TJS": ("972", 2),
    "TMT": ("934", 2),
    "TND": ("788", 3),
    "TOP": ("776", 2),
    "TRY": ("949", 2),
    "TTD": ("780", 2),
    "TWD": ("901", 2),
    "TZS": ("834", 2),
    "UAH": ("980", 2),
    "UGX": ("800", 0),
    "UYI": ("940", 0),
    "UYU": ("858", 2),
    "UYW": ("927", 4),
    "UZS": ("860", 2),
    "VED": ("926", 2),
    "VES": ("928", 2),
    "VND": ("704", 0),
    "VUV": ("548", 0),
    "WST": ("882", 2),
    "XAF": ("950", 0),
    "XCD": ("951", 2),
    "XOF": ("952", 0),
    "XPF": ("953", 0),
    "YER": ("886", 0),
    "ZAR": ("710", 2),
    "ZMW": ("967", 2),
    "ZWG": ("924", 2),
    "ZWL": ("932", 2),
}

# =============================================================================
# SYMBOLS: code -> ((symbol, locales), ...)
# =============================================================================
# Currencies without an entry display their code (CHF, RSD, ...).
SYMBOLS: dict[str, tuple[tuple[str, tuple[str, ...]], ...]] = {
    "AUD": (
        ("A$", ("en",)),
        ("$", ("en-AU",)),
        ("AU$", ("de", "es", "it", "ja", "pt", "zh")),
        ("$AU", ("fr",)),
    ),
    "BRL": (("R$", ("en",)),),
    "CAD": (
        ("CA$", ("en",)),
        ("$", ("en-CA", "fr-CA")),
        ("$CA", ("fr",)),
    ),
    "CNY": (
        ("CN¥", ("en",)),
        ("¥", ("zh",)),
        ("元", ("ja",)),
    ),
    "EUR": (("€", ("en",)),),
    "GBP": (("£", ("en",)),),
    "HKD": (
        ("HK$", ("en",)),
        ("$", ("en-HK", "zh-Hant-HK")),
    ),
    "ILS": (("₪", ("en",)),),
    "INR": (("₹", ("en",)),),
    "JPY": (
        ("¥", ("en",)),
        ("JP¥", ("de", "es", "fr", "zh")),
        ("￥", ("ja",)),
    ),
    "KRW": (("₩", ("en",)),),
    "MXN": (
        ("MX$", ("en",)),
        ("$", ("es-MX",)),
    ),
    "NZD": (
        ("NZ$", ("en",)),
        ("$", ("en-NZ",)),
        ("$NZ", ("fr",)),
    ),
    "PHP": (("₱", ("en",)),),
    "TWD": (
        ("NT$", ("en",)),
        ("$", ("zh-Hant",)),
    ),
    "USD": (
        ("$", ("de-CH", "en", "en-CA", "ja", "zh-Hant")),
        (
            "US$",
            (
                "ar", "bn", "de", "dz", "en-001", "es", "fa", "hi", "my",
                "ne", "pt", "sr-Latn", "zh",
            ),
        ),
        ("$US", ("fr",)),
        ("USD", ("it",)),
    ),
    "VND": (("₫", ("en",)),),
    "XAF": (("FCFA", ("en",)),),
    "XCD": (("EC$", ("en",)),),
    "XOF": (("F\u202fCFA", ("en",)),),
    "XPF": (("CFPF", ("en",)),),
}

# =============================================================================
# COUNTRY_CURRENCIES: ISO 3166-1 alpha-2 -> currency code
# =============================================================================
# Common countries; the rest is completed from CLDR territory data.
COUNTRY_CURRENCIES: dict[str, str] = {
    # Eurozone
    "AT": "EUR", "BE": "EUR", "CY": "EUR", "DE": "EUR", "EE": "EUR",
    "ES": "EUR", "FI": "EUR", "FR": "EUR", "GR": "EUR", "HR": "EUR",
    "IE": "EUR", "IT": "EUR", "LT": "EUR", "LU": "EUR", "LV": "EUR",
    "MT": "EUR", "NL": "EUR", "PT": "EUR", "SI": "EUR", "SK": "EUR",
    # Rest of Europe
    "BA": "BAM", "BG": "BGN", "CH": "CHF", "CZ": "CZK", "DK": "DKK",
    "GB": "GBP", "HU": "HUF", "IS": "ISK", "LI": "CHF", "ME": "EUR",
    "MK": "MKD", "NO": "NOK", "PL": "PLN", "RO": "RON", "RS": "RSD",
    "RU": "RUB", "SE": "SEK", "TR": "TRY", "UA": "UAH",
    # Americas
    "AR": "ARS", "BR": "BRL", "CA": "CAD", "CL": "CLP", "CO": "COP",
    "EC": "USD", "MX": "MXN", "PE": "PEN", "PR": "USD", "US": "USD",
    "UY": "UYU",
    # Asia-Pacific
    "AU": "AUD", "CN": "CNY", "HK": "HKD", "ID": "IDR", "IN": "INR",
    "JP": "JPY", "KR": "KRW", "MY": "MYR", "NZ": "NZD", "PH": "PHP",
    "SG": "SGD", "TH": "THB", "TW": "TWD", "VN": "VND",
    # Middle East and Africa
    "AE": "AED", "EG": "EGP", "IL": "ILS", "IQ": "IQD", "IR": "IRR",
    "KW": "KWD", "MA": "MAD", "NG": "NGN", "OM": "OMR", "SA": "SAR",
    "ZA": "ZAR",
}
