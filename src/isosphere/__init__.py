"""isosphere - ISO 3166-1, ISO 4217 and ISO 639-1 reference data.

Compiled-in, closed enumerations of countries, currencies and languages with
case-insensitive parsing, numeric-code lookup, exact-name lookup and
symmetric cross-references between the three domains.

Public API:
    Country, CountryCode, CountryAlpha3, CountryInfo - ISO 3166-1
    Currency, CurrencyCode, CurrencyInfo - ISO 4217
    Language, LanguageCode, LanguageInfo - ISO 639-1
    Domain - Reference-data domain tag

Exceptions:
    IsoError - Base exception class
    IsoParseError - Unknown code, numeric code, or name (also a ValueError)
    InvalidCodeError, InvalidNumericCodeError, InvalidNameError
    DataIntegrityError - Defective compiled-in tables (fatal)

Submodules:
    isosphere.introspection - Functional lookups returning None for unknown input
    isosphere.serialization - JSON encoding, decoding and JSON Schema
    isosphere.localization - CLDR display names (requires Babel)
    isosphere.registry - Process-wide lookup tables
    isosphere.diagnostics - Error types and diagnostics
"""

from .country import Country, CountryAlpha3, CountryCode, CountryInfo
from .currency import Currency, CurrencyCode, CurrencyInfo
from .diagnostics import (
    InvalidCodeError,
    InvalidNameError,
    InvalidNumericCodeError,
    IsoError,
    IsoParseError,
)
from .enums import Domain
from .integrity import DataIntegrityError
from .language import Language, LanguageCode, LanguageInfo

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("isosphere")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Standards editions the compiled-in data follows
__iso_standards__ = ("ISO 3166-1", "ISO 4217", "ISO 639-1")

__all__ = [
    "Country",
    "CountryAlpha3",
    "CountryCode",
    "CountryInfo",
    "Currency",
    "CurrencyCode",
    "CurrencyInfo",
    "DataIntegrityError",
    "Domain",
    "InvalidCodeError",
    "InvalidNameError",
    "InvalidNumericCodeError",
    "IsoError",
    "IsoParseError",
    "Language",
    "LanguageCode",
    "LanguageInfo",
    "__iso_standards__",
    "__version__",
]
