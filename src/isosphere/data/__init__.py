"""Literal ISO reference datasets.

The records here are the only place the reference data is authored. They
are plain tuples of builtin values, free of any enum or registry imports,
so the table builder can validate them as untrusted input.

Authoring rules:
    - The country table is the single source of truth for country/currency
      and country/language membership. Currency and language records carry
      no country lists; those are derived when the tables are built.
    - Codes are written in canonical case: uppercase for countries and
      currencies, lowercase for languages.
    - Numeric codes are written as plain integers (ISO zero-padding is a
      display concern).

Python 3.13+. Zero external dependencies.
"""

from .countries import COUNTRY_RECORDS
from .currencies import CURRENCY_RECORDS
from .languages import LANGUAGE_RECORDS
from .records import CountryRecord, CurrencyRecord, LanguageRecord

__all__ = [
    "COUNTRY_RECORDS",
    "CURRENCY_RECORDS",
    "LANGUAGE_RECORDS",
    "CountryRecord",
    "CurrencyRecord",
    "LanguageRecord",
]
