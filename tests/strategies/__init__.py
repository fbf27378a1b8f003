"""Hypothesis strategies for isosphere property-based testing.

Usage:
    from tests.strategies import countries, currency_codes
    from tests.strategies.iso import case_variants, locale_codes

Event-Emitting Strategies (HypoFuzz-Optimized):
    - currency_by_decimals, case_variants
"""

from .iso import (
    all_alpha2_codes,
    all_alpha3_codes,
    all_numeric_codes,
    case_variants,
    countries,
    country_codes,
    currencies,
    currency_by_decimals,
    currency_codes,
    four_decimal_currencies,
    junk_text,
    language_codes,
    languages,
    locale_codes,
    malformed_locales,
    three_decimal_currencies,
    two_decimal_currencies,
    zero_decimal_currencies,
)

__all__ = [
    "all_alpha2_codes",
    "all_alpha3_codes",
    "all_numeric_codes",
    "case_variants",
    "countries",
    "country_codes",
    "currencies",
    "currency_by_decimals",
    "currency_codes",
    "four_decimal_currencies",
    "junk_text",
    "language_codes",
    "languages",
    "locale_codes",
    "malformed_locales",
    "three_decimal_currencies",
    "two_decimal_currencies",
    "zero_decimal_currencies",
]
