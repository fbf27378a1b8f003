"""Functional lookup API over the ISO reference tables.

Complements the enum-based API with plain functions that take code text
and return info records. Unknown input yields None instead of raising:

    >>> get_country("usa").name
    'United States of America'
    >>> get_currency(392).decimal_digits
    0
    >>> get_language("xx") is None
    True

All returned records are immutable, hashable, and thread-safe.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeGuard

from isosphere.core.code_validation import lookup_alpha_member
from isosphere.country import Country, CountryAlpha3, CountryCode, CountryInfo
from isosphere.currency import Currency, CurrencyCode, CurrencyInfo
from isosphere.diagnostics import IsoParseError
from isosphere.enums import Domain
from isosphere.language import Language, LanguageCode, LanguageInfo
from isosphere.registry import get_tables

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lookup functions
    "get_country",
    "get_currency",
    "get_language",
    "list_countries",
    "list_currencies",
    "list_languages",
    "entity_count",
    # Relationships
    "currencies_for_country",
    "languages_for_country",
    "countries_for_currency",
    "countries_for_language",
    # Type guards
    "is_valid_country_code",
    "is_valid_currency_code",
    "is_valid_language_code",
]


# ============================================================================
# LOOKUP FUNCTIONS
# ============================================================================


def get_country(code: str | int) -> CountryInfo | None:
    """Look up an ISO 3166-1 country.

    Args:
        code: Alpha-2 ('US'), alpha-3 ('USA'), or numeric (840 or '840').
            Alphabetic codes are case-insensitive.

    Returns:
        CountryInfo if found, None if unknown code.
    """
    try:
        return Country.from_code(code).info
    except IsoParseError:
        return None


def get_currency(code: str | int) -> CurrencyInfo | None:
    """Look up an ISO 4217 currency.

    Args:
        code: Alphabetic ('EUR') or numeric (978 or '978') code.
            Alphabetic codes are case-insensitive.

    Returns:
        CurrencyInfo if found, None if unknown code.
    """
    try:
        return Currency.from_code(code).info
    except IsoParseError:
        return None


def get_language(code: str) -> LanguageInfo | None:
    """Look up an ISO 639-1 language.

    Args:
        code: Two-letter code (e.g., 'en'). Case-insensitive.

    Returns:
        LanguageInfo if found, None if unknown code.
    """
    try:
        return Language.from_code(code).info
    except IsoParseError:
        return None


def list_countries() -> frozenset[CountryInfo]:
    """All ISO 3166-1 countries."""
    return frozenset(get_tables().countries.values())


def list_currencies() -> frozenset[CurrencyInfo]:
    """All ISO 4217 currencies."""
    return frozenset(get_tables().currencies.values())


def list_languages() -> frozenset[LanguageInfo]:
    """All ISO 639-1 languages."""
    return frozenset(get_tables().languages.values())


def entity_count(domain: Domain) -> int:
    """Number of entities in a domain.

    Args:
        domain: Domain to count

    Returns:
        Entity count, e.g. 179 for Domain.CURRENCY
    """
    tables = get_tables()
    match domain:
        case Domain.COUNTRY:
            return len(tables.countries)
        case Domain.CURRENCY:
            return len(tables.currencies)
        case Domain.LANGUAGE:
            return len(tables.languages)
    msg = f"Unknown domain: {domain!r}"
    raise ValueError(msg)


# ============================================================================
# RELATIONSHIPS
# ============================================================================


def currencies_for_country(code: str | int) -> frozenset[CurrencyCode]:
    """Currencies in use in a country.

    Args:
        code: Any country code form accepted by Country.from_code

    Raises:
        InvalidCodeError: If code is not a known country code
        InvalidNumericCodeError: If a numeric code is not assigned
    """
    return Country.from_code(code).currencies


def languages_for_country(code: str | int) -> frozenset[LanguageCode]:
    """Languages spoken in a country.

    Raises:
        InvalidCodeError: If code is not a known country code
        InvalidNumericCodeError: If a numeric code is not assigned
    """
    return Country.from_code(code).languages


def countries_for_currency(code: str | int) -> frozenset[CountryCode]:
    """Countries where a currency circulates.

    Raises:
        InvalidCodeError: If code is not a known currency code
        InvalidNumericCodeError: If a numeric code is not assigned
    """
    return Currency.from_code(code).countries


def countries_for_language(code: str) -> frozenset[CountryCode]:
    """Countries where a language is spoken.

    Raises:
        InvalidCodeError: If code is not a known language code
    """
    return Language.from_code(code).countries


# ============================================================================
# TYPE GUARDS (PEP 647)
# ============================================================================


def is_valid_country_code(value: object) -> TypeGuard[str]:
    """Check if value is an ISO 3166-1 alpha-2 or alpha-3 code.

    Case-insensitive. Numeric codes are not accepted here.

    Narrows value to str when True. A False result says nothing about the
    type of value: unknown strings such as 'ZZ' are still strings.

    Args:
        value: Value to check.

    Returns:
        True if value is a known alpha-2 or alpha-3 code.
    """
    return (
        lookup_alpha_member(CountryCode, value, 2) is not None
        or lookup_alpha_member(CountryAlpha3, value, 3) is not None
    )


def is_valid_currency_code(value: object) -> TypeGuard[str]:
    """Check if value is an ISO 4217 alphabetic code (case-insensitive)."""
    return lookup_alpha_member(CurrencyCode, value, 3) is not None


def is_valid_language_code(value: object) -> TypeGuard[str]:
    """Check if value is an ISO 639-1 code (case-insensitive)."""
    return lookup_alpha_member(LanguageCode, value, 2) is not None
