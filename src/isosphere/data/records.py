"""Record shapes for the literal ISO datasets."""

from typing import NamedTuple

__all__ = ["CountryRecord", "CurrencyRecord", "LanguageRecord"]


class CountryRecord(NamedTuple):
    """One ISO 3166-1 country as authored.

    Attributes:
        alpha2: Alpha-2 code (e.g., 'US').
        alpha3: Alpha-3 code (e.g., 'USA').
        numeric: Numeric code (e.g., 840).
        name: English short name.
        currencies: ISO 4217 codes of currencies circulating in the country.
        languages: ISO 639-1 codes of languages spoken in the country.
    """

    alpha2: str
    alpha3: str
    numeric: int
    name: str
    currencies: tuple[str, ...]
    languages: tuple[str, ...]


class CurrencyRecord(NamedTuple):
    """One ISO 4217 currency as authored.

    Attributes:
        code: Alphabetic code (e.g., 'GBP').
        numeric: Numeric code (e.g., 826).
        name: English name.
        decimal_digits: Minor-unit decimal places (0-4).
    """

    code: str
    numeric: int
    name: str
    decimal_digits: int


class LanguageRecord(NamedTuple):
    """One ISO 639-1 language as authored."""

    code: str
    name: str
