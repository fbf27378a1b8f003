"""Enumerations for isosphere type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Domain(StrEnum):
    """Reference-data domain a value belongs to.

    StrEnum provides automatic string conversion: str(Domain.COUNTRY) == "country"
    """

    COUNTRY = "country"
    """ISO 3166-1 countries and territories"""

    CURRENCY = "currency"
    """ISO 4217 currencies"""

    LANGUAGE = "language"
    """ISO 639-1 languages"""


__all__ = [
    "Domain",
]
