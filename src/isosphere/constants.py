"""Shared constants for isosphere.

This module provides centralized configuration constants used across the
domain modules and the registry. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Dataset sizes: Expected entry counts, checked when tables are built
- Locale defaults: Locale used when none is given
- Cache limits: Memory bounds for localized name lookups

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Dataset sizes
    "COUNTRY_COUNT",
    "CURRENCY_COUNT",
    "LANGUAGE_COUNT",
    # Decimal digits
    "MAX_DECIMAL_DIGITS",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# DATASET SIZES
# ============================================================================
#
# The registry compares the built tables against these counts. A mismatch
# means records were lost or added without updating the pinned sizes, and
# is reported as a data integrity failure rather than shipped silently.

# ISO 3166-1 entries (officially assigned alpha-2 codes).
COUNTRY_COUNT: int = 249

# ISO 4217 entries (active codes, including funds and precious metals).
CURRENCY_COUNT: int = 179

# ISO 639-1 entries.
LANGUAGE_COUNT: int = 183

# ============================================================================
# DECIMAL DIGITS
# ============================================================================

# Largest minor-unit exponent assigned by ISO 4217 (CLF, UYW).
MAX_DECIMAL_DIGITS: int = 4

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale for localized display names when the caller passes none.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached localized-name lookups per domain.
# Covers every code of the largest domain in a handful of locales.
MAX_LOCALE_CACHE_SIZE: int = 2048
