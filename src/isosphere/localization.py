"""Localized display names via Babel CLDR data.

The reference tables carry one English name per entity. This module adds
CLDR display names in any locale Babel knows:

    >>> Country.DE.localized_name("de")
    'Deutschland'
    >>> Currency.EUR.localized_name("fr-FR")
    'euro'

Requires Babel installation:
    pip install isosphere[babel]

Without Babel, functions raise BabelImportError with installation guidance.
Unknown locales and codes CLDR does not name yield None.

Thread-safe. Results cached per (code, normalized locale) pair.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from isosphere.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from isosphere.core.babel_compat import get_unknown_locale_error, require_babel
from isosphere.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lookup functions
    "country_name",
    "currency_name",
    "language_name",
    # Cache management
    "clear_localization_cache",
]

logger = logging.getLogger(__name__)


# ============================================================================
# BABEL INTERFACE
# ============================================================================


def _load_locale(locale_norm: str) -> Locale | None:
    """Parse a normalized locale, returning None if Babel does not know it."""
    unknown_locale_error = get_unknown_locale_error()
    try:
        return get_babel_locale(locale_norm)
    except (ValueError, unknown_locale_error):
        # Babel raises ValueError for malformed identifiers and
        # UnknownLocaleError (an Exception subclass) for unknown ones.
        logger.warning("Unknown locale %r; no localized names available", locale_norm)
        return None


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _country_name_impl(alpha2: str, locale_norm: str) -> str | None:
    locale = _load_locale(locale_norm)
    if locale is None:
        return None
    return locale.territories.get(alpha2)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _currency_name_impl(code: str, locale_norm: str) -> str | None:
    locale = _load_locale(locale_norm)
    if locale is None:
        return None
    return locale.currencies.get(code)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _language_name_impl(code: str, locale_norm: str) -> str | None:
    locale = _load_locale(locale_norm)
    if locale is None:
        return None
    return locale.languages.get(code)


def country_name(alpha2: str, locale: str = DEFAULT_LOCALE) -> str | None:
    """Localized name of a country.

    Args:
        alpha2: Canonical ISO 3166-1 alpha-2 code (e.g., 'DE')
        locale: Locale for name localization (default: 'en'). Accepts BCP-47
            (en-US) or POSIX (en_US) formats; normalized internally.

    Returns:
        CLDR display name, or None if unavailable

    Raises:
        BabelImportError: If Babel not installed.
    """
    require_babel("country_name")
    return _country_name_impl(str(alpha2), normalize_locale(locale))


def currency_name(code: str, locale: str = DEFAULT_LOCALE) -> str | None:
    """Localized name of a currency.

    Args:
        code: Canonical ISO 4217 code (e.g., 'EUR')
        locale: Locale for name localization (default: 'en')

    Returns:
        CLDR display name, or None if unavailable

    Raises:
        BabelImportError: If Babel not installed.
    """
    require_babel("currency_name")
    return _currency_name_impl(str(code), normalize_locale(locale))


def language_name(code: str, locale: str = DEFAULT_LOCALE) -> str | None:
    """Localized name of a language.

    Args:
        code: Canonical ISO 639-1 code (e.g., 'de')
        locale: Locale for name localization (default: 'en')

    Returns:
        CLDR display name, or None if unavailable

    Raises:
        BabelImportError: If Babel not installed.
    """
    require_babel("language_name")
    return _language_name_impl(str(code), normalize_locale(locale))


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_localization_cache() -> None:
    """Clear all localized name caches.

    Thread-safe.
    """
    _country_name_impl.cache_clear()
    _currency_name_impl.cache_clear()
    _language_name_impl.cache_clear()
    get_babel_locale.cache_clear()
