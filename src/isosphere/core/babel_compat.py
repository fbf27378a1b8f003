"""Optional Babel access for localized display names.

The reference tables never need Babel. Only isosphere.localization (through
isosphere.locale_utils) reaches for CLDR data, and it imports Babel through
the helpers here so that:

    - import isosphere never loads babel
    - a missing install surfaces as BabelImportError naming the caller and
      the `isosphere[babel]` extra

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError

__all__ = [
    "BabelImportError",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A localized-name lookup ran without Babel installed.

    Attributes:
        feature: Function that needed Babel (e.g. 'country_name')
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} needs Babel's CLDR data; "
            "install it with: pip install isosphere[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """True if localized names can be looked up in this environment."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError for feature unless Babel is importable."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """babel.Locale, imported on first use."""
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleError]:
    """babel.core.UnknownLocaleError, for except clauses around Locale.parse."""
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError
