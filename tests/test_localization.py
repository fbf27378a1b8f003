"""Tests for CLDR display names via Babel.

Tests cover:
- localized_name on Country, Currency and Language
- Locale normalization (BCP-47 and POSIX forms)
- Unknown locales
- Cache behavior
- BabelImportError when Babel is unavailable
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given

pytest.importorskip("babel")

from isosphere import Country, Currency, Language  # noqa: E402
from isosphere.core import babel_compat  # noqa: E402
from isosphere.core.babel_compat import BabelImportError, is_babel_available  # noqa: E402
from isosphere.locale_utils import normalize_locale  # noqa: E402
from isosphere.localization import (  # noqa: E402
    _country_name_impl,
    clear_localization_cache,
    country_name,
    currency_name,
    language_name,
)
from tests.strategies.iso import countries, locale_codes, malformed_locales  # noqa: E402


class TestLocalizedNames:
    """Tests for localized_name accessors."""

    def test_country_in_german(self) -> None:
        assert Country.DE.localized_name("de") == "Deutschland"

    def test_country_default_locale_is_english(self) -> None:
        assert Country.US.localized_name() == "United States"

    def test_currency_in_french(self) -> None:
        assert Currency.EUR.localized_name("fr-FR") == "euro"

    def test_language_in_own_locale(self) -> None:
        assert Language.DE.localized_name("de") == "Deutsch"

    def test_bcp47_and_posix_agree(self) -> None:
        assert Country.JP.localized_name("en-GB") == Country.JP.localized_name("en_GB")

    def test_function_api_accepts_code_members(self) -> None:
        assert country_name(Country.FR.code, "fr") == "France"
        assert currency_name("JPY", "en") == "Japanese Yen"
        assert language_name("en", "en") == "English"


class TestUnknownLocales:
    """Unknown or malformed locales yield None."""

    @pytest.mark.parametrize("locale", ["xxx_YYY", "x"])
    def test_unknown_locale_returns_none(
        self, locale: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        clear_localization_cache()
        with caplog.at_level(logging.WARNING, logger="isosphere.localization"):
            assert Country.US.localized_name(locale) is None
        assert any("Unknown locale" in record.getMessage() for record in caplog.records)

    @given(locale=malformed_locales)
    def test_malformed_locales_never_raise(self, locale: str) -> None:
        assert Currency.USD.localized_name(locale) is None


class TestLocalizationProperties:
    @given(country=countries, locale=locale_codes)
    def test_result_is_text_or_none(self, country: Country, locale: str) -> None:
        name = country.localized_name(locale)
        assert name is None or (isinstance(name, str) and name)


class TestCache:
    """Tests for localization caches."""

    def test_repeat_lookup_hits_cache(self) -> None:
        clear_localization_cache()
        Country.LV.localized_name("lv")
        Country.LV.localized_name("lv")
        assert _country_name_impl.cache_info().hits >= 1

    def test_normalized_forms_share_cache_entry(self) -> None:
        clear_localization_cache()
        Country.LV.localized_name("en-US")
        Country.LV.localized_name("en_US")
        info = _country_name_impl.cache_info()
        assert info.misses == 1
        assert info.hits == 1

    def test_clear(self) -> None:
        Country.LV.localized_name("en")
        clear_localization_cache()
        assert _country_name_impl.cache_info().currsize == 0


class TestBabelCompat:
    """Tests for the optional-dependency layer."""

    def test_babel_available(self) -> None:
        assert is_babel_available()

    def test_missing_babel_raises_with_guidance(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(BabelImportError, match=r"pip install isosphere\[babel\]") as exc_info:
            Country.US.localized_name("en")
        assert exc_info.value.feature == "country_name"

    def test_babel_import_error_is_import_error(self) -> None:
        assert issubclass(BabelImportError, ImportError)

    def test_normalize_locale(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"
        assert normalize_locale("en") == "en"
