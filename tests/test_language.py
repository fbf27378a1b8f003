"""Tests for ISO 639-1 language codes and languages."""

import pytest

from isosphere import (
    Country,
    CountryCode,
    Domain,
    InvalidCodeError,
    InvalidNameError,
    Language,
    LanguageCode,
    LanguageInfo,
)
from isosphere.constants import LANGUAGE_COUNT


class TestLanguageCodeParse:
    """Tests for LanguageCode.parse."""

    @pytest.mark.parametrize("text", ["en", "EN", "En", "eN"])
    def test_parse_is_case_insensitive(self, text: str) -> None:
        assert LanguageCode.parse(text) is LanguageCode.EN

    def test_canonical_output_is_lowercase(self) -> None:
        """ISO 639-1 codes are canonically lowercase."""
        assert str(LanguageCode.parse("DE")) == "de"

    def test_member_identifier_is_uppercase(self) -> None:
        assert LanguageCode.EN.name == "EN"
        assert LanguageCode.EN.value == "en"

    @pytest.mark.parametrize("text", ["xx", "eng", "e", "", "e1"])
    def test_parse_rejects_unknown(self, text: str) -> None:
        with pytest.raises(InvalidCodeError) as exc_info:
            LanguageCode.parse(text)
        assert exc_info.value.domain is Domain.LANGUAGE
        assert exc_info.value.input_value == text

    def test_value_lookup(self) -> None:
        assert LanguageCode("FR") is LanguageCode.FR

    def test_all_codes_parse_to_themselves(self) -> None:
        for code in LanguageCode:
            assert LanguageCode.parse(str(code).upper()) is code


class TestLanguageEntity:
    """Tests for Language accessors."""

    def test_display_name(self) -> None:
        assert Language.NO.display_name == "Norwegian"
        assert str(Language.EN) == "English"

    def test_info_record(self) -> None:
        info = Language.JA.info
        assert isinstance(info, LanguageInfo)
        assert info.code is LanguageCode.JA
        assert info.name == "Japanese"
        assert info.countries == {CountryCode.JP}

    def test_from_code(self) -> None:
        assert Language.from_code("No") is Language.NO

    def test_from_name(self) -> None:
        assert Language.from_name("Norwegian Bokmål") is Language.NB

    def test_from_name_rejects_unknown(self) -> None:
        with pytest.raises(InvalidNameError):
            Language.from_name("Klingon")

    def test_code_entity_round_trip(self) -> None:
        for code in LanguageCode:
            assert code.language.code is code


class TestLanguageCountries:
    """Tests for countries derived from the country table."""

    def test_norwegian_countries(self) -> None:
        """Language 'no' is spoken in exactly BV, NO and SJ."""
        assert LanguageCode.parse("no").language.countries == {
            CountryCode.BV,
            CountryCode.NO,
            CountryCode.SJ,
        }

    def test_language_without_countries(self) -> None:
        """Avestan is listed in ISO 639-1 but spoken nowhere."""
        assert Language.AE.countries == frozenset()

    def test_symmetry_with_country_languages(self) -> None:
        for language in Language:
            for country_code in language.countries:
                assert language.code in country_code.country.languages
        for country in Country:
            for language_code in country.languages:
                assert country.code in language_code.language.countries

    def test_english_is_widespread(self) -> None:
        assert {CountryCode.US, CountryCode.GB, CountryCode.AU} <= Language.EN.countries


class TestLanguageEnumeration:
    def test_count(self) -> None:
        assert len(Language) == LANGUAGE_COUNT
        assert len(LanguageCode) == LANGUAGE_COUNT

    def test_all_matches_members(self) -> None:
        assert set(Language.all()) == set(Language)
        assert set(LanguageCode.all()) == set(LanguageCode)
