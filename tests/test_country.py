"""Tests for ISO 3166-1 country codes and countries.

Tests cover:
- CountryCode and CountryAlpha3 parsing (case-insensitive, canonical output)
- Numeric lookup (int and zero-padded text)
- Exact name lookup
- Country entity accessors and CountryInfo records
- Cross-references to currencies and languages
"""

import pytest

from isosphere import (
    Country,
    CountryAlpha3,
    CountryCode,
    CountryInfo,
    CurrencyCode,
    Domain,
    InvalidCodeError,
    InvalidNameError,
    InvalidNumericCodeError,
    IsoParseError,
    LanguageCode,
)
from isosphere.constants import COUNTRY_COUNT


class TestCountryCodeParse:
    """Tests for CountryCode.parse."""

    def test_parse_uppercase(self) -> None:
        """Canonical text parses to its member."""
        assert CountryCode.parse("US") is CountryCode.US

    @pytest.mark.parametrize("text", ["us", "Us", "uS"])
    def test_parse_is_case_insensitive(self, text: str) -> None:
        """Any case mix parses to the same member."""
        assert CountryCode.parse(text) is CountryCode.US

    def test_canonical_output_is_uppercase(self) -> None:
        """str() of a parsed code is the canonical uppercase text."""
        assert str(CountryCode.parse("gb")) == "GB"

    def test_value_lookup_is_case_insensitive(self) -> None:
        """Enum value lookup folds case the same way as parse."""
        assert CountryCode("de") is CountryCode.DE

    @pytest.mark.parametrize("text", ["XX", "", "U", "USA", "U1", " US", "US "])
    def test_parse_rejects_unknown(self, text: str) -> None:
        """Unknown or malformed text raises InvalidCodeError."""
        with pytest.raises(InvalidCodeError) as exc_info:
            CountryCode.parse(text)
        assert exc_info.value.domain is Domain.COUNTRY
        assert exc_info.value.input_value == text

    def test_parse_rejects_non_ascii_case_fold(self) -> None:
        """Unicode letters that uppercase onto ASCII do not match."""
        # U+017F LATIN SMALL LETTER LONG S uppercases to 'S'
        with pytest.raises(InvalidCodeError):
            CountryCode.parse("ſe")

    def test_parse_error_is_value_error(self) -> None:
        """Parse errors are catchable as ValueError."""
        with pytest.raises(ValueError, match="Invalid country code: 'ZZ'"):
            CountryCode.parse("ZZ")

    def test_parse_rejects_non_string(self) -> None:
        """Non-string input raises InvalidCodeError, not TypeError."""
        with pytest.raises(InvalidCodeError):
            CountryCode.parse(840)  # type: ignore[arg-type]

    def test_all_codes_parse_to_themselves(self) -> None:
        """Every member round-trips through parse of its text."""
        for code in CountryCode:
            assert CountryCode.parse(str(code)) is code
            assert CountryCode.parse(str(code).lower()) is code


class TestCountryAlpha3:
    """Tests for CountryAlpha3."""

    def test_parse(self) -> None:
        assert CountryAlpha3.parse("usa") is CountryAlpha3.USA

    def test_alpha3_rejects_alpha2(self) -> None:
        """Alpha-3 parsing accepts three-letter codes only."""
        with pytest.raises(InvalidCodeError):
            CountryAlpha3.parse("US")

    def test_alpha2_rejects_alpha3(self) -> None:
        with pytest.raises(InvalidCodeError):
            CountryCode.parse("USA")

    def test_bijection_with_alpha2(self) -> None:
        """Every alpha-2 code maps to an alpha-3 code and back."""
        seen: set[CountryAlpha3] = set()
        for code in CountryCode:
            alpha3 = code.alpha3
            assert alpha3.alpha2 is code
            seen.add(alpha3)
        assert seen == set(CountryAlpha3)

    def test_entity_from_alpha3(self) -> None:
        assert CountryAlpha3.GBR.country is Country.GB

    def test_numeric(self) -> None:
        assert CountryAlpha3.NOR.numeric == 578


class TestCountryNumeric:
    """Tests for numeric code lookup."""

    def test_from_numeric_840_is_us(self) -> None:
        """Numeric 840 resolves to the United States."""
        assert CountryCode.from_numeric(840) is CountryCode.US
        assert CountryAlpha3.from_numeric(840) is CountryAlpha3.USA

    def test_numeric_property(self) -> None:
        assert CountryCode.GB.numeric == 826

    def test_small_numeric_code(self) -> None:
        """Afghanistan's numeric code is 4, written '004'."""
        assert CountryCode.from_numeric(4) is CountryCode.AF
        assert Country.from_code("004") is Country.AF

    @pytest.mark.parametrize("value", [0, -840, 1000, 1840, 999])
    def test_from_numeric_rejects_unassigned(self, value: int) -> None:
        """Unassigned or out-of-range numbers raise InvalidNumericCodeError."""
        with pytest.raises(InvalidNumericCodeError) as exc_info:
            CountryCode.from_numeric(value)
        assert exc_info.value.input_value == value

    def test_error_message_contains_literal_value(self) -> None:
        with pytest.raises(InvalidNumericCodeError, match="1840"):
            CountryCode.from_numeric(1840)

    def test_from_numeric_rejects_bool(self) -> None:
        """bool is not accepted even though it subclasses int."""
        with pytest.raises(InvalidNumericCodeError):
            CountryCode.from_numeric(True)

    def test_numeric_codes_are_unique(self) -> None:
        numerics = [country.numeric for country in Country]
        assert len(numerics) == len(set(numerics))


class TestCountryFromName:
    """Tests for Country.from_name."""

    def test_exact_name(self) -> None:
        assert Country.from_name("United States of America") is Country.US

    def test_name_lookup_is_case_sensitive(self) -> None:
        """Names match exactly; a case difference is an error."""
        with pytest.raises(InvalidNameError):
            Country.from_name("united states of america")

    def test_unknown_name(self) -> None:
        with pytest.raises(InvalidNameError) as exc_info:
            Country.from_name("Atlantis")
        assert exc_info.value.domain is Domain.COUNTRY
        assert "Atlantis" in str(exc_info.value)

    def test_non_string_name(self) -> None:
        with pytest.raises(InvalidNameError):
            Country.from_name(None)  # type: ignore[arg-type]

    def test_every_name_resolves_to_its_country(self) -> None:
        for country in Country:
            assert Country.from_name(country.display_name) is country


class TestCountryFromCode:
    """Tests for Country.from_code accepting any code form."""

    @pytest.mark.parametrize("value", ["US", "us", "USA", "usa", 840, "840"])
    def test_all_forms(self, value: str | int) -> None:
        assert Country.from_code(value) is Country.US

    def test_unknown_alpha(self) -> None:
        with pytest.raises(InvalidCodeError):
            Country.from_code("XYZ")

    def test_unknown_numeric_text(self) -> None:
        with pytest.raises(InvalidNumericCodeError):
            Country.from_code("000")

    def test_other_types(self) -> None:
        with pytest.raises(InvalidCodeError):
            Country.from_code(8.4)  # type: ignore[arg-type]

    def test_all_parse_errors_share_base(self) -> None:
        for value in ("XYZ", "000", 1840):
            with pytest.raises(IsoParseError):
                Country.from_code(value)


class TestCountryEntity:
    """Tests for Country accessors."""

    def test_usa_scenario(self) -> None:
        """Alpha-3 'USA' gives the United States with alpha-2 'US'."""
        country = CountryAlpha3.parse("USA").country
        assert country.display_name == "United States of America"
        assert country.code is CountryCode.US
        assert str(country.code) == "US"

    def test_str_is_display_name(self) -> None:
        assert str(Country.JP) == "Japan"
        assert f"{Country.JP}" == "Japan"

    def test_enum_name_is_member_identifier(self) -> None:
        assert Country.JP.name == "JP"

    def test_value_is_code(self) -> None:
        assert Country.DE.value is CountryCode.DE

    def test_code_entity_round_trip(self) -> None:
        """code() of entity() is the identity, and vice versa."""
        for code in CountryCode:
            assert code.country.code is code
        for country in Country:
            assert country.code.country is country

    def test_info_record(self) -> None:
        info = Country.NO.info
        assert isinstance(info, CountryInfo)
        assert info.code is CountryCode.NO
        assert info.alpha3 is CountryAlpha3.NOR
        assert info.numeric == 578
        assert info.name == "Norway"

    def test_info_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Country.NO.info.name = "Norge"  # type: ignore[misc]

    def test_info_is_hashable(self) -> None:
        assert len({Country.NO.info, Country.NO.info}) == 1

    def test_multiple_currencies(self) -> None:
        assert Country.CH.currencies == {CurrencyCode.CHE, CurrencyCode.CHF, CurrencyCode.CHW}

    def test_multiple_languages(self) -> None:
        assert Country.CH.languages == {
            LanguageCode.DE,
            LanguageCode.FR,
            LanguageCode.IT,
            LanguageCode.RM,
        }

    def test_territory_without_currency_or_language(self) -> None:
        """Antarctica has neither currencies nor languages."""
        assert Country.AQ.currencies == frozenset()
        assert Country.AQ.languages == frozenset()


class TestCountryEnumeration:
    """Tests for closed-set enumeration."""

    def test_count(self) -> None:
        assert len(Country) == COUNTRY_COUNT
        assert len(CountryCode) == COUNTRY_COUNT
        assert len(CountryAlpha3) == COUNTRY_COUNT

    def test_all_matches_members(self) -> None:
        assert set(Country.all()) == set(Country)
        assert set(CountryCode.all()) == set(CountryCode)
        assert set(CountryAlpha3.all()) == set(CountryAlpha3)

    def test_all_has_no_duplicates(self) -> None:
        assert len(Country.all()) == len(set(Country.all()))

    def test_member_names_match_values(self) -> None:
        for code in CountryCode:
            assert code.name == code.value
