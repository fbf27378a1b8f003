"""Hypothesis property-based tests for ISO lookups.

Tests invariants that must hold across all valid inputs: parse
case-insensitivity, canonical output, code/entity round trips, numeric
round trips and cross-reference symmetry.
Uses strategies from tests.strategies.iso for generating test data.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, event, given, settings
from hypothesis import strategies as st

from isosphere import (
    Country,
    CountryAlpha3,
    CountryCode,
    Currency,
    CurrencyCode,
    InvalidCodeError,
    InvalidNumericCodeError,
    IsoParseError,
    Language,
    LanguageCode,
)
from isosphere.introspection import (
    get_country,
    get_currency,
    get_language,
    is_valid_country_code,
    is_valid_currency_code,
)
from tests.strategies.iso import (
    all_alpha2_codes,
    all_alpha3_codes,
    all_numeric_codes,
    case_variants,
    countries,
    country_codes,
    currencies,
    currency_by_decimals,
    currency_codes,
    junk_text,
    language_codes,
    languages,
)

# ============================================================================
# PARSE PROPERTIES
# ============================================================================


class TestParseProperties:
    """Case-insensitive parse with canonical output."""

    @given(data=st.data(), country=countries)
    def test_country_code_case_insensitive(self, data: st.DataObject, country: Country) -> None:
        """parse(c) == parse(upper(c)) == parse(lower(c)) for every case mix."""
        text = data.draw(case_variants(str(country.code)))
        parsed = CountryCode.parse(text)
        assert parsed is country.code
        assert str(parsed) == str(country.code).upper()

    @given(data=st.data(), country=countries)
    def test_alpha3_case_insensitive(self, data: st.DataObject, country: Country) -> None:
        text = data.draw(case_variants(str(country.alpha3)))
        assert CountryAlpha3.parse(text).country is country

    @given(data=st.data(), currency=currencies)
    def test_currency_code_case_insensitive(self, data: st.DataObject, currency: Currency) -> None:
        text = data.draw(case_variants(str(currency.code)))
        parsed = CurrencyCode.parse(text)
        assert parsed is currency.code
        assert str(parsed).isupper()

    @given(data=st.data(), language=languages)
    def test_language_code_case_insensitive(self, data: st.DataObject, language: Language) -> None:
        text = data.draw(case_variants(str(language.code)))
        parsed = LanguageCode.parse(text)
        assert parsed is language.code
        assert str(parsed).islower()

    @given(text=all_alpha2_codes)
    def test_alpha2_parse_agrees_with_guard(self, text: str) -> None:
        """Parse succeeds exactly when the membership guard accepts."""
        try:
            CountryCode.parse(text)
        except InvalidCodeError:
            event("alpha2=unassigned")
            assert text not in CountryCode.__members__
        else:
            event("alpha2=assigned")
            assert is_valid_country_code(text)

    @given(text=all_alpha3_codes)
    def test_alpha3_currency_parse_agrees_with_guard(self, text: str) -> None:
        valid = is_valid_currency_code(text)
        event(f"currency_valid={valid}")
        assert (get_currency(text) is not None) == valid

    @given(text=junk_text)
    def test_junk_never_raises_unexpected_error(self, text: str) -> None:
        """Arbitrary text either parses or raises a parse error."""
        parsers = (CountryCode.parse, CountryAlpha3.parse, CurrencyCode.parse, LanguageCode.parse)
        for parse in parsers:
            try:
                parse(text)
            except IsoParseError:
                event("junk=rejected")


# ============================================================================
# ROUND TRIPS
# ============================================================================


class TestRoundTripProperties:
    """Code/entity and numeric round trips."""

    @given(country=countries)
    def test_country_code_entity_round_trip(self, country: Country) -> None:
        assert country.code.country is country
        assert country.alpha3.country is country

    @given(country=countries)
    def test_country_numeric_round_trip(self, country: Country) -> None:
        assert CountryCode.from_numeric(country.numeric) is country.code
        assert Country.from_code(f"{country.numeric:03d}") is country

    @given(currency=currencies)
    def test_currency_numeric_round_trip(self, currency: Currency) -> None:
        assert CurrencyCode.from_numeric(currency.numeric) is currency.code

    @given(country=countries)
    def test_country_name_round_trip(self, country: Country) -> None:
        assert Country.from_name(country.display_name) is country

    @given(numeric=all_numeric_codes)
    def test_numeric_lookup_total(self, numeric: int) -> None:
        """Every three-digit number is assigned or raises InvalidNumericCodeError."""
        try:
            code = CountryCode.from_numeric(numeric)
        except InvalidNumericCodeError:
            event("country_numeric=unassigned")
            assert get_country(numeric) is None
        else:
            event("country_numeric=assigned")
            assert code.numeric == numeric

    @given(pair=currency_by_decimals())
    def test_decimal_digits(self, pair: tuple[str, int]) -> None:
        code, digits = pair
        assert CurrencyCode.parse(code).currency.decimal_digits == digits


# ============================================================================
# FUNCTIONAL LOOKUPS
# ============================================================================


class TestFunctionalLookupProperties:
    """get_* agrees with the enum API for representative codes in any case."""

    @given(data=st.data(), code=country_codes)
    def test_get_country(self, data: st.DataObject, code: str) -> None:
        info = get_country(data.draw(case_variants(code)))
        assert info is not None
        assert info.code == code
        assert get_country(str(info.alpha3)) is info
        assert get_country(info.numeric) is info

    @given(data=st.data(), code=currency_codes)
    def test_get_currency(self, data: st.DataObject, code: str) -> None:
        info = get_currency(data.draw(case_variants(code)))
        assert info is not None
        assert info.code == code
        assert info == Currency.from_code(info.numeric).info
        event(f"currency_has_countries={bool(info.countries)}")

    @given(data=st.data(), code=language_codes)
    def test_get_language(self, data: st.DataObject, code: str) -> None:
        info = get_language(data.draw(case_variants(code)))
        assert info is not None
        assert info.code == code
        assert str(info.code).islower()


# ============================================================================
# CROSS-REFERENCE SYMMETRY
# ============================================================================


class TestSymmetryProperties:
    """c in currency.countries iff currency in c.currencies (same for languages)."""

    @given(country=countries, currency=currencies)
    def test_currency_symmetry(self, country: Country, currency: Currency) -> None:
        uses = currency.code in country.currencies
        event(f"uses_currency={uses}")
        assert uses == (country.code in currency.countries)

    @given(country=countries, language=languages)
    def test_language_symmetry(self, country: Country, language: Language) -> None:
        speaks = language.code in country.languages
        event(f"speaks_language={speaks}")
        assert speaks == (country.code in language.countries)

    @given(country=countries)
    def test_related_sets_resolve(self, country: Country) -> None:
        """Every related code is a member with its own info record."""
        assume(country.currencies or country.languages)
        for code in country.currencies:
            assert code.currency.info.code is code
        for language_code in country.languages:
            assert language_code.language.info.code is language_code


@pytest.mark.fuzz
class TestExhaustiveProperties:
    """Intensive runs over the whole closed sets."""

    @settings(max_examples=2000)
    @given(text=st.text(alphabet=st.characters(codec="utf-8"), min_size=2, max_size=3))
    def test_parse_accepts_only_ascii(self, text: str) -> None:
        try:
            parsed = Country.from_code(text)
        except IsoParseError:
            return
        assert text.isascii()
        assert text.upper() in (str(parsed.code), str(parsed.alpha3)) or text.isdigit()
