"""Tests for JSON serialization glue and JSON Schema generation."""

import json

import pytest

from isosphere import (
    Country,
    CountryAlpha3,
    CountryCode,
    CountryInfo,
    Currency,
    CurrencyCode,
    CurrencyInfo,
    InvalidCodeError,
    InvalidNameError,
    InvalidNumericCodeError,
    Language,
    LanguageCode,
    LanguageInfo,
)
from isosphere.serialization import IsoJSONEncoder, decode, dumps, json_schema, to_json_value


class TestEncoding:
    """Tests for dumps, IsoJSONEncoder and to_json_value."""

    def test_codes_serialize_as_canonical_string(self) -> None:
        assert dumps(CountryCode.US) == '"US"'
        assert dumps(LanguageCode.EN) == '"en"'

    def test_entities_serialize_as_code_by_default(self) -> None:
        assert dumps([Country.US, Currency.EUR, Language.DE]) == '["US", "EUR", "de"]'

    def test_entities_by_name(self) -> None:
        assert dumps(Currency.GBP, entity_format="name") == '"Pound sterling"'

    def test_numeric_form(self) -> None:
        assert dumps(Country.US, numeric=True) == "840"
        assert dumps(CountryCode.GB, numeric=True) == "826"
        assert dumps(CurrencyCode.JPY, numeric=True) == "392"

    def test_numeric_form_leaves_languages_alone(self) -> None:
        assert dumps([Language.EN, Country.NO], numeric=True) == '["en", 578]'

    def test_nested_mapping(self) -> None:
        payload = {"home": Country.US, "pay": [Currency.EUR, Currency.JPY]}
        assert dumps(payload) == '{"home": "US", "pay": ["EUR", "JPY"]}'

    def test_entity_keys(self) -> None:
        assert json.loads(dumps({Country.NO: 1})) == {"NO": 1}

    def test_sets_are_sorted(self) -> None:
        """Sets serialize deterministically."""
        assert dumps(Currency.NOK.countries) == '["BV", "NO", "SJ"]'

    def test_info_record(self) -> None:
        data = json.loads(dumps(Country.CH.info))
        assert data == {
            "code": "CH",
            "alpha3": "CHE",
            "numeric": 756,
            "name": "Switzerland",
            "currencies": ["CHE", "CHF", "CHW"],
            "languages": ["de", "fr", "it", "rm"],
        }

    def test_currency_info_record(self) -> None:
        data = to_json_value(Currency.JPY.info)
        assert data == {
            "code": "JPY",
            "numeric": 392,
            "name": "Japanese yen",
            "decimal_digits": 0,
            "countries": ["JP"],
        }

    def test_encoder_with_json_dumps(self) -> None:
        assert json.dumps([Language.EN], cls=IsoJSONEncoder, entity_format="name") == '["English"]'

    def test_kwargs_pass_through(self) -> None:
        assert dumps({"b": Country.US, "a": 1}, sort_keys=True) == '{"a": 1, "b": "US"}'

    def test_unserializable_value(self) -> None:
        with pytest.raises(TypeError):
            dumps({"x": object()})

    def test_self_referencing_list(self) -> None:
        items: list[object] = [Country.US]
        items.append(items)
        with pytest.raises(ValueError, match="Circular reference detected"):
            dumps(items)

    def test_indirect_cycle_through_mapping(self) -> None:
        order: dict[str, object] = {"currency": Currency.EUR}
        order["lines"] = [{"parent": order}]
        with pytest.raises(ValueError, match="Circular reference detected"):
            to_json_value(order)

    def test_shared_container_is_not_a_cycle(self) -> None:
        """The same list reachable twice, without a loop, encodes normally."""
        shared = [Currency.NOK]
        assert dumps({"a": shared, "b": shared}) == '{"a": ["NOK"], "b": ["NOK"]}'


class TestDecoding:
    """Tests for decode."""

    def test_decode_codes(self) -> None:
        assert decode(CountryCode, "us") is CountryCode.US
        assert decode(CountryAlpha3, "usa") is CountryAlpha3.USA
        assert decode(CurrencyCode, "eur") is CurrencyCode.EUR
        assert decode(LanguageCode, "EN") is LanguageCode.EN

    def test_decode_numeric(self) -> None:
        assert decode(CountryCode, 840) is CountryCode.US
        assert decode(CurrencyCode, 392) is CurrencyCode.JPY
        assert decode(Country, 578) is Country.NO

    def test_decode_entities(self) -> None:
        assert decode(Country, "USA") is Country.US
        assert decode(Language, "no") is Language.NO

    def test_decode_by_name(self) -> None:
        assert decode(Country, "United States of America", entity_format="name") is Country.US

    def test_decode_errors(self) -> None:
        with pytest.raises(InvalidCodeError):
            decode(CurrencyCode, "QQQ")
        with pytest.raises(InvalidNumericCodeError):
            decode(CountryCode, 1840)
        with pytest.raises(InvalidNameError):
            decode(Currency, "euro", entity_format="name")

    def test_decode_rejects_foreign_type(self) -> None:
        with pytest.raises(TypeError):
            decode(CountryInfo, "US")  # type: ignore[type-var]

    def test_dumps_then_decode(self) -> None:
        """Decoding serialized members gives back the same members."""
        encoded = json.loads(dumps([Country.JP, Country.AF], numeric=True))
        assert [decode(Country, value) for value in encoded] == [Country.JP, Country.AF]


class TestJsonSchema:
    """Tests for json_schema."""

    def test_code_schema(self) -> None:
        schema = json_schema(CurrencyCode)
        assert schema["type"] == "string"
        assert schema["title"] == "CurrencyCode"
        assert len(schema["enum"]) == 179
        assert "GBP" in schema["enum"]

    def test_language_schema_is_lowercase(self) -> None:
        assert all(value.islower() for value in json_schema(LanguageCode)["enum"])

    def test_entity_schema_by_code(self) -> None:
        schema = json_schema(Country)
        assert schema["enum"] == [str(country.code) for country in Country]

    def test_entity_schema_by_name(self) -> None:
        schema = json_schema(Country, entity_format="name")
        assert "United States of America" in schema["enum"]

    def test_numeric_schema(self) -> None:
        schema = json_schema(CountryCode, numeric=True)
        assert schema["type"] == "integer"
        assert 840 in schema["enum"]
        assert schema["enum"] == sorted(schema["enum"])

    def test_numeric_schema_rejected_for_languages(self) -> None:
        with pytest.raises(TypeError):
            json_schema(Language, numeric=True)

    @pytest.mark.parametrize("cls", [CountryInfo, CurrencyInfo, LanguageInfo])
    def test_info_schema(self, cls: type) -> None:
        schema = json_schema(cls)
        assert schema["type"] == "object"
        assert set(schema["required"]) == set(schema["properties"])

    def test_info_schema_nests_code_schemas(self) -> None:
        schema = json_schema(CurrencyInfo)
        assert schema["properties"]["countries"]["items"]["title"] == "CountryCode"
        assert schema["properties"]["decimal_digits"]["maximum"] == 4

    def test_serialized_values_match_schema_enum(self) -> None:
        """Every serialized entity is in its schema's enum."""
        allowed = set(json_schema(Currency)["enum"])
        for currency in Currency:
            assert json.loads(dumps(currency)) in allowed

    def test_rejects_foreign_type(self) -> None:
        with pytest.raises(TypeError):
            json_schema(dict)
