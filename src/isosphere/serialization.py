"""JSON serialization glue for codes, entities, and info records.

Codes serialize as their canonical string. Entities serialize as their
canonical code by default, as their English name with entity_format="name",
or, for countries and currencies, as their numeric code with numeric=True:

    >>> dumps({"home": Country.US, "pay": [Currency.EUR, Currency.JPY]})
    '{"home": "US", "pay": ["EUR", "JPY"]}'
    >>> dumps(Country.US, numeric=True)
    '840'
    >>> decode(Country, "United States of America", entity_format="name")
    <Country.US: <CountryCode.US: 'US'>>

Info records serialize as JSON objects in canonical form. Sets serialize as
sorted arrays so output is deterministic.

json_schema() describes the closed value set of each public type for API
contracts and configuration validation.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal

from isosphere.constants import MAX_DECIMAL_DIGITS
from isosphere.core.code_validation import MAX_NUMERIC_CODE
from isosphere.country import Country, CountryAlpha3, CountryCode, CountryInfo
from isosphere.currency import Currency, CurrencyCode, CurrencyInfo
from isosphere.language import Language, LanguageCode, LanguageInfo

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "EntityFormat",
    # Encoding
    "IsoJSONEncoder",
    "dumps",
    "to_json_value",
    # Decoding
    "decode",
    # Schema
    "json_schema",
]

type EntityFormat = Literal["code", "name"]
"""How entities serialize: canonical code text or English name."""

_CODE_TYPES: tuple[type[Enum], ...] = (CountryCode, CountryAlpha3, CurrencyCode, LanguageCode)
_ENTITY_TYPES: tuple[type[Enum], ...] = (Country, Currency, Language)
_INFO_TYPES: tuple[type, ...] = (CountryInfo, CurrencyInfo, LanguageInfo)

_DESCRIPTIONS: dict[type, str] = {
    CountryCode: "ISO 3166-1 alpha-2 country code",
    CountryAlpha3: "ISO 3166-1 alpha-3 country code",
    CurrencyCode: "ISO 4217 alphabetic currency code",
    LanguageCode: "ISO 639-1 language code",
    Country: "ISO 3166-1 country",
    Currency: "ISO 4217 currency",
    Language: "ISO 639-1 language",
    CountryInfo: "ISO 3166-1 country record",
    CurrencyInfo: "ISO 4217 currency record",
    LanguageInfo: "ISO 639-1 language record",
}


# ============================================================================
# ENCODING
# ============================================================================


def _encode_member(
    member: Enum, entity_format: EntityFormat, *, numeric: bool
) -> str | int:
    if isinstance(member, Country | Currency | Language):
        if entity_format == "name":
            return member.display_name
        member = member.code
    if numeric and isinstance(member, CountryCode | CountryAlpha3 | CurrencyCode):
        return member.numeric
    return str(member)


def _sort_key(value: object) -> tuple[int, str]:
    # ints sort before strings
    return (0, f"{value:04d}") if isinstance(value, int) else (1, str(value))


def _convert(obj: object, entity_format: EntityFormat, numeric: bool, markers: set[int]) -> Any:
    if isinstance(obj, _CODE_TYPES + _ENTITY_TYPES):
        return _encode_member(obj, entity_format, numeric=numeric)
    if isinstance(obj, _INFO_TYPES):
        return {
            field.name: _convert(getattr(obj, field.name), "code", False, markers)
            for field in dataclasses.fields(obj)
        }
    if not isinstance(obj, Mapping | set | frozenset | list | tuple):
        return obj

    # Same message and exception type as json's own check
    marker = id(obj)
    if marker in markers:
        msg = "Circular reference detected"
        raise ValueError(msg)
    markers.add(marker)
    try:
        if isinstance(obj, Mapping):
            return {
                _convert(key, entity_format, numeric, markers): _convert(
                    value, entity_format, numeric, markers
                )
                for key, value in obj.items()
            }
        items = [_convert(item, entity_format, numeric, markers) for item in obj]
        if isinstance(obj, set | frozenset):
            return sorted(items, key=_sort_key)
        return items
    finally:
        markers.discard(marker)


def to_json_value(
    obj: object,
    *,
    entity_format: EntityFormat = "code",
    numeric: bool = False,
) -> Any:
    """Convert obj to plain JSON-compatible values.

    Recurses into mappings, lists, tuples, and sets. Values of other types
    are returned unchanged for json to handle or reject.

    Args:
        obj: Value to convert
        entity_format: Serialize entities by "code" or by "name"
        numeric: Serialize country and currency codes numerically

    Returns:
        A structure of dict, list, str, int, and the untouched leaves

    Raises:
        ValueError: If a container holds itself, directly or indirectly
    """
    return _convert(obj, entity_format, numeric, set())


class IsoJSONEncoder(json.JSONEncoder):
    """JSON encoder aware of ISO codes, entities, and info records.

    Example:
        >>> json.dumps([Language.EN], cls=IsoJSONEncoder, entity_format="name")
        '["English"]'
    """

    def __init__(
        self,
        *args: Any,
        entity_format: EntityFormat = "code",
        numeric: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.entity_format: EntityFormat = entity_format
        self.numeric = numeric

    def encode(self, o: Any) -> str:
        return super().encode(
            to_json_value(o, entity_format=self.entity_format, numeric=self.numeric)
        )

    def iterencode(self, o: Any, _one_shot: bool = False) -> Any:
        # Code enums subclass str, so json never hands them to default()
        converted = to_json_value(o, entity_format=self.entity_format, numeric=self.numeric)
        return super().iterencode(converted, _one_shot)

    def default(self, o: Any) -> Any:
        converted = to_json_value(o, entity_format=self.entity_format, numeric=self.numeric)
        if converted is o:
            return super().default(o)
        return converted


def dumps(
    obj: object,
    *,
    entity_format: EntityFormat = "code",
    numeric: bool = False,
    **kwargs: Any,
) -> str:
    """Serialize obj to a JSON string.

    Args:
        obj: Value to serialize
        entity_format: Serialize entities by "code" or by "name"
        numeric: Serialize country and currency codes numerically
        **kwargs: Passed through to json.dumps

    Returns:
        JSON text

    Raises:
        TypeError: If obj contains a value json cannot serialize
        ValueError: If obj holds a circular reference
    """
    return json.dumps(
        obj, cls=IsoJSONEncoder, entity_format=entity_format, numeric=numeric, **kwargs
    )


# ============================================================================
# DECODING
# ============================================================================


def decode[T: Enum](cls: type[T], value: object, *, entity_format: EntityFormat = "code") -> T:
    """Parse a JSON value back into a code or entity.

    Strings are parsed case-insensitively as codes; ints as numeric codes
    where the type has them. With entity_format="name", entity types are
    matched by exact English name instead.

    Args:
        cls: Target code or entity type
        value: Decoded JSON value (str or int)
        entity_format: How entities were serialized

    Returns:
        Member of cls

    Raises:
        InvalidCodeError: Unknown alphabetic code
        InvalidNumericCodeError: Unassigned numeric code
        InvalidNameError: Unknown name (entity_format="name")
        TypeError: If cls is not an ISO code or entity type
    """
    result: Enum
    if cls in (CountryCode, CountryAlpha3, CurrencyCode):
        code_cls: Any = cls
        if isinstance(value, int):
            result = code_cls.from_numeric(value)
        else:
            result = code_cls.parse(value)
    elif cls is LanguageCode:
        result = LanguageCode.parse(value)  # type: ignore[arg-type]
    elif cls in _ENTITY_TYPES:
        entity_cls: Any = cls
        if entity_format == "name":
            result = entity_cls.from_name(value)
        else:
            result = entity_cls.from_code(value)
    else:
        msg = f"{cls.__name__} is not an ISO code or entity type"
        raise TypeError(msg)
    return result  # type: ignore[return-value]


# ============================================================================
# JSON SCHEMA
# ============================================================================


def _enum_schema(
    cls: type, values: list[str] | list[int], *, numeric: bool
) -> dict[str, Any]:
    return {
        "title": cls.__name__,
        "description": _DESCRIPTIONS[cls],
        "type": "integer" if numeric else "string",
        "enum": values,
    }


def _array_schema(item_cls: type) -> dict[str, Any]:
    return {"type": "array", "items": json_schema(item_cls), "uniqueItems": True}


def _info_schema(cls: type) -> dict[str, Any]:
    numeric_schema = {"type": "integer", "minimum": 1, "maximum": MAX_NUMERIC_CODE}
    properties: dict[str, Any]
    if cls is CountryInfo:
        properties = {
            "code": json_schema(CountryCode),
            "alpha3": json_schema(CountryAlpha3),
            "numeric": numeric_schema,
            "name": {"type": "string"},
            "currencies": _array_schema(CurrencyCode),
            "languages": _array_schema(LanguageCode),
        }
    elif cls is CurrencyInfo:
        properties = {
            "code": json_schema(CurrencyCode),
            "numeric": numeric_schema,
            "name": {"type": "string"},
            "decimal_digits": {"type": "integer", "minimum": 0, "maximum": MAX_DECIMAL_DIGITS},
            "countries": _array_schema(CountryCode),
        }
    else:
        properties = {
            "code": json_schema(LanguageCode),
            "name": {"type": "string"},
            "countries": _array_schema(CountryCode),
        }
    return {
        "title": cls.__name__,
        "description": _DESCRIPTIONS[cls],
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


def json_schema(
    cls: type,
    *,
    entity_format: EntityFormat = "code",
    numeric: bool = False,
) -> dict[str, Any]:
    """JSON Schema for the serialized form of an ISO type.

    Args:
        cls: Code enum, entity enum, or info record class
        entity_format: Schema for entities serialized by "code" or "name"
        numeric: Schema for the numeric form (countries and currencies only)

    Returns:
        JSON Schema as a dict; enumerations list the closed value set

    Raises:
        TypeError: If cls is not an ISO type, or numeric=True for a type
            without numeric codes
    """
    if cls in _INFO_TYPES:
        return _info_schema(cls)
    if cls not in _CODE_TYPES + _ENTITY_TYPES:
        msg = f"{cls.__name__} is not an ISO code, entity, or info type"
        raise TypeError(msg)
    if numeric and cls in (LanguageCode, Language):
        msg = f"{cls.__name__} has no numeric form"
        raise TypeError(msg)
    members: list[Any] = list(cls)  # type: ignore[call-overload]
    if numeric:
        return _enum_schema(cls, sorted(member.numeric for member in members), numeric=True)
    if entity_format == "name" and cls in _ENTITY_TYPES:
        return _enum_schema(cls, sorted(member.display_name for member in members), numeric=False)
    values = [str(_encode_member(member, "code", numeric=False)) for member in members]
    return _enum_schema(cls, values, numeric=False)
