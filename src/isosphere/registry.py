"""Process-wide reference lookup tables.

The three domain tables are built once, lazily, on first access, from the
literal datasets in isosphere.data. Building is also where the dataset is
validated; every defect is fatal and raised as a DataIntegrityError:

    1. Resolve: every code a record mentions must be a member of its code
       enumeration (TableGapError otherwise).
    2. Uniqueness: no two records may claim the same code, alpha-3 code,
       or numeric code (DuplicateEntryError).
    3. Totality: every entity member must have exactly one record
       (TableGapError listing the missing codes).
    4. Derivation: the country table is the only place membership is
       authored. Currency and language country sets are produced by
       inverting it in one aggregation pass.
    5. Verification: membership symmetry is re-checked in both directions
       (CrossReferenceError).

The published ReferenceTables holds read-only mappings only. Nothing mutates
it after publication, so lookups need no locking.

Thread Safety:
    get_tables() uses double-checked locking; concurrent first access from
    many threads builds the tables exactly once.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from isosphere.constants import (
    COUNTRY_COUNT,
    CURRENCY_COUNT,
    LANGUAGE_COUNT,
    MAX_DECIMAL_DIGITS,
)
from isosphere.core.code_validation import is_numeric_code
from isosphere.enums import Domain
from isosphere.integrity import (
    CrossReferenceError,
    DataIntegrityError,
    DuplicateEntryError,
    IntegrityContext,
    TableGapError,
)

if TYPE_CHECKING:
    from isosphere.country import Country, CountryAlpha3, CountryInfo
    from isosphere.currency import Currency, CurrencyInfo
    from isosphere.data import CountryRecord, CurrencyRecord, LanguageRecord
    from isosphere.language import Language, LanguageInfo

__all__ = [
    "ReferenceTables",
    "build_tables",
    "get_tables",
    "verify_cross_references",
]

logger = logging.getLogger(__name__)


class _NamedInfo(Protocol):
    """Info record shape shared by all three domains."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...


@dataclass(frozen=True, slots=True)
class ReferenceTables:
    """Immutable lookup tables for all three domains.

    Attributes:
        countries: Country entity to its info record, in dataset order
        currencies: Currency entity to its info record, in dataset order
        languages: Language entity to its info record, in dataset order
        country_by_alpha3: Alpha-3 code to country
        country_by_numeric: ISO 3166-1 numeric code to country
        currency_by_numeric: ISO 4217 numeric code to currency
        country_by_name: Exact English name to country
        currency_by_name: Exact English name to currency
        language_by_name: Exact English name to language
    """

    countries: Mapping[Country, CountryInfo]
    currencies: Mapping[Currency, CurrencyInfo]
    languages: Mapping[Language, LanguageInfo]
    country_by_alpha3: Mapping[CountryAlpha3, Country]
    country_by_numeric: Mapping[int, Country]
    currency_by_numeric: Mapping[int, Currency]
    country_by_name: Mapping[str, Country]
    currency_by_name: Mapping[str, Currency]
    language_by_name: Mapping[str, Language]


# ============================================================================
# BUILD HELPERS
# ============================================================================


def _value_index[E: Enum](enum_cls: type[E]) -> dict[str, E]:
    """Map canonical text to member for a code enumeration (exact case)."""
    return {str(member.value): member for member in enum_cls}


def _resolve[E: Enum](index: Mapping[str, E], raw: str, domain: Domain, referrer: str) -> E:
    """Resolve authored code text to its enumeration member."""
    member = index.get(raw)
    if member is None:
        msg = f"{referrer} refers to unknown {domain} code {raw!r}"
        raise TableGapError(
            msg,
            IntegrityContext(component=str(domain), operation="resolve", key=raw),
            missing=(raw,),
        )
    return member


def _entity[E: Enum](entities: type[E], code: Enum, domain: Domain) -> E:
    """Return the entity member paired with a code member."""
    try:
        return entities(code)
    except ValueError:
        msg = f"{domain} code {code.value} has no {entities.__name__} member"
        raise TableGapError(
            msg,
            IntegrityContext(component=str(domain), operation="resolve", key=str(code.value)),
            missing=(str(code.value),),
        ) from None


def _claim[K, V](table: dict[K, V], key: K, value: V, domain: Domain, what: str) -> None:
    """Insert key into table, rejecting a second claim on the same key."""
    existing = table.get(key)
    if existing is not None:
        msg = f"Duplicate {domain} {what} {key!r}: claimed by {existing!r} and {value!r}"
        raise DuplicateEntryError(
            msg,
            IntegrityContext(
                component=str(domain),
                operation="index",
                key=str(key),
                expected=repr(existing),
                actual=repr(value),
            ),
        )
    table[key] = value


def _check_numeric(domain: Domain, code: str, numeric: int) -> None:
    if not is_numeric_code(numeric):
        msg = f"{domain} {code} has invalid numeric code {numeric!r}"
        raise DataIntegrityError(
            msg,
            IntegrityContext(
                component=str(domain), operation="resolve", key=code, actual=repr(numeric)
            ),
        )


def _check_totality[E: Enum](domain: Domain, entities: type[E], table: Mapping[E, object]) -> None:
    """Fail if any entity member has no record."""
    missing = tuple(str(member.value) for member in entities if member not in table)
    if missing:
        msg = f"{domain} table has no record for: {', '.join(missing)}"
        raise TableGapError(
            msg,
            IntegrityContext(component=str(domain), operation="totality"),
            missing=missing,
        )


def _name_index[E: Enum](domain: Domain, table: Mapping[E, _NamedInfo]) -> dict[str, E]:
    """Index entities by exact name; on a shared name the lowest code wins."""
    index: dict[str, E] = {}
    for entity, info in sorted(table.items(), key=lambda item: str(item[1].code)):
        winner = index.setdefault(info.name, entity)
        if winner is not entity:
            logger.warning(
                "Duplicate %s name %r: %s resolves to %s",
                domain,
                info.name,
                info.code,
                table[winner].code,
            )
    return index


# ============================================================================
# TABLE CONSTRUCTION
# ============================================================================


def build_tables(
    country_records: Iterable[CountryRecord],
    currency_records: Iterable[CurrencyRecord],
    language_records: Iterable[LanguageRecord],
) -> ReferenceTables:
    """Build and validate lookup tables from record sequences.

    Pure function: the shipped dataset goes through get_tables(); tests
    pass deliberately broken datasets here.

    Args:
        country_records: Country records, authoritative for membership
        currency_records: Currency records (no membership data)
        language_records: Language records (no membership data)

    Returns:
        Validated, read-only ReferenceTables

    Raises:
        TableGapError: Unknown code in a record, or entity without record
        DuplicateEntryError: Code, alpha-3, numeric code claimed twice
        CrossReferenceError: Membership symmetry violated
        DataIntegrityError: Out-of-range numeric code or decimal digits
    """
    # Domain modules import this module at load time
    from isosphere.country import (  # noqa: PLC0415 - circular
        Country,
        CountryAlpha3,
        CountryCode,
        CountryInfo,
    )
    from isosphere.currency import Currency, CurrencyCode, CurrencyInfo  # noqa: PLC0415
    from isosphere.language import Language, LanguageCode, LanguageInfo  # noqa: PLC0415

    alpha2_index = _value_index(CountryCode)
    alpha3_index = _value_index(CountryAlpha3)
    currency_index = _value_index(CurrencyCode)
    language_index = _value_index(LanguageCode)

    # Countries: the authored side of both relationships
    countries: dict[Country, CountryInfo] = {}
    country_by_alpha3: dict[CountryAlpha3, Country] = {}
    country_by_numeric: dict[int, Country] = {}
    for record in country_records:
        code = _resolve(alpha2_index, record.alpha2, Domain.COUNTRY, "country record")
        alpha3 = _resolve(alpha3_index, record.alpha3, Domain.COUNTRY, f"country {code}")
        _check_numeric(Domain.COUNTRY, record.alpha2, record.numeric)
        country = _entity(Country, code, Domain.COUNTRY)
        info = CountryInfo(
            code=code,
            alpha3=alpha3,
            numeric=record.numeric,
            name=record.name,
            currencies=frozenset(
                _resolve(currency_index, raw, Domain.CURRENCY, f"country {code}")
                for raw in record.currencies
            ),
            languages=frozenset(
                _resolve(language_index, raw, Domain.LANGUAGE, f"country {code}")
                for raw in record.languages
            ),
        )
        _claim(countries, country, info, Domain.COUNTRY, "code")
        _claim(country_by_alpha3, alpha3, country, Domain.COUNTRY, "alpha-3 code")
        _claim(country_by_numeric, record.numeric, country, Domain.COUNTRY, "numeric code")
    _check_totality(Domain.COUNTRY, Country, countries)

    # Invert country membership once; every other direction derives from it
    countries_by_currency: dict[CurrencyCode, set[CountryCode]] = {}
    countries_by_language: dict[LanguageCode, set[CountryCode]] = {}
    for info in countries.values():
        for currency_code in info.currencies:
            countries_by_currency.setdefault(currency_code, set()).add(info.code)
        for language_code in info.languages:
            countries_by_language.setdefault(language_code, set()).add(info.code)

    currencies: dict[Currency, CurrencyInfo] = {}
    currency_by_numeric: dict[int, Currency] = {}
    for currency_record in currency_records:
        currency_code = _resolve(
            currency_index, currency_record.code, Domain.CURRENCY, "currency record"
        )
        _check_numeric(Domain.CURRENCY, currency_record.code, currency_record.numeric)
        if not 0 <= currency_record.decimal_digits <= MAX_DECIMAL_DIGITS:
            msg = (
                f"currency {currency_code} has invalid decimal digits "
                f"{currency_record.decimal_digits!r}"
            )
            raise DataIntegrityError(
                msg,
                IntegrityContext(
                    component=str(Domain.CURRENCY),
                    operation="resolve",
                    key=currency_record.code,
                    actual=repr(currency_record.decimal_digits),
                ),
            )
        currency = _entity(Currency, currency_code, Domain.CURRENCY)
        currency_info = CurrencyInfo(
            code=currency_code,
            numeric=currency_record.numeric,
            name=currency_record.name,
            decimal_digits=currency_record.decimal_digits,
            countries=frozenset(countries_by_currency.get(currency_code, ())),
        )
        _claim(currencies, currency, currency_info, Domain.CURRENCY, "code")
        _claim(
            currency_by_numeric, currency_record.numeric, currency, Domain.CURRENCY, "numeric code"
        )
    _check_totality(Domain.CURRENCY, Currency, currencies)

    languages: dict[Language, LanguageInfo] = {}
    for language_record in language_records:
        language_code = _resolve(
            language_index, language_record.code, Domain.LANGUAGE, "language record"
        )
        language_info = LanguageInfo(
            code=language_code,
            name=language_record.name,
            countries=frozenset(countries_by_language.get(language_code, ())),
        )
        language = _entity(Language, language_code, Domain.LANGUAGE)
        _claim(languages, language, language_info, Domain.LANGUAGE, "code")
    _check_totality(Domain.LANGUAGE, Language, languages)

    tables = ReferenceTables(
        countries=MappingProxyType(countries),
        currencies=MappingProxyType(currencies),
        languages=MappingProxyType(languages),
        country_by_alpha3=MappingProxyType(country_by_alpha3),
        country_by_numeric=MappingProxyType(country_by_numeric),
        currency_by_numeric=MappingProxyType(currency_by_numeric),
        country_by_name=MappingProxyType(_name_index(Domain.COUNTRY, countries)),
        currency_by_name=MappingProxyType(_name_index(Domain.CURRENCY, currencies)),
        language_by_name=MappingProxyType(_name_index(Domain.LANGUAGE, languages)),
    )
    verify_cross_references(tables)
    return tables


# ============================================================================
# CROSS-REFERENCE VERIFICATION
# ============================================================================


def _symmetry_error(
    component: Domain, key: str, expected: str, message: str
) -> CrossReferenceError:
    return CrossReferenceError(
        message,
        IntegrityContext(
            component=str(component), operation="verify", key=key, expected=expected
        ),
    )


def verify_cross_references(tables: ReferenceTables) -> None:
    """Check country/currency and country/language membership in both directions.

    Args:
        tables: Tables to verify

    Raises:
        CrossReferenceError: On the first asymmetric pair found
    """
    # Info records are looked up by code text so the check also covers
    # tables assembled by hand, not only those from build_tables()
    currency_infos = {str(info.code): info for info in tables.currencies.values()}
    language_infos = {str(info.code): info for info in tables.languages.values()}
    country_infos = {str(info.code): info for info in tables.countries.values()}

    for country in country_infos.values():
        for currency_code in country.currencies:
            currency = currency_infos.get(str(currency_code))
            if currency is None or country.code not in currency.countries:
                msg = f"country {country.code} uses {currency_code}, which does not list it"
                raise _symmetry_error(Domain.CURRENCY, str(currency_code), str(country.code), msg)
        for language_code in country.languages:
            language = language_infos.get(str(language_code))
            if language is None or country.code not in language.countries:
                msg = f"country {country.code} speaks {language_code}, which does not list it"
                raise _symmetry_error(Domain.LANGUAGE, str(language_code), str(country.code), msg)

    for currency in currency_infos.values():
        for country_code in currency.countries:
            owner = country_infos.get(str(country_code))
            if owner is None or currency.code not in owner.currencies:
                msg = f"currency {currency.code} lists {country_code}, which does not use it"
                raise _symmetry_error(Domain.COUNTRY, str(country_code), str(currency.code), msg)

    for language in language_infos.values():
        for country_code in language.countries:
            owner = country_infos.get(str(country_code))
            if owner is None or language.code not in owner.languages:
                msg = f"language {language.code} lists {country_code}, which does not speak it"
                raise _symmetry_error(Domain.COUNTRY, str(country_code), str(language.code), msg)


# ============================================================================
# PROCESS-WIDE TABLES
# ============================================================================

_tables: ReferenceTables | None = None
_tables_lock = threading.Lock()


def _check_size(domain: Domain, actual: int, expected: int) -> None:
    if actual != expected:
        msg = f"{domain} table holds {actual} entries, expected {expected}"
        raise TableGapError(
            msg,
            IntegrityContext(
                component=str(domain),
                operation="totality",
                expected=str(expected),
                actual=str(actual),
            ),
        )


def get_tables() -> ReferenceTables:
    """Return the process-wide tables, building them on first call.

    Returns:
        The shared ReferenceTables

    Raises:
        DataIntegrityError: If the shipped dataset is defective. The error
            is raised again on every call; nothing is published.
    """
    global _tables  # noqa: PLW0603 - compute-once, publish-once
    tables = _tables
    if tables is None:
        with _tables_lock:
            if _tables is None:
                from isosphere.data import (  # noqa: PLC0415 - deferred until first lookup
                    COUNTRY_RECORDS,
                    CURRENCY_RECORDS,
                    LANGUAGE_RECORDS,
                )

                built = build_tables(COUNTRY_RECORDS, CURRENCY_RECORDS, LANGUAGE_RECORDS)
                _check_size(Domain.COUNTRY, len(built.countries), COUNTRY_COUNT)
                _check_size(Domain.CURRENCY, len(built.currencies), CURRENCY_COUNT)
                _check_size(Domain.LANGUAGE, len(built.languages), LANGUAGE_COUNT)
                logger.debug(
                    "Built reference tables: %d countries, %d currencies, %d languages",
                    len(built.countries),
                    len(built.currencies),
                    len(built.languages),
                )
                _tables = built
            tables = _tables
    return tables
