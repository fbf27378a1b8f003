"""Tests for the process-wide reference tables.

Tests cover:
- Validation of deliberately broken datasets (fatal integrity errors)
- Cross-reference verification in both directions
- Name collision tie-break
- Lazy, exactly-once initialization under concurrent first access
- Immutability of published tables and integrity errors
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from types import MappingProxyType

import pytest

from isosphere import Country, CountryCode, Currency, CurrencyCode, Language, registry
from isosphere.data import (
    COUNTRY_RECORDS,
    CURRENCY_RECORDS,
    LANGUAGE_RECORDS,
    CountryRecord,
)
from isosphere.integrity import (
    CrossReferenceError,
    DataIntegrityError,
    DuplicateEntryError,
    ImmutabilityViolationError,
    IntegrityContext,
    TableGapError,
)
from isosphere.registry import ReferenceTables, build_tables, get_tables, verify_cross_references


def _replace_country(alpha2: str, **changes: object) -> list[CountryRecord]:
    return [
        record._replace(**changes) if record.alpha2 == alpha2 else record
        for record in COUNTRY_RECORDS
    ]


class TestBuildTables:
    """Tests for build_tables with the shipped dataset."""

    def test_builds_from_shipped_records(self) -> None:
        tables = build_tables(COUNTRY_RECORDS, CURRENCY_RECORDS, LANGUAGE_RECORDS)
        assert len(tables.countries) == len(Country)
        assert len(tables.currencies) == len(Currency)
        assert len(tables.languages) == len(Language)

    def test_every_entity_has_info(self) -> None:
        """Every enum member resolves to an info record."""
        tables = get_tables()
        for country in Country:
            assert tables.countries[country].code is country.value
        for currency in Currency:
            assert tables.currencies[currency].code is currency.value
        for language in Language:
            assert tables.languages[language].code is language.value

    def test_shipped_tables_pass_verification(self) -> None:
        verify_cross_references(get_tables())


class TestBrokenDatasets:
    """Defective datasets fail the build with DataIntegrityError."""

    def test_country_without_record(self) -> None:
        """An entity with no record is a table gap listing the code."""
        records = [record for record in COUNTRY_RECORDS if record.alpha2 != "AQ"]
        with pytest.raises(TableGapError) as exc_info:
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)
        assert exc_info.value.missing == ("AQ",)
        assert exc_info.value.context is not None
        assert exc_info.value.context.operation == "totality"

    def test_currency_without_record(self) -> None:
        records = [record for record in CURRENCY_RECORDS if record.code != "XTS"]
        with pytest.raises(TableGapError) as exc_info:
            build_tables(COUNTRY_RECORDS, records, LANGUAGE_RECORDS)
        assert exc_info.value.missing == ("XTS",)

    def test_language_without_record(self) -> None:
        records = [record for record in LANGUAGE_RECORDS if record.code != "ae"]
        with pytest.raises(TableGapError) as exc_info:
            build_tables(COUNTRY_RECORDS, CURRENCY_RECORDS, records)
        assert exc_info.value.missing == ("ae",)

    def test_unknown_related_currency(self) -> None:
        """A country naming a currency that does not exist is a table gap."""
        records = _replace_country("US", currencies=("USD", "QQQ"))
        with pytest.raises(TableGapError) as exc_info:
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)
        assert exc_info.value.missing == ("QQQ",)

    def test_unknown_related_language(self) -> None:
        records = _replace_country("US", languages=("en", "qq"))
        with pytest.raises(TableGapError):
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)

    def test_related_code_in_wrong_case(self) -> None:
        """Authored codes must be canonical; case folding is for callers only."""
        records = _replace_country("US", languages=("EN",))
        with pytest.raises(TableGapError):
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)

    def test_unknown_alpha3(self) -> None:
        records = _replace_country("US", alpha3="QQQ")
        with pytest.raises(TableGapError):
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)

    def test_duplicate_country_record(self) -> None:
        records = [*COUNTRY_RECORDS, COUNTRY_RECORDS[0]]
        with pytest.raises(DuplicateEntryError):
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)

    def test_duplicate_numeric_code(self) -> None:
        """Two countries sharing a numeric code cannot be indexed."""
        records = _replace_country("CA", numeric=840)
        with pytest.raises(DuplicateEntryError) as exc_info:
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)
        assert exc_info.value.context is not None
        assert exc_info.value.context.key == "840"

    def test_duplicate_alpha3(self) -> None:
        records = _replace_country("CA", alpha3="USA")
        with pytest.raises(DuplicateEntryError):
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)

    def test_duplicate_currency_numeric(self) -> None:
        records = [
            record._replace(numeric=840) if record.code == "EUR" else record
            for record in CURRENCY_RECORDS
        ]
        with pytest.raises(DuplicateEntryError):
            build_tables(COUNTRY_RECORDS, records, LANGUAGE_RECORDS)

    @pytest.mark.parametrize("numeric", [0, 1000, -1])
    def test_out_of_range_numeric(self, numeric: int) -> None:
        records = _replace_country("US", numeric=numeric)
        with pytest.raises(DataIntegrityError):
            build_tables(records, CURRENCY_RECORDS, LANGUAGE_RECORDS)

    @pytest.mark.parametrize("digits", [-1, 5])
    def test_invalid_decimal_digits(self, digits: int) -> None:
        records = [
            record._replace(decimal_digits=digits) if record.code == "USD" else record
            for record in CURRENCY_RECORDS
        ]
        with pytest.raises(DataIntegrityError):
            build_tables(COUNTRY_RECORDS, records, LANGUAGE_RECORDS)

    def test_integrity_errors_are_not_parse_errors(self) -> None:
        """Fatal table errors are not ValueError and are not caught as such."""
        assert not issubclass(TableGapError, ValueError)
        assert not issubclass(DataIntegrityError, ValueError)


class TestCrossReferenceVerification:
    """Tests for verify_cross_references on hand-assembled tables."""

    def test_currency_missing_country(self) -> None:
        """A country using a currency that does not list it is rejected."""
        tables = get_tables()
        currencies = dict(tables.currencies)
        currencies[Currency.GBP] = dataclasses.replace(
            currencies[Currency.GBP],
            countries=currencies[Currency.GBP].countries - {CountryCode.JE},
        )
        broken = dataclasses.replace(tables, currencies=MappingProxyType(currencies))
        with pytest.raises(CrossReferenceError) as exc_info:
            verify_cross_references(broken)
        assert exc_info.value.context is not None
        assert exc_info.value.context.expected == "JE"

    def test_currency_lists_foreign_country(self) -> None:
        """A currency listing a country that does not use it is rejected."""
        tables = get_tables()
        currencies = dict(tables.currencies)
        currencies[Currency.JPY] = dataclasses.replace(
            currencies[Currency.JPY],
            countries=currencies[Currency.JPY].countries | {CountryCode.FR},
        )
        broken = dataclasses.replace(tables, currencies=MappingProxyType(currencies))
        with pytest.raises(CrossReferenceError):
            verify_cross_references(broken)

    def test_language_missing_country(self) -> None:
        tables = get_tables()
        languages = dict(tables.languages)
        languages[Language.NO] = dataclasses.replace(
            languages[Language.NO], countries=frozenset({CountryCode.NO})
        )
        broken = dataclasses.replace(tables, languages=MappingProxyType(languages))
        with pytest.raises(CrossReferenceError):
            verify_cross_references(broken)

    def test_country_drops_language(self) -> None:
        """A language listing a country that does not speak it is rejected."""
        tables = get_tables()
        countries = dict(tables.countries)
        countries[Country.SJ] = dataclasses.replace(countries[Country.SJ], languages=frozenset())
        broken = dataclasses.replace(tables, countries=MappingProxyType(countries))
        with pytest.raises(CrossReferenceError):
            verify_cross_references(broken)


class TestNameIndex:
    """Tests for exact-name indexes."""

    def test_shared_name_resolves_to_lowest_code(self, caplog: pytest.LogCaptureFixture) -> None:
        """On a name collision the lowest canonical code wins, with a warning."""
        records = [
            record._replace(name="Norwegian") if record.code == "nb" else record
            for record in LANGUAGE_RECORDS
        ]
        with caplog.at_level(logging.WARNING, logger="isosphere.registry"):
            tables = build_tables(COUNTRY_RECORDS, CURRENCY_RECORDS, records)
        assert tables.language_by_name["Norwegian"] is Language.NB
        assert any("Norwegian" in record.getMessage() for record in caplog.records)

    def test_shipped_names_are_unique(self) -> None:
        tables = get_tables()
        assert len(tables.country_by_name) == len(Country)
        assert len(tables.currency_by_name) == len(Currency)
        assert len(tables.language_by_name) == len(Language)


class TestGetTables:
    """Tests for lazy, thread-safe initialization."""

    def test_returns_same_instance(self) -> None:
        assert get_tables() is get_tables()

    def test_debug_log_on_build(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setattr(registry, "_tables", None)
        with caplog.at_level(logging.DEBUG, logger="isosphere.registry"):
            get_tables()
        assert any("179 currencies" in record.getMessage() for record in caplog.records)

    def test_concurrent_first_access_builds_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Many threads racing on first access share one build."""
        monkeypatch.setattr(registry, "_tables", None)
        calls: list[int] = []
        original_build = registry.build_tables

        def counting_build(*args: object) -> ReferenceTables:
            calls.append(1)
            return original_build(*args)  # type: ignore[arg-type]

        monkeypatch.setattr(registry, "build_tables", counting_build)

        thread_count = 16
        barrier = threading.Barrier(thread_count)
        results: list[ReferenceTables] = []
        results_lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            tables = get_tables()
            with results_lock:
                results.append(tables)

        threads = [threading.Thread(target=worker) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len(results) == thread_count
        assert all(tables is results[0] for tables in results)

    def test_size_mismatch_is_fatal_and_not_published(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(registry, "_tables", None)
        monkeypatch.setattr(registry, "CURRENCY_COUNT", 180)
        with pytest.raises(TableGapError):
            get_tables()
        assert registry._tables is None
        with pytest.raises(TableGapError):
            get_tables()


class TestImmutability:
    """Published tables and integrity errors cannot be modified."""

    def test_tables_are_frozen(self) -> None:
        tables = get_tables()
        with pytest.raises(dataclasses.FrozenInstanceError):
            tables.countries = {}  # type: ignore[misc]

    def test_mappings_are_read_only(self) -> None:
        tables = get_tables()
        with pytest.raises(TypeError):
            tables.countries[Country.US] = tables.countries[Country.GB]  # type: ignore[index]
        with pytest.raises(TypeError):
            tables.currency_by_numeric[1] = Currency.USD  # type: ignore[index]

    def test_info_sets_are_frozen(self) -> None:
        assert isinstance(Currency.GBP.countries, frozenset)
        assert isinstance(Country.CH.currencies, frozenset)
        assert CurrencyCode.CHF in Country.CH.currencies

    def test_integrity_error_rejects_mutation(self) -> None:
        error = TableGapError("gap", IntegrityContext(component="country", operation="totality"))
        with pytest.raises(ImmutabilityViolationError):
            error.context = None  # type: ignore[misc]
        with pytest.raises(ImmutabilityViolationError):
            del error.args

    def test_integrity_error_repr(self) -> None:
        error = TableGapError("gap", missing=("AQ",))
        assert repr(error) == "TableGapError('gap', missing=('AQ',))"
        assert error.missing == ("AQ",)
