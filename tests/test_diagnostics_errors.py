"""Tests for lookup exceptions and structured diagnostics."""

import pytest

from isosphere import CountryCode, Currency, Domain, Language
from isosphere.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    InvalidCodeError,
    InvalidNameError,
    InvalidNumericCodeError,
    IsoError,
    IsoParseError,
)
from isosphere.diagnostics.codes import escape_input


class TestDiagnosticCode:
    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_lookup_codes(self) -> None:
        assert DiagnosticCode.INVALID_CODE.value == 1001
        assert DiagnosticCode.INVALID_NUMERIC_CODE.value == 1002
        assert DiagnosticCode.INVALID_NAME.value == 1003


class TestDiagnostic:
    """Tests for Diagnostic formatting."""

    def test_format_error_full(self) -> None:
        diagnostic = ErrorTemplate.invalid_code(Domain.COUNTRY, "FOO")
        assert diagnostic.format_error() == (
            "error[INVALID_CODE]: Invalid country code: 'FOO'\n"
            "  = help: Use an ISO 3166-1 alpha-2 or alpha-3 code such as 'US' or 'USA'\n"
            "  = note: see https://www.iso.org/iso-3166-country-codes.html"
        )

    def test_format_error_minimal(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.INVALID_NAME, message="nope", domain=Domain.LANGUAGE
        )
        assert diagnostic.format_error() == "error[INVALID_NAME]: nope"

    def test_str_is_message(self) -> None:
        diagnostic = ErrorTemplate.invalid_numeric_code(Domain.CURRENCY, 1840)
        assert str(diagnostic) == "Invalid currency numeric code: 1840"

    def test_immutable(self) -> None:
        diagnostic = ErrorTemplate.invalid_name(Domain.CURRENCY, "x")
        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]


class TestEscapeInput:
    def test_plain_string_is_quoted(self) -> None:
        assert escape_input("US") == "'US'"

    def test_control_characters_are_escaped(self) -> None:
        """Rejected input cannot inject line breaks into messages."""
        assert escape_input("U\nS") == "'U\\x0aS'"
        assert escape_input("\x1b[31m") == "'\\x1b[31m'"

    def test_non_string_uses_repr(self) -> None:
        assert escape_input(840) == "840"
        assert escape_input(None) == "None"


class TestParseErrors:
    """Tests for the IsoParseError hierarchy as raised by lookups."""

    def test_hierarchy(self) -> None:
        for cls in (InvalidCodeError, InvalidNumericCodeError, InvalidNameError):
            assert issubclass(cls, IsoParseError)
            assert issubclass(cls, IsoError)
            assert issubclass(cls, ValueError)

    def test_invalid_code_carries_diagnostic(self) -> None:
        with pytest.raises(InvalidCodeError) as exc_info:
            CountryCode.parse("FOO")
        error = exc_info.value
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.INVALID_CODE
        assert error.diagnostic.domain is Domain.COUNTRY
        assert str(error).startswith("error[INVALID_CODE]: Invalid country code: 'FOO'")

    def test_invalid_numeric_code_message(self) -> None:
        with pytest.raises(InvalidNumericCodeError) as exc_info:
            Currency.from_code(1840)
        assert "Invalid currency numeric code: 1840" in str(exc_info.value)
        assert exc_info.value.input_value == 1840

    def test_invalid_name_message(self) -> None:
        with pytest.raises(InvalidNameError) as exc_info:
            Language.from_name("english")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.hint == "Names are matched exactly, including case"

    def test_control_characters_escaped_in_error(self) -> None:
        with pytest.raises(InvalidCodeError) as exc_info:
            CountryCode.parse("U\nS")
        first_line = str(exc_info.value).splitlines()[0]
        assert first_line == "error[INVALID_CODE]: Invalid country code: 'U\\x0aS'"

    def test_plain_message(self) -> None:
        error = IsoError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_parse_error_with_plain_message(self) -> None:
        error = IsoParseError("plain", domain=Domain.LANGUAGE, input_value="zz")
        assert error.domain is Domain.LANGUAGE
        assert error.input_value == "zz"
