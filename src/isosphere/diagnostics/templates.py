"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from isosphere.enums import Domain

from .codes import Diagnostic, DiagnosticCode, escape_input

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    _STANDARD_URLS: dict[Domain, str] = {
        Domain.COUNTRY: "https://www.iso.org/iso-3166-country-codes.html",
        Domain.CURRENCY: "https://www.iso.org/iso-4217-currency-codes.html",
        Domain.LANGUAGE: "https://www.iso.org/iso-639-language-code",
    }

    _CODE_HINTS: dict[Domain, str] = {
        Domain.COUNTRY: "Use an ISO 3166-1 alpha-2 or alpha-3 code such as 'US' or 'USA'",
        Domain.CURRENCY: "Use an ISO 4217 alphabetic code such as 'USD'",
        Domain.LANGUAGE: "Use an ISO 639-1 code such as 'en'",
    }

    @staticmethod
    def invalid_code(domain: Domain, value: object) -> Diagnostic:
        """Alphabetic code not in the closed set for a domain.

        Args:
            domain: Domain the code was parsed for
            value: The rejected input

        Returns:
            Diagnostic for INVALID_CODE
        """
        msg = f"Invalid {domain} code: {escape_input(value)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE,
            message=msg,
            domain=domain,
            hint=ErrorTemplate._CODE_HINTS[domain],
            help_url=ErrorTemplate._STANDARD_URLS[domain],
        )

    @staticmethod
    def invalid_numeric_code(domain: Domain, value: object) -> Diagnostic:
        """Numeric code not assigned in a domain.

        Args:
            domain: Domain the numeric code was parsed for
            value: The rejected input (normally an int)

        Returns:
            Diagnostic for INVALID_NUMERIC_CODE
        """
        msg = f"Invalid {domain} numeric code: {escape_input(value)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMERIC_CODE,
            message=msg,
            domain=domain,
            hint="Numeric codes are integers between 1 and 999",
            help_url=ErrorTemplate._STANDARD_URLS[domain],
        )

    @staticmethod
    def invalid_name(domain: Domain, value: object) -> Diagnostic:
        """Name matching no entity exactly.

        Args:
            domain: Domain the name was looked up in
            value: The rejected input

        Returns:
            Diagnostic for INVALID_NAME
        """
        msg = f"Invalid {domain} name: {escape_input(value)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NAME,
            message=msg,
            domain=domain,
            hint="Names are matched exactly, including case",
        )
