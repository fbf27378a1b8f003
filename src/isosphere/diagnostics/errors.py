"""Lookup exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
These are the recoverable errors: they describe caller-supplied input
that matched nothing in the reference tables. Failures of the tables
themselves live in isosphere.integrity.

Python 3.13+. Zero external dependencies.
"""

from isosphere.enums import Domain

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "InvalidCodeError",
    "InvalidNameError",
    "InvalidNumericCodeError",
    "IsoError",
    "IsoParseError",
]


class IsoError(Exception):
    """Base exception for all isosphere lookup errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IsoError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class IsoParseError(IsoError, ValueError):
    """Caller-supplied value did not resolve to a reference-data entry.

    Subclasses ValueError so that code catching the conventional parse
    failure type keeps working.

    Attributes:
        domain: Domain the lookup targeted
        input_value: The rejected value, exactly as supplied

    Example:
        >>> try:
        ...     CountryCode.parse("XX")
        ... except IsoParseError as error:
        ...     print(error.domain, error.input_value)
        country XX
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        domain: Domain,
        input_value: object,
    ) -> None:
        """Initialize IsoParseError.

        Args:
            message: Error message string OR Diagnostic object
            domain: Domain the lookup targeted
            input_value: The rejected value
        """
        super().__init__(message)
        self.domain = domain
        self.input_value = input_value


class InvalidCodeError(IsoParseError):
    """Input matched no alphabetic code of the domain."""

    def __init__(self, domain: Domain, input_value: object) -> None:
        super().__init__(
            ErrorTemplate.invalid_code(domain, input_value),
            domain=domain,
            input_value=input_value,
        )


class InvalidNumericCodeError(IsoParseError):
    """Input matched no numeric code of the domain."""

    def __init__(self, domain: Domain, input_value: object) -> None:
        super().__init__(
            ErrorTemplate.invalid_numeric_code(domain, input_value),
            domain=domain,
            input_value=input_value,
        )


class InvalidNameError(IsoParseError):
    """Input matched no entity name of the domain exactly."""

    def __init__(self, domain: Domain, input_value: object) -> None:
        super().__init__(
            ErrorTemplate.invalid_name(domain, input_value),
            domain=domain,
            input_value=input_value,
        )
