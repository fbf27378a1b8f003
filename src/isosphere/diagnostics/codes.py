"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for lookup failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

from isosphere.enums import Domain

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]

# C0 controls, DEL and C1 controls are escaped before an input value is
# echoed back in a diagnostic, so rejected input cannot forge log lines.
_CONTROL_ESCAPES = {
    code_point: f"\\x{code_point:02x}"
    for code_point in (*range(0x20), *range(0x7F, 0xA0))
}


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (caller-supplied codes and names)
    """

    INVALID_CODE = 1001
    INVALID_NUMERIC_CODE = 1002
    INVALID_NAME = 1003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        domain: Reference-data domain the lookup targeted
        hint: Suggestion for fixing the error
        help_url: Documentation URL for the relevant standard
    """

    code: DiagnosticCode
    message: str
    domain: Domain
    hint: str | None = None
    help_url: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[INVALID_CODE]: Invalid country code: 'FOO'
              = help: Use an ISO 3166-1 alpha-2 code such as 'US'
              = note: see https://www.iso.org/iso-3166-country-codes.html

        Returns:
            Formatted error message
        """
        parts = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        if self.help_url:
            parts.append(f"  = note: see {self.help_url}")
        return "\n".join(parts)


def escape_input(value: object) -> str:
    """Render a rejected input value for inclusion in a diagnostic message.

    Strings are quoted with control characters escaped; anything else is
    shown via repr().
    """
    if isinstance(value, str):
        return "'" + value.translate(_CONTROL_ESCAPES) + "'"
    return repr(value)
