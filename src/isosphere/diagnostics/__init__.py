"""Diagnostic system for reference-data lookups.

Provides structured error diagnostics with codes, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidCodeError,
    InvalidNameError,
    InvalidNumericCodeError,
    IsoError,
    IsoParseError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidCodeError",
    "InvalidNameError",
    "InvalidNumericCodeError",
    "IsoError",
    "IsoParseError",
]
