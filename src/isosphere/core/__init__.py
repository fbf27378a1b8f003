"""Core utilities shared across the domain modules.

This package provides foundational utilities that the country, currency and
language modules depend on. By isolating these utilities here, we maintain a
clean dependency graph:

    core <- registry <- country / currency / language

Exports:
    fold_alpha_code: Case-fold candidate alphabetic codes
    lookup_alpha_member: Case-insensitive code enumeration lookup
    is_numeric_code: Type guard for ISO numeric codes
    parse_numeric_text: Parse zero-padded numeric code text

Python 3.13+.
"""

from .code_validation import (
    fold_alpha_code,
    is_numeric_code,
    lookup_alpha_member,
    parse_numeric_text,
)

__all__ = [
    "fold_alpha_code",
    "is_numeric_code",
    "lookup_alpha_member",
    "parse_numeric_text",
]
