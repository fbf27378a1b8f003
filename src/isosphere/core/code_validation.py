"""Unified code-form validation for ISO identifiers.

This module provides the single source of truth for how caller-supplied
codes are recognized and case-folded before they are matched against the
closed sets of the code enumerations.

Code Grammar:
    alphabetic: [A-Za-z]{2} or [A-Za-z]{3}, ASCII only
    numeric:    int in 1..999 (bool excluded), or [0-9]{1,3} as text

Only ASCII input is folded. str.upper() applies Unicode case mapping, which
would let non-code text such as 'uſ' (LATIN SMALL LETTER LONG S) fold onto
'US'.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TypeGuard

__all__ = [
    "MAX_NUMERIC_CODE",
    "fold_alpha_code",
    "is_numeric_code",
    "lookup_alpha_member",
    "parse_numeric_text",
]

# ISO 3166-1 and ISO 4217 numeric codes are three decimal digits.
MAX_NUMERIC_CODE: int = 999

_ALPHA_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z]+")
_NUMERIC_TEXT_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{1,3}")


def fold_alpha_code(value: object, length: int) -> str | None:
    """Case-fold a candidate alphabetic code to uppercase.

    Args:
        value: Candidate code, of any type
        length: Required number of letters (2 or 3)

    Returns:
        Uppercase ASCII code, or None if value is not an ASCII-letter
        string of the required length

    Example:
        >>> fold_alpha_code("us", 2)
        'US'
        >>> fold_alpha_code("usa", 2) is None
        True
        >>> fold_alpha_code("uſ", 2) is None
        True
    """
    if not isinstance(value, str) or len(value) != length:
        return None
    if not value.isascii() or _ALPHA_PATTERN.fullmatch(value) is None:
        return None
    return value.upper()


def lookup_alpha_member[E: Enum](enum_cls: type[E], value: object, length: int) -> E | None:
    """Find the member of a code enumeration matching value case-insensitively.

    Code enumerations name every member after the uppercase form of its
    value, so the folded text is looked up by member name.

    Args:
        enum_cls: Code enumeration to search
        value: Candidate code
        length: Required number of letters

    Returns:
        Matching member, or None
    """
    folded = fold_alpha_code(value, length)
    if folded is None:
        return None
    return enum_cls.__members__.get(folded)


def is_numeric_code(value: object) -> TypeGuard[int]:
    """Check that value is an int usable as an ISO numeric code.

    bool is rejected even though it subclasses int.

    Example:
        >>> is_numeric_code(840)
        True
        >>> is_numeric_code(True)
        False
        >>> is_numeric_code(1840)
        False
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 < value <= MAX_NUMERIC_CODE
    )


def parse_numeric_text(value: str) -> int | None:
    """Convert a zero-padded numeric code such as '004' to an int.

    Returns:
        The integer value, or None if value is not one to three ASCII digits
    """
    if _NUMERIC_TEXT_PATTERN.fullmatch(value) is None:
        return None
    return int(value)
