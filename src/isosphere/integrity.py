"""Reference-data integrity exceptions.

These exceptions indicate DEFECTS IN THE SHIPPED DATA, not caller errors.
They are raised while the lookup tables are built and should propagate to
the top level: a process that cannot build complete, consistent tables
must not keep serving lookups from them.

Design:
    - NOT subclasses of IsoError (different error domain)
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    DataIntegrityError (base - reference data defects)
    ├─ CrossReferenceError (membership symmetry broken)
    ├─ DuplicateEntryError (two records claim one code)
    ├─ ImmutabilityViolationError (mutation attempt on frozen error)
    └─ TableGapError (entity without record, or record naming unknown code)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "CrossReferenceError",
    "DataIntegrityError",
    "DuplicateEntryError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "TableGapError",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: Table where the defect was found (country, currency, language)
        operation: Build step being performed (resolve, totality, index, verify)
        key: Code or name involved (optional)
        expected: Expected value (optional)
        actual: Actual value found (optional)
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None


class DataIntegrityError(Exception):
    """Base exception for all reference-data integrity failures.

    NOT an IsoError subclass. These are defects in the compiled-in dataset,
    not lookup failures, and must never be silently tolerated.

    This exception is immutable after construction.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    # Type annotations for __slots__ attributes (mypy requirement)
    _context: IntegrityContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    # Python's exception handling sets these attributes when propagating exceptions.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify integrity error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate an immutable integrity error."""


@final
class TableGapError(DataIntegrityError):
    """A lookup table is incomplete or refers to codes that do not exist.

    Raised when an entity member has no record, when a record names a code
    that is not a member of its enumeration, or when a table does not hold
    the pinned number of entries.

    Attributes:
        missing: Codes involved in the gap
    """

    __slots__ = ("_missing",)

    _missing: tuple[str, ...]

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
        *,
        missing: tuple[str, ...] = (),
    ) -> None:
        """Initialize TableGapError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
            missing: Codes involved in the gap
        """
        # Must set these before calling super().__init__ which freezes
        object.__setattr__(self, "_missing", tuple(missing))
        super().__init__(message, context)

    @property
    def missing(self) -> tuple[str, ...]:
        """Codes involved in the gap."""
        return self._missing

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"TableGapError({self.args[0]!r}, missing={self._missing!r})"


@final
class DuplicateEntryError(DataIntegrityError):
    """Two records claim the same code, alternate code, or numeric code.

    The data model maps each code to exactly one entity, so a duplicate
    cannot be represented and must be fixed in the dataset.
    """


@final
class CrossReferenceError(DataIntegrityError):
    """Membership recorded in one table is not mirrored in the linked table.

    Example: a country lists a currency whose country set does not contain
    that country.
    """
