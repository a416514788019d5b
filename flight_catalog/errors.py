"""
Error types and explicit results for catalog import and export.

Import and export report failures as a CatalogResult carrying one of the
exceptions below instead of raising. Callers decide whether a failure is
fatal; CatalogResult.unwrap() raises the carried exception for callers
that prefer exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class ImportErrorKind(Enum):
    """Category of a failed import."""
    PARSE_ERROR = "parse_error"
    MISSING_DATA = "missing_data"


class CatalogError(Exception):
    """Base exception for flight catalog errors."""

    def __init__(self, message: str, details: Any = None):
        """
        Initialize catalog error.

        Args:
            message: Error message
            details: Optional additional details (e.g. offending index or key)
        """
        super().__init__(message)
        self.details = details

    def __str__(self) -> str:
        if self.details is not None:
            return f"{super().__str__()} ({self.details})"
        return super().__str__()


class FlightImportError(CatalogError):
    """A JSON document could not be imported into the catalog."""

    kind: ImportErrorKind = ImportErrorKind.PARSE_ERROR


class FlightParseError(FlightImportError):
    """Document is not well-formed JSON or a flight entry is malformed."""

    kind = ImportErrorKind.PARSE_ERROR


class MissingFlightDataError(FlightImportError):
    """Document has no ``flights`` array (key absent or null)."""

    kind = ImportErrorKind.MISSING_DATA


class FlightSerializeError(CatalogError):
    """Catalog contents could not be encoded as JSON."""


@dataclass(frozen=True)
class CatalogResult(Generic[T]):
    """Outcome of a load or export operation."""

    value: Optional[T] = None
    error: Optional[CatalogError] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: Optional[T] = None) -> 'CatalogResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: CatalogError) -> 'CatalogResult[T]':
        return cls(error=error)

    def __str__(self) -> str:
        if self.is_ok:
            return "Ok"
        return f"Failed: {self.error}"
