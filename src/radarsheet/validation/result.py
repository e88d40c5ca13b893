"""
Tagged results for the ingestion pipeline.

Every stage returns either ``Ok(value)`` or ``Err(error)``. Failures carry
an IngestionError describing the first problem found; callers that prefer
exceptions can call ``unwrap()`` to get a RadarBuildError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification of fatal ingestion failures."""

    SHEET_MALFORMED = "SheetMalformed"
    MALFORMED_HEADERS = "MalformedHeaders"
    TOO_MANY_RINGS = "TooManyRings"
    SHEET_NOT_FOUND = "SheetNotFound"
    MISSING_FIELD = "MissingField"


@dataclass(frozen=True)
class IngestionError:
    """
    Description of a fatal ingestion failure.

    Attributes:
        kind: Failure classification.
        message: Human-readable detail.
        fields: Field names involved (missing headers, blank cells).
        row: One-based sheet row number, header row being row 1.
    """

    kind: ErrorKind
    message: str
    fields: tuple[str, ...] = ()
    row: int | None = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class RadarBuildError(Exception):
    """Raised by ``Result.unwrap()`` when the result is a failure."""

    def __init__(self, error: IngestionError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful stage result."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed stage result."""

    error: IngestionError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise RadarBuildError(self.error)


Result = Union[Ok[T], Err]


def fail(
    kind: ErrorKind,
    message: str,
    *,
    fields: tuple[str, ...] = (),
    row: int | None = None,
) -> Err:
    """Shorthand for building an ``Err`` result."""
    return Err(IngestionError(kind=kind, message=message, fields=fields, row=row))
