"""
Header row validation.

Maps the free-form header labels of a sheet onto the closed set of
fields the pipeline understands. Matching ignores case and surrounding
whitespace; unknown columns are tolerated and ignored downstream.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

import pandas as pd

from radarsheet.validation import messages
from radarsheet.validation.result import ErrorKind, Ok, Result, fail


class Field(str, Enum):
    """Columns recognized in a radar sheet."""

    NAME = "name"
    RING = "ring"
    QUADRANT = "quadrant"
    IS_NEW = "isNew"
    DESCRIPTION = "description"
    TOPIC = "topic"

    @property
    def key(self) -> str:
        """Normalized form used for header matching."""
        return self.value.lower()


REQUIRED_FIELDS: tuple[Field, ...] = (
    Field.NAME,
    Field.RING,
    Field.QUADRANT,
    Field.IS_NEW,
    Field.DESCRIPTION,
)
OPTIONAL_FIELDS: tuple[Field, ...] = (Field.TOPIC,)

_FIELDS_BY_KEY: dict[str, Field] = {
    f.key: f for f in (*REQUIRED_FIELDS, *OPTIONAL_FIELDS)
}

# Recognized field -> header label as it appears in the sheet
ColumnBindings = Mapping[Field, str]


def is_blank(value: Any) -> bool:
    """Check whether a cell carries no text (None, NaN or whitespace)."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return bool(pd.isna(value))


def label_headers(cells: Sequence[Any], placeholder_prefix: str = "UNKNOWN") -> list[str]:
    """
    Turn raw header cells into labels.

    A cell without text is labelled ``"<prefix> <column index>"`` so the
    failure surfaces later as a missing field rather than here.

    Args:
        cells: Header cells of the first sheet row.
        placeholder_prefix: Prefix for synthetic labels.

    Returns:
        One label per cell, in column order.
    """
    return [
        f"{placeholder_prefix} {index}" if is_blank(cell) else str(cell)
        for index, cell in enumerate(cells)
    ]


def normalize_header(label: str) -> str:
    """Normalize a header label for field matching."""
    return label.strip().lower()


class HeaderValidator:
    """
    Resolves header labels to recognized fields.

    Required fields must all be present; optional fields are bound when
    present. Anything else is ignored.
    """

    def __init__(
        self,
        required: Sequence[Field] = REQUIRED_FIELDS,
        optional: Sequence[Field] = OPTIONAL_FIELDS,
    ) -> None:
        self.required = tuple(required)
        self.optional = tuple(optional)

    def find_collisions(self, headers: Sequence[str]) -> list[Field]:
        """
        List recognized fields claimed by more than one header.

        Args:
            headers: Header labels.

        Returns:
            Colliding fields in canonical order.
        """
        counts: dict[Field, int] = {}
        for label in headers:
            field = _FIELDS_BY_KEY.get(normalize_header(label))
            if field is not None:
                counts[field] = counts.get(field, 0) + 1
        return [f for f in (*self.required, *self.optional) if counts.get(f, 0) > 1]

    def resolve(self, headers: Sequence[str]) -> Result[ColumnBindings]:
        """
        Bind every recognized field to its header label.

        The first header matching a field wins.

        Args:
            headers: Header labels (placeholders already assigned).

        Returns:
            Ok with the bindings, or Err(MalformedHeaders) naming exactly
            the missing required fields.
        """
        wanted = {f.key: f for f in (*self.required, *self.optional)}
        bindings: dict[Field, str] = {}
        for label in headers:
            field = wanted.get(normalize_header(label))
            if field is not None and field not in bindings:
                bindings[field] = label

        missing = [f.value for f in self.required if f not in bindings]
        if missing:
            return fail(
                ErrorKind.MALFORMED_HEADERS,
                messages.missing_headers(missing),
                fields=tuple(missing),
            )
        return Ok(bindings)
