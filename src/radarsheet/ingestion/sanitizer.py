"""
Row sanitization.

Converts one raw sheet row into a canonical SanitizedItem. Sanitization
never drops a row: blank keys are left for the assembler to reject.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from radarsheet.validation.headers import ColumnBindings, Field, is_blank

# Recognized field -> cell value, built once at the sheet boundary
BoundRow = Mapping[Field, Any]


@dataclass(frozen=True)
class SanitizedItem:
    """Canonical record for one sheet row."""

    name: str
    quadrant: str
    ring: str
    is_new: bool
    topic: str = ""
    description: str = ""


def bind_row(raw_row: Mapping[str, Any], bindings: ColumnBindings) -> BoundRow:
    """
    Restrict a raw row to the recognized fields.

    Columns without a binding are dropped; bound columns missing from the
    row read as None.

    Args:
        raw_row: Header label -> cell value.
        bindings: Field -> header label, from header validation.

    Returns:
        Field -> cell value.
    """
    return {field: raw_row.get(label) for field, label in bindings.items()}


def cell_text(value: Any) -> str:
    """
    Render a cell as trimmed text.

    Blank cells become "", integral floats lose their ".0" suffix
    (spreadsheet readers return 3 as 3.0).
    """
    if is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_is_new(value: Any) -> bool:
    """Only a case-insensitive "true" counts as new."""
    return cell_text(value).lower() == "true"


class RowSanitizer:
    """Normalizes bound rows into SanitizedItems."""

    def sanitize(self, row: BoundRow) -> SanitizedItem:
        """
        Sanitize one row.

        Args:
            row: Field -> cell value.

        Returns:
            Trimmed item with a strict boolean ``is_new`` and optional
            fields defaulted to "".
        """
        return SanitizedItem(
            name=cell_text(row.get(Field.NAME)),
            quadrant=cell_text(row.get(Field.QUADRANT)),
            ring=cell_text(row.get(Field.RING)),
            is_new=parse_is_new(row.get(Field.IS_NEW)),
            topic=cell_text(row.get(Field.TOPIC)),
            description=cell_text(row.get(Field.DESCRIPTION)),
        )
