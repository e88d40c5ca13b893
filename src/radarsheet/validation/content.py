"""
Structural checks on the header row.

Runs before any data row is read so that a broken sheet fails fast
without building any domain objects.
"""

from collections.abc import Sequence
from typing import Any

from radarsheet.config.settings import RadarConfig
from radarsheet.validation import messages
from radarsheet.validation.headers import (
    ColumnBindings,
    HeaderValidator,
    is_blank,
    label_headers,
)
from radarsheet.validation.result import ErrorKind, Ok, Result, fail


class ContentValidator:
    """
    Validates the header row of a sheet.

    Usage:
        validator = ContentValidator(headers)
        content = validator.verify_content()
        bindings = validator.verify_headers()
    """

    def __init__(
        self,
        headers: Sequence[Any] | None,
        config: RadarConfig | None = None,
        header_validator: HeaderValidator | None = None,
    ) -> None:
        """
        Initialize content validator.

        Args:
            headers: Raw header cells; None when the sheet has no rows.
            config: Radar configuration (defaults when omitted).
            header_validator: Field resolver (standard fields when omitted).
        """
        self.config = config or RadarConfig()
        self.raw_headers = list(headers) if headers is not None else []
        self.header_validator = header_validator or HeaderValidator()

    @property
    def headers(self) -> list[str]:
        """Header labels with placeholders for blank cells."""
        return label_headers(self.raw_headers, self.config.placeholder_prefix)

    def verify_content(self) -> Result[list[str]]:
        """
        Check that the sheet has a usable header row.

        Returns:
            Ok with the labelled headers, or Err(SheetMalformed).
        """
        if all(is_blank(cell) for cell in self.raw_headers):
            return fail(ErrorKind.SHEET_MALFORMED, messages.SHEET_MALFORMED)
        return Ok(self.headers)

    def verify_headers(self) -> Result[ColumnBindings]:
        """
        Check that every mandatory header resolves to exactly one column.

        Returns:
            Ok with the column bindings, or Err(MalformedHeaders) listing the
            missing or colliding field names.
        """
        headers = self.headers
        resolved = self.header_validator.resolve(headers)
        if not resolved.ok:
            return resolved

        collisions = [f.value for f in self.header_validator.find_collisions(headers)]
        if collisions:
            return fail(
                ErrorKind.MALFORMED_HEADERS,
                messages.colliding_headers(collisions),
                fields=tuple(collisions),
            )
        return resolved
