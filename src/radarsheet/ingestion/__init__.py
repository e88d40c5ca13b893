"""
Data ingestion layer for sheet reading and row sanitization.

All raw rows enter the pipeline through this module so that
free-form header lookups stop at the sheet boundary.
"""

from radarsheet.ingestion.reader import SheetData, read_sheet
from radarsheet.ingestion.sanitizer import RowSanitizer, SanitizedItem, bind_row

__all__ = ["RowSanitizer", "SanitizedItem", "SheetData", "bind_row", "read_sheet"]
