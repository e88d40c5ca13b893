"""
Tabular sheet reader.

Loads a CSV or Excel file with pandas and hands the pipeline what it
expects from any tabular source: the raw header cells of the first row
and one mapping per data row, keyed by header label. Each row keeps the
number it has in the sheet so errors can point back to it.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd

from radarsheet.utils.logging import get_logger
from radarsheet.validation import messages
from radarsheet.validation.headers import is_blank, label_headers
from radarsheet.validation.result import ErrorKind, Ok, Result, fail

log = get_logger(__name__)

# Legacy .xls needs an engine pandas does not ship with; save as .xlsx instead
EXCEL_SUFFIXES = (".xlsx", ".xlsm")
CSV_SUFFIXES = (".csv",)


@dataclass(frozen=True)
class SheetData:
    """
    Raw content of one worksheet.

    Attributes:
        name: Worksheet name (file stem for CSV).
        headers: Raw header cells of the first row.
        rows: Data rows, header label -> cell value.
        row_numbers: Sheet row number of each entry in ``rows``, counting
            the first sheet row as 1.
    """

    name: str
    headers: list[Any]
    rows: list[dict[str, Any]] = field(default_factory=list)
    row_numbers: list[int] = field(default_factory=list)


def unique_labels(labels: Sequence[str]) -> list[str]:
    """
    Make header labels unique by suffixing repeats with ``_1``, ``_2``...

    The first occurrence keeps its label so field binding sees it.
    """
    seen: dict[str, int] = {}
    result: list[str] = []
    for label in labels:
        if label in seen:
            seen[label] += 1
            candidate = f"{label}_{seen[label]}"
            while candidate in seen:
                seen[label] += 1
                candidate = f"{label}_{seen[label]}"
            seen[candidate] = 0
            result.append(candidate)
        else:
            seen[label] = 0
            result.append(label)
    return result


def frame_to_sheet(
    name: str,
    df: pd.DataFrame,
    placeholder_prefix: str = "UNKNOWN",
) -> SheetData:
    """
    Split a header-less DataFrame into header cells and keyed rows.

    Frame position ``i`` is sheet row ``i + 1``, so the reader must keep
    blank lines in the frame for row numbers to line up.

    Args:
        name: Worksheet name.
        df: Frame read with ``header=None``. The first non-blank row is the
            header row.
        placeholder_prefix: Prefix for labels of blank header cells.

    Returns:
        SheetData for the frame. Fully blank data rows are skipped but still
        counted.
    """
    records = list(df.itertuples(index=False, name=None))
    blank = [all(is_blank(value) for value in values) for values in records]
    if all(blank):
        return SheetData(name=name, headers=[])

    header_at = blank.index(False)
    header_cells = [None if is_blank(cell) else cell for cell in records[header_at]]
    labels = unique_labels(label_headers(header_cells, placeholder_prefix))

    rows: list[dict[str, Any]] = []
    row_numbers: list[int] = []
    for position in range(header_at + 1, len(records)):
        if blank[position]:
            continue
        rows.append(
            {
                label: (None if is_blank(value) else value)
                for label, value in zip(labels, records[position], strict=False)
            }
        )
        row_numbers.append(position + 1)
    return SheetData(name=name, headers=header_cells, rows=rows, row_numbers=row_numbers)


def _keep_bad_line(bad_line: list[str]) -> list[str]:
    """Keep a row with too many fields; pandas drops the extra cells."""
    log.warning("Row has more cells than the header", cells=len(bad_line))
    return bad_line


def _read_csv(path: Path) -> pd.DataFrame:
    """Read a CSV as text cells, keeping blank lines and tolerating ragged rows."""
    options: dict[str, Any] = {
        "header": None,
        "dtype": str,
        "keep_default_na": False,
        "skip_blank_lines": False,
        "on_bad_lines": _keep_bad_line,
        "engine": "python",
    }
    try:
        # Try UTF-8 first (BOM tolerated), fall back to Latin-1
        try:
            return pd.read_csv(path, encoding="utf-8-sig", **options)
        except UnicodeDecodeError:
            log.warning("UTF-8 decode failed, retrying with Latin-1", path=str(path))
            return pd.read_csv(path, encoding="latin-1", **options)
    except pd.errors.EmptyDataError:
        return pd.DataFrame()


def read_sheet(
    path: Path,
    sheet_name: str | None = None,
    placeholder_prefix: str = "UNKNOWN",
) -> Result[SheetData]:
    """
    Read one worksheet from a CSV or Excel file.

    Args:
        path: Path to the file.
        sheet_name: Worksheet to read; first sheet when omitted. Ignored
            for CSV files.
        placeholder_prefix: Prefix for labels of blank header cells.

    Returns:
        Ok with the sheet content, or Err(SheetNotFound) when the requested
        worksheet does not exist.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is not supported.
    """
    if not path.exists():
        msg = f"Sheet file not found: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()

    if suffix in CSV_SUFFIXES:
        if sheet_name is not None:
            log.warning("Ignoring sheet name for CSV input", path=str(path), sheet=sheet_name)
        sheet = frame_to_sheet(path.stem, _read_csv(path), placeholder_prefix)

    elif suffix in EXCEL_SUFFIXES:
        workbook = pd.read_excel(path, sheet_name=None, header=None, dtype=object)
        available = list(workbook)
        if sheet_name is None:
            if not available:
                return Ok(SheetData(name=path.stem, headers=[]))
            sheet_name = available[0]
        elif sheet_name not in workbook:
            log.warning("Sheet not found", path=str(path), sheet=sheet_name)
            return fail(
                ErrorKind.SHEET_NOT_FOUND,
                messages.SHEET_NOT_FOUND.format(
                    sheet_name=sheet_name, available=", ".join(available) or "none"
                ),
            )
        sheet = frame_to_sheet(sheet_name, workbook[sheet_name], placeholder_prefix)

    else:
        supported = ", ".join((*CSV_SUFFIXES, *EXCEL_SUFFIXES))
        msg = f"Unsupported file format: {suffix} (expected one of {supported})"
        raise ValueError(msg)

    log.info(
        "Loaded sheet",
        path=str(path),
        sheet=sheet.name,
        columns=len(sheet.headers),
        rows=len(sheet.rows),
    )
    return Ok(sheet)
