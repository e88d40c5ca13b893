"""
Ingestion pipeline.

Chains the stages: header checks, row binding and sanitization, assembly.
``build_radar`` is the pure core over in-memory headers and rows;
``ingest_sheet`` adds file reading and logging around it.
"""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from radarsheet.assembly.assembler import DomainAssembler
from radarsheet.config.settings import RadarConfig
from radarsheet.domain.models import Radar
from radarsheet.ingestion.reader import read_sheet
from radarsheet.ingestion.sanitizer import RowSanitizer, bind_row
from radarsheet.utils.logging import get_logger, log_context
from radarsheet.validation.content import ContentValidator
from radarsheet.validation.headers import ColumnBindings
from radarsheet.validation.result import Result

log = get_logger(__name__)


def check_headers(
    headers: Sequence[Any] | None,
    config: RadarConfig | None = None,
) -> Result[ColumnBindings]:
    """
    Run the header-only checks.

    Args:
        headers: Raw header cells.
        config: Radar configuration.

    Returns:
        Ok with column bindings, or Err(SheetMalformed | MalformedHeaders).
    """
    validator = ContentValidator(headers, config)
    content = validator.verify_content()
    if not content.ok:
        return content
    return validator.verify_headers()


def build_radar(
    headers: Sequence[Any] | None,
    rows: Iterable[Mapping[str, Any]],
    config: RadarConfig | None = None,
    row_numbers: Sequence[int] | None = None,
) -> Result[Radar]:
    """
    Build a Radar from a header row and data rows.

    Stops at the first failure and returns it unchanged; no domain object
    is built before the headers pass.

    Args:
        headers: Raw header cells, in column order.
        rows: Data rows keyed by header label.
        config: Radar configuration (defaults when omitted).
        row_numbers: Sheet row of each data row. Defaults to consecutive
            rows below the header.

    Returns:
        Ok with the Radar, or Err with the first IngestionError.
    """
    config = config or RadarConfig()

    checked = check_headers(headers, config)
    if not checked.ok:
        return checked
    bindings = checked.value

    sanitizer = RowSanitizer()
    items = [sanitizer.sanitize(bind_row(row, bindings)) for row in rows]

    return DomainAssembler(max_rings=config.max_rings).assemble(items, row_numbers)


def ingest_sheet(path: Path, config: RadarConfig | None = None) -> Result[Radar]:
    """
    Read a sheet file and build its Radar.

    Args:
        path: CSV or Excel file.
        config: Radar configuration (defaults when omitted).

    Returns:
        Ok with the Radar, or Err with the first IngestionError.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is not supported.
    """
    config = config or RadarConfig()

    with log_context(source=str(path)):
        read = read_sheet(path, config.sheet_name, config.placeholder_prefix)
        if not read.ok:
            log.error("Ingestion failed", kind=read.error.kind.value, error=read.error.message)
            return read
        sheet = read.value

        result = build_radar(sheet.headers, sheet.rows, config, sheet.row_numbers)
        if not result.ok:
            log.error(
                "Ingestion failed",
                kind=result.error.kind.value,
                error=result.error.message,
                row=result.error.row,
            )
            return result

        radar = result.value
        log.info(
            "Radar built",
            sheet=sheet.name,
            quadrants=len(radar.quadrants),
            rings=[ring.name for ring in radar.rings],
            blips=len(radar.blips),
        )
        return result
