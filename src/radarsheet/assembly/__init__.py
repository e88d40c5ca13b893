"""Radar assembly and the end-to-end ingestion pipeline."""

from radarsheet.assembly.assembler import DomainAssembler
from radarsheet.assembly.pipeline import build_radar, check_headers, ingest_sheet

__all__ = ["DomainAssembler", "build_radar", "check_headers", "ingest_sheet"]
