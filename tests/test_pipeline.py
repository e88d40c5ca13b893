"""Tests for the end-to-end ingestion pipeline."""

from pathlib import Path
from typing import Any

import pandas as pd
import pytest
from openpyxl import Workbook

from radarsheet.assembly import build_radar, check_headers, ingest_sheet
from radarsheet.config import RadarConfig
from radarsheet.validation import ErrorKind, Field


class TestBuildRadar:
    """Tests for build_radar over in-memory rows."""

    def test_round_trip_scenario(
        self, headers: list[str], sample_rows: list[dict[str, Any]]
    ) -> None:
        """Test the two-row Kubernetes/GraphQL scenario."""
        radar = build_radar(headers, sample_rows).unwrap()

        assert len(radar.quadrants) == 2
        assert all(len(q.blips) == 1 for q in radar.quadrants)
        assert [(r.name, r.order) for r in radar.rings] == [("Adopt", 0), ("Trial", 1)]

        kubernetes = radar.quadrant("Platforms").blips[0]
        assert kubernetes.name == "Kubernetes"
        assert kubernetes.ring.name == "Adopt"
        assert kubernetes.is_new is True
        assert kubernetes.description == "Container orchestration"

        graphql = radar.quadrant("Languages & Frameworks").blips[0]
        assert graphql.is_new is False
        assert graphql.ring.order == 1

    def test_empty_headers_sheet_malformed(self) -> None:
        """Test that an empty header row fails before any row is read."""

        def rows() -> Any:
            pytest.fail("rows must not be read when headers are empty")
            yield {}

        result = build_radar([], rows())
        assert not result.ok
        assert result.error.kind is ErrorKind.SHEET_MALFORMED

    def test_missing_headers(self, sample_rows: list[dict[str, Any]]) -> None:
        """Test that missing headers stop the pipeline."""
        result = build_radar(["name", "ring", "quadrant"], sample_rows)
        assert result.error.kind is ErrorKind.MALFORMED_HEADERS
        assert result.error.fields == ("isNew", "description")

    def test_messy_headers_and_extra_columns(self) -> None:
        """Test header matching with case, spaces and unknown columns."""
        headers = [" Name ", "RING", "Quadrant", "isnew", "Description", "Owner", "Topic"]
        rows = [
            {
                " Name ": "  Terraform ",
                "RING": "Adopt",
                "Quadrant": "tools",
                "isnew": "TRUE",
                "Description": "IaC",
                "Owner": "platform-team",
                "Topic": "Infra",
            }
        ]
        blip = build_radar(headers, rows).unwrap().quadrant("Tools").blips[0]
        assert blip.name == "Terraform"
        assert blip.is_new is True
        assert blip.topic == "Infra"

    def test_too_many_rings(self, headers: list[str]) -> None:
        """Test that five distinct rings fail with no radar."""
        rows = [
            {"name": str(i), "ring": ring, "quadrant": "Tools", "isNew": "", "description": ""}
            for i, ring in enumerate(["Adopt", "Trial", "Assess", "Hold", "Retire"])
        ]
        result = build_radar(headers, rows)
        assert result.error.kind is ErrorKind.TOO_MANY_RINGS

    def test_config_max_rings(self, headers: list[str], sample_rows: list[dict[str, Any]]) -> None:
        """Test that the configured ring limit applies."""
        result = build_radar(headers, sample_rows, RadarConfig(max_rings=1))
        assert result.error.kind is ErrorKind.TOO_MANY_RINGS

    def test_runs_are_independent(
        self, headers: list[str], sample_rows: list[dict[str, Any]]
    ) -> None:
        """Test that separate runs build separate objects."""
        first = build_radar(headers, sample_rows).unwrap()
        second = build_radar(headers, sample_rows).unwrap()
        assert first == second
        assert first.rings[0] is not second.rings[0]


class TestCheckHeaders:
    """Tests for header-only checking."""

    def test_bindings(self, headers: list[str]) -> None:
        """Test that valid headers return bindings."""
        result = check_headers(headers)
        assert result.value[Field.DESCRIPTION] == "description"

    def test_absent_header_row(self) -> None:
        """Test that None headers are SheetMalformed."""
        assert check_headers(None).error.kind is ErrorKind.SHEET_MALFORMED


class TestIngestSheet:
    """Tests for ingest_sheet over files."""

    def test_csv(self, sample_csv: Path) -> None:
        """Test building a radar from CSV."""
        radar = ingest_sheet(sample_csv).unwrap()
        assert len(radar.blips) == 2

    def test_xlsx_first_sheet(self, sample_xlsx: Path) -> None:
        """Test that the first worksheet is used by default."""
        radar = ingest_sheet(sample_xlsx).unwrap()
        assert [r.name for r in radar.rings] == ["Adopt", "Trial"]

    def test_xlsx_sheet_not_found(self, sample_xlsx: Path) -> None:
        """Test that a missing worksheet is SheetNotFound."""
        result = ingest_sheet(sample_xlsx, RadarConfig(sheet_name="Missing"))
        assert result.error.kind is ErrorKind.SHEET_NOT_FOUND
        assert "Missing" in result.error.message

    def test_xlsx_wrong_sheet_headers(self, sample_xlsx: Path) -> None:
        """Test that a sheet without radar headers is MalformedHeaders."""
        result = ingest_sheet(sample_xlsx, RadarConfig(sheet_name="Notes"))
        assert result.error.kind is ErrorKind.MALFORMED_HEADERS

    def test_empty_csv(self, tmp_path: Path) -> None:
        """Test that an empty file is SheetMalformed."""
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert ingest_sheet(path).error.kind is ErrorKind.SHEET_MALFORMED

    def test_blank_quadrant_row(self, tmp_path: Path, headers: list[str]) -> None:
        """Test that a blank quadrant is reported with its sheet row."""
        path = tmp_path / "radar.csv"
        pd.DataFrame(
            [["Kafka", "Adopt", "Tools", "", ""], ["Flink", "Trial", "", "", ""]],
            columns=headers,
        ).to_csv(path, index=False)
        result = ingest_sheet(path)
        assert result.error.kind is ErrorKind.MISSING_FIELD
        assert result.error.row == 3

    def test_blank_line_before_bad_row_csv(self, tmp_path: Path) -> None:
        """Test that the reported row counts a skipped blank CSV line."""
        path = tmp_path / "radar.csv"
        path.write_text(
            "name,ring,quadrant,isNew,description\n"
            "Kafka,Adopt,Tools,,\n"
            ",,,,\n"
            "Flink,Trial,,,\n",
            encoding="utf-8",
        )
        result = ingest_sheet(path)
        assert result.error.kind is ErrorKind.MISSING_FIELD
        assert result.error.row == 4

    def test_blank_row_before_bad_row_xlsx(self, tmp_path: Path, headers: list[str]) -> None:
        """Test that the reported row counts a skipped blank worksheet row."""
        path = tmp_path / "radar.xlsx"
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Radar"
        sheet.append(headers)
        sheet.append(["Kafka", "Adopt", "Tools", "false", ""])
        sheet.append([])
        sheet.append(["Flink", "Trial", None, "false", ""])
        workbook.save(path)

        result = ingest_sheet(path)
        assert result.error.kind is ErrorKind.MISSING_FIELD
        assert result.error.fields == ("quadrant",)
        assert result.error.row == 4

    def test_blank_line_before_extra_ring(self, tmp_path: Path) -> None:
        """Test that TooManyRings also reports the real sheet row."""
        path = tmp_path / "radar.csv"
        path.write_text(
            "name,ring,quadrant,isNew,description\n"
            "Kafka,Adopt,Tools,,\n"
            "\n"
            "Flink,Trial,Tools,,\n",
            encoding="utf-8",
        )
        result = ingest_sheet(path, RadarConfig(max_rings=1))
        assert result.error.kind is ErrorKind.TOO_MANY_RINGS
        assert result.error.row == 4

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ingest_sheet(tmp_path / "nope.csv")
