"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Any

import pandas as pd
import pytest


@pytest.fixture
def headers() -> list[str]:
    """Return the standard radar header row."""
    return ["name", "ring", "quadrant", "isNew", "description"]


@pytest.fixture
def sample_rows() -> list[dict[str, Any]]:
    """Create two well-formed radar rows."""
    return [
        {
            "name": "Kubernetes",
            "ring": "Adopt",
            "quadrant": "Platforms",
            "isNew": "True",
            "description": "Container orchestration",
        },
        {
            "name": "GraphQL",
            "ring": "Trial",
            "quadrant": "Languages & Frameworks",
            "isNew": "False",
            "description": "Query language",
        },
    ]


@pytest.fixture
def sample_frame(headers: list[str], sample_rows: list[dict[str, Any]]) -> pd.DataFrame:
    """Create a sheet-shaped DataFrame (header row included as data)."""
    body = [[row[h] for h in headers] for row in sample_rows]
    return pd.DataFrame([headers, *body])


@pytest.fixture
def sample_csv(tmp_path: Path, headers: list[str], sample_rows: list[dict[str, Any]]) -> Path:
    """Write the sample rows to a CSV file."""
    path = tmp_path / "radar.csv"
    pd.DataFrame(sample_rows, columns=headers).to_csv(path, index=False)
    return path


@pytest.fixture
def sample_xlsx(tmp_path: Path, headers: list[str], sample_rows: list[dict[str, Any]]) -> Path:
    """Write the sample rows to a two-sheet Excel workbook."""
    path = tmp_path / "radar.xlsx"
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(sample_rows, columns=headers).to_excel(
            writer, sheet_name="Radar", index=False
        )
        pd.DataFrame({"note": ["unused"]}).to_excel(writer, sheet_name="Notes", index=False)
    return path
