"""
Export a Radar for renderers.

Provides a JSON-ready dict and a flat blip table validated against
RadarBlipSchema.
"""

import json
from pathlib import Path
from typing import Any

import pandas as pd

from radarsheet.domain.models import Radar
from radarsheet.schemas.radar import RadarBlipSchema
from radarsheet.utils.logging import get_logger

log = get_logger(__name__)

BLIP_COLUMNS = ["name", "ring", "ring_order", "quadrant", "isNew", "topic", "description"]


def radar_to_dict(radar: Radar) -> dict[str, Any]:
    """
    Convert a Radar to plain data.

    Blips reference their ring by name; ring orders are listed once.
    """
    return {
        "rings": [{"name": ring.name, "order": ring.order} for ring in radar.rings],
        "quadrants": [
            {
                "name": quadrant.name,
                "blips": [
                    {
                        "name": blip.name,
                        "ring": blip.ring.name,
                        "isNew": blip.is_new,
                        "topic": blip.topic,
                        "description": blip.description,
                    }
                    for blip in quadrant.blips
                ],
            }
            for quadrant in radar.quadrants
        ],
    }


def radar_to_frame(radar: Radar) -> pd.DataFrame:
    """
    Flatten a Radar into one row per blip.

    Returns:
        DataFrame validated against RadarBlipSchema.
    """
    records = [
        {
            "name": blip.name,
            "ring": blip.ring.name,
            "ring_order": blip.ring.order,
            "quadrant": quadrant.name,
            "isNew": blip.is_new,
            "topic": blip.topic,
            "description": blip.description,
        }
        for quadrant in radar.quadrants
        for blip in quadrant.blips
    ]
    df = pd.DataFrame.from_records(records, columns=BLIP_COLUMNS)
    return RadarBlipSchema.validate(df)


def write_radar(radar: Radar, output_path: Path) -> Path:
    """
    Write a Radar to JSON or CSV, chosen by file extension.

    Args:
        radar: Radar to export.
        output_path: Destination ``.json`` or ``.csv`` file.

    Returns:
        The written path.

    Raises:
        ValueError: If the extension is not supported.
    """
    suffix = output_path.suffix.lower()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".json":
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(radar_to_dict(radar), f, indent=2, ensure_ascii=False)
    elif suffix == ".csv":
        radar_to_frame(radar).to_csv(output_path, index=False)
    else:
        msg = f"Unsupported output format: {suffix}"
        raise ValueError(msg)

    log.info("Radar exported", path=str(output_path), blips=len(radar.blips))
    return output_path
