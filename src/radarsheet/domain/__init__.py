"""Radar domain model and export helpers."""

from radarsheet.domain.export import radar_to_dict, radar_to_frame, write_radar
from radarsheet.domain.models import Blip, Quadrant, Radar, Ring

__all__ = [
    "Blip",
    "Quadrant",
    "Radar",
    "Ring",
    "radar_to_dict",
    "radar_to_frame",
    "write_radar",
]
