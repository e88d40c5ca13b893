"""
Schema definitions using Pandera for data validation.

Validates radar data leaving the pipeline in tabular form.
"""

from radarsheet.schemas.radar import RadarBlipSchema

__all__ = ["RadarBlipSchema"]
