"""
Pandera schema for the flattened radar table.

One row per blip, as handed to renderers and written by ``write_radar``.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from radarsheet.config.settings import MAX_RINGS


class RadarBlipSchema(pa.DataFrameModel):
    """
    Schema for a radar exported as a blip table.

    Column names follow the sheet headers so an export can be read back.
    """

    name: Series[str] = pa.Field(description="Blip name")
    ring: Series[str] = pa.Field(str_length={"min_value": 1}, description="Ring name")
    ring_order: Series[int] = pa.Field(
        ge=0,
        lt=MAX_RINGS,
        description="Zero-based ring position by first occurrence",
    )
    quadrant: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Capitalized quadrant name",
    )
    isNew: Series[bool] = pa.Field(description="Whether the blip is new")
    topic: Series[str] = pa.Field(description="Optional topic, empty when absent")
    description: Series[str] = pa.Field(description="Blip description")

    @pa.dataframe_check
    def ring_order_consistent(cls, df: pd.DataFrame) -> bool:
        """Each ring name maps to a single order."""
        return bool((df.groupby("ring")["ring_order"].nunique() <= 1).all())

    class Config:
        """Schema configuration."""

        name = "RadarBlipSchema"
        strict = True
        coerce = True
