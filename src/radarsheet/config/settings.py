"""
Typed configuration models using Pydantic.

All tunables of the ingestion pipeline are defined here with explicit
typing and validation. Processing code never reads the environment.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A radar has four concentric bands at most
MAX_RINGS = 4


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum log level")
    json_output: bool = Field(
        default=False, description="Emit JSON lines instead of console output"
    )


class RadarConfig(BaseModel):
    """
    Top-level configuration for one ingestion run.

    Defaults reproduce the standard radar: four rings at most, blank header
    cells labelled ``UNKNOWN <column index>``, first sheet of a workbook.
    """

    model_config = ConfigDict(frozen=True)

    max_rings: int = Field(
        default=MAX_RINGS,
        ge=1,
        le=MAX_RINGS,
        description="Maximum number of distinct rings",
    )
    placeholder_prefix: str = Field(
        default="UNKNOWN",
        description="Label prefix for header cells without text",
    )
    sheet_name: str | None = Field(
        default=None,
        description="Worksheet to read (first sheet if not set)",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("placeholder_prefix")
    @classmethod
    def validate_placeholder_prefix(cls, v: str) -> str:
        """Ensure the placeholder prefix has visible text."""
        if not v.strip():
            msg = "placeholder_prefix must not be blank"
            raise ValueError(msg)
        return v.strip()
