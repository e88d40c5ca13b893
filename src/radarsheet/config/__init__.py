"""
Configuration management with typed Pydantic models.

Provides validated defaults and YAML loading with environment
variable interpolation.
"""

from radarsheet.config.loader import load_config
from radarsheet.config.settings import MAX_RINGS, LoggingConfig, LogLevel, RadarConfig

__all__ = [
    "MAX_RINGS",
    "LogLevel",
    "LoggingConfig",
    "RadarConfig",
    "load_config",
]
