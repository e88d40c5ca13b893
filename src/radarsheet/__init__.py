"""
Radarsheet: Technology Radar Ingestion Pipeline.

This package turns spreadsheet rows describing technology items into a
validated, immutable radar model of quadrants, rings and blips.
"""

from importlib.metadata import version

__version__ = version("radarsheet")

__all__ = ["__version__"]
