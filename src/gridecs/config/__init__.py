"""Configuration module using Pydantic Settings.

Usage:
    from gridecs.config import SpatialSettings, LoggingSettings

    settings = SpatialSettings(cell_size=(2.0, 2.0), field_size=(32, 32))
"""

from gridecs.config.settings import LoggingSettings, SpatialSettings

__all__ = [
    "SpatialSettings",
    "LoggingSettings",
]
