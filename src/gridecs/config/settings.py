"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from gridecs.config import SpatialSettings, LoggingSettings

    # Load from environment variables (GRIDECS_SPATIAL_*, GRIDECS_LOG_*)
    spatial = SpatialSettings()
    logs = LoggingSettings()

    # Or override with explicit values
    spatial = SpatialSettings(cell_size=(0.5, 0.5), field_size=(256, 256))
"""

from __future__ import annotations

import logging

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SpatialSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a spatial hash grid.

    Attributes:
        cell_size: World-space extent of a cell per axis (strictly positive).
        field_size: Number of cells per axis (non-negative).

    Environment Variables:
        GRIDECS_SPATIAL_CELL_SIZE   (JSON list, e.g. "[2.0, 2.0]")
        GRIDECS_SPATIAL_FIELD_SIZE  (JSON list, e.g. "[64, 64]")
    """

    model_config = SettingsConfigDict(
        env_prefix="GRIDECS_SPATIAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cell_size: tuple[float, ...] = (1.0, 1.0)
    field_size: tuple[int, ...] = (64, 64)

    @field_validator("cell_size")
    @classmethod
    def _positive_cells(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        if not value:
            raise ValueError("cell_size needs at least one axis")
        if any(s <= 0 for s in value):
            raise ValueError("cell_size must be positive on every axis")
        return value

    @field_validator("field_size")
    @classmethod
    def _non_negative_field(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if any(n < 0 for n in value):
            raise ValueError("field_size must be non-negative on every axis")
        return value

    @model_validator(mode="after")
    def _same_axes(self) -> SpatialSettings:
        if len(self.cell_size) != len(self.field_size):
            raise ValueError("cell_size and field_size must have the same number of axes")
        return self


class LoggingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for structured logging.

    Attributes:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: Render JSON lines instead of the console format.

    Environment Variables:
        GRIDECS_LOG_LEVEL
        GRIDECS_LOG_JSON_OUTPUT
    """

    model_config = SettingsConfigDict(
        env_prefix="GRIDECS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "WARNING"
    json_output: bool = False

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return name
