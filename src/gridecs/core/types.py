"""Core type definitions for gridecs."""

from collections.abc import Sequence

type WorldVector = Sequence[float]
"""Continuous world-space position, one real component per axis."""

type CellSize = Sequence[float]
"""Spatial extent of one cell per axis. Every axis must be strictly positive."""

type FieldSize = Sequence[int]
"""Number of cells along each axis of a spatial table."""

type CellVector = tuple[int, ...]
"""Discretized table-space coordinate."""
