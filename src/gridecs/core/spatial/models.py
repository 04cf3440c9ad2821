"""Spatial grid model: a cell size and a field size bound together.

Usage:
    grid = SpatialGrid(cell_size=(0.5, 0.5), field_size=(128, 128))
    slot = grid.slot(grid.cell((3.2, 7.9)))
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridecs.core.spatial.operations import flatten, inbounds, quantize, region
from gridecs.core.types import CellVector, WorldVector

if TYPE_CHECKING:
    from gridecs.config import SpatialSettings


@dataclass(frozen=True, slots=True)
class SpatialGrid:
    """Immutable description of a spatial hash.

    Validates its vectors once on construction so the hot-path operations
    can stay unchecked.

    Args:
        cell_size: World-space extent of a cell per axis, strictly positive.
        field_size: Number of cells per axis, non-negative integers.

    Raises:
        ValueError: If the vectors are empty, have different axis counts,
            or contain a non-positive cell size or a negative or non-integer
            field size.
    """

    cell_size: tuple[float, ...]
    field_size: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cell_size", tuple(self.cell_size))
        object.__setattr__(self, "field_size", tuple(self.field_size))
        if not self.cell_size:
            raise ValueError("SpatialGrid needs at least one axis")
        if len(self.cell_size) != len(self.field_size):
            raise ValueError(
                f"cell_size has {len(self.cell_size)} axes but field_size has "
                f"{len(self.field_size)}"
            )
        if any(s <= 0 for s in self.cell_size):
            raise ValueError(f"cell_size must be positive on every axis, got {self.cell_size}")
        if any(not isinstance(n, int) or isinstance(n, bool) for n in self.field_size):
            raise ValueError(f"field_size must be integers, got {self.field_size}")
        if any(n < 0 for n in self.field_size):
            raise ValueError(f"field_size must be non-negative, got {self.field_size}")

    @classmethod
    def from_settings(cls, settings: SpatialSettings) -> SpatialGrid:
        """Build a grid from configured settings."""
        return cls(cell_size=settings.cell_size, field_size=settings.field_size)

    @property
    def dimensions(self) -> int:
        return len(self.field_size)

    @property
    def cell_count(self) -> int:
        """Number of cells strictly inside the field."""
        return math.prod(self.field_size)

    @property
    def table_size(self) -> int:
        """Length of a flat table with a slot for every in-bounds cell.

        inbounds() admits the field size itself on each axis, so the largest
        index it can produce is flatten(field_size, field_size).
        """
        return flatten(self.field_size, self.field_size) + 1

    def cell(self, point: WorldVector) -> CellVector:
        return quantize(self.cell_size, point)

    def slot(self, cell: CellVector) -> int:
        return flatten(self.field_size, cell)

    def contains(self, cell: CellVector) -> bool:
        return inbounds(self.field_size, cell)

    def cells(self, low: WorldVector, high: WorldVector) -> list[CellVector]:
        """Cells overlapping the world-space box between two corners."""
        return region(self.cell(low), self.cell(high))
