"""Pure spatial hashing operations.

A spatial hash is defined by two vectors:
    - The cell size vector has real components and dictates how large each cell
      of the table is in world space. It translates world-space to table-space.
    - The field size vector has integral components and dictates how many cells
      the field has along each axis. It translates table-space to a flat index.

Vectors are any sequences of numbers; results are plain tuples. Axes are paired
strictly, so vectors with different axis counts raise ValueError.

Usage:
    cell = quantize((2.0, 2.0), (3.5, -0.5))   # (1, -1)
    slot = flatten((16, 16), cell)
    for candidate in region((0, 0), (1, 1)):
        ...
"""

from __future__ import annotations

import itertools
import math

from gridecs.core.types import CellSize, CellVector, FieldSize, WorldVector


def quantize(cell_size: CellSize, point: WorldVector) -> CellVector:
    """Translate a world-space point into its table-space cell.

    Each component is divided by the cell size and rounded towards negative
    infinity, so -0.1 and -1.0 both land in cell -1 for a unit cell size.

    Args:
        cell_size: Extent of one cell per axis. Must be non-zero on every axis.
        point: World-space position to quantize.

    Returns:
        Cell coordinate containing the point.
    """
    return tuple(math.floor(x / s) for s, x in zip(cell_size, point, strict=True))


def region(low: CellVector, high: CellVector) -> list[CellVector]:
    """List every cell in the box between two table-space corners, inclusive.

    The first axis varies slowest and the last axis fastest. If low exceeds high
    on any axis the region is empty.

    Args:
        low: Lower corner of the region.
        high: Upper corner of the region.

    Returns:
        Cells contained in the region, in a fixed order.
    """
    ranges = [range(lo, hi + 1) for lo, hi in zip(low, high, strict=True)]
    return list(itertools.product(*ranges))


def flatten(field_size: FieldSize, cell: CellVector) -> int:
    """Turn a table-space cell into a linear index for a field of the given size.

    Mixed-radix encoding with the first axis as the least significant digit:
    for a (3, 3) field, (1, 0) -> 1 and (0, 1) -> 3.

    No bounds checking is done; cells outside the field produce out-of-range
    indices. Use inbounds() first when the input is untrusted.
    """
    index = 0
    for size, x in reversed(list(zip(field_size, cell, strict=True))):
        index = size * index + x
    return index


def inbounds(field_size: FieldSize, cell: CellVector) -> bool:
    """Test whether a cell lies between 0 and the field size on every axis.

    Note: the upper bound is inclusive, so ``inbounds(size, size)`` is True.
    A table holding exactly ``size`` cells per axis has no slot for such cells;
    see SpatialGrid.table_size.
    """
    return all(0 <= x <= size for size, x in zip(field_size, cell, strict=True))
