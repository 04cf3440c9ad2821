"""Grid-backed spatial index over entities.

Usage:
    grid = SpatialGrid(cell_size=(1.0, 1.0), field_size=(32, 32))
    index = SpatialIndex(grid)
    index.place(entity, (3.5, 4.2))
    nearby = index.query((2.0, 3.0), (5.0, 5.0))
"""

from __future__ import annotations

from typing import Any

from gridecs.core.identity import Entity
from gridecs.core.spatial import SpatialGrid, region
from gridecs.core.types import CellVector, WorldVector
from gridecs.logging import get_logger

log = get_logger(__name__)


class SpatialIndex:
    """Buckets entities by the flat slot of the cell they occupy.

    Structure:
        _table[slot] = entities whose cell flattens to slot
        _cells[entity] = cell the entity occupies
        _outside = entities whose cell falls outside the field

    The field's inclusive upper bound lets boundary cells share a slot with an
    interior cell (for a (3, 3) field, (3, 0) and (0, 1) both flatten to 3), so
    lookups compare the stored cell and never trust the slot alone.

    Args:
        grid: Spatial hash the index is built on.
    """

    def __init__(self, grid: SpatialGrid):
        self._grid = grid
        self._table: list[set[Entity[Any]]] = [set() for _ in range(grid.table_size)]
        self._cells: dict[Entity[Any], CellVector] = {}
        self._outside: set[Entity[Any]] = set()

    @property
    def grid(self) -> SpatialGrid:
        return self._grid

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, entity: object) -> bool:
        return entity in self._cells

    def place(self, entity: Entity[Any], point: WorldVector) -> CellVector:
        """Insert or move an entity to the cell containing a world-space point.

        Args:
            entity: Entity to place.
            point: World-space position of the entity.

        Returns:
            Cell the entity now occupies.
        """
        cell = self._grid.cell(point)
        previous = self._cells.get(entity)
        if previous == cell:
            return cell
        if previous is not None:
            self._unlink(entity, previous)

        self._cells[entity] = cell
        if self._grid.contains(cell):
            self._table[self._grid.slot(cell)].add(entity)
        else:
            log.debug("entity_outside_field", entity=entity.id, cell=cell)
            self._outside.add(entity)
        return cell

    def remove(self, entity: Entity[Any]) -> None:
        """Remove an entity from the index.

        Raises:
            KeyError: If the entity was never placed.
        """
        cell = self._cells.pop(entity)
        self._unlink(entity, cell)

    def discard(self, entity: Entity[Any]) -> None:
        """Remove an entity if present."""
        if entity in self._cells:
            self.remove(entity)

    def cell_of(self, entity: Entity[Any]) -> CellVector | None:
        return self._cells.get(entity)

    def at_cell(self, cell: CellVector) -> list[Entity[Any]]:
        """Entities occupying exactly this cell, ordered by identifier."""
        if self._grid.contains(cell):
            candidates = self._table[self._grid.slot(cell)]
        else:
            candidates = self._outside
        return sorted(e for e in candidates if self._cells[e] == cell)

    def query_cells(self, low: CellVector, high: CellVector) -> list[Entity[Any]]:
        """Entities whose cell lies in the table-space box between two corners.

        Results follow region() order: by cell, then by identifier within a cell.

        Args:
            low: Lower corner, inclusive.
            high: Upper corner, inclusive.

        Returns:
            Matching entities.
        """
        field = self._grid.field_size
        clipped_low = tuple(max(lo, 0) for lo in low)
        clipped_high = tuple(min(hi, n) for hi, n in zip(high, field, strict=True))

        hits: list[tuple[CellVector, Entity[Any]]] = []
        for cell in region(clipped_low, clipped_high):
            bucket = self._table[self._grid.slot(cell)]
            hits.extend((cell, e) for e in bucket if self._cells[e] == cell)
        for entity in self._outside:
            cell = self._cells[entity]
            if all(lo <= x <= hi for lo, x, hi in zip(low, cell, high, strict=True)):
                hits.append((cell, entity))

        hits.sort()
        return [entity for _, entity in hits]

    def query(self, low: WorldVector, high: WorldVector) -> list[Entity[Any]]:
        """Entities in cells overlapping the world-space box between two corners."""
        return self.query_cells(self._grid.cell(low), self._grid.cell(high))

    def _unlink(self, entity: Entity[Any], cell: CellVector) -> None:
        if self._grid.contains(cell):
            self._table[self._grid.slot(cell)].discard(entity)
        else:
            self._outside.discard(entity)
