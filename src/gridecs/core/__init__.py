"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless functionality: entity handles, the Hashable
    capability, and the spatial hashing math. Nothing here mutates state or logs.
    For stateful services, see storage/ and world/.
"""

from gridecs.core.component import Hashable, max_index, table_length
from gridecs.core.identity import Entity, unentity
from gridecs.core.spatial import SpatialGrid, flatten, inbounds, quantize, region
from gridecs.core.types import CellSize, CellVector, FieldSize, WorldVector

__all__ = [
    # Types
    "CellSize",
    "CellVector",
    "FieldSize",
    "WorldVector",
    # Identity
    "Entity",
    "unentity",
    # Component
    "Hashable",
    "max_index",
    "table_length",
    # Spatial
    "SpatialGrid",
    "quantize",
    "region",
    "flatten",
    "inbounds",
]
