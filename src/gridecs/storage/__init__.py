"""Storage backends and entity-keyed indices."""

from gridecs.storage.allocator import EntityCounter
from gridecs.storage.global_store import Global
from gridecs.storage.index_table import IndexTable
from gridecs.storage.local import LocalStorage
from gridecs.storage.protocol import GlobalStore, Storage
from gridecs.storage.spatial import SpatialIndex

__all__ = [
    "Storage",
    "GlobalStore",
    "Global",
    "LocalStorage",
    "EntityCounter",
    "SpatialIndex",
    "IndexTable",
]
