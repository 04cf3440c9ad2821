"""gridecs: entity allocation and spatial hashing for entity-component runtimes.

Usage:
    from gridecs import SpatialGrid, SpatialIndex, World

    world = World()
    grid = SpatialGrid(cell_size=(1.0, 1.0), field_size=(64, 64))
    index = SpatialIndex(grid)

    player = world.new_entity(Position(3.5, 4.0))
    index.place(player, (3.5, 4.0))
    nearby = index.query((2.0, 2.0), (5.0, 5.0))
"""

__version__ = "0.1.0"

# Configuration
from gridecs.config import LoggingSettings, SpatialSettings

# Core primitives
from gridecs.core import (
    Entity,
    Hashable,
    SpatialGrid,
    flatten,
    inbounds,
    max_index,
    quantize,
    region,
    table_length,
    unentity,
)

# Logging
from gridecs.logging import configure_logging, get_logger

# Storage
from gridecs.storage import (
    EntityCounter,
    Global,
    GlobalStore,
    IndexTable,
    LocalStorage,
    SpatialIndex,
    Storage,
)

# World
from gridecs.world import World

__all__ = [
    # Version
    "__version__",
    # Core
    "Entity",
    "unentity",
    "Hashable",
    "max_index",
    "table_length",
    "SpatialGrid",
    "quantize",
    "region",
    "flatten",
    "inbounds",
    # Storage
    "Storage",
    "GlobalStore",
    "Global",
    "LocalStorage",
    "EntityCounter",
    "SpatialIndex",
    "IndexTable",
    # World
    "World",
    # Config
    "SpatialSettings",
    "LoggingSettings",
    # Logging
    "configure_logging",
    "get_logger",
]
