"""Storage protocols for swappable collaborators.

Two kinds of store sit behind the world:
- GlobalStore: a single value per world (the entity counter lives in one).
- Storage: components attached to entities.

Usage:
    counter_store = Global.initialize(0)
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, Self, TypeVar

from gridecs.core.identity import Entity

T = TypeVar("T")


class GlobalStore(Protocol[T]):
    """Store holding exactly one value for the lifetime of a world."""

    @classmethod
    def initialize(cls, default: T) -> Self:
        """Create a store holding the given initial value."""
        ...

    def read(self) -> T:
        """Current value."""
        ...

    def write(self, value: T) -> None:
        """Replace the current value."""
        ...


class Storage(Protocol):
    """Component storage interface. Implementations handle actual data."""

    def set_component(self, entity: Entity[Any], component: Any) -> None:
        """Set/update component on entity (type inferred from the instance)."""
        ...

    def get_component(self, entity: Entity[Any], component_type: type[T]) -> T | None:
        """Get component from entity."""
        ...

    def has_component(self, entity: Entity[Any], component_type: type) -> bool:
        """Check if entity has component."""
        ...

    def remove_component(self, entity: Entity[Any], component_type: type) -> bool:
        """Remove component from entity. Returns True if existed."""
        ...

    def all_entities(self) -> Iterator[Entity[Any]]:
        """Iterate entities that carry at least one component."""
        ...
