"""World: explicit context owning the entity counter and component storage.

Usage:
    world = World()

    # Allocate a bare identifier
    entity = world.next_entity()

    # Allocate and attach a component in one call
    player = world.new_entity(Position(0.0, 0.0))
    pos = world.get_copy(player, Position)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar, cast

from gridecs.core.identity import Entity
from gridecs.logging import get_logger
from gridecs.storage.allocator import EntityCounter
from gridecs.storage.local import LocalStorage
from gridecs.storage.protocol import Storage

ComponentT = TypeVar("ComponentT")

log = get_logger(__name__)


class World:
    """Central owner of entity allocation and component storage.

    There is no process-wide counter: each World owns its own EntityCounter,
    so identifiers are unique per world.

    Args:
        storage: Component storage collaborator (default LocalStorage).
        counter: Entity counter (default a fresh counter starting at 0).
    """

    def __init__(
        self,
        storage: Storage | None = None,
        counter: EntityCounter | None = None,
    ):
        self._storage = storage if storage is not None else LocalStorage()
        self._counter = counter if counter is not None else EntityCounter()
        log.debug("world_created", storage=type(self._storage).__name__)

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def counter(self) -> EntityCounter:
        return self._counter

    def next_entity(self) -> Entity[None]:
        """Allocate a fresh entity with no components."""
        return cast(Entity[None], self._counter.allocate())

    def new_entity(self, component: ComponentT) -> Entity[ComponentT]:
        """Allocate an entity and attach a component to it.

        The two steps are separate: if the storage write raises, the error
        propagates unchanged and the allocated identifier stays consumed.

        Args:
            component: Component to attach.

        Returns:
            The new entity, tagged with the component's type.
        """
        entity = self._counter.allocate()
        try:
            self._storage.set_component(entity, component)
        except Exception:
            log.debug(
                "component_write_failed",
                entity=entity.id,
                component=type(component).__name__,
            )
            raise
        return cast(Entity[ComponentT], entity)

    def get_copy(
        self, entity: Entity[Any], component_type: type[ComponentT]
    ) -> ComponentT | None:
        """Get a component copy. Changes must be written back with set()."""
        return self._storage.get_component(entity, component_type)

    def set(self, entity: Entity[Any], component: Any) -> None:
        """Set component on an existing entity."""
        self._storage.set_component(entity, component)

    def has(self, entity: Entity[Any], component_type: type) -> bool:
        return self._storage.has_component(entity, component_type)

    def remove(self, entity: Entity[Any], component_type: type) -> bool:
        """Remove a component. Returns True if it existed."""
        return self._storage.remove_component(entity, component_type)

    def entities(self) -> Iterator[Entity[Any]]:
        """Iterate entities that carry components."""
        return self._storage.all_entities()

    def __getitem__(self, key: tuple[Entity[Any], type[ComponentT]]) -> ComponentT:
        """Get component copy: world[entity, Type].

        Raises:
            KeyError: If the entity has no component of that type.
        """
        entity, component_type = key
        component = self.get_copy(entity, component_type)
        if component is None:
            raise KeyError(f"{entity!r} has no {component_type.__name__}")
        return component

    def __setitem__(self, key: tuple[Entity[Any], type], component: Any) -> None:
        """Set component: world[entity, Type] = component."""
        entity, component_type = key
        if not isinstance(component, component_type):
            raise TypeError(
                f"Expected {component_type.__name__}, got {type(component).__name__}"
            )
        self.set(entity, component)
