"""Local in-memory component storage.

Simple dict-based storage suitable for single-process use and testing.
One component per type per entity.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator
from typing import Any, TypeVar

from gridecs.core.identity import Entity

T = TypeVar("T")


class LocalStorage:
    """Simple in-memory storage using nested dicts.

    Structure:
        _components[entity][component_type] = component_instance

    Entities are created implicitly by their first component; this store never
    allocates identifiers itself.
    """

    def __init__(self) -> None:
        self._components: dict[Entity[Any], dict[type, Any]] = {}

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity: object) -> bool:
        return entity in self._components

    def set_component(self, entity: Entity[Any], component: Any) -> None:
        """Set or update a component on an entity.

        Args:
            entity: Entity to modify.
            component: Component instance to set (type inferred).
        """
        self._components.setdefault(entity, {})[type(component)] = component

    def get_component(
        self, entity: Entity[Any], component_type: type[T], copy: bool = True
    ) -> T | None:
        """Get a component from an entity.

        Args:
            entity: Entity to query.
            component_type: Type of component to retrieve.
            copy: Whether to return a copy of the component (default True).

        Returns:
            Component instance or None if not present.
        """
        component = self._components.get(entity, {}).get(component_type)
        if component is None:
            return None
        return cp.deepcopy(component) if copy else component

    def has_component(self, entity: Entity[Any], component_type: type) -> bool:
        return component_type in self._components.get(entity, {})

    def remove_component(self, entity: Entity[Any], component_type: type) -> bool:
        """Remove a component from an entity.

        An entity left without components is forgotten entirely.

        Returns:
            True if component was removed, False if not present.
        """
        components = self._components.get(entity)
        if components is None or component_type not in components:
            return False
        del components[component_type]
        if not components:
            del self._components[entity]
        return True

    def all_entities(self) -> Iterator[Entity[Any]]:
        """Iterate entities carrying at least one component, in insertion order."""
        yield from list(self._components)
