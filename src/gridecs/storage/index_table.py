"""Flat table indexing entities by a Hashable component.

Indexing is equivalent to hashing: each entity sits in the slot given by its
component's hash().

Usage:
    table = IndexTable(Team)
    table.set(entity, Team.RED)
    reds = table.at(Team.RED)
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from gridecs.core.component import Hashable, max_index
from gridecs.core.identity import Entity

H = TypeVar("H", bound=Hashable)


class IndexTable(Generic[H]):
    """Slot-per-index table for one Hashable component type.

    Args:
        component_type: Hashable component type; its max_hash() sizes the table.
    """

    def __init__(self, component_type: type[H]):
        self._component_type = component_type
        self._max_index = max_index(component_type)
        self._slots: list[set[Entity[Any]]] = [set() for _ in range(self._max_index + 1)]
        self._index: dict[Entity[Any], int] = {}

    @property
    def component_type(self) -> type[H]:
        return self._component_type

    @property
    def slot_count(self) -> int:
        """Number of slots, max_hash().hash() + 1."""
        return len(self._slots)

    def __len__(self) -> int:
        """Number of indexed entities."""
        return len(self._index)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index

    def set(self, entity: Entity[Any], value: H) -> int:
        """Index an entity under its component value, moving it if already indexed.

        Returns:
            Slot the entity now occupies.

        Raises:
            ValueError: If the value hashes outside [0, max_hash().hash()].
        """
        slot = self._checked(value.hash())
        previous = self._index.get(entity)
        if previous is not None:
            self._slots[previous].discard(entity)
        self._index[entity] = slot
        self._slots[slot].add(entity)
        return slot

    def remove(self, entity: Entity[Any]) -> None:
        """Drop an entity from the table.

        Raises:
            KeyError: If the entity is not indexed.
        """
        slot = self._index.pop(entity)
        self._slots[slot].discard(entity)

    def discard(self, entity: Entity[Any]) -> None:
        if entity in self._index:
            self.remove(entity)

    def slot_of(self, entity: Entity[Any]) -> int | None:
        return self._index.get(entity)

    def at(self, value: H) -> list[Entity[Any]]:
        """Entities whose component hashes to the same slot as value."""
        return self.at_slot(self._checked(value.hash()))

    def at_slot(self, slot: int) -> list[Entity[Any]]:
        """Entities in a slot, ordered by identifier."""
        return sorted(self._slots[self._checked(slot)])

    def _checked(self, slot: int) -> int:
        if not 0 <= slot <= self._max_index:
            raise ValueError(
                f"{self._component_type.__name__} index {slot} outside [0, {self._max_index}]"
            )
        return slot
