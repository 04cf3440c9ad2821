"""Entity identity models.

Usage:
    entity = Entity(42)
    typed: Entity[Position] = Entity(7)
    raw = unentity(typed)  # 7
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

C = TypeVar("C")


@dataclass(frozen=True, slots=True, order=True)
class Entity(Generic[C]):
    """Opaque handle wrapping a never-reused integer identifier.

    The type parameter names the component the entity was created to carry.
    It only exists for type checkers: ``Entity[Position](3) == Entity[Velocity](3)``.
    """

    id: int

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Entity({self.id})"


def unentity(entity: Entity[Any]) -> int:
    """Return the raw identifier behind an entity handle."""
    return entity.id
