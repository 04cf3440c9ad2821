"""Entity identity functionality: opaque integer handles."""

from gridecs.core.identity.models import Entity, unentity

__all__ = [
    "Entity",
    "unentity",
]
