"""World state management.

Architecture Note:
    world/ is the stateful layer that ties entity allocation to component
    storage. Unlike core/ (stateless functionality), it owns runtime state.
"""

from gridecs.world.world import World

__all__ = [
    "World",
]
