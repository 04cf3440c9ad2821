"""Pure helpers over component capabilities."""

from __future__ import annotations

from gridecs.core.component.models import Hashable


def max_index(component_type: type[Hashable]) -> int:
    """Highest flat index a Hashable component type can produce."""
    return component_type.max_hash().hash()


def table_length(component_type: type[Hashable]) -> int:
    """Number of slots a flat table needs for a Hashable component type."""
    return max_index(component_type) + 1
