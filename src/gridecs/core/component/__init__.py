"""Component functionality: capability protocols and helpers."""

from gridecs.core.component.models import Hashable
from gridecs.core.component.operations import max_index, table_length

__all__ = [
    "Hashable",
    "max_index",
    "table_length",
]
