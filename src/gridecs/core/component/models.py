"""Component capability protocols.

Capabilities are optional interfaces a component type can implement. They are
structural: a type opts in by providing the methods, no base class is needed.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Hashable(Protocol):
    """Component that can be stored in a flat hash table.

    Indexing is equivalent to hashing. Implementations must guarantee
    ``0 <= value.hash() <= type(value).max_hash().hash()`` for every value;
    nothing checks this at runtime.

    Example:
        @dataclass(frozen=True)
        class Level:
            value: int

            @classmethod
            def max_hash(cls) -> Level:
                return cls(9)

            def hash(self) -> int:
                return self.value
    """

    @classmethod
    def max_hash(cls) -> Self:
        """The value whose hash is the highest index; the table's upper bound."""
        ...

    def hash(self) -> int:
        """Index of this value in a flat table."""
        ...
