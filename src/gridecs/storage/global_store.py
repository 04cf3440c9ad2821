"""Single-value store."""

from __future__ import annotations

from typing import Generic, Self, TypeVar

T = TypeVar("T")


class Global(Generic[T]):
    """Holds one value per world.

    Usage:
        store = Global.initialize(0)
        store.write(store.read() + 1)
    """

    __slots__ = ("_value",)

    def __init__(self, value: T):
        self._value = value

    @classmethod
    def initialize(cls, default: T) -> Self:
        return cls(default)

    def read(self) -> T:
        return self._value

    def write(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Global({self._value!r})"
