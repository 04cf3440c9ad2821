"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pytest

from gridecs import SpatialGrid, World


@dataclass(slots=True)
class FixturePosition:
    x: float
    y: float


class FixtureTeam(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2

    @classmethod
    def max_hash(cls) -> FixtureTeam:
        return cls.BLUE

    def hash(self) -> int:
        return self.value


@pytest.fixture
def world():
    """Fresh World instance."""
    return World()


@pytest.fixture
def grid():
    """Unit-cell 2D grid with a 3x3 field."""
    return SpatialGrid(cell_size=(1.0, 1.0), field_size=(3, 3))


@pytest.fixture
def position_cls():
    return FixturePosition


@pytest.fixture
def team_cls():
    return FixtureTeam
