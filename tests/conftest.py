from __future__ import annotations
import random

import pytest

from rogue.entities.entity import Entity
from rogue.world.grid import Grid
from rogue.world.level import Level
from rogue.world.tiles import make_tile


class FixedRng:
    """Stands in for random.Random; randint() replays a fixed script."""

    def __init__(self, rolls):
        self._rolls = list(rolls)

    def randint(self, a, b):
        value = self._rolls.pop(0)
        assert a <= value <= b, f"scripted roll {value} outside {a}..{b}"
        return value


@pytest.fixture
def make_level():
    def _make(width: int, height: int, walls=(), water=(), rng=None) -> Level:
        grid = Grid.filled(width, height, "floor")
        for x, y in walls:
            grid.insert(make_tile("wall"), x, y)
        for x, y in water:
            grid.insert(make_tile("water"), x, y)
        return Level(grid, rng if rng is not None else random.Random(0))
    return _make


@pytest.fixture
def place():
    def _place(level: Level, entity: Entity, *, player: bool = False) -> Entity:
        if player:
            level.set_player(entity, place=False)
        else:
            level.add(entity, place=False)
        return entity
    return _place
