# rogue/world/cave.py
from __future__ import annotations
import logging
import random

from rogue import settings
from rogue.world.grid import Grid
from rogue.world.tiles import make_tile

logger = logging.getLogger(__name__)

NEIGHBOURHOOD: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (1, 0, -1) for dx in (-1, 0, 1)
)

def count_walls(grid: Grid, x: int, y: int) -> int:
    """Walls in the 3x3 block centred on (x, y), the centre included.
    Off-map neighbours don't count."""
    return sum(grid.is_kind(x + dx, y + dy, "wall") for dx, dy in NEIGHBOURHOOD)

def random_fill(grid: Grid, rng: random.Random, wall_frequency: float = settings.WALL_FREQUENCY) -> None:
    for x, y in grid.coords():
        if rng.random() <= wall_frequency:
            grid.insert(make_tile("wall"), x, y)
        else:
            grid.insert(make_tile("floor"), x, y)

def run_cellular_automaton(grid: Grid, threshold: int = settings.CAVE_WALL_THRESHOLD) -> int:
    """One in-place pass. Floors with enough surrounding walls become walls;
    walls are never carved back out. Returns how many cells changed."""
    changed = 0
    for y in range(1, grid.height - 1):
        for x in range(0, grid.width - 1):
            if count_walls(grid, x, y) >= threshold and not grid.is_kind(x, y, "wall"):
                grid.insert(make_tile("wall"), x, y)
                changed += 1
    return changed

def flood_water(grid: Grid, rng: random.Random, frequency: float = settings.WATER_FREQUENCY) -> None:
    for x, y in grid.coords():
        if grid.is_kind(x, y, "floor") and rng.random() < frequency:
            grid.insert(make_tile("water"), x, y)

def generate_cave(
    width: int,
    height: int,
    rng: random.Random,
    *,
    iterations: int = settings.CAVE_ITERATIONS,
) -> Grid:
    grid = Grid(width, height)
    random_fill(grid, rng)
    for i in range(iterations):
        changed = run_cellular_automaton(grid)
        logger.debug("cave pass %d filled %d cells", i + 1, changed)
    flood_water(grid, rng)
    return grid
