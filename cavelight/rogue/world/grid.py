# rogue/world/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from rogue.world.tiles import Tile, make_tile

Coord = tuple[int, int]

@dataclass(slots=True)
class Grid:
    width: int
    height: int
    cells: list[list[Tile | None]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid size must be positive, got {self.width}x{self.height}")
        if not self.cells:
            self.cells = [[None] * self.width for _ in range(self.height)]

    @classmethod
    def filled(cls, width: int, height: int, kind: str = "floor") -> "Grid":
        grid = cls(width, height)
        for y in range(height):
            for x in range(width):
                grid.insert(make_tile(kind), x, y)
        return grid

    # --- access ---
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile | None:
        # no negative-index wraparound
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def insert(self, tile: Tile, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        self.cells[y][x] = tile

    def coords(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    # --- sight / passability ---
    def is_opaque(self, x: int, y: int) -> bool:
        tile = self.get(x, y)
        return tile is not None and tile.opaque

    def collide(self, x: int, y: int) -> bool:
        """True if (x, y) can't be entered: impassable tile or off the map."""
        tile = self.get(x, y)
        return tile is None or tile.impassable

    def is_passable(self, x: int, y: int) -> bool:
        return not self.collide(x, y)

    def is_kind(self, x: int, y: int, name: str) -> bool:
        tile = self.get(x, y)
        return tile is not None and tile.name == name
