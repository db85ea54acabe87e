# rogue/world/directions.py
from __future__ import annotations
from typing import Union

Delta = tuple[int, int]
Direction = Union[str, Delta]

# y grows downward
DIRECTIONS: dict[str, Delta] = {
    "w":  (-1,  0),
    "e":  ( 1,  0),
    "n":  ( 0, -1),
    "s":  ( 0,  1),
    "nw": (-1, -1),
    "ne": ( 1, -1),
    "sw": (-1,  1),
    "se": ( 1,  1),
}

def resolve_direction(direction: Direction) -> Delta:
    """Name ('nw') or raw (dx, dy) -> (dx, dy)."""
    if isinstance(direction, str):
        try:
            return DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
    dx, dy = direction
    return int(dx), int(dy)

def sign(v: int) -> int:
    return (v > 0) - (v < 0)

def toward(src: tuple[int, int], dst: tuple[int, int]) -> Delta:
    """Unit step (8-way) from src toward dst."""
    return sign(dst[0] - src[0]), sign(dst[1] - src[1])
