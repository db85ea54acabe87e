# rogue/world/visibility.py
from __future__ import annotations
import math
from typing import Iterator

from rogue import settings
from rogue.world.grid import Grid, Coord

def round_half_away(v: float) -> int:
    """Nearest integer, .5 rounds away from zero (Python's round() doesn't)."""
    return int(math.floor(abs(v) + 0.5)) * (1 if v >= 0 else -1)

def cast_ray(grid: Grid, origin: Coord, dx: float, dy: float) -> list[Coord]:
    """Cells along origin -> origin + (dx, dy), origin first.

    The walk takes ceil(max(|dx|, |dy|)) unit steps and rounds each sample to a
    cell. It stops after the first opaque cell, which is still included.
    Off-map cells are not opaque, so callers clip to bounds themselves.
    """
    ox, oy = origin
    step = math.ceil(max(abs(dx), abs(dy)))
    if step == 0:
        return [(ox, oy)]

    cells: list[Coord] = []
    for i in range(step + 1):
        t = i / step
        c = (round_half_away(ox + dx * t), round_half_away(oy + dy * t))
        cells.append(c)
        if grid.is_opaque(*c):
            break
    return cells

def ray_directions(radius: float, angle_step: float = settings.RAY_ANGLE_STEP) -> Iterator[tuple[float, float]]:
    """Direction vectors of length `radius`, evenly spread round the circle."""
    if angle_step <= 0:
        raise ValueError(f"angle step must be positive, got {angle_step}")
    n = math.ceil(2 * math.pi / angle_step)
    for i in range(n):
        theta = 2 * math.pi * i / n
        yield math.cos(theta) * radius, math.sin(theta) * radius

def compute_visible_set(
    grid: Grid,
    anchor: Coord,
    radius: int,
    angle_step: float = settings.RAY_ANGLE_STEP,
) -> set[Coord]:
    """Every in-bounds cell some ray from `anchor` reaches within `radius`.

    Rays are sampled at a fixed angle step, so at large radii neighbouring rays
    can skip a cell between them. The result is close to a disk but not exact.
    """
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    visible: set[Coord] = set()
    if radius == 0:
        rays = [cast_ray(grid, anchor, 0, 0)]
    else:
        rays = (cast_ray(grid, anchor, dx, dy) for dx, dy in ray_directions(radius, angle_step))
    for ray in rays:
        visible.update(c for c in ray if grid.in_bounds(*c))
    return visible
