from __future__ import annotations
import math
import random

import pytest

from rogue.world.cave import generate_cave
from rogue.world.grid import Grid
from rogue.world.tiles import make_tile
from rogue.world.visibility import (
    cast_ray,
    compute_visible_set,
    ray_directions,
    round_half_away,
)


@pytest.mark.parametrize("value, expected", [
    (0.5, 1), (-0.5, -1), (1.49, 1), (2.5, 3), (-2.5, -3), (0.0, 0), (-1.2, -1),
])
def test_round_half_away_from_zero(value, expected):
    assert round_half_away(value) == expected


def test_zero_length_ray_is_just_the_origin():
    grid = Grid.filled(5, 5)
    assert cast_ray(grid, (2, 2), 0, 0) == [(2, 2)]


def test_open_ray_walks_every_cell():
    grid = Grid.filled(10, 10)
    assert cast_ray(grid, (0, 0), 4, 0) == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]


def test_ray_stops_on_and_includes_first_wall():
    grid = Grid.filled(10, 3)
    grid.insert(make_tile("wall"), 3, 1)
    grid.insert(make_tile("wall"), 5, 1)
    assert cast_ray(grid, (0, 1), 6, 0) == [(0, 1), (1, 1), (2, 1), (3, 1)]


def test_fractional_length_rounds_step_count_up():
    grid = Grid.filled(10, 10)
    ray = cast_ray(grid, (0, 0), 2.5, 0)
    assert len(ray) == 4                 # ceil(2.5) = 3 steps + origin
    assert ray[-1] == (3, 0)             # 2.5 rounds away from zero


def test_ray_leaving_the_map_is_not_stopped_by_bounds():
    grid = Grid.filled(3, 3)
    ray = cast_ray(grid, (1, 1), 4, 0)
    assert ray[-1] == (5, 1)


def test_opaque_cell_is_always_last_on_its_ray():
    grid = generate_cave(30, 30, random.Random(7))
    for dx, dy in ray_directions(8):
        ray = cast_ray(grid, (15, 15), dx, dy)
        for c in ray[:-1]:
            assert not grid.is_opaque(*c)


def test_wall_shadows_cells_behind_it():
    grid = Grid.filled(5, 5)
    grid.insert(make_tile("wall"), 2, 2)
    visible = compute_visible_set(grid, (0, 0), 4)
    assert (2, 2) in visible
    assert (3, 3) not in visible
    assert (4, 4) not in visible


def test_open_grid_is_roughly_a_disk():
    grid = Grid.filled(21, 21)
    radius = 5
    visible = compute_visible_set(grid, (10, 10), radius)
    for k in range(radius + 1):
        for c in ((10 + k, 10), (10 - k, 10), (10, 10 + k), (10, 10 - k)):
            assert c in visible
    for k in range(4):
        for c in ((10 + k, 10 + k), (10 - k, 10 - k), (10 + k, 10 - k), (10 - k, 10 + k)):
            assert c in visible
    for x, y in visible:
        assert math.hypot(x - 10, y - 10) <= radius + 1


def test_visible_set_is_clipped_to_the_map():
    grid = Grid.filled(5, 5)
    visible = compute_visible_set(grid, (0, 0), 3)
    assert visible
    assert all(grid.in_bounds(*c) for c in visible)


def test_visible_set_is_deterministic():
    grid = generate_cave(25, 25, random.Random(3))
    assert compute_visible_set(grid, (12, 12), 6) == compute_visible_set(grid, (12, 12), 6)


def test_radius_zero_sees_only_the_anchor():
    grid = Grid.filled(5, 5)
    assert compute_visible_set(grid, (2, 3), 0) == {(2, 3)}


def test_negative_radius_rejected():
    with pytest.raises(ValueError):
        compute_visible_set(Grid.filled(3, 3), (1, 1), -1)


def test_ray_count_meets_angle_step():
    assert len(list(ray_directions(3, 0.05))) >= 126
