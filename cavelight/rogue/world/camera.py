# rogue/world/camera.py
from __future__ import annotations
import logging
from dataclasses import dataclass
import pygame

from rogue import settings
from rogue.entities.entity import Entity
from rogue.world.directions import Direction, resolve_direction
from rogue.world.frame import BLANK_FRAME, FrameBuffer
from rogue.world.grid import Coord
from rogue.world.level import Level
from rogue.world.visibility import compute_visible_set

logger = logging.getLogger(__name__)

@dataclass(slots=True)
class VisibilityCamera:
    """Square viewport of side 2*radius+1 around (x, y), lit from the anchor.

    The anchor is where sight rays start (the tracked entity). The camera's own
    (x, y) is the viewport centre and only leaves the anchor in free-look.
    """
    level: Level
    radius: int = settings.SIGHT_RADIUS
    x: int = 0
    y: int = 0
    anchor_x: int = 0
    anchor_y: int = 0
    free_look: bool = False
    angle_step: float = settings.RAY_ANGLE_STEP

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"camera radius must be >= 0, got {self.radius}")

    @classmethod
    def following(cls, level: Level, entity: Entity, radius: int = settings.SIGHT_RADIUS) -> "VisibilityCamera":
        cam = cls(level, radius)
        cam.anchor_on(entity)
        return cam

    @property
    def side(self) -> int:
        return 2 * self.radius + 1

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)

    @property
    def anchor(self) -> Coord:
        return (self.anchor_x, self.anchor_y)

    # ---- anchoring ----
    def anchor_on(self, entity: Entity) -> None:
        self.anchor_x, self.anchor_y = entity.pos
        if not self.free_look:
            self.x, self.y = self.anchor_x, self.anchor_y

    # ---- free-look ----
    def enter_free_look(self) -> None:
        self.free_look = True
        logger.debug("free-look on at %s", self.pos)

    def exit_free_look(self) -> None:
        self.free_look = False
        self.x, self.y = self.anchor_x, self.anchor_y
        logger.debug("free-look off, back on anchor %s", self.anchor)

    def toggle_free_look(self) -> bool:
        if self.free_look:
            self.exit_free_look()
        else:
            self.enter_free_look()
        return self.free_look

    def move(self, direction: Direction) -> bool:
        """Free-look pan; the destination must be currently visible."""
        if not self.free_look:
            return False
        dx, dy = resolve_direction(direction)
        nx, ny = self.x + dx, self.y + dy
        if (nx, ny) not in self.visible_set():
            return False
        self.x, self.y = nx, ny
        return True

    # ---- visibility ----
    def visible_set(self) -> set[Coord]:
        # Rebuilt on every call, never cached between frames.
        return compute_visible_set(self.level.grid, self.anchor, self.radius, self.angle_step)

    def light_box(self) -> pygame.Rect:
        """Cells within `radius` of the anchor on both axes."""
        r = self.radius
        return pygame.Rect(self.anchor_x - r, self.anchor_y - r, self.side, self.side)

    def to_view(self, x: int, y: int) -> Coord | None:
        """World cell -> buffer (col, row), or None when outside the viewport."""
        col, row = x - self.x + self.radius, y - self.y + self.radius
        if 0 <= col < self.side and 0 <= row < self.side:
            return col, row
        return None

    # ---- render ----
    def crop(self) -> FrameBuffer:
        """Fresh (2r+1)x(2r+1) buffer indexed [row][col].

        Drawing pulls next_frame() from every tile and entity it shows, so
        animated cells advance once per crop.
        """
        grid = self.level.grid
        visible = self.visible_set()
        box = self.light_box()
        r = self.radius

        buffer: FrameBuffer = [[BLANK_FRAME] * self.side for _ in range(self.side)]
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                wx, wy = self.x + dx, self.y + dy
                if not grid.in_bounds(wx, wy) or not box.collidepoint(wx, wy):
                    continue
                if (wx, wy) not in visible:
                    continue
                tile = grid.get(wx, wy)
                if tile is None:
                    continue
                buffer[dy + r][dx + r] = tile.animation.next_frame()

        # entities on top, lowest draw order first
        for entity in sorted(self.level.entities, key=lambda e: e.draw_order):
            if entity.pos not in visible:
                continue
            cell = self.to_view(*entity.pos)
            if cell is None:
                continue
            col, row = cell
            buffer[row][col] = entity.animation.next_frame()

        return buffer
