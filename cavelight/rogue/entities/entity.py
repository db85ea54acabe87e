# rogue/entities/entity.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from rogue.entities.kinds import CORPSE, ENTITY_KINDS, EntityKind
from rogue.world.animation import Animation
from rogue.world.directions import Direction, resolve_direction

if TYPE_CHECKING:
    from rogue.world.level import Level

logger = logging.getLogger(__name__)

Coord = tuple[int, int]

@dataclass(slots=True, eq=False)
class Entity:
    kind: EntityKind
    _x: int = 0
    _y: int = 0
    level: Optional["Level"] = field(default=None, repr=False)
    hp: int = field(default=-1)

    # corpse state
    former_kind: EntityKind | None = field(default=None, init=False)
    revive_timer: int | None = field(default=None, init=False)

    animation: Animation = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.hp < 0:
            self.hp = self.kind.max_hp
        self.animation = Animation.cycle(self.kind.frames)

    # -------- position --------
    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, x: int) -> None:
        if self.level is None or 0 <= x < self.level.grid.width:
            self._x = x

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, y: int) -> None:
        if self.level is None or 0 <= y < self.level.grid.height:
            self._y = y

    @property
    def pos(self) -> Coord:
        return (self._x, self._y)

    @property
    def draw_order(self) -> int:
        return self.kind.draw_order

    @property
    def alive(self) -> bool:
        return self.kind is not CORPSE

    @property
    def name(self) -> str:
        if self.former_kind is not None:
            return f"{self.former_kind.name} corpse"
        return self.kind.name

    # -------- movement --------
    def collide(self, x: int, y: int) -> bool:
        if self.level is None:
            raise RuntimeError(f"{self.name} at {self.pos} is not on a level")
        return self.level.grid.collide(x, y)

    def can_move(self, direction: Direction) -> bool:
        """Destination must be free; a diagonal also needs one of the two
        orthogonal cells free (no squeezing between diagonal walls)."""
        dx, dy = resolve_direction(direction)
        nx, ny = self._x + dx, self._y + dy
        if self.collide(nx, ny):
            return False
        if self.collide(self._x + dx, self._y) and self.collide(self._x, self._y + dy):
            return False
        blocker = self.level.blocker_at(nx, ny)
        return blocker is None or blocker is self

    def move(self, direction: Direction) -> bool:
        if not self.alive or not self.can_move(direction):
            return False
        dx, dy = resolve_direction(direction)
        self.x += dx
        self.y += dy
        self.level.step_on(self)
        return True

    # -------- health --------
    def take_damage(self, dmg: int) -> bool:
        """Apply damage; returns True if this killed the entity."""
        if not self.alive:
            return False
        self.hp = max(0, self.hp - max(0, int(dmg)))
        if self.hp == 0:
            self.die()
            return True
        return False

    def die(self) -> None:
        if not self.alive:
            return
        self.former_kind = self.kind
        self.revive_timer = self.kind.revive_turns
        self.kind = CORPSE
        self.hp = 0
        self.animation = Animation.cycle(self.kind.frames)
        logger.info("%s died at %s", self.former_kind.name, self.pos)

    def revive(self) -> None:
        if self.alive or self.former_kind is None:
            return
        self.kind = self.former_kind
        self.former_kind = None
        self.revive_timer = None
        self.hp = max(1, self.kind.max_hp // 2)
        self.animation = Animation.cycle(self.kind.frames)
        logger.info("%s at %s revived with %d hp", self.kind.name, self.pos, self.hp)

    def tick_corpse(self) -> bool:
        """Count the revival timer down; True if the corpse got up this turn.
        A corpse whose cell is occupied waits until it clears."""
        if self.alive or self.revive_timer is None:
            return False
        if self.revive_timer > 0:
            self.revive_timer -= 1
        if self.revive_timer > 0:
            return False
        if self.level is not None and self.level.blocker_at(*self.pos) is not None:
            return False
        self.revive()
        return True


def make_entity(kind: str, x: int = 0, y: int = 0) -> Entity:
    return Entity(ENTITY_KINDS[kind], x, y)

def make_player(x: int = 0, y: int = 0) -> Entity:
    return make_entity("player", x, y)

def make_goblin(x: int = 0, y: int = 0) -> Entity:
    return make_entity("goblin", x, y)
