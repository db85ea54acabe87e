# rogue/world/level.py
from __future__ import annotations
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Optional

from rogue import settings
from rogue.combat.resolve import AttackResult, resolve_attack
from rogue.entities.entity import Entity, make_goblin, make_player
from rogue.world.cave import generate_cave
from rogue.world.directions import Direction, resolve_direction, toward
from rogue.world.grid import Coord, Grid

logger = logging.getLogger(__name__)

def chebyshev(a: Coord, b: Coord) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))

@dataclass
class Level:
    """Everything one running game needs: map, entities, turn, messages, RNG.
    Passed explicitly to the camera and the scene."""
    grid: Grid
    rng: random.Random = field(default_factory=random.Random)
    entities: list[Entity] = field(default_factory=list)
    player: Optional[Entity] = None
    turn: int = 0
    messages: deque[str] = field(default_factory=lambda: deque(maxlen=settings.MESSAGE_LOG_SIZE))

    @classmethod
    def generate(
        cls,
        width: int = settings.MAP_WIDTH,
        height: int = settings.MAP_HEIGHT,
        rng: random.Random | None = None,
        *,
        enemies: int = settings.ENEMY_COUNT,
    ) -> "Level":
        rng = rng if rng is not None else random.Random(settings.RNG_SEED)
        level = cls(generate_cave(width, height, rng), rng)
        level.set_player(make_player())
        for _ in range(enemies):
            level.add(make_goblin())
        logger.debug("generated %dx%d cave with %d enemies", width, height, enemies)
        return level

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    # ---- messages ----
    def log(self, message: str) -> None:
        self.messages.append(message)
        logger.info(message)

    @property
    def last_message(self) -> str | None:
        return self.messages[-1] if self.messages else None

    # ---- entities ----
    def set_player(self, player: Entity, *, place: bool = True) -> None:
        self.player = player
        self.add(player, place=place)

    def free_cells(self) -> list[Coord]:
        return [c for c in self.grid.coords()
                if self.grid.is_passable(*c) and self.blocker_at(*c) is None]

    def add(self, entity: Entity, *, place: bool = True) -> None:
        """Put an entity on this level, on a random free cell unless place=False."""
        entity.level = self
        if place:
            free = self.free_cells()
            if not free:
                raise ValueError("no free cell to place entity on")
            entity.x, entity.y = self.rng.choice(free)
        self.entities.append(entity)
        self.step_on(entity)

    def remove(self, entity: Entity) -> None:
        self.entities.remove(entity)
        entity.level = None
        if entity is self.player:
            self.player = None

    def step_on(self, entity: Entity) -> None:
        tile = self.grid.get(*entity.pos)
        if tile is None:
            return
        msg = tile.on_step(entity)
        if msg:
            self.log(msg)

    def entities_at(self, x: int, y: int) -> Iterator[Entity]:
        return (e for e in self.entities if e.pos == (x, y))

    def blocker_at(self, x: int, y: int) -> Entity | None:
        for e in self.entities_at(x, y):
            if e.kind.blocks:
                return e
        return None

    def living_enemies(self) -> list[Entity]:
        return [e for e in self.entities if e.alive and e.kind.hostile]

    def corpses(self) -> list[Entity]:
        return [e for e in self.entities if not e.alive]

    # ---- actions ----
    def attack(self, attacker: Entity, defender: Entity) -> AttackResult:
        res = resolve_attack(attacker, defender, self.rng)
        self.log(res.as_text())
        return res

    def act(self, entity: Entity, direction: Direction) -> bool:
        """Bump to attack an opposing blocker, otherwise move. True if the
        entity did something."""
        if not entity.alive:
            return False
        dx, dy = resolve_direction(direction)
        target = self.blocker_at(entity.x + dx, entity.y + dy)
        if target is not None and target is not entity and target.alive:
            if target.kind.hostile != entity.kind.hostile:
                self.attack(entity, target)
                return True
            return False
        return entity.move((dx, dy))

    def _enemy_turn(self, enemy: Entity) -> None:
        player = self.player
        if player is None or not player.alive:
            return
        dist = chebyshev(enemy.pos, player.pos)
        if dist <= 1:
            self.attack(enemy, player)
            return
        if dist > settings.ENEMY_CHASE_RADIUS:
            return
        dx, dy = toward(enemy.pos, player.pos)
        # diagonal first, then either axis alone
        for step in ((dx, dy), (dx, 0), (0, dy)):
            if step != (0, 0) and enemy.move(step):
                return

    def update(self) -> None:
        """Advance the world one turn after the player acted."""
        for enemy in self.living_enemies():
            self._enemy_turn(enemy)
        for corpse in self.corpses():
            if corpse.tick_corpse():
                self.log(f"The {corpse.name} rises again!")
        self.turn += 1

    @property
    def game_over(self) -> bool:
        return self.player is not None and not self.player.alive
