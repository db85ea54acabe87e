# rogue/entities/kinds.py
from __future__ import annotations
from dataclasses import dataclass

from rogue import settings
from rogue.world.frame import Frame

@dataclass(frozen=True, slots=True)
class EntityKind:
    name: str
    character: str
    color: str
    draw_order: int
    blocks: bool = True            # occupies its cell
    hostile: bool = False          # attacks / can be attacked by the player
    max_hp: int = 1
    attack_bonus: int = 0
    defense: int = 10
    damage: str = "1d2"            # dice notation
    revive_turns: int | None = None

    @property
    def frames(self) -> tuple[Frame, ...]:
        return (Frame(self.character, self.color),)


PLAYER = EntityKind(
    "player", "@", settings.PLAYER_COLOR, settings.DRAW_ORDER_PLAYER,
    max_hp=settings.PLAYER_MAX_HP,
    attack_bonus=settings.PLAYER_ATTACK_BONUS,
    defense=settings.PLAYER_DEFENSE,
    damage=settings.PLAYER_DAMAGE,
    revive_turns=settings.PLAYER_REVIVE_TURNS,
)

GOBLIN = EntityKind(
    "goblin", "g", settings.GOBLIN_COLOR, settings.DRAW_ORDER_MONSTER,
    hostile=True,
    max_hp=settings.GOBLIN_MAX_HP,
    attack_bonus=settings.GOBLIN_ATTACK_BONUS,
    defense=settings.GOBLIN_DEFENSE,
    damage=settings.GOBLIN_DAMAGE,
    revive_turns=settings.GOBLIN_REVIVE_TURNS,
)

CORPSE = EntityKind(
    "corpse", "%", settings.CORPSE_COLOR, settings.DRAW_ORDER_CORPSE,
    blocks=False,
)

ENTITY_KINDS: dict[str, EntityKind] = {k.name: k for k in (PLAYER, GOBLIN, CORPSE)}
