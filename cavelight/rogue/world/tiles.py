# rogue/world/tiles.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from rogue import settings
from rogue.world.animation import Animation
from rogue.world.frame import Frame

if TYPE_CHECKING:
    from rogue.entities.entity import Entity


@dataclass(frozen=True, slots=True)
class TileKind:
    name: str
    impassable: bool
    opaque: bool
    frames: tuple[Frame, ...]


FLOOR = TileKind("floor", impassable=False, opaque=False, frames=(Frame("."),))
WALL = TileKind("wall", impassable=True, opaque=True, frames=(Frame("#"),))
WATER = TileKind(
    "water", impassable=False, opaque=False,
    frames=(Frame("~", settings.WATER_COLOR), Frame("≈", settings.WATER_COLOR)),
)

TILE_KINDS: dict[str, TileKind] = {k.name: k for k in (FLOOR, WALL, WATER)}


# --- step handlers (kind name -> handler) ---
StepHandler = Callable[["Tile", "Entity"], Optional[str]]


def _wade(tile: "Tile", entity: "Entity") -> str | None:
    if entity.kind.name == "player":
        return "You wade through shallow water."
    return None


ON_STEP: dict[str, StepHandler] = {
    "water": _wade,
}


@dataclass(slots=True)
class Tile:
    kind: TileKind
    animation: Animation = field(init=False)

    def __post_init__(self) -> None:
        self.animation = Animation.cycle(self.kind.frames)

    @property
    def name(self) -> str:
        return self.kind.name

    @property
    def impassable(self) -> bool:
        return self.kind.impassable

    @property
    def opaque(self) -> bool:
        return self.kind.opaque

    def on_step(self, entity: "Entity") -> str | None:
        handler = ON_STEP.get(self.kind.name)
        if handler is None:
            return None
        return handler(self, entity)


def make_tile(name: str) -> Tile:
    return Tile(TILE_KINDS[name])
