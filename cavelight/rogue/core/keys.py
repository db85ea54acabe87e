# rogue/core/keys.py
from __future__ import annotations
from typing import Callable
import pygame

from rogue.world.camera import VisibilityCamera
from rogue.world.level import Level

# pygame key -> action name
KEY_BINDINGS: dict[int, str] = {
    # numpad
    pygame.K_KP1: "move_sw",
    pygame.K_KP2: "move_s",
    pygame.K_KP3: "move_se",
    pygame.K_KP4: "move_w",
    pygame.K_KP5: "wait",
    pygame.K_KP6: "move_e",
    pygame.K_KP7: "move_nw",
    pygame.K_KP8: "move_n",
    pygame.K_KP9: "move_ne",
    # vi keys
    pygame.K_h: "move_w",
    pygame.K_j: "move_s",
    pygame.K_k: "move_n",
    pygame.K_l: "move_e",
    pygame.K_y: "move_nw",
    pygame.K_u: "move_ne",
    pygame.K_b: "move_sw",
    pygame.K_n: "move_se",
    pygame.K_PERIOD: "wait",
    # arrows
    pygame.K_LEFT: "move_w",
    pygame.K_RIGHT: "move_e",
    pygame.K_UP: "move_n",
    pygame.K_DOWN: "move_s",
    # misc
    pygame.K_x: "free_look",
    pygame.K_ESCAPE: "quit",
}

Handler = Callable[[Level, VisibilityCamera], bool]


def _move(direction: str) -> Handler:
    def handler(level: Level, camera: VisibilityCamera) -> bool:
        if camera.free_look:
            camera.move(direction)
            return False
        if level.player is None:
            return False
        return level.act(level.player, direction)
    return handler


def _wait(level: Level, camera: VisibilityCamera) -> bool:
    return not camera.free_look and level.player is not None and level.player.alive


def _free_look(level: Level, camera: VisibilityCamera) -> bool:
    camera.toggle_free_look()
    return False


def _quit(level: Level, camera: VisibilityCamera) -> bool:
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    return False


ACTIONS: dict[str, Handler] = {
    **{f"move_{d}": _move(d) for d in ("n", "s", "e", "w", "nw", "ne", "sw", "se")},
    "wait": _wait,
    "free_look": _free_look,
    "quit": _quit,
}


def action_for_key(key: int) -> str | None:
    return KEY_BINDINGS.get(key)


def perform(action: str, level: Level, camera: VisibilityCamera) -> bool:
    """Run an action; True if it used up the player's turn."""
    return ACTIONS[action](level, camera)
