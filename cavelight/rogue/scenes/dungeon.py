# rogue/scenes/dungeon.py
from __future__ import annotations
import logging
import pygame
from dataclasses import dataclass, field

from rogue import settings
from rogue.core.keys import action_for_key, perform
from rogue.world.camera import VisibilityCamera
from rogue.world.frame import BLANK_FRAME, Frame, FrameBuffer
from rogue.world.level import Level

logger = logging.getLogger(__name__)


@dataclass
class DungeonScene:
    """
    Exploration layer:
    - Key presses -> actions; a spent turn runs the world and re-anchors the camera
    - Free-look panning inside the lit area
    - One camera crop per render tick, drawn as a glyph grid
    - HUD line with HP / turn / last message
    """
    screen: pygame.Surface
    level: Level
    camera: VisibilityCamera
    _buffer: FrameBuffer = field(default_factory=list, init=False)
    _glyphs: dict[Frame, pygame.Surface] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self._font = pygame.font.SysFont("monospace", settings.FONT_SIZE)
        self.refresh()

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        action = action_for_key(event.key)
        if action is None:
            return
        if self.level.game_over and action not in ("quit", "free_look"):
            return
        if perform(action, self.level, self.camera):
            self.level.update()
            if self.level.player is not None:
                self.camera.anchor_on(self.level.player)
            if self.level.game_over:
                self.level.log("You die...")

    # ---- Render tick ----
    def refresh(self) -> None:
        self._buffer = self.camera.crop()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(pygame.Color(settings.DEFAULT_BG))
        cs = settings.CELL_SIZE
        for row, frames in enumerate(self._buffer):
            for col, frame in enumerate(frames):
                if frame == BLANK_FRAME:
                    continue
                rect = pygame.Rect(col * cs, row * cs, cs, cs)
                surface.fill(pygame.Color(frame.bg), rect)
                glyph = self._glyph(frame)
                surface.blit(glyph, glyph.get_rect(center=rect.center))
        self._draw_hud(surface)

    def _glyph(self, frame: Frame) -> pygame.Surface:
        glyph = self._glyphs.get(frame)
        if glyph is None:
            glyph = self._font.render(frame.character, True, pygame.Color(frame.fg))
            self._glyphs[frame] = glyph
        return glyph

    def _draw_hud(self, surface: pygame.Surface) -> None:
        top = self.camera.side * settings.CELL_SIZE
        sw, _ = surface.get_size()
        surface.fill(pygame.Color(settings.HUD_BG), pygame.Rect(0, top, sw, settings.HUD_HEIGHT))

        player = self.level.player
        if player is not None:
            max_hp = (player.former_kind or player.kind).max_hp
            hp = f"HP {player.hp}/{max_hp}"
        else:
            hp = "HP -"
        parts = [hp, f"Turn {self.level.turn}"]
        if self.level.last_message:
            parts.append(self.level.last_message)
        text = self._font.render("  ".join(parts), True, pygame.Color(settings.HUD_TEXT))
        surface.blit(text, (6, top + 4))

        if self.camera.free_look:
            look = self._font.render("LOOK", True, pygame.Color(settings.FREE_LOOK_TEXT))
            surface.blit(look, (sw - look.get_width() - 6, top + 4))
