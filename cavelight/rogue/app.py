# rogue/app.py
from __future__ import annotations
import logging
import random
import pygame
from rogue import settings
from rogue.core.clock import TickClock
from rogue.scenes.dungeon import DungeonScene
from rogue.world.camera import VisibilityCamera
from rogue.world.level import Level

def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)

    pygame.init()
    pygame.display.set_caption(settings.WINDOW_TITLE)
    screen = pygame.display.set_mode(settings.SCREEN_SIZE)
    clock = TickClock()

    level = Level.generate(rng=random.Random(settings.RNG_SEED))
    camera = VisibilityCamera.following(level, level.player, settings.SIGHT_RADIUS)
    scene = DungeonScene(screen, level, camera)

    running = True
    while running:
        # -- Input --
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                scene.handle_event(event)

        # -- Render ticks --
        ticks = clock.tick()
        for _ in range(ticks):
            scene.refresh()
        if ticks:
            scene.draw(screen)
            pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
