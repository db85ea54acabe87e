# rogue/core/clock.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from rogue.settings import TICK_MS, MAX_TICKS, FPS_CAP

@dataclass
class TickClock:
    """Fixed render-tick accumulator.
    tick() -> how many TICK_MS render ticks are due this frame (0..MAX_TICKS).
    Backlog beyond MAX_TICKS is dropped.
    """
    accumulator: int = 0

    def __post_init__(self) -> None:
        self._clock = pygame.time.Clock()

    def tick(self) -> int:
        self.accumulator += self._clock.tick(FPS_CAP)

        due = 0
        while self.accumulator >= TICK_MS and due < MAX_TICKS:
            self.accumulator -= TICK_MS
            due += 1
        if self.accumulator >= TICK_MS:
            self.accumulator %= TICK_MS
        return due
