# rogue/world/animation.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence

from rogue.world.frame import Frame


@dataclass(slots=True)
class Animation:
    """Cyclic frame sequence.

    next_frame() returns the current frame and advances the index, so every
    draw moves the animation along. Use `current` to peek without advancing.
    """
    frames: tuple[Frame, ...]
    index: int = field(default=0)

    def __post_init__(self) -> None:
        self.frames = tuple(self.frames)
        if not self.frames:
            raise ValueError("animation needs at least one frame")
        self.index %= len(self.frames)

    @classmethod
    def still(cls, frame: Frame) -> "Animation":
        return cls((frame,))

    @classmethod
    def cycle(cls, frames: Sequence[Frame]) -> "Animation":
        return cls(tuple(frames))

    @property
    def current(self) -> Frame:
        return self.frames[self.index]

    @property
    def animated(self) -> bool:
        return len(self.frames) > 1

    def next_frame(self) -> Frame:
        frame = self.frames[self.index]
        self.index = (self.index + 1) % len(self.frames)
        return frame

    def reset(self) -> None:
        self.index = 0
