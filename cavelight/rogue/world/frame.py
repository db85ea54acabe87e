# rogue/world/frame.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence

from rogue import settings


@dataclass(frozen=True, slots=True)
class Frame:
    """One displayable glyph with its foreground/background colors."""
    character: str
    fg: str = settings.DEFAULT_FG
    bg: str = settings.DEFAULT_BG


# Nothing visible here.
BLANK_FRAME = Frame(" ", settings.DEFAULT_FG, settings.DEFAULT_BG)

FrameBuffer = list[list[Frame]]


def buffer_to_text(buffer: Iterable[Sequence[Frame]]) -> str:
    return "\n".join("".join(f.character for f in row) for row in buffer)
