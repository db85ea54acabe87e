# rogue/combat/dice.py
from __future__ import annotations
from dataclasses import dataclass
import random
import re

_NOTATION = re.compile(r"^\s*(\d*)\s*[dD]\s*(\d+)\s*(?:([+-])\s*(\d+))?\s*$")

@dataclass(frozen=True, slots=True)
class Dice:
    """NdS+M dice, e.g. Dice(2, 6, 1) is 2d6+1."""
    count: int
    sides: int
    modifier: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"dice count must be >= 0, got {self.count}")
        if self.sides < 1:
            raise ValueError(f"dice need at least one side, got {self.sides}")

    @classmethod
    def parse(cls, notation: str) -> "Dice":
        """'2d6+1', 'd20', '1d4-1' -> Dice."""
        m = _NOTATION.match(notation)
        if not m:
            raise ValueError(f"bad dice notation {notation!r}")
        count_s, sides_s, op, mod_s = m.groups()
        count = int(count_s) if count_s else 1
        mod = int(mod_s) if mod_s else 0
        if op == "-":
            mod = -mod
        return cls(count, int(sides_s), mod)

    @property
    def minimum(self) -> int:
        return self.count + self.modifier

    @property
    def maximum(self) -> int:
        return self.count * self.sides + self.modifier

    def roll(self, rng: random.Random) -> int:
        return sum(rng.randint(1, self.sides) for _ in range(self.count)) + self.modifier

    def __str__(self) -> str:
        mod = f"{self.modifier:+d}" if self.modifier else ""
        return f"{self.count}d{self.sides}{mod}"

def roll(notation: str, rng: random.Random) -> int:
    return Dice.parse(notation).roll(rng)
