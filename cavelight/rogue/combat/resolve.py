# rogue/combat/resolve.py
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal
import logging
import random

from rogue import settings as S
from rogue.combat.dice import Dice, roll

if TYPE_CHECKING:
    from rogue.entities.entity import Entity

logger = logging.getLogger(__name__)

Outcome = Literal["miss", "hit", "crit"]

@dataclass(slots=True)
class AttackResult:
    attacker: str
    defender: str
    outcome: Outcome
    roll: int
    total: int              # roll + attack bonus
    defense: int
    damage: int = 0
    killed: bool = False

    @property
    def landed(self) -> bool:
        return self.outcome != "miss"

    def as_text(self) -> str:
        if not self.landed:
            return f"The {self.attacker} misses the {self.defender} ({self.total} vs {self.defense})."
        verb = "crits" if self.outcome == "crit" else "hits"
        text = f"The {self.attacker} {verb} the {self.defender} for {self.damage}."
        if self.killed:
            text += f" The {self.defender} dies!"
        return text

def roll_to_hit(attack_bonus: int, defense: int, rng: random.Random) -> tuple[Outcome, int, int]:
    """Return (outcome, natural roll, total). Natural 20 crits, natural 1 misses."""
    natural = roll(S.ATTACK_DIE, rng)
    total = natural + attack_bonus
    if natural >= S.CRIT_ROLL:
        return "crit", natural, total
    if natural <= S.FUMBLE_ROLL:
        return "miss", natural, total
    return ("hit" if total >= defense else "miss"), natural, total

def roll_damage(notation: str, outcome: Outcome, rng: random.Random) -> int:
    if outcome == "miss":
        return 0
    dice = Dice.parse(notation)
    dmg = dice.roll(rng)
    if outcome == "crit":
        dmg += dice.roll(rng)
    return max(1, dmg)

def resolve_attack(attacker: "Entity", defender: "Entity", rng: random.Random) -> AttackResult:
    """Roll one melee attack and apply its damage to `defender`."""
    a, d = attacker.kind, defender.kind
    attacker_name, defender_name = attacker.name, defender.name
    outcome, natural, total = roll_to_hit(a.attack_bonus, d.defense, rng)
    dmg = roll_damage(a.damage, outcome, rng)
    res = AttackResult(attacker_name, defender_name, outcome, natural, total, d.defense, damage=dmg)
    if dmg > 0:
        res.killed = defender.take_damage(dmg)
    logger.info("%s -> %s: %s (roll %d, total %d vs %d, dmg %d)",
                attacker_name, defender_name, outcome, natural, total, d.defense, dmg)
    return res
