from __future__ import annotations
import random

import pytest

from rogue.combat.dice import Dice, roll
from rogue.combat.resolve import AttackResult, resolve_attack, roll_damage, roll_to_hit
from rogue.entities.entity import make_goblin, make_player

from conftest import FixedRng


@pytest.mark.parametrize("notation, expected", [
    ("2d6+1", Dice(2, 6, 1)),
    ("d20", Dice(1, 20, 0)),
    ("1d4-1", Dice(1, 4, -1)),
    (" 3D8 ", Dice(3, 8, 0)),
])
def test_parse_notation(notation, expected):
    assert Dice.parse(notation) == expected


@pytest.mark.parametrize("notation", ["", "abc", "2d", "2d0", "d6+", "1d6*2"])
def test_bad_notation_rejected(notation):
    with pytest.raises(ValueError):
        Dice.parse(notation)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Dice(-1, 6)


def test_bounds_and_str():
    d = Dice(2, 6, 1)
    assert (d.minimum, d.maximum) == (3, 13)
    assert str(d) == "2d6+1"
    assert str(Dice(1, 4, -1)) == "1d4-1"
    assert str(Dice(1, 20)) == "1d20"


def test_rolls_stay_in_bounds():
    rng = random.Random(42)
    d = Dice.parse("3d4+2")
    rolls = {d.roll(rng) for _ in range(500)}
    assert min(rolls) >= d.minimum
    assert max(rolls) <= d.maximum
    assert len(rolls) > 1


def test_roll_sums_each_die():
    assert roll("2d6+1", FixedRng([2, 5])) == 8


@pytest.mark.parametrize("natural, bonus, defense, outcome", [
    (20, 0, 100, "crit"),
    (1, 100, 2, "miss"),
    (10, 2, 12, "hit"),
    (9, 2, 12, "miss"),
])
def test_roll_to_hit(natural, bonus, defense, outcome):
    got, nat, total = roll_to_hit(bonus, defense, FixedRng([natural]))
    assert got == outcome
    assert nat == natural
    assert total == natural + bonus


def test_damage_on_hit_is_at_least_one():
    assert roll_damage("1d4-3", "hit", FixedRng([1])) == 1


def test_crit_rolls_damage_twice():
    assert roll_damage("1d6", "crit", FixedRng([2, 3])) == 5


def test_miss_deals_nothing():
    assert roll_damage("1d6", "miss", FixedRng([])) == 0


def test_resolve_attack_applies_damage():
    player, goblin = make_player(), make_goblin()
    res = resolve_attack(player, goblin, FixedRng([15, 2]))
    assert res.outcome == "hit"
    assert res.damage == 3                      # 1d8+1 with a 2
    assert goblin.hp == goblin.kind.max_hp - 3
    assert not res.killed
    assert res.as_text() == "The player hits the goblin for 3."


def test_resolve_attack_can_kill():
    player, goblin = make_player(), make_goblin()
    res = resolve_attack(goblin, player, FixedRng([20, 6, 6]))
    assert res.outcome == "crit"
    assert res.damage == 12
    assert player.hp == player.kind.max_hp - 12

    res = resolve_attack(goblin, player, FixedRng([20, 6, 6]))
    assert res.killed
    assert not player.alive
    assert res.as_text().endswith("The player dies!")


def test_miss_text():
    res = AttackResult("goblin", "player", "miss", roll=3, total=5, defense=12)
    assert not res.landed
    assert res.as_text() == "The goblin misses the player (5 vs 12)."


def test_attack_text_uses_entity_names():
    player, goblin = make_player(), make_goblin()
    goblin.die()
    goblin.revive()
    res = resolve_attack(goblin, player, FixedRng([1]))
    assert (res.attacker, res.defender) == ("goblin", "player")


def test_attack_roll_goes_through_dice_notation():
    # ATTACK_DIE is 1d20: one randint(1, 20) per attack
    outcome, natural, total = roll_to_hit(3, 10, FixedRng([7]))
    assert (outcome, natural, total) == ("hit", 7, 10)
