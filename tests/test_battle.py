import random

import pytest

from warlite.battle import BattleResult, Outcome, SameColorError, attack, roll_die
from warlite.territory import Territory


class ScriptedDice:
    def __init__(self, *values):
        self._values = list(values)

    def randint(self, low, high):
        value = self._values.pop(0)
        assert low <= value <= high
        return value


def test_roll_die_stays_within_faces():
    rng = random.Random(42)
    rolls = {roll_die(rng) for _ in range(500)}
    assert rolls == set(range(1, 7))


def test_same_color_raises_and_keeps_troops():
    a = Territory("A", "Azul", 3)
    b = Territory("B", "Azul", 2)
    with pytest.raises(SameColorError):
        attack(a, b, ScriptedDice(6, 1))
    assert (a.troops, b.troops) == (3, 2)


def test_same_color_error_message():
    assert str(SameColorError()) == "Os territorios pertecem a mesma cor."


def test_attack_win_removes_defender_troop():
    a = Territory("A", "Azul", 3)
    b = Territory("B", "Verde", 3)
    result = attack(a, b, ScriptedDice(5, 2))
    assert result.outcome is Outcome.ATTACK_WINS
    assert not result.conquered
    assert (a.troops, b.troops) == (3, 2)
    assert b.color == "Verde"


def test_attack_win_conquers_empty_territory():
    a = Territory("A", "Azul", 3)
    b = Territory("B", "Verde", 1)
    result = attack(a, b, ScriptedDice(6, 1))
    assert result.conquered
    assert b == Territory("B", "Azul", 1)
    assert "CONQUISTA!, O territorio B for dominado pelo Exercito Azul!" in result.report()


def test_defense_win_removes_attacker_troop():
    a = Territory("A", "Azul", 4)
    b = Territory("B", "Verde", 2)
    result = attack(a, b, ScriptedDice(1, 3))
    assert result.outcome is Outcome.DEFENSE_WINS
    assert (a.troops, b.troops) == (3, 2)
    assert not result.attacker_exhausted


def test_defense_win_reports_exhausted_attacker():
    a = Territory("A", "Azul", 2)
    b = Territory("B", "Verde", 2)
    result = attack(a, b, ScriptedDice(2, 4))
    assert result.attacker_exhausted
    assert result.report().splitlines()[-1] == "Suas tropas acabaram!"


def test_tie_changes_nothing():
    a = Territory("A", "Azul", 2)
    b = Territory("B", "Verde", 2)
    result = attack(a, b, ScriptedDice(4, 4))
    assert result.outcome is Outcome.TIE
    assert (a.troops, b.troops) == (2, 2)
    assert result.report() == "Houve um empate, ninguem perde!"


def test_report_lists_rolls():
    result = BattleResult("A", "B", "Azul", 5, 2, Outcome.ATTACK_WINS)
    lines = result.report().splitlines()
    assert lines[0] == "--- RESULTADO DA BATALHA ---"
    assert lines[1] == "O atacante A rolou um dado e tirou: 5"
    assert lines[2] == "O defensor B rolou um dado e tirou: 2"
    assert lines[3] == "VITORIA DO ATAQUE!, o defensor perdeu uma tropa."