"""Dice battles between two territories."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from warlite.territory import Territory

DIE_FACES = 6


class SameColorError(ValueError):
    """Raised when both territories belong to the same army."""

    def __init__(self) -> None:
        super().__init__("Os territorios pertecem a mesma cor.")


class Outcome(enum.Enum):
    """Who won a single battle."""

    ATTACK_WINS = "attack"
    DEFENSE_WINS = "defense"
    TIE = "tie"


@dataclass(frozen=True)
class BattleResult:
    """What happened in one battle."""

    attacker_name: str
    defender_name: str
    attacker_color: str
    attacker_roll: int
    defender_roll: int
    outcome: Outcome
    conquered: bool = False
    attacker_exhausted: bool = False

    def report(self) -> str:
        """Text describing the battle for the player."""
        if self.outcome is Outcome.TIE:
            return "Houve um empate, ninguem perde!"
        lines = [
            "--- RESULTADO DA BATALHA ---",
            f"O atacante {self.attacker_name} rolou um dado e tirou: {self.attacker_roll}",
            f"O defensor {self.defender_name} rolou um dado e tirou: {self.defender_roll}",
        ]
        if self.outcome is Outcome.ATTACK_WINS:
            lines.append("VITORIA DO ATAQUE!, o defensor perdeu uma tropa.")
            if self.conquered:
                lines.append(
                    f"CONQUISTA!, O territorio {self.defender_name} for dominado "
                    f"pelo Exercito {self.attacker_color}!"
                )
        else:
            lines.append("VITORIA DA DEFESA!, o atacante perdeu uma tropa.")
            if self.attacker_exhausted:
                lines.append("Suas tropas acabaram!")
        return "\n".join(lines)


def roll_die(rng: random.Random) -> int:
    """Roll one six-sided die."""
    return rng.randint(1, DIE_FACES)


def attack(attacker: Territory, defender: Territory, rng: random.Random) -> BattleResult:
    """Fight one battle, updating both territories in place.

    The loser of the roll loses one troop; a defender left with no troops is
    taken over by the attacker's army and keeps a single troop.
    """
    attacker_roll = roll_die(rng)
    defender_roll = roll_die(rng)

    if attacker.color == defender.color:
        raise SameColorError()

    conquered = False
    exhausted = False
    if attacker_roll > defender_roll:
        outcome = Outcome.ATTACK_WINS
        defender.troops -= 1
        if defender.troops == 0:
            defender.color = attacker.color
            defender.troops += 1
            conquered = True
    elif attacker_roll < defender_roll:
        outcome = Outcome.DEFENSE_WINS
        attacker.troops -= 1
        exhausted = attacker.troops == 1
    else:
        outcome = Outcome.TIE

    return BattleResult(
        attacker_name=attacker.name,
        defender_name=defender.name,
        attacker_color=attacker.color,
        attacker_roll=attacker_roll,
        defender_roll=defender_roll,
        outcome=outcome,
        conquered=conquered,
        attacker_exhausted=exhausted,
    )