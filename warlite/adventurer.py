"""Interactive game: register territories and let them attack each other."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from warlite.battle import BattleResult, SameColorError, attack
from warlite.territory import Territory, format_map

REGISTER_RULE = "=" * 34
MENU_RULE = "-" * 33
MIN_TERRITORIES = 2


class Console:
    """Line-oriented dialogue with the player."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        """Print a line."""
        self._out.write(text + "\n")

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the answer without its line ending."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> int:
        """Ask until the answer starts with a whole number."""
        while True:
            words = self.ask(prompt).split()
            if words:
                try:
                    return int(words[0])
                except ValueError:
                    pass
            self.say("Entrada invalida!")

    def pause(self) -> None:
        """Wait for the player to press Enter."""
        self.say("\nPressione Enter para continuar...")
        self._out.flush()
        self._in.readline()


def ask_territory_count(console: Console) -> int:
    """Ask how many territories to register; at least two are needed."""
    prompt = "Quantos territorios voce quer cadastrar? "
    count = console.ask_int(prompt)
    while count < MIN_TERRITORIES:
        console.say("Quantidade invalida!, tente novamente")
        count = console.ask_int(prompt)
    return count


def _ask_word(console: Console, prompt: str) -> str:
    while True:
        words = console.ask(prompt).split()
        if words:
            return words[0]


def register_territories(console: Console, count: int) -> list[Territory]:
    """Ask the player for the name, army colour and troops of each territory."""
    territories = []
    for number in range(1, count + 1):
        console.say(REGISTER_RULE)
        console.say()
        console.say(f"--- Cadastrando Territorio {number} ---")
        name = _ask_word(console, "Nome do territorio: ")
        color = console.ask("Cor do exercito (ex: Azul, Verde): ").strip()
        troops = console.ask_int("Numero de Tropas: ")
        console.say()
        territories.append(Territory(name, color, troops))
    console.say("Cadastro inicial concluido com sucesso!")
    return territories


def attack_phase(
    console: Console, territories: list[Territory], rng: random.Random
) -> BattleResult | None:
    """Let the player pick two territories and fight one battle between them.

    Returns the battle result, or None when no battle took place.
    """
    count = len(territories)
    console.say("--- FASE DE ATAQUE ---")
    attacker_number = console.ask_int(f"Escolha o territorio atacante (1 a {count}): ")
    defender_number = console.ask_int(f"Escolha o territorio defensor (1 a {count}): ")
    if not (1 <= attacker_number <= count and 1 <= defender_number <= count):
        console.say("Territorio nao existe!")
        return None
    try:
        result = attack(territories[attacker_number - 1], territories[defender_number - 1], rng)
    except SameColorError as error:
        console.say(str(error))
        result = None
    else:
        console.say(result.report())
    console.pause()
    return result


def _show_menu(console: Console) -> None:
    console.say(MENU_RULE)
    console.say("---WAR AVENTUREIRO---")
    console.say("Escolha uma opcao: ")
    console.say("1. Exibir territorios atuais")
    console.say("2. Fase de ataque")
    console.say("3. Sair do programa")


def run_game(console: Console, rng: random.Random) -> list[Territory]:
    """Play a whole game and return the territories as they ended up."""
    count = ask_territory_count(console)
    territories = register_territories(console, count)
    console.say(format_map(territories))

    while True:
        _show_menu(console)
        option = console.ask_int("")
        if option == 1:
            console.say(format_map(territories))
            console.pause()
        elif option == 2:
            attack_phase(console, territories, rng)
        elif option == 3:
            console.say("Saindo do programa...")
            console.pause()
            break
        else:
            console.say("Opcao invalida!")
            console.pause()

    console.say(format_map(territories))
    return territories


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game on the terminal."""
    parser = argparse.ArgumentParser(description="Territory battle game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)
    console = Console()
    try:
        run_game(console, random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        console.say()
    return 0


if __name__ == "__main__":
    sys.exit(main())