"""Register a fixed number of territories and print a report of them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from warlite.territory import Territory

TERRITORY_COUNT = 5
REPORT_RULE = "=" * 34
REPORT_TITLE = "   MAPA DO MUNDO - ESTADO ATUAL"


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines).rstrip("\r\n")
    except StopIteration:
        raise ValueError(f"input ended before {what}") from None


def _next_word(lines: Iterator[str], what: str) -> str:
    while True:
        words = _next_line(lines, what).split()
        if words:
            return words[0]


def read_territories(lines: Iterable[str], count: int = TERRITORY_COUNT) -> list[Territory]:
    """Read name, army colour and troops of each territory, one field per line.

    Raises ValueError when the input ends early or troops are not a number.
    """
    source = iter(lines)
    territories = []
    for number in range(1, count + 1):
        name = _next_word(source, f"the name of territory {number}")
        color = _next_line(source, f"the colour of territory {number}").strip()
        troops_text = _next_word(source, f"the troops of territory {number}")
        try:
            troops = int(troops_text)
        except ValueError:
            raise ValueError(f"invalid troop count: {troops_text!r}") from None
        territories.append(Territory(name, color, troops))
    return territories


def format_report(territories: Iterable[Territory]) -> str:
    """Render the territories as a titled report, one block each."""
    lines = [REPORT_RULE, REPORT_TITLE, REPORT_RULE]
    for number, territory in enumerate(territories, start=1):
        lines.append(f"TERRITORIO {number}")
        lines.append(f"\t- Nome: {territory.name}")
        lines.append(f"\t- Dominado por: {territory.color}")
        lines.append(f"\t- Tropas: {territory.troops}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read five territories from standard input and print their report."""
    try:
        territories = read_territories(sys.stdin)
    except ValueError as error:
        print(f"Erro: {error}", file=sys.stderr)
        return 1
    print("Cadastro inicial concluido com sucesso!")
    print()
    print(format_report(territories))
    return 0


if __name__ == "__main__":
    sys.exit(main())