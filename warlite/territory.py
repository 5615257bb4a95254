"""Territories of the world map and their tabular display."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MAP_RULE = "=" * 44
MAP_TITLE = "        MAPA DO MUNDO - ESTADO ATUAL"


@dataclass
class Territory:
    """A territory: its name, the colour of the army holding it and its troops."""

    name: str
    color: str
    troops: int

    def describe(self) -> str:
        """One-line description used in the map listing."""
        return f"{self.name} (Exercito {self.color}, Tropas: {self.troops})"


def format_map(territories: Iterable[Territory]) -> str:
    """Render the current state of the world map as a numbered listing."""
    lines = [MAP_RULE, MAP_TITLE, MAP_RULE]
    lines.extend(
        f"{number}. {territory.describe()}"
        for number, territory in enumerate(territories, start=1)
    )
    return "\n".join(lines)