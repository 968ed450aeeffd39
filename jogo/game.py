"""Static map of the game and the movement rules applied to it."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from .types import GameState


@dataclass(frozen=True)
class Element:
    """Anything placed on the map: walls, characters, vegetation, empty space."""

    symbol: str
    color: str = "default"
    background: str = "default"
    tangible: bool = False
    bold: bool = False
    dim: bool = False


CHARACTER = Element("☺", "dark_gray", "default", True)
ENEMY = Element("☠", "red", "default", True)
WALL = Element("▤", "black", "dark_gray", True, bold=True, dim=True)
VEGETATION = Element("♣", "green", "default", False)
EMPTY = Element(" ", "default", "default", False)

# Characters drawn in the map file are ignored: each player has its own position.
_BY_SYMBOL = {
    WALL.symbol: WALL,
    ENEMY.symbol: ENEMY,
    VEGETATION.symbol: VEGETATION,
    CHARACTER.symbol: EMPTY,
}


@dataclass
class Game:
    """The fixed part of the game: the map grid and a status message."""

    map: list[list[Element]] = field(default_factory=list)
    status_msg: str = ""

    def load_map(self, path: str | os.PathLike[str]) -> None:
        """Read a map file line by line and append its rows to the map."""
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            line = line.removesuffix("\r")
            self.map.append([_BY_SYMBOL.get(ch, EMPTY) for ch in line])

    def can_move_to(self, state: GameState, x: int, y: int) -> bool:
        """Whether (x, y) is inside the map, not blocked and not occupied by a player."""
        if not 0 <= y < len(self.map):
            return False
        row = self.map[y]
        if not 0 <= x < len(row):
            return False
        if row[x].tangible:
            return False
        return not any(p.x == x and p.y == y for p in state.players.values())

    def move_player(self, state: GameState, player_id: str, dx: int, dy: int) -> bool:
        """Move a player in the shared state if the target cell is free."""
        player = state.players.get(player_id)
        if player is None:
            return False
        nx, ny = player.x + dx, player.y + dy
        if not self.can_move_to(state, nx, ny):
            return False
        state.players[player_id] = replace(player, x=nx, y=ny)
        return True