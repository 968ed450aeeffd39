"""Shared state exchanged between the game server and its clients."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class PlayerState:
    """Position and last applied move sequence of one player."""

    id: str
    x: int = 0
    y: int = 0
    sequence: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerState:
        x, y, seq = (int(data.get(k, 0)) for k in ("x", "y", "sequence"))
        return cls(str(data["id"]), x, y, seq)


@dataclass
class GameState:
    """Snapshot of every connected player plus the map symbols."""

    players: dict[str, PlayerState] = field(default_factory=dict)
    map: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "players": {pid: p.to_dict() for pid, p in self.players.items()},
            "map": ["".join(row) for row in self.map],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        players = data.get("players") or {}
        return cls(
            {pid: PlayerState.from_dict(p) for pid, p in players.items()},
            [list(row) for row in data.get("map") or []],
        )


@dataclass
class Move:
    """A movement request sent by a client."""

    id: str
    dx: int = 0
    dy: int = 0
    sequence: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Move:
        dx, dy, seq = (int(data.get(k, 0)) for k in ("dx", "dy", "sequence"))
        return cls(str(data["id"]), dx, dy, seq)