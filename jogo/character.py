"""Player actions: turning key presses into moves and interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import GameState, Move, PlayerState

if TYPE_CHECKING:
    from .game import Game
    from .interface import KeyEvent

_DELTAS = {"w": (0, -1), "a": (-1, 0), "s": (0, 1), "d": (1, 0)}


def move_delta(key: str) -> tuple[int, int]:
    """Return the (dx, dy) step for a movement key, or (0, 0)."""
    return _DELTAS.get(key, (0, 0))


def interact(game: Game, state: GameState, player_id: str) -> None:
    """Record a local status message about the interacting player."""
    player = state.players.get(player_id, PlayerState(id=""))
    game.status_msg = f"Interagindo no jogador {player_id} em ({player.x}, {player.y})"


def execute_action(
    event: KeyEvent, state: GameState, player_id: str, seq: int
) -> tuple[bool, Move | None]:
    """Decide what a key event does.

    Returns whether the game should keep running and the move to send, if any.
    """
    if event.kind == "sair":
        return False, None
    if event.kind == "mover":
        dx, dy = move_delta(event.key)
        if (dx, dy) == (0, 0):
            return True, None
        return True, Move(id=player_id, dx=dx, dy=dy, sequence=seq + 1)
    return True, None