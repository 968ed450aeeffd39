"""Game client: talks to the server and draws the shared state."""

from __future__ import annotations

import logging
import sys
import threading
import xmlrpc.client
from typing import Any

from .character import move_delta
from .game import Game
from .interface import Interface
from .types import GameState, Move

log = logging.getLogger(__name__)

_RPC_ERRORS = (OSError, xmlrpc.client.Error)


class GameClient:
    """Connection of one player to a game server."""

    def __init__(self, address: str, player_id: str) -> None:
        self.player_id = player_id
        self.url = address if "://" in address else f"http://{address}/"
        self.sequence = 0
        self._state = GameState()
        self._lock = threading.Lock()

    def _call(self, method: str, *args: Any) -> Any:
        # A fresh proxy per call keeps threads off a shared connection.
        with xmlrpc.client.ServerProxy(self.url, allow_none=True) as proxy:
            return getattr(proxy, method)(*args)

    def register(self) -> bool:
        return bool(self._call("Servidor.RegistrarJogador", self.player_id))

    def send_move(self, dx: int, dy: int) -> bool:
        """Send a move with the next sequence number and return the ack."""
        self.sequence += 1
        move = Move(self.player_id, dx, dy, self.sequence)
        return bool(self._call("Servidor.AtualizaPosicao", move.to_dict()))

    def disconnect(self) -> bool:
        return bool(self._call("Servidor.DesconectarJogador", self.player_id))

    def fetch_state(self) -> GameState:
        """Ask the server for the current state and remember it."""
        state = GameState.from_dict(self._call("Servidor.GetEstadoJogo", self.player_id))
        with self._lock:
            self._state = state
        return state

    def poll_state(self, stop_event: threading.Event, interval: float = 0.1) -> None:
        """Keep fetching the state until stop_event is set."""
        while not stop_event.is_set():
            try:
                self.fetch_state()
            except _RPC_ERRORS as exc:
                log.warning("Erro ao obter estado: %s", exc)
                stop_event.wait(1.0)
                continue
            stop_event.wait(interval)

    def current_state(self) -> GameState:
        with self._lock:
            return self._state


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Uso: jogo-client <playerID>")
        return 0
    client = GameClient(input("Digite o endereco do servidor: ").strip(), args[0])

    try:
        registered = client.register()
    except _RPC_ERRORS as exc:
        log.error("Erro ao conectar ao servidor RPC: %s", exc)
        return 1
    if not registered:
        log.error("Erro ao registrar jogador. ID já em uso ou posição inicial indisponível.")
        return 1

    game = Game()
    game.load_map("mapa.txt")

    stop = threading.Event()
    try:
        with Interface() as screen:
            threading.Thread(target=client.poll_state, args=(stop,), daemon=True).start()
            while True:
                screen.draw_game(game, client.current_state())
                event = screen.read_event()
                if event.kind == "mover":
                    dx, dy = move_delta(event.key)
                    if (dx, dy) == (0, 0):
                        continue
                    try:
                        client.send_move(dx, dy)
                    except _RPC_ERRORS as exc:
                        log.warning("Erro ao enviar movimento: %s", exc)
                elif event.kind == "sair":
                    try:
                        client.disconnect()
                    except _RPC_ERRORS as exc:
                        log.warning("Erro ao desconectar jogador: %s", exc)
                    break
    finally:
        stop.set()
    return 0