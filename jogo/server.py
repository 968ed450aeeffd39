"""Game server: keeps player positions and serves them over XML-RPC."""

from __future__ import annotations

import argparse
import logging
import socket
import socketserver
import threading
from dataclasses import replace
from xmlrpc.server import SimpleXMLRPCServer

from .game import Game
from .types import GameState, Move, PlayerState

DEFAULT_PORT = 1234

log = logging.getLogger(__name__)


class GameServer:
    """Authoritative state of every connected player."""

    def __init__(self, game: Game) -> None:
        self._game = game
        self._players: dict[str, PlayerState] = {}
        self._sequences: dict[str, int] = {}
        self._lock = threading.Lock()

    def register_player(self, player_id: str) -> bool:
        """Place a new player on the first free cell; False if taken or no room."""
        with self._lock:
            if player_id in self._players:
                return False
            state = GameState(players=self._players)
            free = ((x, y) for y, row in enumerate(self._game.map)
                    for x in range(len(row)) if self._game.can_move_to(state, x, y))
            position = next(free, None)
            if position is None:
                return False
            self._players[player_id] = PlayerState(player_id, *position)
            self._sequences[player_id] = 0
            return True

    def disconnect_player(self, player_id: str) -> bool:
        """Remove a player; False if it was not connected."""
        with self._lock:
            self._sequences.pop(player_id, None)
            return self._players.pop(player_id, None) is not None

    def update_position(self, move: Move) -> bool:
        """Apply a new move if the target is free; False only for an unknown player."""
        with self._lock:
            player = self._players.get(move.id)
            if player is None:
                return False
            if move.sequence <= self._sequences.get(move.id, 0):
                return True
            nx, ny = player.x + move.dx, player.y + move.dy
            if self._game.can_move_to(GameState(players=self._players), nx, ny):
                self._players[move.id] = replace(player, x=nx, y=ny, sequence=move.sequence)
                self._sequences[move.id] = move.sequence
            return True

    def get_state(self, player_id: str) -> GameState:
        """Snapshot of all players and the map symbols."""
        with self._lock:
            players = {pid: replace(p) for pid, p in self._players.items()}
            symbols = [[element.symbol for element in row] for row in self._game.map]
        return GameState(players=players, map=symbols)


class _ThreadingXMLRPCServer(socketserver.ThreadingMixIn, SimpleXMLRPCServer):
    daemon_threads = True
    allow_reuse_address = True


def make_rpc_server(game_server: GameServer, host: str = "",
                    port: int = DEFAULT_PORT) -> SimpleXMLRPCServer:
    """Create a threaded XML-RPC server exposing the game methods."""
    server = _ThreadingXMLRPCServer((host, port), logRequests=False, allow_none=True)
    server.register_function(game_server.register_player, "Servidor.RegistrarJogador")
    server.register_function(game_server.disconnect_player, "Servidor.DesconectarJogador")
    server.register_function(
        lambda move: game_server.update_position(Move.from_dict(move)),
        "Servidor.AtualizaPosicao")
    server.register_function(
        lambda player_id: game_server.get_state(player_id).to_dict(),
        "Servidor.GetEstadoJogo")
    return server


def local_ip() -> str:
    """Best guess at this machine's address on the local network."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            return sock.getsockname()[0]
    except OSError:
        return "127.0.0.1"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Servidor do jogo.")
    parser.add_argument("--map", default="mapa.txt")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    game = Game()
    try:
        game.load_map(args.map)
    except OSError as exc:
        log.error("Erro ao carregar mapa: %s", exc)
        return 1
    try:
        rpc_server = make_rpc_server(GameServer(game), "", args.port)
    except OSError as exc:
        log.error("Erro ao escutar na porta %d: %s", args.port, exc)
        return 1

    log.info("Servidor RPC disponível em:")
    log.info("  Localhost:   localhost:%d", args.port)
    log.info("  Rede local:  %s:%d", local_ip(), args.port)
    with rpc_server:
        try:
            rpc_server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0