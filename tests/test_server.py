import ipaddress
import threading
import xmlrpc.client

import pytest

from jogo.game import EMPTY, WALL, Game
from jogo.server import GameServer, local_ip, main, make_rpc_server
from jogo.types import Move


def make_server(rows):
    return GameServer(Game(map=rows))


def test_register_uses_first_free_cell():
    server = make_server([[WALL, EMPTY], [EMPTY, EMPTY]])
    assert server.register_player("a") is True
    player = server.get_state("a").players["a"]
    assert (player.x, player.y, player.sequence) == (1, 0, 0)


def test_second_player_gets_next_free_cell():
    server = make_server([[EMPTY, EMPTY]])
    assert server.register_player("a")
    assert server.register_player("b")
    players = server.get_state("a").players
    assert (players["b"].x, players["b"].y) == (1, 0)


def test_register_duplicate_id_rejected():
    server = make_server([[EMPTY, EMPTY]])
    assert server.register_player("a")
    assert server.register_player("a") is False
    assert list(server.get_state("a").players) == ["a"]


def test_register_fails_when_map_full():
    server = make_server([[EMPTY, WALL]])
    assert server.register_player("a")
    assert server.register_player("b") is False
    assert "b" not in server.get_state("a").players


def test_disconnect_removes_player():
    server = make_server([[EMPTY, EMPTY]])
    server.register_player("a")
    assert server.disconnect_player("a") is True
    assert server.disconnect_player("a") is False
    assert server.get_state("a").players == {}


def test_update_unknown_player():
    server = make_server([[EMPTY, EMPTY]])
    assert server.update_position(Move(id="ghost", dx=1, sequence=1)) is False


def test_update_moves_player():
    server = make_server([[EMPTY, EMPTY], [EMPTY, EMPTY]])
    server.register_player("a")
    assert server.update_position(Move(id="a", dx=0, dy=1, sequence=1))
    player = server.get_state("a").players["a"]
    assert (player.x, player.y, player.sequence) == (0, 1, 1)


def test_stale_sequence_is_ignored():
    server = make_server([[EMPTY, EMPTY, EMPTY]])
    server.register_player("a")
    server.update_position(Move(id="a", dx=1, sequence=2))
    assert server.update_position(Move(id="a", dx=1, sequence=2)) is True
    assert server.get_state("a").players["a"].x == 1


def test_blocked_move_acknowledged_without_moving():
    server = make_server([[EMPTY, WALL]])
    server.register_player("a")
    assert server.update_position(Move(id="a", dx=1, sequence=1)) is True
    player = server.get_state("a").players["a"]
    assert (player.x, player.sequence) == (0, 0)


def test_blocked_move_does_not_consume_sequence():
    server = make_server([[EMPTY, EMPTY], [WALL, EMPTY]])
    server.register_player("a")
    server.update_position(Move(id="a", dy=1, sequence=1))
    server.update_position(Move(id="a", dx=1, sequence=1))
    assert server.get_state("a").players["a"].x == 1


def test_players_block_each_other():
    server = make_server([[EMPTY, EMPTY]])
    server.register_player("a")
    server.register_player("b")
    server.update_position(Move(id="a", dx=1, sequence=1))
    assert server.get_state("a").players["a"].x == 0


def test_state_contains_map_symbols():
    server = make_server([[WALL, EMPTY]])
    assert server.get_state("x").map == [[WALL.symbol, EMPTY.symbol]]


def test_state_is_a_snapshot():
    server = make_server([[EMPTY, EMPTY]])
    server.register_player("a")
    snapshot = server.get_state("a")
    server.update_position(Move(id="a", dx=1, sequence=1))
    assert snapshot.players["a"].x == 0


def test_rpc_methods_over_the_wire():
    rpc = make_rpc_server(make_server([[EMPTY, WALL]]), "127.0.0.1", 0)
    thread = threading.Thread(target=rpc.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = rpc.server_address
        with xmlrpc.client.ServerProxy(f"http://{host}:{port}/") as proxy:
            assert proxy.Servidor.RegistrarJogador("a") is True
            assert proxy.Servidor.AtualizaPosicao(
                Move(id="a", dx=1, sequence=1).to_dict()
            ) is True
            state = proxy.Servidor.GetEstadoJogo("a")
            assert state["map"] == [EMPTY.symbol + WALL.symbol]
            assert state["players"]["a"]["x"] == 0
            assert proxy.Servidor.DesconectarJogador("a") is True
    finally:
        rpc.shutdown()
        rpc.server_close()


def test_local_ip_is_ipv4_address():
    assert ipaddress.ip_address(local_ip()).version == 4


def test_main_fails_on_missing_map(tmp_path):
    assert main(["--map", str(tmp_path / "missing.txt"), "--port", "0"]) == 1


@pytest.mark.parametrize("player_id", ["a", "jogador 2"])
def test_register_then_disconnect_roundtrip(player_id):
    server = make_server([[EMPTY]])
    assert server.register_player(player_id)
    assert server.disconnect_player(player_id)
    assert server.register_player(player_id)