import pytest

from jogo.game import EMPTY, VEGETATION, WALL, Game
from jogo.interface import INSTRUCTIONS, KeyEvent, render_screen, translate_key
from jogo.types import GameState, PlayerState


def test_translate_escape_string():
    assert translate_key("\x1b") == KeyEvent("sair")


def test_translate_escape_code():
    assert translate_key(27) == KeyEvent("sair")


def test_translate_interact():
    assert translate_key("e") == KeyEvent("interagir")


@pytest.mark.parametrize("key", ["w", "a", "s", "d", "x"])
def test_translate_move(key):
    assert translate_key(key) == KeyEvent("mover", key)


def test_translate_special_key_code():
    assert translate_key(260) == KeyEvent("mover", "")


def test_translate_none_is_empty_event():
    event = translate_key(None)
    assert event == KeyEvent()
    assert event.kind == ""


@pytest.fixture
def small_game():
    return Game(map=[[WALL, WALL, WALL], [WALL, EMPTY, VEGETATION], [WALL, WALL, WALL]])


def test_render_map_rows(small_game):
    lines = render_screen(small_game, GameState())
    assert lines[0] == "▤▤▤"
    assert lines[1] == "▤ ♣"
    assert lines[2] == "▤▤▤"


def test_render_draws_players(small_game):
    state = GameState(players={"p": PlayerState("p", 1, 1)})
    lines = render_screen(small_game, state)
    assert lines[1] == "▤☺♣"


def test_render_status_and_instructions(small_game):
    small_game.status_msg = "ola"
    lines = render_screen(small_game, GameState())
    rows = len(small_game.map)
    assert lines[rows] == ""
    assert lines[rows + 1] == "ola"
    assert lines[rows + 2] == ""
    assert lines[rows + 3] == INSTRUCTIONS
    assert len(lines) == rows + 4


def test_render_empty_game_has_instructions_on_fourth_line():
    lines = render_screen(Game(), GameState())
    assert lines[3] == INSTRUCTIONS
    assert lines[:3] == ["", "", ""]


def test_render_ignores_negative_positions(small_game):
    state = GameState(players={"p": PlayerState("p", -1, -1)})
    assert render_screen(small_game, state) == render_screen(small_game, GameState())