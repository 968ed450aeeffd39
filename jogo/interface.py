"""Terminal interface: keyboard events and drawing of the game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .game import CHARACTER, Element, Game
from .types import GameState

INSTRUCTIONS = "Use WASD para mover e E para interagir. ESC para sair."
TEXT_COLOR = "dark_gray"


@dataclass(frozen=True)
class KeyEvent:
    """An action read from the keyboard: "sair", "interagir" or "mover"."""

    kind: str = ""
    key: str = ""


def translate_key(key: str | int | None) -> KeyEvent:
    """Turn a raw key (character or key code) into a KeyEvent."""
    if key is None:
        return KeyEvent()
    if key in ("\x1b", 27):
        return KeyEvent("sair")
    if key == "e":
        return KeyEvent("interagir")
    return KeyEvent("mover", "" if isinstance(key, int) else key)


def render_screen(game: Game, state: GameState) -> list[str]:
    """Return the lines of text the interface would draw, without colours."""
    cells: dict[tuple[int, int], str] = {}
    for y, row in enumerate(game.map):
        for x, element in enumerate(row):
            cells[x, y] = element.symbol
    for player in state.players.values():
        if player.x >= 0 and player.y >= 0:
            cells[player.x, player.y] = CHARACTER.symbol
    base = len(game.map)
    for offset, text in ((1, game.status_msg), (3, INSTRUCTIONS)):
        for i, ch in enumerate(text):
            cells[i, base + offset] = ch
    height = max((y for _, y in cells), default=-1) + 1
    lines = [[" "] * (max((x for x, y in cells if y == row), default=-1) + 1)
             for row in range(height)]
    for (x, y), ch in cells.items():
        lines[y][x] = ch
    return ["".join(line).rstrip() for line in lines]


class Interface:
    """Curses-backed screen; use as a context manager."""

    def __init__(self) -> None:
        self._curses: Any = None
        self._screen: Any = None
        self._pairs: dict[tuple[int, int], int] = {}

    def __enter__(self) -> Interface:
        import curses

        self._curses = curses
        self._screen = curses.initscr()
        curses.noecho()
        curses.cbreak()
        self._screen.keypad(True)
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._curses is None:
            return
        self._screen.keypad(False)
        self._curses.nocbreak()
        self._curses.echo()
        self._curses.endwin()
        self._curses = self._screen = None
        self._pairs.clear()

    def read_event(self) -> KeyEvent:
        """Block until a key is pressed and translate it."""
        try:
            key = self._screen.get_wch()
        except self._curses.error:
            return KeyEvent()
        if key == self._curses.KEY_RESIZE:
            return KeyEvent()
        return translate_key(key)

    def clear(self) -> None:
        self._screen.erase()

    def refresh(self) -> None:
        self._screen.refresh()

    def _attributes(self, color: str, background: str, bold: bool = False,
                    dim: bool = False) -> int:
        c = self._curses
        attrs = (c.A_BOLD if bold else 0) | (c.A_DIM if dim else 0)
        if not c.has_colors():
            return attrs
        numbers = {"dark_gray": 8 if c.COLORS >= 16 else c.COLOR_BLACK,
                   "black": c.COLOR_BLACK, "red": c.COLOR_RED, "green": c.COLOR_GREEN}
        key = (numbers.get(color, -1), numbers.get(background, -1))
        if key not in self._pairs and len(self._pairs) + 1 < c.COLOR_PAIRS:
            pair = len(self._pairs) + 1
            try:
                c.init_pair(pair, *key)
            except c.error:
                pair = 0
            self._pairs[key] = pair
        return attrs | c.color_pair(self._pairs.get(key, 0))

    def _set_cell(self, x: int, y: int, ch: str, attrs: int) -> None:
        try:
            self._screen.addstr(y, x, ch, attrs)
        except self._curses.error:
            pass  # outside the window, or its last cell

    def draw_element(self, x: int, y: int, element: Element) -> None:
        attrs = self._attributes(element.color, element.background,
                                 element.bold, element.dim)
        self._set_cell(x, y, element.symbol, attrs)

    def draw_status_bar(self, game: Game) -> None:
        attrs = self._attributes(TEXT_COLOR, "default")
        base = len(game.map)
        for offset, text in ((1, game.status_msg), (3, INSTRUCTIONS)):
            for i, ch in enumerate(text):
                self._set_cell(i, base + offset, ch, attrs)

    def draw_game(self, game: Game, state: GameState) -> None:
        """Draw the map, every player and the status bar, then refresh."""
        self.clear()
        for y, row in enumerate(game.map):
            for x, element in enumerate(row):
                self.draw_element(x, y, element)
        for player in state.players.values():
            self.draw_element(player.x, player.y, CHARACTER)
        self.draw_status_bar(game)
        self.refresh()