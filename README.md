# jogo

A small multiplayer maze game for the terminal. One server holds the map and
the position of every player and serves them over XML-RPC; any number of
clients connect to it, send their moves and draw the shared world in a curses
window.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The map

The map is a UTF-8 text file. Each line is one row of the map, and each
character is one cell:

| Character     | Meaning                                  |
|---------------|------------------------------------------|
| `▤`           | wall, blocks movement                    |
| `☠`           | enemy, blocks movement                   |
| `♣`           | vegetation, can be walked through        |
| `☺`           | ignored; players get their own positions |
| anything else | empty floor                              |

## Running a game

Start the server:

```
jogo-server
```

Options:

- `--map PATH` – the map file to load (default `mapa.txt`).
- `--port PORT` – the TCP port to listen on (default `1234`).

The server logs the addresses it can be reached at, on this machine and on
the local network.

Each player then starts a client with a player name of their own choosing,
in a directory that holds `mapa.txt` (the client always draws the map from
that file):

```
jogo-client alice
```

The client asks for the server address (for example `localhost:1234`; a
plain `host:port` is taken as `http://host:port/`), registers the player and
opens the game screen. A new player is placed on the first free cell of the
map, scanning rows from the top and cells from the left. Registration fails
if the name is already in use or no free cell is left. Run without a player
name, the client only prints its usage.

While running, the client fetches the shared state from the server about ten
times a second and draws every player as `☺` over the map.

## Controls

| Key   | Action          |
|-------|-----------------|
| `w`   | move up         |
| `a`   | move left       |
| `s`   | move down       |
| `d`   | move right      |
| `Esc` | leave the game  |

A move is refused by the server when it would leave the map, enter a wall or
an enemy, or step onto another player. Every move carries a sequence number,
and the server ignores any move whose number is not newer than the last one
it accepted from that player. Leaving with `Esc` removes the player from the
server.

## Using it as a library

- `jogo.types` holds the exchanged data: `PlayerState`, `GameState` and
  `Move`, each with `to_dict` and `from_dict`.
- `jogo.game.Game` loads a map with `load_map` and answers `can_move_to` and
  `move_player` against a `GameState`.
- `jogo.character.move_delta` turns a key into a movement step;
  `execute_action` turns a `KeyEvent` into a `Move` to send, and `interact`
  writes a status message into a `Game`.
- `jogo.interface.translate_key` turns a raw key into a `KeyEvent`;
  `render_screen` returns the screen as plain text lines; `Interface` is the
  curses screen, used as a context manager.
- `jogo.server.GameServer` holds the shared state and offers
  `register_player`, `disconnect_player`, `update_position` and `get_state`;
  `make_rpc_server` exposes it over XML-RPC as `Servidor.RegistrarJogador`,
  `Servidor.DesconectarJogador`, `Servidor.AtualizaPosicao` and
  `Servidor.GetEstadoJogo`.
- `jogo.client.GameClient` talks to a running server.

## What it does not do

The `e` key is read as an interaction, but the client does nothing with it.
Enemies never move and nothing happens on meeting them; they are only
obstacles. The map drawn by a client comes from its own `mapa.txt`, not from
the server.