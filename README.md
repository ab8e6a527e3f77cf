# tomatoarena

A small top-down multiplayer arena game. Each player walks around a tiled
dungeon and throws tomatoes at the others. A tomato that hits a player takes
17 health. A player who drops to zero health sees a game-over screen and can
respawn with Enter.

The game has two programs. One is a relay server that passes messages between
connected players. The other is a graphical client built on pygame.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the server

```
tomatoarena-server [--host HOST] [--port PORT]
```

By default the server listens on all addresses, TCP port 3030. It accepts up
to 100 players.

- **When a player connects**, the server does three things:
  - it sends that player a `CONNECTED` message carrying a random id,
  - it sends them a `JOINED` message for every player already connected,
  - it sends every other player a `JOINED` message for the newcomer.
- **Anything a player sends** is forwarded, byte for byte, to all other players.
- **When a player disconnects**, the others receive a `DISCONNECT` message.

The server keeps no game state of its own. Stop it with Ctrl+C.

## Running the client

```
tomatoarena
```

The client opens an 800×600 window titled "Zombie Hunter" and shows a menu:

- **Address fields.** Click the IP or port text to choose which field receives
  typing. The defaults are `127.0.0.1` and `3030`. Backspace erases. The IP
  field holds at most 15 characters and the port field at most 5.
- **Play Game** connects to that address. If the connection fails, an error is
  logged and the menu stays open.
- **Exit Game** quits.

### Assets

The client loads its assets from an `assets/` directory in the current working
directory:

- `assets/levels/dungeon.csv`: the level, a comma-separated grid of tile numbers, one row per line
- `assets/tilesets/dungeon.png`: 16×16 tiles, numbered row by row
- `assets/sprites/player.png`: 64×64 cells
- `assets/sprites/mob.png`: 32×32 cells
- `assets/sprites/projectile.png`
- `assets/fonts/sans.ttf`
- `assets/images/tomario.png`: the menu background; the menu is drawn without it if it cannot be loaded

### Controls

| Key / button          | Action                           |
|-----------------------|----------------------------------|
| W / Up arrow          | move up                          |
| S / Down arrow        | move down                        |
| A / Left arrow        | move left                        |
| D / Right arrow       | move right                       |
| Mouse button          | throw a tomato towards the mouse |
| Enter (after defeat)  | respawn at full health           |
| F11                   | toggle desktop fullscreen        |

### Gameplay details

- A tomato disappears once it has flown more than 500 pixels from where it was
  thrown, or when it hits a player.
- While a movement key is held, the client sends its position to the server on
  every frame.

## Protocol

Messages are space-separated fields. The first field is the opcode from
`tomatoarena.protocol.Opcode`. The remaining fields are integers, except the
projectile direction, which is a pair of floats.

| Opcode           | Fields                          |
|------------------|---------------------------------|
| `JOINED` (0)     | id                              |
| `CONNECTED` (1)  | id                              |
| `PLAYERMOVE` (2) | id x y flags                    |
| `PROJECTILE` (3) | id x y direction_x direction_y  |
| `DISCONNECT` (4) | id                              |

Both the client and the server send each message in a 1024-byte buffer padded
with NUL bytes.

- `tomatoarena.protocol.encode(opcode, *fields)` builds a message.
- `tomatoarena.protocol.decode(message)` reads a message from text or bytes,
  stopping at the first NUL. It returns the opcode and a tuple of typed fields.
  It raises `ValueError` for an unknown opcode, or for missing or malformed
  fields.

## Using the pieces

Most of the game logic has no display and can be used on its own:

- `tomatoarena.level.parse_level` and `tomatoarena.level.Level.load` read level
  files. Short rows are padded with tile 0, and levels are limited to 256×256.
- `tomatoarena.world.World` holds the local player, the remote players, mobs,
  projectiles and collisions. `World.update(dt)` advances them.
- `tomatoarena.net_player.react(world, message)` applies one server message to
  a world.
- `tomatoarena.server.Server` can be driven step by step with `poll(timeout)`
  instead of `serve_forever()`.

## What it does not do

- **No shared game state.** Hits and health are worked out separately by each
  client; the server only relays messages.
- **No mobs are ever spawned.** The world can hold mobs and the renderer draws
  them, but nothing creates them.
- **No account, score or save storage.**