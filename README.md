# arcatek

A small arcade engine. A core loop runs one game with one display. The game and
the display never call each other. They exchange events through subjects:

- `GameEventManager` (display to game and core): `close_app`, which carries
  `True` to ask the loop to stop, and `key_pressed`, which carries `Key.UP`,
  `Key.DOWN`, `Key.LEFT` or `Key.RIGHT`.
- `DisplayEventManager` (game to display): `draw_square`, which carries
  `Square` drawables.

The package includes a Pacman game (`arcatek.pacman`) and a display built on
pygame (`arcatek.pygame_display`).

## Install

```
pip install .
```

## Run

```
arcatek -g pacman -d pygame
```

- `-g NAME` names a game library.
- `-d NAME` names a display library.

You can give each flag more than once. The command ignores any other argument,
and it ignores a trailing flag that has no value. The core looks up each name in
the catalog that `arcatek.core.default_catalog()` returns. That catalog holds
`pacman`, which provides `createGame`, and `pygame`, which provides
`createDisplay`. The core skips names that are not in the catalog. It then runs
the first game it loaded with the first display it loaded. If it loaded no game
or no display, it prints a message and exits with status 1.

At each frame the display clears the screen, the game sends the squares to
draw, and the display draws them.

### Pacman

The game reads its map from `./Lib/Games/Pacman/Map.txt`. This path is relative
to the current directory. In the map, `#` is a red wall, `.` is a yellow
pac-gum, and every other character is empty. Each character is a 10×10 tile. If
the file cannot be opened, the game prints `Error: Map file not found` and runs
with an empty map. The player is a green 15×15 square that starts at (20, 20).
Each key report moves it by one pixel.

### Pygame display

The display opens an 800×600 window titled "Arcatek" and draws at most 60 frames
per second. It reads the keys that are held down on every frame:

- W or Z: up
- S: down
- A or Q: left
- D: right

Closing the window stops the loop.

## Use as a library

```python
from arcatek.events import GameEventManager, DisplayEventManager, Key
from arcatek.pacman import Map, PacmanGame

game_events = GameEventManager()
display_events = DisplayEventManager()

drawn = []
display_events.draw_square.attach(drawn.append)

game = PacmanGame("map.txt")
game.init(game_events, display_events)
game_events.key_pressed.notify(Key.RIGHT)
game.update()  # sends every map tile, then the player, to draw_square
```

`Subject.attach` accepts an `Observer` or a plain callable and returns the
observer it registered. You can pass that observer to `detach` to remove it.
`notify` passes the data to every observer in the order they were attached.

To run your own game or display, implement `arcatek.plugins.Game` or
`arcatek.plugins.Display`. Then pass `Core` a catalog that maps a library name
to its `createGame` or `createDisplay` factory:

```python
from arcatek.core import Core

core = Core(["mygame"], ["pygame"], {
    "mygame": {"createGame": MyGame},
    "pygame": {"createDisplay": create_display},
})
core.run()
```

## What it does not do

- Library names refer only to entries in an in-process catalog. The package
  never loads compiled libraries or files from disk as plugins.
- The package ships no map file. Without `./Lib/Games/Pacman/Map.txt`, the
  command shows only the player.
- The game has no collisions, no scoring, no ghosts, and no way to eat gums.
- While the loop runs, you cannot switch to another game or display.

## Tests

```
pip install .[test]
pytest
```