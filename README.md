# solong

A small top-down tile game. You walk a player around a walled map, pick up
every key, and leave through an exit. Maps are plain text files with the
`.ber` extension; sprites are XPM images drawn in a pygame window.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/level.ber
solong --bonus path/to/level.ber
```

Use `W`, `A`, `S`, `D` to move and `Esc` (or close the window) to quit.

- Walking into a wall does nothing.
- Walking onto a key collects it.
- Walking onto an exit before every key is collected just passes over it;
  walking onto an exit with every key collected wins and ends the game.
- Without `--bonus`, each step is printed to the console as `step N`.
- With `--bonus`, danger tiles (`D`) are allowed on the map and stepping on
  one ends the game; the step count and the number of keys left are drawn
  in the window, and the player sprite alternates between two images.

Every way the program ends prints a message (an error, or
`<<<<<<<<<< SEE YOU !!! >>>>>>>>>>` after playing) and the command exits
with status 1.

## Map format

A map is a rectangle of characters, one row per line, with no empty lines
and no newline at the very start or end:

| Symbol | Meaning                       |
|--------|-------------------------------|
| `1`    | wall                          |
| `0`    | floor                         |
| `P`    | player start (exactly one)    |
| `C`    | key to collect (one or more)  |
| `E`    | exit (one or more)            |
| `D`    | danger (bonus mode only)      |

The outer border must be made of walls, and from the player's start there
must be a path (not crossing walls, nor danger tiles in bonus mode) to every
key and to an exit. A map that breaks any rule is rejected with a message
saying what is wrong.

Example:

```
1111111
1P0C0E1
1111111
```

## Sprites

The window is 100 pixels per map cell. Tile images are read from an `img`
directory in the current working directory, under these names:
`ground.xpm`, `wall.xpm`, `player1.xpm`, `player2.xpm`, `key.xpm`,
`exit.xpm` and `danger.xpm`.

## What the package does not include

No sprite images ship with the package. You must provide the `img`
directory yourself; the `solong` command has no option to point elsewhere,
although `solong.app.run(game, assets_dir)` accepts another directory.

## Using it as a library

```python
from solong.maps import load_map
from solong.pathcheck import validate_path
from solong.game import Game, Direction, Outcome

game_map = load_map("level.ber", bonus=False)
validate_path(game_map, bonus=False)

game = Game(game_map, bonus=False)
outcome = game.press(Direction.RIGHT)   # Outcome.MOVED, BLOCKED, WON or LOST
print(game.steps, game.collectibles, game.player)
```

- `solong.maps`: `load_map`, `parse_map`, `read_map_text`,
  `check_file_extension`, the `GameMap` grid and `MapError`.
- `solong.pathcheck`: `reachable_cells` and `validate_path`.
- `solong.game`: `Game` with `step(dx, dy)`, `press(direction)` and
  `initial_frame()`. Moves append `Draw` and `TextDraw` commands to
  `game.commands` and, outside bonus mode, lines to `game.messages`.
- `solong.xpm`: `load_xpm`, `parse_xpm_text` and `parse_xpm` give an
  `XpmImage` of 0xAARRGGBB pixels (`to_rgba()` gives RGBA bytes);
  `XpmError` is raised on bad data.
- `solong.colors`: `lookup_color(name)` for named XPM colours.
- `solong.app`: `main(argv)`, `run(game, assets_dir)` and `window_size`.