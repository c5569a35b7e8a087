# sollong

A small top-down puzzle game. You walk a character around a walled map,
pick up every collectible, and then step onto the exit.

## Installing

```
pip install .
```

The game window uses `pygame`. To run the tests, install the `test`
extra, which adds `pytest`:

```
pip install ".[test]"
```

## Playing

```
sollong maps/level.ber
```

The command takes exactly one argument, a map file whose name ends in
`.ber`. With any other number of arguments, or a name without that
ending, it exits with status 1 and prints nothing. If the map cannot be
read or is not valid, it prints `Error` and exits with status 1.

Controls:

- `W`/`A`/`S`/`D` or the arrow keys move the player one cell.
- `Esc` or closing the window quits.

Every successful move prints its running count, such as `Move n⁰3`.
Stepping onto the exit only works once every collectible has been taken;
that last move is counted too, a "GG" banner is printed and the game
ends.

Sprites are read from `xpm/player.xpm`, `xpm/mur.xpm`, `xpm/fond.xpm`,
`xpm/mush.xpm` and `xpm/exit.xpm`, relative to the directory the game is
started from. A sprite that cannot be read is drawn as a plain coloured
square instead. Each tile is 64×64 pixels, and the window is sized to fit
the whole map.

## Map format

A map is a text file with one row per line. Every row must have the same
length, and only these characters may appear:

| Char | Meaning                    |
|------|----------------------------|
| `0`  | floor                      |
| `1`  | wall                       |
| `P`  | player start (exactly one) |
| `C`  | collectible (at least one) |
| `E`  | exit (exactly one)         |

The whole border must be wall. Every collectible must be reachable
without passing through the exit, and the exit must be reachable from the
start. For example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from sollong.gamemap import load_map
from sollong.game import Game, Direction, MoveResult

game_map = load_map("maps/level.ber")   # raises MapError if the map is invalid
game = Game(game_map)
result = game.move(Direction.RIGHT)     # a MoveResult, e.g. MoveResult.MOVED
```

`Game.handle_key(keycode)` takes X11 key symbols (letters as their
character codes, arrows as 65361–65364, Escape as 65307), and
`Game.tiles()` yields `(row, column, tile)` for every cell with the
player in place. Moves print to the stream given to `Game(game_map,
stream=...)`, or to standard output.

Other modules that can be used on their own:

- `sollong.gamemap`: `parse_map(lines)` and `load_map(path)` build and
  validate a `GameMap`; `GameMap.validate()` raises `MapError` with the
  reason a map is rejected. `Tile` names the map characters.
- `sollong.pathfind`: `collectibles_reachable(rows, start)`,
  `exit_reachable(rows, start)` and `is_finishable(rows, start)`.
- `sollong.xpm`: `load_xpm(path)` and `parse_xpm(lines)` read XPM images
  into an `XpmImage`; `XpmImage.pixel(x, y)` gives one pixel as
  `0xAARRGGBB`. Invalid data raises `XpmError`.
- `sollong.colors`: `lookup_color(name)` and `text_to_rgb(name, suffix)`
  turn X11 colour names and `#rrggbb` values into RGB integers.
- `sollong.printf`: `sprintf(fmt, *args)` and
  `printf(fmt, *args, stream=...)`, a small formatter for the
  `%c %s %p %d %i %u %x %X %%` conversions.
- `sollong.wordtab`: `find`, `find_outside_quotes` and `split_words`,
  the string helpers behind the XPM reader.