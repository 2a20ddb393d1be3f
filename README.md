# solong

Building blocks for a small tile-based puzzle game in which a player walks a
walled map, picks up every coin and then steps onto the exit. The package
loads and checks maps, works out what the player can reach, reads XPM
images, looks up X11 colour names, and carries a few string and formatting
helpers. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Map format

A map is a plain text file, by convention with the extension `.ber`, holding
one row per line. The allowed characters are:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | coin         |
| `E`  | exit         |

Example:

```
1111111111
1P0C00C0E1
1011110101
1000C00001
1111111111
```

## Maps: `solong.gamemap`

```python
from solong.gamemap import GameMap, MapError, Position, check_extension

check_extension("level.ber")          # True

game_map = GameMap.load("level.ber")  # or GameMap.from_lines(lines)
try:
    game_map.validate()
except MapError as exc:
    print(exc)
else:
    print(game_map.player, game_map.total_coins)   # Position(x=1, y=1) 3
```

- `GameMap.from_lines(lines)` drops the newline at each end of every line and
  raises `MapError` when there are fewer than three rows ("Map too short"),
  or when the map is both narrower than 3 columns and shorter than 5 rows
  ("Map too thin"). `GameMap.load(path)` reads a file the same way and raises
  `MapError` if it cannot be opened.
- `GameMap.validate()` raises `MapError` unless all rows have the same
  length, the border is made only of walls, only the characters above are
  used, there is exactly one player and one exit, there is at least one coin,
  and the player can reach every coin and the exit. On success it sets
  `player`, `exits` and `total_coins`.
- `GameMap.tile(pos)` and `GameMap.set_tile(pos, value)` read and replace a
  cell; `rows` and `cols` give the size, and `str(game_map)` gives the grid
  back as text.
- `flood_fill(grid, start)` returns the set of `Position`s reachable from
  `start` without crossing walls. `Position.shifted(dx, dy)` gives a
  neighbouring cell.

## Images: `solong.xpm`

`load_xpm(path)` and `parse_xpm_text(text)` decode an XPM file into an
`XpmImage` with `width`, `height` and rows of 32-bit `pixels`;
`XpmImage.pixel(x, y)` reads one. Colours are given as `#rrggbb` or by name;
the colour `None` becomes the transparent value `0xFF000000`. `parse_xpm`
works on the quoted strings alone, `strip_comments` blanks out C-style
comments, and `split_words` splits on spaces and tabs. Malformed data raises
`XpmError`.

## Colours: `solong.colors`

- `lookup_color(name, suffix=None)` finds an X11 colour name,
  case-insensitively, and returns `None` for unknown names.
- `parse_color(text, suffix=None)` accepts `#rrggbb` or a name; unknown names
  give 0 and `none` gives -1.
- `pack_color(color, depth, layout)` returns the colour unchanged for depths
  of 24 bits or more, and otherwise packs it by a `ChannelLayout`, which
  `ChannelLayout.from_masks(red_mask, green_mask, blue_mask)` derives from
  channel bit masks.

## Text helpers

- `solong.linereader`: `LineReader` reads a text or binary stream in chunks of
  `BUFFER_SIZE` (42) and yields lines with their newlines; `read_lines(path)`
  returns all lines of a file.
- `solong.textops`: `atoi`, `itoa`, `split`, `trim`, `substr`,
  `find_bounded`, `compare_prefix`, `find_char`, `rfind_char`,
  `copy_bounded`, `concat_bounded` and `map_indexed`, with C-style bounded
  copy and 32-bit integer semantics.
- `solong.printf`: `format_text(fmt, *args)` expands `%c %s %p %d %i %u %x %X
  %%`; `printf` writes the result to standard output and returns its length;
  `put_number` and `put_line` write to a given stream.
- `solong.charclass`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower` and `to_upper` on integer character codes.

## What this package does not do

There is no game to play yet: the package opens no window, draws no tiles,
handles no key presses, keeps no move count and installs no command. It
stops at loading, checking and analysing maps and at the supporting image,
colour and text utilities described above.

## Running the tests

```
pip install .[test]
pytest
```