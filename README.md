# solong

`solong` loads and checks the maps of a small tile puzzle. The player starts on
`P`, has to pick up every collectible `C`, and leaves through the exit `E`.
Walls are `1` and floor is `0`.

A map is accepted only if:

- every row has the same width, so the map is a rectangle;
- it holds only the characters `1`, `0`, `C`, `P` and `E`;
- every tile on the border is a wall;
- it holds exactly one player, exactly one exit and at least one collectible;
- from the player's start every collectible and the exit can be reached by
  moving up, down, left and right without walking through walls.

The width of a map is taken from its first line minus its line ending, so the
first line is expected to end with a newline. Later lines are compared without
their newline; the last line may lack one. Map files are read as UTF-8.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
solong path/to/level.ber
```

The same check runs with `python -m solong.mapcheck path/to/level.ber`.

A valid map exits quietly with status 0. If anything is wrong, `Error` and a
line saying what went wrong are written to standard error, and the exit status
is 1. The messages are:

- `Cannot open map`
- `Empty file map`
- `Map is not rectangular`
- `Invalid character in map`
- `Map not surrounded by walls`
- `More than 1 player in map` / `More than 1 exit in map`
- `Less than 1 collectible in map` / `Less than 1 exit in map` /
  `Less than 1 player in map`
- `Path is invalid`

Giving anything other than exactly one map path prints `ONLY 1 map allowd` to
standard output and exits with status 1.

Example map:

```
1111111
1P0C0E1
1111111
```

## Library use

```python
from solong.mapcheck import MapError, parse_map

try:
    game_map = parse_map("level.ber")
except MapError as err:
    print(f"rejected: {err}")
```

`parse_map` returns a `GameMap`, a dataclass with the rows in `grid`, the
`width` and `height`, the player's start in `start_x` and `start_y`, and the
counts `collect`, `exit` and `player`.

The steps can also be run one at a time on lines already in memory:

```python
from solong.mapcheck import build_map, is_path_valid, validate_map

game_map = build_map(["11111\n", "1PCE1\n", "11111\n"])
validate_map(game_map)          # raises MapError if a rule is broken
is_path_valid(game_map)         # True
```

`build_map` takes lines with their newlines, as read from a file.
`validate_map` records the start position and the counts on the map.
`is_path_valid` returns whether every collectible and the exit are reachable
from the start.

## What it does not do

The package checks maps; it does not play them. There is no game window, no
graphics, no movement or move counter, and no keyboard handling.

## Helpers

The package also carries the small utilities the map checker is built on:

- `solong.chars`: ASCII character tests and case changes (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
  Each takes a one-character string or an int code.
- `solong.textutil`: `atoi` (leading integer, wrapped to 32 bits), `itoa`
  (raises `OverflowError` outside the 32-bit range), `split` (drops empty
  pieces), `strtrim`, `substr`.
- `solong.search`: `strchr`, `strrchr`, `strnstr` return an index or `None`;
  `strncmp` and `memcmp` return the difference of the first differing
  characters or bytes; `strmapi` builds a new string from `func(index, char)`;
  `striteri` calls `func(index, item)` over a mutable sequence and stores back
  any value it returns.
- `solong.formatting`: `printf`-style formatting of `%c %s %p %d %i %u %x %X %%`
  with the flags `- 0 # space +`, a width and a precision. `sprintf` returns the
  text, `printf` writes it to standard output and returns its length. Too few
  arguments raise `TypeError`. `parse_spec` and `FormatSpec` expose the
  conversion parser.
- `solong.linereader`: `LineReader` reads a text or binary stream one line at a
  time in chunks of a chosen size (42 by default) and keeps each line's
  newline; `readline` returns `None` at the end and the reader can be iterated.
  `read_lines` yields the lines of a file given by path.

```python
from solong.formatting import sprintf
from solong.textutil import split

sprintf("[%5d|%-4s|%#x]", 42, "ab", 255)   # '[   42|ab  |0xff]'
split("x,,,y,,z,", ",")                    # ['x', 'y', 'z']
```