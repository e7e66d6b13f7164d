"""Loading and validating so_long maps: shape, characters, walls and reachability."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from solong.linereader import read_lines

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
PLAYER = "P"
EXIT = "E"
MAP_CHARS = WALL + FLOOR + COLLECTIBLE + PLAYER + EXIT


class MapError(Exception):
    """Raised when a map cannot be loaded or breaks one of the map rules."""


@dataclass
class GameMap:
    """A rectangular grid of map characters and what was counted on it."""

    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    start_x: int = -1
    start_y: int = -1
    collect: int = 0
    exit: int = 0
    player: int = 0


def build_map(lines: Iterable[str]) -> GameMap:
    """Build a map from lines as read from a file, newlines included.

    The width is the length of the first line less one; every later line,
    without its newline, must have that width.
    """
    iterator = iter(lines)
    first = next(iterator, None)
    if first is None:
        raise MapError("Empty file map")
    width = len(first) - 1
    rows = [first[:width]]
    for line in iterator:
        current = len(line) - 1 if "\n" in line else len(line)
        if current != width:
            raise MapError("Map is not rectangular")
        rows.append(line[:width])
    return GameMap(grid=rows, width=width, height=len(rows))


def _on_border(game_map: GameMap, row: int, col: int) -> bool:
    return row in (0, game_map.height - 1) or col in (0, game_map.width - 1)


def validate_map(game_map: GameMap) -> None:
    """Check characters, surrounding walls and the counts of P, E and C.

    Records the player's start and the counts on the map; raises MapError
    on the first rule that is broken.
    """
    game_map.start_x = game_map.start_y = -1
    game_map.collect = game_map.exit = game_map.player = 0
    for row, line in enumerate(game_map.grid):
        for col, ch in enumerate(line):
            if ch not in MAP_CHARS:
                raise MapError("Invalid character in map")
            if ch != WALL and _on_border(game_map, row, col):
                raise MapError("Map not surrounded by walls")
            if ch == PLAYER:
                game_map.start_x, game_map.start_y = col, row
                game_map.player += 1
                if game_map.player != 1:
                    raise MapError("More than 1 player in map")
            elif ch == EXIT:
                game_map.exit += 1
                if game_map.exit != 1:
                    raise MapError("More than 1 exit in map")
            elif ch == COLLECTIBLE:
                game_map.collect += 1
    if game_map.collect < 1:
        raise MapError("Less than 1 collectible in map")
    if game_map.exit < 1:
        raise MapError("Less than 1 exit in map")
    if game_map.player < 1:
        raise MapError("Less than 1 player in map")


def is_path_valid(game_map: GameMap) -> bool:
    """True when every collectible and the exit can be reached from the start."""
    seen: set[tuple[int, int]] = set()
    stack = [(game_map.start_y, game_map.start_x)]
    collected = 0
    exit_found = False
    while stack:
        row, col = stack.pop()
        if not (0 <= row < game_map.height and 0 <= col < game_map.width):
            continue
        if (row, col) in seen or game_map.grid[row][col] == WALL:
            continue
        seen.add((row, col))
        cell = game_map.grid[row][col]
        if cell == COLLECTIBLE:
            collected += 1
        elif cell == EXIT:
            exit_found = True
        stack.extend(((row, col + 1), (row, col - 1), (row - 1, col), (row + 1, col)))
    return collected == game_map.collect and exit_found


def parse_map(path: str) -> GameMap:
    """Load the map file at path and check every rule, raising MapError if one fails."""
    try:
        game_map = build_map(read_lines(path))
    except OSError as exc:
        raise MapError("Cannot open map") from exc
    validate_map(game_map)
    if not is_path_valid(game_map):
        raise MapError("Path is invalid")
    return game_map


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the one map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write("ONLY 1 map allowd\n")
        return 1
    try:
        parse_map(args[0])
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())