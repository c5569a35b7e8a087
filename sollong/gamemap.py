"""Loading and validating game maps."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from enum import Enum

from sollong.pathfind import collectibles_reachable, exit_reachable

TILE_SIZE = 64
MAP_SUFFIX = ".ber"


class MapError(ValueError):
    """Raised when a map cannot be read or is not playable."""


class Tile(str, Enum):
    """The characters a map may contain."""

    EMPTY = "0"
    WALL = "1"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"


def _char(tile: Tile | str) -> str:
    return tile.value if isinstance(tile, Tile) else tile


def has_ber_extension(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` ends with the map suffix."""
    return os.fspath(path).endswith(MAP_SUFFIX)


def strip_newlines(lines: Iterable[str]) -> list[str]:
    """Cut each line at its newline and check that all rows share one length.

    The expected length is that of the first line without its newline.
    """
    lines = list(lines)
    if not lines:
        raise MapError("map is empty")
    expected = len(lines[0]) - 1
    rows = []
    for number, line in enumerate(lines, start=1):
        row = line.split("\n", 1)[0]
        if len(row) != expected:
            raise MapError(f"line {number} has {len(row)} columns, expected {expected}")
        rows.append(row)
    return rows


class GameMap:
    """A rectangular grid of tiles, indexed by ``(row, column)``."""

    def __init__(self, rows: Iterable[str]) -> None:
        self.grid: list[list[str]] = [list(row) for row in rows]

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def pixel_size(self) -> tuple[int, int]:
        """Width and height of the window that shows the whole map."""
        return self.width * TILE_SIZE, self.height * TILE_SIZE

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        return self.grid[row][col]

    def __setitem__(self, position: tuple[int, int], tile: Tile | str) -> None:
        row, col = position
        self.grid[row][col] = _char(tile)

    def __str__(self) -> str:
        return "\n".join(self.rows)

    def _cells(self) -> Iterator[tuple[int, int, str]]:
        for r, row in enumerate(self.grid):
            for c, char in enumerate(row):
                yield r, c, char

    def count(self, tile: Tile | str) -> int:
        """Return how many cells hold ``tile``."""
        char = _char(tile)
        return sum(row.count(char) for row in self.grid)

    def player_position(self) -> tuple[int, int]:
        """Return the ``(row, column)`` of the player; the last one if several."""
        found = None
        for r, c, char in self._cells():
            if char == Tile.PLAYER.value:
                found = (r, c)
        if found is None:
            raise MapError("map has no player")
        return found

    def validate(self) -> None:
        """Check that the map is playable, raising MapError if not."""
        if not self.grid or self.width == 0:
            raise MapError("map is empty")
        allowed = {tile.value for tile in Tile}
        for r, c, char in self._cells():
            if char not in allowed:
                raise MapError(f"invalid character {char!r} at row {r}, column {c}")
        if any(len(row) != self.width for row in self.grid):
            raise MapError("map is not rectangular")
        last = self.height - 1
        for r, row in enumerate(self.grid):
            border = row if r in (0, last) else (row[0], row[-1])
            if any(char != Tile.WALL.value for char in border):
                raise MapError(f"row {r} is not closed by walls")
        if self.count(Tile.EXIT) != 1:
            raise MapError("map needs exactly one exit")
        if self.count(Tile.PLAYER) != 1:
            raise MapError("map needs exactly one player")
        if self.count(Tile.COLLECTIBLE) == 0:
            raise MapError("map needs at least one collectible")
        start = self.player_position()
        rows = self.rows
        if not collectibles_reachable(rows, start):
            raise MapError("some collectibles cannot be reached")
        if not exit_reachable(rows, start):
            raise MapError("the exit cannot be reached")


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build and validate a map from its lines, newlines included."""
    game_map = GameMap(strip_newlines(lines))
    game_map.validate()
    return game_map


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read, parse and validate a map file."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read {os.fspath(path)}: {exc}") from exc
    return parse_map(_split_lines(text))