"""Game maps: loading from text, validation and reachability."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike

from solong.linereader import read_lines

__all__ = [
    "WALL",
    "EMPTY",
    "EXIT",
    "COIN",
    "PLAYER",
    "TILES",
    "MapError",
    "Position",
    "GameMap",
    "check_extension",
    "flood_fill",
]

WALL = "1"
EMPTY = "0"
EXIT = "E"
COIN = "C"
PLAYER = "P"
TILES = frozenset((WALL, EMPTY, EXIT, COIN, PLAYER))

MAP_EXTENSION = ".ber"


class MapError(ValueError):
    """Raised when a map cannot be read or is not playable."""


@dataclass(frozen=True)
class Position:
    """A cell of the map: column ``x`` and row ``y``."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Position:
        """The position ``dx`` columns and ``dy`` rows away."""
        return Position(self.x + dx, self.y + dy)


def check_extension(path: str | PathLike[str]) -> bool:
    """True when the file name ends in ``.ber``."""
    return str(path).endswith(MAP_EXTENSION)


def flood_fill(grid: Sequence[Sequence[str]], start: Position) -> set[Position]:
    """Every cell reachable from ``start`` by steps that avoid walls."""
    def open_cell(pos: Position) -> bool:
        return (0 <= pos.y < len(grid) and 0 <= pos.x < len(grid[pos.y])
                and grid[pos.y][pos.x] != WALL)

    if not open_cell(start):
        return set()
    seen = {start}
    pending = deque([start])
    while pending:
        current = pending.popleft()
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            neighbour = current.shifted(dx, dy)
            if neighbour not in seen and open_cell(neighbour):
                seen.add(neighbour)
                pending.append(neighbour)
    return seen


class GameMap:
    """A rectangular grid of tiles.

    ``player``, ``exits`` and ``total_coins`` are filled in by :meth:`validate`.
    """

    def __init__(self, rows: Iterable[str]) -> None:
        self.grid: list[list[str]] = [list(row) for row in rows]
        self.player: Position | None = None
        self.exits = 0
        self.total_coins = 0

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)

    def _check_thin(self) -> None:
        if self.cols < 3 and self.rows < 5:
            raise MapError("Map too thin")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Build a map from lines of text; newlines at their ends are dropped."""
        rows = [line.strip("\n") for line in lines]
        if len(rows) < 3:
            raise MapError("Map too short")
        game_map = cls(rows)
        game_map._check_thin()
        return game_map

    @classmethod
    def load(cls, path: str | PathLike[str]) -> GameMap:
        """Read a map file."""
        try:
            lines = read_lines(path)
        except OSError as exc:
            raise MapError("Error while opening map_file") from exc
        except ValueError as exc:
            raise MapError("Couldn't read map") from exc
        return cls.from_lines(lines)

    def _surrounded(self) -> bool:
        if self.cols == 0:
            return False
        if any(row[0] != WALL or row[-1] != WALL for row in self.grid):
            return False
        return all(tile == WALL for tile in self.grid[0] + self.grid[-1])

    def validate(self) -> None:
        """Check that the map is playable and record its player, exit and coins."""
        width = self.cols
        if any(len(row) != width for row in self.grid):
            raise MapError("Invalid map format")
        self._check_thin()
        if not self._surrounded():
            raise MapError("Map not surrounded by walls.")

        players: list[Position] = []
        exits = 0
        coins = 0
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    players.append(Position(x, y))
                elif tile == EXIT:
                    exits += 1
                elif tile == COIN:
                    coins += 1
                elif tile not in TILES:
                    raise MapError("Invalid characters on map")
        if len(players) != 1:
            raise MapError("ERROR\nWrong number of players.")
        if exits != 1:
            raise MapError("ERROR\nWrong number of exits.")
        if coins < 1:
            raise MapError("ERROR\nNo coins on the map.")

        reachable = flood_fill(self.grid, players[-1])
        found_coins = sum(1 for pos in reachable if self.tile(pos) == COIN)
        found_exits = sum(1 for pos in reachable if self.tile(pos) == EXIT)
        if found_coins != coins or found_exits != 1:
            raise MapError("ERROR\nPlayer can't find all coins or exit.")

        self.player = players[-1]
        self.exits = exits
        self.total_coins = coins

    def tile(self, pos: Position) -> str:
        """The tile at ``pos``."""
        return self.grid[pos.y][pos.x]

    def set_tile(self, pos: Position, value: str) -> None:
        """Replace the tile at ``pos``."""
        if len(value) != 1:
            raise ValueError(f"a tile is a single character, got {value!r}")
        self.grid[pos.y][pos.x] = value