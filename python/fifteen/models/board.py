"""Board model for the sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple

from fifteen.errors import IllegalMove, MalformedBoard


class Direction(StrEnum):
    """Direction in which a numbered tile (never the blank) slides."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


# Row/column offset travelled by the tile.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Move(NamedTuple):
    tile: int
    direction: Direction

    def __str__(self) -> str:
        return f"{self.tile} {self.direction}"


Grid = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class Board:
    """Immutable N×N puzzle board.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Every operation that changes the layout returns a new ``Board``.
    """

    tiles: Grid
    size: int = field(init=False, compare=False)
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        rows = self.tiles
        if not isinstance(rows, Sequence) or not all(
            isinstance(row, Sequence) and not isinstance(row, str) for row in rows
        ):
            raise MalformedBoard("board must be a sequence of rows")
        grid = tuple(tuple(row) for row in rows)
        size = len(grid)
        if size < 2:
            raise MalformedBoard(f"board must be at least 2×2, got {size} rows")
        for r, row in enumerate(grid):
            if len(row) != size:
                raise MalformedBoard(
                    f"row {r} has {len(row)} tiles, expected {size}"
                )

        counts = [0] * (size * size)
        blank_pos = (0, 0)
        for r, row in enumerate(grid):
            for c, v in enumerate(row):
                if not isinstance(v, int) or not 0 <= v < size * size:
                    raise MalformedBoard(f"found tile {v}")
                counts[v] += 1
                if v == 0:
                    blank_pos = (r, c)
        for tile, n in enumerate(counts):
            if n != 1:
                raise MalformedBoard(f"tile {tile} appears {n} times")

        object.__setattr__(self, "tiles", grid)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "blank_pos", blank_pos)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        return cls(grid)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise MalformedBoard(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(tuple(tuple(flat[r * size : (r + 1) * size]) for r in range(size)))

    # -- queries --------------------------------------------------------------

    def tile_at(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"({row}, {col}) is outside a {self.size}×{self.size} board")
        return self.tiles[row][col]

    def find(self, tile: int) -> tuple[int, int] | None:
        """Return the ``(row, col)`` of *tile*, or ``None`` if absent."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == tile:
                    return r, c
        return None

    def goal_position(self, tile: int) -> tuple[int, int]:
        return (tile - 1) // self.size, (tile - 1) % self.size

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return (row, col) == self.goal_position(val)

    def is_goal(self) -> bool:
        """Check if every numbered tile is in its goal position."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v != 0 and (r, c) != self.goal_position(v):
                    return False
        return True

    def sum_distance(self) -> int:
        """Manhattan distance of every tile plus the number of misplaced tiles.

        The misplaced count makes this overestimate, so searches guided by
        it are not guaranteed to find shortest solutions.
        """
        distance = 0
        misplaced = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    continue
                gr, gc = self.goal_position(v)
                distance += abs(r - gr) + abs(c - gc)
                if (r, c) != (gr, gc):
                    misplaced += 1
        return distance + misplaced

    # -- derived boards -------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards reachable by one slide, blank moving up, down, left, right."""
        br, bc = self.blank_pos
        out: list[Board] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                out.append(self._swapped((br, bc), (nr, nc)))
        return out

    def twin(self) -> Board:
        """Swap one pair of adjacent tiles in the top two rows.

        The swap flips permutation parity, so exactly one of a board and
        its twin can reach the goal.
        """
        if self.tiles[0][0] != 0 and self.tiles[0][1] != 0:
            return self._swapped((0, 0), (0, 1))
        return self._swapped((1, 0), (1, 1))

    def move(self, tile: int, direction: Direction) -> Board:
        """Slide *tile* one cell in *direction* into the blank."""
        pos = self.find(tile)
        if pos is None or tile == 0:
            raise IllegalMove(f"tile {tile} not found")
        try:
            direction = Direction(direction)
        except ValueError:
            raise IllegalMove(f"unexpected direction {direction!r}") from None
        dr, dc = _OFFSETS[direction]
        tr, tc = pos[0] + dr, pos[1] + dc
        if (tr, tc) != self.blank_pos:
            raise IllegalMove(f"tile {tile} cannot move {direction.name}")
        return self._swapped(pos, (tr, tc))

    def apply(self, moves: Iterable[Move | tuple[int, Direction]]) -> Board:
        board = self
        for tile, direction in moves:
            board = board.move(tile, direction)
        return board

    # -- helpers --------------------------------------------------------------

    def _swapped(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board.from_grid(rows)

    def __str__(self) -> str:
        return "".join(
            " ".join(f"{v:>2}" if v else "  " for v in row) + "\n"
            for row in self.tiles
        )
