"""Board and move-list text files.

A board file starts with the grid size on its own line, followed by one
line per row.  Each tile occupies two characters (zero- or space-padded,
``"  "`` for the blank) and tiles are separated by a single space::

    4
     1  2  3  4
     5  6  7  8
     9 10 11 12
    13 14    15
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from fifteen.errors import MalformedBoard
from fifteen.models.board import Board, Move

logger = logging.getLogger(__name__)

# Largest grid whose tiles (up to 99) fit a two-character field.
MAX_SIZE = 10


# -- reading ------------------------------------------------------------------


def _parse_field(field: str, line_no: int) -> int:
    digits = field.replace(" ", "0")
    if not digits.isdecimal():
        raise MalformedBoard(f"error in line {line_no}: bad tile {field!r}")
    return int(digits)


def _parse_row(line: str, size: int, line_no: int) -> list[int]:
    width = 3 * size - 1
    # Editors may strip the trailing blank from a row.
    line = line.ljust(width)
    if len(line) != width:
        raise MalformedBoard(f"error in line {line_no}")
    row: list[int] = []
    for c in range(size):
        start = 3 * c
        if c < size - 1 and line[start + 2] != " ":
            raise MalformedBoard(f"error in line {line_no}")
        row.append(_parse_field(line[start : start + 2], line_no))
    return row


def parse_board(text: str) -> Board:
    """Parse the contents of a board file."""
    lines = text.splitlines()
    if not lines:
        raise MalformedBoard("empty board file")
    try:
        size = int(lines[0].strip())
    except ValueError:
        raise MalformedBoard(f"bad size line {lines[0]!r}") from None
    if size < 2:
        raise MalformedBoard(f"bad board size {size}")
    if len(lines) < size + 1:
        raise MalformedBoard(f"error in line {len(lines) - 1}: expected {size} rows")

    rows = [_parse_row(lines[i + 1], size, i) for i in range(size)]
    return Board.from_grid(rows)


def read_board(path: Path) -> Board:
    board = parse_board(Path(path).read_text())
    logger.debug("Read %d×%d board from %s", board.size, board.size, path)
    return board


# -- writing ------------------------------------------------------------------


def format_board(board: Board) -> str:
    """Render *board* in the file layout; tiles must fit in two characters."""
    if board.size > MAX_SIZE:
        raise MalformedBoard(
            f"a {board.size}×{board.size} board does not fit the file format "
            f"(at most {MAX_SIZE}×{MAX_SIZE})"
        )
    return f"{board.size}\n{board}"


def write_board(path: Path, board: Board) -> None:
    Path(path).write_text(format_board(board))


def format_moves(moves: Iterable[Move]) -> str:
    """One ``"<tile> <direction>"`` line per move, each newline-terminated."""
    return "".join(f"{Move(*m)}\n" for m in moves)


def write_moves(path: Path, moves: Iterable[Move]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_moves(moves))
