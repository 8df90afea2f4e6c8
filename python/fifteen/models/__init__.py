from fifteen.models.board import Board, Direction, Move
from fifteen.models.boardfile import (
    format_board,
    format_moves,
    parse_board,
    read_board,
    write_board,
    write_moves,
)

__all__ = [
    "Board",
    "Direction",
    "Move",
    "format_board",
    "format_moves",
    "parse_board",
    "read_board",
    "write_board",
    "write_moves",
]
