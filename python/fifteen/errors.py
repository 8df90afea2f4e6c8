"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by this package."""


class MalformedBoard(PuzzleError, ValueError):
    """The grid is not square, or its tiles are not exactly ``0..N²-1``.

    Also raised by the board-file reader for badly formatted input.
    """


class IllegalMove(PuzzleError, ValueError):
    """A tile cannot slide in the requested direction."""


class Underflow(PuzzleError, IndexError):
    """Extraction from an empty priority queue."""
