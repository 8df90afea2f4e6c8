"""Fifteen-puzzle solver: board model, search engine and file I/O."""

from fifteen.errors import IllegalMove, MalformedBoard, PuzzleError, Underflow

__all__ = ["IllegalMove", "MalformedBoard", "PuzzleError", "Underflow"]

__version__ = "0.1.0"
