"""Generates goal, scrambled and random boards."""

from __future__ import annotations

import random

from fifteen.models.board import Board

DEFAULT_SIZE = 4
DEFAULT_DEPTH = 20


class GameGenerator:
    """Builds boards from the solved state or from random permutations."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.from_flat(size, [*range(1, size * size), 0])

    @staticmethod
    def scramble(board: Board, depth: int, rng: random.Random | None = None) -> Board:
        """Random walk of *depth* slides from *board* without immediate backtracking.

        The result is always reachable from *board*, so a scramble of the
        goal is always solvable.
        """
        rng = rng or random.Random()
        previous: Board | None = None
        for _ in range(depth):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int = DEFAULT_SIZE,
        depth: int = DEFAULT_DEPTH,
        seed: int | None = None,
    ) -> Board:
        """Return a solvable board, not already solved unless *depth* is 0."""
        rng = random.Random(seed)
        board = GameGenerator.scramble(GameGenerator.solved(size), depth, rng)
        # A walk can close a loop back onto the goal (every 12 slides on 2×2).
        if board.is_goal() and depth > 0:
            board = rng.choice(board.neighbors())
        return board

    @staticmethod
    def permutation(size: int, seed: int | None = None) -> Board:
        """Uniformly random layout; solvable or not with equal odds."""
        flat = list(range(size * size))
        random.Random(seed).shuffle(flat)
        return Board.from_flat(size, flat)
