"""Solver test suite.

Solvable boards are produced by seeded random walks from the goal, and
every returned move list is replayed through ``Board.move`` to check that
it really reaches the goal.  Solvability itself is cross-checked against
the inversion-parity rule.
"""

from __future__ import annotations

import itertools
import random

import pytest

from fifteen.engine.frontier import MinPQ
from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gamesolver import SearchNode, Solver, tile_direction
from fifteen.models.board import Board, Direction, Move

GOAL_4x4 = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]]
ONE_MOVE_4x4 = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 0, 15]]


# -- helpers ------------------------------------------------------------------


def _parity_solvable(board: Board) -> bool:
    n = board.size
    flat = [v for row in board.tiles for v in row if v != 0]
    inversions = sum(
        1
        for i in range(len(flat))
        for j in range(i + 1, len(flat))
        if flat[i] > flat[j]
    )
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = n - 1 - board.blank_pos[0]
    return (inversions + blank_row_from_bottom) % 2 == 0


def _assert_solve(board: Board) -> Solver:
    """Solve *board* and verify the returned moves reach the goal."""
    solver = Solver(board)
    assert solver.is_solvable()

    moves = solver.solution_moves()
    states = solver.solution_states()
    assert moves is not None and states is not None
    assert len(moves) == solver.move_count() == len(states) - 1
    assert all(isinstance(m, Move) for m in moves)
    assert states[0] == board
    assert states[-1].is_goal()

    current = board
    for i, (tile, direction) in enumerate(moves):
        current = current.move(tile, direction)
        assert current == states[i + 1], f"move {i} ({tile} {direction}) diverged"
    assert current.is_goal()
    return solver


# -- scenarios ----------------------------------------------------------------


def test_goal_board_needs_no_moves() -> None:
    board = Board.from_grid(GOAL_4x4)
    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.move_count() == 0
    assert solver.solution_moves() == []
    assert solver.solution_states() == [board]


def test_one_move_from_goal() -> None:
    board = Board.from_grid(ONE_MOVE_4x4)
    solver = _assert_solve(board)
    assert solver.move_count() == 1
    assert solver.solution_moves() == [(15, "L")]
    assert solver.solution_moves() == [Move(15, Direction.LEFT)]


def test_one_vertical_move_from_goal() -> None:
    board = Board.from_grid(
        [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 0], [13, 14, 15, 12]]
    )
    solver = _assert_solve(board)
    assert solver.solution_moves() == [Move(12, Direction.UP)]


def test_two_moves_from_goal() -> None:
    board = Board.from_grid([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    solver = _assert_solve(board)
    assert solver.solution_moves() == [
        Move(7, Direction.LEFT),
        Move(8, Direction.LEFT),
    ]


def test_odd_parity_board_is_unsolvable() -> None:
    board = Board.from_grid(
        [[2, 1, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]]
    )
    solver = Solver(board)
    assert not solver.is_solvable()
    assert solver.move_count() == -1
    assert solver.solution_moves() is None
    assert solver.solution_states() is None


@pytest.mark.parametrize("seed", range(4))
def test_twin_of_scramble_is_unsolvable(seed: int) -> None:
    board = GameGenerator.generate(4, depth=10, seed=seed).twin()
    solver = Solver(board)
    assert not solver.is_solvable()
    assert solver.move_count() == -1


# -- round trips --------------------------------------------------------------


@pytest.mark.parametrize(
    "size, depth, seed",
    [(3, 15, s) for s in range(4)] + [(4, d, s) for d in (8, 14) for s in range(3)],
    ids=lambda v: str(v),
)
def test_moves_replay_to_goal(size: int, depth: int, seed: int) -> None:
    board = GameGenerator.generate(size, depth=depth, seed=seed)
    solver = _assert_solve(board)
    assert solver.move_count() > 0
    assert solver.expanded > 0


def test_solution_moves_are_idempotent() -> None:
    solver = Solver(GameGenerator.generate(4, depth=12, seed=99))
    first = solver.solution_moves()
    second = solver.solution_moves()
    assert first == second
    assert first is not second


def test_solver_is_deterministic() -> None:
    board = GameGenerator.generate(4, depth=14, seed=5)
    assert Solver(board).solution_moves() == Solver(board).solution_moves()


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize(
    "perm", list(itertools.permutations(range(4))), ids=lambda p: "".join(map(str, p))
)
def test_exactly_one_of_board_and_twin_solvable_2x2(perm: tuple[int, ...]) -> None:
    board = Board.from_flat(2, list(perm))
    solvable = Solver(board).is_solvable()
    assert solvable != Solver(board.twin()).is_solvable()
    assert solvable == _parity_solvable(board)


@pytest.mark.parametrize("seed", range(6))
def test_exactly_one_of_board_and_twin_solvable_3x3(seed: int) -> None:
    board = GameGenerator.permutation(3, seed=seed)
    solver = Solver(board)
    twin_solver = Solver(board.twin())
    assert solver.is_solvable() != twin_solver.is_solvable()
    assert solver.is_solvable() == _parity_solvable(board)
    winner = solver if solver.is_solvable() else twin_solver
    assert winner.initial.apply(winner.solution_moves() or []).is_goal()


# -- search internals ---------------------------------------------------------


@pytest.mark.parametrize(
    "blank_to, expected",
    [
        ((1, 2), Direction.LEFT),
        ((1, 0), Direction.RIGHT),
        ((2, 1), Direction.UP),
        ((0, 1), Direction.DOWN),
    ],
    ids=["blank-right", "blank-left", "blank-down", "blank-up"],
)
def test_tile_direction(blank_to: tuple[int, int], expected: Direction) -> None:
    before = Board.from_grid([[1, 2, 3], [4, 0, 5], [6, 7, 8]])
    after = next(n for n in before.neighbors() if n.blank_pos == blank_to)
    assert tile_direction(before, after) == expected


def test_tile_direction_rejects_non_neighbors() -> None:
    board = Board.from_grid(GOAL_4x4)
    with pytest.raises(ValueError):
        tile_direction(board, board)


def test_search_node_priority_and_path() -> None:
    board = Board.from_grid(ONE_MOVE_4x4)
    root = SearchNode.root(board)
    assert root.priority == board.sum_distance() == 2
    assert root.parent is None and root.direction is None

    goal = board.move(15, Direction.LEFT)
    child = root.child(goal, Direction.LEFT)
    assert child.moves == 1
    assert child.priority == 1
    assert child.path() == [root, child]


def test_solver_keeps_random_boards_intact() -> None:
    rng = random.Random(1)
    board = GameGenerator.scramble(GameGenerator.solved(3), 10, rng)
    snapshot = board.tiles
    Solver(board)
    assert board.tiles == snapshot


def test_expansion_never_regenerates_parent_board() -> None:
    start = Board.from_grid([[1, 2, 3], [4, 0, 5], [6, 7, 8]])
    root = SearchNode.root(start)
    step = next(n for n in start.neighbors() if n.blank_pos == (1, 2))
    node = root.child(step, tile_direction(start, step))

    frontier: MinPQ[SearchNode] = MinPQ()
    frontier.insert(node)
    solver = Solver(GameGenerator.solved(3))
    assert solver._step(frontier) is None

    children = [frontier.extract_min() for _ in range(len(frontier))]
    assert start not in [c.state for c in children]
    assert len(children) == len(step.neighbors()) - 1
    assert all(c.parent is node and c.moves == 2 for c in children)
