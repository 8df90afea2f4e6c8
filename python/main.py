#!/usr/bin/env python3
"""Fifteen Puzzle Solver.

Usage::

    python main.py solve board.txt moves.txt   # write the move list
    python main.py show board.txt              # render a board file
    python main.py generate board.txt -s 4     # write a scrambled board
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from fifteen.cli.view import board_panel, moves_text
from fifteen.engine.gamegenerator import DEFAULT_DEPTH, DEFAULT_SIZE, GameGenerator
from fifteen.engine.gamesolver import Solver
from fifteen.errors import PuzzleError
from fifteen.models.board import Board
from fifteen.models.boardfile import read_board, write_board, write_moves

console = Console()
logger = logging.getLogger("fifteen")

app = typer.Typer(add_completion=False, no_args_is_help=True)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _load(path: Path) -> Board:
    try:
        return read_board(path)
    except (PuzzleError, OSError) as exc:
        console.print(f"[red]Cannot read board {path}:[/red] {exc}")
        raise typer.Exit(code=1) from exc


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Fifteen Puzzle Solver."""
    _configure_logging(verbose)


@app.command()
def solve(
    input_file: Path = typer.Argument(..., help="Board file to solve."),
    output_file: Path = typer.Argument(..., help="Where to write the moves."),
) -> None:
    """Solve a board file and write one "<tile> <direction>" line per move."""
    board = _load(input_file)
    solver = Solver(board)
    if not solver.is_solvable():
        console.print("No solution possible")
        return

    moves = solver.solution_moves() or []
    write_moves(output_file, moves)
    logger.debug("Wrote %d moves to %s", len(moves), output_file)
    console.print(f"[bold green]Solved in {solver.move_count()} moves.[/bold green]")
    if moves:
        console.print(moves_text(moves))
        final = board.apply(moves)
        console.print(board_panel(final, f"{input_file.name}  solved", moved=moves[-1].tile))


@app.command()
def show(
    input_file: Path = typer.Argument(..., help="Board file to render."),
) -> None:
    """Render a board file."""
    board = _load(input_file)
    console.print(board_panel(board, f"{input_file.name}  {board.size}×{board.size}"))


@app.command()
def generate(
    output_file: Path = typer.Argument(..., help="Where to write the board."),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=10,
        help="Grid size (2-10).",
    ),
    depth: int = typer.Option(
        DEFAULT_DEPTH, "-d", "--depth",
        min=0,
        help="Number of random slides away from the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
) -> None:
    """Write a solvable scrambled board."""
    board = GameGenerator.generate(size, depth, seed)
    write_board(output_file, board)
    console.print(board_panel(board, f"{output_file.name}  {size}×{size}"))


if __name__ == "__main__":
    app()
