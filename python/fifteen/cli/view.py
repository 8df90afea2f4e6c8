"""Rich rendering for boards and solutions."""

from __future__ import annotations

import rich.box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.models.board import Board, Move


def cell_markup(board: Board, row: int, col: int, moved: int | None = None) -> str:
    """Markup for one cell: blank dimmed, *moved* in cyan, placed tiles green."""
    width = len(str(board.size * board.size - 1))
    val = board.tiles[row][col]
    if val == 0:
        return "[dim]·[/dim]"
    if val == moved:
        return f"[bold reverse cyan]{val:>{width}}[/bold reverse cyan]"
    if board.is_tile_correct(row, col):
        return f"[bold green]{val:>{width}}[/bold green]"
    return f"[bold white]{val:>{width}}[/bold white]"


def render_board(board: Board, moved: int | None = None) -> Table:
    """Return a Rich Table of the grid, highlighting the tile that last moved."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.size):
        table.add_row(*(cell_markup(board, r, c, moved) for c in range(board.size)))

    return table


def board_panel(board: Board, title: str, moved: int | None = None) -> Panel:
    stats = Text()
    stats.append("Heuristic: ", style="dim")
    stats.append(str(board.sum_distance()), style="bold yellow")
    stats.append("    Goal: ", style="dim")
    stats.append("yes" if board.is_goal() else "no", style="bold yellow")
    return Panel(
        Group(render_board(board, moved), stats),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
        expand=False,
    )


def moves_text(moves: list[Move], limit: int = 40) -> Text:
    """Compact one-line rendering, truncated after *limit* moves."""
    text = Text()
    for i, move in enumerate(moves[:limit]):
        if i:
            text.append(", ", style="dim")
        text.append(str(move.tile), style="bold white")
        text.append(str(move.direction), style="cyan")
    if len(moves) > limit:
        text.append(f" … (+{len(moves) - limit} more)", style="dim")
    return text
