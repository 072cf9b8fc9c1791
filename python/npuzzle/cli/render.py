"""Rich rendering for boards and solver results."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
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

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def board_panel(board: Board, title: str) -> Panel:
    stats = Text()
    stats.append("manhattan ", style="dim")
    stats.append(str(board.manhattan()), style="bold yellow")
    stats.append("  hamming ", style="dim")
    stats.append(str(board.hamming()), style="bold yellow")
    return Panel(
        Group(Align.center(render_board(board)), Align.center(stats)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
        padding=(0, 1),
        expand=False,
    )


# -- solver output ------------------------------------------------------------


def print_result(console: Console, solver: Solver, show_boards: bool = True) -> None:
    """Print the outcome of *solver*, optionally with every solution board."""
    if solver.unsolvable():
        console.print("[bold red]No solution possible.[/bold red]")
        return

    console.print(
        f"[bold green]Minimum number of moves = {solver.moves()}[/bold green]"
    )
    directions = solver.directions() or []
    if directions:
        console.print(
            "[dim]Blank moves:[/dim] "
            + " ".join(f"[cyan]{d.value}[/cyan]" for d in directions)
        )

    if show_boards:
        solution = solver.solution() or []
        panels = [
            board_panel(board, "Start" if i == 0 else f"Move {i}")
            for i, board in enumerate(solution)
        ]
        console.print(Columns(panels))
