"""Sliding puzzle solver command line.

Usage::

    npuzzle solve puzzles/3x3-10.txt      # solve and show every board
    npuzzle solve -q puzzles/4x4.txt      # move count and blank moves only
    npuzzle generate -s 4 -d hard -o puzzles/4x4.txt
    npuzzle twin puzzles/3x3-10.txt
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.cli.render import board_panel, print_result
from npuzzle.engine.generator import BoardGenerator, Difficulty
from npuzzle.engine.solver import Solver
from npuzzle.errors import PuzzleError
from npuzzle.models.board import Board
from npuzzle.models.puzzlefile import format_board, load_board, save_board

console = Console()
err_console = Console(stderr=True)

EXIT_UNSOLVABLE = 1
EXIT_INVALID = 2


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(path: Path) -> Board:
    try:
        return load_board(path)
    except OSError as exc:
        err_console.print(f"[red]Cannot read {path}: {exc.strerror}[/red]")
        raise typer.Exit(code=EXIT_INVALID) from exc
    except PuzzleError as exc:
        err_console.print(f"[red]Invalid puzzle {path}: {exc}[/red]")
        raise typer.Exit(code=EXIT_INVALID) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Optimal sliding puzzle solver."""
    _configure_logging(verbose)


@app.command()
def solve(
    path: Path = typer.Argument(..., help="Puzzle file to solve."),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Print the move count and blank moves only.",
    ),
) -> None:
    """Solve a puzzle file with the fewest moves."""
    board = _load(path)
    solver = Solver(board)
    print_result(console, solver, show_boards=not quiet)
    if solver.unsolvable():
        raise typer.Exit(code=EXIT_UNSOLVABLE)


@app.command()
def generate(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    difficulty: Difficulty = typer.Option(
        Difficulty.MEDIUM, "-d", "--difficulty",
        help="Number of random moves away from the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        help="Write the board here instead of printing it.",
    ),
) -> None:
    """Generate a random solvable puzzle."""
    board = BoardGenerator.generate(size, difficulty, random.Random(seed))
    if output is None:
        console.print(format_board(board), end="", highlight=False)
        return
    save_board(board, output)
    console.print(f"Wrote {size}×{size} {difficulty.value} puzzle to {output}")


@app.command()
def twin(
    path: Path = typer.Argument(..., help="Puzzle file."),
) -> None:
    """Print the twin of a puzzle (solvable exactly when the puzzle is not)."""
    board = _load(path)
    console.print(board_panel(board, "Board"))
    console.print(board_panel(board.twin(), "Twin"))


if __name__ == "__main__":
    app()
