"""Puzzle file persistence.

A puzzle file holds the board size on its first line followed by one line
per row of whitespace-separated tiles, 0 marking the blank::

    3
    1 2 3
    4 5 6
    7 0 8
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.errors import InvalidBoardError
from npuzzle.models.board import Board


def parse_board(text: str) -> Board:
    """Build a board from puzzle-file text; blank lines are ignored."""
    lines = [line.split() for line in text.splitlines() if line.strip()]
    if not lines:
        raise InvalidBoardError("Puzzle text is empty.")

    header = lines[0]
    if len(header) != 1:
        raise InvalidBoardError(
            f"First line must hold only the board size, got {' '.join(header)!r}."
        )
    try:
        size = int(header[0])
        rows = [[int(v) for v in line] for line in lines[1:]]
    except ValueError as exc:
        raise InvalidBoardError(f"Puzzle text holds a non-integer value: {exc}") from exc

    if len(rows) != size:
        raise InvalidBoardError(f"Expected {size} rows, got {len(rows)}.")
    return Board.from_rows(rows)


def format_board(board: Board) -> str:
    """Return *board* in puzzle-file form, values right-aligned."""
    width = len(str(board.size * board.size - 1))
    lines = [str(board.size)]
    for row in board.rows():
        lines.append(" ".join(f"{v:>{width}}" for v in row))
    return "\n".join(lines) + "\n"


def load_board(path: Path) -> Board:
    return parse_board(Path(path).read_text())


def save_board(board: Board, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_board(board))
