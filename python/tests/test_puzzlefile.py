"""Puzzle file parsing and writing tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from npuzzle.errors import InvalidBoardError
from npuzzle.models.board import Board
from npuzzle.models.puzzlefile import format_board, load_board, parse_board, save_board


def test_parse_board() -> None:
    board = parse_board("3\n 1  2  3\n 4  5  6\n 7  0  8\n")
    assert board == Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])


def test_parse_ignores_blank_lines() -> None:
    board = parse_board("\n2\n\n1 2\n3 0\n\n")
    assert board == Board.goal(2)


def test_format_board_right_aligns() -> None:
    board = Board.from_flat(4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
    assert format_board(board) == (
        "4\n"
        " 1  2  3  4\n"
        " 5  6  7  8\n"
        " 9 10 11 12\n"
        "13 14  0 15\n"
    )


def test_format_then_parse() -> None:
    board = Board.from_rows([[8, 1, 3], [4, 0, 2], [7, 6, 5]])
    assert parse_board(format_board(board)) == board


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("", id="empty"),
        pytest.param("3 3\n1 2 3\n4 5 6\n7 8 0\n", id="bad-header"),
        pytest.param("x\n", id="non-integer-size"),
        pytest.param("2\n1 a\n3 0\n", id="non-integer-tile"),
        pytest.param("3\n1 2 3\n4 5 6\n", id="missing-row"),
        pytest.param("2\n1 2\n3 0\n1 2\n", id="extra-row"),
        pytest.param("2\n1 2 3\n0\n", id="ragged"),
        pytest.param("2\n1 2\n2 0\n", id="duplicate"),
    ],
)
def test_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(InvalidBoardError):
        parse_board(text)


def test_save_and_load(tmp_path: Path) -> None:
    board = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    path = tmp_path / "puzzles" / "3x3-04.txt"
    save_board(board, path)
    assert path.read_text().startswith("3\n")
    assert load_board(path) == board


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_board(tmp_path / "missing.txt")
