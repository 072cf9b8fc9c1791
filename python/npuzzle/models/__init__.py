from npuzzle.models.board import Board, Direction
from npuzzle.models.puzzlefile import format_board, load_board, parse_board, save_board

__all__ = ["Board", "Direction", "format_board", "load_board", "parse_board", "save_board"]
