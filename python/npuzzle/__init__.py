"""Optimal n×n sliding puzzle solver."""

from npuzzle.engine.generator import BoardGenerator, Difficulty
from npuzzle.engine.solver import Solver
from npuzzle.errors import (
    GenerationError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidBoardError,
    PuzzleError,
)
from npuzzle.models import Board, Direction

__all__ = [
    "Board",
    "BoardGenerator",
    "Difficulty",
    "Direction",
    "GenerationError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidBoardError",
    "PuzzleError",
    "Solver",
]
