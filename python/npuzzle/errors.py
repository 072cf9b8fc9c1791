"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by :mod:`npuzzle`."""


class InvalidBoardError(PuzzleError, ValueError):
    """The grid is not an n×n permutation of ``0..n²-1`` with one blank."""


class InvalidArgumentError(PuzzleError, TypeError):
    """A solver was given something other than a :class:`Board`."""


class IndexOutOfRangeError(PuzzleError, IndexError):
    """A board was queried outside its grid."""


class GenerationError(PuzzleError, RuntimeError):
    """Not enough distinct boards could be generated."""
