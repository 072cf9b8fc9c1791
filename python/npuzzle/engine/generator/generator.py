"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import math
import random
from enum import StrEnum

from npuzzle.errors import GenerationError
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# Random blank moves taken away from the goal per difficulty.
SCRAMBLE_STEPS: dict[Difficulty, int] = {
    Difficulty.EASY: 60,
    Difficulty.MEDIUM: 80,
    Difficulty.HARD: 100,
}


class BoardGenerator:
    """Creates solvable puzzles by walking the blank away from the goal."""

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random blank moves.

        The walk never immediately undoes its previous move.  The result stays
        solvable exactly when *board* is.
        """
        rng = rng or random.Random()
        previous: Board | None = None
        for _ in range(steps):
            candidates = [b for b in board.neighbors() if b != previous]
            previous, board = board, rng.choice(candidates)
        return board

    @staticmethod
    def generate(
        size: int,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board that is not already the goal."""
        rng = rng or random.Random()
        board = BoardGenerator.scramble(
            Board.goal(size), SCRAMBLE_STEPS[difficulty], rng
        )
        # Small grids can walk straight back to the goal; one more move
        # from the goal never lands on it.
        if board.is_goal():
            logger.debug("Scramble landed on the goal board, taking one more step")
            board = BoardGenerator.scramble(board, 1, rng)
        return board

    @staticmethod
    def generate_unique(
        size: int,
        count: int,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: random.Random | None = None,
        max_attempts: int | None = None,
    ) -> list[Board]:
        """Return *count* pairwise-distinct random solvable boards.

        Raises :class:`GenerationError` when *count* exceeds the number of
        solvable non-goal boards, or when *max_attempts* draws (default
        ``100 * count``) do not yield enough distinct boards.
        """
        cells = Board.goal(size).size ** 2
        available = math.factorial(cells) // 2 - 1
        if count > available:
            raise GenerationError(
                f"Only {available} distinct solvable {size}×{size} boards exist, "
                f"{count} requested."
            )

        rng = rng or random.Random()
        if max_attempts is None:
            max_attempts = 100 * count
        seen: set[Board] = set()
        boards: list[Board] = []
        for _ in range(max_attempts):
            if len(boards) == count:
                break
            board = BoardGenerator.generate(size, difficulty, rng)
            if board in seen:
                logger.debug("Discarding duplicate board")
                continue
            seen.add(board)
            boards.append(board)
        else:
            if len(boards) < count:
                raise GenerationError(
                    f"Generated {len(boards)} of {count} distinct boards "
                    f"in {max_attempts} attempts."
                )
        return boards
