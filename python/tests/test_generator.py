"""Board generator tests."""

from __future__ import annotations

import random

import pytest

from npuzzle.engine.generator import SCRAMBLE_STEPS, BoardGenerator, Difficulty
from npuzzle.engine.solver import Solver
from npuzzle.errors import GenerationError
from npuzzle.models.board import Board


def test_scramble_zero_steps_returns_board() -> None:
    goal = Board.goal(3)
    assert BoardGenerator.scramble(goal, 0, random.Random(1)) is goal


def test_scramble_one_step_is_a_neighbor() -> None:
    goal = Board.goal(3)
    board = BoardGenerator.scramble(goal, 1, random.Random(1))
    assert board in list(goal.neighbors())


def test_scramble_never_undoes_previous_move() -> None:
    # From the goal corner the only moves are left and up; two steps without
    # backtracking can never land on the goal again.
    for seed in range(20):
        board = BoardGenerator.scramble(Board.goal(3), 2, random.Random(seed))
        assert not board.is_goal()


def test_scramble_is_reproducible() -> None:
    a = BoardGenerator.scramble(Board.goal(4), 40, random.Random(7))
    b = BoardGenerator.scramble(Board.goal(4), 40, random.Random(7))
    assert a == b


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generate_is_solvable(difficulty: Difficulty) -> None:
    board = BoardGenerator.generate(3, difficulty, random.Random(3))
    assert board.dimension() == 3
    assert not board.is_goal()
    assert Solver(board).is_solvable()


def test_generate_respects_size() -> None:
    board = BoardGenerator.generate(5, Difficulty.EASY, random.Random(0))
    assert board.dimension() == 5
    assert sorted(board.tiles) == list(range(25))


def test_generate_unique() -> None:
    boards = BoardGenerator.generate_unique(3, 25, Difficulty.EASY, random.Random(11))
    assert len(boards) == 25
    assert len(set(boards)) == 25


def test_difficulty_steps_increase() -> None:
    steps = [SCRAMBLE_STEPS[d] for d in (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)]
    assert steps == sorted(steps)
    assert steps == [60, 80, 100]


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generate_2x2(difficulty: Difficulty) -> None:
    # The 2×2 walk cycles back to the goal every 12 moves.
    for seed in range(5):
        board = BoardGenerator.generate(2, difficulty, random.Random(seed))
        assert board.dimension() == 2
        assert not board.is_goal()
        assert Solver(board).is_solvable()


def test_generate_unique_more_than_exist() -> None:
    with pytest.raises(GenerationError):
        BoardGenerator.generate_unique(2, 12, Difficulty.EASY, random.Random(0))


def test_generate_unique_gives_up_after_max_attempts() -> None:
    # Each 2×2 difficulty only ever reaches two distinct boards.
    with pytest.raises(GenerationError):
        BoardGenerator.generate_unique(2, 3, Difficulty.MEDIUM, random.Random(0))


def test_generate_unique_custom_max_attempts() -> None:
    with pytest.raises(GenerationError):
        BoardGenerator.generate_unique(
            3, 5, Difficulty.EASY, random.Random(0), max_attempts=4
        )
