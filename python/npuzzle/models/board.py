"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.errors import IndexOutOfRangeError, InvalidBoardError


class Direction(StrEnum):
    """Direction the *blank* travels in a single move."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# Successors are always enumerated in this order.
_OFFSETS: tuple[tuple[Direction, int, int], ...] = (
    (Direction.LEFT, 0, -1),
    (Direction.RIGHT, 0, 1),
    (Direction.UP, -1, 0),
    (Direction.DOWN, 1, 0),
)


def _tile_distance(value: int, index: int, size: int) -> int:
    """Manhattan distance between flat *index* and the goal cell of *value*."""
    if value == 0:
        return 0
    row, col = divmod(index, size)
    goal_row, goal_col = divmod(value - 1, size)
    return abs(row - goal_row) + abs(col - goal_col)


@dataclass(frozen=True)
class Board:
    """Immutable n×n puzzle configuration.

    Tiles are stored as a flat row-major tuple of ints, 0 being the blank.
    The blank index and the Manhattan distance are computed once and cached;
    neither takes part in equality or hashing.
    """

    size: int
    tiles: tuple[int, ...]
    blank: int = field(init=False, repr=False, compare=False)
    _manhattan: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        size = self.size
        if not isinstance(size, int) or isinstance(size, bool) or size < 2:
            raise InvalidBoardError(
                f"Board size must be an integer >= 2, got {size!r}."
            )

        try:
            tiles = tuple(self.tiles)
        except TypeError as exc:
            raise InvalidBoardError(
                f"Tiles must be a sequence of integers, got {self.tiles!r}."
            ) from exc
        if len(tiles) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in tiles):
            raise InvalidBoardError("Tiles must be integers.")
        if tiles.count(0) != 1:
            raise InvalidBoardError(
                f"Expected exactly one blank (0), found {tiles.count(0)}."
            )
        if sorted(tiles) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )

        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank", tiles.index(0))
        object.__setattr__(
            self,
            "_manhattan",
            sum(_tile_distance(v, i, size) for i, v in enumerate(tiles)),
        )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, grid: Iterable[Sequence[int]]) -> Board:
        """Create a board from a list of rows.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        try:
            rows = [list(row) for row in grid]
        except TypeError as exc:
            raise InvalidBoardError(
                f"Grid must be a sequence of rows, got {grid!r}."
            ) from exc
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Grid is not square: row {r} has {len(row)} cells, "
                    f"expected {size}."
                )
        return cls(size=size, tiles=tuple(v for row in rows for v in row))

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list."""
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        if not isinstance(size, int) or size < 2:
            raise InvalidBoardError(
                f"Board size must be an integer >= 2, got {size!r}."
            )
        return cls(size=size, tiles=tuple(range(1, size * size)) + (0,))

    def _swapped(self, a: int, b: int, blank: int) -> Board:
        """Copy of this board with flat cells *a* and *b* exchanged.

        The Manhattan value is updated from the two moved tiles only.
        """
        size = self.size
        tiles = list(self.tiles)
        va, vb = tiles[a], tiles[b]
        tiles[a], tiles[b] = vb, va
        manhattan = (
            self._manhattan
            - _tile_distance(va, a, size)
            - _tile_distance(vb, b, size)
            + _tile_distance(vb, a, size)
            + _tile_distance(va, b, size)
        )

        board = object.__new__(type(self))
        object.__setattr__(board, "size", size)
        object.__setattr__(board, "tiles", tuple(tiles))
        object.__setattr__(board, "blank", blank)
        object.__setattr__(board, "_manhattan", manhattan)
        return board

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank, self.size)

    def get_tile(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexOutOfRangeError(
                f"({row}, {col}) is outside the {self.size}×{self.size} grid."
            )
        return self.tiles[row * self.size + col]

    def rows(self) -> tuple[tuple[int, ...], ...]:
        n = self.size
        return tuple(self.tiles[r * n : (r + 1) * n] for r in range(n))

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        # Every numbered tile home leaves only the last cell for the blank.
        return self._manhattan == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    def manhattan(self) -> int:
        """Sum of the grid distances of every tile from its goal cell."""
        return self._manhattan

    def hamming(self) -> int:
        """Number of tiles (blank excluded) out of place."""
        return sum(1 for i, v in enumerate(self.tiles) if v and v != i + 1)

    # -- transformations ------------------------------------------------------

    def successors(self) -> Iterator[tuple[Direction, Board]]:
        """Yield ``(direction, board)`` for every legal blank move.

        Moves are tried left, right, up, down; those leaving the grid are
        skipped, so a corner yields 2 boards, an edge 3 and the interior 4.
        """
        size = self.size
        row, col = divmod(self.blank, size)
        for direction, dr, dc in _OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < size and 0 <= c < size:
                target = r * size + c
                yield direction, self._swapped(self.blank, target, blank=target)

    def neighbors(self) -> Iterator[Board]:
        """Yield every board one blank move away, in successor order."""
        for _, board in self.successors():
            yield board

    def twin(self) -> Board:
        """Return this board with one fixed pair of non-blank tiles swapped.

        The first two cells of the top row are exchanged unless one of them is
        the blank, in which case the last two cells of the bottom row are.
        Exactly one of a board and its twin can reach the goal.
        """
        first, second = 0, 1
        if self.tiles[first] == 0 or self.tiles[second] == 0:
            last = self.size * self.size - 1
            first, second = last - 1, last
        return self._swapped(first, second, blank=self.blank)

    def move_direction_to(self, other: Board) -> Direction | None:
        """Return the blank move turning this board into *other*, if any."""
        for direction, board in self.successors():
            if board == other:
                return direction
        return None
