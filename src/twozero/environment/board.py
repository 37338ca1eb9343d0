"""
Board model for the 2048 search engine.

A Board is a fixed W x H grid of tile values (0 = empty) plus the score
accumulated so far. Boards are values: the grid is stored read-only and every
operation that changes something returns a new Board.
"""

import numpy as np
from typing import List, Optional, Tuple

# Action numbering shared by all agents (0: up, 1: right, 2: down, 3: left)
UP = 0
RIGHT = 1
DOWN = 2
LEFT = 3

DIRECTIONS = (UP, RIGHT, DOWN, LEFT)
DIRECTION_NAMES = ["UP", "RIGHT", "DOWN", "LEFT"]

# (row, col) unit vectors
DIRECTION_VECTORS = {
    UP: (-1, 0),
    RIGHT: (0, 1),
    DOWN: (1, 0),
    LEFT: (0, -1),
}

Cell = Tuple[int, int]


class BoardError(ValueError):
    """Raised when a board cannot be built from the given input."""


def is_valid_tile(value: int) -> bool:
    """A tile is a power of two >= 2."""
    return value >= 2 and (value & (value - 1)) == 0


def _as_int_grid(grid: np.ndarray) -> np.ndarray:
    if grid.dtype.kind in "iu":
        return grid.astype(np.int64)
    if grid.dtype.kind != "f":
        raise BoardError(f"Tile values must be integers, got dtype {grid.dtype}")
    if not (np.all(np.isfinite(grid)) and np.array_equal(grid, np.floor(grid))):
        raise BoardError("Tile values must be whole numbers")
    return grid.astype(np.int64)


def _to_grid(rows) -> np.ndarray:
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise BoardError(f"Board must be 2-dimensional, got shape {rows.shape}")
        return _as_int_grid(rows)

    rows = [list(row) for row in rows]
    if not rows:
        raise BoardError("Board must have at least one row")
    lengths = {len(row) for row in rows}
    if len(lengths) != 1:
        raise BoardError(f"Inconsistent row lengths: {sorted(lengths)}")
    return _as_int_grid(np.array(rows))


class Board:
    """
    Immutable grid of tiles plus score.

    Args:
        rows: Nested sequence (or 2-D numpy array) of tile values, 0 for empty
        score: Score accumulated so far
    """
    __slots__ = ("_grid", "_score")

    def __init__(self, rows, score: int = 0):
        grid = _to_grid(rows)
        if grid.size == 0:
            raise BoardError("Board must have at least one cell")
        for value in np.unique(grid):
            if value != 0 and not is_valid_tile(int(value)):
                raise BoardError(f"Invalid tile value: {int(value)}")
        if score < 0:
            raise BoardError(f"Score must be non-negative, got {score}")

        grid = grid.copy()
        grid.flags.writeable = False
        self._grid = grid
        self._score = int(score)

    @classmethod
    def empty(cls, width: int = 4, height: Optional[int] = None) -> "Board":
        """Create an empty board (square unless height is given)."""
        height = width if height is None else height
        return cls(np.zeros((height, width), dtype=np.int64))

    @classmethod
    def _from_trusted(cls, grid: np.ndarray, score: int) -> "Board":
        # Skips validation for grids produced by the move simulator
        board = cls.__new__(cls)
        grid.flags.writeable = False
        board._grid = grid
        board._score = int(score)
        return board

    @property
    def grid(self) -> np.ndarray:
        # A view of a read-only array cannot be made writeable again
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def score(self) -> int:
        return self._score

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def height(self) -> int:
        return self._grid.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    def tile(self, cell: Cell) -> int:
        return int(self._grid[cell[0], cell[1]])

    def within_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def is_occupied(self, cell: Cell) -> bool:
        return self.within_bounds(cell) and self._grid[cell[0], cell[1]] != 0

    def empty_cells(self) -> List[Cell]:
        """Empty cells in row-major order."""
        rows, cols = np.nonzero(self._grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def occupied_cells(self) -> List[Cell]:
        rows, cols = np.nonzero(self._grid)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.count_nonzero(self._grid == 0))

    def max_tile(self) -> int:
        return int(self._grid.max())

    def farthest_position(self, cell: Cell, vector: Tuple[int, int]) -> Tuple[Cell, Cell]:
        """
        Walk from cell along vector while the cells are empty.

        Returns:
            (farthest empty cell reached, the next cell after it). The next
            cell is either occupied or outside the board.
        """
        previous = cell
        current = (cell[0] + vector[0], cell[1] + vector[1])
        while self.within_bounds(current) and not self.is_occupied(current):
            previous = current
            current = (current[0] + vector[0], current[1] + vector[1])
        return previous, current

    def with_tile(self, cell: Cell, value: int) -> "Board":
        """Return a new board with value placed in an empty cell."""
        if not is_valid_tile(value):
            raise BoardError(f"Invalid tile value: {value}")
        if not self.within_bounds(cell):
            raise BoardError(f"Cell {cell} is outside the board")
        if self.is_occupied(cell):
            raise BoardError(f"Cell {cell} is already occupied")
        grid = self._grid.copy()
        grid[cell[0], cell[1]] = value
        return Board._from_trusted(grid, self._score)

    def clone(self) -> "Board":
        return Board._from_trusted(self._grid.copy(), self._score)

    def to_list(self) -> List[List[int]]:
        return self._grid.tolist()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self._score == other._score
                and self._grid.shape == other._grid.shape
                and np.array_equal(self._grid, other._grid))

    def __hash__(self):
        return hash((self._grid.shape, self._grid.tobytes(), self._score))

    def __repr__(self):
        return f"Board({self.to_list()}, score={self._score})"

    def __str__(self):
        cell_width = max(5, len(str(self.max_tile())) + 2)
        line = "-" * ((cell_width + 1) * self.width + 1)
        out = [f"Score: {self._score}", line]
        for row in self._grid:
            cells = ["".center(cell_width) if v == 0 else str(int(v)).center(cell_width) for v in row]
            out.append("|" + "|".join(cells) + "|")
            out.append(line)
        return "\n".join(out)

