"""
Positional evaluation of 2048 boards.

The score is a fixed-weight linear combination of:
1. Smoothness - penalty for log2 differences between nearest neighbours
2. Monotonicity - reward for rows/columns trending in one direction
3. Emptiness - log of the number of empty cells
4. Max tile - the largest tile on the board
5. Raw score - the game score reached so far
6. Islands - number of same-valued connected regions (optional term)
"""

import math
import numpy as np
from typing import Dict, Optional
from ..config import EVALUATION_WEIGHTS
from ..environment.board import Board, DIRECTION_VECTORS, RIGHT, DOWN

DEFAULT_WEIGHTS = dict(EVALUATION_WEIGHTS)

# Emptiness of a full board: below log(1) = 0, the smallest defined value
EMPTY_CELL_FLOOR = -1.0

_NEIGHBOUR_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def log2_grid(board: Board) -> np.ndarray:
    """log2 of every tile, 0 for empty cells."""
    grid = board.grid
    # Avoid log(0) by setting zeros to 1 before taking the log
    safe_board = np.where(grid > 0, grid, 1)
    return np.log2(safe_board)


def smoothness(board: Board) -> float:
    """
    Sum of -|log2(a) - log2(b)| over every tile a and its nearest occupied
    neighbour b to the right and below.
    """
    log_board = log2_grid(board)
    score = 0.0
    for row, col in board.occupied_cells():
        value = log_board[row, col]
        for direction in (RIGHT, DOWN):
            _, target = board.farthest_position((row, col), DIRECTION_VECTORS[direction])
            if board.is_occupied(target):
                score -= abs(value - log_board[target[0], target[1]])
    return float(score)


def _line_monotonicity(log_line: np.ndarray, tiles: np.ndarray) -> float:
    values = log_line[tiles > 0]
    if len(values) < 2:
        return 0.0
    diffs = np.diff(values)
    increase = diffs[diffs > 0].sum()
    decrease = -diffs[diffs < 0].sum()
    return float(max(increase, decrease))


def monotonicity(board: Board) -> float:
    """
    For every row and column, the larger of its total increase and total
    decrease along the occupied cells (log2 scale), summed.
    """
    log_board = log2_grid(board)
    grid = board.grid
    rows = sum(_line_monotonicity(log_board[i], grid[i]) for i in range(board.height))
    cols = sum(_line_monotonicity(log_board[:, j], grid[:, j]) for j in range(board.width))
    return float(rows + cols)


def emptiness(board: Board) -> float:
    empty = board.count_empty()
    if empty == 0:
        return EMPTY_CELL_FLOOR
    return math.log(empty)


def max_tile(board: Board) -> float:
    return float(board.max_tile())


def raw_score(board: Board) -> float:
    return float(board.score)


def islands(board: Board) -> int:
    """Number of maximal 4-connected regions of equal-valued tiles."""
    grid = board.grid
    visited = set()
    count = 0
    for start in board.occupied_cells():
        if start in visited:
            continue
        count += 1
        value = grid[start]
        visited.add(start)
        stack = [start]
        while stack:
            row, col = stack.pop()
            for dr, dc in _NEIGHBOUR_OFFSETS:
                cell = (row + dr, col + dc)
                if cell in visited or not board.within_bounds(cell):
                    continue
                if grid[cell] == value:
                    visited.add(cell)
                    stack.append(cell)
    return count


TERMS = {
    "smoothness": smoothness,
    "monotonicity": monotonicity,
    "emptiness": emptiness,
    "max_tile": max_tile,
    "raw_score": raw_score,
    "islands": islands,
}


class Evaluator:
    """
    Weighted board evaluator.

    Args:
        weights: Optional mapping of term name to coefficient. Missing names
            fall back to DEFAULT_WEIGHTS.
    """
    def __init__(self, weights: Optional[Dict[str, float]] = None):
        merged = dict(DEFAULT_WEIGHTS)
        if weights:
            unknown = set(weights) - set(TERMS)
            if unknown:
                raise ValueError(f"Unknown evaluation weights: {sorted(unknown)}")
            merged.update(weights)
        self._weights = {name: float(value) for name, value in merged.items()}

    @property
    def weights(self) -> Dict[str, float]:
        return dict(self._weights)

    def terms(self, board: Board) -> Dict[str, float]:
        """Unweighted value of every term."""
        return {name: float(term(board)) for name, term in TERMS.items()}

    def score(self, board: Board) -> float:
        total = 0.0
        for name, weight in self._weights.items():
            # Zero-weight terms are never computed
            if weight == 0.0:
                continue
            total += weight * TERMS[name](board)
        return total

    def adversary_proxy(self, board: Board) -> float:
        """How bad a spawn leaves the board for the player (higher is worse)."""
        return -smoothness(board) + islands(board)

    def __repr__(self):
        return f"Evaluator(weights={self._weights})"
