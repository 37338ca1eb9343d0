"""
Move simulation: shift-and-merge a board in one of the four directions.
"""

import numpy as np
from typing import List, Sequence, Tuple
from .board import Board, DIRECTIONS, UP, RIGHT, DOWN, LEFT


def merge_line(values: Sequence[int]) -> Tuple[List[int], int]:
    """
    Compact a line toward index 0, merging equal neighbours.

    Each tile merges at most once, so [2, 2, 2, 2] becomes [4, 4, 0, 0]
    and [4, 4, 8, 0] becomes [8, 8, 0, 0].

    Args:
        values: Tile values ordered from the far edge in the direction of motion

    Returns:
        The new line (same length) and the score gained by its merges
    """
    filtered = [int(v) for v in values if v != 0]
    merged = []
    score = 0
    i = 0
    while i < len(filtered):
        if i + 1 < len(filtered) and filtered[i] == filtered[i + 1]:
            merged_val = filtered[i] * 2
            merged.append(merged_val)
            score += merged_val
            i += 2
        else:
            merged.append(filtered[i])
            i += 1
    merged.extend([0] * (len(values) - len(merged)))
    return merged, score


def _oriented(grid: np.ndarray, direction: int) -> np.ndarray:
    """View of grid whose rows run from the far edge for the given direction."""
    if direction == LEFT:
        return grid
    if direction == RIGHT:
        return grid[:, ::-1]
    if direction == UP:
        return grid.T
    if direction == DOWN:
        return grid.T[:, ::-1]
    raise ValueError(f"Unknown direction: {direction}")


def apply_move(board: Board, direction: int) -> Tuple[bool, Board, int]:
    """
    Apply a move to a board without touching the input.

    Args:
        board: Board to move
        direction: One of UP, RIGHT, DOWN, LEFT

    Returns:
        (legal, new_board, score_delta). When the move is illegal the
        returned board equals the input and score_delta is 0.
    """
    grid = board.grid.copy()
    view = _oriented(grid, direction)
    score_delta = 0
    for i in range(view.shape[0]):
        new_line, gained = merge_line(view[i])
        view[i] = new_line
        score_delta += gained

    legal = not np.array_equal(grid, board.grid)
    if not legal:
        return False, Board._from_trusted(grid, board.score), 0
    return True, Board._from_trusted(grid, board.score + score_delta), score_delta


def successors(board: Board) -> List[Tuple[int, Board, int]]:
    """All legal (direction, new_board, score_delta) triples in direction order."""
    result = []
    for direction in DIRECTIONS:
        legal, new_board, delta = apply_move(board, direction)
        if legal:
            result.append((direction, new_board, delta))
    return result


def legal_directions(board: Board) -> List[int]:
    return [direction for direction, _, _ in successors(board)]


def is_terminal(board: Board) -> bool:
    """True when no direction changes the board."""
    if board.count_empty() > 0:
        return not successors(board)
    grid = board.grid
    # A full board is live only while two neighbours share a value
    if np.any(grid[:, 1:] == grid[:, :-1]) or np.any(grid[1:, :] == grid[:-1, :]):
        return False
    return True
