import numpy as np
import pytest
from twozero.environment.board import (Board, BoardError, UP, RIGHT, DOWN, LEFT,
                                       DIRECTION_VECTORS, is_valid_tile)


def test_board_from_rows():
    board = Board([[2, 2, 0, 0], [0, 0, 4, 4]], score=8)
    assert board.width == 4
    assert board.height == 2
    assert board.score == 8
    assert board.tile((1, 2)) == 4
    assert board.to_list() == [[2, 2, 0, 0], [0, 0, 4, 4]]


def test_board_from_array():
    board = Board(np.array([[0, 2], [4, 0]]))
    assert board.shape == (2, 2)
    assert board.max_tile() == 4


@pytest.mark.parametrize("rows", [
    [[2, 0, 0], [0, 0]],
    [],
    [[]],
])
def test_board_rejects_bad_shapes(rows):
    with pytest.raises(BoardError):
        Board(rows)


def test_board_rejects_non_2d_array():
    with pytest.raises(BoardError):
        Board(np.zeros((2, 2, 2), dtype=int))


@pytest.mark.parametrize("value", [1, 3, 6, -2])
def test_board_rejects_invalid_tiles(value):
    with pytest.raises(BoardError):
        Board([[value, 0], [0, 0]])


def test_board_accepts_whole_floats():
    assert Board([[2.0, 0.0], [0.0, 4.0]]).to_list() == [[2, 0], [0, 4]]
    assert Board(np.array([[8.0, 0.0], [0.0, 0.0]])).tile((0, 0)) == 8


@pytest.mark.parametrize("rows", [
    [[2.9, 0], [0, 0]],
    np.array([[4.5, 0.0], [0.0, 0.0]]),
    np.array([[np.nan, 2.0], [0.0, 0.0]]),
    [["2", "0"], ["0", "0"]],
])
def test_board_rejects_non_integer_tiles(rows):
    with pytest.raises(BoardError):
        Board(rows)


def test_board_rejects_negative_score():
    with pytest.raises(BoardError):
        Board([[2, 0], [0, 0]], score=-1)


def test_board_error_is_value_error():
    assert issubclass(BoardError, ValueError)


def test_is_valid_tile():
    assert is_valid_tile(2)
    assert is_valid_tile(2048)
    assert not is_valid_tile(0)
    assert not is_valid_tile(1)
    assert not is_valid_tile(12)


def test_grid_is_read_only():
    board = Board([[2, 0], [0, 0]])
    with pytest.raises(ValueError):
        board.grid[0, 1] = 2


def test_grid_cannot_be_made_writeable():
    board = Board([[2, 0], [0, 0]])
    grid = board.grid
    with pytest.raises(ValueError):
        grid.flags.writeable = True
    assert board.to_list() == [[2, 0], [0, 0]]
    assert hash(board) == hash(Board([[2, 0], [0, 0]]))


def test_clone_is_equal_and_independent():
    board = Board([[2, 0], [0, 4]], score=12)
    copy = board.clone()
    assert copy == board
    assert copy is not board
    assert not np.shares_memory(copy.grid, board.grid)


def test_equality_includes_score_and_shape():
    assert Board([[2, 0]], score=0) != Board([[2, 0]], score=4)
    assert Board([[2, 0, 0, 0]]) != Board([[2, 0], [0, 0]])
    assert hash(Board([[2, 4]], score=3)) == hash(Board([[2, 4]], score=3))


def test_with_tile_returns_new_board():
    board = Board([[2, 0], [0, 0]])
    placed = board.with_tile((1, 1), 4)
    assert placed.to_list() == [[2, 0], [0, 4]]
    assert board.to_list() == [[2, 0], [0, 0]]


@pytest.mark.parametrize("cell, value", [
    ((0, 0), 2),   # occupied
    ((2, 0), 2),   # outside
    ((1, 1), 3),   # not a power of two
])
def test_with_tile_rejects_bad_placements(cell, value):
    board = Board([[2, 0], [0, 0]])
    with pytest.raises(BoardError):
        board.with_tile(cell, value)


def test_empty_and_occupied_cells_row_major():
    board = Board([[2, 0], [0, 4]])
    assert board.empty_cells() == [(0, 1), (1, 0)]
    assert board.occupied_cells() == [(0, 0), (1, 1)]
    assert board.count_empty() == 2


def test_farthest_position():
    board = Board([[2, 0, 0, 8]])
    farthest, following = board.farthest_position((0, 0), DIRECTION_VECTORS[RIGHT])
    assert farthest == (0, 2)
    assert following == (0, 3)
    assert board.is_occupied(following)

    farthest, following = board.farthest_position((0, 3), DIRECTION_VECTORS[RIGHT])
    assert farthest == (0, 3)
    assert not board.within_bounds(following)


def test_direction_vectors():
    assert DIRECTION_VECTORS[UP] == (-1, 0)
    assert DIRECTION_VECTORS[DOWN] == (1, 0)
    assert DIRECTION_VECTORS[LEFT] == (0, -1)


def test_str_contains_tiles_and_score():
    text = str(Board([[2, 0], [0, 1024]], score=7))
    assert "Score: 7" in text
    assert "1024" in text
