import math
import numpy as np
import pytest
from twozero.environment.board import Board
from twozero.agents.evaluator import (Evaluator, DEFAULT_WEIGHTS, EMPTY_CELL_FLOOR,
                                      smoothness, monotonicity, emptiness, islands)

ONLY_MAX_TILE = {"smoothness": 0, "monotonicity": 0, "emptiness": 0, "max_tile": 1, "raw_score": 0}


def test_islands_counts_same_valued_regions():
    assert islands(Board([[2, 2, 0, 0], [0, 0, 4, 4]])) == 2


@pytest.mark.parametrize("rows, expected", [
    ([[0, 0], [0, 0]], 0),
    ([[2, 2], [2, 4]], 2),
    ([[2, 4], [4, 2]], 4),
    ([[2, 0, 2]], 2),
    ([[8, 8, 8], [8, 2, 8], [8, 8, 8]], 2),
])
def test_islands(rows, expected):
    assert islands(Board(rows)) == expected


def test_islands_is_reentrant():
    board = Board([[2, 2, 0, 0], [0, 0, 4, 4]])
    assert [islands(board) for _ in range(3)] == [2, 2, 2]


def test_smoothness_uses_nearest_occupied_neighbour():
    # 2 and 8 are separated by empty cells: |1 - 3| = 2
    assert smoothness(Board([[2, 0, 0, 8]])) == -2.0
    assert smoothness(Board([[2, 4], [0, 0]])) == -1.0
    assert smoothness(Board([[4, 4], [4, 4]])) == 0.0


def test_monotonicity():
    # log2 values 1, 2, 3, 4: total increase 3
    assert monotonicity(Board([[2, 4, 8, 16]])) == 3.0
    # log2 values 3, 1, 2: decrease 2 beats increase 1
    assert monotonicity(Board([[8, 2, 4]])) == 2.0
    # Empty cells are skipped, columns count too
    assert monotonicity(Board([[2, 0], [0, 0], [8, 0]])) == 2.0
    assert monotonicity(Board([[0, 0], [0, 0]])) == 0.0


def test_emptiness_is_guarded_for_full_board(checkerboard):
    assert emptiness(checkerboard) == EMPTY_CELL_FLOOR
    assert emptiness(Board([[2, 0], [0, 0]])) == pytest.approx(math.log(3))
    assert emptiness(Board([[2, 0], [4, 0]])) == pytest.approx(math.log(2))


def test_score_is_total_and_finite(checkerboard):
    evaluator = Evaluator()
    for board in (Board.empty(4), checkerboard, Board([[2048, 0], [0, 0]])):
        assert np.isfinite(evaluator.score(board))


def test_score_is_pure(midgame_board):
    evaluator = Evaluator()
    before = midgame_board.to_list()
    first = evaluator.score(midgame_board)
    second = evaluator.score(midgame_board)
    assert first == second
    assert midgame_board.to_list() == before


def test_score_is_weighted_sum(midgame_board):
    evaluator = Evaluator()
    terms = evaluator.terms(midgame_board)
    expected = sum(DEFAULT_WEIGHTS[name] * value for name, value in terms.items())
    assert evaluator.score(midgame_board) == pytest.approx(expected)


def test_injected_weights():
    board = Board([[2, 4], [0, 64]], score=100)
    assert Evaluator(ONLY_MAX_TILE).score(board) == 64.0

    raw_only = Evaluator({**ONLY_MAX_TILE, "max_tile": 0, "raw_score": 0.5})
    assert raw_only.score(board) == 50.0

    island_only = Evaluator({**ONLY_MAX_TILE, "max_tile": 0, "islands": 2.0})
    assert island_only.score(board) == 6.0


def test_missing_weights_fall_back_to_defaults():
    evaluator = Evaluator({"raw_score": 0.0})
    weights = evaluator.weights
    assert weights["raw_score"] == 0.0
    assert weights["emptiness"] == DEFAULT_WEIGHTS["emptiness"]


def test_unknown_weight_raises():
    with pytest.raises(ValueError):
        Evaluator({"corner": 1.0})


def test_weights_property_is_a_copy():
    evaluator = Evaluator()
    evaluator.weights["max_tile"] = 100.0
    assert evaluator.weights["max_tile"] == DEFAULT_WEIGHTS["max_tile"]


def test_adversary_proxy():
    board = Board([[2, 0, 0, 8], [0, 0, 4, 4]])
    evaluator = Evaluator()
    assert evaluator.adversary_proxy(board) == -smoothness(board) + islands(board)
