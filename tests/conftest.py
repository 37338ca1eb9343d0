import matplotlib

matplotlib.use("Agg")

import pytest
from twozero.environment.board import Board

CHECKERBOARD = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


@pytest.fixture
def checkerboard():
    """Full board with no merges: no legal move."""
    return Board(CHECKERBOARD)


@pytest.fixture
def single_move_board():
    """Only DOWN changes this board."""
    return Board([
        [2, 4, 8, 16],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])


@pytest.fixture
def midgame_board():
    return Board([
        [2, 4, 8, 16],
        [0, 2, 4, 32],
        [0, 0, 2, 4],
        [0, 0, 0, 2],
    ], score=180)
