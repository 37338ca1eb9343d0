import logging
import numpy as np
from typing import Dict, List, Optional, Tuple
from .board import Board, DIRECTION_NAMES
from .moves import apply_move, legal_directions, is_terminal
from ..config import SEARCH_PARAMS

logger = logging.getLogger(__name__)


def spawn_random_tile(board: Board, rng: np.random.Generator,
                      four_probability: float = SEARCH_PARAMS["four_probability"]) -> Board:
    """
    Add a random tile (2 or 4) to an empty cell.

    Returns the input board unchanged when there is no empty cell.
    """
    empty_cells = board.empty_cells()
    if not empty_cells:
        return board
    cell = empty_cells[int(rng.integers(len(empty_cells)))]
    value = 4 if rng.random() < four_probability else 2
    return board.with_tile(cell, value)


class Game2048:
    """
    Live 2048 game used to drive agents outside the search.

    The game owns the real random tile spawns; agents only ever receive
    Board snapshots and return a direction.
    """
    def __init__(self, size: int = 4, seed: Optional[int] = None,
                 four_probability: float = SEARCH_PARAMS["four_probability"]):
        self.size = size
        self.four_probability = four_probability
        self.high_score = 0
        self.reset(seed)

    def reset(self, seed: Optional[int] = None) -> Board:
        """Reset the game with optional seed"""
        if seed is not None or not hasattr(self, "rng"):
            self.rng = np.random.default_rng(seed)
        self.board = Board.empty(self.size)
        self._previous: Optional[Board] = None
        self.add_random_tile()
        self.add_random_tile()
        return self.board

    @property
    def score(self) -> int:
        return self.board.score

    def add_random_tile(self):
        self.board = spawn_random_tile(self.board, self.rng, self.four_probability)

    def step(self, direction: int) -> Tuple[Board, int, bool, Dict]:
        """
        Play one real move and spawn a tile if the board changed.

        Returns:
            (board, reward, done, info) where info["moved"] tells whether the
            move was legal
        """
        moved, new_board, reward = apply_move(self.board, direction)
        if moved:
            self._previous = self.board
            self.board = new_board
            self.add_random_tile()
            self.high_score = max(self.high_score, self.board.score)
        else:
            logger.debug(f"Ignored illegal move {DIRECTION_NAMES[direction]}")
        done = self.is_game_over()
        info = {"moved": moved, "max_tile": self.board.max_tile()}
        return self.board, reward, done, info

    def get_valid_moves(self) -> List[int]:
        return legal_directions(self.board)

    def is_game_over(self) -> bool:
        return is_terminal(self.board)

    @property
    def can_revert(self) -> bool:
        return self._previous is not None

    def revert(self) -> bool:
        """Undo the last move (one level only)."""
        if self._previous is None:
            return False
        self.board = self._previous
        self._previous = None
        return True

    def render(self):
        logger.info("\n" + str(self.board))
