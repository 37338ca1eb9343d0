import logging
import time
import numpy as np
from typing import Optional
from ..config import SEARCH_PARAMS
from ..environment.board import Board, DIRECTIONS
from ..environment.game2048 import spawn_random_tile
from ..environment.moves import apply_move
from .base_agent import BaseAgent, SearchResult
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


class LookaheadAgent(BaseAgent):
    """
    Fixed-depth single-player lookahead.

    Every root direction is followed by `depth` plies in which each direction
    is tried on its own clone after one sampled random spawn. The root
    direction whose best descendant scores highest wins. There is no
    adversary and no pruning, and the time budget is not consulted.
    """
    name = "lookahead"

    def __init__(self, evaluator: Optional[Evaluator] = None,
                 depth: int = SEARCH_PARAMS["lookahead_depth"],
                 seed: Optional[int] = None,
                 time_budget: float = SEARCH_PARAMS["time_budget"]):
        super().__init__(evaluator, time_budget)
        self.depth = max(0, int(depth))
        self.rng = np.random.default_rng(seed)
        self._nodes = 0

    def search(self, board: Board, time_budget: Optional[float] = None) -> SearchResult:
        start = time.monotonic()
        self._nodes = 0
        best_direction = None
        best_score = -float("inf")

        for direction in DIRECTIONS:
            moved, child, _ = apply_move(board, direction)
            if not moved:
                continue
            self._nodes += 1
            score = self._try_to_move(child, self.depth)
            if best_direction is None or score > best_score:
                best_direction = direction
                best_score = score

        logger.debug(f"Lookahead depth {self.depth}: {self._nodes} nodes")
        return SearchResult(best_direction, best_score, depth=self.depth,
                            nodes=self._nodes, elapsed=time.monotonic() - start)

    def _try_to_move(self, board: Board, depth: int) -> float:
        if depth == 0:
            return self.evaluator.score(board)

        best_score = None
        for direction in DIRECTIONS:
            spawned = spawn_random_tile(board, self.rng)
            moved, child, _ = apply_move(spawned, direction)
            if not moved:
                continue
            self._nodes += 1
            score = self._try_to_move(child, depth - 1)
            if best_score is None or score > best_score:
                best_score = score

        # Dead end before the horizon: score the position as it stands
        if best_score is None:
            return self.evaluator.score(board)
        return best_score
