import logging
import time
import numpy as np
from typing import Optional
from ..config import SEARCH_PARAMS
from ..environment.board import Board
from ..environment.game2048 import spawn_random_tile
from ..environment.moves import successors
from .base_agent import BaseAgent, SearchResult
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


class MonteCarloAgent(BaseAgent):
    """
    Random-rollout sampling.

    Each legal direction is scored by the mean Evaluator score at the end of
    random games started from it. Rollouts go round-robin over the
    directions until the time budget is spent and every direction has had
    at least `min_rollouts`.

    Args:
        evaluator: Scores the final board of each rollout
        time_budget: Default wall-clock budget per move in seconds
        rollout_depth: Random moves per rollout
        min_rollouts: Rollouts per direction run regardless of the budget
        seed: Seed for the rollout random generator
    """
    name = "montecarlo"

    def __init__(self, evaluator: Optional[Evaluator] = None,
                 time_budget: float = SEARCH_PARAMS["time_budget"],
                 rollout_depth: int = SEARCH_PARAMS["rollout_depth"],
                 min_rollouts: int = SEARCH_PARAMS["min_rollouts"],
                 seed: Optional[int] = None):
        super().__init__(evaluator, time_budget)
        self.rollout_depth = max(0, int(rollout_depth))
        self.min_rollouts = max(1, int(min_rollouts))
        self.rng = np.random.default_rng(seed)

    def search(self, board: Board, time_budget: Optional[float] = None) -> SearchResult:
        budget = self._resolve_budget(time_budget)
        start = time.monotonic()

        moves = successors(board)
        if not moves:
            return SearchResult(None, -float("inf"), elapsed=time.monotonic() - start)

        totals = [0.0] * len(moves)
        counts = [0] * len(moves)
        rounds = 0
        while rounds < self.min_rollouts or time.monotonic() - start < budget:
            for i, (_, child, _) in enumerate(moves):
                totals[i] += self._rollout(child)
                counts[i] += 1
            rounds += 1

        means = [total / count for total, count in zip(totals, counts)]
        best = int(np.argmax(means))
        logger.debug(f"Monte-Carlo: {rounds} rounds, means={[round(m, 2) for m in means]}")
        return SearchResult(moves[best][0], means[best], depth=self.rollout_depth,
                            nodes=sum(counts), elapsed=time.monotonic() - start)

    def _rollout(self, board: Board) -> float:
        for _ in range(self.rollout_depth):
            board = spawn_random_tile(board, self.rng)
            moves = successors(board)
            if not moves:
                break
            _, board, _ = moves[int(self.rng.integers(len(moves)))]
        return self.evaluator.score(board)
