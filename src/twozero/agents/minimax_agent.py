"""
Adversarial alpha-beta search for 2048.

The tile spawn is modelled as a hostile player choosing both the cell and the
value (2 or 4) rather than as a chance node. Two roles alternate:

- Player: tries the four directions and maximizes.
- Adversary: places a tile and minimizes.

Only player plies consume depth. The adversary does not expand every empty
cell: it scores each (cell, value) placement with Evaluator.adversary_proxy
and keeps only the placements with the worst proxy for the player (ties are
all kept). This is an approximation, not exhaustive minimax over spawns, and
it can change the chosen move compared with a full expansion.

An iterative-deepening driver reruns the search from the same root board at
depth 1, 2, ... until the time budget is spent. The clock is only checked
between depths, so a depth that has started always finishes and its result
is used. A new depth is not started when the time of the last one, scaled by
the observed growth between depths, would overrun the budget.
"""

import logging
import time
from typing import List, Optional, Tuple
from ..config import SEARCH_PARAMS
from ..environment.board import Board, DIRECTIONS, DIRECTION_NAMES
from ..environment.moves import apply_move, legal_directions
from .base_agent import BaseAgent, SearchResult
from .evaluator import Evaluator

logger = logging.getLogger(__name__)

# Value of a player node with no legal move
LOSS_SCORE = -1e9

SPAWN_VALUES = (2, 4)

INF = float("inf")

# Lower bound on how much longer each extra depth takes than the previous one
MIN_DEPTH_GROWTH = 2.0


class AlphaBetaAgent(BaseAgent):
    """
    Iterative-deepening alpha-beta agent.

    Args:
        evaluator: Board evaluator used at the leaves
        time_budget: Default wall-clock budget per move in seconds
        max_depth: Deepest player ply count the driver will start
        use_pruning: Disable to get the exhaustive minimax over the same tree
    """
    name = "minimax"

    def __init__(self, evaluator: Optional[Evaluator] = None,
                 time_budget: float = SEARCH_PARAMS["time_budget"],
                 max_depth: int = SEARCH_PARAMS["max_depth"],
                 use_pruning: bool = True):
        super().__init__(evaluator, time_budget)
        self.max_depth = max(1, int(max_depth))
        self.use_pruning = use_pruning
        self._nodes = 0
        self._cutoffs = 0

    def search(self, board: Board, time_budget: Optional[float] = None) -> SearchResult:
        budget = self._resolve_budget(time_budget)
        start = time.monotonic()
        self._nodes = 0
        self._cutoffs = 0

        legal = legal_directions(board)
        if not legal:
            return SearchResult(None, LOSS_SCORE, elapsed=time.monotonic() - start)
        if len(legal) == 1:
            _, child, _ = apply_move(board, legal[0])
            return SearchResult(legal[0], self.evaluator.score(child),
                                elapsed=time.monotonic() - start)

        best_direction, best_score, completed = legal[0], LOSS_SCORE, 0
        previous_duration = None
        for depth in range(1, self.max_depth + 1):
            depth_start = time.monotonic()
            direction, score = self.search_depth(board, depth)
            duration = time.monotonic() - depth_start
            best_direction, best_score, completed = direction, score, depth
            logger.debug(f"Depth {depth}: {DIRECTION_NAMES[direction]} score={score:.2f} "
                         f"nodes={self._nodes} cutoffs={self._cutoffs} time={duration:.3f}s")

            elapsed = time.monotonic() - start
            if elapsed >= budget:
                break
            predicted = self.predict_next_duration(duration, previous_duration)
            if depth < self.max_depth and elapsed + predicted > budget:
                logger.debug(f"Skipping depth {depth + 1}: predicted {predicted:.3f}s, "
                             f"{budget - elapsed:.3f}s left")
                break
            previous_duration = duration

        return SearchResult(best_direction, best_score, depth=completed, nodes=self._nodes,
                            cutoffs=self._cutoffs, elapsed=time.monotonic() - start)

    @staticmethod
    def predict_next_duration(duration: float, previous_duration: Optional[float]) -> float:
        """
        Estimate how long the next depth will take.

        The last depth's time is scaled by the growth seen between the last
        two depths, and never by less than MIN_DEPTH_GROWTH.
        """
        growth = MIN_DEPTH_GROWTH
        if previous_duration:
            growth = max(growth, duration / previous_duration)
        return duration * growth

    def search_depth(self, board: Board, depth: int) -> Tuple[Optional[int], float]:
        """
        Run one full search of the given depth from board.

        Returns:
            (direction, score); direction is None when no move is legal
        """
        return self._player_node(board, depth, -INF, INF)

    def _player_node(self, board: Board, depth: int, alpha: float, beta: float) -> Tuple[Optional[int], float]:
        best_direction = None
        best_score = -INF

        for direction in DIRECTIONS:
            moved, child, _ = apply_move(board, direction)
            if not moved:
                continue
            self._nodes += 1

            if depth <= 1:
                value = self.evaluator.score(child)
            else:
                value = self._adversary_node(child, depth - 1, max(alpha, best_score), beta)

            if best_direction is None or value > best_score:
                best_direction = direction
                best_score = value

            if self.use_pruning and best_score > beta:
                self._cutoffs += 1
                return best_direction, beta

        if best_direction is None:
            return None, LOSS_SCORE
        return best_direction, best_score

    def _adversary_node(self, board: Board, depth: int, alpha: float, beta: float) -> float:
        candidates = self._adversary_candidates(board)
        if not candidates:
            return self.evaluator.score(board)

        best_score = INF
        for child in candidates:
            self._nodes += 1
            _, value = self._player_node(child, depth, alpha, min(beta, best_score))
            if value < best_score:
                best_score = value

            if self.use_pruning and best_score < alpha:
                self._cutoffs += 1
                return alpha

        return best_score

    def _adversary_candidates(self, board: Board) -> List[Board]:
        """Spawns that look worst for the player, 2s before 4s, cells in row-major order."""
        scored = []
        for value in SPAWN_VALUES:
            for cell in board.empty_cells():
                child = board.with_tile(cell, value)
                scored.append((self.evaluator.adversary_proxy(child), child))
        if not scored:
            return []
        worst = max(proxy for proxy, _ in scored)
        return [child for proxy, child in scored if proxy == worst]
