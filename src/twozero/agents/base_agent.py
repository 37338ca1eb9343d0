from typing import Dict, Optional
from ..config import SEARCH_PARAMS
from ..environment.board import Board, DIRECTION_NAMES
from .evaluator import Evaluator


class SearchResult:
    """
    Outcome of one move search.

    A direction of None means the board has no legal move (game over).
    """
    def __init__(self, direction: Optional[int], score: float, depth: int = 0,
                 nodes: int = 0, cutoffs: int = 0, elapsed: float = 0.0):
        self.direction = direction
        self.score = score
        self.depth = depth
        self.nodes = nodes
        self.cutoffs = cutoffs
        self.elapsed = elapsed

    @property
    def terminal(self) -> bool:
        return self.direction is None

    def as_dict(self) -> Dict:
        return {
            "direction": self.direction,
            "score": self.score,
            "depth": self.depth,
            "nodes": self.nodes,
            "cutoffs": self.cutoffs,
            "elapsed": self.elapsed,
        }

    def __repr__(self):
        name = "NO_MOVE" if self.direction is None else DIRECTION_NAMES[self.direction]
        return (f"SearchResult({name}, score={self.score:.2f}, depth={self.depth}, "
                f"nodes={self.nodes}, cutoffs={self.cutoffs}, elapsed={self.elapsed:.3f}s)")


class BaseAgent:
    """
    Common interface of every move-selection strategy.

    Subclasses implement search(); callers normally only need
    choose_best_direction(). Agents never mutate the board they receive.
    """
    name = "base"

    def __init__(self, evaluator: Optional[Evaluator] = None,
                 time_budget: float = SEARCH_PARAMS["time_budget"]):
        self.evaluator = evaluator if evaluator is not None else Evaluator()
        self.time_budget = time_budget

    def _resolve_budget(self, time_budget: Optional[float]) -> float:
        budget = self.time_budget if time_budget is None else time_budget
        return max(0.0, float(budget))

    def search(self, board: Board, time_budget: Optional[float] = None) -> SearchResult:
        raise NotImplementedError

    def choose_best_direction(self, board: Board, time_budget: Optional[float] = None) -> Optional[int]:
        """
        Pick a direction for the given board.

        Returns:
            One of UP, RIGHT, DOWN, LEFT, or None when no move is legal
        """
        return self.search(board, time_budget).direction
