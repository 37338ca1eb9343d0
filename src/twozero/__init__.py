"""Move-selection engine for the 2048 sliding-tile puzzle."""

__version__ = "0.1.0"

# Import key components for convenient access
from .environment.board import Board, BoardError, UP, RIGHT, DOWN, LEFT, DIRECTIONS, DIRECTION_NAMES
from .environment.moves import apply_move, legal_directions, is_terminal
from .environment.game2048 import Game2048
from .agents.evaluator import Evaluator
from .agents.base_agent import BaseAgent, SearchResult
from .agents.minimax_agent import AlphaBetaAgent
from .agents.lookahead_agent import LookaheadAgent
from .agents.monte_carlo_agent import MonteCarloAgent
from .agents.agent_factory import AgentFactory
