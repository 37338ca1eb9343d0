"""
Move-selection strategies for 2048.
"""

from .evaluator import Evaluator, DEFAULT_WEIGHTS
from .base_agent import BaseAgent, SearchResult
from .minimax_agent import AlphaBetaAgent
from .lookahead_agent import LookaheadAgent
from .monte_carlo_agent import MonteCarloAgent
from .agent_factory import AgentFactory
