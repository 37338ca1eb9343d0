import inspect
from typing import Dict, List
from .base_agent import BaseAgent
from .lookahead_agent import LookaheadAgent
from .minimax_agent import AlphaBetaAgent
from .monte_carlo_agent import MonteCarloAgent

AGENT_CLASSES = {
    "minimax": AlphaBetaAgent,
    "lookahead": LookaheadAgent,
    "montecarlo": MonteCarloAgent,
}

AGENT_ALIASES = {
    "alphabeta": "minimax",
    "alpha-beta": "minimax",
    "monte-carlo": "montecarlo",
}


class AgentFactory:
    """
    Builds agents by strategy name.

    Keyword defaults given here are passed to every agent that accepts them;
    overrides given to create_agent win.
    """
    def __init__(self, **defaults):
        self.defaults = defaults

    def create_agent(self, strategy: str, **overrides) -> BaseAgent:
        key = strategy.strip().lower()
        key = AGENT_ALIASES.get(key, key)
        if key not in AGENT_CLASSES:
            raise ValueError(f"Unknown strategy: {strategy}")
        agent_class = AGENT_CLASSES[key]
        kwargs = self._accepted(agent_class, {**self.defaults, **overrides})
        return agent_class(**kwargs)

    def get_agent_list(self) -> List[str]:
        return list(AGENT_CLASSES)

    @staticmethod
    def _accepted(agent_class, kwargs: Dict) -> Dict:
        # Each strategy takes a different subset of the search parameters
        names = inspect.signature(agent_class.__init__).parameters
        return {key: value for key, value in kwargs.items() if key in names and value is not None}
