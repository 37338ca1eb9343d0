import random
import numpy as np


def set_seeds(seed: int = 42) -> None:
    random.seed(seed)
    np.random.seed(seed)


LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Search defaults, overridable per agent and from the command line.
SEARCH_PARAMS = {
    "time_budget": 0.1,       # seconds per move
    "max_depth": 6,           # player plies for iterative deepening
    "lookahead_depth": 4,     # fixed plies for the lookahead agent
    "rollout_depth": 20,      # random moves per Monte-Carlo rollout
    "min_rollouts": 2,        # rollouts per direction before the budget is honoured
    "four_probability": 0.1,  # chance that a spawned tile is a 4
}

# Evaluator coefficients. The island term is off unless a weight is injected.
EVALUATION_WEIGHTS = {
    "smoothness": 0.1,
    "monotonicity": 1.0,
    "emptiness": 2.7,
    "max_tile": 1.0,
    "raw_score": 0.1,
    "islands": 0.0,
}
