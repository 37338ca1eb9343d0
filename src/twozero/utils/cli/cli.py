import argparse
import logging
import sys
from ...config import LOG_FORMAT, SEARCH_PARAMS


def setup_logging(log_file=None, level=logging.INFO):
    """
    Set up logging configuration.

    Args:
        log_file: Optional path to a log file
        level: Logging level for the root logger
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def parse_args(args=None):
    """
    Parse command-line arguments.

    Args:
        args: Command-line arguments (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Play 2048 with a search agent"
    )

    # General options
    parser.add_argument("--agent", type=str, default="minimax",
                        help="Strategy: minimax, lookahead or montecarlo (default: minimax)")
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play (default: 1)")
    parser.add_argument("--seed", type=int, default=42,
                        help="Random seed (default: 42)")
    parser.add_argument("--size", type=int, default=4,
                        help="Board width and height (default: 4)")
    parser.add_argument("--max-steps", type=int, default=5000,
                        help="Maximum moves per game (default: 5000)")

    # Search options
    parser.add_argument("--time-budget", type=float, default=SEARCH_PARAMS["time_budget"],
                        help=f"Seconds per move (default: {SEARCH_PARAMS['time_budget']})")
    parser.add_argument("--max-depth", type=int, default=SEARCH_PARAMS["max_depth"],
                        help=f"Deepest iterative-deepening ply (default: {SEARCH_PARAMS['max_depth']})")
    parser.add_argument("--lookahead-depth", type=int, default=SEARCH_PARAMS["lookahead_depth"],
                        help=f"Plies for the lookahead agent (default: {SEARCH_PARAMS['lookahead_depth']})")
    parser.add_argument("--rollout-depth", type=int, default=SEARCH_PARAMS["rollout_depth"],
                        help=f"Moves per Monte-Carlo rollout (default: {SEARCH_PARAMS['rollout_depth']})")

    # Output options
    parser.add_argument("--render", action="store_true",
                        help="Log the board after every move")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory for results and plots (default: none)")
    parser.add_argument("--gif", action="store_true",
                        help="Save an animated GIF of the best game (needs --output-dir)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Also write the log to this file")
    parser.add_argument("--verbose", action="store_true",
                        help="Log search details at DEBUG level")

    return parser.parse_args(args)
