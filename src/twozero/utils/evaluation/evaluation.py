"""
Play full games with an agent and collect statistics.
"""

import logging
import time
import numpy as np
from typing import Dict, Optional
from ...environment.board import DIRECTION_NAMES
from ...environment.game2048 import Game2048

logger = logging.getLogger(__name__)


def play_game(agent, env: Optional[Game2048] = None, max_steps: int = 5000,
              time_budget: Optional[float] = None, render: bool = False) -> Dict:
    """
    Play a single game of 2048 with the given agent.

    Args:
        agent: Any BaseAgent
        env: Game to play (a fresh 4x4 game when omitted)
        max_steps: Maximum number of moves
        time_budget: Seconds per move (agent default when omitted)
        render: Whether to log the board after every move

    Returns:
        Dictionary with the game trajectory, per-move search statistics and results
    """
    if env is None:
        env = Game2048()
    board = env.board

    states = [board]
    actions = []
    rewards = []
    depths = []
    searches = []
    step_count = 0

    while step_count < max_steps:
        result = agent.search(board, time_budget)
        if result.terminal:
            break

        board, reward, done, info = env.step(result.direction)
        if not info["moved"]:
            # Agents only return legal directions; stop rather than loop
            logger.warning(f"Agent chose illegal move {DIRECTION_NAMES[result.direction]}")
            break

        states.append(board)
        actions.append(result.direction)
        rewards.append(reward)
        depths.append(result.depth)
        searches.append(result.as_dict())
        step_count += 1

        if render:
            logger.info(f"Step {step_count}: {DIRECTION_NAMES[result.direction]} "
                        f"(reward {reward}, depth {result.depth})")
            env.render()
        if done:
            break

    return {
        'states': states,
        'actions': actions,
        'rewards': rewards,
        'depths': depths,
        'searches': searches,
        'score': board.score,
        'max_tile': board.max_tile(),
        'steps': step_count,
        'game_over': env.is_game_over(),
    }


def evaluate_agent(agent, num_games: int = 10, size: int = 4, seed: Optional[int] = None,
                   max_steps: int = 5000, time_budget: Optional[float] = None,
                   render: bool = False) -> Dict:
    """
    Play several games and aggregate the results.

    Args:
        agent: Any BaseAgent
        num_games: Number of games to play
        size: Board width and height
        seed: Seed for the first game; game i uses seed + i
        max_steps: Maximum moves per game
        time_budget: Seconds per move (agent default when omitted)
        render: Whether to log every move

    Returns:
        Dictionary with aggregate statistics and the per-game trajectories
    """
    scores = []
    max_tiles = []
    steps = []
    all_depths = []
    all_nodes = []
    trajectories = []
    start_time = time.time()

    for i in range(num_games):
        game_seed = None if seed is None else seed + i
        env = Game2048(size=size, seed=game_seed)
        game_start = time.time()
        trajectory = play_game(agent, env=env, max_steps=max_steps,
                               time_budget=time_budget, render=render)
        trajectories.append(trajectory)
        scores.append(trajectory['score'])
        max_tiles.append(trajectory['max_tile'])
        steps.append(trajectory['steps'])
        all_depths.extend(trajectory['depths'])
        all_nodes.extend(search['nodes'] for search in trajectory['searches'])

        logger.info(f"Game {i + 1}/{num_games}: Score={trajectory['score']}, "
                    f"Max Tile={trajectory['max_tile']}, Steps={trajectory['steps']}, "
                    f"Time={time.time() - game_start:.1f}s")

    tile_counts = {}
    for tile in max_tiles:
        tile_counts[tile] = tile_counts.get(tile, 0) + 1

    return {
        'scores': scores,
        'max_tiles': max_tiles,
        'avg_score': float(np.mean(scores)) if scores else 0.0,
        'best_score': max(scores) if scores else 0,
        'avg_max_tile': float(np.mean(max_tiles)) if max_tiles else 0.0,
        'max_tile_reached': max(max_tiles) if max_tiles else 0,
        'avg_steps': float(np.mean(steps)) if steps else 0.0,
        'avg_depth': float(np.mean(all_depths)) if all_depths else 0.0,
        'avg_nodes': float(np.mean(all_nodes)) if all_nodes else 0.0,
        'tile_counts': tile_counts,
        'trajectories': trajectories,
        'total_time': time.time() - start_time,
    }
