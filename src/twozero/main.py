#!/usr/bin/env python
"""
Main entry point: play 2048 games with a search agent and report results.
"""

import logging
import os
from .agents.agent_factory import AgentFactory
from .config import set_seeds
from .utils.cli import setup_logging, parse_args
from .utils.evaluation import evaluate_agent
from .utils.visualization import (analyze_game_trajectory, visualize_board_trajectory,
                                  plot_score_distribution, save_game_gif)


def write_results(results, filename, agent_name, num_games):
    with open(filename, "w") as f:
        f.write(f"{agent_name.upper()} AGENT EVALUATION RESULTS:\n")
        f.write(f"Average Score: {results['avg_score']:.1f}\n")
        f.write(f"Best Score: {results['best_score']}\n")
        f.write(f"Average Max Tile: {results['avg_max_tile']:.1f}\n")
        f.write(f"Best Max Tile: {results['max_tile_reached']}\n")
        f.write(f"Average Steps: {results['avg_steps']:.1f}\n")
        f.write(f"Average Search Depth: {results['avg_depth']:.2f}\n")
        f.write(f"Average Nodes per Move: {results['avg_nodes']:.1f}\n")

        f.write("\nTile Distribution:\n")
        for tile, count in sorted(results['tile_counts'].items()):
            f.write(f"  {tile}: {count} games ({count / num_games * 100:.1f}%)\n")


def run(args=None):
    """Play the requested games and return the evaluation results."""
    args = parse_args(args)

    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)
    set_seeds(args.seed)

    factory = AgentFactory(
        time_budget=args.time_budget,
        max_depth=args.max_depth,
        depth=args.lookahead_depth,
        rollout_depth=args.rollout_depth,
        seed=args.seed,
    )
    agent = factory.create_agent(args.agent)

    logging.info(f"Agent: {agent.name}")
    logging.info(f"Time budget per move: {args.time_budget}s")
    logging.info(f"Number of games: {args.games}")

    results = evaluate_agent(
        agent,
        num_games=args.games,
        size=args.size,
        seed=args.seed,
        max_steps=args.max_steps,
        render=args.render,
    )

    logging.info("=" * 50)
    logging.info("EVALUATION RESULTS")
    logging.info(f"Average Score: {results['avg_score']:.1f}")
    logging.info(f"Best Score: {results['best_score']}")
    logging.info(f"Average Max Tile: {results['avg_max_tile']:.1f}")
    logging.info(f"Best Max Tile: {results['max_tile_reached']}")
    logging.info(f"Average Search Depth: {results['avg_depth']:.2f}")
    logging.info(f"Average Nodes per Move: {results['avg_nodes']:.1f}")
    logging.info(f"Total time: {results['total_time']:.1f}s")

    if args.output_dir and results["trajectories"]:
        os.makedirs(args.output_dir, exist_ok=True)
        results_file = os.path.join(args.output_dir, "results.txt")
        write_results(results, results_file, agent.name, args.games)

        best = max(results['trajectories'], key=lambda t: t['score'])
        plot_score_distribution(results, os.path.join(args.output_dir, "score_distribution.png"))
        analyze_game_trajectory(best, os.path.join(args.output_dir, "best_game_analysis.png"))
        visualize_board_trajectory(
            best['states'],
            filename=os.path.join(args.output_dir, "best_game_trajectory.png"),
            title=f"2048 Game: Max Tile = {best['max_tile']}, Score = {best['score']}"
        )
        if args.gif:
            save_game_gif(best['states'], os.path.join(args.output_dir, "best_game.gif"))

        logging.info(f"Results saved to {args.output_dir}")
    elif args.gif:
        logging.warning("--gif needs --output-dir; no GIF written")

    return results


def main():
    """Main function to run the 2048 search agents."""
    run()


if __name__ == "__main__":
    main()
