"""
Visualization utilities for 2048 agents.
"""

from .game_analysis import (analyze_game_trajectory, visualize_board_trajectory,
                            plot_score_distribution, save_game_gif, draw_board)
