"""
Game analysis utilities for 2048.
This module provides functions to plot boards, game trajectories and
benchmark results, and to export a game as an animated GIF.
"""

import imageio.v2 as imageio
import matplotlib.pyplot as plt
import numpy as np
from ...environment.board import DIRECTION_NAMES

# 2048 color scheme
TILE_COLORS = {
    0: '#CCC0B3',  # Empty tile
    2: '#EEE4DA',
    4: '#EDE0C8',
    8: '#F2B179',
    16: '#F59563',
    32: '#F67C5F',
    64: '#F65E3B',
    128: '#EDCF72',
    256: '#EDCC61',
    512: '#EDC850',
    1024: '#EDC53F',
    2048: '#EDC22E',
}
HIGH_TILE_COLOR = '#3C3A32'

DARK_TEXT = '#776E65'
LIGHT_TEXT = '#F9F6F2'


def _hex_to_rgb(color_hex):
    return tuple(int(color_hex.lstrip('#')[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


def draw_board(ax, board, title=None):
    """
    Draw a board on a matplotlib axis with the classic tile colours.

    Args:
        ax: Matplotlib axis
        board: Board to draw
        title: Optional axis title
    """
    grid = board.grid
    colored_board = np.zeros(grid.shape + (3,))
    for (i, j), val in np.ndenumerate(grid):
        colored_board[i, j] = _hex_to_rgb(TILE_COLORS.get(int(val), HIGH_TILE_COLOR))
    ax.imshow(colored_board)

    for (i, j), val in np.ndenumerate(grid):
        if val > 0:
            ax.text(j, i, str(int(val)), ha='center', va='center',
                    color=DARK_TEXT if val <= 4 else LIGHT_TEXT,
                    fontsize=14 if val < 1024 else 10, fontweight='bold')

    for i in range(grid.shape[0] + 1):
        ax.axhline(i - 0.5, color='gray', linewidth=2)
    for j in range(grid.shape[1] + 1):
        ax.axvline(j - 0.5, color='gray', linewidth=2)
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)


def visualize_board_trajectory(boards, filename='board_trajectory.png', title=None, max_boards=16):
    """
    Visualize a sequence of board states from a game.

    Args:
        boards: List of Board snapshots
        filename: Output file name
        title: Optional title for the plot
        max_boards: Boards to show; longer games are sampled evenly
    """
    if len(boards) == 0:
        return
    indices = list(range(len(boards)))
    if len(boards) > max_boards:
        indices = [int(i) for i in np.linspace(0, len(boards) - 1, max_boards)]

    grid_size = int(np.ceil(np.sqrt(len(indices))))
    fig, axes = plt.subplots(grid_size, grid_size, figsize=(3 * grid_size, 3 * grid_size), squeeze=False)
    axes = axes.flatten()

    for ax, index in zip(axes, indices):
        draw_board(ax, boards[index], title=f"Step {index}")
    for ax in axes[len(indices):]:
        ax.axis('off')

    if title:
        plt.suptitle(title, fontsize=16)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close(fig)


def analyze_game_trajectory(trajectory, filename='trajectory_analysis.png'):
    """
    Analyze a full game trajectory to understand agent behavior.

    Args:
        trajectory: Game trajectory dictionary from play_game
        filename: Output file name
    """
    actions = trajectory['actions']
    rewards = trajectory['rewards']
    depths = trajectory['depths']

    action_counts = [actions.count(a) for a in range(4)]
    max_tiles = [board.max_tile() for board in trajectory['states']]

    plt.figure(figsize=(15, 10))

    # Action distribution
    plt.subplot(2, 2, 1)
    plt.bar(DIRECTION_NAMES, action_counts)
    plt.xlabel('Action')
    plt.ylabel('Count')
    plt.title('Action Distribution')

    # Max tile progression
    plt.subplot(2, 2, 2)
    plt.plot(max_tiles)
    plt.xlabel('Step')
    plt.ylabel('Max Tile')
    plt.yscale('log', base=2)
    plt.title('Max Tile Progression')

    # Search depth reached per move
    plt.subplot(2, 2, 3)
    plt.plot(depths)
    plt.xlabel('Step')
    plt.ylabel('Depth')
    plt.title('Search Depth')

    # Cumulative reward
    plt.subplot(2, 2, 4)
    plt.plot(np.cumsum(rewards) if rewards else [])
    plt.xlabel('Step')
    plt.ylabel('Score')
    plt.title('Score Progression')

    plt.suptitle(f"Game Analysis: Max Tile = {trajectory['max_tile']}, Score = {trajectory['score']}")
    plt.tight_layout(rect=[0, 0, 1, 0.95])
    plt.savefig(filename)
    plt.close()


def plot_score_distribution(results, filename='score_distribution.png'):
    """
    Plot per-game scores and the max tile distribution of an evaluation run.

    Args:
        results: Dictionary returned by evaluate_agent
        filename: Output file name
    """
    plt.figure(figsize=(12, 5))

    plt.subplot(1, 2, 1)
    plt.bar(range(1, len(results['scores']) + 1), results['scores'])
    plt.axhline(results['avg_score'], color='red', linestyle='--', label='Average')
    plt.xlabel('Game')
    plt.ylabel('Score')
    plt.title('Score per Game')
    plt.legend()

    plt.subplot(1, 2, 2)
    tiles = sorted(results['tile_counts'])
    plt.bar([str(t) for t in tiles], [results['tile_counts'][t] for t in tiles])
    plt.xlabel('Max Tile')
    plt.ylabel('Games')
    plt.title('Max Tile Distribution')

    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


def save_game_gif(boards, filename='game.gif', fps=4, max_frames=200):
    """
    Save a game as an animated GIF, one frame per board.

    Args:
        boards: List of Board snapshots
        filename: Output file name
        fps: Frames per second
        max_frames: Longer games are sampled evenly down to this many frames
    """
    if len(boards) == 0:
        return
    indices = list(range(len(boards)))
    if len(boards) > max_frames:
        indices = [int(i) for i in np.linspace(0, len(boards) - 1, max_frames)]

    frames = []
    fig, ax = plt.subplots(figsize=(4, 4))
    for index in indices:
        ax.clear()
        draw_board(ax, boards[index], title=f"Step {index} | Score {boards[index].score}")
        fig.canvas.draw()
        frames.append(np.asarray(fig.canvas.buffer_rgba())[:, :, :3].copy())
    plt.close(fig)

    # GIF frame duration is in milliseconds
    imageio.mimsave(filename, frames, duration=1000.0 / fps, loop=0)
