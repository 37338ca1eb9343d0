"""
Board model, move simulation and the live game.
"""

from .board import Board, BoardError, UP, RIGHT, DOWN, LEFT, DIRECTIONS, DIRECTION_NAMES, DIRECTION_VECTORS
from .moves import apply_move, merge_line, legal_directions, is_terminal, successors
from .game2048 import Game2048, spawn_random_tile
