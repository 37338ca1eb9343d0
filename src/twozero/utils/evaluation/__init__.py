"""
Game runner and benchmark helpers.
"""

from .evaluation import play_game, evaluate_agent
