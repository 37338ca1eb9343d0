from twozero.environment.board import DOWN
from twozero.environment.moves import legal_directions
from twozero.agents.monte_carlo_agent import MonteCarloAgent


def test_terminal_board_has_no_move(checkerboard):
    assert MonteCarloAgent(seed=0).choose_best_direction(checkerboard, 0.0) is None


def test_single_legal_move_is_returned(single_move_board):
    agent = MonteCarloAgent(rollout_depth=5, seed=0)
    assert agent.choose_best_direction(single_move_board, 0.0) == DOWN


def test_zero_budget_runs_min_rollouts(midgame_board):
    agent = MonteCarloAgent(rollout_depth=5, min_rollouts=3, seed=0)
    result = agent.search(midgame_board, time_budget=0.0)
    legal = legal_directions(midgame_board)
    assert result.nodes == 3 * len(legal)
    assert result.direction in legal


def test_same_seed_same_choice(midgame_board):
    first = MonteCarloAgent(rollout_depth=5, min_rollouts=2, seed=11).search(midgame_board, 0.0)
    second = MonteCarloAgent(rollout_depth=5, min_rollouts=2, seed=11).search(midgame_board, 0.0)
    assert first.direction == second.direction
    assert first.score == second.score


def test_search_does_not_mutate_board(midgame_board):
    before = midgame_board.clone()
    MonteCarloAgent(rollout_depth=10, seed=2).search(midgame_board, 0.0)
    assert midgame_board == before
