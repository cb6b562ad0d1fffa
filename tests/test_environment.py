"""
Tests for the 2048 game session.

Tests cover session state management, the active/won/over transitions, and the best score bookkeeping.
"""

from contextlib import redirect_stdout
from io import StringIO
from unittest import TestCase, main
from unittest.mock import Mock

import numpy as np

from tile2048.config import GameConfig
from tile2048.envs.twentyfortyeight import GameStatus, TwentyFortyEight
from tile2048.storage.best_score import BestScoreStore


class TestEnvironmentInterface(TestCase):
    """Test TwentyFortyEight class API and state management."""

    def setUp(self):
        """Initialize fresh session before each test."""
        self.env = TwentyFortyEight(store=BestScoreStore())

    def test_reset_state_initialization(self):
        """Reset initializes board with exactly 2 tiles and zero score."""
        obs = self.env.reset()

        # ##>: Exactly 2 non-zero tiles after reset.
        self.assertEqual(np.count_nonzero(obs), 2)

        # ##>: Tiles are only 2 or 4.
        tiles = obs[obs != 0]
        self.assertTrue(np.all((tiles == 2) | (tiles == 4)))

        self.assertEqual(self.env.score, 0)
        self.assertEqual(self.env.status, GameStatus.ACTIVE)
        self.assertFalse(self.env.is_finished)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        board1 = self.env.reset(seed=42)
        board2 = self.env.reset(seed=42)

        np.testing.assert_array_equal(board1, board2)

    def test_step_merges_and_spawns(self):
        """An accepted move merges, adds the score and spawns one tile."""
        self.env._board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = self.env.step('left')

        self.assertTrue(result.moved)
        self.assertEqual(result.gained, 4)
        self.assertEqual(self.env.score, 4)
        self.assertEqual(result.board[0, 0], 4)
        self.assertEqual(np.count_nonzero(result.board), 2)

    def test_unchanged_move_is_ignored(self):
        """A move that changes nothing spawns no tile."""
        board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.env._board = board.copy()
        result = self.env.step('left')

        self.assertFalse(result.moved)
        self.assertEqual(result.gained, 0)
        np.testing.assert_array_equal(self.env.board, board)

    def test_invalid_direction_is_ignored(self):
        board = self.env.board
        result = self.env.step('sideways')

        self.assertFalse(result.moved)
        np.testing.assert_array_equal(self.env.board, board)

    def test_board_is_a_copy(self):
        board = self.env.board
        board[:] = 0
        self.assertEqual(np.count_nonzero(self.env.board), 2)

    def test_score_accumulates(self):
        self.env._board = np.array([[2, 2, 4, 4], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.env.step('left')
        self.assertEqual(self.env.score, 12)

        self.env._board = np.array([[8, 8, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.env.step('right')
        self.assertEqual(self.env.score, 28)

    def test_render(self):
        """Render prints the score line and one line per row, empty cells as dots."""
        self.env._board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 128, 0], [0, 0, 0, 0]])
        buffer = StringIO()
        with redirect_stdout(buffer):
            self.env.render()

        lines = buffer.getvalue().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertIn('status=active', lines[0])
        self.assertEqual(lines[1].split(), ['2', '.', '.', '.'])
        self.assertEqual(lines[3].split(), ['.', '.', '128', '.'])


class TestGameStatus(TestCase):
    """Test the active, won and over transitions."""

    def test_win_is_not_terminal(self):
        env = TwentyFortyEight(store=BestScoreStore())
        env._board = np.array([[1024, 1024, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = env.step('left')

        self.assertTrue(result.won)
        self.assertFalse(result.over)
        self.assertEqual(env.status, GameStatus.WON)

        # ##>: Moves remain legal after winning.
        self.assertTrue(env.step('right').moved)
        self.assertTrue(env.won)

    def test_custom_win_tile(self):
        env = TwentyFortyEight(config=GameConfig(win_tile=8), store=BestScoreStore())
        env._board = np.array([[4, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertTrue(env.step('left').won)

    def test_game_over(self):
        """The last move fills the board without any adjacent pair."""
        rng = Mock()
        rng.integers.return_value = 0
        rng.random.return_value = 0.95
        env = TwentyFortyEight(store=BestScoreStore(), rng=rng)
        env._board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [8, 16, 8, 0]])

        result = env.step('right')
        self.assertTrue(result.moved)
        self.assertTrue(result.over)
        np.testing.assert_array_equal(result.board[3], [4, 8, 16, 8])
        self.assertEqual(env.status, GameStatus.OVER)
        self.assertTrue(env.is_finished)
        self.assertEqual(env.legal_directions, [])

        # ##>: No further moves are accepted.
        before = env.board
        self.assertFalse(env.step('left').moved)
        np.testing.assert_array_equal(env.board, before)

    def test_reset_clears_flags(self):
        env = TwentyFortyEight(store=BestScoreStore())
        env._board = np.array([[1024, 1024, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        env.step('left')
        env.reset()

        self.assertFalse(env.won)
        self.assertEqual(env.status, GameStatus.ACTIVE)
        self.assertEqual(env.score, 0)


class TestBestScore(TestCase):
    """Test the best score bookkeeping of the session."""

    def test_best_follows_score(self):
        env = TwentyFortyEight(store=BestScoreStore())
        env._board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        env.step('left')
        self.assertEqual(env.best, 4)

        # ##>: A new game keeps the best score.
        env.reset()
        self.assertEqual(env.best, 4)
        self.assertEqual(env.score, 0)

    def test_reset_best(self):
        store = BestScoreStore()
        store.update(100)
        env = TwentyFortyEight(store=store)
        self.assertEqual(env.best, 100)

        env.reset_best()
        self.assertEqual(env.best, 0)

    def test_lower_score_keeps_best(self):
        store = BestScoreStore()
        store.update(100)
        env = TwentyFortyEight(store=store)
        env._board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        env.step('left')
        self.assertEqual(env.best, 100)


if __name__ == '__main__':
    main()
