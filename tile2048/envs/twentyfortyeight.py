"""2048 game session: the caller-side state driven by the board engine."""

import logging
from dataclasses import dataclass
from enum import Enum

from numpy import ndarray
from numpy.random import Generator, default_rng

from tile2048.config import GameConfig
from tile2048.core.gameboard import add_random_tile, can_move, has_2048, move, new_game
from tile2048.core.gamemove import legal_directions
from tile2048.core.types import Direction
from tile2048.storage.best_score import BestScoreStore

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """
    Status of a game.

    ACTIVE: moves are accepted.
    WON: a tile reached the win threshold; moves are still accepted.
    OVER: no move can change the board; terminal.
    """

    ACTIVE = 'active'
    WON = 'won'
    OVER = 'over'


@dataclass(frozen=True, eq=False)
class StepResult:
    """Result of a step."""

    board: ndarray
    gained: int
    moved: bool
    won: bool
    over: bool


class TwentyFortyEight:
    """
    2048 game session.

    This class owns the only mutable state of a game (board, score, won and over flags) and replaces it
    with the engine's output after each accepted move.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        rng: Generator | None = None,
    ):
        """
        Initialize the session and start a first game.

        Parameters
        ----------
        config : GameConfig, optional
            Session settings (default is a 4x4 board in memory).
        store : BestScoreStore, optional
            Best score persistence. Built from ``config.best_score_path`` when omitted.
        rng : Generator, optional
            Random source for tile spawns.
        """
        self.config = config if config is not None else GameConfig()
        self.size = self.config.size
        self._store = store if store is not None else BestScoreStore(self.config.best_score_path)
        self._rng = rng

        self._board: ndarray | None = None
        self._score = 0
        self._won = False
        self._over = False

        self.reset()

    @property
    def board(self) -> ndarray:
        """Copy of the current board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        return self._score

    @property
    def best(self) -> int:
        return self._store.best

    @property
    def won(self) -> bool:
        return self._won

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no move can change the board.
        """
        return self._over

    @property
    def status(self) -> GameStatus:
        if self._over:
            return GameStatus.OVER
        if self._won:
            return GameStatus.WON
        return GameStatus.ACTIVE

    @property
    def legal_directions(self) -> list[Direction]:
        if self._over:
            return []
        return legal_directions(self._board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game: two random tiles, score 0 and cleared flags.

        Parameters
        ----------
        seed : int, optional
            Seed for a fresh random source, for reproducible games.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        state = new_game(rng=self._rng, size=self.size)
        self._board = state.board
        self._score = state.score
        self._won = False
        self._over = not can_move(self._board)
        logger.info('New game started, best score %d', self.best)
        return self.board

    def step(self, direction: Direction | str | int) -> StepResult:
        """
        Apply a direction to the board.

        Parameters
        ----------
        direction : Direction | str | int
            The direction to apply. Unknown values are ignored.

        Returns
        -------
        StepResult
            The board, the score gained, whether the move was accepted, and the won and over flags.

        Notes
        -----
        - Moves are ignored once the game is over, and when they leave the board unchanged.
        - An accepted move spawns a new tile, adds the merged values to the score and updates the best score.
        """
        if self._over:
            logger.debug('Game over, ignoring move %r', direction)
            return self._result(gained=0, moved=False)

        result = move(self._board, direction)
        if not result.moved:
            return self._result(gained=0, moved=False)

        self._board = add_random_tile(result.board, rng=self._rng)
        self._score += result.gained

        if not self._won and has_2048(self._board, target=self.config.win_tile):
            self._won = True
            logger.info('Reached %d with score %d', self.config.win_tile, self._score)
        if not can_move(self._board):
            self._over = True
            logger.info('Game over with score %d', self._score)

        self._store.update(self._score)
        return self._result(gained=result.gained, moved=True)

    def reset_best(self) -> None:
        """Clear the persisted best score."""
        self._store.reset()

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        width = len(str(int(self._board.max()))) if self._board.any() else 1
        print(f'score={self._score} best={self.best} status={self.status.value}')
        for row in self._board.tolist():
            print(' '.join(str(value).rjust(width) if value else '.'.rjust(width) for value in row))

    def _result(self, gained: int, moved: bool) -> StepResult:
        return StepResult(board=self.board, gained=gained, moved=moved, won=self._won, over=self._over)
