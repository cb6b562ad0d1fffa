"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass
from pathlib import Path

from tile2048.controls.inputs import SWIPE_THRESHOLD
from tile2048.core.gameboard import BOARD_SIZE, WIN_TILE


@dataclass
class GameConfig:
    """
    Settings shared by the game session, the input mapping and the persistence layer.

    Attributes
    ----------
    size : int
        Side of the square board.
    win_tile : int
        Tile value that sets the won flag. Must be a power of two.
    swipe_threshold : float
        Minimum swipe displacement, in pixels, for a gesture to count as a move.
    best_score_path : Path | None
        JSON file holding the best score. None keeps the best score in memory only.
    """

    size: int = BOARD_SIZE
    win_tile: int = WIN_TILE
    swipe_threshold: float = SWIPE_THRESHOLD
    best_score_path: Path | None = None

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be at least 2, got {self.size}')
        if self.win_tile < 2 or self.win_tile & (self.win_tile - 1):
            raise ValueError(f'win_tile must be a power of two, got {self.win_tile}')
        if self.swipe_threshold < 0:
            raise ValueError(f'swipe_threshold must be >= 0, got {self.swipe_threshold}')
        if self.best_score_path is not None:
            self.best_score_path = Path(self.best_score_path)
