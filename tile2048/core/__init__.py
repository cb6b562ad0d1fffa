# -*- coding: utf-8 -*-
"""
This module provides the board engine of the 2048 game.

It includes functions for creating boards, spawning tiles, sliding and merging in any direction,
detecting legal directions, and checking the terminal and win conditions.
"""

from .gameboard import (
    BOARD_SIZE,
    TILE_SPAWN_PROBS,
    WIN_TILE,
    add_random_tile,
    can_move,
    compress_merge,
    create_empty_board,
    empty_cells,
    has_2048,
    move,
    new_game,
    slide_and_merge,
)
from .gamemove import illegal_directions, legal_directions, legal_directions_mask
from .types import Direction, GameState, MoveResult

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "WIN_TILE",
    "Direction",
    "GameState",
    "MoveResult",
    "add_random_tile",
    "can_move",
    "compress_merge",
    "create_empty_board",
    "empty_cells",
    "has_2048",
    "move",
    "new_game",
    "slide_and_merge",
    "legal_directions",
    "legal_directions_mask",
    "illegal_directions",
]
