# -*- coding: utf-8 -*-
"""
Single-player 2048 sliding-tile puzzle.

``tile2048.core`` holds the pure board engine; ``tile2048.envs`` holds the game session that drives it.
"""

__version__ = "0.1.0"
