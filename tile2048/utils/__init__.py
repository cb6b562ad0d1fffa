# -*- coding: utf-8 -*-
"""
This module provides the Matplotlib window used to draw and play the game.
"""

from .windows import WindowBoard, release_keys

__all__ = ["WindowBoard", "release_keys"]
