# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `TwentyFortyEight` class, which holds the board, score and flags of a game and drives
the board engine.
"""

from .twentyfortyeight import GameStatus, StepResult, TwentyFortyEight

__all__ = ["GameStatus", "StepResult", "TwentyFortyEight"]
