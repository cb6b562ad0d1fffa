# -*- coding: utf-8 -*-
"""
Persistence of the best score across games.
"""

from .best_score import BestScoreStore

__all__ = ["BestScoreStore"]
