# -*- coding: utf-8 -*-
"""
Value types shared by the board engine and its callers.
"""
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any

from numpy import ndarray


class Direction(str, Enum):
    """
    Direction of a move.

    The declaration order (left, up, right, down) gives the integer index of each direction.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @classmethod
    def parse(cls, value: Any) -> 'Direction | None':
        """
        Convert a raw value into a direction.

        Parameters
        ----------
        value : Any
            A Direction, its name or value as a string (case-insensitive), or its integer index.

        Returns
        -------
        Direction | None
            The matching direction, or None when the value names no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        if isinstance(value, Integral) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[int(value)]
        return None


@dataclass(frozen=True, eq=False)
class MoveResult:
    """
    Outcome of applying one direction to a grid.

    Attributes
    ----------
    board : ndarray
        Freshly allocated grid after the move (no tile spawned).
    moved : bool
        Whether any cell changed value or position.
    gained : int
        Sum of the tiles created by merges during the move.
    """

    board: ndarray
    moved: bool
    gained: int


@dataclass(frozen=True, eq=False)
class GameState:
    """A grid together with the cumulative score of the game it belongs to."""

    board: ndarray
    score: int
