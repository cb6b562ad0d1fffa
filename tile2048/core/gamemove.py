"""
Game move utilities for the 2048 board, providing functions for determining legal and illegal directions.
"""

from numpy import asarray, ndarray

from tile2048.core.types import Direction


def _slides_or_merges(leading: ndarray, trailing: ndarray) -> bool:
    """
    Check if tiles on the trailing side can move towards the leading side.

    A tile slides into an empty leading neighbour, or merges with an equal one.
    """
    slides = (leading == 0) & (trailing != 0)
    merges = (leading != 0) & (leading == trailing)
    return bool((slides | merges).any())


def legal_directions_mask(state: ndarray) -> dict[Direction, bool]:
    """
    Get a boolean mask for all four directions without materializing any move.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    dict[Direction, bool]
        True for each direction whose move would change the board.

    Notes
    -----
    Opposite directions share the same neighbour pairs with their roles swapped.
    """
    board = asarray(state)
    west, east = board[:, :-1], board[:, 1:]
    north, south = board[:-1, :], board[1:, :]

    return {
        Direction.LEFT: _slides_or_merges(west, east),
        Direction.UP: _slides_or_merges(north, south),
        Direction.RIGHT: _slides_or_merges(east, west),
        Direction.DOWN: _slides_or_merges(south, north),
    }


def legal_directions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in declaration order.
    """
    mask = legal_directions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(state: ndarray) -> list[Direction]:
    """List the directions that would leave the board unchanged."""
    mask = legal_directions_mask(state)
    return [direction for direction in Direction if not mask[direction]]
