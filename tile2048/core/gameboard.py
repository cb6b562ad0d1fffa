"""
Core functionality for the 2048 board: construction, sliding and merging, tile spawning and terminal checks.

Every function treats its input grid as an immutable value and returns a freshly allocated array.
"""

import logging
from typing import Any, Callable

from numpy import any as np_any
from numpy import argwhere, array, asarray, int64, ndarray, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from tile2048.core.types import Direction, GameState, MoveResult

logger = logging.getLogger(__name__)

# ##>: Side of the square board.
BOARD_SIZE = 4

# ##>: Traditional win threshold; reaching it does not end the game.
WIN_TILE = 2048

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def _as_grid(grid: Any) -> ndarray:
    return array(grid, dtype=int64)


def create_empty_board(size: int = BOARD_SIZE) -> ndarray:
    """
    Create a board with every cell empty.

    Parameters
    ----------
    size : int, optional
        Side of the square board (default is 4).

    Returns
    -------
    ndarray
        A (size, size) array of zeros.
    """
    return zeros((size, size), dtype=int64)


def empty_cells(grid: ndarray) -> list[tuple[int, int]]:
    """
    List the positions of the empty cells, in row-major order.

    Parameters
    ----------
    grid : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        Positions (row, col) holding 0.
    """
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(asarray(grid) == 0)]


def add_random_tile(grid: ndarray, rng: Generator | None = None) -> ndarray:
    """
    Spawn one tile (2 or 4) in a uniformly chosen empty cell.

    Parameters
    ----------
    grid : ndarray
        The game board. Not modified.
    rng : Generator, optional
        Random source exposing ``integers`` and ``random``. Defaults to a module-level generator.

    Returns
    -------
    ndarray
        A new board with exactly one more tile, or a copy of the input if it had no empty cell.

    Notes
    -----
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - A full board is not an error: the caller detects game over with ``can_move``.
    """
    rng = rng if rng is not None else _GENERATOR
    board = _as_grid(grid)

    cells = empty_cells(board)
    if not cells:
        return board

    row, col = cells[int(rng.integers(len(cells)))]
    board[row, col] = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    return board


def compress_merge(row: ndarray) -> tuple[ndarray, int]:
    """
    Slide a single line towards its start and merge adjacent equal values.

    Parameters
    ----------
    row : ndarray
        A 1D line of the board (a row, or a column after transposition).

    Returns
    -------
    merged_row : ndarray
        The new line, padded with zeros to the input length.
    gained : int
        The total value of the tiles created by merging.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs in a single scan from the start of the line towards the end.
    - Each value can only be merged once: ``[2, 2, 2, 0]`` gives ``[4, 2, 0, 0]``.
    """
    line = asarray(row, dtype=int64)
    non_zero = line[line != 0]
    result = zeros_like(line)
    gained = 0

    # ##: Single left-to-right scan, no backtracking.
    i, position = 0, 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result[position] = merged
            gained += merged
            i += 2
        else:
            result[position] = non_zero[i]
            i += 1
        position += 1

    return result, gained


def slide_and_merge(board: ndarray) -> MoveResult:
    """
    Slide the game board to the left and merge adjacent cells.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array. Not modified.

    Returns
    -------
    MoveResult
        The updated board, whether any row changed, and the score gained.

    Notes
    -----
    Rows never interact; other directions reorient the board before calling this function.
    """
    source = _as_grid(board)
    result = zeros_like(source)
    gained = 0

    for i, row in enumerate(source):
        merged_row, row_gained = compress_merge(row)
        result[i] = merged_row
        gained += row_gained

    moved = bool(np_any(result != source))
    return MoveResult(board=result, moved=moved, gained=gained)


def _identity(board: ndarray) -> ndarray:
    return board.copy()


def _reverse_rows(board: ndarray) -> ndarray:
    return board[:, ::-1].copy()


def _transpose(board: ndarray) -> ndarray:
    return board.T.copy()


def _transpose_reverse(board: ndarray) -> ndarray:
    return _reverse_rows(_transpose(board))


def _reverse_transpose(board: ndarray) -> ndarray:
    return _transpose(_reverse_rows(board))


# ##>: For each direction, the transform that turns it into a left move and the one that undoes it.
ORIENTATIONS: dict[Direction, tuple[Callable[[ndarray], ndarray], Callable[[ndarray], ndarray]]] = {
    Direction.LEFT: (_identity, _identity),
    Direction.RIGHT: (_reverse_rows, _reverse_rows),
    Direction.UP: (_transpose, _transpose),
    Direction.DOWN: (_transpose_reverse, _reverse_transpose),
}


def move(grid: ndarray, direction: Direction | str | int) -> MoveResult:
    """
    Apply a directional move to the board, without spawning a new tile.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board. Not modified.
    direction : Direction | str | int
        The direction to apply; strings and integer indexes are parsed with ``Direction.parse``.

    Returns
    -------
    MoveResult
        The new board, whether it changed, and the score gained by merges.

    Notes
    -----
    An unknown direction is a no-op: the result holds a copy of the grid, ``moved=False`` and ``gained=0``.
    """
    board = _as_grid(grid)
    parsed = Direction.parse(direction)
    if parsed is None:
        logger.debug('Ignoring move with unknown direction %r', direction)
        return MoveResult(board=board, moved=False, gained=0)

    forward, backward = ORIENTATIONS[parsed]
    result = slide_and_merge(forward(board))
    if not result.moved:
        return MoveResult(board=board, moved=False, gained=0)
    return MoveResult(board=backward(result.board), moved=True, gained=result.gained)


def can_move(grid: ndarray) -> bool:
    """
    Check if at least one directional move would change the board.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        False only when the board is full and no two adjacent cells hold the same value.
    """
    board = asarray(grid)
    if not board.all():
        return True
    return bool(np_any(board[:, :-1] == board[:, 1:]) or np_any(board[:-1] == board[1:]))


def has_2048(grid: ndarray, target: int = WIN_TILE) -> bool:
    """
    Check if any tile has reached the win threshold.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board.
    target : int, optional
        The winning tile value (default is 2048).

    Returns
    -------
    bool
        True if any cell is greater than or equal to ``target``.
    """
    return bool(np_any(asarray(grid) >= target))


def new_game(rng: Generator | None = None, size: int = BOARD_SIZE) -> GameState:
    """
    Start a game: an empty board with two spawned tiles and a score of zero.

    Parameters
    ----------
    rng : Generator, optional
        Random source for the two spawns.
    size : int, optional
        Side of the square board (default is 4).

    Returns
    -------
    GameState
        The initial board and score.
    """
    board = add_random_tile(create_empty_board(size), rng=rng)
    board = add_random_tile(board, rng=rng)
    return GameState(board=board, score=0)
