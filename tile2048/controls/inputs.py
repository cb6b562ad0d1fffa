"""
Map raw input events (keys, swipes, on-screen buttons) to move directions.
"""

from tile2048.core.types import Direction

# ##>: Minimum swipe displacement, in pixels.
SWIPE_THRESHOLD = 24.0

# ##>: Browser names, Matplotlib names and WASD.
KEY_BINDINGS: dict[str, Direction] = {
    'ArrowLeft': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'a': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
}


def direction_from_key(key: str | None) -> Direction | None:
    """
    Translate a key name into a direction.

    Parameters
    ----------
    key : str | None
        Name of the pressed key.

    Returns
    -------
    Direction | None
        The bound direction, or None for keys without a binding.
    """
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


def direction_from_swipe(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Direction | None:
    """
    Translate a swipe gesture into a direction.

    Parameters
    ----------
    dx : float
        Horizontal displacement, positive towards the right.
    dy : float
        Vertical displacement, positive towards the bottom of the screen.
    threshold : float, optional
        Minimum displacement along the dominant axis (default is 24 pixels).

    Returns
    -------
    Direction | None
        The direction of the dominant axis, or None when the gesture is too short.

    Notes
    -----
    Ties between both axes resolve to the vertical one.
    """
    abs_x, abs_y = abs(dx), abs(dy)
    if max(abs_x, abs_y) < threshold:
        return None
    if abs_x > abs_y:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
