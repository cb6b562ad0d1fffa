# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from typing import Any

from tile2048.config import GameConfig
from tile2048.controls import KEY_BINDINGS, direction_from_key, direction_from_swipe
from tile2048.core.types import Direction
from tile2048.envs import GameStatus, TwentyFortyEight
from tile2048.utils import WindowBoard, release_keys

logger = logging.getLogger(__name__)

CAPTIONS = {
    GameStatus.ACTIVE: "Moves: {moves}",
    GameStatus.WON: "You reached {target}! Keep going.",
    GameStatus.OVER: "No moves left. Backspace for a new game.",
}


def caption(envs: TwentyFortyEight) -> str:
    """
    Text shown above the board.

    Parameters
    ----------
    envs: TwentyFortyEight
        The game session to describe
    """
    moves = ", ".join(direction.value for direction in envs.legal_directions)
    status = CAPTIONS[envs.status].format(moves=moves, target=envs.config.win_tile)
    return f"Score: {envs.score}  Best: {envs.best}\n{status}"


def redraw(window: WindowBoard, envs: TwentyFortyEight):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    envs: TwentyFortyEight
        The game session to draw
    """
    window.show_image(envs.board, caption=caption(envs))


def reset(envs: TwentyFortyEight, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    envs: TwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    envs.reset()
    redraw(window, envs)


def step(envs: TwentyFortyEight, window: WindowBoard, direction: Direction | None):
    """
    Applied a direction into the game.

    Parameters
    ----------
    envs: TwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game board

    direction: Direction | None
        Direction read from a key, a swipe or a button
    """
    result = envs.step(direction)
    if result.moved:
        logger.debug("direction=%s gained=%d score=%d", direction, result.gained, envs.score)
        redraw(window, envs)


def key_handler(envs: TwentyFortyEight, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: TwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(envs, window)
        return None

    if event.key == "r":
        envs.reset_best()
        redraw(window, envs)
        return None

    if event.key == "e":
        window.toggle_emoji()
        redraw(window, envs)
        return None

    if event.key in KEY_BINDINGS:
        step(envs, window, direction_from_key(event.key))
        return None


class SwipeHandler:
    """
    Turn a mouse drag on the window into a move.

    Drags shorter than the threshold, such as plain clicks on the arrow buttons, are ignored.
    """

    def __init__(self, envs: TwentyFortyEight, window: WindowBoard, threshold: float):
        self.envs = envs
        self.window = window
        self.threshold = threshold
        self._start: tuple[float, float] | None = None

    def on_press(self, event: Any):
        if event.x is None or event.y is None:
            return None
        self._start = (event.x, event.y)

    def on_release(self, event: Any):
        start, self._start = self._start, None
        if start is None or event.x is None or event.y is None:
            return None

        # ##: Display coordinates grow upwards, swipes grow downwards.
        dx = event.x - start[0]
        dy = start[1] - event.y
        direction = direction_from_swipe(dx, dy, threshold=self.threshold)
        if direction is None:
            logger.debug("swipe (%.0f, %.0f) below threshold", dx, dy)
            return None
        step(self.envs, self.window, direction)


def main():
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play 2048 with the arrow keys, mouse swipes or the arrow buttons.")
    parser.add_argument("--size", type=int, default=GameConfig.size)
    parser.add_argument("--win-tile", type=int, default=GameConfig.win_tile)
    parser.add_argument("--swipe-threshold", type=float, default=GameConfig.swipe_threshold)
    parser.add_argument("--best-score", type=str, default=None, help="JSON file keeping the best score")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(
        size=args.size,
        win_tile=args.win_tile,
        swipe_threshold=args.swipe_threshold,
        best_score_path=args.best_score,
    )
    env = TwentyFortyEight(config=config)

    release_keys(list(KEY_BINDINGS) + ["escape", "backspace", "r", "e"])
    window_board = WindowBoard(title="2048 Game", size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    swipes = SwipeHandler(env, window_board, threshold=config.swipe_threshold)
    window_board.register_mouse_handlers(swipes.on_press, swipes.on_release)
    window_board.add_buttons(lambda direction: step(env, window_board, direction))

    redraw(window_board, env)

    # Blocking event loop
    window_board.show(block=True)


if __name__ == "__main__":
    main()
