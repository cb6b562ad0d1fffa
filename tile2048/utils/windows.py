# -*- coding: utf-8 -*-
"""
Display the game in a window.
"""
from typing import Callable, Iterable

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.widgets import Button

from tile2048.core.types import Direction


def release_keys(keys: Iterable[str]) -> None:
    """
    Remove keys from Matplotlib's default shortcuts so they reach the game's key handler.

    Parameters
    ----------
    keys: Iterable[str]
        Key names used by the game
    """
    keys = set(keys)
    for name in [param for param in plt.rcParams if param.startswith("keymap.")]:
        plt.rcParams[name] = [key for key in plt.rcParams[name] if key not in keys]


class WindowBoard:
    """
    Window to draw the 2048 board using Matplotlib.
    Empty cells are drawn as background slots without text; tiles can show an emoji above their value.
    """

    # ##: Colors
    BACKGROUND = "#BBADA0"
    EMPTY = "#CDC1B4"
    SUPER = "#3C3A32"
    COLORS = {
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
    }

    # ##: Emoji per tile value, shown when the emoji mode is on.
    EMOJIS = {
        2: "\N{SEEDLING}",
        4: "\N{HERB}",
        8: "\N{FIRE}",
        16: "\N{HIGH VOLTAGE SIGN}",
        32: "\N{GEM STONE}",
        64: "\N{GLOWING STAR}",
        128: "\N{DIRECT HIT}",
        256: "\N{ROCKET}",
        512: "\N{BRAIN}",
        1024: "\N{CROWN}",
        2048: "\N{TROPHY}",
    }
    SUPER_EMOJI = "\N{MILKY WAY}"

    # ##: Arrow buttons: (direction, label, left edge).
    BUTTONS = [
        (Direction.LEFT, "\N{LEFTWARDS ARROW}", 0.08),
        (Direction.UP, "\N{UPWARDS ARROW}", 0.30),
        (Direction.DOWN, "\N{DOWNWARDS ARROW}", 0.52),
        (Direction.RIGHT, "\N{RIGHTWARDS ARROW}", 0.74),
    ]

    def __init__(self, title: str, size: int):
        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0.12, right=1, top=0.92, wspace=0.1, hspace=0.1)
        self.axe.set_facecolor(self.BACKGROUND)
        self.fig.canvas.manager.set_window_title(title)

        self.axe.xaxis.set_ticks_position("none")
        self.axe.yaxis.set_ticks_position("none")
        _ = self.axe.set_xticklabels([])
        _ = self.axe.set_yticklabels([])

        # ## ----> Add cell for board.
        self.textes = []
        self.axes = [self.fig.add_subplot(size, size, index) for index in range(1, size * size + 1)]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
            )
            self.textes.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Emoji mode and arrow buttons.
        self.show_emoji = False
        self.buttons: dict[Direction, Button] = {}

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    @classmethod
    def color(cls, value: int) -> str:
        """
        Background color of a cell.

        Parameters
        ----------
        value: int
            Tile value, 0 for an empty cell
        """
        if value == 0:
            return cls.EMPTY
        return cls.COLORS.get(value, cls.SUPER)

    def cell_text(self, value: int) -> str:
        """
        Text drawn in a cell: nothing when empty, the value, and its emoji in emoji mode.

        Parameters
        ----------
        value: int
            Tile value, 0 for an empty cell
        """
        if value == 0:
            return ""
        if self.show_emoji:
            return f"{self.EMOJIS.get(value, self.SUPER_EMOJI)}\n{value}"
        return str(value)

    def toggle_emoji(self) -> bool:
        """Switch the emoji mode and return the new state."""
        self.show_emoji = not self.show_emoji
        return self.show_emoji

    def show_image(self, board: np.ndarray, caption: str = ""):
        """
        Show the board or update the board being shown.

        Parameters
        ----------
        board: np.ndarray
            Board to draw

        caption: str
            Text shown above the board (score, best score, status)
        """
        # ## ----> Update the cells.
        values = np.reshape(board, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            value = int(value)
            text.set_text(self.cell_text(value))
            text.set_color("#F9F6F2" if value > 4 else "#776E65")
            _ax.set_facecolor(self.color(value))
        self.fig.suptitle(caption)

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Callable
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_mouse_handlers(self, press_handler: Callable, release_handler: Callable):
        """
        Register the handlers of a mouse drag, used as a swipe gesture.

        Parameters
        ----------
        press_handler: Callable
            Called when a mouse button goes down

        release_handler: Callable
            Called when the mouse button goes up
        """
        self.fig.canvas.mpl_connect("button_press_event", press_handler)
        self.fig.canvas.mpl_connect("button_release_event", release_handler)

    def add_buttons(self, on_click: Callable[[Direction], None]):
        """
        Add on-screen arrow buttons below the board.

        Parameters
        ----------
        on_click: Callable[[Direction], None]
            Called with the direction of the clicked button
        """
        for direction, label, left in self.BUTTONS:
            button = Button(self.fig.add_axes([left, 0.015, 0.18, 0.08]), label)
            button.on_clicked(lambda event, direction=direction: on_click(direction))
            self.buttons[direction] = button

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
