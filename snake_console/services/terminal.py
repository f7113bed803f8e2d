"""
Terminal abstraction for Console Snake.

The renderer and the input handler only talk to a `Terminal`, never to
curses directly, so the game can be driven by an in-memory terminal in
tests. `CursesTerminal` is the implementation used when playing.
"""

import curses
import logging
from typing import Optional, Tuple

from snake_console.domain.constants import UP, DOWN, LEFT, RIGHT

logger = logging.getLogger(__name__)

# Normalized names for non-printable keys
ESCAPE = "ESCAPE"
ENTER = "ENTER"


class Terminal:
    """
    Base class/interface for cursor-addressed terminal I/O.

    Coordinates are (x, y) = (column, row), origin at the top-left corner.
    Keys are reported as normalized names: "UP", "DOWN", "LEFT", "RIGHT",
    "ESCAPE", "ENTER", or the lowercase character for printable keys.
    """

    def set_cursor(self, x: int, y: int) -> None:
        raise NotImplementedError

    def write(self, text: str) -> None:
        """Write text at the cursor and advance the cursor past it."""
        raise NotImplementedError

    def write_char(self, ch: str) -> None:
        self.write(ch[:1])

    def write_at(self, x: int, y: int, text: str) -> None:
        self.set_cursor(x, y)
        self.write(text)

    def poll_key(self) -> Optional[str]:
        """Return the next pending key without blocking, or None."""
        raise NotImplementedError

    def wait_key(self) -> str:
        """Block until a key is pressed and return it."""
        raise NotImplementedError

    def get_size(self) -> Tuple[int, int]:
        """Return the terminal size as (columns, rows)."""
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        """Flush pending writes to the screen."""


_CURSES_KEYS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    curses.KEY_ENTER: ENTER,
    10: ENTER,
    13: ENTER,
    27: ESCAPE,
}


class CursesTerminal(Terminal):
    """
    Terminal backed by a curses window (normally the `stdscr` handed out by
    `curses.wrapper`).
    """

    def __init__(self, window):
        self.window = window
        self._x = 0
        self._y = 0

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        self.window.keypad(True)
        self.window.nodelay(True)

    def set_cursor(self, x: int, y: int) -> None:
        self._x, self._y = x, y

    def write(self, text: str) -> None:
        try:
            self.window.addstr(self._y, self._x, text)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            logger.debug(f"Write of {text!r} at ({self._x}, {self._y}) was cut off")
        self._x += len(text)

    def poll_key(self) -> Optional[str]:
        while True:
            code = self.window.getch()
            if code == -1:
                return None
            if code == curses.KEY_RESIZE:
                # Size changes are picked up through get_size()
                continue
            return self._normalize(code)

    def wait_key(self) -> str:
        self.window.nodelay(False)
        try:
            while True:
                code = self.window.getch()
                if code in (-1, curses.KEY_RESIZE):
                    continue
                return self._normalize(code)
        finally:
            self.window.nodelay(True)

    def get_size(self) -> Tuple[int, int]:
        rows, cols = self.window.getmaxyx()
        return (cols, rows)

    def clear(self) -> None:
        self.window.clear()

    def refresh(self) -> None:
        self.window.refresh()

    @staticmethod
    def _normalize(code: int) -> str:
        if code in _CURSES_KEYS:
            return _CURSES_KEYS[code]
        if 0 <= code < 256:
            return chr(code).lower()
        return f"KEY_{code}"
