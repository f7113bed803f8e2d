"""
Keyboard handling - maps normalized terminal keys to game commands.
"""

from dataclasses import dataclass
from typing import Optional

from snake_console.domain.constants import UP, DOWN, LEFT, RIGHT
from .terminal import ESCAPE, Terminal

# Arrow keys plus I/J/K/L
KEY_BINDINGS = {
    UP: UP,
    DOWN: DOWN,
    LEFT: LEFT,
    RIGHT: RIGHT,
    "i": UP,
    "k": DOWN,
    "j": LEFT,
    "l": RIGHT,
}
QUIT_KEYS = {ESCAPE, "q"}


@dataclass
class InputResult:
    move: Optional[str] = None
    quit: bool = False


def key_to_move(key: Optional[str]) -> Optional[str]:
    """Map a key to a direction, or None if it is not a movement key."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


def drain_input(terminal: Terminal) -> InputResult:
    """
    Consume every pending key press.

    Only the last movement key counts. A quit key stops draining at once.
    Anything else is ignored.
    """
    result = InputResult()
    while True:
        key = terminal.poll_key()
        if key is None:
            return result
        if key in QUIT_KEYS:
            result.quit = True
            return result
        move = key_to_move(key)
        if move is not None:
            result.move = move


def ask_play_again(terminal: Terminal) -> bool:
    """Block until the player answers Y (True) or N/Esc/Q (False)."""
    while True:
        key = terminal.wait_key()
        if key == "y":
            return True
        if key == "n" or key in QUIT_KEYS:
            return False
