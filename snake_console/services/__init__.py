"""
Terminal-facing services: the terminal abstraction, rendering and input.
"""

from .terminal import Terminal, CursesTerminal, ESCAPE, ENTER
from .renderer import Renderer
from .input_handler import InputResult, drain_input, ask_play_again, key_to_move

__all__ = [
    'Terminal', 'CursesTerminal', 'ESCAPE', 'ENTER',
    'Renderer',
    'InputResult', 'drain_input', 'ask_play_again', 'key_to_move',
]
