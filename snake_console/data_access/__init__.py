"""
Data access layer for Console Snake.

Persistence lives here so the game engine stays free of file I/O.
"""

from .scoreboard import Scoreboard

__all__ = ['Scoreboard']
