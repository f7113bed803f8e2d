"""
Domain entities for the Console Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, score file, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    MIN_TICK_MS, MAX_TICK_MS, START_TICK_MS,
    WALL, SELF, RESIZE, QUIT, OUTCOME_MESSAGES,
)
from .board import Board
from .snake import Snake
from .food import Food, FoodType, NORMAL, BONUS, FAST, SLOW
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'MIN_TICK_MS', 'MAX_TICK_MS', 'START_TICK_MS',
    'WALL', 'SELF', 'RESIZE', 'QUIT', 'OUTCOME_MESSAGES',
    'Board',
    'Snake',
    'Food', 'FoodType', 'NORMAL', 'BONUS', 'FAST', 'SLOW',
    'GameState',
]
