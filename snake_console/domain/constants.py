"""
Game constants for Console Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downwards
DIRECTION_VECTORS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}
OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Tick interval (speed) in milliseconds
START_TICK_MS = 180
MIN_TICK_MS = 60
MAX_TICK_MS = 300

# Game settings
FOOD_COUNT = 3
INITIAL_SNAKE_LENGTH = 3

# Terminal outcomes
WALL = "wall"
SELF = "self"
RESIZE = "resize"
QUIT = "quit"

OUTCOME_MESSAGES = {
    WALL: "Game Over: You hit the wall!",
    SELF: "Game Over: You ran into yourself!",
    RESIZE: "Console resized. Program exiting.",
    QUIT: "Aborted.",
}
DEFAULT_REASON = "Game Over!"
