"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .board import Board


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have been applied (0-based)
        snake_positions: list of (x, y), head first
        direction: movement vector (dx, dy)
        foods: list of (x, y, symbol) for every food item
        score: points collected in this game
        highscore: best score seen so far, this game included
        tick_ms: current tick interval in milliseconds
        board: the framed playfield (inner bounds live inside it)
        game_over: exit flag
        reason: outcome key ("wall", "self", "resize", "quit") once over
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        direction: Tuple[int, int],
        foods: List[Tuple[int, int, str]],
        score: int,
        highscore: int,
        tick_ms: int,
        board: Board,
        game_over: bool = False,
        reason: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.direction = direction
        self.foods = foods
        self.score = score
        self.highscore = highscore
        self.tick_ms = tick_ms
        self.board = board
        self.game_over = game_over
        self.reason = reason

    def print_board(self) -> str:
        """
        Returns a string representation of the inner playfield with:
        . = empty space
        O = snake head
        o = snake body
        @, $, F, S = food by type
        Rows are printed top to bottom, as on screen.
        """
        board = self.board
        width = board.max_x - board.min_x + 1
        height = board.max_y - board.min_y + 1

        # Create empty grid
        grid = [['.' for _ in range(width)] for _ in range(height)]

        # Place food
        for fx, fy, symbol in self.foods:
            grid[fy - board.min_y][fx - board.min_x] = symbol

        # Place snake
        for pos_idx, (x, y) in enumerate(self.snake_positions):
            if not board.contains((x, y)):
                continue
            grid[y - board.min_y][x - board.min_x] = 'O' if pos_idx == 0 else 'o'

        return "\n".join(''.join(row) for row in grid)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, score={self.score}, "
            f"highscore={self.highscore}, tick_ms={self.tick_ms}, "
            f"length={len(self.snake_positions)}, reason={self.reason}>"
        )
