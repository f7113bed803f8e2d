"""
Game engine for Console Snake - the tick/update rules.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from snake_console.domain.board import Board
from snake_console.domain.constants import (
    DEFAULT_REASON,
    FOOD_COUNT,
    INITIAL_SNAKE_LENGTH,
    MAX_TICK_MS,
    MIN_TICK_MS,
    OUTCOME_MESSAGES,
    SELF,
    START_TICK_MS,
    VALID_MOVES,
    WALL,
)
from snake_console.domain.food import Food, FoodType, find_food
from snake_console.domain.game_state import GameState
from snake_console.domain.snake import Snake

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """
    What changed during one tick, enough for the renderer to draw a diff.

    `outcome` is None while the game goes on, otherwise the terminal reason.
    """

    outcome: Optional[str] = None
    old_head: Optional[Tuple[int, int]] = None
    new_head: Optional[Tuple[int, int]] = None
    vacated_tail: Optional[Tuple[int, int]] = None
    eaten: Optional[FoodType] = None
    respawned: Optional[Food] = None

    @property
    def moved(self) -> bool:
        return self.new_head is not None

    @property
    def grew(self) -> bool:
        return self.eaten is not None


def clamp_tick(tick_ms: int) -> int:
    return max(MIN_TICK_MS, min(MAX_TICK_MS, tick_ms))


class SnakeGame:
    """
    Manages:
      - Board (inner bounds)
      - Snake and its pending direction
      - Multiple food items
      - Score, highscore and speed
      - Exit flag and reason
    """

    def __init__(
        self,
        board: Board,
        highscore: int = 0,
        food_count: int = FOOD_COUNT,
        start_tick_ms: int = START_TICK_MS,
        rng: Optional[random.Random] = None
    ):
        if food_count < 0:
            raise ValueError(f"food_count must be >= 0, got {food_count}.")
        if not all(board.contains(cell) for cell in self._start_positions(board)):
            raise ValueError(
                f"Board {board.width}x{board.height} is too small for the "
                f"starting snake."
            )
        if board.inner_area < INITIAL_SNAKE_LENGTH + food_count:
            raise ValueError(
                f"Board {board.width}x{board.height} is too small for "
                f"{food_count} food items."
            )

        self.board = board
        self.highscore = highscore
        self.food_count = food_count
        self.start_tick_ms = clamp_tick(start_tick_ms)
        self.rng = rng or random.Random()

        self.snake: Snake
        self.foods: List[Food] = []
        self.score = 0
        self.tick_ms = self.start_tick_ms
        self.tick_number = 0
        self.pending_move: Optional[str] = None
        self.game_over = False
        self.reason: Optional[str] = None

        self.reset()

    def reset(self):
        """Start a fresh game: new snake, new food, score and speed restored."""
        self.game_over = False
        self.reason = None
        self.score = 0
        self.tick_ms = self.start_tick_ms
        self.tick_number = 0
        self.pending_move = None

        self.snake = Snake(self._start_positions(self.board))

        self.foods = []
        for _ in range(self.food_count):
            food = Food()
            food.place(self.rng, self.board, self.snake.positions, self.foods)
            self.foods.append(food)

        logger.info(f"New game on {self.board.width}x{self.board.height} board, highscore {self.highscore}")

    @staticmethod
    def _start_positions(board: Board) -> List[Tuple[int, int]]:
        # Head at the center, body trailing to the left
        start_x, start_y = board.center
        return [(start_x - i, start_y) for i in range(INITIAL_SNAKE_LENGTH)]

    def set_foods(self, foods: List[Food]):
        """
        Replace the food on the board with the given items.

        Raises:
            ValueError: If an item is outside the inner bounds, on the snake
                or on another item.
        """
        seen = set()
        for food in foods:
            if not self.board.contains(food.position):
                raise ValueError(f"Food out of bounds at {food.position}.")
            if food.position in self.snake.positions:
                raise ValueError(f"Food on the snake at {food.position}.")
            if food.position in seen:
                raise ValueError(f"Two food items at {food.position}.")
            seen.add(food.position)
        self.foods = list(foods)

    def queue_direction(self, move: str) -> bool:
        """
        Remember a direction to apply on the next tick.

        Later calls overwrite earlier ones; unknown moves are ignored.
        """
        if move not in VALID_MOVES:
            return False
        self.pending_move = move
        return True

    def tick(self) -> TickResult:
        """
        Advance the game by one cell.

          1) Apply the pending direction unless it reverses the snake
          2) Compute the next head
          3) Wall check
          4) Food check and self-collision check (the tail may be entered
             when it moves away this tick)
          5) Move, growing if food was eaten
          6) Score, highscore, speed and food respawn (a food with no free
             cell left is taken off the board)
        """
        if self.game_over:
            logger.debug("Game is already over. No more ticks.")
            return TickResult(outcome=self.reason)

        if self.pending_move is not None:
            self.snake.try_change_direction(self.pending_move)
            self.pending_move = None

        old_head = self.snake.head
        new_head = self.snake.next_head()

        if not self.board.contains(new_head):
            self.end_game(WALL)
            return TickResult(outcome=WALL)

        eaten = find_food(self.foods, new_head)
        ate = eaten is not None
        tail = self.snake.tail

        if self.snake.hits_self(new_head) and (ate or new_head != tail):
            self.end_game(SELF)
            return TickResult(outcome=SELF)

        self.snake.step_to(new_head, grow=ate)
        self.tick_number += 1

        result = TickResult(old_head=old_head, new_head=new_head)
        if not ate:
            result.vacated_tail = tail
            return result

        result.eaten = eaten.kind
        self.score += eaten.points
        if self.score > self.highscore:
            self.highscore = self.score

        if eaten.tick_delta:
            self.tick_ms = clamp_tick(self.tick_ms + eaten.tick_delta)
            logger.debug(f"{eaten.kind.name} food eaten, tick now {self.tick_ms}ms")

        free_cells = self.board.inner_area - len(self.snake) - (len(self.foods) - 1)
        if free_cells <= 0:
            self.foods.remove(eaten)
            logger.info(f"Board is full, {eaten.kind.name} food not respawned")
            return result

        eaten.place(self.rng, self.board, self.snake.positions, self.foods)
        result.respawned = eaten
        logger.debug(f"Food respawned: {eaten}")
        return result

    def end_game(self, reason: str):
        self.game_over = True
        self.reason = reason
        logger.info(f"Game Over: {reason} (score {self.score}, highscore {self.highscore})")

    @property
    def message(self) -> str:
        """User-facing text for the current outcome."""
        return OUTCOME_MESSAGES.get(self.reason, DEFAULT_REASON)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction,
            foods=[(f.x, f.y, f.symbol) for f in self.foods],
            score=self.score,
            highscore=self.highscore,
            tick_ms=self.tick_ms,
            board=self.board,
            game_over=self.game_over,
            reason=self.reason
        )

