"""
Food entity and the weighted food-type table.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .board import Board


@dataclass(frozen=True)
class FoodType:
    name: str
    symbol: str
    points: int
    tick_delta: int  # ms added to the tick interval when eaten
    weight: int      # out of 100


NORMAL = FoodType("Normal", "@", points=1, tick_delta=0, weight=65)
BONUS = FoodType("Bonus", "$", points=3, tick_delta=0, weight=15)
FAST = FoodType("Fast", "F", points=1, tick_delta=-15, weight=10)
SLOW = FoodType("Slow", "S", points=1, tick_delta=20, weight=10)

# Roll order matters: thresholds are cumulative in this order
FOOD_TYPES: List[FoodType] = [NORMAL, BONUS, FAST, SLOW]


def roll_food_type(rng: random.Random) -> FoodType:
    """
    Pick a food type from the weighted table.

    Draws a uniform integer in [0, 100) and walks the cumulative weights,
    so NORMAL covers 0-64, BONUS 65-79, FAST 80-89 and SLOW 90-99.
    """
    roll = rng.randrange(100)
    threshold = 0
    for food_type in FOOD_TYPES:
        threshold += food_type.weight
        if roll < threshold:
            return food_type
    return FOOD_TYPES[-1]


class Food:
    """
    A single food item on the board.

    Attributes:
        x, y: screen cell of the item
        kind: its FoodType (symbol, points, speed delta)
    """

    def __init__(self, x: int = 0, y: int = 0, kind: FoodType = NORMAL):
        self.x = x
        self.y = y
        self.kind = kind

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def symbol(self) -> str:
        return self.kind.symbol

    @property
    def points(self) -> int:
        return self.kind.points

    @property
    def tick_delta(self) -> int:
        return self.kind.tick_delta

    def reroll_type(self, rng: random.Random) -> None:
        self.kind = roll_food_type(rng)

    def place(
        self,
        rng: random.Random,
        board: Board,
        snake_cells: Iterable[Tuple[int, int]],
        foods: Iterable["Food"],
    ) -> None:
        """
        Roll a fresh type and move to a random free cell inside the board.

        Uses rejection sampling over the inner bounds until the cell is free of
        snake segments and of every other food.

        Raises:
            ValueError: If the inner area has no free cell left.
        """
        occupied = set(snake_cells)
        occupied.update(f.position for f in foods if f is not self)
        if len(occupied & set(board.inner_cells())) >= board.inner_area:
            raise ValueError("No free cell left on the board for food.")

        self.reroll_type(rng)
        while True:
            x = rng.randint(board.min_x, board.max_x)
            y = rng.randint(board.min_y, board.max_y)
            if (x, y) not in occupied:
                self.x, self.y = x, y
                return

    def __repr__(self):
        return f"<Food {self.kind.name} at {self.position}>"


def find_food(foods: Iterable[Food], cell: Tuple[int, int]) -> Optional[Food]:
    """Return the food lying on `cell`, if any."""
    for food in foods:
        if food.position == cell:
            return food
    return None
