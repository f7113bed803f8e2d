"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple

from .constants import DIRECTION_VECTORS, RIGHT


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: current movement vector (dx, dy)
    """

    def __init__(self, positions: List[Tuple[int, int]], direction: str = RIGHT):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)
        self.direction: Tuple[int, int] = DIRECTION_VECTORS[direction]

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def next_head(self) -> Tuple[int, int]:
        hx, hy = self.head
        dx, dy = self.direction
        return (hx + dx, hy + dy)

    def try_change_direction(self, move: str) -> bool:
        """
        Turn the snake towards `move` unless that would reverse it.

        Args:
            move: One of "UP", "DOWN", "LEFT", "RIGHT"

        Returns:
            True if the direction was applied, False if it was ignored.
        """
        vector = DIRECTION_VECTORS.get(move)
        if vector is None:
            return False

        dx, dy = self.direction
        # No 180 degree turns
        if vector == (-dx, -dy):
            return False

        self.direction = vector
        return True

    def hits_self(self, cell: Tuple[int, int]) -> bool:
        """True if `cell` is occupied by any segment, tail included."""
        return cell in self.positions

    def step_to(self, cell: Tuple[int, int], grow: bool = False) -> None:
        self.positions.appendleft(cell)
        if not grow:
            self.positions.pop()

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.positions)}, direction={self.direction}>"
