"""
Board entity - the framed playfield in screen coordinates.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

# Free columns/rows kept around the board for the HUD and end screen
SCREEN_MARGIN = 5
MIN_BOARD_SIZE = 5


@dataclass(frozen=True)
class Board:
    """
    A rectangular frame drawn on the terminal.

    Coordinates are terminal cells. The frame occupies the outermost
    rows/columns; the playable inner bounds are everything inside it.

    Attributes:
        left, top: screen position of the top-left frame corner
        width, height: frame size including the border
    """

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self):
        if self.width < MIN_BOARD_SIZE or self.height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, "
                f"got {self.width}x{self.height}."
            )

    @classmethod
    def centered(cls, width: int, height: int, term_width: int, term_height: int) -> "Board":
        """
        Build a board centered in the terminal, shrunk to fit if needed.

        Raises:
            ValueError: If the terminal is too small for a playable board.
        """
        width = min(width, term_width - SCREEN_MARGIN)
        height = min(height, term_height - SCREEN_MARGIN)
        left = (term_width - width) // 2
        top = (term_height - height) // 2 - 1
        return cls(left=left, top=top, width=width, height=height)

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    # Inner bounds
    @property
    def min_x(self) -> int:
        return self.left + 1

    @property
    def max_x(self) -> int:
        return self.right - 1

    @property
    def min_y(self) -> int:
        return self.top + 1

    @property
    def max_y(self) -> int:
        return self.bottom - 1

    @property
    def inner_area(self) -> int:
        return (self.width - 2) * (self.height - 2)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.left + self.width // 2, self.top + self.height // 2)

    def contains(self, cell: Tuple[int, int]) -> bool:
        """True if `cell` lies within the inner bounds."""
        x, y = cell
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def inner_cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield (x, y)
