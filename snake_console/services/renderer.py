"""
Flicker-free rendering of the game on a Terminal.

The border and the initial actors are drawn once per game; afterwards only
the cells a tick changed are redrawn.
"""

from typing import Tuple

from snake_console.domain.board import Board
from snake_console.engine import SnakeGame, TickResult
from .terminal import Terminal

HEAD = "O"
BODY = "o"
EMPTY = " "

CORNER = "+"
HORIZONTAL = "-"
VERTICAL = "|"

LEGEND = "@=+1  $=+3  F=faster  S=slower"
PLAY_AGAIN_PROMPT = "Play again? (Y/N): "


class Renderer:
    """
    Draws a SnakeGame on a Terminal.

    Attributes:
        terminal: where to draw
        board: the frame; HUD lines go right below it
    """

    def __init__(self, terminal: Terminal, board: Board):
        self.terminal = terminal
        self.board = board

    def draw_static_ui(self, score: int, highscore: int):
        """Clear the screen and draw the frame and the HUD."""
        self.terminal.clear()
        self.draw_border()
        self.show_score(score, highscore)
        self.terminal.refresh()

    def draw_border(self):
        board = self.board
        for x in range(board.left, board.right + 1):
            self._cell((x, board.top), HORIZONTAL)
            self._cell((x, board.bottom), HORIZONTAL)

        for y in range(board.top, board.bottom + 1):
            self._cell((board.left, y), VERTICAL)
            self._cell((board.right, y), VERTICAL)

        for corner in ((board.left, board.top), (board.right, board.top),
                       (board.left, board.bottom), (board.right, board.bottom)):
            self._cell(corner, CORNER)

    def draw_initial_actors(self, game: SnakeGame):
        for food in game.foods:
            self._cell(food.position, food.symbol)
        for i, cell in enumerate(game.snake.positions):
            self._cell(cell, HEAD if i == 0 else BODY)
        self.terminal.refresh()

    def draw_tick(self, result: TickResult, game: SnakeGame):
        """
        Redraw only what `result` changed:
          1) erase the vacated tail (nothing to erase when the snake grew)
          2) draw the new head
          3) turn the previous head into body
          4) on food: refresh the HUD and draw the respawned item
        """
        if not result.moved:
            return

        if result.vacated_tail is not None:
            self._cell(result.vacated_tail, EMPTY)

        self._cell(result.new_head, HEAD)
        self._cell(result.old_head, BODY)

        if result.grew:
            self.show_score(game.score, game.highscore)
            if result.respawned is not None:
                self._cell(result.respawned.position, result.respawned.symbol)

        self.terminal.refresh()

    def show_score(self, score: int, highscore: int):
        left, bottom = self.board.left, self.board.bottom
        self.terminal.write_at(left, bottom + 1, f"Score: {score}    Highscore: {highscore}    ")
        self.terminal.write_at(left, bottom + 2, f"{LEGEND}      ")

    def show_end_message(self, message: str):
        self.terminal.write_at(self.board.left, self._hud_row(3), f"{message}  Thanks for playing! :)    ")
        self.terminal.refresh()

    def show_play_again_prompt(self):
        self.terminal.write_at(self.board.left, self._hud_row(4), PLAY_AGAIN_PROMPT)
        self.terminal.refresh()

    def _hud_row(self, offset: int) -> int:
        _, rows = self.terminal.get_size()
        return min(rows - 1, self.board.bottom + offset)

    def _cell(self, cell: Tuple[int, int], ch: str):
        x, y = cell
        self.terminal.set_cursor(x, y)
        self.terminal.write_char(ch)
