"""
Tests for the terminal-facing services: input handling, rendering and the
curses terminal adapter.
"""

import curses
import logging
import pytest
import random
import sys
import os
from unittest.mock import MagicMock, call

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_console.domain import Board, Food, Snake, BONUS, UP, DOWN, LEFT, RIGHT
from snake_console.engine import SnakeGame
from snake_console.services import (
    CursesTerminal,
    Renderer,
    ESCAPE,
    ENTER,
    drain_input,
    ask_play_again,
    key_to_move,
)
from tests.fake_terminal import FakeTerminal


class TestInputHandler:
    """Tests for key mapping and draining."""

    @pytest.mark.parametrize("key,move", [
        (UP, UP), (DOWN, DOWN), (LEFT, LEFT), (RIGHT, RIGHT),
        ("i", UP), ("k", DOWN), ("j", LEFT), ("l", RIGHT),
        ("x", None), (ENTER, None), (None, None),
    ])
    def test_key_to_move(self, key, move):
        assert key_to_move(key) == move

    def test_drain_keeps_last_movement_key(self):
        terminal = FakeTerminal(keys=[UP, "x", "j", "z"])

        result = drain_input(terminal)

        assert result.move == LEFT
        assert result.quit is False
        assert not terminal.keys

    def test_drain_without_keys(self):
        result = drain_input(FakeTerminal())
        assert result.move is None
        assert result.quit is False

    def test_quit_stops_draining(self):
        terminal = FakeTerminal(keys=[UP, ESCAPE, DOWN])

        result = drain_input(terminal)

        assert result.quit is True
        assert result.move == UP
        assert list(terminal.keys) == [DOWN]

    def test_q_quits(self):
        assert drain_input(FakeTerminal(keys=["q"])).quit is True

    def test_ask_play_again_yes(self):
        assert ask_play_again(FakeTerminal(wait_keys=["x", UP, "y"])) is True

    @pytest.mark.parametrize("key", ["n", ESCAPE, "q"])
    def test_ask_play_again_no(self, key):
        assert ask_play_again(FakeTerminal(wait_keys=[key])) is False


class TestRenderer:
    """Tests for the Renderer drawing on a fake terminal."""

    def make(self):
        terminal = FakeTerminal(80, 24)
        board = Board.centered(60, 20, 80, 24)  # frame (10,1)-(69,19)
        game = SnakeGame(board, food_count=0, rng=random.Random(5))
        return terminal, board, game, Renderer(terminal, board)

    def test_border(self):
        terminal, board, game, renderer = self.make()

        renderer.draw_static_ui(0, 0)

        for corner in ((10, 1), (69, 1), (10, 19), (69, 19)):
            assert terminal.char_at(*corner) == "+"
        assert terminal.char_at(11, 1) == "-"
        assert terminal.char_at(68, 19) == "-"
        assert terminal.char_at(10, 2) == "|"
        assert terminal.char_at(69, 18) == "|"
        # Inner area untouched
        assert terminal.char_at(11, 2) == " "

    def test_score_lines(self):
        terminal, board, game, renderer = self.make()

        renderer.draw_static_ui(4, 12)

        assert terminal.row_text(20).strip() == "Score: 4    Highscore: 12"
        assert "@=+1  $=+3  F=faster  S=slower" in terminal.row_text(21)

    def test_initial_actors_match_state(self):
        terminal, board, game, renderer = self.make()
        game.set_foods([Food(20, 5, BONUS)])

        renderer.draw_initial_actors(game)

        head, *body = list(game.snake.positions)
        assert terminal.char_at(*head) == "O"
        for cell in body:
            assert terminal.char_at(*cell) == "o"
        assert terminal.char_at(20, 5) == "$"

    def test_draw_tick_redraws_only_changed_cells(self):
        terminal, board, game, renderer = self.make()
        renderer.draw_initial_actors(game)
        old = list(game.snake.positions)
        written_before = dict(terminal.screen)

        result = game.tick()
        renderer.draw_tick(result, game)

        assert terminal.char_at(*result.new_head) == "O"
        assert terminal.char_at(*old[0]) == "o"
        assert terminal.char_at(*old[-1]) == " "
        changed = {cell for cell, ch in terminal.screen.items() if written_before.get(cell) != ch}
        assert changed == {result.new_head, old[0], old[-1]}

    def test_screen_matches_state_after_ticks(self):
        terminal, board, game, renderer = self.make()
        renderer.draw_initial_actors(game)

        for move in [UP, UP, LEFT, LEFT, DOWN]:
            game.queue_direction(move)
            renderer.draw_tick(game.tick(), game)

        drawn = {cell for cell, ch in terminal.screen.items() if ch in "Oo"}
        assert drawn == set(game.snake.positions)

    def test_draw_tick_on_food(self):
        terminal, board, game, renderer = self.make()
        hx, hy = game.snake.head
        food = Food(hx + 1, hy, BONUS)
        game.set_foods([food])
        renderer.draw_initial_actors(game)
        tail = game.snake.tail

        result = game.tick()
        renderer.draw_tick(result, game)

        # Grown: tail stays, new food drawn, score refreshed
        assert terminal.char_at(*tail) == "o"
        assert terminal.char_at(*food.position) == food.symbol
        assert "Score: 3" in terminal.row_text(20)

    def test_draw_tick_ignores_fatal_tick(self):
        terminal, board, game, renderer = self.make()
        game.snake = Snake([(board.max_x, 5)])
        refreshes = terminal.refreshes

        renderer.draw_tick(game.tick(), game)

        assert terminal.refreshes == refreshes

    def test_end_message_and_prompt(self):
        terminal, board, game, renderer = self.make()

        renderer.show_end_message("Game Over: You hit the wall!")
        renderer.show_play_again_prompt()

        assert terminal.row_text(22).startswith(" " * 10 + "Game Over: You hit the wall!")
        assert terminal.row_text(23).strip() == "Play again? (Y/N):"

    def test_end_message_stays_on_screen(self):
        """HUD rows are clamped to the last terminal row."""
        terminal = FakeTerminal(40, 12)
        board = Board(left=2, top=1, width=20, height=9)
        renderer = Renderer(terminal, board)

        renderer.show_end_message("bye")
        renderer.show_play_again_prompt()

        assert "bye" in terminal.row_text(11) or "Play again?" in terminal.row_text(11)
        assert max(y for (_, y) in terminal.screen) == 11


class TestCursesTerminal:
    """Tests for the curses adapter, against a mocked window."""

    @pytest.fixture
    def window(self, monkeypatch):
        monkeypatch.setattr(curses, "curs_set", MagicMock())
        return MagicMock()

    def test_setup_enables_keypad_and_nodelay(self, window):
        CursesTerminal(window)
        window.keypad.assert_called_once_with(True)
        window.nodelay.assert_called_once_with(True)

    def test_cursor_hide_failure_is_tolerated(self, window):
        curses.curs_set.side_effect = curses.error("no cursor control")
        CursesTerminal(window)

    def test_write_uses_cursor_position(self, window):
        terminal = CursesTerminal(window)

        terminal.set_cursor(3, 7)
        terminal.write("ab")
        terminal.write_char("c")

        window.addstr.assert_any_call(7, 3, "ab")
        window.addstr.assert_any_call(7, 5, "c")

    def test_write_swallows_curses_error_in_corner(self, window, caplog):
        window.addstr.side_effect = curses.error("corner")
        terminal = CursesTerminal(window)

        with caplog.at_level(logging.DEBUG, logger="snake_console.services.terminal"):
            terminal.write_at(79, 23, "+")

        assert "(79, 23) was cut off" in caplog.text

    def test_poll_key_normalizes(self, window):
        window.getch.side_effect = [curses.KEY_UP, curses.KEY_RESIZE, ord("J"), 27, -1]
        terminal = CursesTerminal(window)

        assert terminal.poll_key() == UP
        assert terminal.poll_key() == "j"
        assert terminal.poll_key() == ESCAPE
        assert terminal.poll_key() is None

    def test_wait_key_blocks_then_restores_nodelay(self, window):
        window.getch.side_effect = [-1, ord("y")]
        terminal = CursesTerminal(window)

        assert terminal.wait_key() == "y"
        window.nodelay.assert_any_call(False)
        assert window.nodelay.call_args_list[-1] == call(True)

    def test_get_size_is_columns_rows(self, window):
        window.getmaxyx.return_value = (24, 80)
        assert CursesTerminal(window).get_size() == (80, 24)
