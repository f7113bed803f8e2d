"""
Console Snake entry point: the update-render-sleep loop and the session
around it (end screen, highscore persistence, play-again prompt).
"""

import curses
import logging
import os
import random
import sys
import time
from typing import Callable, Optional, Tuple

from snake_console.config import Settings, configure_logging, load_settings
from snake_console.data_access.scoreboard import Scoreboard
from snake_console.domain.board import Board
from snake_console.domain.constants import QUIT, RESIZE
from snake_console.engine import SnakeGame
from snake_console.services.input_handler import ask_play_again, drain_input
from snake_console.services.renderer import Renderer
from snake_console.services.terminal import CursesTerminal, Terminal

logger = logging.getLogger(__name__)


def play_game(
    game: SnakeGame,
    renderer: Renderer,
    terminal: Terminal,
    start_size: Tuple[int, int],
    sleep: Callable[[float], None] = time.sleep
) -> str:
    """
    Run one game until it ends and return the outcome reason.

    Each iteration:
      1) End the game if the terminal was resized
      2) Drain the keyboard (quit ends the game at once)
      3) Tick and draw what changed
      4) Sleep for the current tick interval
    """
    renderer.draw_static_ui(game.score, game.highscore)
    renderer.draw_initial_actors(game)

    while not game.game_over:
        if terminal.get_size() != start_size:
            game.end_game(RESIZE)
            break

        inputs = drain_input(terminal)
        if inputs.quit:
            game.end_game(QUIT)
            break
        if inputs.move is not None:
            game.queue_direction(inputs.move)

        result = game.tick()
        renderer.draw_tick(result, game)
        if result.outcome is not None:
            break

        sleep(game.tick_ms / 1000.0)

    return game.reason


def run_session(
    terminal: Terminal,
    settings: Settings,
    scoreboard: Scoreboard,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep
) -> int:
    """
    Play games until the player declines another one.

    The highscore is loaded once up front and saved after every game.

    Returns:
        The highscore after the last game.

    Raises:
        ValueError: If the terminal is too small for a board.
    """
    highscore = scoreboard.load()

    start_size = terminal.get_size()
    board = Board.centered(settings.board_width, settings.board_height, *start_size)
    game = SnakeGame(
        board,
        highscore=highscore,
        food_count=settings.food_count,
        start_tick_ms=settings.tick_ms,
        rng=rng
    )
    renderer = Renderer(terminal, board)

    while True:
        reason = play_game(game, renderer, terminal, start_size, sleep=sleep)
        renderer.show_end_message(game.message)
        scoreboard.save(game.highscore)

        if reason == RESIZE:
            break

        renderer.show_play_again_prompt()
        if not ask_play_again(terminal):
            break
        game.reset()

    return scoreboard.highscore


def main() -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(settings)
    # Esc should register immediately instead of after curses' default 1s
    os.environ.setdefault("ESCDELAY", "25")

    scoreboard = Scoreboard(settings.highscore_file)
    try:
        highscore = curses.wrapper(
            lambda stdscr: run_session(CursesTerminal(stdscr), settings, scoreboard)
        )
    except ValueError as e:
        logger.error(f"Cannot start game: {e}")
        print(f"Cannot start game: {e}", file=sys.stderr)
        return 1

    print(f"Highscore: {highscore}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
