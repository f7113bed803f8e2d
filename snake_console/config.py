"""
Startup configuration for Console Snake.

The game takes no command-line flags. Every setting has a fixed default
that can be overridden through environment variables, optionally placed in
a `.env` file next to where the game is started.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from snake_console.domain.constants import FOOD_COUNT, START_TICK_MS

DEFAULT_BOARD_WIDTH = 60
DEFAULT_BOARD_HEIGHT = 20
DEFAULT_HIGHSCORE_FILE = "highscore.txt"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    board_width: int = DEFAULT_BOARD_WIDTH
    board_height: int = DEFAULT_BOARD_HEIGHT
    highscore_file: str = DEFAULT_HIGHSCORE_FILE
    food_count: int = FOOD_COUNT
    tick_ms: int = START_TICK_MS
    log_file: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Uses environment variables:
    - SNAKE_BOARD_WIDTH / SNAKE_BOARD_HEIGHT: board size including the frame
    - SNAKE_HIGHSCORE_FILE: path of the highscore file
    - SNAKE_FOOD_COUNT: number of food items on the board
    - SNAKE_TICK_MS: starting tick interval in milliseconds
    - SNAKE_LOG_FILE: write logs to this file (logging is off when unset)
    - SNAKE_LOG_LEVEL: logging level name

    Raises:
        ValueError: If a numeric variable is not an integer or a value is
            out of range.
    """
    load_dotenv()

    level = os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"SNAKE_LOG_LEVEL must be a logging level name, got {level!r}")

    settings = Settings(
        board_width=_int_env("SNAKE_BOARD_WIDTH", DEFAULT_BOARD_WIDTH),
        board_height=_int_env("SNAKE_BOARD_HEIGHT", DEFAULT_BOARD_HEIGHT),
        highscore_file=os.getenv("SNAKE_HIGHSCORE_FILE") or DEFAULT_HIGHSCORE_FILE,
        food_count=_int_env("SNAKE_FOOD_COUNT", FOOD_COUNT),
        tick_ms=_int_env("SNAKE_TICK_MS", START_TICK_MS),
        log_file=os.getenv("SNAKE_LOG_FILE") or None,
        log_level=level,
    )

    if settings.food_count < 0:
        raise ValueError(f"SNAKE_FOOD_COUNT must be >= 0, got {settings.food_count}")
    if settings.tick_ms <= 0:
        raise ValueError(f"SNAKE_TICK_MS must be positive, got {settings.tick_ms}")

    return settings


def configure_logging(settings: Settings) -> None:
    """
    Set up logging for a curses session.

    curses owns the screen, so records go to the configured file or nowhere.
    """
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=settings.log_level, handlers=[logging.NullHandler()])
