"""
Highscore persistence for Console Snake.

The score lives in a single plain-text file holding one decimal integer.
"""

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class Scoreboard:
    """
    Loads and saves the all-time highscore.

    Attributes:
        path: location of the highscore file
        highscore: the value read by the last load() (0 before that)
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.highscore = 0

    def load(self) -> int:
        """
        Read the persisted highscore.

        Returns:
            The stored score, or 0 if the file is missing, unreadable or does
            not hold a non-negative integer.
        """
        if not self.path.exists():
            logger.info(f"No highscore file at {self.path}, starting from 0")
            self.highscore = 0
            return 0

        try:
            text = self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read highscore file {self.path}: {e}")
            self.highscore = 0
            return 0

        # Plain ASCII digits with an optional sign; int() alone would also take
        # "1_000" and non-ASCII digits
        digits = text[1:] if text.startswith(("+", "-")) else text
        if text.isascii() and digits.isdigit():
            value = int(text)
        else:
            logger.warning(f"Ignoring unparsable highscore {text!r} in {self.path}")
            value = 0

        if value < 0:
            logger.warning(f"Ignoring negative highscore {value} in {self.path}")
            value = 0

        self.highscore = value
        logger.info(f"Loaded highscore {value} from {self.path}")
        return value

    def save(self, score: int) -> int:
        """
        Persist the larger of the loaded highscore and `score`.

        Returns:
            The value written.

        Raises:
            OSError: If the file cannot be written.
        """
        best = max(self.highscore, score)
        try:
            if self.path.parent and not self.path.parent.exists():
                os.makedirs(self.path.parent, exist_ok=True)
            self.path.write_text(str(best), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save highscore to {self.path}: {e}")
            raise

        self.highscore = best
        logger.info(f"Saved highscore {best} to {self.path}")
        return best
