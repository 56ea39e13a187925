"""High score persistence.

The game only needs two calls, `load_high_score()` once at startup and
`save_high_score(value)` whenever the record rises. Stores swallow storage
errors after logging them so a broken disk never ends a game.
"""
import contextlib
import logging
import os
from pathlib import Path
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)

HIGHSCORE_ENV = "SNAKE_MANGO_HIGHSCORE"
DEFAULT_HIGHSCORE_FILE = Path.home() / ".snake_mango" / "highscore"


class HighScoreStore(Protocol):
    def load_high_score(self) -> int: ...

    def save_high_score(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the record for the lifetime of the process only."""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load_high_score(self) -> int:
        return self.value

    def save_high_score(self, value: int) -> None:
        self.value = value
        self.saves += 1


class FileHighScoreStore:
    """Single decimal integer in a text file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_high_score(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            # ValueError covers bytes that are not UTF-8
            logger.warning("could not read high score from %s: %s", self.path, exc)
            return 0
        try:
            value = int(text.strip() or "0")
        except ValueError:
            logger.warning("ignoring corrupt high score file %s", self.path)
            return 0
        return max(0, value)

    def save_high_score(self, value: int) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(str(int(value)), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.warning("could not save high score to %s: %s", self.path, exc)
            with contextlib.suppress(OSError):
                tmp.unlink()  # never written, or already gone
            return
        logger.debug("high score %d saved to %s", value, self.path)


def default_store_path(override: Optional[str] = None) -> Path:
    """CLI flag first, then $SNAKE_MANGO_HIGHSCORE, then ~/.snake_mango/highscore."""
    if override:
        return Path(override).expanduser()
    env = os.getenv(HIGHSCORE_ENV, "").strip()
    if env:
        return Path(env).expanduser()
    return DEFAULT_HIGHSCORE_FILE
