from dataclasses import dataclass
from typing import Optional

# ----- Grid & layout -----
COLS, ROWS = 24, 18
TILE = 32
HUD_H = 88          # score line + character bar above the board
PAD_H = 96          # on-screen direction pad below the board

# ----- Colors -----
BG       = (11, 18, 32)
GRID     = (52, 58, 72)
PANEL    = (30, 41, 59)
BORDER   = (51, 65, 85)
ACCENT   = (16, 185, 129)
PAUSE_BT = (79, 70, 229)
RESET_BT = (225, 29, 72)
GREEN    = (80, 200, 80)
MANGO_C  = (250, 170, 40)
TEXT     = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Characters -----
CHARACTERS = ("🐍", "🐸", "🐱", "🐼", "🐹", "🐵", "🦊", "🦄", "🚗", "🛸", "🌟")
DEFAULT_CHARACTER = CHARACTERS[0]
MANGO = "🥭"

# ----- Timing -----
FPS = 60
SWIPE_MIN_PX = 24


# ----- Tunables (fixed for the lifetime of a game object) -----
@dataclass(frozen=True)
class GameConfig:
    cols: int = COLS
    rows: int = ROWS
    base_interval_ms: int = 150
    min_interval_ms: int = 70
    decay_ms: int = 4
    start_length: int = 3
    seed: Optional[int] = None

    def __post_init__(self):
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"grid must be positive, got {self.cols}x{self.rows}")
        if self.min_interval_ms <= 0:
            raise ValueError("min_interval_ms must be positive")
        if self.base_interval_ms < self.min_interval_ms:
            raise ValueError("base_interval_ms must not be below min_interval_ms")
        if self.decay_ms < 0:
            raise ValueError("decay_ms must be non-negative")
        if not 1 <= self.start_length <= self.cols:
            raise ValueError(f"start_length must fit in one row of {self.cols} cells")


DEFAULT_CONFIG = GameConfig()
