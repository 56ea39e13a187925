"""Snake Mango: grid snake game with a pygame front end."""

from .config import GameConfig
from .game import Phase, SnakeGame, TickResult

__all__ = ["GameConfig", "Phase", "SnakeGame", "TickResult"]
__version__ = "0.1.0"
