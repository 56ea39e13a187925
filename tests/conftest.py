import os

# Headless pygame for the render tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from snake_mango.config import GameConfig
from snake_mango.game import Phase, SnakeGame
from snake_mango.highscore import MemoryHighScoreStore


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def game(store):
    """24x18 game in the classic start position, food parked out of the way."""
    g = SnakeGame(GameConfig(seed=7), store=store)
    g.state.food = (20, 2)
    return g


@pytest.fixture
def place(game):
    """Put the game into an arbitrary running position."""
    def _place(snake, direction=(1, 0), food=(20, 2)):
        state = game.state
        state.snake = list(snake)
        state.direction = direction
        state.pending = direction
        state.food = food
        state.phase = Phase.RUNNING
        return state
    return _place
