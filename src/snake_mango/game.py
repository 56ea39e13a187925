# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional
import logging

import numpy as np  # type: ignore

from .config import DEFAULT_CONFIG, RIGHT, GameConfig
from .direction import Direction, arbitrate
from .food import BoardFullError, FoodSpawner
from .grid import Cell, Grid
from .highscore import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)

FoodListener = Callable[[Cell], None]

# Board snapshot codes
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class TickResult(Enum):
    IDLE = "idle"      # not running, nothing happened
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]      # head at index 0
    direction: Direction
    pending: Direction     # applied at the start of the next tick
    food: Cell
    score: int
    tick_ms: int           # current step interval
    phase: Phase


def initial_snake(config: GameConfig) -> List[Cell]:
    """Horizontal body heading right, head on column 5 of the middle row."""
    length = config.start_length
    head_x = max(min(5, config.cols - 1), length - 1)
    y = config.rows // 2
    return [(head_x - i, y) for i in range(length)]


class SnakeGame:
    """
    Deterministic game-state engine.

    All mutation goes through `tick`, `request_direction`, `toggle_pause` and
    `reset`. Callers own the pacing: `tick` is one discrete step and is
    expected to be driven by a `TickScheduler`. Drawing code only reads
    `state`, `high_score` and `board()`.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        store: Optional[HighScoreStore] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config
        self.grid = Grid(config.cols, config.rows)
        if rng is None:
            rng = np.random.default_rng(config.seed)
        self.spawner = FoodSpawner(self.grid, rng)
        self.store = store if store is not None else MemoryHighScoreStore()
        self.high_score = max(0, self.store.load_high_score())
        self._food_listeners: List[FoodListener] = []
        self.state = self._new_state()

    def _new_state(self) -> GameState:
        snake = initial_snake(self.config)
        return GameState(
            snake=snake,
            direction=RIGHT,
            pending=RIGHT,
            food=self.spawner.spawn(snake),
            score=0,
            tick_ms=self.config.base_interval_ms,
            phase=Phase.RUNNING,
        )

    # ---------- Read side ----------
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    def board(self) -> np.ndarray:
        """(rows, cols) int8 snapshot using the EMPTY/BODY/HEAD/FOOD codes."""
        grid = np.zeros((self.grid.rows, self.grid.cols), dtype=np.int8)
        fx, fy = self.state.food
        grid[fy, fx] = FOOD
        for x, y in self.state.snake:
            grid[y, x] = BODY
        hx, hy = self.state.snake[0]
        grid[hy, hx] = HEAD
        return grid

    # ---------- Listeners ----------
    def add_food_listener(self, callback: FoodListener) -> None:
        self._food_listeners.append(callback)

    def remove_food_listener(self, callback: FoodListener) -> None:
        if callback in self._food_listeners:
            self._food_listeners.remove(callback)

    def _notify_food(self, cell: Cell) -> None:
        for callback in list(self._food_listeners):
            try:
                callback(cell)
            except Exception:
                logger.exception("food listener %r failed", callback)

    # ---------- Commands ----------
    def request_direction(self, dx: int, dy: int) -> None:
        """Queue a move for the next tick; reversals and game-over input are ignored."""
        state = self.state
        if state.phase is Phase.GAME_OVER:
            return
        state.pending = arbitrate(state.direction, state.pending, (dx, dy))

    def toggle_pause(self) -> None:
        state = self.state
        if state.phase is Phase.RUNNING:
            state.phase = Phase.PAUSED
        elif state.phase is Phase.PAUSED:
            state.phase = Phase.RUNNING
        else:
            return
        logger.debug("phase -> %s", state.phase.value)

    def reset(self) -> None:
        self.state = self._new_state()
        logger.debug("game reset")

    def tick(self) -> TickResult:
        """
        Advance the game by one step.
        - Outside RUNNING nothing changes and IDLE is returned.
        - Collisions leave the body untouched and end the game.
        - Moving into the current tail cell counts as a collision: the tail
          is still part of the body when the candidate head is checked.
        """
        state = self.state
        if state.phase is not Phase.RUNNING:
            return TickResult.IDLE

        # Commit direction once per tick
        state.direction = state.pending

        hx, hy = state.snake[0]
        dx, dy = state.direction
        new_head = (hx + dx, hy + dy)

        # Wall collision
        if not self.grid.in_bounds(new_head):
            return self._game_over("wall", new_head)

        # Self collision
        if new_head in state.snake:
            return self._game_over("self", new_head)

        # Move / grow
        ate = new_head == state.food
        state.snake.insert(0, new_head)
        if not ate:
            state.snake.pop()
            return TickResult.MOVED

        state.score += 1
        state.tick_ms = max(self.config.min_interval_ms, state.tick_ms - self.config.decay_ms)
        new_record = state.score > self.high_score
        if new_record:
            self.high_score = state.score
        try:
            state.food = self.spawner.spawn(state.snake)
        except BoardFullError:
            state.phase = Phase.GAME_OVER
            logger.info("board full at score %d", state.score)
            raise
        finally:
            if new_record:
                self._save_high_score()
        self._notify_food(new_head)
        return TickResult.ATE

    def _save_high_score(self) -> None:
        try:
            self.store.save_high_score(self.high_score)
        except Exception:
            logger.exception("could not save high score %d", self.high_score)

    def _game_over(self, reason: str, cell: Cell) -> TickResult:
        self.state.phase = Phase.GAME_OVER
        logger.info("game over (%s at %s), score %d", reason, cell, self.state.score)
        return TickResult.DIED
