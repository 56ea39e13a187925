from .game import Phase, SnakeGame, TickResult


class TickScheduler:
    """
    Turns per-frame time deltas into game ticks.

    Frames arrive at the display rate; ticks fire whenever the accumulated
    time reaches the game's current tick interval, at most one per frame.
    Time does not accumulate while the game is paused or over, and the
    accumulator starts from zero again after a reset.
    """

    def __init__(self, game: SnakeGame):
        self.game = game
        self.elapsed_ms = 0.0
        self._state = game.state

    def on_frame(self, delta_ms: float) -> TickResult:
        if self.game.state is not self._state:
            # reset() swapped the state object
            self._state = self.game.state
            self.elapsed_ms = 0.0
        if self.game.phase is not Phase.RUNNING:
            return TickResult.IDLE

        self.elapsed_ms += delta_ms
        if self.elapsed_ms < self.game.state.tick_ms:
            return TickResult.IDLE
        self.elapsed_ms = 0.0
        return self.game.tick()
