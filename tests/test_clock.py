from snake_mango.clock import TickScheduler
from snake_mango.game import Phase, TickResult


class TestTickScheduler:
    def test_fires_once_interval_reached(self, game):
        sched = TickScheduler(game)
        head = game.state.snake[0]
        for _ in range(9):
            assert sched.on_frame(16) is TickResult.IDLE     # 144 ms
        assert game.state.snake[0] == head
        assert sched.on_frame(16) is TickResult.MOVED        # 160 ms >= 150
        assert sched.elapsed_ms == 0
        assert game.state.snake[0] == (head[0] + 1, head[1])

    def test_at_most_one_tick_per_frame(self, game):
        sched = TickScheduler(game)
        head = game.state.snake[0]
        sched.on_frame(1000)
        assert game.state.snake[0] == (head[0] + 1, head[1])
        assert sched.elapsed_ms == 0

    def test_no_time_accumulates_while_paused(self, game):
        sched = TickScheduler(game)
        sched.on_frame(100)
        game.toggle_pause()
        assert sched.on_frame(500) is TickResult.IDLE
        assert sched.elapsed_ms == 100
        game.toggle_pause()
        assert sched.on_frame(60) is TickResult.MOVED

    def test_idle_after_game_over(self, game):
        game.state.phase = Phase.GAME_OVER
        sched = TickScheduler(game)
        assert sched.on_frame(1000) is TickResult.IDLE
        assert sched.elapsed_ms == 0

    def test_reset_clears_accumulator(self, game):
        sched = TickScheduler(game)
        sched.on_frame(140)
        game.reset()
        assert sched.on_frame(20) is TickResult.IDLE
        assert sched.elapsed_ms == 20

    def test_follows_shrinking_interval(self, game):
        sched = TickScheduler(game)
        game.state.tick_ms = 70
        assert sched.on_frame(70) is TickResult.MOVED
