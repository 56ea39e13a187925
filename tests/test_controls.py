import pygame
import pytest

from snake_mango.config import DOWN, LEFT, RIGHT, UP
from snake_mango.controls import (
    Action, Command, action_for_direction, action_for_key, apply, swipe_direction,
)
from snake_mango.game import Phase


class TestKeys:
    @pytest.mark.parametrize("key,command", [
        (pygame.K_UP, Command.MOVE_UP),
        (pygame.K_w, Command.MOVE_UP),
        (pygame.K_s, Command.MOVE_DOWN),
        (pygame.K_a, Command.MOVE_LEFT),
        (pygame.K_RIGHT, Command.MOVE_RIGHT),
        (pygame.K_SPACE, Command.PAUSE),
        (pygame.K_RETURN, Command.PAUSE),
        (pygame.K_r, Command.RESET),
        (pygame.K_TAB, Command.NEXT_CHARACTER),
        (pygame.K_ESCAPE, Command.QUIT),
    ])
    def test_mapped(self, key, command):
        assert action_for_key(key) == Action(command)

    def test_digits_pick_character(self):
        assert action_for_key(pygame.K_1) == Action(Command.PICK_CHARACTER, 0)
        assert action_for_key(pygame.K_9) == Action(Command.PICK_CHARACTER, 8)

    def test_unmapped(self):
        assert action_for_key(pygame.K_z) is None


class TestSwipe:
    def test_tap_is_not_a_swipe(self):
        assert swipe_direction(5, -3) is None

    def test_dominant_axis(self):
        assert swipe_direction(60, 10) == RIGHT
        assert swipe_direction(-60, 30) == LEFT
        assert swipe_direction(10, 80) == DOWN
        assert swipe_direction(-5, -40) == UP

    def test_direction_to_action(self):
        assert action_for_direction(UP) == Action(Command.MOVE_UP)
        with pytest.raises(ValueError):
            action_for_direction((0, 0))


class TestApply:
    def test_move(self, game):
        assert apply(game, Action(Command.MOVE_DOWN))
        assert game.state.pending == DOWN

    def test_pause_and_reset(self, game):
        apply(game, Action(Command.PAUSE))
        assert game.phase is Phase.PAUSED
        apply(game, Action(Command.RESET))
        assert game.phase is Phase.RUNNING

    def test_host_commands_not_applied(self, game):
        assert not apply(game, Action(Command.NEXT_CHARACTER))
        assert not apply(game, Action(Command.QUIT))
