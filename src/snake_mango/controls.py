from enum import Enum
from typing import NamedTuple, Optional

import pygame  # type: ignore

from .config import DOWN, LEFT, RIGHT, SWIPE_MIN_PX, UP
from .direction import Direction
from .game import SnakeGame


class Command(Enum):
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    PAUSE = "pause"
    RESET = "reset"
    NEXT_CHARACTER = "next_character"
    PICK_CHARACTER = "pick_character"
    QUIT = "quit"


class Action(NamedTuple):
    command: Command
    index: Optional[int] = None   # character slot for PICK_CHARACTER


MOVES = {
    Command.MOVE_UP: UP,
    Command.MOVE_DOWN: DOWN,
    Command.MOVE_LEFT: LEFT,
    Command.MOVE_RIGHT: RIGHT,
}

KEYMAP = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_w: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.PAUSE,
    pygame.K_RETURN: Command.PAUSE,
    pygame.K_KP_ENTER: Command.PAUSE,
    pygame.K_r: Command.RESET,
    pygame.K_TAB: Command.NEXT_CHARACTER,
    pygame.K_ESCAPE: Command.QUIT,
}

DIGITS = (
    pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5,
    pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9,
)


def action_for_key(key: int) -> Optional[Action]:
    if key in KEYMAP:
        return Action(KEYMAP[key])
    if key in DIGITS:
        return Action(Command.PICK_CHARACTER, DIGITS.index(key))
    return None


def swipe_direction(dx: int, dy: int, min_px: int = SWIPE_MIN_PX) -> Optional[Direction]:
    """Dominant axis of a drag, or None for drags shorter than `min_px` (taps)."""
    if max(abs(dx), abs(dy)) < min_px:
        return None
    if abs(dx) >= abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


def action_for_direction(direction: Direction) -> Action:
    for command, move in MOVES.items():
        if move == direction:
            return Action(command)
    raise ValueError(f"not a unit grid direction: {direction!r}")


def apply(game: SnakeGame, action: Action) -> bool:
    """Forward a game command. Returns False for commands the game does not own."""
    if action.command in MOVES:
        game.request_direction(*MOVES[action.command])
    elif action.command is Command.PAUSE:
        game.toggle_pause()
    elif action.command is Command.RESET:
        game.reset()
    else:
        return False
    return True
