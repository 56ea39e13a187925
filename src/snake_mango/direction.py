from typing import Tuple

from .config import DIRECTIONS

Direction = Tuple[int, int]


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def validate(direction: Direction) -> Direction:
    """Return `direction` as a tuple, rejecting anything but the four unit steps."""
    direction = tuple(direction)
    if direction not in DIRECTIONS:
        raise ValueError(f"not a unit grid direction: {direction!r}")
    return direction


def arbitrate(current: Direction, pending: Direction, requested: Direction) -> Direction:
    """
    Pick the pending direction after a move request.

    The check runs against the direction the actor is *currently* moving in,
    not the pending one, so two quick presses (e.g. up then left while moving
    right) can never turn the head back into the neck within one tick.
    """
    requested = validate(requested)
    if is_opposite(requested, current):
        return pending
    return requested
