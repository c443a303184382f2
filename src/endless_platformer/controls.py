"""Input resolution: raw device state to a single horizontal direction.

Hosts capture keyboard and pointer state however they like and hand over an
immutable InputSnapshot once per frame. The simulation only ever sees the
resolved Direction.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .entities import Player


class Direction(IntEnum):
    """Horizontal intent for one tick. Values double as gym action ids."""
    NONE = 0
    LEFT = 1
    RIGHT = 2

    @property
    def sign(self) -> int:
        return {Direction.NONE: 0, Direction.LEFT: -1, Direction.RIGHT: 1}[self]


@dataclass(frozen=True)
class InputSnapshot:
    """Device state at the start of a frame.

    pointer_x is the screen x of an active touch/mouse drag, or None.
    """
    left: bool = False
    right: bool = False
    pointer_x: Optional[float] = None


def resolve_direction(
    snapshot: InputSnapshot,
    player: Player,
    deadzone: float = 5.0,
) -> Direction:
    """Pick this tick's direction.

    An active pointer steers toward itself and overrides the keys, except
    inside the deadzone around the player's centre where the keys apply.
    Holding both keys (or neither) means no movement.
    """
    left, right = snapshot.left, snapshot.right

    if snapshot.pointer_x is not None:
        center = player.center_x
        if snapshot.pointer_x < center - deadzone:
            left, right = True, False
        elif snapshot.pointer_x > center + deadzone:
            left, right = False, True

    if left and not right:
        return Direction.LEFT
    if right and not left:
        return Direction.RIGHT
    return Direction.NONE
