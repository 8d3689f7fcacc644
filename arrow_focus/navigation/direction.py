"""
Direction resolution.

Turns a directional signal into a raw candidate index, before any
disabled positions are taken into account.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ..config import NavigationConfig


class Direction(Enum):
    """
    Abstract navigation signals.

    Independent of the physical input source (arrow keys, keypad, ...).
    """
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def is_horizontal(self) -> bool:
        """Left/Right only navigate in grid mode."""
        return self in (Direction.LEFT, Direction.RIGHT)

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a direction by case-insensitive name ("up", "Down", ...)."""
        return cls[name.strip().upper()]


@dataclass(frozen=True)
class Move:
    """Raw candidate index plus the signed stride that reached it."""
    target: Optional[int]  # None = deselect
    stride: int


def resolve_direction(
    current: Optional[int],
    direction: Direction,
    config: NavigationConfig
) -> Optional[Move]:
    """
    Compute the raw candidate for a directional signal.

    Args:
        current: Focused index, or None when nothing is focused
        direction: Signal to resolve
        config: Navigable space

    Returns:
        The candidate move, or None if the signal is a no-op
    """
    if not config.is_navigable:
        return None
    if direction.is_horizontal and not config.grid_mode:
        return None

    max_index = config.max_index
    cyclic = config.is_cyclic

    if direction is Direction.UP or direction is Direction.LEFT:
        step = config.grid_width if direction is Direction.UP and config.grid_mode else 1
        if current is not None and current > max_index:
            # Focus was set past the end; re-enter at the last position
            target = max_index
        elif current is not None and current > 0:
            target = current - step
        else:
            # Bounded: stepping up from the top deselects
            target = max_index if cyclic else None
        move = Move(target, -step)
    else:
        step = config.grid_width if direction is Direction.DOWN and config.grid_mode else 1
        if current is None:
            move = Move(0, 1)
        elif current < max_index:
            move = Move(current + step, step)
        else:
            # Bounded: stepping down from the bottom stays put
            move = Move(0 if cyclic else max_index, step)

    # A row stride can overshoot the first or last row
    if move.target is not None and not config.in_range(move.target):
        return None
    return move
