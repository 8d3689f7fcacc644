"""
Disabled position skipping.

Walks a raw candidate past disabled positions in the direction of travel.
"""

from typing import Optional

from ..config import NavigationConfig
from .direction import Move


def skip_disabled(
    move: Move,
    current: Optional[int],
    config: NavigationConfig
) -> Optional[int]:
    """
    Advance a candidate past disabled positions.

    The walk takes at most item_count steps. It gives up and returns
    `current` when it would revisit the raw candidate, run below 0, or
    run past the last position under a bounded policy. Past the last
    position under a cyclic policy it wraps to the start.

    Args:
        move: Raw candidate and stride from the direction resolver
        current: Focused index before the move
        config: Navigable space

    Returns:
        First enabled position on the walk, or `current` if there is none
    """
    if move.target is None:
        return None

    position = move.target
    for _ in range(config.item_count):
        if not config.is_disabled(position):
            return position

        position += move.stride
        if position < 0:
            return current
        if position > config.max_index:
            if not config.is_cyclic:
                return current
            position %= config.item_count

        if position == move.target:
            # Full cycle, all disabled
            return current

    return current
