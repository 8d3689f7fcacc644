"""
Focus transition.

Pure old-index -> new-index function used by the focus controller.
"""

from typing import Optional

from ..config import NavigationConfig
from .direction import Direction, resolve_direction
from .skipper import skip_disabled


def next_index(
    current: Optional[int],
    direction: Direction,
    config: NavigationConfig
) -> Optional[int]:
    """
    Compute the focused index after a directional signal.

    Args:
        current: Focused index, or None when nothing is focused
        direction: Signal to apply
        config: Navigable space

    Returns:
        New focused index (equal to `current` for a no-op)
    """
    move = resolve_direction(current, direction, config)
    if move is None:
        return current
    if config.all_disabled:
        return current
    return skip_disabled(move, current, config)
