"""
Navigation module.

Pure functions computing the next focused index:
- Direction resolution (raw candidate, ignoring disabled positions)
- Disabled skipping (walk past disabled positions, bounded)
- Transition (the two combined)
"""

from .direction import Direction, Move, resolve_direction
from .skipper import skip_disabled
from .transition import next_index

__all__ = [
    "Direction",
    "Move",
    "resolve_direction",
    "skip_disabled",
    "next_index",
]
