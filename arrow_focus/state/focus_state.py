"""
Focus State.

The focused position is immutable - changes create new state objects.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class FocusState:
    """
    Currently focused position.

    `index` is None when nothing is focused.
    """
    index: Optional[int] = 0

    @property
    def has_focus(self) -> bool:
        """Check if any position is focused."""
        return self.index is not None

    def with_index(self, index: Optional[int]) -> "FocusState":
        """Return new state with updated index (negative = no focus)."""
        if index is not None and index < 0:
            index = None
        return replace(self, index=index)

    @classmethod
    def initial(cls, index: Optional[int] = 0) -> "FocusState":
        """Create the starting state."""
        return cls().with_index(index)
