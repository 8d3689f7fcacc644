"""
Focus navigation configuration.

All configuration values are centralized here. `Config` is the mutable,
application-level option set; `NavigationConfig` is the immutable slice the
navigation functions work against.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, Optional


class WrapPolicy(Enum):
    """What happens when navigation reaches either end of the items."""
    CYCLIC = auto()   # Wrap past either end
    BOUNDED = auto()  # Stop at the ends (Up at the top deselects)


@dataclass(frozen=True)
class NavigationConfig:
    """
    Immutable description of the navigable space.

    Passed unchanged through every transition, so a configuration swap
    never affects a transition that is already running.
    """
    item_count: int = 0
    disabled_positions: FrozenSet[int] = frozenset()
    grid_width: Optional[int] = None
    wrap_policy: WrapPolicy = WrapPolicy.CYCLIC

    def __post_init__(self):
        """Normalize disabled positions and grid width."""
        object.__setattr__(self, "disabled_positions", frozenset(self.disabled_positions))
        if self.grid_width is not None and self.grid_width <= 0:
            object.__setattr__(self, "grid_width", None)

    @property
    def max_index(self) -> int:
        """Highest focusable position."""
        return self.item_count - 1

    @property
    def is_navigable(self) -> bool:
        """Check whether there is anything to navigate at all."""
        return self.item_count > 0

    @property
    def grid_mode(self) -> bool:
        """Check if items are laid out in rows (enables Left/Right)."""
        return self.grid_width is not None

    @property
    def is_cyclic(self) -> bool:
        """Check if navigation wraps around at the ends."""
        return self.wrap_policy is WrapPolicy.CYCLIC

    @property
    def all_disabled(self) -> bool:
        """Check if every position in range is disabled."""
        return all(index in self.disabled_positions for index in range(self.item_count))

    def is_disabled(self, index: Optional[int]) -> bool:
        """Check if a position is disabled. No focus is never disabled."""
        return index is not None and index in self.disabled_positions

    def in_range(self, index: int) -> bool:
        """Check if a position lies within [0, max_index]."""
        return 0 <= index <= self.max_index


@dataclass
class Config:
    """Focus manager configuration (the recognized options)."""

    # ─────────────────────────────────────────────────────────────────────────
    # Navigable Space
    # ─────────────────────────────────────────────────────────────────────────

    # Number of items (typically the length of the list being navigated)
    item_count: int = 0

    # Where focus starts
    initial_focused_index: int = 0

    # Positions that navigation skips over
    disabled_positions: Iterable[int] = field(default_factory=frozenset)

    # Items per row; enables grid mode (Left/Right) when set
    grid_width: Optional[int] = None

    # Stop at the ends instead of wrapping around
    disable_cyclic_traversal: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Input Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Ignore arrow keys while a free-text input holds host focus
    exclude_text_input_targets: bool = True

    # Whether key events are delivered to the focus controller
    is_active: bool = True

    # Key repeat delay (ms) for held arrow keys
    key_repeat_delay: int = 400
    key_repeat_interval: int = 100

    # ─────────────────────────────────────────────────────────────────────────
    # Diagnostics
    # ─────────────────────────────────────────────────────────────────────────

    # Log every focus transition at DEBUG level
    verbose: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Computed Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def wrap_policy(self) -> WrapPolicy:
        """Get wrap policy from the traversal flag."""
        return WrapPolicy.BOUNDED if self.disable_cyclic_traversal else WrapPolicy.CYCLIC

    @property
    def navigation(self) -> NavigationConfig:
        """Get the immutable navigation slice of this configuration."""
        return NavigationConfig(
            item_count=self.item_count,
            disabled_positions=frozenset(self.disabled_positions),
            grid_width=self.grid_width,
            wrap_policy=self.wrap_policy,
        )

    def __post_init__(self):
        """Freeze disabled positions so derived configs compare equal."""
        self.disabled_positions = frozenset(self.disabled_positions)


# Default configuration instances
DEFAULT_CONFIG = Config()
GRID_DEMO_CONFIG = Config(item_count=9, grid_width=3, disable_cyclic_traversal=True)
