"""
Focus Controller - Owner of the focused index.

The controller is the single source of truth for focus. It:
- Holds the current FocusState
- Applies directional signals through the pure transition
- Notifies observers when (and only when) the index changes
- Queues signals that arrive while observers are running
"""

import logging
from typing import Callable, List, Optional, Union

from ..config import NavigationConfig
from ..navigation import Direction, next_index
from .focus_state import FocusState

logger = logging.getLogger(__name__)


# Type aliases
ChangeObserver = Callable[[Optional[int]], None]


class FocusController:
    """
    Tracks and moves the focused index.

    Usage:
        controller = FocusController(
            NavigationConfig(item_count=5, disabled_positions={2}),
            on_focused_index_change=render_highlight,
        )

        controller.move_down()          # 0 -> 1
        controller.move_down()          # 1 -> 3 (2 is disabled)
        controller.set_index(None)      # Clear focus

        # Extra observers
        unsubscribe = controller.subscribe(on_change)
    """

    def __init__(
        self,
        config: NavigationConfig,
        on_focused_index_change: Optional[ChangeObserver] = None,
        initial_focused_index: Optional[int] = 0,
        verbose: bool = False
    ):
        """
        Initialize the controller and report the initial index.

        Args:
            config: Navigable space
            on_focused_index_change: Called with the index now and on every change
            initial_focused_index: Starting index (None or negative = no focus)
            verbose: If True, log every transition
        """
        self._config = config
        self._state = FocusState.initial(initial_focused_index)
        self._observers: List[ChangeObserver] = []
        self._dispatching = False
        self._pending: List[Union[Direction, FocusState]] = []
        self._verbose = verbose

        if on_focused_index_change is not None:
            self._observers.append(on_focused_index_change)
            self._call(on_focused_index_change, self._state.index)

    @property
    def verbose(self) -> bool:
        """Get verbose logging mode."""
        return self._verbose

    @verbose.setter
    def verbose(self, value: bool) -> None:
        """Set verbose logging mode."""
        self._verbose = value

    @property
    def config(self) -> NavigationConfig:
        """Get the navigable space."""
        return self._config

    def update_config(self, config: NavigationConfig) -> None:
        """
        Replace the navigable space.

        The focused index is left alone, even if it is now disabled or
        out of range; observers are not notified.
        """
        self._config = config

    @property
    def state(self) -> FocusState:
        """Get current state (read-only)."""
        return self._state

    @property
    def focused_index(self) -> Optional[int]:
        """Get the focused index (None = nothing focused)."""
        return self._state.index

    def subscribe(self, callback: ChangeObserver) -> Callable[[], None]:
        """
        Subscribe to index changes.

        Args:
            callback: Function called with the new index

        Returns:
            Unsubscribe function
        """
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    # ─────────────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────────────

    def on_direction(self, direction: Direction) -> Optional[int]:
        """
        Apply a directional signal.

        Args:
            direction: Signal to apply

        Returns:
            Focused index after the signal has been processed
        """
        self._dispatch(direction)
        return self._state.index

    def move_up(self) -> Optional[int]:
        """Move focus one row up."""
        return self.on_direction(Direction.UP)

    def move_down(self) -> Optional[int]:
        """Move focus one row down."""
        return self.on_direction(Direction.DOWN)

    def move_left(self) -> Optional[int]:
        """Move focus one item left (grid mode only)."""
        return self.on_direction(Direction.LEFT)

    def move_right(self) -> Optional[int]:
        """Move focus one item right (grid mode only)."""
        return self.on_direction(Direction.RIGHT)

    def set_index(self, index: Optional[int]) -> None:
        """
        Focus a specific index (host-driven reset).

        The value is not clamped or checked against disabled positions.

        Args:
            index: Index to focus (None or negative = no focus)
        """
        self._dispatch(FocusState.initial(index))

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _dispatch(self, signal: Union[Direction, FocusState]) -> None:
        """Apply a signal, or queue it if observers are running."""
        if self._dispatching:
            self._pending.append(signal)
            return

        self._dispatching = True
        try:
            self._apply(signal)
        finally:
            self._dispatching = False

            while self._pending:
                pending = self._pending.pop(0)
                self._dispatch(pending)

    def _apply(self, signal: Union[Direction, FocusState]) -> None:
        """Commit the transition for one signal against the latest state."""
        old_state = self._state
        if isinstance(signal, Direction):
            new_state = old_state.with_index(
                next_index(old_state.index, signal, self._config)
            )
        else:
            new_state = signal

        if new_state.index == old_state.index:
            return

        self._state = new_state
        if self._verbose:
            source = signal.name if isinstance(signal, Direction) else "SET"
            logger.debug(f"Focus {old_state.index} -> {new_state.index} ({source})")

        for observer in list(self._observers):
            # Skip observers unsubscribed earlier in this round
            if observer in self._observers:
                self._call(observer, new_state.index)

    def _call(self, observer: ChangeObserver, index: Optional[int]) -> None:
        """Invoke one observer, logging (not raising) its failures."""
        try:
            observer(index)
        except Exception as e:
            logger.error(f"Focus observer error: {e}")
