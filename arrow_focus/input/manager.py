"""
Input manager.

Maps keyboard events to abstract directions and forwards them to a
focus controller, unless the manager is inactive or a free-text target
currently holds host focus.
"""

import logging
import pygame
from enum import Enum, auto
from typing import Callable, FrozenSet, Iterable, Optional

from ..config import Config
from ..navigation import Direction
from ..state.controller import FocusController

logger = logging.getLogger(__name__)


class TargetKind(Enum):
    """
    Kinds of host UI element that can hold focus.

    Reported by the host through the focus probe.
    """
    TEXT_INPUT = auto()  # Single-line free text
    TEXT_AREA = auto()   # Multi-line free text
    BUTTON = auto()
    LIST_ITEM = auto()
    OTHER = auto()


# Free-text targets use the arrow keys for caret movement
TEXT_TARGET_KINDS: FrozenSet[TargetKind] = frozenset({
    TargetKind.TEXT_INPUT,
    TargetKind.TEXT_AREA,
})


FocusProbe = Callable[[], Optional[TargetKind]]


class InputManager:
    """
    Delivers arrow key presses to a FocusController.

    The host owns the event loop and hands every pygame event to
    process_event(); only KEYDOWN events for mapped keys are used.
    """

    KEY_MAP = {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,

        # Numeric keypad
        pygame.K_KP8: Direction.UP,
        pygame.K_KP2: Direction.DOWN,
        pygame.K_KP4: Direction.LEFT,
        pygame.K_KP6: Direction.RIGHT,
    }

    def __init__(
        self,
        controller: FocusController,
        config: Config,
        focus_probe: Optional[FocusProbe] = None
    ):
        """
        Initialize the input manager.

        Args:
            controller: Controller receiving directions
            config: Focus manager configuration
            focus_probe: Returns the kind of host element holding focus
        """
        self.controller = controller
        self.config = config
        self.focus_probe = focus_probe

        self._is_active = config.is_active
        self._excluded_kinds = self._derive_excluded_kinds(config)

    @staticmethod
    def _derive_excluded_kinds(config: Config) -> FrozenSet[TargetKind]:
        return TEXT_TARGET_KINDS if config.exclude_text_input_targets else frozenset()

    @property
    def is_active(self) -> bool:
        """Check if key events are delivered."""
        return self._is_active

    @is_active.setter
    def is_active(self, value: bool) -> None:
        """Enable or disable key event delivery."""
        if value != self._is_active:
            logger.info(f"Arrow key navigation {'enabled' if value else 'disabled'}")
        self._is_active = value

    @property
    def excluded_kinds(self) -> FrozenSet[TargetKind]:
        """Get target kinds that suppress navigation."""
        return self._excluded_kinds

    def set_excluded_kinds(self, kinds: Iterable[TargetKind]) -> None:
        """
        Replace the target kinds that suppress navigation.

        Does not touch focus.
        """
        self._excluded_kinds = frozenset(kinds)

    def update_config(self, config: Config) -> None:
        """
        Re-derive gating from a new configuration.

        Args:
            config: New focus manager configuration
        """
        self.config = config
        self.is_active = config.is_active
        self._excluded_kinds = self._derive_excluded_kinds(config)

    def configure_key_repeat(self) -> None:
        """Apply configured key repeat for held arrow keys."""
        pygame.key.set_repeat(
            self.config.key_repeat_delay,
            self.config.key_repeat_interval
        )

    def process_event(self, event: pygame.event.Event) -> Optional[Direction]:
        """
        Process a pygame event.

        Args:
            event: Pygame event to process

        Returns:
            Direction forwarded to the controller, None otherwise
        """
        if event.type != pygame.KEYDOWN:
            return None

        direction = self.KEY_MAP.get(event.key)
        if direction is None:
            return None

        if not self._is_active:
            logger.debug(f"Ignoring {direction.name}: navigation inactive")
            return None

        if self._is_suppressed():
            logger.debug(f"Ignoring {direction.name}: text target has focus")
            return None

        self.controller.on_direction(direction)
        return direction

    def _is_suppressed(self) -> bool:
        """Check if the host element holding focus is excluded."""
        if self.focus_probe is None or not self._excluded_kinds:
            return False
        return self.focus_probe() in self._excluded_kinds
