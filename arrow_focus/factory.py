"""
Focus Manager Factory - Creates and wires the focus components.

Builds a FocusController from a Config and attaches an InputManager
that feeds it keyboard directions.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import pygame

from .config import Config
from .input.manager import FocusProbe, InputManager
from .navigation import Direction
from .state.controller import ChangeObserver, FocusController

logger = logging.getLogger(__name__)


@dataclass
class FocusManager:
    """
    Complete arrow key focus system.

    Contains the controller (focus state) and the input manager
    (key binding) built from one configuration.

    Host steps: call configure_key_repeat() once pygame is initialized
    so held arrow keys repeat at the configured rate, then pass every
    pygame event to handle_event().
    """
    config: Config
    controller: FocusController
    input_manager: InputManager

    @property
    def focused_index(self) -> Optional[int]:
        """Get the focused index (None = nothing focused)."""
        return self.controller.focused_index

    def set_index(self, index: Optional[int]) -> None:
        """Focus a specific index (host-driven reset)."""
        self.controller.set_index(index)

    def handle_event(self, event: pygame.event.Event) -> Optional[Direction]:
        """Feed one pygame event through the input manager."""
        return self.input_manager.process_event(event)

    def configure_key_repeat(self) -> None:
        """Apply the configured key repeat (requires pygame.init())."""
        self.input_manager.configure_key_repeat()

    def update_config(self, config: Config) -> None:
        """
        Apply a new configuration.

        Navigation bounds and key gating are replaced; the focused
        index is kept and no change is reported.
        """
        self.config = config
        self.controller.update_config(config.navigation)
        self.controller.verbose = config.verbose
        self.input_manager.update_config(config)


def create_focus_manager(
    config: Config,
    on_focused_index_change: Optional[ChangeObserver] = None,
    focus_probe: Optional[FocusProbe] = None
) -> FocusManager:
    """
    Create a focus manager from configuration.

    Args:
        config: Focus manager configuration
        on_focused_index_change: Called with the initial index and every change
        focus_probe: Reports which kind of host element holds focus

    Returns:
        Wired FocusManager
    """
    controller = FocusController(
        config.navigation,
        on_focused_index_change=on_focused_index_change,
        initial_focused_index=config.initial_focused_index,
        verbose=config.verbose,
    )
    input_manager = InputManager(controller, config, focus_probe=focus_probe)

    logger.debug(
        f"Focus manager: items={config.item_count}, grid={config.grid_width}, "
        f"policy={config.wrap_policy.name}"
    )
    return FocusManager(config, controller, input_manager)
