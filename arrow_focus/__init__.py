"""
Arrow key focus management.

Tracks which item of an ordered list or grid is focused and moves focus
in response to Up/Down/Left/Right, skipping disabled items.
"""

from .config import Config, NavigationConfig, WrapPolicy
from .navigation import Direction, next_index
from .state import FocusController, FocusState
from .input import InputManager, TargetKind
from .factory import FocusManager, create_focus_manager

__version__ = "0.1.0"

__all__ = [
    "Config",
    "NavigationConfig",
    "WrapPolicy",
    "Direction",
    "next_index",
    "FocusController",
    "FocusState",
    "InputManager",
    "TargetKind",
    "FocusManager",
    "create_focus_manager",
]
