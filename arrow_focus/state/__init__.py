"""
State Management Module.

Provides focus state management with:
- Single source of truth (FocusState, owned by FocusController)
- Pure transitions for directional signals
- Subscriptions for change notification

Architecture:
    Direction -> FocusController -> next_index() -> FocusState -> Observers
"""

from .focus_state import FocusState
from .controller import FocusController, ChangeObserver

__all__ = [
    "FocusState",
    "FocusController",
    "ChangeObserver",
]
