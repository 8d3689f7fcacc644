"""
Input handling module.

Binds keyboard events (arrow keys, numeric keypad) to abstract
navigation directions.
"""

from .manager import InputManager, TargetKind, TEXT_TARGET_KINDS

__all__ = [
    "InputManager",
    "TargetKind",
    "TEXT_TARGET_KINDS",
]
