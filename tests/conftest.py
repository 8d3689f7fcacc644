import os

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from arrow_focus.config import NavigationConfig, WrapPolicy  # noqa: E402


@pytest.fixture
def list_config():
    """Five items, position 2 disabled, cyclic."""
    return NavigationConfig(item_count=5, disabled_positions={2})


@pytest.fixture
def grid_config():
    """3x3 grid, bounded."""
    return NavigationConfig(item_count=9, grid_width=3, wrap_policy=WrapPolicy.BOUNDED)


@pytest.fixture
def recorder():
    """Observer that records every index it is called with."""
    calls = []

    def observe(index):
        calls.append(index)

    observe.calls = calls
    return observe
