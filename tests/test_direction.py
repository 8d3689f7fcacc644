import pytest

from arrow_focus.config import NavigationConfig, WrapPolicy
from arrow_focus.navigation.direction import Direction, Move, resolve_direction

CYCLIC = NavigationConfig(item_count=5)
BOUNDED = NavigationConfig(item_count=5, wrap_policy=WrapPolicy.BOUNDED)
GRID = NavigationConfig(item_count=9, grid_width=3, wrap_policy=WrapPolicy.BOUNDED)
GRID_CYCLIC = NavigationConfig(item_count=9, grid_width=3)


@pytest.mark.parametrize("item_count", [0, -1])
@pytest.mark.parametrize("direction", list(Direction))
def test_no_navigable_items_is_noop(item_count, direction):
    config = NavigationConfig(item_count=item_count, grid_width=2)
    assert resolve_direction(0, direction, config) is None


@pytest.mark.parametrize("direction", [Direction.LEFT, Direction.RIGHT])
def test_horizontal_requires_grid_mode(direction):
    assert resolve_direction(2, direction, CYCLIC) is None


@pytest.mark.parametrize("config, current, direction, expected", [
    # List mode
    (CYCLIC, 3, Direction.UP, Move(2, -1)),
    (CYCLIC, 0, Direction.UP, Move(4, -1)),
    (CYCLIC, None, Direction.UP, Move(4, -1)),
    (BOUNDED, 0, Direction.UP, Move(None, -1)),
    (CYCLIC, None, Direction.DOWN, Move(0, 1)),
    (CYCLIC, 1, Direction.DOWN, Move(2, 1)),
    (CYCLIC, 4, Direction.DOWN, Move(0, 1)),
    (BOUNDED, 4, Direction.DOWN, Move(4, 1)),
    # Grid mode
    (GRID, 0, Direction.DOWN, Move(3, 3)),
    (GRID, 4, Direction.UP, Move(1, -3)),
    (GRID, 0, Direction.RIGHT, Move(1, 1)),
    (GRID, 4, Direction.LEFT, Move(3, -1)),
    (GRID, 0, Direction.LEFT, Move(None, -1)),
    (GRID, 8, Direction.RIGHT, Move(8, 1)),
    (GRID, None, Direction.RIGHT, Move(0, 1)),
    (GRID_CYCLIC, 0, Direction.LEFT, Move(8, -1)),
    (GRID_CYCLIC, 8, Direction.RIGHT, Move(0, 1)),
    (GRID_CYCLIC, 0, Direction.UP, Move(8, -3)),
    (GRID_CYCLIC, 8, Direction.DOWN, Move(0, 3)),
])
def test_raw_candidates(config, current, direction, expected):
    assert resolve_direction(current, direction, config) == expected


@pytest.mark.parametrize("config", [GRID, GRID_CYCLIC])
def test_row_stride_overshoot_is_noop(config):
    assert resolve_direction(1, Direction.UP, config) is None
    assert resolve_direction(7, Direction.DOWN, config) is None


def test_direction_from_name():
    assert Direction.from_name("up") is Direction.UP
    assert Direction.from_name(" Right ") is Direction.RIGHT
    with pytest.raises(KeyError):
        Direction.from_name("diagonal")
