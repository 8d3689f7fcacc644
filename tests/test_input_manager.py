import logging

import pygame
import pytest

from arrow_focus.config import Config
from arrow_focus.input import InputManager, TargetKind
from arrow_focus.navigation import Direction
from arrow_focus.state import FocusController


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def make_manager(config=None, focus_probe=None):
    config = config or Config(item_count=9, grid_width=3)
    controller = FocusController(config.navigation, initial_focused_index=config.initial_focused_index)
    return InputManager(controller, config, focus_probe=focus_probe)


@pytest.mark.parametrize("key, direction, expected", [
    (pygame.K_DOWN, Direction.DOWN, 3),
    (pygame.K_RIGHT, Direction.RIGHT, 1),
    (pygame.K_UP, Direction.UP, 8),
    (pygame.K_LEFT, Direction.LEFT, 8),
    (pygame.K_KP2, Direction.DOWN, 3),
    (pygame.K_KP6, Direction.RIGHT, 1),
])
def test_arrow_keys_move_focus(key, direction, expected):
    manager = make_manager()
    assert manager.process_event(key_down(key)) is direction
    assert manager.controller.focused_index == expected


def test_other_events_are_ignored():
    manager = make_manager()
    assert manager.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_DOWN)) is None
    assert manager.process_event(key_down(pygame.K_a)) is None
    assert manager.controller.focused_index == 0


def test_inactive_manager_delivers_nothing(caplog):
    manager = make_manager(Config(item_count=5, is_active=False))

    with caplog.at_level(logging.DEBUG, logger="arrow_focus.input.manager"):
        assert manager.process_event(key_down(pygame.K_DOWN)) is None

    assert manager.controller.focused_index == 0
    assert "navigation inactive" in caplog.text

    manager.is_active = True
    manager.process_event(key_down(pygame.K_DOWN))
    assert manager.controller.focused_index == 1


@pytest.mark.parametrize("kind", [TargetKind.TEXT_INPUT, TargetKind.TEXT_AREA])
def test_text_targets_suppress_navigation(kind):
    manager = make_manager(Config(item_count=5), focus_probe=lambda: kind)
    assert manager.process_event(key_down(pygame.K_DOWN)) is None
    assert manager.controller.focused_index == 0


def test_non_text_target_does_not_suppress():
    manager = make_manager(Config(item_count=5), focus_probe=lambda: TargetKind.BUTTON)
    assert manager.process_event(key_down(pygame.K_DOWN)) is Direction.DOWN
    assert manager.controller.focused_index == 1


def test_text_targets_allowed_when_not_excluded():
    config = Config(item_count=5, exclude_text_input_targets=False)
    manager = make_manager(config, focus_probe=lambda: TargetKind.TEXT_AREA)
    assert manager.excluded_kinds == frozenset()
    assert manager.process_event(key_down(pygame.K_DOWN)) is Direction.DOWN


def test_set_excluded_kinds():
    manager = make_manager(Config(item_count=5), focus_probe=lambda: TargetKind.LIST_ITEM)
    manager.set_excluded_kinds([TargetKind.LIST_ITEM])
    assert manager.process_event(key_down(pygame.K_DOWN)) is None
    assert manager.controller.focused_index == 0


def test_update_config_rederives_gating_without_focus_change():
    seen = []
    manager = make_manager(Config(item_count=5, initial_focused_index=2), focus_probe=lambda: TargetKind.TEXT_INPUT)
    manager.controller.subscribe(seen.append)

    manager.update_config(Config(item_count=5, exclude_text_input_targets=False, is_active=False))

    assert manager.excluded_kinds == frozenset()
    assert manager.is_active is False
    assert manager.controller.focused_index == 2
    assert seen == []


def test_configure_key_repeat(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.key, "set_repeat", lambda *args: calls.append(args))

    manager = make_manager(Config(item_count=5, key_repeat_delay=250, key_repeat_interval=50))
    manager.configure_key_repeat()

    assert calls == [(250, 50)]
