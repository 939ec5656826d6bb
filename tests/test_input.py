from __future__ import annotations

import json
import sys
from pathlib import Path

import pygame

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gameloop.engine.input import DEFAULT_QUIT_KEYS, InputBindings, QuitInput


def _keydown(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_bindings_default_when_missing(tmp_path: Path) -> None:
    bindings = InputBindings.load(tmp_path / "settings.json")
    assert bindings.quit_keys == DEFAULT_QUIT_KEYS
    assert bindings.key_codes() == {pygame.K_ESCAPE}


def test_bindings_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    InputBindings(quit_keys=["K_q", "K_NOT_A_KEY"]).save(path)
    assert json.loads(path.read_text()) == {"quitKeys": ["K_q", "K_NOT_A_KEY"]}
    bindings = InputBindings.load(path)
    assert bindings.key_codes() == {pygame.K_q}


def test_window_close_requests_quit() -> None:
    process_input = QuitInput(events=lambda: [pygame.event.Event(pygame.QUIT)])
    assert process_input() is True


def test_bound_key_requests_quit_and_other_events_forwarded() -> None:
    forwarded = []
    queue = [[_keydown(pygame.K_SPACE)], [_keydown(pygame.K_SPACE), _keydown(pygame.K_q)]]
    process_input = QuitInput(
        InputBindings(quit_keys=["K_q"]),
        handler=forwarded.append,
        events=lambda: queue.pop(0),
    )

    assert process_input() is False
    assert process_input() is True
    assert [event.key for event in forwarded] == [pygame.K_SPACE, pygame.K_SPACE]


def test_unbound_key_does_not_quit() -> None:
    process_input = QuitInput(events=lambda: [_keydown(pygame.K_q)])
    assert process_input() is False


def test_bindings_ignore_non_object_settings(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps([1, 2]))
    assert InputBindings.load(path).quit_keys == DEFAULT_QUIT_KEYS


def test_bindings_reject_non_list_quit_keys(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"quitKeys": "K_q"}))
    assert InputBindings.load(path).quit_keys == DEFAULT_QUIT_KEYS
    path.write_text(json.dumps({"quitKeys": ["K_q", 5]}))
    assert InputBindings.load(path).quit_keys == DEFAULT_QUIT_KEYS
