"""Quit detection and event dispatch for pygame driven loops."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import pygame

from gameloop.engine.logger import ChannelLogger

DEFAULT_QUIT_KEYS = ["K_ESCAPE"]


@dataclass
class InputBindings:
    """Key names that request the loop to quit."""

    quit_keys: List[str] = field(default_factory=lambda: list(DEFAULT_QUIT_KEYS))

    @classmethod
    def load(cls, path: Path) -> "InputBindings":
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()
        keys = data.get("quitKeys")
        if not isinstance(keys, list) or not keys:
            return cls()
        if not all(isinstance(key, str) for key in keys):
            return cls()
        return cls(quit_keys=list(keys))

    def save(self, path: Path) -> None:
        path.write_text(json.dumps({"quitKeys": self.quit_keys}, indent=2))

    def key_codes(self) -> set[int]:
        codes = set()
        for name in self.quit_keys:
            code = getattr(pygame, name, None)
            if isinstance(code, int):
                codes.add(code)
        return codes


class QuitInput:
    """``process_input`` callback that drains pygame events.

    Returns True once the window is closed or a bound quit key is pressed.
    Other events go to ``handler``.
    """

    def __init__(
        self,
        bindings: Optional[InputBindings] = None,
        handler: Optional[Callable[[pygame.event.Event], None]] = None,
        events: Optional[Callable[[], Iterable[pygame.event.Event]]] = None,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.bindings = bindings or InputBindings()
        self._quit_codes = self.bindings.key_codes()
        self._handler = handler
        self._events = events or pygame.event.get
        self._logger = logger

    def is_quit(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return True
        return event.type == pygame.KEYDOWN and event.key in self._quit_codes

    def __call__(self) -> bool:
        quit_requested = False
        for event in self._events():
            if self.is_quit(event):
                if self._logger and not quit_requested:
                    self._logger.info("Quit requested")
                quit_requested = True
                continue
            if self._handler:
                self._handler(event)
        return quit_requested


__all__ = ["DEFAULT_QUIT_KEYS", "InputBindings", "QuitInput"]
