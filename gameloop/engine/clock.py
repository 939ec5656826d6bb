"""Time sources that can drive a loop's ``current_time`` callback."""
from __future__ import annotations

import time
from typing import Iterable, Iterator

import pygame

from gameloop.engine.errors import ClockExhaustedError


def perf_counter_clock() -> float:
    """High resolution monotonic seconds."""

    return time.perf_counter()


def wall_clock() -> float:
    """Seconds since the epoch."""

    return time.time_ns() * 1e-9


def pygame_ticks_clock() -> float:
    """Seconds since ``pygame.init()`` at millisecond resolution."""

    return pygame.time.get_ticks() / 1000.0


class ManualClock:
    """Clock advanced explicitly by the caller, for tests and offline runs."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0.0:
            raise ValueError(f"cannot move a clock backwards ({seconds})")
        self._now += seconds
        return self._now


class ScriptedClock:
    """Replays a fixed sequence of readings."""

    def __init__(self, readings: Iterable[float]) -> None:
        self._readings: Iterator[float] = iter(readings)
        self.reads = 0

    def __call__(self) -> float:
        try:
            value = next(self._readings)
        except StopIteration:
            raise ClockExhaustedError(f"clock ran out of readings after {self.reads} reads") from None
        self.reads += 1
        return float(value)


__all__ = [
    "ManualClock",
    "ScriptedClock",
    "perf_counter_clock",
    "pygame_ticks_clock",
    "wall_clock",
]
