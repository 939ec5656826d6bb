from __future__ import annotations

import sys
from pathlib import Path

import pygame
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gameloop.engine.clock import (
    ManualClock,
    ScriptedClock,
    perf_counter_clock,
    pygame_ticks_clock,
    wall_clock,
)
from gameloop.engine.errors import ClockExhaustedError


def test_perf_counter_clock_is_non_decreasing() -> None:
    readings = [perf_counter_clock() for _ in range(50)]
    assert readings == sorted(readings)


def test_wall_clock_returns_seconds() -> None:
    assert wall_clock() > 1_000_000_000.0


def test_manual_clock_advances() -> None:
    clock = ManualClock(start=2.0)
    assert clock() == 2.0
    assert clock.advance(0.5) == 2.5
    assert clock() == 2.5
    assert clock.now == 2.5


def test_manual_clock_rejects_negative_advance() -> None:
    clock = ManualClock()
    with pytest.raises(ValueError):
        clock.advance(-0.1)
    assert clock() == 0.0


def test_scripted_clock_replays_readings() -> None:
    clock = ScriptedClock([0, 0.5, 1.25])
    assert [clock(), clock(), clock()] == [0.0, 0.5, 1.25]
    assert clock.reads == 3
    with pytest.raises(ClockExhaustedError):
        clock()


def test_pygame_ticks_clock_reports_milliseconds_as_seconds() -> None:
    pygame.init()
    try:
        first = pygame_ticks_clock()
        pygame.time.delay(20)
        second = pygame_ticks_clock()
    finally:
        pygame.quit()

    assert 0.0 <= first <= second
    assert second - first >= 0.015
    assert second * 1000 == pytest.approx(round(second * 1000))
