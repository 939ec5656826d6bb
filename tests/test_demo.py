from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from pygame.math import Vector2

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gameloop.demo.bouncer import Bouncer
from gameloop.demo.console import ConsoleDemo
from gameloop.engine.clock import ManualClock
from gameloop.engine.logger import GameLogger, LoggerConfig
from gameloop.engine.telemetry import LoopTelemetry


def make_logger() -> GameLogger:
    return GameLogger(LoggerConfig(level=logging.CRITICAL, channels={"demo": True}))


def test_bouncer_moves_by_fixed_step() -> None:
    bouncer = Bouncer(bounds=(400, 300), position=Vector2(10.0, 10.0), velocity=Vector2(100.0, 50.0))
    bouncer.update(0.1)
    assert bouncer.previous == Vector2(10.0, 10.0)
    assert bouncer.position.x == pytest.approx(20.0)
    assert bouncer.position.y == pytest.approx(15.0)


def test_bouncer_reflects_off_walls() -> None:
    bouncer = Bouncer(bounds=(100, 100), size=10.0, position=Vector2(85.0, 50.0), velocity=Vector2(100.0, 0.0))
    bouncer.update(0.1)
    assert bouncer.position.x == pytest.approx(90.0)
    assert bouncer.velocity.x == pytest.approx(-100.0)
    assert bouncer.bounces == 1


def test_bouncer_interpolates_between_states() -> None:
    bouncer = Bouncer(bounds=(400, 300), position=Vector2(0.0, 0.0), velocity=Vector2(100.0, 0.0))
    bouncer.update(0.1)
    assert bouncer.interpolated(0.0) == Vector2(0.0, 0.0)
    assert bouncer.interpolated(0.5).x == pytest.approx(5.0)
    assert bouncer.interpolated(1.0).x == pytest.approx(10.0)
    assert bouncer.interpolated(2.0).x == pytest.approx(10.0)


def test_console_demo_runs_for_duration() -> None:
    clock = ManualClock()
    demo = ConsoleDemo(
        make_logger().channel("demo"),
        duration=1.0,
        work_seconds=0.0625,
        clock=clock,
        sleep=clock.advance,
    )
    telemetry = LoopTelemetry()
    loop = demo.build(target_fps=8, idle_threshold=1.0, telemetry=telemetry)
    loop.run()

    snapshot = telemetry.snapshot()
    assert snapshot.stalls == 0
    assert demo.renders == snapshot.renders
    assert demo.updates == snapshot.updates
    assert clock.now >= 1.0
    assert demo.updates == pytest.approx(clock.now * 8, abs=4)


def test_console_demo_logs_callbacks(caplog) -> None:
    clock = ManualClock()
    demo = ConsoleDemo(
        make_logger().channel("demo"),
        duration=0.2,
        work_seconds=0.125,
        clock=clock,
        sleep=clock.advance,
    )
    loop = demo.build(target_fps=8)

    with caplog.at_level(logging.INFO, logger="gameloop.demo"):
        loop.run()

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == "process input"
    assert "updating, dt: 0.125" in messages
    assert messages[-1] == "rendering"
