"""Console demo that logs each loop callback while simulating work."""
from __future__ import annotations

import time
from typing import Callable, Optional

from gameloop.engine.clock import perf_counter_clock
from gameloop.engine.logger import ChannelLogger
from gameloop.engine.loop import FixedTimestepLoop, LoopConfig
from gameloop.engine.telemetry import LoopTelemetry


class ConsoleDemo:
    """Callbacks that sleep for ``work_seconds`` and log what they did."""

    def __init__(
        self,
        logger: ChannelLogger,
        duration: float = 3.0,
        work_seconds: float = 0.005,
        clock: Callable[[], float] = perf_counter_clock,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.logger = logger
        self.duration = duration
        self.work_seconds = work_seconds
        self.clock = clock
        self.sleep = sleep
        self.started_at: Optional[float] = None
        self.updates = 0
        self.renders = 0

    def process_input(self) -> bool:
        self.sleep(self.work_seconds)
        self.logger.info("process input")
        now = self.clock()
        if self.started_at is None:
            self.started_at = now
        return now - self.started_at >= self.duration

    def update(self, dt: float) -> None:
        self.sleep(self.work_seconds)
        self.updates += 1
        self.logger.info("updating, dt: %s", dt)

    def render(self) -> None:
        self.sleep(self.work_seconds)
        self.renders += 1
        self.logger.info("rendering")

    def build(
        self,
        target_fps: int = 60,
        idle_threshold: float = 1.0,
        telemetry: Optional[LoopTelemetry] = None,
        loop_logger: Optional[ChannelLogger] = None,
    ) -> FixedTimestepLoop:
        config = LoopConfig(
            target_fps=target_fps,
            idle_threshold=idle_threshold,
            current_time=self.clock,
            process_input=self.process_input,
            update=self.update,
            render=self.render,
        )
        return FixedTimestepLoop(config, telemetry=telemetry, logger=loop_logger)


__all__ = ["ConsoleDemo"]
