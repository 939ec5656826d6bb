"""Lightweight runtime telemetry for the fixed timestep loop."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gameloop.engine.logger import ChannelLogger


@dataclass(frozen=True)
class LoopTelemetrySnapshot:
    iterations: int
    stalls: int
    updates: int
    renders: int
    max_updates_per_frame: int
    longest_stall: float
    simulated_time: float
    last_alpha: Optional[float]

    @property
    def updates_per_frame(self) -> float:
        if self.renders <= 0:
            return 0.0
        return self.updates / self.renders


@dataclass
class LoopTelemetry:
    """Counts loop iterations, stalls and fixed updates."""

    log_interval: float = 5.0
    iterations: int = 0
    stalls: int = 0
    updates: int = 0
    renders: int = 0
    max_updates_per_frame: int = 0
    longest_stall: float = 0.0
    simulated_time: float = 0.0
    last_alpha: Optional[float] = None
    _log_accumulator: float = 0.0

    def record_stall(self, elapsed: float) -> None:
        self.iterations += 1
        self.stalls += 1
        if elapsed > self.longest_stall:
            self.longest_stall = elapsed

    def record_frame(
        self,
        steps: int,
        dt: float,
        alpha: Optional[float] = None,
        logger: ChannelLogger | None = None,
    ) -> None:
        self.iterations += 1
        self.renders += 1
        self.updates += steps
        self.max_updates_per_frame = max(self.max_updates_per_frame, steps)
        self.last_alpha = alpha
        self.advance_time(steps * dt, logger)

    def advance_time(self, dt: float, logger: ChannelLogger | None = None) -> None:
        self.simulated_time += dt
        self._log_accumulator += dt
        if self._log_accumulator >= self.log_interval:
            self._log_accumulator = 0.0
            if logger and logger.enabled:
                logger.info(
                    "Loop: iterations=%d renders=%d updates=%d stalls=%d max_steps=%d sim=%.2fs",
                    self.iterations,
                    self.renders,
                    self.updates,
                    self.stalls,
                    self.max_updates_per_frame,
                    self.simulated_time,
                )

    def snapshot(self) -> LoopTelemetrySnapshot:
        return LoopTelemetrySnapshot(
            iterations=self.iterations,
            stalls=self.stalls,
            updates=self.updates,
            renders=self.renders,
            max_updates_per_frame=self.max_updates_per_frame,
            longest_stall=self.longest_stall,
            simulated_time=self.simulated_time,
            last_alpha=self.last_alpha,
        )


__all__ = ["LoopTelemetry", "LoopTelemetrySnapshot"]
