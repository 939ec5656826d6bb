"""Fixed timestep game loop."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from gameloop.engine.errors import LoopConfigError, LoopTerminatedError
from gameloop.engine.logger import ChannelLogger
from gameloop.engine.telemetry import LoopTelemetry


@dataclass(frozen=True)
class LoopConfig:
    """Parameters and callbacks for a single game loop.

    ``current_time`` returns seconds from any non-decreasing source.
    ``process_input`` returns True to request a quit; the iteration that
    observed the request still updates and renders before the loop stops.
    ``update`` receives the fixed step (``1 / target_fps``) on every call.
    ``render`` takes no arguments unless ``interpolate`` is set, in which case
    it receives ``lag / seconds_per_update`` in ``[0, 1)``.
    Iterations whose elapsed time exceeds ``idle_threshold`` (e.g. after the
    window was minimised or the process suspended) are skipped entirely.
    """

    target_fps: int
    idle_threshold: float
    current_time: Callable[[], float]
    process_input: Callable[[], bool]
    update: Callable[[float], None]
    render: Callable[..., None]
    interpolate: bool = False

    @property
    def seconds_per_update(self) -> float:
        return 1 / self.target_fps

    def validate(self) -> None:
        if isinstance(self.target_fps, bool) or not isinstance(self.target_fps, int):
            raise LoopConfigError(f"target_fps must be an integer, got {self.target_fps!r}")
        if self.target_fps <= 0:
            raise LoopConfigError(f"target_fps must be > 0, got {self.target_fps}")
        if self.seconds_per_update <= 0.0:
            raise LoopConfigError(f"target_fps {self.target_fps} is too large for a usable step")
        threshold = self.idle_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise LoopConfigError(f"idle_threshold must be a number, got {threshold!r}")
        if math.isnan(threshold) or threshold < 0.0:
            raise LoopConfigError(f"idle_threshold must be >= 0, got {self.idle_threshold}")
        for name in ("current_time", "process_input", "update", "render"):
            if not callable(getattr(self, name)):
                raise LoopConfigError(f"{name} must be callable")


@dataclass
class LoopState:
    """Mutable bookkeeping owned by one run of the loop."""

    previous: float
    lag: float = 0.0


class LoopStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINATED = "terminated"


class FixedTimestepLoop:
    """Runs a deterministic fixed update loop with variable rendering."""

    def __init__(
        self,
        config: LoopConfig,
        telemetry: Optional[LoopTelemetry] = None,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.fixed_dt = config.seconds_per_update
        self.telemetry = telemetry
        self._logger = logger
        self._status = LoopStatus.IDLE
        self._state: Optional[LoopState] = None

    @property
    def status(self) -> LoopStatus:
        return self._status

    @property
    def state(self) -> Optional[LoopState]:
        return self._state

    def run(self) -> None:
        if self._status is not LoopStatus.IDLE:
            raise LoopTerminatedError(
                f"loop is {self._status.value}; create a new loop to run again"
            )
        self._status = LoopStatus.RUNNING
        try:
            self._run()
        finally:
            self._status = LoopStatus.TERMINATED

    def _run(self) -> None:
        config = self.config
        fixed_dt = self.fixed_dt
        telemetry = self.telemetry
        state = LoopState(previous=config.current_time())
        self._state = state
        if self._logger:
            self._logger.debug(
                "Loop started: fixed_dt=%.6f idle_threshold=%.3f", fixed_dt, config.idle_threshold
            )

        quit_requested = False
        while not quit_requested:
            current = config.current_time()
            elapsed = current - state.previous
            state.previous = current

            if elapsed > config.idle_threshold:
                if telemetry:
                    telemetry.record_stall(elapsed)
                if self._logger:
                    self._logger.warning("Skipping stalled frame: elapsed=%.3fs", elapsed)
                continue

            state.lag += elapsed

            quit_requested = bool(config.process_input())

            steps = 0
            while state.lag >= fixed_dt:
                config.update(fixed_dt)
                state.lag -= fixed_dt
                steps += 1

            if config.interpolate:
                alpha = state.lag / fixed_dt
                config.render(alpha)
            else:
                alpha = None
                config.render()

            if telemetry:
                telemetry.record_frame(steps, fixed_dt, alpha, self._logger)

        if self._logger:
            self._logger.debug("Loop finished: residual lag=%.6f", state.lag)


def create_loop(
    config: LoopConfig,
    telemetry: Optional[LoopTelemetry] = None,
    logger: Optional[ChannelLogger] = None,
) -> Callable[[], None]:
    """Build a loop from ``config`` and return its blocking run handle."""

    return FixedTimestepLoop(config, telemetry=telemetry, logger=logger).run


__all__ = ["FixedTimestepLoop", "LoopConfig", "LoopState", "LoopStatus", "create_loop"]
