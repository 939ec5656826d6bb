from __future__ import annotations

from gameloop.engine.errors import (
    ClockExhaustedError,
    LoopConfigError,
    LoopError,
    LoopTerminatedError,
)
from gameloop.engine.loop import FixedTimestepLoop, LoopConfig, LoopState, LoopStatus, create_loop

__all__ = [
    "ClockExhaustedError",
    "FixedTimestepLoop",
    "LoopConfig",
    "LoopConfigError",
    "LoopError",
    "LoopState",
    "LoopStatus",
    "LoopTerminatedError",
    "create_loop",
]
