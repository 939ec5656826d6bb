"""settings.json parsing for loop parameters."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from gameloop.engine.clock import perf_counter_clock, pygame_ticks_clock, wall_clock
from gameloop.engine.errors import LoopConfigError
from gameloop.engine.loop import LoopConfig

DEFAULT_SETTINGS: Dict[str, Any] = {
    "targetFps": 60,
    "idleThreshold": 1.0,
    "interpolate": False,
    "maxFps": 120,
    "resolution": [800, 600],
    "demo": "bouncer",
    "demoDuration": 3.0,
    "clock": "perf",
}

CLOCKS: Dict[str, Callable[[], float]] = {
    "perf": perf_counter_clock,
    "wall": wall_clock,
    "pygame": pygame_ticks_clock,
}


def load_settings(path: Path) -> Dict[str, Any]:
    settings = dict(DEFAULT_SETTINGS)
    if not path.exists():
        return settings
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError:
        return settings
    if isinstance(data, dict):
        settings.update(data)
    return settings


def _integer(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise LoopConfigError(f"{key} must be an integer, got {value!r}")
    return value


def _number(data: Dict[str, Any], key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LoopConfigError(f"{key} must be a number, got {value!r}")
    return float(value)


def _flag(data: Dict[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise LoopConfigError(f"{key} must be true or false, got {value!r}")
    return value


def _text(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise LoopConfigError(f"{key} must be a string, got {value!r}")
    return value


@dataclass
class LoopSettings:
    """Loop parameters as read from settings.json."""

    target_fps: int = 60
    idle_threshold: float = 1.0
    interpolate: bool = False
    max_fps: int = 120
    resolution: tuple[int, int] = (800, 600)
    demo: str = "bouncer"
    demo_duration: float = 3.0
    clock: str = "perf"
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoopSettings":
        merged = {**DEFAULT_SETTINGS, **data}
        resolution = merged["resolution"]
        if (
            not isinstance(resolution, (list, tuple))
            or len(resolution) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in resolution)
        ):
            raise LoopConfigError(f"resolution must be [width, height], got {resolution!r}")
        clock = _text(merged, "clock")
        if clock not in CLOCKS:
            raise LoopConfigError(f"clock must be one of {sorted(CLOCKS)}, got {clock!r}")
        extra = {key: value for key, value in data.items() if key not in DEFAULT_SETTINGS}
        return cls(
            target_fps=_integer(merged, "targetFps"),
            idle_threshold=_number(merged, "idleThreshold"),
            interpolate=_flag(merged, "interpolate"),
            max_fps=_integer(merged, "maxFps"),
            resolution=(resolution[0], resolution[1]),
            demo=_text(merged, "demo"),
            demo_duration=_number(merged, "demoDuration"),
            clock=clock,
            extra=extra,
        )

    @classmethod
    def from_settings(cls, settings_path: Path) -> "LoopSettings":
        return cls.from_dict(load_settings(settings_path))

    def clock_source(self) -> Callable[[], float]:
        return CLOCKS[self.clock]

    def to_config(
        self,
        current_time: Callable[[], float],
        process_input: Callable[[], bool],
        update: Callable[[float], None],
        render: Callable[..., None],
        interpolate: Optional[bool] = None,
    ) -> LoopConfig:
        config = LoopConfig(
            target_fps=self.target_fps,
            idle_threshold=self.idle_threshold,
            current_time=current_time,
            process_input=process_input,
            update=update,
            render=render,
            interpolate=self.interpolate if interpolate is None else interpolate,
        )
        config.validate()
        return config


__all__ = ["CLOCKS", "DEFAULT_SETTINGS", "LoopSettings", "load_settings"]
