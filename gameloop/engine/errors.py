"""Exceptions raised by the loop engine."""
from __future__ import annotations


class LoopError(Exception):
    """Base class for loop engine errors."""


class LoopConfigError(LoopError, ValueError):
    """Raised when a loop is built from an invalid configuration."""


class LoopTerminatedError(LoopError, RuntimeError):
    """Raised when a loop that has already run is started again."""


class ClockExhaustedError(LoopError):
    """Raised when a scripted clock has no readings left."""


__all__ = ["ClockExhaustedError", "LoopConfigError", "LoopError", "LoopTerminatedError"]
