"""Bouncing square rendered with interpolated fixed-step state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pygame
from pygame.math import Vector2

from gameloop.engine.logger import ChannelLogger

BACKGROUND = (12, 14, 22)
SQUARE_COLOUR = (235, 180, 60)


@dataclass
class Bouncer:
    """A square moving at constant speed inside ``bounds``."""

    bounds: tuple[int, int]
    size: float = 32.0
    position: Vector2 = field(default_factory=lambda: Vector2(40.0, 60.0))
    velocity: Vector2 = field(default_factory=lambda: Vector2(240.0, 180.0))
    previous: Vector2 = field(init=False)
    bounces: int = 0

    def __post_init__(self) -> None:
        self.previous = Vector2(self.position)

    def update(self, dt: float) -> None:
        self.previous = Vector2(self.position)
        self.position += self.velocity * dt
        limit_x = self.bounds[0] - self.size
        limit_y = self.bounds[1] - self.size
        if self.position.x < 0.0 or self.position.x > limit_x:
            self.position.x = min(max(self.position.x, 0.0), limit_x)
            self.velocity.x = -self.velocity.x
            self.bounces += 1
        if self.position.y < 0.0 or self.position.y > limit_y:
            self.position.y = min(max(self.position.y, 0.0), limit_y)
            self.velocity.y = -self.velocity.y
            self.bounces += 1

    def interpolated(self, alpha: float) -> Vector2:
        return self.previous.lerp(self.position, min(max(alpha, 0.0), 1.0))


class BouncerScene:
    """Update and render callbacks for the windowed demo."""

    def __init__(
        self,
        surface: pygame.Surface,
        clock: pygame.time.Clock,
        max_fps: int = 120,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.surface = surface
        self.clock = clock
        self.max_fps = max_fps
        self.logger = logger
        self.bouncer = Bouncer(bounds=surface.get_size())

    def update(self, dt: float) -> None:
        bounces = self.bouncer.bounces
        self.bouncer.update(dt)
        if self.logger and self.bouncer.bounces != bounces:
            self.logger.debug("Bounce at %s", tuple(round(v, 1) for v in self.bouncer.position))

    def render(self, alpha: float = 1.0) -> None:
        self.surface.fill(BACKGROUND)
        pos = self.bouncer.interpolated(alpha)
        size = int(self.bouncer.size)
        pygame.draw.rect(self.surface, SQUARE_COLOUR, pygame.Rect(int(pos.x), int(pos.y), size, size))
        pygame.display.flip()
        self.clock.tick(self.max_fps)


__all__ = ["Bouncer", "BouncerScene"]
