"""The ball: movement, bouncing off the top and bottom, and serving."""

from __future__ import annotations

import random

from .constants import BALL_SPEED
from .geometry import Rect, circle_intersects_rect


class Ball:
    """A ball moving a fixed number of pixels per frame on each axis."""

    def __init__(self, x, y, radius, speed, *, rng: random.Random | None = None) -> None:
        self.x = float(x)
        self.y = float(y)
        self.radius = radius
        self.speed_x = speed
        self.speed_y = speed
        self._rng = rng or random.Random()

    def update(self, screen_height: int) -> None:
        self.x += self.speed_x
        self.y += self.speed_y
        if self.y + self.radius >= screen_height or self.y - self.radius <= 0:
            self.speed_y = -self.speed_y

    def reset(self, screen_width: int, screen_height: int) -> None:
        """Serve from the right half of the screen in a random diagonal direction."""
        self.x = float(3 * screen_width // 4)
        self.y = float(screen_height // 2)
        self.speed_x = BALL_SPEED * self._rng.choice((-1, 1))
        self.speed_y = BALL_SPEED * self._rng.choice((-1, 1))

    def collides_with(self, rect: Rect) -> bool:
        return circle_intersects_rect(self.x, self.y, self.radius, rect)

    def reverse_x(self) -> None:
        self.speed_x = -self.speed_x