"""Player paddles moved by a pair of keys and kept on screen."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_WIDTH
from .controls import InputFrame, Key
from .geometry import Rect


@dataclass
class Paddle:
    """A vertical paddle that moves up and down while its keys are held."""

    x: float
    y: float
    up_key: Key
    down_key: Key
    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    speed: int = PADDLE_SPEED

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def update(self, frame: InputFrame, screen_height: int) -> None:
        """Move according to the held keys, then clamp to the screen."""
        if frame.is_down(self.up_key):
            self.y -= self.speed
        if frame.is_down(self.down_key):
            self.y += self.speed
        self._limit_movement(screen_height)

    def _limit_movement(self, screen_height: int) -> None:
        lowest = screen_height - self.height
        if self.y < 0:
            self.y = 0
        elif self.y > lowest:
            self.y = lowest


def first_paddle(x: float, y: float) -> Paddle:
    """Paddle driven by the arrow keys."""
    return Paddle(x, y, Key.UP, Key.DOWN)


def second_paddle(x: float, y: float) -> Paddle:
    """Paddle driven by A and Z."""
    return Paddle(x, y, Key.A, Key.Z)


def third_paddle(x: float, y: float) -> Paddle:
    """Paddle driven by F and V."""
    return Paddle(x, y, Key.F, Key.V)


def fourth_paddle(x: float, y: float) -> Paddle:
    """Paddle driven by K and M."""
    return Paddle(x, y, Key.K, Key.M)