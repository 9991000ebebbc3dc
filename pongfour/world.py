"""The ball and the four paddles that make up one game."""

from __future__ import annotations

import random

from .ball import Ball
from .constants import (
    BALL_RADIUS,
    BALL_SPEED,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .paddle import Paddle, first_paddle, fourth_paddle, second_paddle, third_paddle


class World:
    """Everything on the playing field, laid out in its starting positions.

    The right-hand team (first and fourth paddles) scores when the ball leaves
    on the left; the left-hand team (second and third paddles) scores on the right.
    """

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.ball = Ball(
            3 * SCREEN_WIDTH // 4,
            SCREEN_HEIGHT // 2,
            BALL_RADIUS,
            BALL_SPEED,
            rng=rng,
        )
        upper = SCREEN_HEIGHT // 4 - PADDLE_HEIGHT / 2
        lower = 3 * SCREEN_HEIGHT // 4 - PADDLE_HEIGHT / 2
        self.first = first_paddle(SCREEN_WIDTH - PADDLE_WIDTH - 200, upper)
        self.second = second_paddle(200, upper)
        self.third = third_paddle(10, lower)
        self.fourth = fourth_paddle(SCREEN_WIDTH - PADDLE_WIDTH - 10, lower)

    def paddles(self) -> tuple[Paddle, Paddle, Paddle, Paddle]:
        """Return the four paddles in the order first, second, third, fourth."""
        return (self.first, self.second, self.third, self.fourth)