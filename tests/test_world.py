import random

from pongfour.constants import PADDLE_HEIGHT, PADDLE_WIDTH
from pongfour.controls import Key
from pongfour.world import World


def test_ball_starts_on_right_half_centre():
    world = World()
    assert world.ball.x == 960
    assert world.ball.y == 400


def test_paddles_in_order_and_positions():
    world = World()
    first, second, third, fourth = world.paddles()
    assert (first.x, first.y) == (1055, 140)
    assert (second.x, second.y) == (200, 140)
    assert (third.x, third.y) == (10, 540)
    assert (fourth.x, fourth.y) == (1245, 540)
    assert first is world.first and fourth is world.fourth


def test_paddle_dimensions():
    for paddle in World().paddles():
        rect = paddle.rect
        assert rect.width == PADDLE_WIDTH
        assert rect.height == PADDLE_HEIGHT


def test_paddle_keys():
    keys = [(p.up_key, p.down_key) for p in World().paddles()]
    assert keys == [
        (Key.UP, Key.DOWN),
        (Key.A, Key.Z),
        (Key.F, Key.V),
        (Key.K, Key.M),
    ]


def test_ball_touches_no_paddle_at_start():
    world = World()
    assert not any(world.ball.collides_with(p.rect) for p in world.paddles())


def test_seeded_worlds_serve_alike():
    a = World(rng=random.Random(3))
    b = World(rng=random.Random(3))
    for _ in range(5):
        a.ball.reset(a.width, a.height)
        b.ball.reset(b.width, b.height)
        assert (a.ball.speed_x, a.ball.speed_y) == (b.ball.speed_x, b.ball.speed_y)