import pytest

from pongfour.constants import PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_WIDTH, SCREEN_HEIGHT
from pongfour.controls import InputFrame, Key
from pongfour.paddle import (
    first_paddle,
    fourth_paddle,
    second_paddle,
    third_paddle,
)


def test_paddle_dimensions():
    paddle = first_paddle(50, 100)
    rect = paddle.rect
    assert rect.width == PADDLE_WIDTH
    assert rect.height == PADDLE_HEIGHT


def test_rect_follows_position():
    paddle = first_paddle(50, 100)
    assert (paddle.rect.x, paddle.rect.y) == (50, 100)


@pytest.mark.parametrize(
    "factory, up, down",
    [
        (first_paddle, Key.UP, Key.DOWN),
        (second_paddle, Key.A, Key.Z),
        (third_paddle, Key.F, Key.V),
        (fourth_paddle, Key.K, Key.M),
    ],
)
def test_each_paddle_moves_with_its_keys(factory, up, down):
    paddle = factory(10, 300)
    paddle.update(InputFrame(keys_down={up}), SCREEN_HEIGHT)
    assert paddle.y == 300 - PADDLE_SPEED
    paddle.update(InputFrame(keys_down={down}), SCREEN_HEIGHT)
    assert paddle.y == 300


def test_other_keys_do_not_move_paddle():
    paddle = first_paddle(10, 300)
    paddle.update(InputFrame(keys_down={Key.A, Key.K}), SCREEN_HEIGHT)
    assert paddle.y == 300


def test_both_keys_cancel_out():
    paddle = second_paddle(10, 300)
    paddle.update(InputFrame(keys_down={Key.A, Key.Z}), SCREEN_HEIGHT)
    assert paddle.y == 300


def test_clamped_at_top():
    paddle = first_paddle(10, 3)
    paddle.update(InputFrame(keys_down={Key.UP}), SCREEN_HEIGHT)
    assert paddle.y == 0


def test_clamped_at_bottom():
    paddle = first_paddle(10, SCREEN_HEIGHT - PADDLE_HEIGHT - 2)
    paddle.update(InputFrame(keys_down={Key.DOWN}), SCREEN_HEIGHT)
    assert paddle.y == SCREEN_HEIGHT - PADDLE_HEIGHT


def test_stays_on_screen_after_many_frames():
    paddle = fourth_paddle(10, 400)
    for _ in range(500):
        paddle.update(InputFrame(keys_down={Key.M}), SCREEN_HEIGHT)
        assert 0 <= paddle.y <= SCREEN_HEIGHT - PADDLE_HEIGHT
    for _ in range(500):
        paddle.update(InputFrame(keys_down={Key.K}), SCREEN_HEIGHT)
        assert 0 <= paddle.y <= SCREEN_HEIGHT - PADDLE_HEIGHT