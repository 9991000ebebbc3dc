"""Game screens: the menu, the match itself and the final result."""

from __future__ import annotations

import abc

from .constants import (
    CENTER_LINE,
    DARKBLUE,
    GRAY,
    LIGHTGRAY,
    MY_DARK_BLUE,
    PAUSE_OVERLAY,
    WHITE,
    WIN_SCORE,
    YELLOW,
)
from .controls import InputFrame, Key
from .geometry import Rect
from .render import Canvas
from .world import World

_INSTRUCTIONS = (
    "Team 1 Controls:\n\n- Player 1: UP/DOWN arrows\n\n- Player 2: K/M keys\n\n\n"
    "Team 2 Controls:\n\n- Player 1: A/Z keys\n\n- Player 2: F/V keys\n\n\n"
    f"Goal: First team to reach {WIN_SCORE} points wins!\n"
)


def _centred(canvas: Canvas, text: str, size: int, centre: int, y, colour) -> None:
    canvas.draw_text(text, centre - canvas.measure_text(text, size) // 2, y, size, colour)


class GameState(abc.ABC):
    """One screen of the game, advanced and drawn once per frame."""

    def __init__(self, world: World) -> None:
        self.world = world

    @abc.abstractmethod
    def update(self, frame: InputFrame) -> None: ...

    @abc.abstractmethod
    def draw(self, canvas: Canvas, frame: InputFrame) -> None: ...

    @abc.abstractmethod
    def next_state(self, frame: InputFrame) -> GameState | None:
        """Return the screen to switch to, or None to stay."""

    def _serve(self) -> None:
        self.world.ball.reset(self.world.width, self.world.height)


class MenuState(GameState):
    """The instructions screen with a start button."""

    def update(self, frame: InputFrame) -> None:
        pass

    def draw(self, canvas: Canvas, frame: InputFrame) -> None:
        centre = self.world.width // 2
        canvas.clear(MY_DARK_BLUE)
        _centred(canvas, "INSTRUCTIONS", 40, centre, 50, WHITE)
        canvas.draw_text(
            _INSTRUCTIONS, centre - canvas.measure_text("Team 1 Controls:", 24) // 2, 120, 24, WHITE
        )
        button = Rect(self.world.width / 2 - 100.0, 450.0, 200.0, 50.0)
        hovered = button.contains(frame.mouse_x, frame.mouse_y)
        canvas.draw_rect(button, LIGHTGRAY if hovered else GRAY)
        _centred(canvas, "START", 30, button.x + button.width / 2, button.y + button.height / 2 - 15, DARKBLUE)

    def next_state(self, frame: InputFrame) -> GameState | None:
        if frame.mouse_pressed:
            self._serve()
            return PlayingState(self.world)
        return None


class PlayingState(GameState):
    """The match in progress, with scores and a pause button."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self.player_score = 0
        self.cpu_score = 0
        self.paused = False

    @property
    def pause_button(self) -> Rect:
        return Rect(self.world.width - 40, 10, 30, 30)

    def update(self, frame: InputFrame) -> None:
        if frame.mouse_pressed and self.pause_button.contains(frame.mouse_x, frame.mouse_y):
            self.paused = not self.paused
        if self.paused:
            return

        world, ball = self.world, self.world.ball
        ball.update(world.height)
        for paddle in world.paddles():
            paddle.update(frame, world.height)
        if any(ball.collides_with(paddle.rect) for paddle in world.paddles()):
            ball.reverse_x()

        if ball.x <= 0:
            self.player_score += 1
            self._serve()
        elif ball.x >= world.width:
            self.cpu_score += 1
            self._serve()

    def draw(self, canvas: Canvas, frame: InputFrame) -> None:
        world, ball = self.world, self.world.ball
        canvas.clear(MY_DARK_BLUE)
        for top in range(0, world.height, 30):
            canvas.draw_rect(Rect(world.width // 2 - 2, top, 4, 20), CENTER_LINE)
        canvas.draw_circle(ball.x, ball.y, ball.radius, WHITE)
        for paddle in world.paddles():
            canvas.draw_rounded_rect(paddle.rect, WHITE)
        canvas.draw_text(str(self.cpu_score), world.width // 4 - 20, 20, 80, WHITE)
        canvas.draw_text(str(self.player_score), 3 * world.width // 4 - 20, 20, 80, WHITE)

        button = self.pause_button
        colour = WHITE
        if button.contains(frame.mouse_x, frame.mouse_y):
            colour = GRAY if frame.mouse_down else YELLOW
        canvas.draw_text("||", button.x, button.y, 30, colour)

        if self.paused:
            canvas.draw_rect(Rect(0, 0, world.width, world.height), PAUSE_OVERLAY)
            _centred(canvas, "PAUSED", 50, world.width // 2, world.height // 2 - 50, WHITE)

    def next_state(self, frame: InputFrame) -> GameState | None:
        if max(self.player_score, self.cpu_score) >= WIN_SCORE:
            return GameOverState(self.world, self.player_score, self.cpu_score)
        return None


class GameOverState(GameState):
    """The final result, waiting for ENTER to start again."""

    def __init__(self, world: World, player_score: int, cpu_score: int) -> None:
        super().__init__(world)
        self.player_score = player_score
        self.cpu_score = cpu_score

    @property
    def winner_text(self) -> str:
        return "PLAYER WINS!" if self.player_score > self.cpu_score else "CPU WINS!"

    @property
    def score_text(self) -> str:
        return f"Final Score: {self.cpu_score} - {self.player_score}"

    def update(self, frame: InputFrame) -> None:
        if frame.is_pressed(Key.ENTER):
            self._serve()

    def draw(self, canvas: Canvas, frame: InputFrame) -> None:
        centre = self.world.width // 2
        canvas.clear(MY_DARK_BLUE)
        _centred(canvas, self.winner_text, 50, centre, 100, WHITE)
        _centred(canvas, self.score_text, 30, centre, 200, WHITE)
        _centred(canvas, "Press ENTER to play again", 30, centre, 300, WHITE)

    def next_state(self, frame: InputFrame) -> GameState | None:
        if frame.is_pressed(Key.ENTER):
            return PlayingState(self.world)
        return None