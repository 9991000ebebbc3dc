"""The main loop: reads input, advances the current screen and draws it."""

from __future__ import annotations

import pygame

from .controls import InputFrame, Key
from .render import Canvas
from .states import GameState, MenuState
from .world import World

_KEY_CODES = {
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.A: pygame.K_a,
    Key.Z: pygame.K_z,
    Key.F: pygame.K_f,
    Key.V: pygame.K_v,
    Key.K: pygame.K_k,
    Key.M: pygame.K_m,
    Key.ENTER: pygame.K_RETURN,
}
_KEYS_BY_CODE = {code: key for key, code in _KEY_CODES.items()}


def _read_input() -> InputFrame | None:
    """Collect this frame's input, or return None if the window should close."""
    pressed = set()
    clicked = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return None
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return None
            if event.key in _KEYS_BY_CODE:
                pressed.add(_KEYS_BY_CODE[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            clicked = True

    held = pygame.key.get_pressed()
    mouse_x, mouse_y = pygame.mouse.get_pos()
    return InputFrame(
        keys_down=frozenset(key for key, code in _KEY_CODES.items() if held[code]),
        keys_pressed=frozenset(pressed),
        mouse_x=mouse_x,
        mouse_y=mouse_y,
        mouse_pressed=clicked,
        mouse_down=bool(pygame.mouse.get_pressed()[0]),
    )


class App:
    """Holds the world and the current screen."""

    def __init__(self, world: World | None = None, canvas: Canvas | None = None) -> None:
        self.world = world or World()
        self.canvas = canvas
        self.state: GameState = MenuState(self.world)

    def step(self, frame: InputFrame) -> GameState:
        """Run one frame and return the screen that is now current."""
        self.state.update(frame)
        self.state = self.state.next_state(frame) or self.state
        if self.canvas is not None:
            self.state.draw(self.canvas, frame)
        return self.state

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.world.width, self.world.height))
            pygame.display.set_caption("Pong Game")
            self.canvas = Canvas(surface)
            clock = pygame.time.Clock()
            while (frame := _read_input()) is not None:
                self.step(frame)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def main(argv=None) -> int:
    App().run()
    return 0