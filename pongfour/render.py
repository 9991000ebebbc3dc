"""Drawing primitives on top of a pygame surface."""

from __future__ import annotations

import pygame

from .geometry import Rect

Color = tuple

_LINE_SPACING = 2
_ROUNDNESS = 0.8


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


def _alpha(color: Color) -> int:
    return color[3] if len(color) > 3 else 255


class Canvas:
    """Draws text and shapes onto a surface; colours are RGB or RGBA tuples."""

    def __init__(self, surface: pygame.Surface) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def clear(self, color: Color) -> None:
        """Fill the whole surface with one colour."""
        self.surface.fill(color)

    def measure_text(self, text: str, size: int) -> int:
        """Width in pixels of the widest line of the text."""
        if not text:
            return 0
        font = self._font(size)
        return max(font.size(line)[0] for line in text.split("\n"))

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        """Draw text with its top-left corner at (x, y); newlines start new lines."""
        font = self._font(size)
        alpha = _alpha(color)
        for number, line in enumerate(text.split("\n")):
            if not line:
                continue
            image = font.render(line, True, color[:3])
            if alpha < 255:
                image.set_alpha(alpha)
            self.surface.blit(image, (int(x), int(y + number * (size + _LINE_SPACING))))

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Fill a rectangle, blending it over what is beneath if translucent."""
        area = _to_pygame(rect)
        if _alpha(color) < 255:
            overlay = pygame.Surface(area.size, pygame.SRCALPHA)
            overlay.fill(color)
            self.surface.blit(overlay, area.topleft)
        else:
            pygame.draw.rect(self.surface, color, area)

    def draw_rounded_rect(self, rect: Rect, color: Color) -> None:
        """Fill a rectangle with strongly rounded corners."""
        area = _to_pygame(rect)
        radius = int(_ROUNDNESS * min(area.width, area.height) / 2)
        pygame.draw.rect(self.surface, color, area, border_radius=radius)

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        """Fill a circle centred on (x, y)."""
        pygame.draw.circle(self.surface, color, (int(x), int(y)), int(radius))