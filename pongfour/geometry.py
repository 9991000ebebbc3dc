"""Axis-aligned rectangles and the collision tests the game relies on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside; right and bottom edges are excluded."""
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )


def circle_intersects_rect(cx: float, cy: float, radius: float, rect: Rect) -> bool:
    """Return True if a circle touches or overlaps the rectangle.

    The rectangle centre is truncated to whole pixels before comparing,
    matching the collision rule the game was tuned against.
    """
    rect_cx = int(rect.x + rect.width / 2.0)
    rect_cy = int(rect.y + rect.height / 2.0)
    dx = abs(cx - rect_cx)
    dy = abs(cy - rect_cy)
    half_w = rect.width / 2.0
    half_h = rect.height / 2.0

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True

    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius