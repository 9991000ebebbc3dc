"""Keys and per-frame input snapshots handed to game objects."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Key(enum.Enum):
    """Keyboard keys the game reacts to."""

    UP = enum.auto()
    DOWN = enum.auto()
    A = enum.auto()
    Z = enum.auto()
    F = enum.auto()
    V = enum.auto()
    K = enum.auto()
    M = enum.auto()
    ENTER = enum.auto()


@dataclass(frozen=True)
class InputFrame:
    """Keys held and newly pressed this frame, and the left mouse button."""

    keys_down: frozenset = field(default_factory=frozenset)
    keys_pressed: frozenset = field(default_factory=frozenset)
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    mouse_pressed: bool = False
    mouse_down: bool = False

    def is_down(self, key: Key) -> bool:
        return key in self.keys_down

    def is_pressed(self, key: Key) -> bool:
        return key in self.keys_pressed