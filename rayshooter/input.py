"""Keyboard and mouse handling that turns device events into player inputs."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, Optional

MOUSE_SENSITIVITY = 3.0 / 10000.0
KB_LOOK_SENSITIVITY = 2.5
UP_DOWN_ANGLE_CLAMP = 45.0 / 180.0 * math.pi


class Key(Enum):
    """Keys the input handler distinguishes."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    SPACE = auto()
    LSHIFT = auto()
    RSHIFT = auto()
    ESCAPE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    TAB = auto()
    OTHER = auto()


class MouseButton(Enum):
    """Mouse buttons the input handler distinguishes."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    OTHER = auto()


@dataclass
class InputState:
    """What the player is currently asking for: movement, shooting and facing."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False
    look_angle: float = 0.0


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``t``."""
    return a + (b - a) * t


class InputHandler:
    """Tracks the input state and whether it changed since it was last taken."""

    def __init__(self):
        self.dirty = False
        self.state = InputState()
        self.up_down_angle = 0.0
        self.mouse_locked = False
        self.slow_look = False

    def take_state(self) -> Optional[InputState]:
        """Return a copy of the state if it changed, and clear the change flag."""
        state = replace(self.state) if self.dirty else None
        self.dirty = False
        return state

    def peek_state(self) -> InputState:
        """Return a copy of the current state regardless of the change flag."""
        return replace(self.state)

    def tick(self, dt: float, pressed_keys: Iterable[Key]) -> None:
        """Advance by ``dt`` seconds with the arrow keys in ``pressed_keys`` held."""
        pressed = set(pressed_keys)
        self.up_down_angle = lerp(self.up_down_angle, 0.0, 5.0 * dt)

        look_x = 0.0
        look_y = 0.0
        if Key.RIGHT in pressed:
            look_x -= 1.0
        if Key.LEFT in pressed:
            look_x += 1.0
        if Key.UP in pressed:
            look_y += 1.0
        if Key.DOWN in pressed:
            look_y -= 1.0

        if look_x == 0.0 and look_y == 0.0:
            return

        if self.slow_look:
            look_x /= 3.0
            look_y /= 3.0

        scale = dt * KB_LOOK_SENSITIVITY
        self.apply_look_delta(look_x * scale, look_y * scale)
        self.dirty = True

    def handle_key(self, key: Key, pressed: bool) -> bool:
        """Apply a key press or release; return whether the state changed."""
        if key is Key.W:
            self.state.forward = pressed
        elif key is Key.A:
            self.state.left = pressed
        elif key is Key.S:
            self.state.backward = pressed
        elif key is Key.D:
            self.state.right = pressed
        elif key is Key.SPACE:
            self.state.shoot = pressed
        elif key in (Key.LSHIFT, Key.RSHIFT):
            self.slow_look = pressed
            return False
        elif key is Key.ESCAPE:
            self.mouse_locked = False
            return False
        else:
            return False
        self.dirty = True
        return True

    def handle_click(self, button: MouseButton, pressed: bool) -> bool:
        """Apply a mouse button press or release; return whether the state changed."""
        if button is not MouseButton.LEFT:
            return False
        self.mouse_locked = True
        self.state.shoot = pressed
        self.dirty = True
        return True

    def apply_mouse_delta(self, dx: int, dy: int) -> bool:
        """Turn by a mouse movement; ignored unless the mouse is locked."""
        if not self.mouse_locked or (dx == 0 and dy == 0):
            return False
        self.apply_look_delta(dx * MOUSE_SENSITIVITY, dy * MOUSE_SENSITIVITY)
        self.dirty = True
        return True

    def apply_look_delta(self, dx: float, dy: float) -> None:
        """Turn horizontally by ``dx`` and tilt vertically by ``dy`` radians."""
        self.state.look_angle = (self.state.look_angle - dx) % (math.pi * 2.0)
        self.up_down_angle = min(
            max(self.up_down_angle + dy, -UP_DOWN_ANGLE_CLAMP), UP_DOWN_ANGLE_CLAMP
        )