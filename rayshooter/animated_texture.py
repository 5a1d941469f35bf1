"""Sprite-sheet animations whose frame also depends on viewing angle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class _AnimationMap:
    states: tuple[tuple[int, ...], ...]
    frame_time: float


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 2**31 - 1 if value > 0 else -(2**31)
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return int(whole)


class AnimatedTexture:
    """Named animations over a shared sprite sheet.

    Each animation is a list of frames; each frame lists sprite-sheet
    indices for the directions the sprite can be seen from.
    """

    def __init__(self, sprite_sheet: Sequence[Any]):
        self.sprite_sheet = sprite_sheet
        self._states: dict[str, _AnimationMap] = {}

    def register_state(self, name: str, frame_time: float,
                       states: Sequence[Sequence[int]]) -> AnimatedTexture:
        """Add an animation and return this texture for chaining."""
        self._states[name] = _AnimationMap(tuple(tuple(frame) for frame in states), frame_time)
        return self

    def get_state(self, initial_state: str) -> AnimatedTextureState:
        """Start playing the animation named ``initial_state``."""
        return AnimatedTextureState(self, initial_state)

    def _animation(self, name: str) -> _AnimationMap:
        try:
            return self._states[name]
        except KeyError:
            raise KeyError(f"no animation state named {name!r}") from None


class AnimatedTextureState:
    """The playback position within one animation of an AnimatedTexture."""

    def __init__(self, texture: AnimatedTexture, state_name: str):
        self._texture = texture
        self._animation = texture._animation(state_name)
        self._state_name = state_name
        self._frame = 0
        self._frame_time_mult = 1.0
        self._accumulator = 0.0

    @property
    def state_name(self) -> str:
        return self._state_name

    @property
    def frame(self) -> int:
        return self._frame

    def set_state(self, name: str, speed_mult: float) -> None:
        """Switch to another animation; switching to the current one is a no-op."""
        if self._state_name == name:
            return
        self._animation = self._texture._animation(name)
        self._state_name = name
        self._frame = 0
        self._accumulator = 0.0
        self._frame_time_mult = math.inf if speed_mult == 0 else 1.0 / speed_mult

    def get_sprite(self, look_angle: float, cur_time: float) -> Any:
        """Advance by ``cur_time`` seconds and return the sprite seen at ``look_angle``."""
        self._advance(cur_time)
        return self._texture.sprite_sheet[self._angled_frame(look_angle)]

    def _advance(self, elapsed: float) -> None:
        self._accumulator += elapsed
        frame_time = self._animation.frame_time * self._frame_time_mult
        if self._accumulator >= frame_time:
            self._accumulator -= frame_time
            self._frame = (self._frame + 1) % len(self._animation.states)

    def _angled_frame(self, look_angle: float) -> int:
        directions = self._animation.states[self._frame]
        count = len(directions)
        index = _round_half_away(look_angle / (2.0 * math.pi) * count)
        return directions[index % count]