"""Billboard sprites placed in the world."""

from __future__ import annotations

import math
from typing import Any, Sequence


class Sprite:
    """How and where to render a camera-facing textured sprite."""

    __slots__ = ("texture", "position", "scale", "height_offset", "distance_2")

    def __init__(self, texture: Any, position: Sequence[float],
                 scale: Sequence[float] = (1.0, 1.0), height_offset: float = 0.0):
        self.texture = texture
        self.position = (float(position[0]), float(position[1]))
        self.scale = (float(scale[0]), float(scale[1]))
        self.height_offset = height_offset * self.scale[1]
        # Squared distance to the camera; filled in when rendering.
        self.distance_2 = math.nan

    @classmethod
    def simple(cls, texture: Any, position: Sequence[float]) -> Sprite:
        """A sprite of unit size standing on the floor."""
        return cls(texture, position)

    def __repr__(self) -> str:
        return (f"Sprite(position={self.position}, scale={self.scale}, "
                f"height_offset={self.height_offset})")