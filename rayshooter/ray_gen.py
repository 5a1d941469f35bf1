"""Per-screen-column ray directions."""

from __future__ import annotations

import math
from typing import Iterator

Vec2 = tuple[float, float]


def _normalize(x: float, y: float) -> Vec2:
    length = math.hypot(x, y)
    if length == 0:
        return (math.nan, math.nan)
    return (x / length, y / length)


def _rotate(v: Vec2, by: Vec2) -> Vec2:
    return (v[0] * by[0] - v[1] * by[1], v[1] * by[0] + v[0] * by[1])


class RayGenerator:
    """Caches a unit ray direction for every screen column, facing (1, 0)."""

    def __init__(self, proj_dist: float, width: int):
        half_width = width // 2
        self._angles: tuple[Vec2, ...] = tuple(
            _normalize(proj_dist, float(y)) for y in range(-half_width, width - half_width)
        )

    @classmethod
    def from_fov(cls, fov: float, width: int) -> RayGenerator:
        """Spread ``width`` rays evenly over ``fov`` degrees."""
        generator = cls.__new__(cls)
        step = fov / width
        half_fov = fov / 2.0
        generator._angles = tuple(
            (math.cos(math.radians(a)), math.sin(math.radians(a)))
            for a in (-half_fov + step * i for i in range(width))
        )
        return generator

    def iter(self, direction: Vec2) -> Iterator[Vec2]:
        """Yield the ray directions rotated to face ``direction``."""
        return (_rotate(angle, direction) for angle in self._angles)

    def raw_angles(self) -> tuple[Vec2, ...]:
        """The unrotated ray directions, from left to right."""
        return self._angles