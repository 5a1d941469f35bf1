"""Grid maps of walls and the ray marching that finds them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from rayshooter.sampler import TextureSampler

MAX_VIEW_DISTANCE = 20.0
DARKEN = int(0.8 * 256)

Vec2 = tuple[float, float]
Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class SolidWall:
    """A wall painted with one RGBA colour."""

    color: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", tuple(self.color))


@dataclass(frozen=True)
class TexturedWall:
    """A wall covered with a texture."""

    texture: TextureSampler


Wall = Union[SolidWall, TexturedWall]


@dataclass(frozen=True)
class GridMap:
    """A rectangular grid of cells; ``rows[y][x]`` is a wall or ``None``."""

    rows: tuple[tuple[Optional[Wall], ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.rows)
        if len({len(row) for row in rows}) > 1:
            raise ValueError("all rows of a map must have the same width")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(cls, width: int, height: int) -> GridMap:
        """A map of the given size without any walls."""
        return cls(tuple((None,) * width for _ in range(height)))

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def cell(self, x: int, y: int) -> Optional[Wall]:
        """The wall at ``(x, y)``, or ``None`` for empty or outside cells."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.rows[y][x]
        return None


class HitSide(Enum):
    """The face of a cell that a ray struck."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Hit:
    """Where and at what distance a ray struck a wall."""

    t: float
    pos: Vec2
    cell: Wall
    side: HitSide


def _div(a: float, b: float) -> float:
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ray_algorithm(ray_start: Sequence[float], ray_dir: Sequence[float],
                  grid: GridMap) -> Optional[Hit]:
    """March a ray through the grid and return the first wall it hits.

    Returns ``None`` when nothing is found within the view distance.
    """
    sx, sy = ray_start
    dx, dy = ray_dir

    ratio_yx = _div(dy, dx)
    ratio_xy = _div(dx, dy)
    unit_x = math.sqrt(1.0 + ratio_yx * ratio_yx)
    unit_y = math.sqrt(1.0 + ratio_xy * ratio_xy)

    check_x = math.floor(sx)
    check_y = math.floor(sy)

    if dx < 0.0:
        step_x = -1
        length_x = (sx - check_x) * unit_x
    else:
        step_x = 1
        length_x = ((check_x + 1) - sx) * unit_x

    if dy < 0.0:
        step_y = -1
        length_y = (sy - check_y) * unit_y
    else:
        step_y = 1
        length_y = ((check_y + 1) - sy) * unit_y

    distance = 0.0
    while distance <= MAX_VIEW_DISTANCE:
        vertical = length_x < length_y
        if vertical:
            check_x += step_x
            distance = length_x
            length_x += unit_x
        else:
            check_y += step_y
            distance = length_y
            length_y += unit_y

        if not (0 <= check_x < grid.width and 0 <= check_y < grid.height):
            continue

        cell = grid.cell(check_x, check_y)
        if cell is None:
            continue

        if vertical:
            side = HitSide.LEFT if dx > 0.0 else HitSide.RIGHT
        else:
            side = HitSide.BOTTOM if dy < 0.0 else HitSide.TOP

        return Hit(distance, (sx + dx * distance, sy + dy * distance), cell, side)

    return None


def darken(color: Sequence[int]) -> Color:
    """Shade a colour to 80% brightness, keeping its alpha."""
    r, g, b, a = color
    return (r * DARKEN // 256, g * DARKEN // 256, b * DARKEN // 256, a)


def _fract(value: float) -> float:
    return value - math.trunc(value)


def wall_x(hit: Hit) -> float:
    """How far along the struck wall face the hit lies, in 0.0..1.0."""
    x, y = hit.pos
    if hit.side is HitSide.TOP:
        return 1.0 - _fract(x)
    if hit.side is HitSide.BOTTOM:
        return _fract(x)
    if hit.side is HitSide.LEFT:
        return _fract(y)
    return 1.0 - _fract(y)