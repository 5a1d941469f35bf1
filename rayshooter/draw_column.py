"""Drawing textured or solid vertical strips into a screen column."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from rayshooter.perspective import Perspective
from rayshooter.sampler import TextureSampler

Color = tuple[int, int, int, int]
DrawCallback = Callable[[Color, Color], Color]


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a > 0:
        return math.inf
    if a < 0:
        return -math.inf
    return math.nan


def _max(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    return max(a, b)


def _min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    return min(a, b)


def _round_index(value: float, limit: int) -> int:
    """Round half away from zero to a non-negative index, capped at ``limit``."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return limit
    return min(math.floor(value + 0.5), limit)


def calculate_perspective(column_len: int, column_height: float,
                          perspective: Perspective) -> tuple[int, int, float, float]:
    """Find the visible part of a strip of ``column_height`` pixels.

    Returns ``(start, end, tex_v_start, tex_v_end)``: the screen rows the
    strip covers and the texture v range visible within them.
    """
    screen_middle = column_len / 2.0
    horizon_height = perspective.horizon_height
    y_offset = perspective.y_offset

    column_start = screen_middle - column_height * (1.0 - horizon_height) + y_offset
    column_end = screen_middle + column_height * horizon_height + y_offset

    span = column_end - column_start
    tex_v_start = _max(_divide(0.0 - column_start, span), 0.0)
    tex_v_end = _min(_divide(column_len - column_start, span), 1.0)

    start = _round_index(column_start, column_len)
    end = _round_index(column_end, column_len)
    if start > end:
        raise ValueError("column starts below where it ends")
    return start, end, tex_v_start, tex_v_end


def draw_texture_column(texture: TextureSampler, column: list, tex_x: float, column_height: float,
                        perspective: Perspective, draw_callback: DrawCallback) -> None:
    """Draw texture column ``tex_x`` stretched to ``column_height`` into ``column``."""
    start, end, v_start, v_end = calculate_perspective(len(column), column_height, perspective)
    samples = texture.sample_column(tex_x, v_start, v_end, end - start)
    column[start:end] = [
        draw_callback(current, new) for current, new in zip(column[start:end], samples)
    ]


def draw_color_column(color: Sequence[int], column: list, column_height: float,
                      perspective: Perspective, draw_callback: DrawCallback) -> None:
    """Draw a solid strip of ``color`` of ``column_height`` into ``column``."""
    rgba = tuple(color)
    start, end, _, _ = calculate_perspective(len(column), column_height, perspective)
    column[start:end] = [draw_callback(current, rgba) for current in column[start:end]]