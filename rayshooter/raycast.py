"""Rendering walls and sprites into a pixel buffer by ray casting."""

from __future__ import annotations

import math
from itertools import dropwhile
from typing import Callable, Sequence

from rayshooter.draw_column import draw_color_column, draw_texture_column
from rayshooter.perspective import Perspective
from rayshooter.pixels import Pixels, blend_color_u8
from rayshooter.ray_gen import RayGenerator
from rayshooter.sprites import Sprite
from rayshooter.walls import (
    MAX_VIEW_DISTANCE,
    GridMap,
    HitSide,
    SolidWall,
    darken,
    ray_algorithm,
    wall_x,
)

Vec2 = tuple[float, float]


def _div(a: float, b: float) -> float:
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _rotate(v: Vec2, by: Vec2) -> Vec2:
    return (v[0] * by[0] - v[1] * by[1], v[1] * by[0] + v[0] * by[1])


def _normalize(v: Vec2) -> Vec2:
    length = math.hypot(v[0], v[1])
    return (_div(v[0], length), _div(v[1], length))


def _partition_point(items: Sequence, pred: Callable) -> int:
    lo, hi = 0, len(items)
    while lo < hi:
        mid = (lo + hi) // 2
        if pred(items[mid]):
            lo = mid + 1
        else:
            hi = mid
    return lo


def _overwrite(_current, new):
    return new


def _overwrite_darkened(_current, new):
    return darken(new)


def _distance_key(sprite: Sprite):
    return (math.isnan(sprite.distance_2), sprite.distance_2)


class RayCaster:
    """Casts one ray per screen column and keeps the depths it found."""

    def __init__(self, screen_width: int, screen_height: int, fov: float):
        self.proj_dist = _div(screen_height / 2.0, math.tan(math.radians(fov) / 2.0))
        self.ray_gen = RayGenerator(self.proj_dist, screen_width)
        self.minimap_rays: list[Vec2] = []
        self.depth_map: list[float] = []

    def perspective(self, angle: float, camera_height: float,
                    subject_height: float) -> Perspective:
        """The perspective for a look angle and camera/subject heights."""
        return Perspective.from_angle(angle, camera_height, subject_height, self.proj_dist)

    def draw_walls(self, pixels: Pixels, camera_pos: Vec2, camera_dir: Vec2,
                   perspective: Perspective, grid: GridMap) -> None:
        """Draw the walls seen from the camera and record each column's depth."""
        self.minimap_rays.clear()
        self.depth_map.clear()
        cx, cy = camera_pos

        for ray_dir, column in zip(self.ray_gen.iter(camera_dir), pixels.columns()):
            hit = ray_algorithm(camera_pos, ray_dir, grid)
            if hit is None:
                self.minimap_rays.append((cx + ray_dir[0] * MAX_VIEW_DISTANCE,
                                          cy + ray_dir[1] * MAX_VIEW_DISTANCE))
                self.depth_map.append(MAX_VIEW_DISTANCE)
                continue

            self.minimap_rays.append(hit.pos)
            self.depth_map.append(hit.t)

            facing = ray_dir[0] * camera_dir[0] + ray_dir[1] * camera_dir[1]
            wall_height = _div(self.proj_dist, hit.t * facing)
            shaded = hit.side in (HitSide.LEFT, HitSide.RIGHT)
            callback = _overwrite_darkened if shaded else _overwrite

            wall = hit.cell
            if isinstance(wall, SolidWall):
                draw_color_column(wall.color, column, wall_height, perspective, callback)
            else:
                draw_texture_column(wall.texture, column, wall_x(hit), wall_height,
                                    perspective, callback)

    def draw_sprites(self, pixels: Pixels, camera_pos: Vec2, camera_dir: Vec2,
                     perspective: Perspective, sprites: list[Sprite]) -> None:
        """Draw sprites far to near, hidden where walls are closer.

        ``sprites`` is sorted in place, farthest first. Must follow
        :meth:`draw_walls` for the same frame.
        """
        angles = self.ray_gen.raw_angles()
        if not self.depth_map:
            raise RuntimeError("depth map not initialized; run draw_walls before draw_sprites")
        if len(self.depth_map) != len(angles):
            raise RuntimeError("depth map does not match the number of rays")

        cx, cy = camera_pos
        for sprite in sprites:
            sprite.distance_2 = (sprite.position[0] - cx) ** 2 + (sprite.position[1] - cy) ** 2
        sprites.sort(key=_distance_key, reverse=True)

        max_depth = max(self.depth_map, key=lambda d: (math.isnan(d), d))
        max_depth_2 = max_depth ** 2

        inverse_camera_rotate = (camera_dir[0], -camera_dir[1])

        for sprite in dropwhile(lambda s: s.distance_2 > max_depth_2, sprites):
            offset = (sprite.position[0] - cx, sprite.position[1] - cy)
            to_sprite = _rotate(inverse_camera_rotate, offset)
            distance = math.sqrt(sprite.distance_2)
            to_sprite_dir = (_div(to_sprite[0], distance), _div(to_sprite[1], distance))

            half_width = sprite.scale[0] * 0.5
            right_offset = (-to_sprite_dir[1] * half_width, to_sprite_dir[0] * half_width)
            right_most = (to_sprite[0] + right_offset[0], to_sprite[1] + right_offset[1])
            left_most = (to_sprite[0] - right_offset[0], to_sprite[1] - right_offset[1])

            if left_most[0] < 0.0 and right_most[0] < 0.0:
                continue

            left_dir = _normalize(left_most)
            right_dir = _normalize(right_most)

            if left_dir[0] < 0.0:
                left_i = 0
            else:
                left_i = _partition_point(angles, lambda a: a[1] < left_dir[1])

            if right_dir[0] < 0.0:
                right_i = len(angles)
            else:
                right_i = _partition_point(angles, lambda a: a[1] <= right_dir[1])

            inverse_to_sprite_dir = (to_sprite_dir[0], -to_sprite_dir[1])
            axis_aligned_x = _rotate(inverse_to_sprite_dir, to_sprite)[0]
            sprite_perspective = perspective.offset_subject(sprite.height_offset, sprite.scale[1])

            for screen_x in range(left_i, right_i):
                angle = angles[screen_x]
                angle_rot = _rotate(inverse_to_sprite_dir, angle)
                ray_len = _div(axis_aligned_x, angle_rot[0])

                if ray_len > self.depth_map[screen_x]:
                    continue

                column_height = _div(sprite.scale[1] * self.proj_dist, ray_len * angle[0])
                hit_y = angle_rot[1] * ray_len
                tex_x = _div(hit_y, sprite.scale[0]) + 0.5

                draw_texture_column(sprite.texture, pixels.column(screen_x), tex_x,
                                    column_height, sprite_perspective, blend_color_u8)