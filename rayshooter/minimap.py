"""Top-down map overlay: rendered walls, field of view and entity markers."""

from __future__ import annotations

from typing import Sequence

from rayshooter.pixels import Pixels
from rayshooter.walls import GridMap, SolidWall

Color = tuple[int, int, int, int]
Vec2 = tuple[float, float]
RectTuple = tuple[float, float, float, float]

BLACK: Color = (0, 0, 0, 255)
GRAY: Color = (128, 128, 128, 255)

_SLOPE_THRESHOLD = 0.001


class Minimap:
    """A scaled top-down picture of a grid map placed in the screen's top right."""

    def __init__(self, grid: GridMap):
        self.grid = grid
        self.border_size = 3
        self.border_color: Color = GRAY
        self.map_ratio = 8
        self.floor_color: Color = BLACK
        self.minimap_scale: Vec2 = (2.0, 2.0)
        self.minimap_pos: Vec2 = (10.0, 10.0)
        self.map_pixels = Pixels(self.get_width(), self.get_height())

    def get_width(self) -> int:
        return self.grid.width * self.map_ratio

    def get_height(self) -> int:
        return self.grid.height * self.map_ratio

    def render_map(self) -> Pixels:
        """Paint the map into a pixel buffer, each wall cell outlined in black."""
        ratio = self.map_ratio
        pixels = Pixels(self.get_width(), self.get_height())
        pixels.clear(self.floor_color)
        for x in range(pixels.width):
            for y in range(pixels.height):
                wall = self.grid.cell(x // ratio, y // ratio)
                if wall is None:
                    continue
                on_edge = x % ratio in (0, ratio - 1) or y % ratio in (0, ratio - 1)
                if on_edge:
                    color = BLACK
                elif isinstance(wall, SolidWall):
                    color = wall.color
                else:
                    color = wall.texture.dominant
                pixels.set_color(x, y, color)
        self.map_pixels = pixels
        return pixels

    def translate(self, width: int) -> Vec2:
        """Screen position of the map's top-left corner."""
        sx, _ = self.minimap_scale
        px, py = self.minimap_pos
        return (
            (width - self.get_width() * sx) - px - self.border_size,
            py + self.border_size,
        )

    def border_rect(self, width: int) -> RectTuple:
        """``(x, y, w, h)`` of the frame drawn behind the map."""
        tx, ty = self.translate(width)
        sx, sy = self.minimap_scale
        b = self.border_size
        return (tx - b, ty - b, sx * self.get_width() + 2 * b, sy * self.get_height() + 2 * b)

    def convert_ray_to_minimap_size(self, ray: Sequence[float]) -> Vec2:
        """Scale a world position to minimap pixels, relative to the map corner."""
        sx, sy = self.minimap_scale
        return (ray[0] * self.map_ratio * sx, ray[1] * self.map_ratio * sy)

    def _to_screen(self, translate: Vec2, point: Sequence[float]) -> Vec2:
        mx, my = self.convert_ray_to_minimap_size(point)
        return (translate[0] + mx, translate[1] + my)

    def vision_polygon(self, width: int, vision_origin: Sequence[float],
                       rays: Sequence[Sequence[float]], depths: Sequence[float]) -> list[Vec2]:
        """Screen points outlining the field of view.

        Rays whose depth changes at a steady rate are merged, so only the
        corners of the visible area remain. Fewer than two rays give no shape.
        """
        if len(rays) <= 1:
            return []
        t = self.translate(width)
        points = [self._to_screen(t, vision_origin), self._to_screen(t, rays[0])]

        prev_slope = 0.0
        only_this = True
        for i in range(1, len(rays)):
            slope = depths[i] - depths[i - 1]
            if abs(slope - prev_slope) > _SLOPE_THRESHOLD:
                prev_slope = slope
                if not only_this:
                    points.append(self._to_screen(t, rays[i - 1]))
                points.append(self._to_screen(t, rays[i]))
                only_this = True
            else:
                only_this = False

        if not only_this:
            points.append(self._to_screen(t, rays[-1]))
        return points

    def entity_rect(self, width: int, entity_pos: Sequence[float]) -> RectTuple:
        """``(x, y, w, h)`` of the marker centred on an entity."""
        sx, sy = self.minimap_scale
        size_x, size_y = 2.0 * sx, 2.0 * sy
        cx, cy = self._to_screen(self.translate(width), entity_pos)
        return (cx - size_x / 2.0, cy - size_y / 2.0, size_x, size_y)