"""Texture sampling in texture-space and pixel coordinates."""

from __future__ import annotations

import copy
import io
import math
import sys
from itertools import chain, product

from PIL import Image

from rayshooter.helpers import as_arrays

Color = tuple[int, int, int, int]


def _to_i32(value: float) -> int:
    """Truncating, saturating float to int conversion."""
    if math.isnan(value):
        return 0
    if value >= 2**31 - 1:
        return 2**31 - 1
    if value <= -(2**31):
        return -(2**31)
    return int(value)


def _to_index(value: float) -> int:
    """Truncating conversion to a non-negative index; negatives become 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return int(value)


def _dominant_color(pixels: list[Color]) -> Color:
    candidates = [
        p for p in pixels
        if p[3] >= 125 and not (p[0] > 250 and p[1] > 250 and p[2] > 250)
    ] or pixels
    image = Image.new("RGB", (len(candidates), 1))
    image.putdata([p[:3] for p in candidates])
    quantized = image.quantize(colors=5, method=Image.Quantize.MEDIANCUT)
    palette = quantized.getpalette()
    _, index = max(quantized.getcolors())
    r, g, b = palette[index * 3:index * 3 + 3]
    return (r, g, b, 255)


class TextureSampler:
    """An RGBA texture stored column by column for fast column sampling."""

    def __init__(self, image: Image.Image):
        rgba = image.convert("RGBA")
        width, height = rgba.size
        if width == 0 or height == 0:
            raise ValueError("texture dimensions must be non-zero")
        pixels = as_arrays(rgba.tobytes(), 4)
        rows = [pixels[y * width:(y + 1) * width] for y in range(height)]
        self._columns: tuple[tuple[Color, ...], ...] = tuple(zip(*rows))
        self.width = width
        self.height = height
        self.dominant: Color = _dominant_color(pixels)

    @classmethod
    def from_bytes(cls, data: bytes) -> TextureSampler:
        """Decode an encoded image (PNG and the like) into a texture."""
        with Image.open(io.BytesIO(data)) as image:
            return cls(image.convert("RGBA"))

    @classmethod
    def from_tiles(cls, tiles_x: int, tiles_y: int, gap: int, data: bytes) -> list[TextureSampler]:
        """Split an encoded image into a row-major list of tile textures."""
        if tiles_x <= 0 or tiles_y <= 0:
            raise ValueError("tiles_x or tiles_y can't be 0")
        with Image.open(io.BytesIO(data)) as loaded:
            big_image = loaded.convert("RGBA")
        width, height = big_image.size

        gap_x = (tiles_x - 1) * gap
        gap_y = (tiles_y - 1) * gap
        if gap_x > width or (width - gap_x) % tiles_x != 0:
            raise ValueError(f"image width {width} is not an exact multiple of tiles_x {tiles_x}")
        if gap_y > height or (height - gap_y) % tiles_y != 0:
            raise ValueError(f"image height {height} is not an exact multiple of tiles_y {tiles_y}")

        tile_width = width // tiles_x
        tile_height = height // tiles_y
        if tile_width == 0 or tile_height == 0:
            raise ValueError("tiles must be at least one pixel in size")

        tiles = []
        for tile_y, tile_x in product(range(height // tile_height), range(width // tile_width)):
            x = tile_x * (tile_width + gap)
            y = tile_y * (tile_height + gap)
            tiles.append(cls(big_image.crop((x, y, x + tile_width, y + tile_height))))
        return tiles

    def with_dominant(self, color) -> TextureSampler:
        """Return a copy of this texture with another dominant colour."""
        other = copy.copy(self)
        other.dominant = tuple(color)
        return other

    def original_image(self) -> Image.Image:
        """Rebuild the texture as an RGBA image."""
        rows = zip(*self._columns)
        data = bytes(chain.from_iterable(chain.from_iterable(rows)))
        return Image.frombytes("RGBA", (self.width, self.height), data)

    def sample(self, u: float, v: float) -> Color:
        """Sample a colour at uv coordinates in the range 0.0..1.0."""
        return self.sample_exact(_to_i32(u * self.width), _to_i32(v * self.height))

    def sample_exact(self, x: int, y: int) -> Color:
        """Sample a colour at pixel coordinates, wrapping around the edges."""
        return self._columns[x % self.width][y % self.height]

    def sample_column(self, u: float, v_start: float, v_end: float, height: int) -> list[Color]:
        """Sample ``height`` colours of column ``u`` spread over ``v_start..v_end``."""
        x = _to_i32(u * self.width)
        return self._sample_column(x, v_start * self.height, v_end * self.height, height)

    def sample_column_exact(self, x: int, y_start: int, y_end: int, height: int) -> list[Color]:
        """Like :meth:`sample_column`, in pixel coordinates."""
        return self._sample_column(x, float(y_start), float(y_end), height)

    def _sample_column(self, x: int, y_start: float, y_end: float, height: int) -> list[Color]:
        if height <= 0:
            return []
        column = self._columns[(x & 0xFFFFFFFF) % self.width]

        y_offset = y_start // self.height
        y_start = y_start + y_offset * self.height
        y_end = y_end + y_offset * self.height

        step = (y_end - y_start) / height
        samples = []
        y_tex = y_start
        for _ in range(height):
            samples.append(column[_to_index(y_tex) % self.height])
            y_tex += step
        return samples