"""A column-major RGBA pixel buffer used as the render target."""

from itertools import chain
from typing import Callable, Iterator, Sequence

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)


def blend_color_u8(back: Sequence[int], front: Sequence[int]) -> Color:
    """Return the colour that results from drawing ``front`` over ``back``.

    Fully transparent colours leave the background untouched; any other
    colour replaces it.
    """
    if front[3] == 0:
        return tuple(back)
    return tuple(front)


class Pixels:
    """A width x height grid of RGBA colours stored column by column."""

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError("dimensions must not be negative")
        self.width = width
        self.height = height
        self._columns: list[list[Color]] = [[BLACK] * height for _ in range(width)]

    def _check(self, x: int, y: int) -> None:
        if not 0 <= x < self.width:
            raise IndexError(f"x: {x}, width: {self.width}")
        if not 0 <= y < self.height:
            raise IndexError(f"y: {y}, height: {self.height}")

    def set_color(self, x: int, y: int, color: Sequence[int]) -> None:
        """Set the colour of a single pixel."""
        self._check(x, y)
        self._columns[x][y] = tuple(color)

    def blend_color(self, x: int, y: int, color: Sequence[int]) -> None:
        """Blend a colour onto a single pixel."""
        self._check(x, y)
        column = self._columns[x]
        column[y] = blend_color_u8(column[y], color)

    def get_color(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self._columns[x][y]

    def clear(self, color: Sequence[int]) -> None:
        """Fill the whole buffer with one colour."""
        rgba = tuple(color)
        self.clear_with(lambda _x, _y: rgba)

    def clear_with(self, f: Callable[[int, int], Sequence[int]]) -> None:
        """Fill every pixel with ``f(x, y)``."""
        self._columns = [
            [tuple(f(x, y)) for y in range(self.height)] for x in range(self.width)
        ]

    def clear_with_column(self, f: Callable[[int], Sequence[int]]) -> None:
        """Compute one column with ``f(y)`` and copy it into every column."""
        column = [tuple(f(y)) for y in range(self.height)]
        self._columns = [list(column) for _ in range(self.width)]

    def column(self, x: int) -> list[Color]:
        """Return the mutable list of colours of column ``x``."""
        if not 0 <= x < self.width:
            raise IndexError(f"x: {x}, width: {self.width}")
        return self._columns[x]

    def columns(self) -> Iterator[list[Color]]:
        """Iterate over the mutable columns from left to right."""
        return iter(self._columns)

    def to_bytes(self) -> bytes:
        """Return the raw RGBA bytes, column after column."""
        return bytes(chain.from_iterable(chain.from_iterable(self._columns)))

    def dimensions(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height