import pytest
from PIL import Image

from rayshooter.draw_column import calculate_perspective, draw_color_column, draw_texture_column
from rayshooter.perspective import Perspective
from rayshooter.pixels import blend_color_u8
from rayshooter.sampler import TextureSampler

BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)


def replace(_current, new):
    return new


def test_short_column_fits_on_screen():
    start, end, v_start, v_end = calculate_perspective(100, 50.0, Perspective(0.0, 0.5))
    assert (start, end) == (25, 75)
    assert (v_start, v_end) == (0.0, 1.0)


def test_tall_column_is_clipped_symmetrically():
    start, end, v_start, v_end = calculate_perspective(100, 1000.0, Perspective(0.0, 0.5))
    assert (start, end) == (0, 100)
    assert 0.0 < v_start < v_end < 1.0
    assert v_start + v_end == pytest.approx(1.0)


def test_y_offset_shifts_column():
    base = calculate_perspective(100, 40.0, Perspective(0.0, 0.5))
    shifted = calculate_perspective(100, 40.0, Perspective(10.0, 0.5))
    assert shifted[0] == base[0] + 10
    assert shifted[1] == base[1] + 10


def test_span_matches_height_when_visible():
    start, end, _, _ = calculate_perspective(200, 60.0, Perspective(5.0, 0.65))
    assert end - start == 60


def test_zero_height_column_is_empty():
    start, end, _, _ = calculate_perspective(50, 0.0, Perspective(0.0, 0.5))
    assert start == end


def test_draw_color_column_paints_only_region():
    column = [BLACK] * 100
    draw_color_column(RED, column, 50.0, Perspective(0.0, 0.5), replace)
    start, end, _, _ = calculate_perspective(100, 50.0, Perspective(0.0, 0.5))
    assert column[start:end] == [RED] * (end - start)
    assert column[:start] == [BLACK] * start
    assert column[end:] == [BLACK] * (100 - end)


def test_draw_texture_column_solid_texture():
    texture = TextureSampler(Image.new("RGBA", (4, 4), RED))
    column = [BLACK] * 60
    draw_texture_column(texture, column, 0.5, 20.0, Perspective(0.0, 0.5), replace)
    start, end, _, _ = calculate_perspective(60, 20.0, Perspective(0.0, 0.5))
    assert column.count(RED) == end - start
    assert len(column) == 60


def test_draw_texture_column_respects_transparency():
    texture = TextureSampler(Image.new("RGBA", (2, 2), (10, 20, 30, 0)))
    column = [BLACK] * 30
    draw_texture_column(texture, column, 0.0, 30.0, Perspective(0.0, 0.5), blend_color_u8)
    assert column == [BLACK] * 30


def test_draw_texture_column_uses_texture_order():
    image = Image.new("RGBA", (1, 2))
    image.putpixel((0, 0), RED)
    image.putpixel((0, 1), (0, 0, 255, 255))
    texture = TextureSampler(image)
    column = [BLACK] * 10
    draw_texture_column(texture, column, 0.0, 10.0, Perspective(0.0, 0.5), replace)
    assert column[:5] == [RED] * 5
    assert column[5:] == [(0, 0, 255, 255)] * 5