import pytest

from rayshooter.pixels import Pixels, blend_color_u8

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


def test_new_buffer_is_black():
    pixels = Pixels(3, 2)
    assert all(pixels.get_color(x, y) == (0, 0, 0, 255) for x in range(3) for y in range(2))


def test_set_get_round_trip():
    pixels = Pixels(4, 4)
    pixels.set_color(2, 3, RED)
    assert pixels.get_color(2, 3) == RED
    assert pixels.get_color(3, 2) != RED


def test_out_of_bounds():
    pixels = Pixels(2, 2)
    with pytest.raises(IndexError):
        pixels.set_color(2, 0, RED)
    with pytest.raises(IndexError):
        pixels.get_color(0, 5)


def test_blend_transparent_keeps_back():
    assert blend_color_u8(RED, (0, 255, 0, 0)) == RED


def test_blend_opaque_replaces():
    assert blend_color_u8(RED, GREEN) == GREEN


def test_blend_partial_alpha_replaces():
    front = (10, 20, 30, 128)
    assert blend_color_u8(RED, front) == front


def test_blend_color_on_buffer():
    pixels = Pixels(2, 2)
    pixels.set_color(0, 0, RED)
    pixels.blend_color(0, 0, (1, 2, 3, 0))
    assert pixels.get_color(0, 0) == RED
    pixels.blend_color(0, 0, GREEN)
    assert pixels.get_color(0, 0) == GREEN


def test_clear():
    pixels = Pixels(3, 3)
    pixels.clear(GREEN)
    assert {pixels.get_color(x, y) for x in range(3) for y in range(3)} == {GREEN}


def test_clear_with():
    pixels = Pixels(4, 3)

    def f(x, y):
        return (x, y, x + y, 255)

    pixels.clear_with(f)
    assert all(pixels.get_color(x, y) == f(x, y) for x in range(4) for y in range(3))


def test_clear_with_column():
    pixels = Pixels(5, 4)

    def f(y):
        return (y, y, y, 255)

    pixels.clear_with_column(f)
    expected = [f(y) for y in range(4)]
    assert all(column == expected for column in pixels.columns())


def test_columns_are_independent_after_clear_with_column():
    pixels = Pixels(2, 2)
    pixels.clear_with_column(lambda y: RED)
    pixels.set_color(0, 0, GREEN)
    assert pixels.get_color(1, 0) == RED


def test_column_mutation_is_visible():
    pixels = Pixels(3, 3)
    pixels.column(1)[2] = RED
    assert pixels.get_color(1, 2) == RED


def test_columns_shape():
    pixels = Pixels(6, 4)
    columns = list(pixels.columns())
    assert len(columns) == 6
    assert all(len(column) == 4 for column in columns)


def test_to_bytes_layout():
    pixels = Pixels(3, 2)
    pixels.set_color(2, 1, RED)
    data = pixels.to_bytes()
    assert len(data) == 3 * 2 * 4
    i = (2 * 2 + 1) * 4
    assert data[i:i + 4] == bytes(RED)


def test_dimensions():
    pixels = Pixels(7, 5)
    assert pixels.dimensions() == (7, 5)