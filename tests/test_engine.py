import numpy as np
import pytest

from fractview.engine import COLOR_MASK, ZOOM_FACTOR, Engine, parse_fractal_type
from fractview.fractals import (
    DEFAULT_COLOR,
    DEFAULT_OFFSET,
    DEFAULT_ZOOM,
    MAX_ITERATIONS,
    VIEW_CHANGE_SIZE,
    WIN_SIZE,
    Fractal,
    FractalType,
    julia,
    mandelbrot,
)
from fractview.keys import Key, MouseButton
from fractview.utils import UsageError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("m", FractalType.MANDELBROT),
        ("j", FractalType.JULIA),
        ("B", FractalType.BURNING_SHIP),
        ("T", FractalType.TRICORN),
        ("", FractalType.MANDELBROT),
    ],
)
def test_parse_fractal_type(text, expected):
    assert parse_fractal_type(text) is expected


@pytest.mark.parametrize("text", ["mandelbrot", "x", "jj", "1"])
def test_parse_fractal_type_rejects(text):
    with pytest.raises(UsageError):
        parse_fractal_type(text)


def test_new_engine_has_default_view():
    engine = Engine(FractalType.TRICORN)
    fr = engine.fractal
    assert fr.type is FractalType.TRICORN
    assert fr.zoom == DEFAULT_ZOOM
    assert (fr.offset_x, fr.offset_y) == (DEFAULT_OFFSET, DEFAULT_OFFSET)
    assert fr.color == DEFAULT_COLOR
    assert engine.running is True


def test_change_color_up_and_down():
    engine = Engine()
    engine.change_color(Key.Q)
    assert engine.fractal.color == DEFAULT_COLOR + 0x500000
    engine.change_color(Key.A)
    engine.change_color(Key.W)
    assert engine.fractal.color == DEFAULT_COLOR + 0x000050
    engine.change_color(Key.S)
    assert engine.fractal.color == DEFAULT_COLOR


def test_change_color_wraps_at_32_bits():
    engine = Engine()
    engine.change_color(Key.A)
    assert engine.fractal.color == (DEFAULT_COLOR - 0x500000) & COLOR_MASK
    engine.change_color(Key.Q)
    assert engine.fractal.color == DEFAULT_COLOR


def test_change_view_arrows():
    engine = Engine()
    engine.change_view(Key.LEFT)
    assert engine.fractal.offset_x == pytest.approx(DEFAULT_OFFSET - VIEW_CHANGE_SIZE / DEFAULT_ZOOM)
    engine.change_view(Key.RIGHT)
    assert engine.fractal.offset_x == pytest.approx(DEFAULT_OFFSET)
    engine.change_view(Key.DOWN)
    assert engine.fractal.offset_y == pytest.approx(DEFAULT_OFFSET + VIEW_CHANGE_SIZE / DEFAULT_ZOOM)


@pytest.mark.parametrize(
    "key, expected",
    [
        (Key.ONE, FractalType.MANDELBROT),
        (Key.TWO, FractalType.JULIA),
        (Key.THREE, FractalType.BURNING_SHIP),
        (Key.FOUR, FractalType.TRICORN),
    ],
)
def test_number_keys_switch_fractal_and_reset(key, expected):
    engine = Engine()
    engine.on_scroll(MouseButton.SCROLL_UP, 10, 10)
    assert engine.on_key(key) is True
    assert engine.fractal.type is expected
    assert engine.fractal.zoom == DEFAULT_ZOOM


def test_zero_resets_but_keeps_type():
    engine = Engine(FractalType.BURNING_SHIP)
    engine.on_key(Key.Q)
    engine.on_key(Key.UP)
    engine.on_key(Key.ZERO)
    assert engine.fractal.type is FractalType.BURNING_SHIP
    assert engine.fractal.color == DEFAULT_COLOR
    assert engine.fractal.offset_y == DEFAULT_OFFSET


def test_escape_stops_engine():
    engine = Engine()
    assert engine.on_key(Key.ESC) is False
    assert engine.running is False


def test_lock_only_for_julia():
    engine = Engine(FractalType.MANDELBROT)
    engine.on_key(Key.L)
    assert engine.fractal.julia_locked is False
    engine = Engine(FractalType.JULIA)
    engine.on_key(Key.L)
    assert engine.fractal.julia_locked is True
    engine.on_key(Key.L)
    assert engine.fractal.julia_locked is False


@pytest.mark.parametrize("button", [MouseButton.SCROLL_UP, MouseButton.SCROLL_DOWN])
def test_scroll_keeps_point_under_cursor(button):
    engine = Engine()
    x, y = 123, 456
    fr = engine.fractal
    before = (x / fr.zoom + fr.offset_x, y / fr.zoom + fr.offset_y)
    assert engine.on_scroll(button, x, y) is True
    after = (x / fr.zoom + fr.offset_x, y / fr.zoom + fr.offset_y)
    assert after == pytest.approx(before)
    factor = ZOOM_FACTOR if button is MouseButton.SCROLL_UP else 1 / ZOOM_FACTOR
    assert fr.zoom == pytest.approx(DEFAULT_ZOOM * factor)


def test_click_does_not_zoom():
    engine = Engine()
    engine.on_scroll(MouseButton.LEFT_CLICK, 10, 10)
    assert engine.fractal.zoom == DEFAULT_ZOOM


def test_mouse_move_only_for_unlocked_julia():
    engine = Engine(FractalType.MANDELBROT)
    assert engine.on_mouse_move(50, 60) is False
    assert engine.fractal.mouse_x == 0.0
    engine = Engine(FractalType.JULIA)
    assert engine.on_mouse_move(50, 60) is True
    assert (engine.fractal.mouse_x, engine.fractal.mouse_y) == (50.0, 60.0)
    engine.on_key(Key.L)
    assert engine.on_mouse_move(70, 80) is False
    assert engine.fractal.mouse_x == 50.0


def test_locked_julia_constant_survives_zoom():
    engine = Engine(FractalType.JULIA)
    engine.on_mouse_move(100, 100)
    frozen = engine.julia_constant
    engine.on_key(Key.L)
    engine.on_scroll(MouseButton.SCROLL_UP, 300, 300)
    assert engine.julia_constant == frozen
    assert engine.iterations_at(5, 7) == julia(engine.fractal, frozen, 5, 7)


def test_iterations_at_matches_scalar_mandelbrot():
    engine = Engine()
    assert engine.iterations_at(WIN_SIZE // 2, WIN_SIZE // 2) == MAX_ITERATIONS
    assert engine.iterations_at(0, 0) == mandelbrot(Fractal(), complex(-2.0, -2.0))


@pytest.mark.parametrize("fractal_type", list(FractalType))
def test_render_matches_pointwise_iterations(fractal_type):
    engine = Engine(fractal_type)
    engine.on_mouse_move(300, 420)
    engine.on_key(Key.W)
    pixels = engine.render()
    assert pixels.shape == (WIN_SIZE, WIN_SIZE)
    assert pixels.dtype == np.uint32
    for x, y in [(0, 0), (400, 400), (150, 620), (799, 13), (512, 288)]:
        expected = (engine.iterations_at(x, y) * 8 * engine.fractal.color) & COLOR_MASK
        assert int(pixels[y, x]) == expected


def test_render_escaped_start_wraps_colour():
    engine = Engine(FractalType.JULIA)
    pixels = engine.render()
    assert int(pixels[0, 0]) == (-8 * DEFAULT_COLOR) & COLOR_MASK
    assert engine.image is pixels