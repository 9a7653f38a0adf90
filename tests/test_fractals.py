import pytest

from fractview.fractals import (
    DEFAULT_COLOR,
    MAX_ITERATIONS,
    WIN_SIZE,
    Fractal,
    FractalType,
    burning_ship,
    julia,
    mandelbrot,
    tricorn,
)

ALL = [mandelbrot, burning_ship, tricorn]


def test_reset_restores_defaults():
    fr = Fractal(type=FractalType.JULIA, zoom=3.0, color=7, mouse_x=5, julia_locked=True)
    fr.reset(FractalType.TRICORN)
    assert fr.type is FractalType.TRICORN
    assert fr.zoom == WIN_SIZE / 4
    assert fr.color == DEFAULT_COLOR
    assert fr.iterations == MAX_ITERATIONS
    assert fr.offset_x == fr.offset_y == -2
    assert fr.mouse_x == fr.mouse_y == 0
    assert fr.julia_locked is False


def test_reset_accepts_integer_type():
    fr = Fractal()
    fr.reset(3)
    assert fr.type is FractalType.BURNING_SHIP


@pytest.mark.parametrize("number, letter", [(1, "m"), (2, "j"), (3, "b"), (4, "t")])
def test_type_letters(number, letter):
    fr = Fractal()
    fr.reset(number)
    assert fr.type.letter == letter


@pytest.mark.parametrize("func", ALL)
def test_origin_never_escapes(func):
    fr = Fractal()
    assert func(fr, complex(0, 0)) == fr.iterations


@pytest.mark.parametrize("func", ALL)
def test_far_point_escapes_immediately(func):
    assert func(Fractal(), complex(10, 10)) == 0


@pytest.mark.parametrize("func", ALL)
@pytest.mark.parametrize("c", [complex(-0.75, 0.1), complex(0.3, 0.5), complex(-1.8, 0.02)])
def test_result_within_bounds(func, c):
    fr = Fractal()
    assert 0 <= func(fr, c) <= fr.iterations


def test_mandelbrot_period_two_point_is_inside():
    fr = Fractal()
    assert mandelbrot(fr, complex(-1, 0)) == fr.iterations


@pytest.mark.parametrize("c", [complex(-0.5, 0.6), complex(0.28, 0.01), complex(-1.2, 0.3)])
def test_mandelbrot_and_tricorn_conjugate_symmetry(c):
    fr = Fractal()
    assert mandelbrot(fr, c) == mandelbrot(fr, c.conjugate())
    assert tricorn(fr, c) == tricorn(fr, c.conjugate())


def test_iteration_limit_caps_result():
    fr = Fractal(iterations=5)
    assert mandelbrot(fr, complex(0, 0)) == 5


def test_julia_start_outside_returns_minus_one():
    fr = Fractal(offset_x=5.0, offset_y=5.0)
    assert julia(fr, complex(0, 0), 0, 0) == -1


def test_julia_at_origin_with_zero_c_stays():
    fr = Fractal(offset_x=0.0, offset_y=0.0)
    assert julia(fr, complex(0, 0), 0, 0) == fr.iterations


def test_julia_with_zero_c_matches_unit_disk():
    fr = Fractal()
    # pixel (400, 400) maps to the origin, (0, 0) to -2-2i
    assert julia(fr, 0j, WIN_SIZE // 2, WIN_SIZE // 2) == fr.iterations
    assert julia(fr, 0j, 0, 0) == -1