"""Fractal state and the escape-time iterations for each fractal kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WIN_SIZE = 800
VIEW_CHANGE_SIZE = 60
MAX_ITERATIONS = 50
DEFAULT_COLOR = 165
DEFAULT_ZOOM = float(WIN_SIZE // 4)
DEFAULT_OFFSET = -2.0


class FractalType(IntEnum):
    """The fractals the viewer can draw."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3
    TRICORN = 4

    @property
    def letter(self) -> str:
        """The one-letter name used on the command line."""
        return {1: "m", 2: "j", 3: "b", 4: "t"}[self.value]


@dataclass
class Fractal:
    """Viewing parameters of the fractal being shown."""

    type: FractalType = FractalType.MANDELBROT
    zoom: float = DEFAULT_ZOOM
    color: int = DEFAULT_COLOR
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    offset_x: float = DEFAULT_OFFSET
    offset_y: float = DEFAULT_OFFSET
    iterations: int = MAX_ITERATIONS
    julia_locked: bool = False

    def reset(self, fractal_type: FractalType) -> None:
        """Return to the default view, showing ``fractal_type``."""
        self.type = FractalType(fractal_type)
        self.zoom = DEFAULT_ZOOM
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.offset_x = DEFAULT_OFFSET
        self.offset_y = DEFAULT_OFFSET
        self.julia_locked = False
        self.color = DEFAULT_COLOR
        self.iterations = MAX_ITERATIONS


def _escape(re: float, im: float, c: complex, limit: int, step) -> int:
    """Count steps until |z| reaches 2.

    Returns ``limit`` if it never escapes, and one less than the number of
    steps taken otherwise (-1 when the start point is already outside).
    """
    i = -1
    while re * re + im * im < 4:
        i += 1
        if i >= limit:
            break
        re, im = step(re, im, c.real, c.imag)
    return i


def _quadratic(re, im, cre, cim):
    return re * re - im * im + cre, 2 * re * im + cim


def _burning(re, im, cre, cim):
    return abs(re * re - im * im + cre), abs(2 * re * im) + cim


def _conjugate(re, im, cre, cim):
    return re * re - im * im + cre, -2 * re * im + cim


def mandelbrot(fractal: Fractal, c: complex) -> int:
    """Escape count of z -> z**2 + c from z = 0."""
    return _escape(0.0, 0.0, c, fractal.iterations, _quadratic)


def julia(fractal: Fractal, c: complex, x: int, y: int) -> int:
    """Escape count of z -> z**2 + c starting from the point under pixel (x, y)."""
    re = x / fractal.zoom + fractal.offset_x
    im = y / fractal.zoom + fractal.offset_y
    return _escape(re, im, c, fractal.iterations, _quadratic)


def burning_ship(fractal: Fractal, c: complex) -> int:
    """Escape count of the burning-ship map from z = 0."""
    return _escape(0.0, 0.0, c, fractal.iterations, _burning)


def tricorn(fractal: Fractal, c: complex) -> int:
    """Escape count of z -> conj(z)**2 + c from z = 0."""
    return _escape(0.0, 0.0, c, fractal.iterations, _conjugate)