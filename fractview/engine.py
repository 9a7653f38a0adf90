"""The viewer's state, how input changes it, and rendering to pixels."""

from __future__ import annotations

from typing import Callable

import numpy as np

from .fractals import (
    VIEW_CHANGE_SIZE,
    WIN_SIZE,
    Fractal,
    FractalType,
    burning_ship,
    julia,
    mandelbrot,
    tricorn,
)
from .keys import Key, MouseButton
from .utils import UsageError, lowercase_ascii

ZOOM_FACTOR = 1.3
COLOR_MASK = 0xFFFFFFFF

_COLOR_STEPS = {
    Key.Q: 0x500000,
    Key.W: 0x000050,
    Key.A: -0x500000,
    Key.S: -0x000050,
}

_ARROWS = {
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
}

_FRACTAL_KEYS = {
    Key.ONE: FractalType.MANDELBROT,
    Key.TWO: FractalType.JULIA,
    Key.THREE: FractalType.BURNING_SHIP,
    Key.FOUR: FractalType.TRICORN,
}

_SCALAR = {
    FractalType.MANDELBROT: mandelbrot,
    FractalType.BURNING_SHIP: burning_ship,
    FractalType.TRICORN: tricorn,
}


def parse_fractal_type(text: str) -> FractalType:
    """Map a command-line letter (m, j, b, t; any case) to a fractal type.

    An empty argument selects the Mandelbrot set. Anything else that is not
    exactly one of the letters raises :class:`UsageError`.
    """
    lowered = lowercase_ascii(text)
    if not lowered:
        return FractalType.MANDELBROT
    for fractal_type in FractalType:
        if fractal_type.letter == lowered:
            return fractal_type
    raise UsageError(f"unknown fractal type: {text!r}")


def _np_quadratic(re, im, cre, cim):
    return re * re - im * im + cre, 2 * re * im + cim


def _np_burning(re, im, cre, cim):
    return np.abs(re * re - im * im + cre), np.abs(2 * re * im) + cim


def _np_conjugate(re, im, cre, cim):
    return re * re - im * im + cre, -2 * re * im + cim


_VECTOR_STEPS: dict[FractalType, Callable] = {
    FractalType.MANDELBROT: _np_quadratic,
    FractalType.JULIA: _np_quadratic,
    FractalType.BURNING_SHIP: _np_burning,
    FractalType.TRICORN: _np_conjugate,
}


def _escape_grid(re, im, cre, cim, limit: int, step) -> np.ndarray:
    """Escape counts for whole arrays, with the same rules as the scalar code."""
    shape = re.shape
    counts = np.full(re.size, -1, dtype=np.int64)
    live = np.arange(re.size)
    zr = re.ravel().astype(np.float64, copy=True)
    zi = im.ravel().astype(np.float64, copy=True)
    cr = cre.ravel()
    ci = cim.ravel()
    for k in range(limit + 1):
        inside = zr * zr + zi * zi < 4
        live, zr, zi, cr, ci = live[inside], zr[inside], zi[inside], cr[inside], ci[inside]
        if live.size == 0:
            break
        counts[live] = k
        if k >= limit:
            break
        zr, zi = step(zr, zi, cr, ci)
    return counts.reshape(shape)


class Engine:
    """Holds the fractal view and reacts to keyboard and mouse input.

    The ``on_*`` handlers return True when the picture should be redrawn.
    """

    def __init__(self, fractal_type: FractalType = FractalType.MANDELBROT) -> None:
        self.fractal = Fractal()
        self.fractal.reset(fractal_type)
        self.running = True
        self.image = np.zeros((WIN_SIZE, WIN_SIZE), dtype=np.uint32)
        self._frozen_constant = 0j

    def reset(self, fractal_type: FractalType) -> None:
        """Return to the default view of ``fractal_type``."""
        self.fractal.reset(fractal_type)

    def change_fractal(self, key: Key | None) -> None:
        """Switch fractal with keys 1-4; any other key gives the Mandelbrot set."""
        self.reset(_FRACTAL_KEYS.get(key, FractalType.MANDELBROT))

    def change_color(self, key: Key | None) -> None:
        """Shift the colour with Q/W (up) and A/S (down), wrapping at 32 bits."""
        step = _COLOR_STEPS.get(key)
        if step is not None:
            self.fractal.color = (self.fractal.color + step) & COLOR_MASK

    def change_view(self, key: Key | None) -> None:
        """Pan the view with the arrow keys."""
        direction = _ARROWS.get(key)
        if direction is None:
            return
        fr = self.fractal
        dx, dy = direction
        if dx:
            fr.offset_x += dx * (VIEW_CHANGE_SIZE / fr.zoom)
        if dy:
            fr.offset_y += dy * (VIEW_CHANGE_SIZE / fr.zoom)

    def _mouse_constant(self) -> complex:
        fr = self.fractal
        return complex(
            fr.mouse_x / fr.zoom + fr.offset_x,
            fr.mouse_y / fr.zoom + fr.offset_y,
        )

    @property
    def julia_constant(self) -> complex:
        """The c used for the Julia set: under the mouse, or frozen when locked."""
        if self.fractal.julia_locked:
            return self._frozen_constant
        return self._mouse_constant()

    def iterations_at(self, x: int, y: int) -> int:
        """Escape count for the pixel at (x, y)."""
        fr = self.fractal
        if fr.type == FractalType.JULIA:
            return julia(fr, self.julia_constant, x, y)
        c = complex(x / fr.zoom + fr.offset_x, y / fr.zoom + fr.offset_y)
        return _SCALAR[fr.type](fr, c)

    def render(self) -> np.ndarray:
        """Compute the whole picture as 32-bit colours, indexed ``[y, x]``."""
        fr = self.fractal
        axis = np.arange(WIN_SIZE, dtype=np.float64) / fr.zoom
        re, im = np.meshgrid(axis + fr.offset_x, axis + fr.offset_y)
        if fr.type == FractalType.JULIA:
            c = self.julia_constant
            counts = _escape_grid(
                re,
                im,
                np.full_like(re, c.real),
                np.full_like(im, c.imag),
                fr.iterations,
                _VECTOR_STEPS[fr.type],
            )
        else:
            zeros = np.zeros_like(re)
            counts = _escape_grid(zeros, zeros, re, im, fr.iterations, _VECTOR_STEPS[fr.type])
        self.image = ((counts * 8 * fr.color) & COLOR_MASK).astype(np.uint32)
        return self.image

    def on_key(self, key: Key | None) -> bool:
        """Handle a key press; ESC stops the engine."""
        fr = self.fractal
        if key in _COLOR_STEPS:
            self.change_color(key)
        elif key in _ARROWS:
            self.change_view(key)
        elif key in _FRACTAL_KEYS:
            self.change_fractal(key)
        elif key is Key.L and fr.type == FractalType.JULIA:
            if not fr.julia_locked:
                self._frozen_constant = self._mouse_constant()
            fr.julia_locked = not fr.julia_locked
        elif key is Key.ZERO:
            self.reset(fr.type)
        elif key is Key.ESC:
            self.running = False
            return False
        return True

    def on_scroll(self, button: MouseButton | None, x: int, y: int) -> bool:
        """Zoom around the cursor: scroll up zooms in, scroll down zooms out."""
        fr = self.fractal
        if button is MouseButton.SCROLL_DOWN:
            new_zoom = fr.zoom / ZOOM_FACTOR
        elif button is MouseButton.SCROLL_UP:
            new_zoom = fr.zoom * ZOOM_FACTOR
        else:
            return True
        fr.offset_x = (x / fr.zoom + fr.offset_x) - (x / new_zoom)
        fr.offset_y = (y / fr.zoom + fr.offset_y) - (y / new_zoom)
        fr.zoom = new_zoom
        return True

    def on_mouse_move(self, x: int, y: int) -> bool:
        """Follow the mouse with the Julia constant unless it is locked."""
        fr = self.fractal
        if fr.type != FractalType.JULIA or fr.julia_locked:
            return False
        fr.mouse_x = float(x)
        fr.mouse_y = float(y)
        return True