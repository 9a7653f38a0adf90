"""Window and event loop for the fractal viewer."""

from __future__ import annotations

import os
import sys
from typing import Sequence

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .engine import Engine, parse_fractal_type  # noqa: E402
from .fractals import WIN_SIZE  # noqa: E402
from .keys import Key, decode_button  # noqa: E402
from .utils import UsageError, show_help  # noqa: E402

TITLE = "Fractview"

_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_0: Key.ZERO,
    pygame.K_1: Key.ONE,
    pygame.K_2: Key.TWO,
    pygame.K_3: Key.THREE,
    pygame.K_4: Key.FOUR,
    pygame.K_q: Key.Q,
    pygame.K_w: Key.W,
    pygame.K_e: Key.E,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_l: Key.L,
}


def _handle_event(engine: Engine, event) -> bool:
    """Pass one window event to the engine; True if a redraw is needed."""
    if event.type == pygame.QUIT:
        engine.running = False
        return False
    if event.type == pygame.KEYDOWN:
        return engine.on_key(_KEYS.get(event.key))
    if event.type == pygame.MOUSEBUTTONDOWN:
        x, y = event.pos
        # pygame numbers mouse buttons the X11 way.
        return engine.on_scroll(decode_button(event.button, "linux"), x, y)
    if event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        return engine.on_mouse_move(x, y)
    return False


def _draw(screen, engine: Engine) -> None:
    pixels = engine.render()
    pygame.surfarray.blit_array(screen, np.ascontiguousarray(pixels.T & 0xFFFFFF))
    pygame.display.flip()


def run(engine: Engine) -> None:
    """Open the window and run the event loop until the engine stops."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_SIZE, WIN_SIZE), depth=32)
        pygame.display.set_caption(TITLE)
        _draw(screen, engine)
        while engine.running:
            redraw = _handle_event(engine, pygame.event.wait())
            for event in pygame.event.get():
                redraw = _handle_event(engine, event) or redraw
            if redraw and engine.running:
                _draw(screen, engine)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the viewer with one argument naming the fractal."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        show_help()
        return 0
    try:
        fractal_type = parse_fractal_type(args[0])
    except UsageError:
        show_help()
        return 0
    try:
        run(Engine(fractal_type))
    except pygame.error as exc:
        sys.stderr.write(f"[display error]: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())