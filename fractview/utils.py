"""Small text helpers and the usage screen."""

from __future__ import annotations

import string
import sys
from typing import TextIO


class UsageError(Exception):
    """Raised when the program is started with arguments it cannot use."""


_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

HELP_TEXT = """
 +----------------------- TUTORIAL ------------------------+
 |                                                         |
 | Usage: fractview [m mandelbrot / j julia /              |
 |                   b burning_ship / t tricorn]           |
 |                                                         |
 | e.g: fractview m                                        |
 |                                                         |
 |----------------------- KEYBOARD ------------------------|
 |                                                         |
 | Press ESC to close the window                           |
 | Press one of [1 to 4] to move to another fractal        |
 | Press one of [Q-W] keys to change the color++           |
 | Press one of [A-S] keys to change the color--           |
 | Use mouse scroll to zoom in and out of the fractal      |
 | Press the arrow keys to change the viewpoint            |
 | Press L to lock Julia's fractal                         |
 | Press Zero to reset the fractal                         |
 +---------------------------------------------------------+

"""


def lowercase_ascii(text: str) -> str:
    """Lower-case the ASCII letters A-Z only, leaving everything else alone."""
    return text.translate(_LOWER)


def show_help(stream: TextIO | None = None) -> None:
    """Write the usage and key-binding screen to ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(HELP_TEXT)
    out.flush()