"""Reading XPM images, both from files and from lists of strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

import numpy as np

from .colornames import lookup_color
from .textscan import find, find_outside_quotes, split_words

TRANSPARENT = 0xFF000000
_U32 = 0xFFFFFFFF
_NAME_BUFFER = 63

_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be understood."""


@dataclass(frozen=True, eq=False)
class XpmImage:
    """A decoded image: 32-bit 0xAARRGGBB pixels indexed ``[y, x]``.

    Transparent pixels ("None" colours) are stored as 0xFF000000.
    """

    width: int
    height: int
    pixels: np.ndarray

    def pixel(self, x: int, y: int) -> int:
        """The colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return int(self.pixels[y, x])


def _to_c_int(value: int) -> int:
    value &= _U32
    return value - (1 << 32) if value >= 1 << 31 else value


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, 16) if digits else 0
    return _to_c_int(-value if sign == "-" else value)


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Colour value of an XPM colour word.

    "#rrggbb" is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up among the colour names,
    ignoring case; "none" gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    color = lookup_color(name)
    return 0 if color is None else color


def strip_comments(text: str) -> str:
    """Blank out /* */ and // comments lying outside double quotes.

    Comment characters are replaced by spaces, so positions do not move.
    """
    chars = list(text)

    def blank(start: int, count: int) -> None:
        for pos in range(start, min(start + count, len(chars))):
            chars[pos] = " "

    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while True:
            current = "".join(chars)
            begin = find_outside_quotes(current, opener, len(current))
            if begin == -1:
                break
            rest = current[begin + 2:]
            end = find(rest, closer, len(rest))
            blank(begin, end + extra)
    return "".join(chars)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        rest = text[pos:]
        first = find(rest, '"', len(rest))
        if first == -1:
            return
        after = rest[first + 1:]
        second = find(after, '"', len(after))
        if second == -1:
            return
        yield after[:second]
        pos += first + second + 2


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse(lines: Iterator[str]) -> XpmImage:
    words = split_words(_next_line(lines, "values line"))
    if len(words) < 4:
        raise XpmError("values line needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("width, height, colour count and chars per pixel must be positive")

    # Short keys overwrite earlier definitions; long keys keep the first one.
    overwrite = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour table")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        key = line[:cpp]
        tokens = split_words(line[cpp:])
        try:
            index = tokens.index("c")
        except ValueError:
            raise XpmError(f"no colour visual in line: {line!r}") from None
        if index + 1 >= len(tokens):
            raise XpmError(f"colour missing after 'c' in line: {line!r}")
        end = tokens[index + 2] if index + 2 < len(tokens) else None
        rgb = text_to_rgb(tokens[index + 1], end)
        if overwrite:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = _next_line(lines, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if color == -1 else color & _U32)
        rows.append(row)
    pixels = np.array(rows, dtype=np.uint32).reshape(height, width)
    return XpmImage(width=width, height=height, pixels=pixels)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM given as its strings: values, colours, then pixel rows."""
    return _parse(iter(lines))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file, taking the quoted strings in order."""
    return _parse(_quoted_strings(strip_comments(text)))


def load_xpm_file(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm_text(text)