"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile("[ \t]+")


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Position of ``needle`` in ``text``, or -1.

    The search fails outright when ``needle`` is longer than ``limit``.
    Text after a NUL character is not searched.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return _until_nul(text).find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted stretches."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    text = _until_nul(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _BLANKS.split(_until_nul(text)) if word]