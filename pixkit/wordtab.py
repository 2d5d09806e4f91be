"""Substring search and blank-separated word splitting for XPM text."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1.

    The search gives -1 straight away when ``needle`` is longer than ``limit``.
    """
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but ignore matches inside double-quoted spans.

    A double quote toggles the quoted state before the match test at its own
    position, so a match that starts on an opening quote is not reported.
    """
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]