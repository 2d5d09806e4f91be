"""String helpers: slicing, joining, trimming, searching and comparing."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    length = min(length, len(s))
    return s[start:start + length]


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing ``first`` counts as empty.

    A missing ``second`` gives ``None``.
    """
    if second is None:
        return None
    return (first or "") + second


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def strnstr(haystack: str, needle: str, n: int) -> int:
    """Return the index of ``needle`` within the first ``n`` characters, or -1.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if n <= 0:
        return -1
    return haystack[:n].find(needle)


def strchr(s: str, c: Char) -> int:
    """Return the index of the first ``c`` in ``s``, or -1.

    Searching for the NUL character gives the length of ``s``.
    """
    char = _char(c)
    if char == "\0":
        return len(s)
    return s.find(char)


def strrchr(s: str, c: Char) -> int:
    """Return the index of the last ``c`` in ``s``, or -1.

    Searching for the NUL character gives the length of ``s``.
    """
    char = _char(c)
    if char == "\0":
        return len(s)
    return s.rfind(char)


def strcmp(first: str | None, second: str | None) -> int:
    """Compare two strings by character codes.

    Gives the code difference at the first mismatch (the end of a string
    counting as code 0), 0 when equal or when either string is missing.
    """
    if first is None or second is None:
        return 0
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Return 0 when the first ``n`` characters are equal, otherwise 1."""
    if n <= 0:
        return 0
    return 0 if first[:n] == second[:n] else 1


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without truncation. When the buffer is already full ``dst`` is returned
    unchanged with ``size + len(src)``.
    """
    if size <= 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to each character."""
    return "".join(func(index, char) for index, char in enumerate(s))