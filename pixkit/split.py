"""Splitting text into words on a single separator character."""

from __future__ import annotations

_QUOTES = frozenset("\"'")
_ESCAPE = "\\"


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def _word_end(text: str, pos: int, sep: str) -> int:
    """Return the index just past the word that starts at ``pos``.

    A quote character opens a span that runs to the matching quote (or to the
    end of the text) and may hold the separator. A quote preceded by a
    backslash is an ordinary character.
    """
    size = len(text)
    while pos < size and text[pos] != sep:
        char = text[pos]
        if char in _QUOTES and not (pos > 0 and text[pos - 1] == _ESCAPE):
            close = text.find(char, pos + 1)
            pos = size if close < 0 else close + 1
        else:
            pos += 1
    return pos


def split_quoted(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, keeping quoted spans inside their words.

    Runs of separators produce no empty words. Quote characters are kept in
    the words they belong to.
    """
    _check_separator(sep)
    words: list[str] = []
    size = len(text)
    pos = 0
    while pos < size:
        while pos < size and text[pos] == sep:
            pos += 1
        if pos >= size:
            break
        end = _word_end(text, pos, sep)
        words.append(text[pos:end])
        pos = end
    return words


def split_plain(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    _check_separator(sep)
    return [word for word in text.split(sep) if word]