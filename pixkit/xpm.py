"""Reading XPM images into 32-bit pixel arrays."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from pixkit.colors import color_by_name
from pixkit.wordtab import find, find_outside_quotes, str_to_wordtab

TRANSPARENT = 0xFF000000

_NAME_BUFFER = 63
_ATOI = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major 32-bit pixels, 0xAARRGGBB."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _as_int32(value: int) -> int:
    value = max(-(2**63), min(value, 2**63 - 1))
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def text_to_rgb(name: str, qualifier: str | None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    ``#hex`` specs are read as hexadecimal. Otherwise ``name`` (joined with
    ``qualifier`` by a space when given) is looked up in the colour table;
    ``none`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        digits = match.group(2) if match else ""
        if not digits:
            return 0
        value = int(digits, 16)
        if match.group(1) == "-":
            value = -value
        return _as_int32(value)
    if qualifier is not None:
        name = f"{name} {qualifier}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The length of the text is kept. A line comment is blanked together with
    the newline that ends it.
    """
    size = len(text)
    while (begin := find_outside_quotes(text, "/*", size)) != -1:
        end = find(text[begin + 2:], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", size)) != -1:
        end = find(text[begin + 2:], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse(lines: Iterator[str]) -> XpmImage:
    words = str_to_wordtab(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    last_wins = cpp <= 2
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour line")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        spec = str_to_wordtab(line[cpp:])
        try:
            index = spec.index("c")
        except ValueError:
            raise XpmError(f"no 'c' key in colour line: {line!r}") from None
        if index + 1 >= len(spec):
            raise XpmError(f"no colour after 'c' in colour line: {line!r}")
        qualifier = spec[index + 2] if index + 2 < len(spec) else None
        rgb = text_to_rgb(spec[index + 1], qualifier)
        key = line[:cpp]
        if last_wins:
            table[key] = rgb
        else:
            table.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(lines, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        for x in range(width):
            colour = table.get(line[x * cpp:(x + 1) * cpp], 0)
            if colour == -1:
                colour = TRANSPARENT
            pixels.append(colour & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Parse XPM data given as its list of strings (header, colours, rows)."""
    return _parse(iter(lines))


def parse_xpm_text(text: str) -> XpmImage:
    """Parse the text of an XPM file."""
    return _parse(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and parse an XPM file."""
    with open(path, encoding="latin-1", newline="") as handle:
        return parse_xpm_text(handle.read())