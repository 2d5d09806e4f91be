# pixkit

pixkit reads XPM images into plain pixel data and looks up X11 colour names.
It also has a set of small string, memory and number helpers that behave like
the classic C routines.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading XPM images

```python
from pixkit.xpm import load_xpm, parse_xpm_lines, XpmError

image = load_xpm("icon.xpm")
print(image.width, image.height)
print(hex(image.pixel(0, 0)))

image = parse_xpm_lines([
    "2 1 2 1",
    "a c #ff0000",
    "b c None",
    "ab",
])
```

`XpmImage` is a frozen dataclass with `width`, `height` and `pixels`. The
`pixels` field is a row-major tuple of 32-bit values. Named and `#hex` colours
come out as `0xRRGGBB`. The transparent colour `None` is stored as
`0xFF000000`. A pixel whose characters are not in the colour table is 0.
`pixel(x, y)` raises `IndexError` outside the image.

A header that is missing, too short or not positive raises `XpmError`. So do
missing lines, a colour line without a `c` key, and rows that are too short.

`parse_xpm_text` takes the text of a whole XPM file. It first blanks out C
comments with `strip_comments`, then parses the double-quoted strings.
`load_xpm` reads a file and passes its text to `parse_xpm_text`.

## Colour names

```python
from pixkit.colors import color_by_name
from pixkit.xpm import text_to_rgb

color_by_name("navy blue")         # 0x000080
color_by_name("none")              # -1
text_to_rgb("#00ff00", None)       # 0x00ff00
text_to_rgb("light", "blue")       # looks up "light blue"
```

`color_by_name` ignores case and raises `KeyError` for an unknown name.
`text_to_rgb` returns 0 for an unknown name.

## Helpers

- `pixkit.wordtab`: `find`, `find_outside_quotes` (skips double-quoted spans) and `str_to_wordtab`, which splits text on runs of spaces and tabs.
- `pixkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower`. Each accepts either a one-character string or an integer code.
- `pixkit.numbers`: `atoi` wraps like a 32-bit integer. `itoa` and `itul` raise `OverflowError` for values outside 32-bit and 64-bit signed range.
- `pixkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream, which defaults to standard output.
- `pixkit.split`: `split_quoted` keeps quoted spans inside their words. `split_plain` is a simple split that drops empty words.
- `pixkit.strings`: `substr`, `strjoin`, `strtrim`, `strnstr`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strlcpy`, `strlcat` and `strmapi`. The search functions return an index, or -1 if there is no match. `strlcpy` and `strlcat` return a `(text, length)` pair.
- `pixkit.memory`: `memset`, `memchr`, `memcmp`, `memcpy`, `memmove`, `bzero` and `calloc` work on `bytearray` buffers. `memmove` copies within a single buffer, using offsets.

## What it does not do

pixkit does not open windows, draw or display images. It does not write XPM
files or read any other image format, and it has no command-line program.