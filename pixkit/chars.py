"""ASCII character classification and case conversion.

Each function takes a character either as a one-character string or as an
integer code. Case conversion returns the same kind it was given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: Char) -> bool:
    """Return True for ASCII letters ``a``-``z`` and ``A``-``Z``."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """Return True for ASCII digits ``0``-``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """Return True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Return True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)